"""Values handed from the restore phase to the post-job save phase."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from .inputs import ActionFlags

if TYPE_CHECKING:
    from boringcache_action.protocols.state import StateStore

ENTRIES = "cache-entries"
ENTRIES_RESTORE = "cache-entries-restore"
WORKSPACE = "cache-workspace"
EXCLUDE = "cache-exclude"
CLI_VERSION = "cli-version"
NO_PLATFORM = "no-platform"
CROSS_OS_ARCHIVE = "enableCrossOsArchive"
FORCE = "force"
VERBOSE = "verbose"


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


class CrossPhaseState(BaseModel):
    """Everything the save phase needs to repeat the restore phase's choices.

    Booleans travel as the literal strings ``"true"`` / ``"false"``.
    """

    entries: str = ""
    entries_restore: str = ""
    workspace: str = ""
    exclude: str = ""
    cli_version: str = ""
    no_platform: bool = False
    enable_cross_os_archive: bool = False
    force: bool = False
    verbose: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def ready(self) -> bool:
        """True when a previous restore phase left something to save."""
        return bool(self.entries and self.workspace)

    @property
    def flags(self) -> ActionFlags:
        return ActionFlags(
            enable_cross_os_archive=self.enable_cross_os_archive,
            no_platform=self.no_platform,
            force=self.force,
            verbose=self.verbose,
            exclude=self.exclude,
        )

    def write_to(self, store: StateStore) -> None:
        store.write(ENTRIES, self.entries)
        store.write(ENTRIES_RESTORE, self.entries_restore)
        store.write(WORKSPACE, self.workspace)
        store.write(EXCLUDE, self.exclude)
        store.write(CLI_VERSION, self.cli_version)
        store.write(NO_PLATFORM, _bool_text(self.no_platform))
        store.write(CROSS_OS_ARCHIVE, _bool_text(self.enable_cross_os_archive))
        store.write(FORCE, _bool_text(self.force))
        store.write(VERBOSE, _bool_text(self.verbose))

    @classmethod
    def read_from(cls, store: StateStore) -> CrossPhaseState:
        return cls(
            entries=store.read(ENTRIES),
            entries_restore=store.read(ENTRIES_RESTORE),
            workspace=store.read(WORKSPACE),
            exclude=store.read(EXCLUDE),
            cli_version=store.read(CLI_VERSION),
            no_platform=store.read(NO_PLATFORM) == "true",
            enable_cross_os_archive=store.read(CROSS_OS_ARCHIVE) == "true",
            force=store.read(FORCE) == "true",
            verbose=store.read(VERBOSE) == "true",
        )
