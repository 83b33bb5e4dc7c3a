"""Action input models.

``ActionInputs`` is the raw, untyped-by-shape view of everything the host
hands us. It is resolved once, at the boundary, into either
``NativeInputs`` (workspace + entries) or ``LegacyInputs`` (path + key +
restore-keys). Downstream code branches on ``kind`` only.
"""

from __future__ import annotations

from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field


def split_lines(value: str) -> list[str]:
    """Split a newline-separated input into trimmed, non-empty items."""
    return [line.strip() for line in value.splitlines() if line.strip()]


class ActionFlags(BaseModel):
    """Boolean and pass-through flags shared by every phase."""

    enable_cross_os_archive: bool = False
    no_platform: bool = False
    force: bool = False
    verbose: bool = False
    fail_on_cache_miss: bool = False
    lookup_only: bool = False
    exclude: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def disables_platform(self) -> bool:
        """Cross-OS archives and ``no-platform`` both drop the platform suffix."""
        return self.no_platform or self.enable_cross_os_archive


class ActionInputs(BaseModel):
    """Raw inputs as supplied by the caller, before format reconciliation."""

    workspace: str = ""
    entries: str = ""
    path: str = ""
    key: str = ""
    restore_keys: str = ""
    cli_version: str = ""
    flags: ActionFlags = Field(default_factory=ActionFlags)

    model_config = ConfigDict(frozen=True)

    @property
    def has_native_format(self) -> bool:
        return bool(self.workspace or self.entries)

    @property
    def has_legacy_format(self) -> bool:
        return bool(self.path or self.key)

    @property
    def restore_key_list(self) -> list[str]:
        return split_lines(self.restore_keys)


class NativeInputs(BaseModel):
    """The ``workspace`` + ``entries`` input shape."""

    kind: Literal["native"] = "native"
    workspace: str = ""
    entries: str
    flags: ActionFlags = Field(default_factory=ActionFlags)

    model_config = ConfigDict(frozen=True)


class LegacyInputs(BaseModel):
    """The ``path`` + ``key`` (+ ``restore-keys``) compatibility shape."""

    kind: Literal["legacy"] = "legacy"
    path: str
    key: str
    restore_keys: list[str] = Field(default_factory=list)
    flags: ActionFlags = Field(default_factory=ActionFlags)

    model_config = ConfigDict(frozen=True)

    @property
    def paths(self) -> list[str]:
        return split_lines(self.path)


ResolvedInputs: TypeAlias = NativeInputs | LegacyInputs
