"""Restore phase: restore entries, falling back through restore keys.

``run_restore`` backs both the main ``restore`` entry point, which hands
its entries to the post-job save via the state store, and ``restore-only``,
which does not.
"""

from __future__ import annotations

import logging

from boringcache_action.config import ActionSettings, resolve_config, select_workspace
from boringcache_action.entries import entries_for_key, format_entries, parse_entries
from boringcache_action.exceptions import CacheMissError
from boringcache_action.fallback import resolve_restore
from boringcache_action.flags import restore_args
from boringcache_action.host.actions import Host
from boringcache_action.models.results import RestoreOutcome
from boringcache_action.models.state import CrossPhaseState
from boringcache_action.platform import platform_suffix
from boringcache_action.protocols.runner import CommandRunner
from boringcache_action.reconcile import legacy_entries, resolve_inputs

logger = logging.getLogger(__name__)

__all__ = ["run_restore"]


def run_restore(
    host: Host,
    cli: CommandRunner,
    settings: ActionSettings,
    *,
    save_state: bool = True,
) -> RestoreOutcome | None:
    """Run one restore phase against the host's inputs.

    Returns None when there was nothing to restore.

    Raises:
        MissingInputError: Invalid input combination.
        InvalidEntryFormatError: Malformed ``entries``.
        CacheMissError: Every key missed and ``fail-on-cache-miss`` is set.
            No state is written in that case.
    """
    inputs = host.read_inputs()
    resolved = resolve_inputs(inputs)
    flags = resolved.flags
    cli_version = inputs.cli_version or settings.boringcache_cli_version
    cli.ensure(cli_version)

    if resolved.kind == "native":
        workspace = select_workspace(resolved.workspace, settings)
        parsed = parse_entries(resolved.entries, "restore", resolve_paths=False)
        primary_key = parsed[0].tag if parsed else ""
        suffix = platform_suffix(flags.no_platform, flags.enable_cross_os_archive)
        fallback_keys: list[str] = []
    else:
        config = resolve_config(
            resolved.key,
            flags.enable_cross_os_archive,
            flags.no_platform,
            settings=settings,
        )
        logger.debug("Primary key %s (base key %s)", config.full_key, config.base_key)
        workspace = config.workspace
        parsed = legacy_entries(resolved, config.full_key)
        primary_key = config.full_key
        suffix = config.platform_suffix
        fallback_keys = resolved.restore_keys

    if flags.lookup_only:
        logger.info("Lookup-only mode enabled")

    if not parsed:
        logger.warning("No valid cache entries provided, skipping restore")
        return None

    for entry in parsed:
        if entry.redirected:
            logger.debug(
                "Entry %s restores to %s and saves from %s",
                entry.tag,
                entry.restore_path,
                entry.save_path,
            )

    restore_entries = format_entries(parsed, "restore")
    save_entries = format_entries(parsed, "save")

    def attempt(key: str) -> bool:
        entries = restore_entries if key == primary_key else entries_for_key(key, parsed)
        return cli.run(restore_args(workspace, entries, flags)) == 0

    logger.info("Restoring cache: %s", restore_entries)
    outcome = resolve_restore(primary_key, fallback_keys, attempt, suffix=suffix)

    if not outcome.hit:
        label = primary_key if resolved.kind == "legacy" else "provided entries"
        message = f"Cache restore miss for key {label}"
        if flags.fail_on_cache_miss:
            raise CacheMissError(message, key=primary_key)
        logger.warning(message)

    host.set_output("cache-hit", "true" if outcome.hit else "false")
    host.set_output("cache-primary-key", primary_key)
    host.set_output("cache-matched-key", outcome.matched_key)

    if save_state:
        CrossPhaseState(
            entries=save_entries,
            entries_restore=restore_entries,
            workspace=workspace,
            exclude=flags.exclude,
            cli_version=cli_version,
            no_platform=flags.no_platform,
            enable_cross_os_archive=flags.enable_cross_os_archive,
            force=flags.force,
            verbose=flags.verbose,
        ).write_to(host.state)

    return outcome
