"""Save phase: save existing entry paths through the CLI.

The post-job ``save`` entry point prefers what the restore phase left in
the state store and falls back to reading inputs itself. ``save-only``
always reads inputs and saves each entry with its own CLI call, so one
failing path does not sink the rest.
"""

from __future__ import annotations

import logging
import os

from boringcache_action.config import ActionSettings, resolve_config, select_workspace
from boringcache_action.entries import format_entries, parse_entries
from boringcache_action.flags import save_args
from boringcache_action.host.actions import Host
from boringcache_action.models.entry import CacheEntry
from boringcache_action.models.inputs import ActionFlags
from boringcache_action.models.results import SaveReport
from boringcache_action.models.state import CrossPhaseState
from boringcache_action.protocols.runner import CommandRunner
from boringcache_action.reconcile import legacy_entries, resolve_inputs

logger = logging.getLogger(__name__)

__all__ = ["run_save", "run_save_only", "save_entries"]


def save_entries(
    cli: CommandRunner,
    workspace: str,
    entries: str | list[CacheEntry],
    flags: ActionFlags,
    *,
    per_entry: bool = False,
) -> SaveReport:
    """Save every entry whose save path exists.

    *entries* is an entry string (parsed with paths resolved) or entries
    that are already built. Missing paths are reported as a warning and
    skipped. All present entries go in a single CLI call unless
    *per_entry* is set, in which case each gets its own call and the
    report records which ones failed. A non-zero CLI exit is a warning,
    not an error.
    """
    if isinstance(entries, str):
        entries = parse_entries(entries, "save")
    present = [e for e in entries if os.path.exists(e.save_path)]
    missing = [e.save_path for e in entries if not os.path.exists(e.save_path)]

    for entry in present:
        logger.debug("Path exists for save: %s", entry.save_path)
    if missing:
        logger.warning("Some cache paths do not exist: %s", ", ".join(missing))

    if not present:
        logger.warning("No valid cache paths found, skipping save")
        return SaveReport(missing=missing, skipped=True)

    logger.info("Saving cache entries: %s", format_entries(present, "save"))
    if per_entry:
        saved: list[str] = []
        failed: list[str] = []
        for entry in present:
            code = cli.run(save_args(workspace, entry.render("save"), flags))
            if code == 0:
                logger.info("Saved: %s", entry.save_path)
                saved.append(entry.save_path)
            else:
                logger.warning("Failed to save: %s (exit code %d)", entry.save_path, code)
                failed.append(entry.save_path)
        report = SaveReport(saved=saved, missing=missing, failed=failed)
    else:
        code = cli.run(save_args(workspace, format_entries(present, "save"), flags))
        paths = [e.save_path for e in present]
        if code != 0:
            logger.warning("Failed to save cache entries (exit code %d)", code)
            return SaveReport(missing=missing, failed=paths)
        report = SaveReport(saved=paths, missing=missing)

    if report.ok:
        logger.info("Successfully saved %d cache entries", len(report.saved))
    elif report.saved:
        logger.warning("Saved %d of %d cache entries", len(report.saved), len(present))
    return report


def _save_from_inputs(
    host: Host, cli: CommandRunner, settings: ActionSettings, *, per_entry: bool
) -> SaveReport:
    inputs = host.read_inputs()
    resolved = resolve_inputs(inputs)
    flags = resolved.flags
    cli.ensure(inputs.cli_version or settings.boringcache_cli_version)

    if resolved.kind == "native":
        workspace = select_workspace(resolved.workspace, settings)
        return save_entries(cli, workspace, resolved.entries, flags, per_entry=per_entry)

    config = resolve_config(
        resolved.key,
        flags.enable_cross_os_archive,
        flags.no_platform,
        settings=settings,
    )
    entries = legacy_entries(resolved, config.full_key)
    return save_entries(cli, config.workspace, entries, flags, per_entry=per_entry)


def run_save_only(host: Host, cli: CommandRunner, settings: ActionSettings) -> SaveReport:
    """Save using this step's own inputs, one CLI call per entry."""
    return _save_from_inputs(host, cli, settings, per_entry=True)


def run_save(host: Host, cli: CommandRunner, settings: ActionSettings) -> SaveReport:
    """Post-job save, driven by state from the restore phase when present."""
    state = CrossPhaseState.read_from(host.state)
    if not state.ready:
        logger.debug("No restore state found; saving from inputs")
        return _save_from_inputs(host, cli, settings, per_entry=False)

    cli.ensure(state.cli_version or settings.boringcache_cli_version)
    return save_entries(cli, state.workspace, state.entries, state.flags)
