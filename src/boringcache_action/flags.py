"""Translate action flags into boringcache CLI arguments."""

from __future__ import annotations

from boringcache_action.models.inputs import ActionFlags

__all__ = ["restore_args", "restore_flags", "save_args", "save_flags"]


def restore_flags(flags: ActionFlags) -> list[str]:
    """CLI flags for ``boringcache restore``.

    ``enableCrossOsArchive`` has no CLI equivalent and is mapped onto
    ``--no-platform``.
    """
    args: list[str] = []
    if flags.disables_platform:
        args.append("--no-platform")
    if flags.fail_on_cache_miss:
        args.append("--fail-on-cache-miss")
    if flags.lookup_only:
        args.append("--lookup-only")
    if flags.verbose:
        args.append("--verbose")
    if flags.exclude:
        args.extend(["--exclude", flags.exclude])
    return args


def save_flags(flags: ActionFlags) -> list[str]:
    """CLI flags for ``boringcache save``."""
    args: list[str] = []
    if flags.force:
        args.append("--force")
    if flags.disables_platform:
        args.append("--no-platform")
    if flags.verbose:
        args.append("--verbose")
    if flags.exclude:
        args.extend(["--exclude", flags.exclude])
    return args


def restore_args(workspace: str, entries: str, flags: ActionFlags) -> list[str]:
    return ["restore", workspace, entries, *restore_flags(flags)]


def save_args(workspace: str, entries: str, flags: ActionFlags) -> list[str]:
    return ["save", workspace, entries, *save_flags(flags)]
