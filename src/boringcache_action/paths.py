"""Resolve user-supplied cache paths to absolute paths.

Absolute paths pass through untouched, ``~/`` is expanded against the
current user's home directory, and anything else is anchored at the
current working directory. Separator conventions are not reconciled across
platforms: a restore on Linux and a save on Windows will not agree on the
identity of the same logical path.
"""

from __future__ import annotations

import os
from pathlib import Path

from boringcache_action.models.inputs import split_lines

__all__ = ["resolve_path", "resolve_paths"]


def resolve_path(path_input: str) -> str:
    """Return an absolute form of *path_input*.

    An empty (or whitespace-only) input resolves to the current working
    directory.
    """
    trimmed = path_input.strip()
    if os.path.isabs(trimmed):
        return trimmed
    if trimmed.startswith("~/"):
        return os.path.normpath(os.path.join(Path.home(), trimmed[2:]))
    return os.path.normpath(os.path.join(os.getcwd(), trimmed))


def resolve_paths(path_input: str) -> list[str]:
    """Resolve a newline-separated path list, preserving order and dropping blanks."""
    return [resolve_path(p) for p in split_lines(path_input)]
