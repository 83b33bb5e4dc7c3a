"""State store implementations.

``GitHubStateStore`` writes to the ``$GITHUB_STATE`` file command and reads
back from the ``STATE_<name>`` variables the runner exports to the post
step. ``InMemoryStateStore`` is used for tests and local runs.
"""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ["GitHubStateStore", "InMemoryStateStore", "file_command_entry"]


def file_command_entry(name: str, value: str) -> str:
    """Format one ``name<<delimiter`` block for a runner file command."""
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        msg = "Unexpected input: value contains the file command delimiter"
        raise ValueError(msg)
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class GitHubStateStore:
    """State handoff through the Actions runner. Implements ``StateStore``."""

    __slots__ = ("_environ", "_file_path")

    def __init__(self, file_path: str | Path, environ: Mapping[str, str] | None = None) -> None:
        self._file_path = Path(file_path)
        self._environ = os.environ if environ is None else environ

    def write(self, key: str, value: str) -> None:
        with self._file_path.open("a", encoding="utf-8") as f:
            f.write(file_command_entry(key, value))
        logger.debug("Saved state %s", key)

    def read(self, key: str) -> str:
        return self._environ.get(f"STATE_{key}", "")

    def __repr__(self) -> str:
        return f"GitHubStateStore(file_path={str(self._file_path)!r})"


class InMemoryStateStore:
    """Dict-backed state store. Implements ``StateStore``."""

    __slots__ = ("_data",)

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def read(self, key: str) -> str:
        return self._data.get(key, "")

    def snapshot(self) -> dict[str, str]:
        """A copy of everything written so far."""
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"InMemoryStateStore(entries={len(self._data)})"
