"""Protocol for invoking the external boringcache CLI."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Runs one CLI invocation at a time and reports its exit code."""

    def ensure(self, version: str = "") -> None:
        """Make sure the CLI is usable before the first ``run``.

        Parameters:
            version: The CLI version the caller asked for, if any.

        Raises:
            ExternalToolError: If the executable cannot be located.
        """
        ...

    def run(self, args: Sequence[str], *, silent: bool = False) -> int:
        """Invoke the CLI with *args* and block until it exits.

        Parameters:
            args: Arguments following the executable name.
            silent: Suppress echoing of the child's output.

        Returns:
            The process exit code. Non-zero codes are returned, not raised.
        """
        ...
