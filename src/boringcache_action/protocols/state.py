"""Protocol for the cross-phase key/value state store."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StateStore(Protocol):
    """Phase-scoped key/value handoff between the restore and save phases.

    The restore phase writes once at its end; the save phase (a separate
    process) reads once at its start. Values are plain strings.
    """

    def write(self, key: str, value: str) -> None:
        """Persist *value* under *key* for the next phase.

        Parameters:
            key: The state key.
            value: The string value to store.
        """
        ...

    def read(self, key: str) -> str:
        """Return the value stored under *key*, or ``""`` if absent.

        Parameters:
            key: The state key.
        """
        ...
