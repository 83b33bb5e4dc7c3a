"""Protocol definitions for boringcache-action's injected collaborators."""

from .runner import CommandRunner
from .state import StateStore

__all__ = [
    "CommandRunner",
    "StateStore",
]
