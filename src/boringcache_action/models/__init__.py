"""Data models for boringcache-action."""

from .entry import CacheConfig, CacheEntry, EntrySide
from .inputs import (
    ActionFlags,
    ActionInputs,
    LegacyInputs,
    NativeInputs,
    ResolvedInputs,
    split_lines,
)
from .results import RestoreOutcome, SaveReport
from .state import CrossPhaseState

__all__ = [
    "ActionFlags",
    "ActionInputs",
    "CacheConfig",
    "CacheEntry",
    "CrossPhaseState",
    "EntrySide",
    "LegacyInputs",
    "NativeInputs",
    "ResolvedInputs",
    "RestoreOutcome",
    "SaveReport",
    "split_lines",
]
