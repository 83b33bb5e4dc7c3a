"""boringcache-action: restore and save CI caches through the boringcache CLI.

Entries:
    CacheEntry, parse_entries, parse_entry, format_entries, entries_for_key

Keys & Configuration:
    ActionSettings, CacheConfig, resolve_config, resolve_workspace,
    select_workspace, platform_suffix, resolve_path, resolve_paths

Inputs:
    ActionInputs, ActionFlags, NativeInputs, LegacyInputs,
    validate_inputs, resolve_inputs, convert_legacy_to_entries, legacy_entries

Restore & Save:
    resolve_restore, RestoreOutcome, SaveReport, CrossPhaseState,
    run_restore, run_save, run_save_only

Protocols (extension points):
    CommandRunner, StateStore

Host:
    Host, GitHubStateStore, InMemoryStateStore, BoringCacheCLI

Exceptions:
    BoringCacheActionError, InvalidEntryFormatError, MissingInputError,
    CacheMissError, ExternalToolError
"""

from importlib.metadata import PackageNotFoundError, version

from boringcache_action.config import (
    ActionSettings,
    resolve_config,
    resolve_workspace,
    select_workspace,
)
from boringcache_action.entries import (
    entries_for_key,
    format_entries,
    parse_entries,
    parse_entry,
)
from boringcache_action.exceptions import (
    BoringCacheActionError,
    CacheMissError,
    ExternalToolError,
    InvalidEntryFormatError,
    MissingInputError,
)
from boringcache_action.fallback import resolve_restore
from boringcache_action.host import GitHubStateStore, Host, InMemoryStateStore
from boringcache_action.models import (
    ActionFlags,
    ActionInputs,
    CacheConfig,
    CacheEntry,
    CrossPhaseState,
    LegacyInputs,
    NativeInputs,
    RestoreOutcome,
    SaveReport,
)
from boringcache_action.paths import resolve_path, resolve_paths
from boringcache_action.phases import run_restore, run_save, run_save_only
from boringcache_action.platform import platform_suffix
from boringcache_action.protocols import CommandRunner, StateStore
from boringcache_action.reconcile import (
    convert_legacy_to_entries,
    legacy_entries,
    resolve_inputs,
    validate_inputs,
)
from boringcache_action.runner import BoringCacheCLI

try:
    __version__ = version("boringcache-action")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "ActionFlags",
    "ActionInputs",
    "ActionSettings",
    "BoringCacheActionError",
    "BoringCacheCLI",
    "CacheConfig",
    "CacheEntry",
    "CacheMissError",
    "CommandRunner",
    "CrossPhaseState",
    "ExternalToolError",
    "GitHubStateStore",
    "Host",
    "InMemoryStateStore",
    "InvalidEntryFormatError",
    "LegacyInputs",
    "MissingInputError",
    "NativeInputs",
    "RestoreOutcome",
    "SaveReport",
    "StateStore",
    "convert_legacy_to_entries",
    "entries_for_key",
    "format_entries",
    "legacy_entries",
    "parse_entries",
    "parse_entry",
    "platform_suffix",
    "resolve_config",
    "resolve_inputs",
    "resolve_path",
    "resolve_paths",
    "resolve_restore",
    "resolve_workspace",
    "run_restore",
    "run_save",
    "run_save_only",
    "select_workspace",
    "validate_inputs",
]
