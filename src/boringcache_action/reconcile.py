"""Reconcile the native and legacy input formats.

Callers may supply ``workspace`` + ``entries`` (native) or ``path`` + ``key``
(legacy, mirroring the older cache action's interface). ``resolve_inputs``
validates the combination once and returns a ``NativeInputs`` or
``LegacyInputs`` so later stages never re-check which shape is in play.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from boringcache_action.entries import format_entries
from boringcache_action.exceptions import MissingInputError
from boringcache_action.models.entry import CacheEntry, EntrySide
from boringcache_action.models.inputs import (
    ActionInputs,
    LegacyInputs,
    NativeInputs,
    ResolvedInputs,
)
from boringcache_action.paths import resolve_path
from boringcache_action.platform import platform_suffix

__all__ = [
    "convert_legacy_to_entries",
    "legacy_entries",
    "resolve_inputs",
    "validate_inputs",
]

logger = logging.getLogger(__name__)


def validate_inputs(inputs: ActionInputs) -> None:
    """Check that exactly one usable input format is present.

    Raises:
        MissingInputError: When neither format is given, a required field of
            the chosen format is empty, or ``workspace`` lacks a ``/``.
    """
    native = inputs.has_native_format
    legacy = inputs.has_legacy_format

    if not native and not legacy:
        msg = "Either (workspace + entries) or (path + key) inputs are required"
        raise MissingInputError(msg)

    if native and legacy:
        logger.warning(
            "Both native format (workspace/entries) and legacy format (path/key) "
            "provided. Using native format."
        )

    if native and not inputs.entries:
        msg = 'Input "entries" is required when using native format'
        raise MissingInputError(msg)

    if legacy and not native:
        if not inputs.path:
            msg = 'Input "path" is required when using legacy format'
            raise MissingInputError(msg)
        if not inputs.key:
            msg = 'Input "key" is required when using legacy format'
            raise MissingInputError(msg)

    if inputs.workspace and "/" not in inputs.workspace:
        msg = 'Workspace must be in format "namespace/workspace" (e.g., "my-org/my-project")'
        raise MissingInputError(msg)


def resolve_inputs(inputs: ActionInputs) -> ResolvedInputs:
    """Validate *inputs* and collapse them into the authoritative shape."""
    validate_inputs(inputs)
    if inputs.has_native_format:
        return NativeInputs(
            workspace=inputs.workspace, entries=inputs.entries, flags=inputs.flags
        )
    return LegacyInputs(
        path=inputs.path,
        key=inputs.key,
        restore_keys=inputs.restore_key_list,
        flags=inputs.flags,
    )


def legacy_entries(inputs: LegacyInputs, full_key: str) -> list[CacheEntry]:
    """One entry per legacy path, every one tagged with *full_key*.

    The entries are built directly, so a key containing ``:`` or ``,``
    survives intact.

    Raises:
        MissingInputError: If ``path`` or ``key`` is empty, or ``path``
            holds no paths.
    """
    if not inputs.path or not inputs.key:
        msg = "Legacy format requires both path and key inputs"
        raise MissingInputError(msg)

    try:
        entries = [CacheEntry(tag=full_key, restore_path=resolve_path(p)) for p in inputs.paths]
    except ValidationError as exc:
        msg = f"Invalid legacy cache key {full_key!r}: {exc.errors()[0]['msg']}"
        raise MissingInputError(msg) from exc
    if not entries:
        msg = 'Input "path" did not contain any paths'
        raise MissingInputError(msg)
    return entries


def convert_legacy_to_entries(inputs: LegacyInputs, mode: EntrySide = "restore") -> str:
    """Build a native entry string from legacy ``path`` and ``key``.

    Every path in the newline-separated ``path`` input becomes one
    ``{full_key}:{resolved_path}`` entry, where ``full_key`` is ``key``
    decorated with the platform suffix.

    Raises:
        MissingInputError: If ``path`` or ``key`` is empty.
    """
    flags = inputs.flags
    full_key = inputs.key + platform_suffix(flags.no_platform, flags.enable_cross_os_archive)
    entries = legacy_entries(inputs, full_key)
    logger.debug("Converted legacy %s inputs to %d entries", mode, len(entries))
    return format_entries(entries, "restore")
