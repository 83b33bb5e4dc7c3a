"""Parse and render the compact cache entry mini-language.

Grammar, one segment per comma::

    tag:path
    tag:restore_path=>save_path

The first ``:`` separates the tag from the path spec, so paths may contain
further colons (``C:\\cache`` on Windows). The first ``=>`` in the path spec
splits restore and save paths.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import ValidationError

from boringcache_action.exceptions import InvalidEntryFormatError
from boringcache_action.models.entry import CacheEntry, EntrySide
from boringcache_action.paths import resolve_path

__all__ = ["entries_for_key", "format_entries", "parse_entries", "parse_entry"]

logger = logging.getLogger(__name__)

_EXPECTED = "Expected format: tag:path or tag:restore_path=>save_path"
_REDIRECT = "=>"


def parse_entry(segment: str, *, resolve_paths: bool = True) -> CacheEntry:
    """Parse a single, already-trimmed entry segment.

    Raises:
        InvalidEntryFormatError: If the segment has no ``:``, an empty tag,
            or an ``=>`` with an empty side.
    """
    tag, sep, path_spec = segment.partition(":")
    if not sep:
        msg = f"Invalid entry format: {segment}. {_EXPECTED}"
        raise InvalidEntryFormatError(msg, entry=segment)

    tag = tag.strip()
    if not tag:
        msg = f"Invalid entry format: {segment}. Tag cannot be empty. {_EXPECTED}"
        raise InvalidEntryFormatError(msg, entry=segment)

    path_spec = path_spec.strip()
    restore_input = save_input = path_spec
    if _REDIRECT in path_spec:
        restore_part, _, save_part = path_spec.partition(_REDIRECT)
        restore_input, save_input = restore_part.strip(), save_part.strip()
        if not restore_input or not save_input:
            msg = (
                f"Invalid entry format: {segment}. Expected restore and save paths "
                f"when using => syntax. {_EXPECTED}"
            )
            raise InvalidEntryFormatError(msg, entry=segment)

    if resolve_paths:
        restore_input = resolve_path(restore_input)
        save_input = resolve_path(save_input)

    try:
        return CacheEntry(tag=tag, restore_path=restore_input, save_path=save_input)
    except ValidationError as exc:
        msg = f"Invalid entry format: {segment}. {exc.errors()[0]['msg']}"
        raise InvalidEntryFormatError(msg, entry=segment) from exc


def parse_entries(
    spec: str,
    mode: EntrySide = "restore",
    *,
    resolve_paths: bool = True,
) -> list[CacheEntry]:
    """Parse a comma-separated entry list, preserving input order.

    An empty or blank *spec* yields an empty list. *mode* does not change
    the grammar; it is recorded in debug logs only.
    """
    segments = [s.strip() for s in spec.split(",")]
    entries = [parse_entry(s, resolve_paths=resolve_paths) for s in segments if s]
    logger.debug("Parsed %d %s entries", len(entries), mode)
    return entries


def format_entries(entries: Iterable[CacheEntry], side: EntrySide) -> str:
    """Render entries back into a CLI entry string for one side."""
    return ",".join(entry.render(side) for entry in entries)


def entries_for_key(key: str, entries: Iterable[CacheEntry]) -> str:
    """Render every entry's restore path under a single *key* used as tag."""
    return ",".join(f"{key}:{entry.restore_path}" for entry in entries)
