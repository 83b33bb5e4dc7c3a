"""Tests for boringcache_action.entries.

Covers the ``tag:path`` / ``tag:restore=>save`` grammar, comma-separated
lists, error reporting for malformed segments, and rendering back into CLI
entry strings.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from boringcache_action.entries import (
    entries_for_key,
    format_entries,
    parse_entries,
    parse_entry,
)
from boringcache_action.exceptions import InvalidEntryFormatError
from boringcache_action.models.entry import CacheEntry

# ---------------------------------------------------------------------------
# Single segments
# ---------------------------------------------------------------------------


class TestParseSingleEntry:
    """One ``tag:path`` segment."""

    def test_plain_entry_uses_same_path_for_both_sides(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        [entry] = parse_entries("deps:node_modules")
        assert entry.tag == "deps"
        assert entry.restore_path == entry.save_path
        assert entry.restore_path == os.path.join(os.getcwd(), "node_modules")

    def test_redirect_splits_restore_and_save(self) -> None:
        [entry] = parse_entries("build:/tmp/in=>/tmp/out")
        assert entry.restore_path == "/tmp/in"
        assert entry.save_path == "/tmp/out"
        assert entry.redirected

    def test_only_first_colon_separates_tag(self) -> None:
        [entry] = parse_entries("win:C:/cache/dir", resolve_paths=False)
        assert entry.tag == "win"
        assert entry.restore_path == "C:/cache/dir"

    def test_only_first_redirect_splits(self) -> None:
        [entry] = parse_entries("t:a=>b=>c", resolve_paths=False)
        assert entry.restore_path == "a"
        assert entry.save_path == "b=>c"

    def test_whitespace_is_trimmed(self) -> None:
        [entry] = parse_entries("  deps :  /a  =>  /b  ")
        assert entry.tag == "deps"
        assert entry.restore_path == "/a"
        assert entry.save_path == "/b"

    def test_no_resolve_keeps_relative_paths(self) -> None:
        [entry] = parse_entries("deps:node_modules", resolve_paths=False)
        assert entry.restore_path == "node_modules"
        assert entry.save_path == "node_modules"

    def test_home_relative_paths_resolve(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        [entry] = parse_entries("npm:~/.npm=>~/.npm-save")
        assert entry.restore_path == os.path.join(str(tmp_path), ".npm")
        assert entry.save_path == os.path.join(str(tmp_path), ".npm-save")

    def test_parse_entry_directly(self) -> None:
        entry = parse_entry("k:/p", resolve_paths=False)
        assert entry == CacheEntry(tag="k", restore_path="/p", save_path="/p")


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


class TestParseEntryList:
    """Comma-separated lists."""

    def test_preserves_input_order(self) -> None:
        entries = parse_entries("a:1,b:2=>3,c:4", resolve_paths=False)
        assert [e.tag for e in entries] == ["a", "b", "c"]
        assert entries[1].restore_path == "2"
        assert entries[1].save_path == "3"

    def test_empty_segments_are_dropped(self) -> None:
        entries = parse_entries(" a:1 ,, ,b:2,", resolve_paths=False)
        assert [e.tag for e in entries] == ["a", "b"]

    @pytest.mark.parametrize("spec", ["", "   ", ",", " , , "])
    def test_empty_spec_yields_no_entries(self, spec: str) -> None:
        assert parse_entries(spec) == []

    def test_mode_does_not_change_grammar(self) -> None:
        restore = parse_entries("a:/x=>/y", "restore")
        save = parse_entries("a:/x=>/y", "save")
        assert restore == save


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestInvalidEntries:
    """Malformed segments raise InvalidEntryFormatError."""

    def test_missing_colon(self) -> None:
        with pytest.raises(InvalidEntryFormatError, match="noColon") as exc_info:
            parse_entries("noColon")
        assert exc_info.value.entry == "noColon"
        assert "tag:path" in str(exc_info.value)
        assert "tag:restore_path=>save_path" in str(exc_info.value)

    @pytest.mark.parametrize("spec", [":path", "  :path"])
    def test_empty_tag(self, spec: str) -> None:
        with pytest.raises(InvalidEntryFormatError, match="Tag cannot be empty"):
            parse_entries(spec)

    @pytest.mark.parametrize("spec", ["t:p1=>", "t:=>p2", "t:=>", "t: => "])
    def test_incomplete_redirect(self, spec: str) -> None:
        with pytest.raises(InvalidEntryFormatError, match="=> syntax"):
            parse_entries(spec)

    def test_one_bad_segment_fails_whole_list(self) -> None:
        with pytest.raises(InvalidEntryFormatError, match="bad"):
            parse_entries("a:1,bad,c:3")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestFormatEntries:
    """Rendering entries back into CLI strings."""

    def test_restore_and_save_sides(self) -> None:
        entries = parse_entries("a:/r=>/s,b:/p", resolve_paths=False)
        assert format_entries(entries, "restore") == "a:/r,b:/p"
        assert format_entries(entries, "save") == "a:/s,b:/p"

    def test_empty(self) -> None:
        assert format_entries([], "save") == ""

    def test_entries_for_key_reuses_restore_paths(self) -> None:
        entries = parse_entries("k:/one,k:/two=>/elsewhere", resolve_paths=False)
        assert entries_for_key("deps-v1", entries) == "deps-v1:/one,deps-v1:/two"
