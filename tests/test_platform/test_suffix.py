"""Tests for boringcache_action.platform."""

from __future__ import annotations

import re

import pytest

from boringcache_action import platform as plat
from boringcache_action.platform import platform_suffix


class TestPlatformSuffix:
    def test_no_platform_disables(self) -> None:
        assert platform_suffix(True, False) == ""

    def test_cross_os_archive_disables(self) -> None:
        assert platform_suffix(False, True) == ""

    def test_both_flags_disable(self) -> None:
        assert platform_suffix(True, True) == ""

    def test_default_shape(self) -> None:
        assert re.fullmatch(r"-(darwin|linux)-(arm64|amd64)", platform_suffix(False, False))

    def test_deterministic(self) -> None:
        assert platform_suffix(False, False) == platform_suffix(False, False)


class TestHostNormalization:
    @pytest.mark.parametrize(
        ("sys_platform", "expected"),
        [("darwin", "darwin"), ("linux", "linux"), ("win32", "linux"), ("freebsd14", "linux")],
    )
    def test_os(self, monkeypatch: pytest.MonkeyPatch, sys_platform: str, expected: str) -> None:
        monkeypatch.setattr(plat.sys, "platform", sys_platform)
        assert plat.host_os() == expected

    @pytest.mark.parametrize(
        ("machine", "expected"),
        [
            ("arm64", "arm64"),
            ("aarch64", "arm64"),
            ("x86_64", "amd64"),
            ("AMD64", "amd64"),
            ("i686", "amd64"),
        ],
    )
    def test_arch(self, monkeypatch: pytest.MonkeyPatch, machine: str, expected: str) -> None:
        monkeypatch.setattr(plat._platform, "machine", lambda: machine)
        assert plat.host_arch() == expected

    def test_suffix_uses_host_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(plat.sys, "platform", "darwin")
        monkeypatch.setattr(plat._platform, "machine", lambda: "arm64")
        assert platform_suffix(False, False) == "-darwin-arm64"
