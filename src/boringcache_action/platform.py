"""Platform suffix appended to cache keys."""

from __future__ import annotations

import platform as _platform
import sys

__all__ = ["host_arch", "host_os", "platform_suffix"]

_ARM_MACHINES = frozenset({"arm64", "aarch64"})


def host_os() -> str:
    """``darwin`` on macOS, ``linux`` everywhere else."""
    return "darwin" if sys.platform == "darwin" else "linux"


def host_arch() -> str:
    """``arm64`` on ARM 64-bit hosts, ``amd64`` everywhere else."""
    return "arm64" if _platform.machine().lower() in _ARM_MACHINES else "amd64"


def platform_suffix(no_platform: bool, cross_os_archive: bool) -> str:
    """Return ``-{os}-{arch}``, or ``""`` when either flag disables it."""
    if no_platform or cross_os_archive:
        return ""
    return f"-{host_os()}-{host_arch()}"
