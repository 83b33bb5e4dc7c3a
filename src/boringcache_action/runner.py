"""Subprocess wrapper around the boringcache CLI.

Installing the CLI is outside this package: ``ensure`` only verifies the
executable answers ``--version`` and, when an API token is configured,
authenticates it. The token never appears in raised or logged text.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence

from boringcache_action.config import ActionSettings
from boringcache_action.exceptions import ExternalToolError

logger = logging.getLogger(__name__)

__all__ = ["BoringCacheCLI"]

REDACTED = "***"


class BoringCacheCLI:
    """Runs ``boringcache`` subcommands. Implements ``CommandRunner``.

    Parameters:
        executable: Name or path of the CLI binary.
        token: API token used for ``boringcache auth``. Empty disables auth.
        mask: Called with the token so the host can hide it in logs.
    """

    __slots__ = ("_authenticated", "_executable", "_mask", "_token")

    def __init__(
        self,
        executable: str = "boringcache",
        token: str = "",
        mask: Callable[[str], None] | None = None,
    ) -> None:
        self._executable = executable
        self._token = token
        self._mask = mask
        self._authenticated = False

    @classmethod
    def from_settings(
        cls, settings: ActionSettings, mask: Callable[[str], None] | None = None
    ) -> BoringCacheCLI:
        return cls(settings.boringcache_cli, settings.api_token, mask)

    @property
    def executable(self) -> str:
        return self._executable

    def redact(self, text: str) -> str:
        if not self._token:
            return text
        return text.replace(self._token, REDACTED)

    def version(self) -> str | None:
        """Return the ``--version`` output, or None if the CLI cannot be run."""
        try:
            proc = subprocess.run(
                [self._executable, "--version"],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            logger.debug("Could not run %s --version: %s", self._executable, exc)
            return None
        if proc.returncode != 0:
            return None
        return (proc.stdout or "").strip()

    def ensure(self, version: str = "") -> None:
        found = self.version()
        if found is None:
            msg = (
                f"BoringCache CLI '{self._executable}' not found in PATH. "
                "Install it before running this action."
            )
            raise ExternalToolError(msg)
        logger.debug("BoringCache CLI available: %s", found)
        if version and version.lstrip("v") not in found:
            logger.warning("Requested CLI %s but found %s", version, found)
        self.authenticate()

    def authenticate(self) -> bool:
        """Run ``boringcache auth`` once per instance. Failures only warn."""
        if not self._token or self._authenticated:
            return self._authenticated
        if self._mask is not None:
            self._mask(self._token)
        try:
            code = self.run(["auth", "--token", self._token], silent=True)
        except ExternalToolError as exc:
            logger.warning("Authentication failed: %s", exc)
            return False
        if code != 0:
            logger.warning("Authentication failed: exit code %d", code)
            return False
        self._authenticated = True
        logger.debug("BoringCache authenticated")
        return True

    def run(self, args: Sequence[str], *, silent: bool = False) -> int:
        command = [self._executable, *args]
        logger.debug("Running %s", self.redact(" ".join(command)))
        capture = subprocess.PIPE if silent else None
        try:
            proc = subprocess.run(command, stdout=capture, stderr=capture, check=False)
        except OSError as exc:
            msg = f"Failed to run {self._executable}: {self.redact(str(exc))}"
            raise ExternalToolError(msg) from None
        return int(proc.returncode)

    def __repr__(self) -> str:
        token = "set" if self._token else "unset"
        return f"BoringCacheCLI(executable={self._executable!r}, token={token})"
