"""Shared fixtures for boringcache-action tests."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator, Sequence

import pytest

from boringcache_action.config import ActionSettings
from boringcache_action.host.actions import Host, input_env_name
from boringcache_action.host.commands import WorkflowCommandHandler
from boringcache_action.host.state import InMemoryStateStore

_ENV_VARS = (
    "BORINGCACHE_WORKSPACE",
    "BORINGCACHE_DEFAULT_WORKSPACE",
    "GITHUB_REPOSITORY",
    "BORINGCACHE_API_TOKEN",
    "BORINGCACHE_CLI",
    "BORINGCACHE_CLI_VERSION",
    "GITHUB_STATE",
    "GITHUB_OUTPUT",
)


class FakeCLI:
    """Records CLI invocations and answers with scripted exit codes.

    Satisfies the CommandRunner protocol without spawning processes.
    ``exit_codes`` is consumed one per ``run`` call; once exhausted,
    ``default_code`` is returned. ``decide``, when given, overrides both.
    """

    def __init__(
        self,
        exit_codes: Sequence[int] = (),
        default_code: int = 0,
        decide: Callable[[list[str]], int] | None = None,
    ) -> None:
        self.calls: list[list[str]] = []
        self.ensured: list[str] = []
        self._codes = list(exit_codes)
        self._default = default_code
        self._decide = decide

    def ensure(self, version: str = "") -> None:
        self.ensured.append(version)

    def run(self, args: Sequence[str], *, silent: bool = False) -> int:
        call = list(args)
        self.calls.append(call)
        if self._decide is not None:
            return self._decide(call)
        if self._codes:
            return self._codes.pop(0)
        return self._default

    def calls_for(self, command: str) -> list[list[str]]:
        return [c for c in self.calls if c and c[0] == command]


def make_host(
    inputs: dict[str, str | bool] | None = None,
    state: dict[str, str] | None = None,
) -> Host:
    """Build a Host over a synthetic environment of ``INPUT_*`` variables."""
    environ: dict[str, str] = {}
    for name, value in (inputs or {}).items():
        if isinstance(value, bool):
            value = "true" if value else "false"
        environ[input_env_name(name)] = value
    return Host(environ=environ, state=InMemoryStateStore(state), stream=io.StringIO())


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip workspace and token variables so tests see a known environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> ActionSettings:
    return ActionSettings()


@pytest.fixture
def fake_cli() -> FakeCLI:
    return FakeCLI()


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so caplog keeps seeing package records."""
    yield
    package_logger = logging.getLogger("boringcache_action")
    for handler in list(package_logger.handlers):
        if isinstance(handler, WorkflowCommandHandler):
            package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
