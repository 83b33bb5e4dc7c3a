"""The host side of an action run: inputs, outputs, secrets and failure.

``Host`` reads the ``INPUT_*`` variables the runner sets from ``with:``,
writes outputs through the ``$GITHUB_OUTPUT`` file command, and owns the
``StateStore`` used to hand data to the post step.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

from boringcache_action.exceptions import MissingInputError
from boringcache_action.host.commands import format_command
from boringcache_action.host.state import (
    GitHubStateStore,
    InMemoryStateStore,
    file_command_entry,
)
from boringcache_action.models.inputs import ActionFlags, ActionInputs
from boringcache_action.protocols.state import StateStore

logger = logging.getLogger(__name__)

__all__ = ["Host", "input_env_name"]

_TRUE_VALUES = frozenset({"true", "True", "TRUE"})
_FALSE_VALUES = frozenset({"false", "False", "FALSE"})


def input_env_name(name: str) -> str:
    """``restore-keys`` -> ``INPUT_RESTORE-KEYS``."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


class Host:
    """Adapter over the Actions runner environment.

    Parameters:
        environ: Environment to read from. Defaults to ``os.environ``.
        state: State store override. Defaults to ``GitHubStateStore`` when
            ``GITHUB_STATE`` is set, otherwise an in-memory store seeded
            from any ``STATE_*`` variables.
        stream: Where workflow commands such as ``::add-mask::`` go.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        state: StateStore | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._stream = stream
        self.state: StateStore = state if state is not None else self._default_state()
        self.outputs: dict[str, str] = {}
        self.failure: str | None = None
        self._secrets: list[str] = []

    def _default_state(self) -> StateStore:
        state_file = self._environ.get("GITHUB_STATE")
        if state_file:
            return GitHubStateStore(state_file, self._environ)
        logger.debug("GITHUB_STATE is not set; keeping state in memory")
        prefix = "STATE_"
        return InMemoryStateStore(
            {k[len(prefix) :]: v for k, v in self._environ.items() if k.startswith(prefix)}
        )

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def get_input(self, name: str, *, required: bool = False) -> str:
        value = self._environ.get(input_env_name(name), "").strip()
        if required and not value:
            msg = f"Input required and not supplied: {name}"
            raise MissingInputError(msg)
        return value

    def get_boolean_input(self, name: str) -> bool:
        """Parse a boolean input using the YAML 1.2 core schema.

        An unset input is ``False``.
        """
        value = self.get_input(name)
        if not value or value in _FALSE_VALUES:
            return False
        if value in _TRUE_VALUES:
            return True
        msg = (
            f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
            "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
        )
        raise MissingInputError(msg)

    def read_inputs(self) -> ActionInputs:
        """Collect every action input into an ``ActionInputs``."""
        flags = ActionFlags(
            enable_cross_os_archive=self.get_boolean_input("enableCrossOsArchive"),
            no_platform=self.get_boolean_input("no-platform"),
            force=self.get_boolean_input("force"),
            verbose=self.get_boolean_input("verbose"),
            fail_on_cache_miss=self.get_boolean_input("fail-on-cache-miss"),
            lookup_only=self.get_boolean_input("lookup-only"),
            exclude=self.get_input("exclude"),
        )
        return ActionInputs(
            workspace=self.get_input("workspace"),
            entries=self.get_input("entries"),
            path=self.get_input("path"),
            key=self.get_input("key"),
            restore_keys=self.get_input("restore-keys"),
            cli_version=self.get_input("cli-version"),
            flags=flags,
        )

    # ------------------------------------------------------------------
    # Outputs, secrets, failure
    # ------------------------------------------------------------------

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        output_file = self._environ.get("GITHUB_OUTPUT")
        if output_file:
            with Path(output_file).open("a", encoding="utf-8") as f:
                f.write(file_command_entry(name, value))

    def set_secret(self, value: str) -> None:
        """Register *value* for masking in runner logs."""
        if not value:
            return
        self._secrets.append(value)
        print(format_command("add-mask", value), file=self._stream or sys.stdout)

    def redact(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, "***")
        return text

    def set_failed(self, message: str) -> None:
        """Mark the run failed; the process should exit with ``exit_code``."""
        self.failure = self.redact(message)
        logger.error(self.failure)

    @property
    def failed(self) -> bool:
        return self.failure is not None

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
