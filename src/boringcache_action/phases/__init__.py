"""Action entry points.

Each phase function raises domain errors; ``run_phase`` turns them into a
failed run on the host, the way the Actions toolkit's ``setFailed`` does.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal, TypeVar

from boringcache_action.config import ActionSettings
from boringcache_action.host.actions import Host
from boringcache_action.protocols.runner import CommandRunner

from .restore import run_restore
from .save import run_save, run_save_only, save_entries

logger = logging.getLogger(__name__)

__all__ = ["run_phase", "run_restore", "run_save", "run_save_only", "save_entries"]

T = TypeVar("T")

Operation = Literal["restore", "save"]


def run_phase(
    operation: Operation,
    phase: Callable[[Host, CommandRunner, ActionSettings], T],
    host: Host,
    cli: CommandRunner,
    settings: ActionSettings,
) -> T | None:
    """Run *phase*, recording any failure on *host* instead of raising."""
    try:
        return phase(host, cli, settings)
    except Exception as exc:
        logger.debug("%s phase failed", operation, exc_info=True)
        host.set_failed(f"Cache {operation} failed: {exc}")
        return None
