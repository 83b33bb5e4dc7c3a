"""Restore fallback resolution.

The resolver walks an ordered list of keys (primary first, then restore
keys) and stops at the first one the ``attempt`` capability reports as a
hit. Attempts are strictly sequential. The function itself has no side
effects beyond calling ``attempt``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from boringcache_action.models.results import RestoreOutcome

__all__ = ["RestoreAttempt", "decorate_candidate", "resolve_restore"]

logger = logging.getLogger(__name__)

RestoreAttempt = Callable[[str], bool]
"""Try restoring under one key; return ``True`` on a hit."""


def decorate_candidate(candidate: str, suffix: str) -> str:
    """Append *suffix* unless the candidate already ends with it."""
    if suffix and not candidate.endswith(suffix):
        return f"{candidate}{suffix}"
    return candidate


def resolve_restore(
    primary_key: str,
    fallback_keys: Sequence[str],
    attempt: RestoreAttempt,
    *,
    suffix: str = "",
) -> RestoreOutcome:
    """Try *primary_key*, then each fallback in order, until one hits.

    Parameters:
        primary_key: The fully decorated primary key.
        fallback_keys: Restore-key candidates, possibly undecorated. Each is
            given *suffix* if it does not already end with it.
        attempt: Called once per key, in order, until it returns ``True``.
        suffix: The platform suffix in effect for this run.

    Returns:
        A ``RestoreOutcome`` with the matched key and number of attempts.
    """
    attempts = 1
    if attempt(primary_key):
        logger.info("Cache hit with primary key: %s", primary_key)
        return RestoreOutcome(hit=True, matched_key=primary_key, attempts=attempts)

    for raw in fallback_keys:
        candidate = decorate_candidate(raw, suffix)
        attempts += 1
        if attempt(candidate):
            logger.info("Cache hit with restore key: %s", candidate)
            return RestoreOutcome(hit=True, matched_key=candidate, attempts=attempts)
        logger.debug("Restore key %s missed", candidate)

    return RestoreOutcome(hit=False, attempts=attempts)
