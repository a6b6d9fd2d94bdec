"""Rhythm comparison used as the sign-in credential check."""
from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Final, Protocol

DEFAULT_TOLERANCE_MS: Final[float] = 200


class TimedKey(Protocol):
    key: str
    time: float


def matches(
    submitted: Sequence[TimedKey],
    reference: Sequence[TimedKey],
    tolerance_ms: float = DEFAULT_TOLERANCE_MS,
) -> bool:
    """Return True if ``submitted`` reproduces ``reference`` within tolerance.

    The comparison is positional: lengths must be equal, and at every index the
    keys must be identical and the times at most ``tolerance_ms`` apart
    (inclusive). Two empty sequences match.
    """
    if len(submitted) != len(reference):
        return False

    for attempt, expected in zip(submitted, reference):
        if attempt.key != expected.key:
            return False
        if abs(attempt.time - expected.time) > tolerance_ms:
            return False

    return True


def format_key_presses(key_presses: Sequence[TimedKey]) -> str:
    """Render a rhythm compactly as ``key(time)|key(time)`` for logs."""
    return "|".join(f"{press.key}({math.floor(press.time)})" for press in key_presses)
