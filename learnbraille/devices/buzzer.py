"""Haptic feedback sink."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Buzzer(Protocol):
    """Anything that can play a vibration pattern (off/on durations in ms)."""

    def vibrate(self, pattern: tuple[int, ...]) -> None: ...


def checked_buzz(buzzer: Buzzer | None, pattern: Sequence[int]) -> None:
    """Play *pattern* on *buzzer*. A missing buzzer or an empty pattern is a no-op."""
    if buzzer is None or not pattern:
        return
    logger.debug("Buzz %s", list(pattern))
    buzzer.vibrate(tuple(pattern))
