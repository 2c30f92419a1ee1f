from __future__ import annotations

from collections import deque
from collections.abc import Set
from enum import Enum

from viv.domain.index import Index


class TerminationReason(str, Enum):
    """Termination reason labels persisted in run summaries."""

    EXTINCT = "extinct"
    HALT = "halt"
    SHORT_PERIOD = "short_period"


class ExtinctionDetector:
    """Detect an empty population."""

    def observe(self, living: Set[Index]) -> bool:
        return not living


class HaltDetector:
    """Detect N consecutive unchanged generations (still life)."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._last_living: Set[Index] | None = None
        self._unchanged_count = 0

    def observe(self, living: Set[Index]) -> bool:
        """Return True once the live set has remained unchanged for `window` checks."""
        if self._last_living is None:
            self._last_living = living
            return False

        if living == self._last_living:
            self._unchanged_count += 1
        else:
            self._unchanged_count = 0
            self._last_living = living

        return self._unchanged_count >= self.window


class ShortPeriodDetector:
    """Detect oscillators whose period is between 2 and `max_period`.

    Period 1 is a still life and is left to :class:`HaltDetector`.
    """

    def __init__(self, max_period: int, history_size: int) -> None:
        if max_period < 2:
            raise ValueError("max_period must be >= 2")
        if history_size < max_period * 2:
            raise ValueError("history_size must be >= 2 * max_period")
        self.max_period = max_period
        self._history: deque[frozenset[Index]] = deque(maxlen=history_size)

    def observe(self, living: Set[Index]) -> bool:
        """Return True when the last two periods of history repeat exactly."""
        self._history.append(frozenset(living))
        history = list(self._history)
        for period in range(2, self.max_period + 1):
            if len(history) < period * 2:
                continue
            recent = history[-period:]
            previous = history[-2 * period : -period]
            if recent == previous and len(set(recent)) > 1:
                return True
        return False
