from __future__ import annotations

import pytest

from viv.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)
from viv.domain.index import Index

A = frozenset({Index(0, 0), Index(1, 0)})
B = frozenset({Index(0, 1)})
C = frozenset({Index(5, 5)})


def test_extinction_detector() -> None:
    detector = ExtinctionDetector()
    assert detector.observe(frozenset()) is True
    assert detector.observe(A) is False


def test_halt_detector_triggers_after_exact_window() -> None:
    detector = HaltDetector(window=3)

    assert detector.observe(A) is False
    assert detector.observe(A) is False
    assert detector.observe(A) is False
    assert detector.observe(A) is True


def test_halt_detector_resets_after_change() -> None:
    detector = HaltDetector(window=2)

    assert detector.observe(A) is False
    assert detector.observe(A) is False
    assert detector.observe(B) is False
    assert detector.observe(B) is False
    assert detector.observe(B) is True


def test_halt_detector_rejects_zero_window() -> None:
    with pytest.raises(ValueError, match="window must be >= 1"):
        HaltDetector(window=0)


def test_short_period_detector_detects_two_cycle() -> None:
    detector = ShortPeriodDetector(max_period=2, history_size=4)
    assert detector.observe(A) is False
    assert detector.observe(B) is False
    assert detector.observe(A) is False
    assert detector.observe(B) is True


def test_short_period_detector_detects_three_cycle() -> None:
    detector = ShortPeriodDetector(max_period=3, history_size=6)
    observed = [detector.observe(s) for s in (A, B, C, A, B, C)]
    assert observed == [False, False, False, False, False, True]


def test_short_period_detector_ignores_still_life() -> None:
    detector = ShortPeriodDetector(max_period=2, history_size=4)
    assert [detector.observe(A) for _ in range(6)] == [False] * 6


def test_short_period_detector_validates_arguments() -> None:
    with pytest.raises(ValueError, match="max_period must be >= 2"):
        ShortPeriodDetector(max_period=1, history_size=4)
    with pytest.raises(ValueError, match="history_size must be >= 2 \\* max_period"):
        ShortPeriodDetector(max_period=3, history_size=5)


def test_termination_reason_values() -> None:
    assert {reason.value for reason in TerminationReason} == {"extinct", "halt", "short_period"}
