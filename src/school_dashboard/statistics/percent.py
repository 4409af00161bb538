from __future__ import annotations

import math
from fractions import Fraction
from typing import Iterable

from ..core.constants import EXCELLENT_ATTENDANCE, FAIR_ATTENDANCE, GOOD_ATTENDANCE
from ..core.enums import AttendanceBand


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def _clamp(value: int) -> int:
    return min(max(value, 0), 100)


def percentage(part: int, whole: int) -> int:
    """Integer percentage in [0, 100], half-up; 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return _clamp(_round_half_up(Fraction(part * 100, whole)))


def mean_percentage(ratios: Iterable[Fraction]) -> int:
    """Mean of present/total ratios, as an integer percentage."""
    values = list(ratios)
    if not values:
        return 0
    return _clamp(_round_half_up(sum(values, Fraction(0)) * 100 / len(values)))


def mean_of_percentages(values: Iterable[int]) -> int:
    values = list(values)
    if not values:
        return 0
    return _clamp(_round_half_up(Fraction(sum(values), len(values))))


def attendance_band(value: int) -> AttendanceBand:
    if value >= EXCELLENT_ATTENDANCE:
        return AttendanceBand.EXCELLENT
    if value >= GOOD_ATTENDANCE:
        return AttendanceBand.GOOD
    if value >= FAIR_ATTENDANCE:
        return AttendanceBand.FAIR
    return AttendanceBand.POOR
