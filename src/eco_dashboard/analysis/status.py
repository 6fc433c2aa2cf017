"""Status classification against a three-threshold ladder."""

from __future__ import annotations

from eco_dashboard.reference.thresholds import DISCHARGE_LADDER, WATER_LEVEL_LADDER, StatusLadder
from eco_dashboard.schemas import StatusLevel


def classify(value: float, ladder: StatusLadder) -> StatusLevel:
    """
    Classify ``value`` by strict descending comparison.

    >>> classify(2.0, WATER_LEVEL_LADDER)
    <StatusLevel.NORMAL: 'Normal'>
    """
    if value > ladder.high:
        return StatusLevel.HIGH
    if value > ladder.normal:
        return StatusLevel.NORMAL
    if value > ladder.low:
        return StatusLevel.LOW
    return StatusLevel.CRITICAL_LOW


def classify_water_level(level_m: float) -> StatusLevel:
    return classify(level_m, WATER_LEVEL_LADDER)


def classify_discharge(discharge_m3s: float) -> StatusLevel:
    return classify(discharge_m3s, DISCHARGE_LADDER)
