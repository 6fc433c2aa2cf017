"""Status ladder thresholds for hydrometric readings.

Each ladder is (high, normal, low): a reading above ``high`` is High, above
``normal`` is Normal, above ``low`` is Low, anything else CriticalLow.
"""

from __future__ import annotations

from typing import NamedTuple


class StatusLadder(NamedTuple):
    """Three descending thresholds."""

    high: float
    normal: float
    low: float


# Water level, metres
WATER_LEVEL_LADDER = StatusLadder(high=3.0, normal=1.5, low=0.5)

# Discharge, cubic metres per second
DISCHARGE_LADDER = StatusLadder(high=200.0, normal=100.0, low=50.0)
