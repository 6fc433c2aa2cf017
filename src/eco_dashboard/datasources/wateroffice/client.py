"""Water Survey of Canada (wateroffice.ec.gc.ca) endpoints and request building.

  - Current conditions: XML list of every reporting station
  - Real-time data: CSV readings for given stations/parameters/time window
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from eco_dashboard.reference.stations import DISCHARGE_PARAM, WATER_LEVEL_PARAM
from eco_dashboard.services.http import fetch_text

if TYPE_CHECKING:
    from collections.abc import Callable

CURRENT_CONDITIONS_URL = "https://wateroffice.ec.gc.ca/services/current_conditions/xml/inline"
REAL_TIME_DATA_URL = "https://wateroffice.ec.gc.ca/services/real_time_data/csv/inline"

# Station detail covers the last two hours of readings
REALTIME_WINDOW = timedelta(hours=2)

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def realtime_params(station_id: str, now: datetime) -> dict[str, Any]:
    """Query parameters for water level + discharge over ``REALTIME_WINDOW``."""
    return {
        "stations[]": [station_id],
        "parameters[]": [WATER_LEVEL_PARAM, DISCHARGE_PARAM],
        "start_date": (now - REALTIME_WINDOW).strftime(_TIME_FORMAT),
        "end_date": now.strftime(_TIME_FORMAT),
    }


def fetch_current_conditions(fetch: Callable[..., str] = fetch_text) -> str:
    """GET the current-conditions XML document."""
    return fetch(CURRENT_CONDITIONS_URL, params={"lang": "en"})


def fetch_realtime_csv(
    station_id: str,
    now: datetime | None = None,
    fetch: Callable[..., str] = fetch_text,
) -> str:
    """GET recent real-time readings for one station as CSV text."""
    return fetch(REAL_TIME_DATA_URL, params=realtime_params(station_id, now or datetime.now()))
