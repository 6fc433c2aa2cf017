"""Real-time station readings from the wateroffice CSV service.

Expected columns (header line first, always skipped)::

    Date, Time, Parameter, Parameter name, Value, Unit
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import TYPE_CHECKING

from eco_dashboard.datasources.wateroffice import client
from eco_dashboard.errors import MalformedPayload
from eco_dashboard.reference.stations import station_name
from eco_dashboard.schemas import ObservationRecord
from eco_dashboard.services.http import fetch_text

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

MIN_COLUMNS = 6


def _parse_value(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def _parse_timestamp(date_text: str, time_text: str, now: datetime) -> datetime:
    try:
        parsed = datetime.fromisoformat(f"{date_text.strip()} {time_text.strip()}")
    except ValueError:
        return now
    # Offsets are dropped: readings are local wall-clock times
    return parsed.replace(tzinfo=None)


def parse_readings(
    csv_text: str,
    station_id: str,
    *,
    now: datetime | None = None,
) -> list[ObservationRecord]:
    """
    Parse real-time CSV into readings.

    Rows with fewer than six columns are skipped. A row whose value or
    timestamp doesn't parse is kept, with value 0.0 or timestamp ``now``.

    Raises:
        MalformedPayload: If there is no data line after the header.
    """
    lines = [line.rstrip("\r") for line in csv_text.split("\n") if line.strip()]
    if len(lines) < 2:
        msg = f"Real-time CSV for {station_id} has no data rows"
        raise MalformedPayload(msg)

    now = now or datetime.now()
    location = station_name(station_id)
    readings: list[ObservationRecord] = []
    for line in lines[1:]:
        columns = line.split(",")
        if len(columns) < MIN_COLUMNS:
            logger.debug("Skipping short CSV row for %s: %r", station_id, line)
            continue

        parameter_name = columns[3].strip()
        readings.append(
            ObservationRecord(
                source_id=station_id,
                code=columns[2].strip(),
                display_name=parameter_name,
                scientific_name=parameter_name,
                timestamp=_parse_timestamp(columns[0], columns[1], now),
                value=_parse_value(columns[4]),
                unit=columns[5].strip(),
                location_name=location,
                region_id=station_id,
            )
        )
    return readings


def fetch_readings(
    station_id: str,
    *,
    now: datetime | None = None,
    fetch: Callable[..., str] = fetch_text,
) -> list[ObservationRecord]:
    """
    Fetch and parse the last two hours of readings for ``station_id``.

    Raises:
        RemoteUnavailable: When wateroffice can't be reached.
        MalformedPayload: When the CSV has no data rows.
    """
    now = now or datetime.now()
    text = client.fetch_realtime_csv(station_id, now, fetch=fetch)
    return parse_readings(text, station_id, now=now)
