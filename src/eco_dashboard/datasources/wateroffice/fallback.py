"""Synthetic station data for when wateroffice can't be used."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from eco_dashboard.reference.stations import (
    ALBERTA_STATIONS,
    DISCHARGE_PARAM,
    PROVINCE,
    UNKNOWN_STATION_NAME,
    WATER_LEVEL_PARAM,
    station_name,
)
from eco_dashboard.schemas import ObservationRecord, StatusLevel, WaterStation

if TYPE_CHECKING:
    import random

# Ten time steps, six minutes apart (one hour of readings)
STEPS = 10
STEP = timedelta(minutes=6)

# Base value and random spread per parameter
WATER_LEVEL_BASE_M, WATER_LEVEL_SPREAD_M = 2.5, 0.5
DISCHARGE_BASE_M3S, DISCHARGE_SPREAD_M3S = 150.0, 50.0


def station_info(station_id: str, now: datetime | None = None) -> WaterStation:
    """WaterStation for ``station_id`` from the reference table.

    Unknown ids get "Unknown Station" and no coordinates.
    """
    now = now or datetime.now()
    info = ALBERTA_STATIONS.get(station_id)
    if info is None:
        return WaterStation(station_id=station_id, name=UNKNOWN_STATION_NAME, last_updated=now)
    return WaterStation(
        station_id=station_id,
        name=info.name,
        province=PROVINCE,
        latitude=info.latitude,
        longitude=info.longitude,
        status=StatusLevel.NORMAL,
        last_updated=now,
    )


def fallback_stations(now: datetime | None = None) -> list[WaterStation]:
    """Every known station, status Normal."""
    now = now or datetime.now()
    return [station_info(station_id, now) for station_id in ALBERTA_STATIONS]


def generate_fallback_readings(
    station_id: str,
    rng: random.Random,
    *,
    now: datetime | None = None,
) -> list[ObservationRecord]:
    """
    One hour of plausible water level and discharge readings, newest first.

    Args:
        station_id: Station the readings belong to.
        rng: Random source (inject a seeded one for repeatable output).
        now: Timestamp of the newest reading.
    """
    now = now or datetime.now()
    location = station_name(station_id)
    readings: list[ObservationRecord] = []
    for step in range(STEPS):
        timestamp = now - step * STEP
        for code, name, base, spread, unit in (
            (WATER_LEVEL_PARAM, "Water Level", WATER_LEVEL_BASE_M, WATER_LEVEL_SPREAD_M, "m"),
            (DISCHARGE_PARAM, "Discharge", DISCHARGE_BASE_M3S, DISCHARGE_SPREAD_M3S, "m³/s"),
        ):
            readings.append(
                ObservationRecord(
                    source_id=station_id,
                    code=code,
                    display_name=name,
                    scientific_name=name,
                    timestamp=timestamp,
                    value=base + rng.random() * spread,
                    unit=unit,
                    location_name=location,
                    region_id=station_id,
                )
            )
    return readings
