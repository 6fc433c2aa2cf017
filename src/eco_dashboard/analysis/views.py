"""Assemble response views from normalized records."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from eco_dashboard.analysis.catalog import build_catalog
from eco_dashboard.analysis.status import classify_discharge, classify_water_level
from eco_dashboard.reference.stations import DISCHARGE_PARAM, WATER_LEVEL_PARAM
from eco_dashboard.schemas import ObservationSetView, StationDetailView

if TYPE_CHECKING:
    from collections.abc import Iterable

    from eco_dashboard.schemas import ObservationRecord, WaterStation

RECENT_READINGS = 10


def build_observation_view(
    records: Iterable[ObservationRecord],
    region_id: str,
    *,
    start: datetime | None = None,
    end: datetime | None = None,
    is_fallback: bool = False,
    now: datetime | None = None,
) -> ObservationSetView:
    """
    Build an observation-set view: newest records first, plus their catalog.

    Totals and time bounds are computed from the records by the view itself;
    ``start``/``end`` only show through when there are no records.
    """
    ordered = sorted(records, key=lambda r: r.timestamp, reverse=True)
    return ObservationSetView(
        region_id=region_id,
        records=tuple(ordered),
        catalog=tuple(build_catalog(ordered)),
        query_start=start,
        query_end=end,
        last_updated=now or datetime.now(),
        is_fallback=is_fallback,
    )


def latest_value(readings: Iterable[ObservationRecord], code: str) -> float:
    """Value of the most recent reading for ``code``, or 0.0 if there is none.

    On equal timestamps the reading that comes later in the input wins.
    """
    best: ObservationRecord | None = None
    for reading in readings:
        if reading.code != code:
            continue
        if best is None or reading.timestamp >= best.timestamp:
            best = reading
    return best.value if best is not None else 0.0


def build_station_detail(
    station: WaterStation,
    readings: Iterable[ObservationRecord],
    *,
    is_fallback: bool = False,
) -> StationDetailView:
    """Current level/discharge with their status, plus the ten newest readings."""
    readings = list(readings)
    level = latest_value(readings, WATER_LEVEL_PARAM)
    discharge = latest_value(readings, DISCHARGE_PARAM)
    newest = sorted(readings, key=lambda r: r.timestamp, reverse=True)[:RECENT_READINGS]
    return StationDetailView(
        station=station,
        readings=tuple(newest),
        current_water_level=level,
        current_discharge=discharge,
        water_level_status=classify_water_level(level),
        discharge_status=classify_discharge(discharge),
        is_fallback=is_fallback,
    )


def summarize_view(view: ObservationSetView, top_n: int = 10) -> dict[str, Any]:
    """
    Create a summary of an observation view for reporting.

    Returns dict with totals and the most-counted species.
    """
    if view.is_empty:
        return {"total_records": 0, "total_species": 0, "top_species": []}

    counts: dict[str, int] = {}
    for record in view.records:
        counts[record.code] = counts.get(record.code, 0) + record.count
    names = {entry.code: entry.display_name for entry in view.catalog}

    top = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:top_n]
    return {
        "total_records": view.total_records,
        "total_species": view.total_codes,
        "top_species": [
            {"code": code, "name": names.get(code, code), "count": count} for code, count in top
        ],
    }
