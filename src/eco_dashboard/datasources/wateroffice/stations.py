"""Station list parsing from the current-conditions XML."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import TYPE_CHECKING

from eco_dashboard.datasources.wateroffice import client
from eco_dashboard.errors import MalformedPayload
from eco_dashboard.reference.stations import (
    ALBERTA_STATIONS,
    PROVINCE,
    UNKNOWN_STATION_NAME,
    StationInfo,
)
from eco_dashboard.schemas import StatusLevel, WaterStation
from eco_dashboard.services.http import fetch_text

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def parse_stations(
    xml_text: str,
    known: dict[str, StationInfo] = ALBERTA_STATIONS,
    *,
    now: datetime | None = None,
) -> list[WaterStation]:
    """
    Parse ``<station id="...">`` elements into WaterStation.

    Only stations present in ``known`` are kept; their coordinates come from
    that table. A missing ``<name>`` becomes "Unknown Station".

    Raises:
        MalformedPayload: If ``xml_text`` is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        msg = f"Current-conditions XML parse error: {exc}"
        raise MalformedPayload(msg) from exc

    now = now or datetime.now()
    stations: list[WaterStation] = []
    for element in root.iter("station"):
        station_id = (element.get("id") or "").strip()
        info = known.get(station_id)
        if info is None:
            continue

        name = (element.findtext("name") or "").strip() or UNKNOWN_STATION_NAME
        stations.append(
            WaterStation(
                station_id=station_id,
                name=name,
                province=PROVINCE,
                latitude=info.latitude,
                longitude=info.longitude,
                status=StatusLevel.NORMAL,
                last_updated=now,
            )
        )
    return stations


def fetch_stations(fetch: Callable[..., str] = fetch_text) -> list[WaterStation]:
    """
    Fetch and parse the in-scope stations.

    Raises:
        RemoteUnavailable: When wateroffice can't be reached.
        MalformedPayload: When the XML is unusable or lists no known station.
    """
    stations = parse_stations(client.fetch_current_conditions(fetch=fetch))
    if not stations:
        msg = "Current-conditions XML lists none of the known stations"
        raise MalformedPayload(msg)
    logger.debug("Parsed %d in-scope stations", len(stations))
    return stations
