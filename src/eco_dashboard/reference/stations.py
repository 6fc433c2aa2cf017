"""Hydrometric stations in scope for the dashboard.

The coordinate table is the authority on which stations are served: XML
station entries with ids not listed here are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StationInfo:
    """Known station name and approximate coordinates."""

    name: str
    latitude: float
    longitude: float


ALBERTA_STATIONS: dict[str, StationInfo] = {
    "07EA004": StationInfo("Athabasca River at Athabasca", 53.917, -118.885),
    "07BE001": StationInfo("Red Deer River at Red Deer", 52.283, -113.785),
    "07DA001": StationInfo("Bow River at Calgary", 51.045, -114.058),
    "07ED001": StationInfo("North Saskatchewan River at Edmonton", 53.200, -117.567),
    "07AE001": StationInfo("Oldman River at Lethbridge", 49.685, -112.835),
    "07BB004": StationInfo("Battle River near Gadsby", 52.825, -113.285),
}

PROVINCE = "Alberta"

# Name used when a station has no name in the payload.
UNKNOWN_STATION_NAME = "Unknown Station"

# wateroffice real-time parameter codes
WATER_LEVEL_PARAM = "46"
DISCHARGE_PARAM = "47"


def station_name(station_id: str) -> str:
    """Known name for a station, or a generic label for unknown ids."""
    info = ALBERTA_STATIONS.get(station_id)
    return info.name if info is not None else f"Station {station_id}"
