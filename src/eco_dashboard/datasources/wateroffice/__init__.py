"""Water Survey of Canada hydrometric data source.

Station list from the current-conditions XML service, station readings
(water level, discharge) from the real-time CSV service.

Public API:
  - client: endpoint URLs and request parameters
  - stations: parse_stations, fetch_stations
  - readings: parse_readings, fetch_readings
  - fallback: fallback_stations, generate_fallback_readings, station_info
"""

from eco_dashboard.datasources.wateroffice.fallback import (
    fallback_stations,
    generate_fallback_readings,
    station_info,
)
from eco_dashboard.datasources.wateroffice.readings import fetch_readings, parse_readings
from eco_dashboard.datasources.wateroffice.stations import fetch_stations, parse_stations

__all__ = [
    "fallback_stations",
    "fetch_readings",
    "fetch_stations",
    "generate_fallback_readings",
    "parse_readings",
    "parse_stations",
    "station_info",
]
