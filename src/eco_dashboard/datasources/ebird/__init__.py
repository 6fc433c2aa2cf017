"""eBird bird observation data source.

Fetches recent and historic bird sightings for a region from the eBird API
2.0 and normalizes them into ``ObservationRecord``.

Public API:
  - client: endpoint selection, raw JSON fetch
  - observations: RawObservation, parse_observations, fetch_observations
  - fallback: generate_fallback_observations

Geographic focus: Alberta (region ``CA-AB``).
"""

from eco_dashboard.datasources.ebird.client import API_BASE, build_request
from eco_dashboard.datasources.ebird.fallback import generate_fallback_observations
from eco_dashboard.datasources.ebird.observations import (
    RawObservation,
    fetch_observations,
    normalize_observations,
    parse_observations,
)

__all__ = [
    "API_BASE",
    "RawObservation",
    "build_request",
    "fetch_observations",
    "generate_fallback_observations",
    "normalize_observations",
    "parse_observations",
]
