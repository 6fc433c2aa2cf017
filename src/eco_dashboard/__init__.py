"""Eco Dashboard - bird sightings and river station readings for a dashboard.

Architecture::

    datasources/   External APIs (eBird JSON, wateroffice XML + CSV) and fallbacks
    cache.py       In-memory view cache with TTL (get-or-compute-and-cache)
    analysis/      Derived views (species catalog, migration routes, status ladders)
    services/      Domain services wiring cache → datasource → analysis
    flows/         Prefect orchestration (snapshot of every dashboard view)
    reference/     Static tables (Alberta birds, birding sites, stations, thresholds)

Data flow: query → cache key → cache hit, or datasource (fallback on failure)
→ analysis → cache write → view.

Extension points (see each package's docstring):
  - New data source:   datasources/__init__.py
  - New derived view:  analysis/__init__.py
"""

__version__ = "0.1.0"

from eco_dashboard.config import Settings
from eco_dashboard.schemas import ObservationQuery, ObservationRecord

__all__ = ["ObservationQuery", "ObservationRecord", "Settings", "__version__"]
