"""Derived views built from normalized records.

Each module turns a batch of ``ObservationRecord`` into something the
dashboard shows directly.

Dependency rule: analysis/ imports schemas and reference data only.
It never fetches data, never touches the cache.

Modules:
  - catalog: records -> deduplicated species/parameter catalog
  - filters: inclusive date-range filtering
  - routes: records -> per-species time-ordered migration routes
  - status: numeric reading + threshold ladder -> StatusLevel
  - views: records -> ObservationSetView / StationDetailView

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function over records.
2. Rules: no I/O, no HTTP, no Prefect decorators.
3. Call it from the domain service (``services/birds.py``, ``services/water.py``).
4. Re-export in ``__init__.py`` and add tests in ``tests/test_{name}.py``.
"""

from eco_dashboard.analysis.catalog import build_catalog
from eco_dashboard.analysis.filters import filter_by_date
from eco_dashboard.analysis.routes import build_routes
from eco_dashboard.analysis.status import classify, classify_discharge, classify_water_level
from eco_dashboard.analysis.views import (
    build_observation_view,
    build_station_detail,
    latest_value,
    summarize_view,
)

__all__ = [
    "build_catalog",
    "build_observation_view",
    "build_routes",
    "build_station_detail",
    "classify",
    "classify_discharge",
    "classify_water_level",
    "filter_by_date",
    "latest_value",
    "summarize_view",
]
