"""
Domain models for the eco dashboard.

Pydantic models for normalized records and the views served to the dashboard.
These define the canonical schema - datasources normalize API responses to
these, and views serialize with ``model_dump(mode="json")``.

Timestamps are naive wall-clock times as reported by the sources (eBird and
wateroffice both report local time without an offset).
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from eco_dashboard.cache import make_cache_key
from eco_dashboard.reference.limits import DEFAULT_MAX_RESULTS, MAX_RESULTS_CAP

# =============================================================================
# Status
# =============================================================================


class StatusLevel(StrEnum):
    """Four-state severity vocabulary shared by every status ladder."""

    HIGH = "High"
    NORMAL = "Normal"
    LOW = "Low"
    CRITICAL_LOW = "CriticalLow"


# =============================================================================
# Queries
# =============================================================================


class ObservationQuery(BaseModel):
    """Bird observation query from the request layer."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    region: str = Field(..., min_length=1, description="eBird region code, e.g. CA-AB")
    species_code: str | None = Field(default=None, description="eBird species code filter")
    start: datetime | None = None
    end: datetime | None = None
    max_results: int = DEFAULT_MAX_RESULTS

    @field_validator("species_code")
    @classmethod
    def _blank_species_is_none(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("start", "end")
    @classmethod
    def _wall_clock(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            return value.replace(tzinfo=None)
        return value

    @field_validator("max_results")
    @classmethod
    def _clamp_max_results(cls, value: int) -> int:
        return max(1, min(value, MAX_RESULTS_CAP))

    @model_validator(mode="after")
    def _check_range(self) -> ObservationQuery:
        if self.start is not None and self.end is not None and self.start > self.end:
            msg = f"start ({self.start}) is after end ({self.end})"
            raise ValueError(msg)
        return self

    def cache_key(self, prefix: str = "BirdObservations") -> str:
        """Deterministic key covering every dimension that changes the result."""
        return make_cache_key(
            prefix,
            self.region,
            self.species_code,
            self.start,
            self.end,
            self.max_results,
        )


# =============================================================================
# Records
# =============================================================================


class ObservationRecord(BaseModel):
    """One remote event, normalized across sources.

    Bird sightings carry a location and a count in ``value``; station readings
    carry a parameter code, a measured ``value`` and ``unit``, and no
    coordinates.
    """

    model_config = ConfigDict(frozen=True)

    source_id: str = Field(default="", description="Observer id or station id")
    code: str = Field(..., description="Species code or parameter code")
    display_name: str = ""
    scientific_name: str = Field(default="", description="Scientific name or parameter name")
    latitude: float | None = None
    longitude: float | None = None
    timestamp: datetime
    value: float = 0.0
    unit: str = ""
    location_name: str = ""
    region_id: str = Field(default="", description="Region code or station id")
    family: str = ""
    order: str = ""
    checklist_id: str = ""
    has_media: bool = False
    approved: bool = False

    @property
    def count(self) -> int:
        """Integer view of ``value`` (individuals seen)."""
        return int(self.value)


class CatalogEntry(BaseModel):
    """Deduplicated species/parameter metadata keyed by code."""

    model_config = ConfigDict(frozen=True)

    code: str
    display_name: str = ""
    scientific_name: str = ""
    family: str = ""
    order: str = ""
    unit: str = ""


# =============================================================================
# Views
# =============================================================================


class ObservationSetView(BaseModel):
    """Ordered records + catalog + summary counts + time bounds."""

    model_config = ConfigDict(frozen=True)

    region_id: str
    records: tuple[ObservationRecord, ...] = ()
    catalog: tuple[CatalogEntry, ...] = ()
    query_start: datetime | None = None
    query_end: datetime | None = None
    last_updated: datetime = Field(default_factory=datetime.now)
    is_fallback: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_records(self) -> int:
        return len(self.records)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_codes(self) -> int:
        return len(self.catalog)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def start(self) -> datetime | None:
        """Earliest record timestamp, or the query bound when there are no records."""
        if not self.records:
            return self.query_start
        return min(r.timestamp for r in self.records)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def end(self) -> datetime | None:
        """Latest record timestamp, or the query bound when there are no records."""
        if not self.records:
            return self.query_end
        return max(r.timestamp for r in self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records


class ObservationPoint(BaseModel):
    """A single stop along a route."""

    model_config = ConfigDict(frozen=True)

    latitude: float | None
    longitude: float | None
    timestamp: datetime
    count: int
    location_name: str = ""


class RouteView(BaseModel):
    """Time-ordered points for one species code (always two or more)."""

    model_config = ConfigDict(frozen=True)

    code: str
    display_name: str = ""
    points: tuple[ObservationPoint, ...] = Field(..., min_length=2)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def first_observed(self) -> datetime:
        return self.points[0].timestamp

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_observed(self) -> datetime:
        return self.points[-1].timestamp

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_count(self) -> int:
        return sum(p.count for p in self.points)


class WaterStation(BaseModel):
    """A hydrometric station in scope for the dashboard."""

    model_config = ConfigDict(frozen=True)

    station_id: str
    name: str
    province: str = "Alberta"
    latitude: float | None = None
    longitude: float | None = None
    status: StatusLevel = StatusLevel.NORMAL
    last_updated: datetime = Field(default_factory=datetime.now)


class StationListView(BaseModel):
    """All in-scope stations."""

    model_config = ConfigDict(frozen=True)

    stations: tuple[WaterStation, ...] = ()
    is_fallback: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_stations(self) -> int:
        return len(self.stations)

    @property
    def is_empty(self) -> bool:
        return not self.stations


class StationDetailView(BaseModel):
    """Recent readings and classified status for one station."""

    model_config = ConfigDict(frozen=True)

    station: WaterStation
    readings: tuple[ObservationRecord, ...] = ()
    current_water_level: float = 0.0
    current_discharge: float = 0.0
    water_level_status: StatusLevel = StatusLevel.NORMAL
    discharge_status: StatusLevel = StatusLevel.NORMAL
    is_fallback: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.readings
