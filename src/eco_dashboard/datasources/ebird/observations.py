"""eBird observation parsing and fetching."""

from __future__ import annotations

import json
import logging
import math
from datetime import date, datetime
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from eco_dashboard.analysis.filters import filter_by_date
from eco_dashboard.datasources.ebird import client
from eco_dashboard.errors import MalformedPayload, MalformedRecord
from eco_dashboard.schemas import ObservationRecord
from eco_dashboard.services.http import fetch_text

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from eco_dashboard.schemas import ObservationQuery

logger = logging.getLogger(__name__)

# eBird omits howMany when the observer reported "X" (present, not counted).
DEFAULT_COUNT = 1

# =============================================================================
# Field conversions
# =============================================================================


def _to_text(value: Any) -> str:
    """Strings pass through, numbers are rendered, anything else is ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return ""


def _to_float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _to_count(value: Any) -> int:
    # inf and 1e400 overflow, nan is a ValueError
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_COUNT


def _to_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1")
    return value is True or value == 1


Text = Annotated[str, BeforeValidator(_to_text)]
Float = Annotated[float, BeforeValidator(_to_float)]
Count = Annotated[int, BeforeValidator(_to_count)]
Flag = Annotated[bool, BeforeValidator(_to_flag)]


# =============================================================================
# Raw record
# =============================================================================


class RawObservation(BaseModel):
    """One element of an eBird ``/data/obs`` JSON array, as sent.

    Every field is optional and converted leniently to its default; only
    ``obsDt`` is required, and that is enforced in ``to_record``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    species_code: Text = Field(default="", alias="speciesCode")
    common_name: Text = Field(default="", alias="comName")
    scientific_name: Text = Field(default="", alias="sciName")
    latitude: Float = Field(default=0.0, alias="lat")
    longitude: Float = Field(default=0.0, alias="lng")
    obs_dt: Text = Field(default="", alias="obsDt")
    how_many: Count = Field(default=DEFAULT_COUNT, alias="howMany")
    location_name: Text = Field(default="", alias="locName")
    observer_id: Text = Field(default="", alias="obsId")
    checklist_id: Text = Field(default="", alias="subId")
    family: Text = Field(default="", validation_alias=AliasChoices("family", "familyComName"))
    order: Text = Field(default="", alias="order")
    has_media: Flag = Field(default=False, validation_alias=AliasChoices("hasMedia", "hasRichMedia"))
    approved: Flag = Field(default=False, validation_alias=AliasChoices("approved", "obsValid"))

    def observed_at(self) -> datetime:
        """Parse ``obsDt`` ("YYYY-MM-DD HH:MM" or "YYYY-MM-DD") as wall-clock time.

        An explicit UTC offset is dropped; records hold naive wall-clock times.

        Raises:
            MalformedRecord: If the date is missing or unparsable.
        """
        if not self.obs_dt:
            msg = f"observation {self.checklist_id or '?'} has no obsDt"
            raise MalformedRecord(msg)
        try:
            observed = datetime.fromisoformat(self.obs_dt.strip())
        except ValueError as exc:
            msg = f"observation {self.checklist_id or '?'} has bad obsDt {self.obs_dt!r}"
            raise MalformedRecord(msg) from exc
        return observed.replace(tzinfo=None)

    def to_record(self, region: str) -> ObservationRecord:
        return ObservationRecord(
            source_id=self.observer_id,
            code=self.species_code,
            display_name=self.common_name,
            scientific_name=self.scientific_name,
            latitude=self.latitude,
            longitude=self.longitude,
            timestamp=self.observed_at(),
            value=float(self.how_many),
            location_name=self.location_name,
            region_id=region,
            family=self.family,
            order=self.order,
            checklist_id=self.checklist_id,
            has_media=self.has_media,
            approved=self.approved,
        )


# =============================================================================
# Parsing
# =============================================================================


def normalize_observations(rows: Iterable[Any], region: str) -> list[ObservationRecord]:
    """
    Convert raw eBird rows into records, skipping rows that can't be converted.

    A bad row (not an object, or without a usable ``obsDt``) is logged and
    dropped; the rest of the batch is kept.
    """
    records: list[ObservationRecord] = []
    for index, row in enumerate(rows):
        try:
            records.append(RawObservation.model_validate(row).to_record(region))
        except (ValidationError, MalformedRecord) as exc:
            logger.debug("Skipping eBird row %d: %s", index, exc)
    return records


def parse_observations(text: str, region: str) -> list[ObservationRecord]:
    """
    Parse an eBird JSON array payload.

    Raises:
        MalformedPayload: If ``text`` is not a JSON array.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"eBird payload is not JSON: {exc}"
        raise MalformedPayload(msg) from exc
    if not isinstance(payload, list):
        msg = f"eBird payload is a {type(payload).__name__}, expected a list"
        raise MalformedPayload(msg)
    return normalize_observations(payload, region)


# =============================================================================
# API Fetching
# =============================================================================


def fetch_observations(
    query: ObservationQuery,
    *,
    api_key: str = client.DEFAULT_API_KEY,
    api_base: str = client.API_BASE,
    fetch: Callable[..., str] = fetch_text,
    today: date | None = None,
) -> list[ObservationRecord]:
    """
    Fetch and normalize observations for ``query``.

    Results are post-filtered to the query's species and inclusive date
    range; the historic endpoint ignores both.

    ``today`` anchors the ``back`` window (defaults to the system date).

    Raises:
        RemoteUnavailable: When the API can't be reached.
        MalformedPayload: When the response isn't a JSON array.
    """
    text = client.fetch_observations_text(
        query,
        api_key=api_key,
        api_base=api_base,
        fetch=fetch,
        today=today,
    )
    records = parse_observations(text, query.region)
    if query.species_code:
        records = [r for r in records if r.code == query.species_code]
    return filter_by_date(records, query.start, query.end)
