"""Date-range filtering."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from eco_dashboard.schemas import ObservationRecord


def filter_by_date(
    records: Iterable[ObservationRecord],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[ObservationRecord]:
    """Keep records with ``start <= timestamp <= end``. Either bound may be None."""
    kept: list[ObservationRecord] = []
    for record in records:
        if start is not None and record.timestamp < start:
            continue
        if end is not None and record.timestamp > end:
            continue
        kept.append(record)
    return kept
