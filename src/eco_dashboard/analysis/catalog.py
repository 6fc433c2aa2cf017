"""Species/parameter catalog: one entry per code, first occurrence wins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from eco_dashboard.schemas import CatalogEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from eco_dashboard.schemas import ObservationRecord


def build_catalog(records: Iterable[ObservationRecord]) -> list[CatalogEntry]:
    """
    Fold records into a catalog keyed by code.

    Descriptive fields come from the first record seen for each code; later
    duplicates contribute nothing. Entries keep first-appearance order.
    """
    catalog: dict[str, CatalogEntry] = {}
    for record in records:
        if record.code in catalog:
            continue
        catalog[record.code] = CatalogEntry(
            code=record.code,
            display_name=record.display_name,
            scientific_name=record.scientific_name,
            family=record.family,
            order=record.order,
            unit=record.unit,
        )
    return list(catalog.values())
