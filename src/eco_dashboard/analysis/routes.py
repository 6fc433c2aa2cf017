"""Migration routes: per-species sightings ordered in time.

A route needs movement, so species seen only once produce no route.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from eco_dashboard.schemas import ObservationPoint, RouteView

if TYPE_CHECKING:
    from collections.abc import Iterable

    from eco_dashboard.schemas import ObservationRecord

MIN_ROUTE_POINTS = 2


def build_routes(records: Iterable[ObservationRecord]) -> list[RouteView]:
    """
    Group records by code and build one route per code with 2+ records.

    Points are sorted by timestamp ascending. Routes keep the order in which
    their code first appears in ``records``.

    Returns:
        List of RouteView; empty if no code has at least two records.
    """
    groups: dict[str, list[ObservationRecord]] = {}
    for record in records:
        groups.setdefault(record.code, []).append(record)

    routes: list[RouteView] = []
    for code, group in groups.items():
        if len(group) < MIN_ROUTE_POINTS:
            continue
        ordered = sorted(group, key=lambda r: r.timestamp)
        routes.append(
            RouteView(
                code=code,
                display_name=group[0].display_name,
                points=tuple(
                    ObservationPoint(
                        latitude=r.latitude,
                        longitude=r.longitude,
                        timestamp=r.timestamp,
                        count=r.count,
                        location_name=r.location_name,
                    )
                    for r in ordered
                ),
            )
        )
    return routes
