"""
Prefect flow that gathers every dashboard view in one run.

Useful for warming the cache and for checking what the dashboard would show
(including whether any source fell back to synthetic data).

Run locally:
    python -m eco_dashboard.flows.snapshot

Run with Prefect dashboard:
    prefect server start &
    python -m eco_dashboard.flows.snapshot
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from eco_dashboard.analysis.views import summarize_view
from eco_dashboard.app import build_services

if TYPE_CHECKING:
    from eco_dashboard.app import DashboardServices

DEFAULT_REGION = "CA-AB"


@task(name="fetch-recent-observations", cache_policy=NO_CACHE)
def fetch_recent_observations(
    services: DashboardServices, region: str = DEFAULT_REGION, days_back: int = 7
) -> dict[str, Any]:
    """Recent observations for a region, with a top-species summary."""
    view = services.birds.get_recent_observations(region, days_back=days_back)
    return {"view": view.model_dump(mode="json"), "summary": summarize_view(view)}


@task(name="fetch-species", cache_policy=NO_CACHE)
def fetch_species(services: DashboardServices, region: str = DEFAULT_REGION) -> list[dict[str, Any]]:
    """Species catalog for a region."""
    return [entry.model_dump(mode="json") for entry in services.birds.get_species(region)]


@task(name="fetch-routes", cache_policy=NO_CACHE)
def fetch_routes(services: DashboardServices, region: str, species_code: str) -> list[dict[str, Any]]:
    """Migration routes for one species."""
    routes = services.birds.get_migration_routes(region, species_code)
    return [route.model_dump(mode="json") for route in routes]


@task(name="fetch-stations", cache_policy=NO_CACHE)
def fetch_stations(services: DashboardServices) -> dict[str, Any]:
    """In-scope hydrometric stations."""
    return services.water.get_stations().model_dump(mode="json")


@task(name="fetch-station-detail", cache_policy=NO_CACHE)
def fetch_station_detail(services: DashboardServices, station_id: str) -> dict[str, Any]:
    """Readings and status for one station."""
    return services.water.get_station_detail(station_id).model_dump(mode="json")


@flow(name="dashboard-snapshot", log_prints=True)
def snapshot_all(
    region: str = DEFAULT_REGION,
    species_code: str | None = None,
    days_back: int = 7,
) -> dict[str, Any]:
    """
    Fetch every dashboard view.

    Routes are built for ``species_code``, or for the most-counted recent
    species when none is given. All tasks share one set of services (and so
    one cache) built for this run.
    """
    services = build_services()

    print(f"Fetching recent observations for {region} (last {days_back} days)...")
    recent = fetch_recent_observations(services, region, days_back)
    top = recent["summary"]["top_species"]
    print(f"{recent['summary']['total_records']} observations, {len(top)} top species")

    species = fetch_species(services, region)

    route_code = species_code or (top[0]["code"] if top else None)
    routes: list[dict[str, Any]] = []
    if route_code:
        print(f"Building migration routes for {route_code}...")
        routes = fetch_routes(services, region, route_code)

    stations = fetch_stations(services)
    print(f"{stations['total_stations']} stations (fallback: {stations['is_fallback']})")
    details = {
        station["station_id"]: fetch_station_detail(services, station["station_id"])
        for station in stations["stations"]
    }

    return {
        "region": region,
        "recent": recent,
        "species": species,
        "routes": {"species_code": route_code, "routes": routes},
        "stations": stations,
        "station_details": details,
    }


if __name__ == "__main__":
    result = snapshot_all()
    print(f"Snapshot complete: {len(result['station_details'])} station details")
