"""
Command-line interface for the application.

Every data command prints the served view as JSON on stdout. Views built
from synthetic data carry ``"is_fallback": true``.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from eco_dashboard import __version__
from eco_dashboard.app import DashboardServices, build_services
from eco_dashboard.config import get_settings
from eco_dashboard.flows.snapshot import snapshot_all
from eco_dashboard.logger import setup_logging
from eco_dashboard.reference.limits import DEFAULT_MAX_RESULTS
from eco_dashboard.schemas import ObservationQuery


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="eco-dashboard",
        description="Bird observations and hydrometric station data for an environmental dashboard",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    region_help = f"eBird region code (default: {settings.default_region})"

    obs_parser = subparsers.add_parser("observations", help="Bird observations for a region")
    obs_parser.add_argument("--region", default=settings.default_region, help=region_help)
    obs_parser.add_argument("--species", default=None, help="eBird species code filter")
    obs_parser.add_argument(
        "--start", type=datetime.fromisoformat, default=None, help="Start (ISO date)"
    )
    obs_parser.add_argument("--end", type=datetime.fromisoformat, default=None, help="End (ISO date)")
    obs_parser.add_argument(
        "--max-results",
        type=int,
        default=DEFAULT_MAX_RESULTS,
        help=f"Maximum records (default: {DEFAULT_MAX_RESULTS})",
    )

    species_parser = subparsers.add_parser("species", help="Species seen in a region")
    species_parser.add_argument("--region", default=settings.default_region, help=region_help)
    species_parser.add_argument(
        "--start", type=datetime.fromisoformat, default=None, help="Start (ISO date)"
    )
    species_parser.add_argument(
        "--end", type=datetime.fromisoformat, default=None, help="End (ISO date)"
    )

    recent_parser = subparsers.add_parser("recent", help="Recent bird observations")
    recent_parser.add_argument("--region", default=settings.default_region, help=region_help)
    recent_parser.add_argument(
        "--days-back", type=int, default=7, help="Days to look back (default: 7)"
    )
    recent_parser.add_argument(
        "--max-results", type=int, default=100, help="Maximum records (default: 100)"
    )

    routes_parser = subparsers.add_parser("routes", help="Migration routes for a species")
    routes_parser.add_argument("species", help="eBird species code")
    routes_parser.add_argument("--region", default=settings.default_region, help=region_help)
    routes_parser.add_argument(
        "--start", type=datetime.fromisoformat, default=None, help="Start (ISO date)"
    )
    routes_parser.add_argument(
        "--end", type=datetime.fromisoformat, default=None, help="End (ISO date)"
    )

    subparsers.add_parser("stations", help="Hydrometric stations in scope")

    station_parser = subparsers.add_parser("station", help="Readings for one station")
    station_parser.add_argument("station_id", help="Station ID, e.g. 05BH004")

    snapshot_parser = subparsers.add_parser("snapshot", help="Fetch every view (Prefect flow)")
    snapshot_parser.add_argument("--region", default=settings.default_region, help=region_help)
    snapshot_parser.add_argument("--species", default=None, help="Species for routes")

    return parser


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def _no_data(what: str) -> int:
    print(f"No {what} found.", file=sys.stderr)
    return 1


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default region: {settings.default_region}")
    return 0


def cmd_observations(args: argparse.Namespace, services: DashboardServices) -> int:
    """Handle the 'observations' command."""
    try:
        query = ObservationQuery(
            region=args.region,
            species_code=args.species,
            start=args.start,
            end=args.end,
            max_results=args.max_results,
        )
    except ValidationError as e:
        print(f"Invalid query: {e}", file=sys.stderr)
        return 2

    view = services.birds.get_observations(query)
    if view.is_empty:
        return _no_data("observations")
    _print_json(view.model_dump(mode="json"))
    return 0


def cmd_species(args: argparse.Namespace, services: DashboardServices) -> int:
    """Handle the 'species' command."""
    catalog = services.birds.get_species(args.region, args.start, args.end)
    if not catalog:
        return _no_data("species")
    _print_json([entry.model_dump(mode="json") for entry in catalog])
    return 0


def cmd_recent(args: argparse.Namespace, services: DashboardServices) -> int:
    """Handle the 'recent' command."""
    view = services.birds.get_recent_observations(
        args.region, days_back=args.days_back, max_results=args.max_results
    )
    if view.is_empty:
        return _no_data("observations")
    _print_json(view.model_dump(mode="json"))
    return 0


def cmd_routes(args: argparse.Namespace, services: DashboardServices) -> int:
    """Handle the 'routes' command."""
    routes = services.birds.get_migration_routes(args.region, args.species, args.start, args.end)
    if not routes:
        return _no_data(f"routes for {args.species}")
    _print_json([route.model_dump(mode="json") for route in routes])
    return 0


def cmd_stations(_args: argparse.Namespace, services: DashboardServices) -> int:
    """Handle the 'stations' command."""
    view = services.water.get_stations()
    if view.is_empty:
        return _no_data("stations")
    _print_json(view.model_dump(mode="json"))
    return 0


def cmd_station(args: argparse.Namespace, services: DashboardServices) -> int:
    """Handle the 'station' command."""
    view = services.water.get_station_detail(args.station_id)
    if view.is_empty:
        return _no_data(f"readings for station {args.station_id}")
    _print_json(view.model_dump(mode="json"))
    return 0


def cmd_snapshot(args: argparse.Namespace) -> int:
    """Handle the 'snapshot' command: run the Prefect snapshot flow."""
    result = snapshot_all(region=args.region, species_code=args.species)
    _print_json(result)
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    setup_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "info":
        return cmd_info(args)
    if args.command == "snapshot":
        return cmd_snapshot(args)

    commands = {
        "observations": cmd_observations,
        "species": cmd_species,
        "recent": cmd_recent,
        "routes": cmd_routes,
        "stations": cmd_stations,
        "station": cmd_station,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args, build_services(settings))
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
