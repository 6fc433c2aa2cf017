"""Hydrometric station service: cached wateroffice views with synthetic fallback."""

from __future__ import annotations

import random
from datetime import datetime
from typing import TYPE_CHECKING

from eco_dashboard.analysis.views import build_station_detail
from eco_dashboard.cache import make_cache_key
from eco_dashboard.config import Settings, get_settings
from eco_dashboard.datasources.wateroffice.fallback import (
    fallback_stations,
    generate_fallback_readings,
    station_info,
)
from eco_dashboard.datasources.wateroffice.readings import fetch_readings
from eco_dashboard.datasources.wateroffice.stations import fetch_stations
from eco_dashboard.schemas import StationDetailView, StationListView
from eco_dashboard.services.http import fetch_text

if TYPE_CHECKING:
    from collections.abc import Callable

    from eco_dashboard.cache import ViewCache

STATIONS_KEY = make_cache_key("WaterStations")
STATION_KEY_PREFIX = "StationData"


class WaterDataService:
    """Serves the station list and per-station detail."""

    def __init__(
        self,
        cache: ViewCache,
        *,
        settings: Settings | None = None,
        fetch: Callable[..., str] = fetch_text,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._cache = cache
        self._settings = settings or get_settings()
        self._fetch = fetch
        self._rng = rng or random.Random()
        self._clock = clock

    def get_stations(self) -> StationListView:
        """In-scope stations, cached for ``station_list_ttl``."""

        def compute() -> StationListView:
            return StationListView(stations=tuple(fetch_stations(fetch=self._fetch)))

        def fallback() -> StationListView:
            return StationListView(stations=tuple(fallback_stations(self._clock())), is_fallback=True)

        return self._cache.get_or_compute(
            STATIONS_KEY, self._settings.station_list_ttl, compute, fallback
        )

    def get_station_detail(self, station_id: str) -> StationDetailView:
        """Current readings and status for one station, cached for ``station_detail_ttl``."""

        def compute() -> StationDetailView:
            now = self._clock()
            readings = fetch_readings(station_id, now=now, fetch=self._fetch)
            return build_station_detail(station_info(station_id, now), readings)

        def fallback() -> StationDetailView:
            now = self._clock()
            readings = generate_fallback_readings(station_id, self._rng, now=now)
            return build_station_detail(station_info(station_id, now), readings, is_fallback=True)

        return self._cache.get_or_compute(
            make_cache_key(STATION_KEY_PREFIX, station_id),
            self._settings.station_detail_ttl,
            compute,
            fallback,
        )
