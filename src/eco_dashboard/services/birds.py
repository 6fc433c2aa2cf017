"""Bird observation service: cached eBird views with synthetic fallback."""

from __future__ import annotations

import logging
import random
from datetime import datetime, time, timedelta
from typing import TYPE_CHECKING

from eco_dashboard.analysis.routes import build_routes
from eco_dashboard.analysis.views import build_observation_view
from eco_dashboard.config import Settings, get_settings
from eco_dashboard.datasources.ebird.fallback import generate_fallback_observations
from eco_dashboard.datasources.ebird.observations import fetch_observations
from eco_dashboard.reference.limits import MAX_RESULTS_CAP, RECENT_WINDOW_DAYS
from eco_dashboard.schemas import ObservationQuery
from eco_dashboard.services.http import fetch_text

if TYPE_CHECKING:
    from collections.abc import Callable

    from eco_dashboard.cache import ViewCache
    from eco_dashboard.schemas import CatalogEntry, ObservationSetView, RouteView

logger = logging.getLogger(__name__)

# Routes default to the last 30 days
ROUTE_WINDOW_DAYS = RECENT_WINDOW_DAYS


def _midnight(day: datetime) -> datetime:
    return datetime.combine(day.date(), time.min)


class BirdObservationService:
    """Serves observation, species and route views for an eBird region."""

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

    def get_observations(self, query: ObservationQuery) -> ObservationSetView:
        """
        Observations for ``query``, newest first, with their species catalog.

        Served from cache for ``bird_ttl``. If eBird fails, a synthetic view
        (``is_fallback=True``) honouring the same filters is cached instead.
        """

        def compute() -> ObservationSetView:
            now = self._clock()
            records = fetch_observations(
                query,
                api_key=self._settings.ebird_api_key,
                api_base=self._settings.ebird_api_base,
                fetch=self._fetch,
                today=now.date(),
            )
            return build_observation_view(
                records, query.region, start=query.start, end=query.end, now=now
            )

        def fallback() -> ObservationSetView:
            now = self._clock()
            records = generate_fallback_observations(query, self._rng, now=now)
            return build_observation_view(
                records, query.region, start=query.start, end=query.end, is_fallback=True, now=now
            )

        return self._cache.get_or_compute(
            query.cache_key(), self._settings.bird_ttl, compute, fallback
        )

    def get_species(
        self,
        region: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[CatalogEntry]:
        """Species seen in ``region`` over the (optional) date range."""
        query = ObservationQuery(region=region, start=start, end=end, max_results=MAX_RESULTS_CAP)
        return list(self.get_observations(query).catalog)

    def get_recent_observations(
        self,
        region: str,
        days_back: int = 7,
        max_results: int = 100,
    ) -> ObservationSetView:
        """Observations since midnight ``days_back`` days ago.

        The window starts at midnight so the cache key stays stable for the
        whole day.
        """
        start = _midnight(self._clock() - timedelta(days=max(days_back, 0)))
        query = ObservationQuery(region=region, start=start, max_results=max_results)
        return self.get_observations(query)

    def get_migration_routes(
        self,
        region: str,
        species_code: str,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[RouteView]:
        """
        Time-ordered routes for ``species_code`` in ``region``.

        Without a start date the window opens at midnight 30 days ago.

        Returns:
            Routes with two or more points; an empty list means "no route".
        """
        if start is None:
            start = _midnight(self._clock() - timedelta(days=ROUTE_WINDOW_DAYS))
        query = ObservationQuery(
            region=region,
            species_code=species_code,
            start=start,
            end=end,
            max_results=MAX_RESULTS_CAP,
        )
        view = self.get_observations(query)
        routes = build_routes(view.records)
        logger.debug("%d route(s) for %s in %s", len(routes), species_code, region)
        return routes
