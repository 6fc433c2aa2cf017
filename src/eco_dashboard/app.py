"""Service root: builds the shared cache and every domain service once.

Usage::

    from eco_dashboard.app import build_services

    services = build_services()
    view = services.birds.get_recent_observations("CA-AB")
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from eco_dashboard.cache import ViewCache
from eco_dashboard.config import Settings, get_settings
from eco_dashboard.services.birds import BirdObservationService
from eco_dashboard.services.http import create_session, fetch_text
from eco_dashboard.services.water import WaterDataService

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class DashboardServices:
    """Everything a request handler needs, sharing one cache."""

    settings: Settings
    cache: ViewCache
    birds: BirdObservationService
    water: WaterDataService


def build_services(
    settings: Settings | None = None,
    *,
    cache: ViewCache | None = None,
    fetch: Callable[..., str] | None = None,
    rng: random.Random | None = None,
) -> DashboardServices:
    """
    Wire the services for one process.

    Args:
        settings: Defaults to ``get_settings()``.
        cache: Shared view cache (a fresh ``ViewCache`` by default).
        fetch: Remote fetch function (``fetch_text`` over a session using
            ``settings.http_timeout`` by default).
        rng: Random source for fallback data.
    """
    settings = settings or get_settings()
    cache = cache or ViewCache()
    if fetch is None:
        fetch = partial(fetch_text, http=create_session(timeout=settings.http_timeout))
    rng = rng or random.Random()
    return DashboardServices(
        settings=settings,
        cache=cache,
        birds=BirdObservationService(cache, settings=settings, fetch=fetch, rng=rng),
        water=WaterDataService(cache, settings=settings, fetch=fetch, rng=rng),
    )
