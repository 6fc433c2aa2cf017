"""
eBird API client.

Builds eBird API 2.0 requests for a region/species/date-range query and
fetches the raw JSON text.

API docs: https://documenter.getpostman.com/view/664302/S1ENwy59
Auth: ``x-ebirdapitoken`` header.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from eco_dashboard.reference.limits import RECENT_WINDOW_DAYS
from eco_dashboard.services.http import fetch_text

if TYPE_CHECKING:
    from collections.abc import Callable

    from eco_dashboard.schemas import ObservationQuery

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.ebird.org/v2"
TOKEN_HEADER = "x-ebirdapitoken"
DEFAULT_API_KEY = "demo-key"

# /recent accepts back=1..30 days
MAX_BACK_DAYS = RECENT_WINDOW_DAYS


def build_request(
    query: ObservationQuery,
    *,
    today: date | None = None,
) -> tuple[str, dict[str, Any]]:
    """
    Pick the endpoint and query parameters for ``query``.

    Ranges longer than 30 days go to the historic endpoint for the start
    date; everything else uses ``/recent`` (per-species when filtered), with
    ``back`` covering the start date when one is given.

    Returns:
        (path relative to API_BASE, params dict)
    """
    today = today or date.today()
    params: dict[str, Any] = {
        "maxResults": query.max_results,
        "sppLocale": "en",
        "fmt": "json",
    }

    start, end = query.start, query.end
    if start is not None and end is not None and (end - start).days > RECENT_WINDOW_DAYS:
        return f"data/obs/{query.region}/historic/{start.year}/{start.month}/{start.day}", params

    path = f"data/obs/{query.region}/recent"
    if query.species_code:
        path = f"{path}/{query.species_code}"

    if start is not None:
        days = (today - start.date()).days + 1
        params["back"] = max(1, min(days, MAX_BACK_DAYS))
    else:
        params["includeProvisional"] = "true"
    return path, params


def fetch_observations_text(
    query: ObservationQuery,
    *,
    api_key: str = DEFAULT_API_KEY,
    api_base: str = API_BASE,
    fetch: Callable[..., str] = fetch_text,
    today: date | None = None,
) -> str:
    """GET the observations for ``query`` and return the raw JSON text.

    Raises:
        RemoteUnavailable: From ``fetch`` on transport/status failure.
    """
    path, params = build_request(query, today=today)
    return fetch(
        f"{api_base.rstrip('/')}/{path}",
        params=params,
        headers={TOKEN_HEADER: api_key, "Accept": "application/json"},
    )
