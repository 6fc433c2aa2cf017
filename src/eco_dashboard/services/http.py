"""
Shared HTTP client and the ``fetch_text`` primitive used by every datasource.

Provides a pre-configured ``requests.Session`` with a default timeout and a
retry adapter. The default strategy performs no retries: a failed fetch goes
straight to the fallback view, exactly once per call.

Usage::

    from eco_dashboard.services.http import fetch_text

    body = fetch_text("https://api.example.com/v1/data", params={"fmt": "json"})
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from eco_dashboard.errors import RemoteUnavailable

#: No retries, and let ``resp.raise_for_status()`` turn error statuses into exceptions.
DEFAULT_RETRY = Retry(
    total=0,
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = "eco-dashboard/0.1"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()


def fetch_text(
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    *,
    http: requests.Session | None = None,
) -> str:
    """
    GET ``url`` and return the response body as text.

    Args:
        url: Absolute URL.
        params: Query parameters.
        headers: Extra request headers.
        http: Session to use (defaults to the module-level ``session``).

    Raises:
        RemoteUnavailable: On any transport failure or non-2xx status.
    """
    client = http or session
    try:
        resp = client.get(url, params=params or {}, headers=headers or {})
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise RemoteUnavailable(url, str(exc)) from exc
    return resp.text
