"""Shared fixtures: fake clocks, scripted fetchers, seeded randomness."""

from __future__ import annotations

import random
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from eco_dashboard.config import Settings
from eco_dashboard.errors import RemoteUnavailable


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class ScriptedFetch:
    """Stand-in for ``fetch_text``: returns canned bodies, records every call.

    ``responses`` maps a URL substring to a body, or to an exception to raise.
    URLs with no match raise ``RemoteUnavailable``.
    """

    def __init__(self, responses: dict[str, str | Exception] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.headers: list[dict[str, str]] = []

    def __call__(self, url: str, params: Any = None, headers: Any = None) -> str:
        self.calls.append((url, params or {}))
        self.headers.append(headers or {})
        for fragment, body in self.responses.items():
            if fragment in url:
                if isinstance(body, Exception):
                    raise body
                return body
        raise RemoteUnavailable(url, "connection refused")


@pytest.fixture
def utc_clock() -> FakeClock:
    return FakeClock(datetime(2024, 6, 15, 12, 0, tzinfo=UTC))


@pytest.fixture
def local_clock() -> FakeClock:
    return FakeClock(datetime(2024, 6, 15, 12, 0))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]
