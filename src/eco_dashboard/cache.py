"""In-memory view cache with freshness-aware get-or-compute.

Every dashboard view is served through ``ViewCache.get_or_compute``:

  - key built by ``make_cache_key`` from every query dimension
  - fresh entry (``now - stored_at < ttl``) → stored view returned unchanged
  - missing or stale entry → ``compute()``; if it raises, ``fallback()``
  - whatever view was produced (real or fallback) replaces the old entry

Only views are ever stored, never errors. The lock protects the dict, not the
computation: two threads missing the same key may both compute, and the last
write wins. Callers must not rely on at-most-once computation per key.

One ``ViewCache`` is created by the service root (``app.build_services``)
and injected; tests pass their own with a fake clock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import quote

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

V = TypeVar("V")

KEY_SEPARATOR = "_"


def _render_key_part(part: object) -> str:
    if part is None:
        return ""
    if isinstance(part, datetime):
        if part.time() == datetime.min.time():
            return part.strftime("%Y%m%d")
        if part.microsecond:
            return part.strftime("%Y%m%dT%H%M%S.%f")
        return part.strftime("%Y%m%dT%H%M%S")
    # Escape the separator so ("a_b", "c") and ("a", "b_c") stay distinct
    return quote(str(part), safe="-.")


def make_cache_key(prefix: str, *parts: object) -> str:
    """Build a deterministic cache key.

    ``None`` renders as an empty segment, midnight datetimes as ``YYYYMMDD``
    and other datetimes as ``YYYYMMDDTHHMMSS`` (plus ``.ffffff`` when they
    carry microseconds).

    >>> make_cache_key("BirdObservations", "CA-AB", None, datetime(2024, 5, 1), None, 200)
    'BirdObservations_CA-AB__20240501__200'
    """
    return KEY_SEPARATOR.join([prefix, *(_render_key_part(p) for p in parts)])


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """A stored view and its freshness window."""

    key: str
    value: V
    stored_at: datetime
    ttl: timedelta

    @property
    def expires_at(self) -> datetime:
        return self.stored_at + self.ttl

    def is_fresh(self, now: datetime) -> bool:
        return now - self.stored_at < self.ttl


class ViewCache:
    """Thread-safe in-process map of cache key → ``CacheEntry``."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._entries: dict[str, CacheEntry[Any]] = {}
        self._lock = threading.Lock()
        self._clock = clock or _utcnow

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _fresh_entry(self, key: str) -> CacheEntry[Any] | None:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or not entry.is_fresh(now):
            return None
        return entry

    def read(self, key: str) -> Any | None:
        """Return the stored view, or None if missing or expired."""
        entry = self._fresh_entry(key)
        return entry.value if entry is not None else None

    def write(self, key: str, value: V, ttl: timedelta) -> CacheEntry[V]:
        """Store ``value`` under ``key``, replacing any previous entry."""
        entry = CacheEntry(key=key, value=value, stored_at=self._clock(), ttl=ttl)
        with self._lock:
            self._entries[key] = entry
        return entry

    def is_fresh(self, key: str) -> bool:
        """Check if ``key`` holds an entry that hasn't expired."""
        return self._fresh_entry(key) is not None

    def evict_expired(self) -> int:
        """Drop every expired entry. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            stale = [k for k, e in self._entries.items() if not e.is_fresh(now)]
            for k in stale:
                del self._entries[k]
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get_or_compute(
        self,
        key: str,
        ttl: timedelta,
        compute: Callable[[], V],
        fallback: Callable[[], V],
    ) -> V:
        """
        Return the fresh view under ``key``, computing and storing it on a miss.

        Args:
            key: Cache key (see ``make_cache_key``).
            ttl: How long the produced view stays fresh.
            compute: Fetch + normalize + derive the real view.
            fallback: Builds a substitute view when ``compute`` raises. It
                gets no access to the failed call; its result is cached like
                a real view.

        Returns:
            The cached, computed or fallback view.
        """
        entry = self._fresh_entry(key)
        if entry is not None:
            logger.debug("Cache hit: %s", key)
            value: V = entry.value
            return value

        logger.debug("Cache miss: %s", key)
        try:
            value = compute()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Using fallback for %s: %s", key, exc)
            value = fallback()

        self.write(key, value, ttl)
        return value
