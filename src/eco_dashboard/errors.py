"""Failure taxonomy for the aggregation pipeline.

None of these reach dashboard callers: ``RemoteUnavailable`` and
``MalformedPayload`` are replaced by fallback views, ``MalformedRecord``
drops a single record. An empty result is not an error; views expose
``is_empty`` instead.
"""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for pipeline errors."""


class RemoteUnavailable(DashboardError):  # noqa: N818
    """Transport failure or non-success HTTP status from a remote source."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class MalformedPayload(DashboardError):  # noqa: N818
    """A whole payload could not be parsed as its expected format."""


class MalformedRecord(DashboardError):  # noqa: N818
    """A single record inside an otherwise valid payload could not be parsed."""
