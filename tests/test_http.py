"""Tests for the shared HTTP client and fetch_text."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests
from urllib3.util.retry import Retry

from eco_dashboard.errors import RemoteUnavailable
from eco_dashboard.services.http import (
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    create_session,
    fetch_text,
    session,
)


class TestDefaultRetry:
    """Verify retry strategy configuration."""

    def test_no_retries(self) -> None:
        assert DEFAULT_RETRY.total == 0

    def test_status_not_raised_by_adapter(self) -> None:
        assert DEFAULT_RETRY.raise_on_status is False

    def test_only_safe_methods(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "POST" not in allowed


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_adapters(self) -> None:
        s = create_session()
        for url in ("https://example.com", "http://example.com"):
            assert isinstance(s.get_adapter(url), requests.adapters.HTTPAdapter)

    def test_adapter_has_retry(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        custom = Retry(total=3, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert "eco-dashboard" in s.headers["User-Agent"]

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30


class TestFetchText:
    """GET wrapper that maps transport errors to RemoteUnavailable."""

    def test_returns_body(self) -> None:
        client = MagicMock()
        client.get.return_value.text = "[]"

        body = fetch_text("https://api.test/x", params={"a": 1}, headers={"h": "v"}, http=client)

        assert body == "[]"
        client.get.assert_called_once_with("https://api.test/x", params={"a": 1}, headers={"h": "v"})
        client.get.return_value.raise_for_status.assert_called_once()

    def test_connection_error(self) -> None:
        client = MagicMock()
        client.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(RemoteUnavailable) as exc_info:
            fetch_text("https://api.test/x", http=client)
        assert exc_info.value.url == "https://api.test/x"
        assert "refused" in exc_info.value.reason

    def test_error_status(self) -> None:
        client = MagicMock()
        client.get.return_value.raise_for_status.side_effect = requests.HTTPError("503")

        with pytest.raises(RemoteUnavailable):
            fetch_text("https://api.test/x", http=client)

    def test_timeout(self) -> None:
        client = MagicMock()
        client.get.side_effect = requests.Timeout("slow")

        with pytest.raises(RemoteUnavailable):
            fetch_text("https://api.test/x", http=client)
