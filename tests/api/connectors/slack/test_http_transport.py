"""Testes para SlackHttpTransport com httpx.MockTransport."""

from __future__ import annotations

import json
from urllib.parse import parse_qs

import httpx
import pytest

from api.connectors.slack.http_transport import HttpTransportConfig, SlackHttpTransport
from api.connectors.slack.slack_errors import SlackTransportError


def _transport(handler) -> SlackHttpTransport:
    return SlackHttpTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestRequest:
    """Troca HTTP única."""

    def test_get_sends_query_params(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        response = _transport(handler).request(
            "GET",
            "https://slack.com/api/im.open",
            params={"user": "U1", "token": "T1"},
        )

        assert response.status_code == 200
        assert json.loads(response.content) == {"ok": True}
        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/api/im.open"
        assert dict(request.url.params) == {"user": "U1", "token": "T1"}

    def test_post_sends_form_body(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True, "ts": "123.45"})

        _transport(handler).request(
            "POST",
            "https://slack.com/api/chat.postMessage",
            data={"channel": "C1", "text": "hi", "token": "T1"},
        )

        request = seen[0]
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert parse_qs(request.content.decode()) == {
            "channel": ["C1"],
            "text": ["hi"],
            "token": ["T1"],
        }

    def test_error_status_is_returned_not_raised(self) -> None:
        response = _transport(lambda request: httpx.Response(503, content=b"unavailable")).request(
            "GET", "https://slack.com/api/api.test"
        )

        assert response.status_code == 503
        assert response.content == b"unavailable"


class TestFailures:
    """Falhas de rede viram SlackTransportError."""

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timeout", request=request)

        with pytest.raises(SlackTransportError, match="http_timeout") as exc_info:
            _transport(handler).request("GET", "https://slack.com/api/api.test")

        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

    def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(SlackTransportError, match="http_connection_error"):
            _transport(handler).request("GET", "https://slack.com/api/api.test")


class TestLifecycle:
    """Configuração e fechamento do httpx.Client."""

    def test_owned_client_uses_config(self) -> None:
        transport = SlackHttpTransport(HttpTransportConfig(timeout_seconds=5.0, user_agent="ua/1"))
        try:
            assert transport._client.headers["User-Agent"] == "ua/1"
            assert transport._client.timeout.read == 5.0
        finally:
            transport.close()
        assert transport._client.is_closed

    def test_injected_client_is_not_closed(self) -> None:
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        with SlackHttpTransport(client=client):
            pass
        assert not client.is_closed
        client.close()
