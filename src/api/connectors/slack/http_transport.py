"""Transporte HTTP síncrono para a API Web do Slack.

Executa exatamente uma troca HTTP por chamada: sem retries, sem backoff.
Timeouts e falhas de conexão viram SlackTransportError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from app.protocols.slack_client import TransportResponse

from .slack_errors import SlackTransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "slack-api-client/0.1 (+python-httpx)"


@dataclass
class HttpTransportConfig:
    """Configuração do transporte HTTP."""

    timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class SlackHttpTransport:
    """Transporte baseado em ``httpx.Client``.

    Se um ``httpx.Client`` for injetado, o transporte não o fecha.
    """

    def __init__(
        self,
        config: HttpTransportConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config or HttpTransportConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(self._config.timeout_seconds),
            verify=self._config.verify_ssl,
            headers={
                "User-Agent": self._config.user_agent,
                **self._config.default_headers,
            },
        )

    def request(
        self,
        http_method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> TransportResponse:
        """Executa a requisição e retorna status + corpo bruto.

        Raises:
            SlackTransportError: Timeout, erro de conexão ou de protocolo.
        """
        try:
            response = self._client.request(
                http_method.upper(),
                url,
                params=dict(params) if params is not None else None,
                data=dict(data) if data is not None else None,
            )
        except httpx.TimeoutException as exc:
            logger.warning("slack_http_timeout", extra={"http_method": http_method})
            raise SlackTransportError("http_timeout") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "slack_http_error",
                extra={"http_method": http_method, "error_type": type(exc).__name__},
            )
            raise SlackTransportError("http_connection_error") from exc

        if response.status_code >= 400:
            logger.info(
                "slack_http_non_success_status",
                extra={"http_method": http_method, "status_code": response.status_code},
            )
        return TransportResponse(status_code=response.status_code, content=response.content)

    def close(self) -> None:
        """Fecha o ``httpx.Client`` se foi criado por este transporte."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> SlackHttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
