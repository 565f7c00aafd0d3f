"""Erros e helpers de parsing para a API Web do Slack.

Taxonomia:
- PayloadArgumentError: token ausente ou payload em formato não suportado
- SlackTransportError: falha ao montar/enviar a requisição HTTP
- ResponseShapeError: resposta não é objeto JSON ou tipo desserializado incorreto
- SerializationError: falha do serializer em qualquer direção
- SlackApiError: único erro exposto por SlackApiClient.send (causa encadeada)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from utils.errors import InfrastructureError


class SlackApiError(Exception):
    """Falha uniforme de chamada à API do Slack.

    A exceção original fica disponível em ``__cause__``.
    """


class PayloadArgumentError(ValueError):
    """Argumentos inválidos detectados antes de qualquer IO."""


class SlackTransportError(InfrastructureError):
    """Falha de conexão/protocolo ao falar com a API do Slack."""


class ResponseShapeError(ValueError):
    """Resposta com formato inesperado."""


class SerializationError(ValueError):
    """Falha ao serializar/desserializar payloads."""


# Códigos que podem ter sucesso numa nova tentativa
_TRANSIENT_ERRORS = frozenset(
    {
        "ratelimited",
        "rate_limited",
        "internal_error",
        "fatal_error",
        "service_unavailable",
        "request_timeout",
    }
)


@dataclass(frozen=True)
class SlackErrorInfo:
    """Erro retornado pela API do Slack (``ok: false``)."""

    error_code: str
    warning: str | None
    is_permanent: bool  # True se erro não é retentável


def is_permanent_error(error_code: str) -> bool:
    """Classifica código de erro do Slack como permanente ou transitório.

    Códigos desconhecidos são tratados como permanentes: repetir a mesma
    chamada tende a produzir o mesmo erro.
    """
    return error_code not in _TRANSIENT_ERRORS


def parse_slack_error(response_data: dict[str, Any]) -> SlackErrorInfo | None:
    """Extrai informações de erro da resposta do Slack.

    Args:
        response_data: Dict do response JSON

    Returns:
        SlackErrorInfo se ``ok`` for falso, None se sucesso
    """
    if response_data.get("ok", False) is True:
        return None

    error_code = response_data.get("error")
    if not isinstance(error_code, str) or not error_code:
        error_code = "unknown_error"

    warning = response_data.get("warning")
    return SlackErrorInfo(
        error_code=error_code,
        warning=warning if isinstance(warning, str) else None,
        is_permanent=is_permanent_error(error_code),
    )
