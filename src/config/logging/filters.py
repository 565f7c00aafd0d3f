"""Filters de logging para injeção de contexto e redação de tokens.

Campos injetados:
- correlation_id: ID de rastreamento da chamada
- service: Nome do serviço

Tokens do Slack (xoxb-, xoxp-, ...) nunca devem chegar ao output:
o httpx loga a URL completa, que em GET inclui o token na query string.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

SLACK_TOKEN_PATTERN = re.compile(r"xox[abposre]-[A-Za-z0-9-]+")
REDACTED = "xox*-[REDACTED]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


def redact_tokens(text: str) -> str:
    """Substitui tokens do Slack presentes no texto."""
    return SLACK_TOKEN_PATTERN.sub(REDACTED, text)


class TokenRedactionFilter(logging.Filter):
    """Mascara tokens do Slack na mensagem final do record.

    A mensagem é formatada aqui (msg % args) e os args são descartados,
    para que nenhum formatter posterior reintroduza o token.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_tokens(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
