"""Helpers de logging para a API do Slack (sem tokens nem conteúdo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .slack_errors import SlackErrorInfo

logger = logging.getLogger(__name__)


def log_slack_error(
    error_info: SlackErrorInfo,
    http_method: str,
    method: str,
) -> None:
    """Loga resposta ``ok: false`` do Slack sem expor dados sensíveis."""
    logger.warning(
        "slack_api_error_response",
        extra={
            "http_method": http_method,
            "slack_method": method,
            "error_code": error_info.error_code,
            "is_permanent": error_info.is_permanent,
        },
    )


def log_success(
    http_method: str,
    method: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "slack_api_call_success",
        extra={
            "http_method": http_method,
            "slack_method": method,
            "status_code": status_code,
        },
    )


def log_call_failure(
    method: str | None,
    exc: BaseException,
) -> None:
    """Loga falha de chamada; apenas o tipo da exceção, nunca o payload."""
    logger.warning(
        "slack_api_call_failed",
        extra={
            "slack_method": method,
            "error_type": type(exc).__name__,
        },
    )
