"""Logging JSON do cliente Slack.

    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO")
    logger = get_logger(__name__)
    logger.info("slack_api_call_success", extra={"slack_method": "im.open"})

Tokens ``xox*-`` são mascarados antes do output e o contexto da chamada
(``slack_method``, ``http_method``, ``error_type``...) sai agrupado em ``slack``.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, TokenRedactionFilter, redact_tokens
from config.logging.formatters import (
    SLACK_CONTEXT_FIELDS,
    SlackJsonFormatter,
    create_json_formatter,
)

__all__ = [
    "SLACK_CONTEXT_FIELDS",
    "CorrelationIdFilter",
    "SlackJsonFormatter",
    "TokenRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_tokens",
]
