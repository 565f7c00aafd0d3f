"""Formatter JSON dos logs do cliente Slack.

Campos de base (correlation_id, service, level, logger, message, asctime)
ficam no nível raiz. O contexto da chamada à API que os módulos do
conector passam em ``extra`` é agrupado no objeto ``slack``:

    {
        "asctime": "2026-10-17 10:30:00,000",
        "level": "WARNING",
        "logger": "api.connectors.slack.slack_logging",
        "message": "slack_api_error_response",
        "correlation_id": "abc-123",
        "service": "slack_api_client",
        "slack": {"method": "chat.postMessage", "http_method": "POST",
                  "error": "channel_not_found", "permanent": true}
    }
"""

from __future__ import annotations

from typing import Any

from pythonjsonlogger.json import JsonFormatter

BASE_LOG_FIELDS = ("asctime", "levelname", "name", "message", "correlation_id", "service")

BASE_FIELD_RENAMES = {
    "levelname": "level",
    "name": "logger",
}

# extra -> chave dentro de "slack"
SLACK_CONTEXT_FIELDS = {
    "slack_method": "method",
    "http_method": "http_method",
    "status_code": "status_code",
    "error_code": "error",
    "is_permanent": "permanent",
    "error_type": "error_type",
}

SLACK_CONTEXT_KEY = "slack"


class SlackJsonFormatter(JsonFormatter):
    """JsonFormatter que agrupa o contexto da chamada Slack."""

    def process_log_record(self, log_data: dict[str, Any]) -> dict[str, Any]:
        context = {
            target: log_data.pop(source)
            for source, target in SLACK_CONTEXT_FIELDS.items()
            if source in log_data
        }
        if context:
            log_data[SLACK_CONTEXT_KEY] = context
        return super().process_log_record(log_data)


def create_json_formatter() -> SlackJsonFormatter:
    format_string = " ".join(f"%({field})s" for field in BASE_LOG_FIELDS)
    return SlackJsonFormatter(format_string, rename_fields=BASE_FIELD_RENAMES)
