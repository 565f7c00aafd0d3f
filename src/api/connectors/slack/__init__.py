"""Conector Slack - adapter de borda para a API Web do Slack.

Este módulo é o único ponto de IO para o canal Slack.
Responsabilidades:
- Cliente da API Web (envio genérico ou tipado)
- Transporte HTTP síncrono
- Serializer JSON (Pydantic)
- Eventos de ciclo de vida (antes do envio / após a resposta)
- Erros e classificação de respostas ``ok: false``
"""

from .api_client import SlackApiClient, create_slack_api_client
from .events import AfterReceiveEvent, ApiClientEvent, BeforeSendEvent, SlackEventDispatcher
from .http_transport import HttpTransportConfig, SlackHttpTransport
from .serializer import PydanticSerializer
from .slack_errors import (
    PayloadArgumentError,
    ResponseShapeError,
    SerializationError,
    SlackApiError,
    SlackErrorInfo,
    SlackTransportError,
    is_permanent_error,
    parse_slack_error,
)

__all__ = [
    "AfterReceiveEvent",
    "ApiClientEvent",
    "BeforeSendEvent",
    "HttpTransportConfig",
    "PayloadArgumentError",
    "PydanticSerializer",
    "ResponseShapeError",
    "SerializationError",
    "SlackApiClient",
    "SlackErrorInfo",
    "SlackEventDispatcher",
    "SlackHttpTransport",
    "SlackTransportError",
    "create_slack_api_client",
    "is_permanent_error",
    "parse_slack_error",
]
