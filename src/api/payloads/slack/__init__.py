"""Payloads tipados da API Web do Slack.

Importar este pacote registra todos os payloads concretos.
"""

from .base import (
    SlackPayload,
    SlackPayloadResponse,
    get_payload_type,
    get_response_type,
    registered_methods,
)
from .chat import ChatPostMessagePayload, ChatPostMessagePayloadResponse
from .im import ImOpenPayload, ImOpenPayloadResponse
from .models import User
from .rtm import RtmStartPayload, RtmStartPayloadResponse

__all__ = [
    "ChatPostMessagePayload",
    "ChatPostMessagePayloadResponse",
    "ImOpenPayload",
    "ImOpenPayloadResponse",
    "RtmStartPayload",
    "RtmStartPayloadResponse",
    "SlackPayload",
    "SlackPayloadResponse",
    "User",
    "get_payload_type",
    "get_response_type",
    "registered_methods",
]
