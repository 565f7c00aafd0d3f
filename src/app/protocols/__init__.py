"""Protocolos e contratos do core da aplicação."""

from .slack_client import (
    AfterReceiveListener,
    BeforeSendListener,
    SlackPayloadProtocol,
    SlackSerializerProtocol,
    SlackTransportProtocol,
    TransportResponse,
)

__all__ = [
    "AfterReceiveListener",
    "BeforeSendListener",
    "SlackPayloadProtocol",
    "SlackSerializerProtocol",
    "SlackTransportProtocol",
    "TransportResponse",
]
