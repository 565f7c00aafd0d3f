"""Payload de rtm.start.

Apenas o formato de dados: a conexão WebSocket do RTM não é tratada aqui.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .base import SlackPayload, SlackPayloadResponse
from .models import User


class RtmStartPayloadResponse(SlackPayloadResponse):
    """Resposta de rtm.start com o estado inicial do time."""

    url: str | None = None
    # "self" no fio; renomeado para não colidir com o nome reservado
    self_: dict[str, Any] | None = Field(default=None, alias="self")
    team: dict[str, Any] | None = None
    users: list[User] = Field(default_factory=list)
    channels: list[dict[str, Any]] = Field(default_factory=list)
    groups: list[dict[str, Any]] = Field(default_factory=list)
    ims: list[dict[str, Any]] = Field(default_factory=list)
    bots: list[dict[str, Any]] = Field(default_factory=list)


class RtmStartPayload(SlackPayload):
    """Inicia uma sessão RTM (retorna URL do WebSocket e estado do time)."""

    method: ClassVar[str] = "rtm.start"
    response_type: ClassVar[type[SlackPayloadResponse]] = RtmStartPayloadResponse

    simple_latest: bool | None = None
    no_unreads: bool | None = None
    mpim_aware: bool | None = None
