"""Payloads de mensagens diretas (im.*)."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from .base import SlackPayload, SlackPayloadResponse


class ImOpenPayloadResponse(SlackPayloadResponse):
    """Resposta de im.open."""

    channel: dict[str, Any] | None = None
    no_op: bool = False
    already_open: bool = False


class ImOpenPayload(SlackPayload):
    """Abre uma conversa direta com um usuário."""

    method: ClassVar[str] = "im.open"
    response_type: ClassVar[type[SlackPayloadResponse]] = ImOpenPayloadResponse

    user: str = Field(..., min_length=1, description="ID do usuário (ex: U023BECGF).")
    return_im: bool | None = None
