"""Payloads de mensagens em canais (chat.*)."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import Field

from .base import SlackPayload, SlackPayloadResponse


class ChatPostMessagePayloadResponse(SlackPayloadResponse):
    """Resposta de chat.postMessage."""

    channel: str | None = None
    ts: str | None = None
    message: dict[str, Any] | None = None


class ChatPostMessagePayload(SlackPayload):
    """Publica uma mensagem em um canal, grupo privado ou conversa direta."""

    method: ClassVar[str] = "chat.postMessage"
    http_method: ClassVar[str] = "POST"
    response_type: ClassVar[type[SlackPayloadResponse]] = ChatPostMessagePayloadResponse

    channel: str = Field(..., min_length=1, description="Canal, grupo ou IM de destino.")
    text: str | None = None
    username: str | None = None
    as_user: bool | None = None
    # "parse" no fio; o nome colide com BaseModel.parse
    parse_mode: Literal["full", "none"] | None = Field(default=None, alias="parse")
    link_names: bool | None = None
    unfurl_links: bool | None = None
    unfurl_media: bool | None = None
    icon_url: str | None = None
    icon_emoji: str | None = None
    thread_ts: str | None = None
    attachments: list[dict[str, Any]] | None = None
