"""Modelos compartilhados entre respostas do Slack."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Usuário do time.

    Para usuários desativados, ``deleted`` é verdadeiro. ``color`` é usado
    por alguns clientes para colorir o nome do usuário.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str | None = None
    deleted: bool = False
    color: str | None = None
    real_name: str | None = None
    is_admin: bool = False
    is_owner: bool = False
    is_bot: bool = False
    profile: dict[str, Any] = Field(default_factory=dict)
