"""Contratos base de payloads da API Web do Slack.

Cada payload concreto declara, no nível da classe:
- method: método de fio (ex: "im.open")
- response_type: subclasse de SlackPayloadResponse usada na desserialização
- http_method: verbo HTTP padrão ("GET" se omitido)

Bases intermediárias declaram ``abstract = True`` e ficam fora do registro.

Payloads concretos são registrados por método de fio, permitindo resolver
o tipo de resposta a partir do nome do método.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

_PAYLOAD_REGISTRY: dict[str, type[SlackPayload]] = {}


class SlackPayloadResponse(BaseModel):
    """Resposta base; ``ok`` é o indicador de sucesso do Slack."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    ok: bool = False
    error: str | None = None
    warning: str | None = None


class SlackPayload(BaseModel):
    """Requisição tipada para um método da API Web."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    method: ClassVar[str] = ""
    http_method: ClassVar[str] = "GET"
    response_type: ClassVar[type[SlackPayloadResponse]] = SlackPayloadResponse
    # Bases intermediárias (campos compartilhados) não são validadas nem registradas
    abstract: ClassVar[bool] = False

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if cls.__dict__.get("abstract", False):
            return
        if not cls.method:
            raise TypeError(f"{cls.__name__} deve declarar o método de fio (method)")
        if not (
            isinstance(cls.response_type, type)
            and issubclass(cls.response_type, SlackPayloadResponse)
        ):
            raise TypeError(
                f"{cls.__name__}.response_type deve ser subclasse de SlackPayloadResponse"
            )
        if cls.http_method.upper() not in ("GET", "POST"):
            raise TypeError(f"{cls.__name__}.http_method deve ser GET ou POST")

        previous = _PAYLOAD_REGISTRY.get(cls.method)
        if previous is not None and previous is not cls:
            logger.debug(
                "slack_payload_overridden",
                extra={"slack_method": cls.method, "previous": previous.__name__},
            )
        _PAYLOAD_REGISTRY[cls.method] = cls


def get_payload_type(method: str) -> type[SlackPayload]:
    """Retorna a classe de payload registrada para o método.

    Raises:
        KeyError: Se nenhum payload estiver registrado para o método.
    """
    try:
        return _PAYLOAD_REGISTRY[method]
    except KeyError:
        raise KeyError(f"Nenhum payload registrado para o método {method!r}") from None


def get_response_type(method: str) -> type[SlackPayloadResponse]:
    """Resolve o tipo de resposta a partir do método de fio."""
    return get_payload_type(method).response_type


def registered_methods() -> tuple[str, ...]:
    """Métodos de fio com payload tipado registrado, em ordem alfabética."""
    return tuple(sorted(_PAYLOAD_REGISTRY))
