"""Protocolos do cliente da API Web do Slack.

Contratos mínimos para os colaboradores do SlackApiClient; qualquer
implementação que os satisfaça pode ser injetada (ex: fakes em testes).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.connectors.slack.events import AfterReceiveEvent, BeforeSendEvent

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Resultado bruto de uma troca HTTP."""

    status_code: int
    content: bytes


class SlackSerializerProtocol(Protocol):
    """Serializa/desserializa objetos para o formato de fio (JSON)."""

    def serialize(self, obj: Any) -> str: ...

    def deserialize(self, text: str | bytes, target_type: type[T]) -> T: ...


class SlackTransportProtocol(Protocol):
    """Executa uma única troca HTTP."""

    def request(
        self,
        http_method: str,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> TransportResponse: ...


@runtime_checkable
class SlackPayloadProtocol(Protocol):
    """Requisição tipada: método de fio, tipo de resposta e verbo HTTP."""

    method: str
    http_method: str
    response_type: type[Any]


class BeforeSendListener(Protocol):
    """Listener chamado antes da transmissão."""

    def __call__(self, event: BeforeSendEvent) -> None: ...


class AfterReceiveListener(Protocol):
    """Listener chamado após a resposta ser interpretada."""

    def __call__(self, event: AfterReceiveEvent) -> None: ...
