"""Eventos de ciclo de vida do SlackApiClient.

Dois eventos conhecidos:
- BEFORE_SEND: antes da transmissão, com o mapa de campos de saída
- AFTER_RECEIVE: após interpretar a resposta, com o mapa recebido

Listeners são chamados de forma síncrona, na ordem de registro.
Exceções de listeners propagam para quem disparou o evento.
"""

from __future__ import annotations

import copy
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from app.protocols.slack_client import AfterReceiveListener, BeforeSendListener

logger = logging.getLogger(__name__)


class ApiClientEvent(str, Enum):
    """Tipos de evento emitidos pelo cliente."""

    BEFORE_SEND = "slack.api_client.before_send"
    AFTER_RECEIVE = "slack.api_client.after_receive"


def _freeze(data: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(copy.deepcopy(dict(data)))


@dataclass(frozen=True)
class BeforeSendEvent:
    """Snapshot dos campos de saída (token incluído)."""

    method: str
    payload: Mapping[str, Any]

    @classmethod
    def snapshot(cls, method: str, payload: Mapping[str, Any]) -> BeforeSendEvent:
        return cls(method=method, payload=_freeze(payload))


@dataclass(frozen=True)
class AfterReceiveEvent:
    """Snapshot da resposta interpretada."""

    method: str
    response: Mapping[str, Any]

    @classmethod
    def snapshot(cls, method: str, response: Mapping[str, Any]) -> AfterReceiveEvent:
        return cls(method=method, response=_freeze(response))


_EVENT_TYPES: dict[ApiClientEvent, type] = {
    ApiClientEvent.BEFORE_SEND: BeforeSendEvent,
    ApiClientEvent.AFTER_RECEIVE: AfterReceiveEvent,
}


class SlackEventDispatcher:
    """Registro de listeners por tipo de evento (append-only, thread-safe)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._listeners: dict[ApiClientEvent, list[Callable[[Any], None]]] = {
            event: [] for event in ApiClientEvent
        }

    def add_listener(
        self,
        event: ApiClientEvent,
        listener: BeforeSendListener | AfterReceiveListener,
    ) -> None:
        """Registra listener para o evento.

        Raises:
            ValueError: Se o evento não for um ApiClientEvent.
            TypeError: Se o listener não for chamável.
        """
        event = ApiClientEvent(event)
        if not callable(listener):
            raise TypeError("listener deve ser chamável")
        with self._lock:
            self._listeners[event].append(listener)

    def listeners(self, event: ApiClientEvent) -> tuple[Callable[[Any], None], ...]:
        """Retorna cópia dos listeners registrados para o evento."""
        with self._lock:
            return tuple(self._listeners[ApiClientEvent(event)])

    def dispatch(self, event: ApiClientEvent, snapshot: BeforeSendEvent | AfterReceiveEvent) -> None:
        """Chama os listeners do evento em ordem de registro.

        Raises:
            TypeError: Se o snapshot não corresponder ao tipo do evento.
        """
        event = ApiClientEvent(event)
        expected = _EVENT_TYPES[event]
        if not isinstance(snapshot, expected):
            raise TypeError(
                f"Evento {event.value} espera {expected.__name__}, "
                f"recebeu {type(snapshot).__name__}"
            )

        listeners = self.listeners(event)
        if listeners:
            logger.debug(
                "slack_event_dispatch",
                extra={"event": event.value, "listeners": len(listeners)},
            )
        for listener in listeners:
            listener(snapshot)
