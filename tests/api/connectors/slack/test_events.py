"""Testes para SlackEventDispatcher e snapshots de evento."""

from __future__ import annotations

import threading
from typing import Any

import pytest

from api.connectors.slack.events import (
    AfterReceiveEvent,
    ApiClientEvent,
    BeforeSendEvent,
    SlackEventDispatcher,
)


class TestSnapshots:
    """Snapshots são cópias imutáveis dos dados em trânsito."""

    def test_before_snapshot_is_detached_copy(self) -> None:
        data: dict[str, Any] = {"channel": "C1", "attachments": [{"text": "a"}]}
        event = BeforeSendEvent.snapshot("chat.postMessage", data)

        data["channel"] = "C2"
        data["attachments"][0]["text"] = "b"

        assert event.payload["channel"] == "C1"
        assert event.payload["attachments"][0]["text"] == "a"

    def test_snapshot_mapping_is_read_only(self) -> None:
        event = AfterReceiveEvent.snapshot("api.test", {"ok": True})

        with pytest.raises(TypeError):
            event.response["ok"] = False  # type: ignore[index]

    def test_snapshot_is_frozen(self) -> None:
        event = AfterReceiveEvent.snapshot("api.test", {"ok": True})

        with pytest.raises(AttributeError):
            event.method = "other"  # type: ignore[misc]


class TestDispatcher:
    """Registro e disparo de listeners."""

    def test_listeners_called_in_registration_order(self) -> None:
        dispatcher = SlackEventDispatcher()
        order: list[int] = []
        dispatcher.add_listener(ApiClientEvent.BEFORE_SEND, lambda e: order.append(1))
        dispatcher.add_listener(ApiClientEvent.BEFORE_SEND, lambda e: order.append(2))
        dispatcher.add_listener(ApiClientEvent.BEFORE_SEND, lambda e: order.append(3))

        dispatcher.dispatch(ApiClientEvent.BEFORE_SEND, BeforeSendEvent.snapshot("m", {}))

        assert order == [1, 2, 3]

    def test_only_listeners_of_the_event_are_called(self) -> None:
        dispatcher = SlackEventDispatcher()
        before: list[Any] = []
        after: list[Any] = []
        dispatcher.add_listener(ApiClientEvent.BEFORE_SEND, before.append)
        dispatcher.add_listener(ApiClientEvent.AFTER_RECEIVE, after.append)

        dispatcher.dispatch(ApiClientEvent.AFTER_RECEIVE, AfterReceiveEvent.snapshot("m", {}))

        assert before == []
        assert len(after) == 1

    def test_listener_exception_propagates_and_stops_chain(self) -> None:
        dispatcher = SlackEventDispatcher()
        called: list[str] = []

        def _boom(event: BeforeSendEvent) -> None:
            raise RuntimeError("falhou")

        dispatcher.add_listener(ApiClientEvent.BEFORE_SEND, _boom)
        dispatcher.add_listener(ApiClientEvent.BEFORE_SEND, lambda e: called.append("second"))

        with pytest.raises(RuntimeError, match="falhou"):
            dispatcher.dispatch(ApiClientEvent.BEFORE_SEND, BeforeSendEvent.snapshot("m", {}))

        assert called == []

    def test_event_can_be_given_by_value(self) -> None:
        dispatcher = SlackEventDispatcher()
        dispatcher.add_listener("slack.api_client.before_send", lambda e: None)  # type: ignore[arg-type]

        assert len(dispatcher.listeners(ApiClientEvent.BEFORE_SEND)) == 1

    def test_unknown_event_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            SlackEventDispatcher().add_listener("unknown", lambda e: None)  # type: ignore[arg-type]

    def test_non_callable_listener_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="chamável"):
            SlackEventDispatcher().add_listener(ApiClientEvent.BEFORE_SEND, "nope")  # type: ignore[arg-type]

    def test_snapshot_type_must_match_event(self) -> None:
        dispatcher = SlackEventDispatcher()

        with pytest.raises(TypeError, match="espera BeforeSendEvent"):
            dispatcher.dispatch(ApiClientEvent.BEFORE_SEND, AfterReceiveEvent.snapshot("m", {}))

    def test_listener_registered_during_dispatch_runs_next_time(self) -> None:
        dispatcher = SlackEventDispatcher()
        calls: list[str] = []

        def _register(event: BeforeSendEvent) -> None:
            calls.append("register")
            dispatcher.add_listener(ApiClientEvent.BEFORE_SEND, lambda e: calls.append("late"))

        dispatcher.add_listener(ApiClientEvent.BEFORE_SEND, _register)
        dispatcher.dispatch(ApiClientEvent.BEFORE_SEND, BeforeSendEvent.snapshot("m", {}))

        assert calls == ["register"]

    def test_concurrent_registration(self) -> None:
        dispatcher = SlackEventDispatcher()

        def _register_many() -> None:
            for _ in range(100):
                dispatcher.add_listener(ApiClientEvent.AFTER_RECEIVE, lambda e: None)

        threads = [threading.Thread(target=_register_many) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(dispatcher.listeners(ApiClientEvent.AFTER_RECEIVE)) == 800
