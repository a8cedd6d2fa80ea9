"""Tests for the event table and slash command routing."""

from __future__ import annotations

from typing import Any, List

from helloworld_core.events import PLAYER_LOGIN, EventDispatcher
from helloworld_core.slash import SlashCommands


def test_fire_calls_handlers_in_order() -> None:
    calls: List[Any] = []
    bus = EventDispatcher()
    bus.register(PLAYER_LOGIN, lambda event, *args: calls.append(("first", event, args)) or 1)
    bus.register(PLAYER_LOGIN, lambda event, *args: calls.append(("second", event, args)) or 2)

    assert bus.fire(PLAYER_LOGIN, "x") == [1, 2]
    assert calls == [("first", PLAYER_LOGIN, ("x",)), ("second", PLAYER_LOGIN, ("x",))]


def test_unregistered_event_is_ignored() -> None:
    bus = EventDispatcher()
    assert bus.fire("ADDON_LOADED") == []
    assert bus.is_registered("ADDON_LOADED") is False


def test_register_twice_and_unregister() -> None:
    seen: List[str] = []

    def handler(event: str) -> None:
        seen.append(event)

    bus = EventDispatcher()
    bus.register(PLAYER_LOGIN, handler)
    bus.register(PLAYER_LOGIN, handler)
    bus.fire(PLAYER_LOGIN)
    assert seen == [PLAYER_LOGIN]

    bus.unregister(PLAYER_LOGIN, handler)
    assert bus.is_registered(PLAYER_LOGIN) is False
    bus.fire(PLAYER_LOGIN)
    assert seen == [PLAYER_LOGIN]


def _table(received: List[str]) -> SlashCommands:
    slash = SlashCommands()
    slash.register("helloworld", ["/helloworld", "/HW"], lambda msg: received.append(msg) or "done")
    return slash


def test_route_by_any_alias() -> None:
    received: List[str] = []
    slash = _table(received)

    assert slash.route("/hw open") == "done"
    assert slash.route("/HelloWorld write hi") == "done"
    assert received == ["open", "write hi"]
    assert sorted(slash.aliases("HELLOWORLD")) == ["/helloworld", "/hw"]


def test_route_passes_empty_and_keeps_rest() -> None:
    received: List[str] = []
    slash = _table(received)

    slash.route("/hw")
    slash.route("/hw   spaced  out  ")
    assert received == ["", "  spaced  out  "]


def test_route_misses() -> None:
    received: List[str] = []
    slash = _table(received)

    assert slash.route("/hwopen") is None
    assert slash.route("/say hi") is None
    assert slash.route("just chatting") is None
    assert slash.route("") is None
    assert received == []


def test_alias_without_slash_is_normalised() -> None:
    slash = SlashCommands()
    slash.register("x", ["hw"], lambda msg: msg)
    assert slash.route("/hw help") == "help"
