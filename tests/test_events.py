import pytest

from brown.events import Event, EventListener, EventManager
from brown.types import WINDOW_INPUT, WINDOW_INPUT_PARAM, WINDOW_QUIT


def test_param_round_trip():
    ev = Event(WINDOW_INPUT)
    ev.set_param(WINDOW_INPUT_PARAM, "w")
    assert ev.get_param(WINDOW_INPUT_PARAM) == "w"
    assert ev.type == WINDOW_INPUT


def test_param_overwrite():
    ev = Event(WINDOW_INPUT)
    ev.set_param(7, 1)
    ev.set_param(7, [1, 2])
    assert ev.get_param(7) == [1, 2]


def test_missing_param_raises():
    ev = Event(WINDOW_QUIT)
    with pytest.raises(KeyError):
        ev.get_param(WINDOW_INPUT_PARAM)


def test_listener_equality_by_name():
    assert EventListener("a", print) == EventListener("a", len)
    assert not EventListener("a", print) == EventListener("b", print)


def test_send_calls_listeners_in_order():
    manager = EventManager()
    calls = []
    manager.add_listener(WINDOW_QUIT, "first", lambda e: calls.append(("first", e.type)))
    manager.add_listener(WINDOW_QUIT, "second", lambda e: calls.append(("second", e.type)))
    manager.send_event(Event(WINDOW_QUIT))
    assert calls == [("first", WINDOW_QUIT), ("second", WINDOW_QUIT)]


def test_send_by_id_builds_event():
    manager = EventManager()
    received = []
    manager.add_listener(WINDOW_INPUT, "l", received.append)
    manager.send_event(WINDOW_INPUT)
    assert len(received) == 1
    assert received[0].type == WINDOW_INPUT


def test_event_object_is_passed_through():
    manager = EventManager()
    received = []
    manager.add_listener(WINDOW_INPUT, "l", lambda e: received.append(e.get_param(WINDOW_INPUT_PARAM)))
    ev = Event(WINDOW_INPUT)
    ev.set_param(WINDOW_INPUT_PARAM, "k")
    manager.send_event(ev)
    assert received == ["k"]


def test_other_event_types_not_dispatched():
    manager = EventManager()
    received = []
    manager.add_listener(WINDOW_INPUT, "l", received.append)
    manager.send_event(WINDOW_QUIT)
    assert received == []


def test_remove_listener_by_name():
    manager = EventManager()
    calls = []
    manager.add_listener(WINDOW_QUIT, "keep", lambda e: calls.append("keep"))
    manager.add_listener(WINDOW_QUIT, "drop", lambda e: calls.append("drop"))
    manager.add_listener(WINDOW_QUIT, "drop", lambda e: calls.append("drop2"))
    manager.remove_listener(WINDOW_QUIT, "drop")
    manager.send_event(WINDOW_QUIT)
    assert calls == ["keep"]
    assert [entry.name for entry in manager.listeners(WINDOW_QUIT)] == ["keep"]


def test_remove_unknown_listener_is_harmless():
    manager = EventManager()
    manager.add_listener(WINDOW_QUIT, "a", lambda e: None)
    manager.remove_listener(WINDOW_INPUT, "a")
    assert [entry.name for entry in manager.listeners(WINDOW_QUIT)] == ["a"]