"""Events carrying typed parameters and a name-keyed listener registry."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class Event:
    """An event of a given type with arbitrary parameters keyed by id."""

    __slots__ = ("_type", "_params")

    def __init__(self, event_type: int) -> None:
        self._type = event_type
        self._params: dict[int, Any] = {}

    @property
    def type(self) -> int:
        return self._type

    def set_param(self, param_id: int, value: Any) -> None:
        self._params[param_id] = value

    def get_param(self, param_id: int) -> Any:
        """Return a parameter; raise KeyError when it was never set."""
        try:
            return self._params[param_id]
        except KeyError:
            raise KeyError(f"event has no parameter {param_id}") from None

    def __repr__(self) -> str:
        return f"Event({self._type:#x})"


@dataclass
class EventListener:
    """A named callback; listeners compare equal when their names match."""

    name: str
    listener: Callable[[Event], Any] = field(compare=False)

    def __call__(self, event: Event) -> Any:
        return self.listener(event)


class EventManager:
    """Dispatches events to the listeners registered for their type."""

    def __init__(self) -> None:
        self._listeners: defaultdict[int, list[EventListener]] = defaultdict(list)

    def add_listener(self, event_id: int, name: str, listener: Callable[[Event], Any]) -> None:
        self._listeners[event_id].append(EventListener(name, listener))

    def remove_listener(self, event_id: int, name: str) -> None:
        """Remove every listener of ``event_id`` that carries ``name``."""
        self._listeners[event_id] = [
            entry for entry in self._listeners[event_id] if entry.name != name
        ]

    def listeners(self, event_id: int) -> list[EventListener]:
        return list(self._listeners.get(event_id, ()))

    def send_event(self, event: Event | int) -> None:
        """Call each listener for the event's type, in registration order.

        An integer is taken as an event id and sent as an event without parameters.
        """
        if not isinstance(event, Event):
            event = Event(event)
        for entry in list(self._listeners.get(event.type, ())):
            entry(event)