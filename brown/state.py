"""The base class for game states."""

from __future__ import annotations

import abc
import curses
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .brain import Brain
from .debug import EngineError
from .entity import Entity, EntityController
from .events import Event

if TYPE_CHECKING:
    from .engine import Engine


class State(abc.ABC):
    """A game state: its own entities, systems and events, driven by the engine."""

    def __init__(self) -> None:
        self.terminate = False
        self.win: Any = None
        self.game: Engine | None = None
        self.brain = Brain()
        self.free_entities = 0
        self.controller = EntityController(self.brain)
        self.initialized = False

    @abc.abstractmethod
    def init(self, game: Engine) -> None:
        """Prepare the state when it is first entered."""

    @abc.abstractmethod
    def cleanup(self) -> None:
        """Release what the state holds when it is replaced."""

    @abc.abstractmethod
    def pause(self) -> None:
        """Called when another state is pushed on top."""

    @abc.abstractmethod
    def resume(self) -> None:
        """Called when the state is on top again."""

    @abc.abstractmethod
    def handle_events(self, game: Engine) -> None:
        """Handle input and game logic."""

    @abc.abstractmethod
    def update(self, game: Engine) -> None:
        """Advance the game by one frame."""

    @abc.abstractmethod
    def draw(self, game: Engine) -> None:
        """Draw the state to the screen."""

    @property
    def entities(self) -> list[Entity]:
        return list(self.controller.entities)

    def create_entity(self, name: str | None = None) -> Entity:
        """Create an entity; unnamed ones are called ``entity_<n>``."""
        entity_id = self.brain.create_entity()
        if name is None:
            name = f"entity_{self.free_entities}"
            self.free_entities += 1
        entity = Entity(name, entity_id, self.brain)
        self.controller.entities.append(entity)
        return entity

    def find_entity(self, name: str) -> Entity:
        return self.controller.find(name)

    def find_entity_id(self, name: str) -> int:
        return self.controller.find(name).id

    def delete_entity(self, entity_id: int) -> None:
        self.controller.delete_entity(self.controller.find(entity_id))

    def add_event_listener(self, event_id: int, name: str, listener: Callable[[Event], Any]) -> None:
        self.brain.add_event_listener(event_id, name, listener)

    def remove_event_listener(self, event_id: int, name: str) -> None:
        self.brain.remove_event_listener(event_id, name)

    def send_event(self, event: Event | int) -> None:
        self.brain.send_event(event)

    def get_char(self, x: int, y: int) -> str:
        """The character shown at column ``x``, row ``y`` of the state's window."""
        if self.win is None:
            raise EngineError("State has no window")
        return chr(self.win.inch(y, x) & curses.A_CHARTEXT)