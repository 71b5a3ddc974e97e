"""Entities, scripts attached to entities, and the per-state entity registry."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from .components import NativeScript, Transform
from .debug import LOG_FILE, EngineError, log
from .mathutil import distance
from .types import Signature

if TYPE_CHECKING:
    from .brain import Brain
    from .state import State

C = TypeVar("C")


class Entity:
    """A named handle on an entity id owned by a :class:`Brain`."""

    __slots__ = ("name", "id", "_brain")

    def __init__(self, name: str = "", entity_id: int = 0, brain: Brain | None = None) -> None:
        self.name = name
        self.id = entity_id
        self._brain = brain

    @property
    def brain(self) -> Brain:
        if self._brain is None:
            raise EngineError(f"Entity {self.name!r} is not attached to a brain")
        return self._brain

    @property
    def signature(self) -> Signature:
        return self.brain.get_signature(self.id)

    def add_component(self, component: C) -> C:
        """Attach ``component`` and return the stored instance."""
        self.brain.add_component(self.id, component)
        return self.brain.get_component(self.id, type(component))

    def remove_component(self, component_type: type) -> None:
        self.brain.remove_component(self.id, component_type)

    def get_component(self, component_type: type[C]) -> C:
        return self.brain.get_component(self.id, component_type)

    def has_component(self, component_type: type) -> bool:
        return self.brain.has_component(self.id, component_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Entity({self.name!r}, {self.id})"


class ScriptableEntity:
    """Base class for behaviour scripts bound to an entity.

    The scripts system fills in ``entity`` and ``state`` before ``on_create``.
    """

    def __init__(self) -> None:
        self.entity: Entity | None = None
        self.state: State | None = None

    def _require_entity(self) -> Entity:
        if self.entity is None:
            raise EngineError("Script is not bound to an entity")
        return self.entity

    def _require_state(self) -> State:
        if self.state is None:
            raise EngineError("Script is not bound to a state")
        return self.state

    def get_component(self, component_type: type[C]) -> C:
        return self._require_entity().get_component(component_type)

    def add_component(self, component: C) -> C:
        return self._require_entity().add_component(component)

    def delete_component(self, component_type: type) -> None:
        self._require_entity().remove_component(component_type)

    def is_player_in_range(self, range_: float) -> bool:
        """Whether the entity named ``player`` is closer than ``range_``."""
        player = self._require_state().find_entity("player")
        own = self._require_entity().get_component(Transform).position
        return distance(player.get_component(Transform).position, own) < range_

    def delete_self(self) -> None:
        """Queue this script's entity for deletion."""
        self._require_state().delete_entity(self._require_entity().id)

    def on_create(self) -> None:
        """Called once, before the first update."""

    def on_destroy(self) -> None:
        """Called when the entity is destroyed."""

    def on_update(self) -> None:
        """Called every frame."""


class EntityController:
    """Tracks the entities of a state and defers their deletion."""

    def __init__(self, brain: Brain | None = None, log_path: str | Path = LOG_FILE) -> None:
        self.brain = brain
        self.log_path = log_path
        self.entities: list[Entity] = []
        self.to_be_deleted: list[Entity] = []

    def find(self, key: int | str) -> Entity:
        """Find an entity by name (a string) or by id (an integer)."""
        if isinstance(key, str):
            found = next((e for e in self.entities if e.name == key), None)
        else:
            found = next((e for e in self.entities if e.id == key), None)
        if found is None:
            raise EngineError("Entity not found!")
        return found

    def delete_entity(self, entity: Entity) -> None:
        """Queue ``entity`` for destruction at the next :meth:`empty_to_be_deleted`."""
        self.to_be_deleted.append(entity)

    def log_entities(self) -> str:
        """Write a summary of every entity to the log and return it."""
        details = "".join(
            f"\n{e.name}: {e.id}\nwith signature: {e.signature.to_string()}\n"
            for e in self.entities
        )
        message = f"Total entities: {len(self.entities)}{details}"
        log(message, __file__, self.log_path)
        return message

    def empty_to_be_deleted(self) -> None:
        """Destroy every queued entity, running its script's ``on_destroy`` first."""
        if self.brain is None:
            raise EngineError("Entity controller has no brain")
        pending, self.to_be_deleted = self.to_be_deleted, []
        for entity in pending:
            if entity not in self.entities:
                continue
            if self.brain.has_component(entity.id, NativeScript):
                script: Any = self.brain.get_component(entity.id, NativeScript)
                if script.instance is not None:
                    script.instance.on_destroy()
                script.destroy()
            self.brain.destroy_entity(entity.id)
            self.entities.remove(entity)