"""The coordinator tying entities, components, systems and events together."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from .components import UI, AnimatorController, NativeScript, Sprite, Transform
from .debug import AssertionFailure
from .ecs import ComponentManager, EntityManager, System, SystemManager
from .events import Event, EventManager
from .types import Signature

S = TypeVar("S", bound=System)
C = TypeVar("C")


class Brain:
    """Single entry point for ECS and event operations of one state."""

    def __init__(self) -> None:
        self._components = ComponentManager()
        self._entities = EntityManager()
        self._systems = SystemManager()
        self._events = EventManager()
        self.register_basic_components()

    def register_basic_components(self) -> None:
        for component_type in (Transform, Sprite, AnimatorController, NativeScript, UI):
            self.register_component(component_type)

    def create_entity(self) -> int:
        return self._entities.create_entity()

    def destroy_entity(self, entity: int) -> None:
        self._entities.destroy_entity(entity)
        self._components.entity_destroyed(entity)
        self._systems.entity_destroyed(entity)

    def get_signature(self, entity: int) -> Signature:
        return self._entities.get_signature(entity)

    def register_component(self, component_type: type) -> int:
        return self._components.register_component(component_type)

    def has_component(self, entity: int, component_type: type) -> bool:
        return self.get_signature(entity)[self.get_component_type(component_type)]

    def _update_signature(self, entity: int, component_type: type, present: bool) -> None:
        signature = self._entities.get_signature(entity)
        signature.set(self._components.get_component_type(component_type), present)
        self._entities.set_signature(entity, signature)
        self._systems.entity_signature_changed(entity, signature)

    def add_component(self, entity: int, component: Any) -> None:
        self._components.add_component(entity, component)
        self._update_signature(entity, type(component), True)

    def remove_component(self, entity: int, component_type: type) -> None:
        self._components.remove_component(entity, component_type)
        self._update_signature(entity, component_type, False)

    def get_component(self, entity: int, component_type: type[C]) -> C:
        if not self.has_component(entity, component_type):
            raise AssertionFailure("Entity does not have component")
        return self._components.get_component(entity, component_type)

    def get_component_type(self, component_type: type) -> int:
        return self._components.get_component_type(component_type)

    def register_system(self, system_type: type[S]) -> S:
        return self._systems.register_system(system_type)

    def set_system_signature(self, system_type: type, signature: Signature) -> None:
        self._systems.set_signature(system_type, signature)

    def add_event_listener(self, event_id: int, name: str, listener: Callable[[Event], Any]) -> None:
        self._events.add_listener(event_id, name, listener)

    def remove_event_listener(self, event_id: int, name: str) -> None:
        self._events.remove_listener(event_id, name)

    def send_event(self, event: Event | int) -> None:
        self._events.send_event(event)