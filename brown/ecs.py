"""Entity, component and system bookkeeping."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, TypeVar

from .debug import AssertionFailure
from .types import MAX_COMPONENTS, MAX_ENTITIES, Signature

T = TypeVar("T")
S = TypeVar("S", bound="System")


class ComponentArray(Generic[T]):
    """Densely packed components of one type, indexed by entity."""

    def __init__(self, capacity: int = MAX_ENTITIES) -> None:
        self._capacity = capacity
        self._components: list[T] = []
        self._entities: list[int] = []
        self._index: dict[int, int] = {}

    def insert(self, entity: int, component: T) -> None:
        if entity in self._index:
            raise AssertionFailure(f"Entity {entity} already has this component")
        if len(self._components) >= self._capacity:
            raise AssertionFailure("Component array is full")
        self._index[entity] = len(self._components)
        self._components.append(component)
        self._entities.append(entity)

    def remove(self, entity: int) -> None:
        """Remove the entity's component, moving the last one into its slot."""
        try:
            removed = self._index.pop(entity)
        except KeyError:
            raise AssertionFailure("Entity doesn't have the component requested!") from None
        last_component = self._components.pop()
        last_entity = self._entities.pop()
        if last_entity != entity:
            self._components[removed] = last_component
            self._entities[removed] = last_entity
            self._index[last_entity] = removed

    def get(self, entity: int) -> T:
        try:
            return self._components[self._index[entity]]
        except KeyError:
            raise AssertionFailure("Entity doesn't have the component requested!") from None

    def entity_destroyed(self, entity: int) -> None:
        if entity in self._index:
            self.remove(entity)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index

    def __len__(self) -> int:
        return len(self._components)


class ComponentManager:
    """Assigns a bit to each component type and stores their arrays."""

    def __init__(self) -> None:
        self._types: dict[type, int] = {}
        self._arrays: dict[type, ComponentArray[Any]] = {}

    def register_component(self, component_type: type) -> int:
        if component_type in self._types:
            raise AssertionFailure("Registering component type more than once.")
        if len(self._types) >= MAX_COMPONENTS:
            raise AssertionFailure("Too many component types registered.")
        bit = len(self._types)
        self._types[component_type] = bit
        self._arrays[component_type] = ComponentArray()
        return bit

    def get_component_type(self, component_type: type) -> int:
        try:
            return self._types[component_type]
        except KeyError:
            raise AssertionFailure("Component not registered before use.") from None

    def _array(self, component_type: type) -> ComponentArray[Any]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise AssertionFailure("Component not registered before use.") from None

    def add_component(self, entity: int, component: Any) -> None:
        self._array(type(component)).insert(entity, component)

    def remove_component(self, entity: int, component_type: type) -> None:
        self._array(component_type).remove(entity)

    def get_component(self, entity: int, component_type: type) -> Any:
        return self._array(component_type).get(entity)

    def entity_destroyed(self, entity: int) -> None:
        for array in self._arrays.values():
            array.entity_destroyed(entity)


class EntityManager:
    """Hands out entity ids and keeps each entity's component signature."""

    def __init__(self, capacity: int = MAX_ENTITIES) -> None:
        self._available: deque[int] = deque(range(capacity))
        self._signatures = [Signature() for _ in range(capacity)]
        self._count = 0

    @property
    def entity_count(self) -> int:
        return self._count

    def _check(self, entity: int) -> int:
        if not 0 <= entity < len(self._signatures):
            raise AssertionFailure(f"Entity {entity} out of range.")
        return entity

    def create_entity(self) -> int:
        if not self._available:
            raise AssertionFailure("Too many entities in existence.")
        self._count += 1
        return self._available.popleft()

    def destroy_entity(self, entity: int) -> None:
        self._signatures[self._check(entity)].reset()
        self._available.append(entity)
        self._count -= 1

    def set_signature(self, entity: int, signature: Signature) -> None:
        self._signatures[self._check(entity)] = signature.copy()

    def get_signature(self, entity: int) -> Signature:
        return self._signatures[self._check(entity)].copy()


class System:
    """A system works on the set of entities whose signature matches its own."""

    def __init__(self) -> None:
        self.entities: set[int] = set()


class SystemManager:
    """Keeps each system's entity set in step with entity signatures."""

    def __init__(self) -> None:
        self._systems: dict[type, System] = {}
        self._signatures: dict[type, Signature] = {}

    def register_system(self, system_type: type[S]) -> S:
        if system_type in self._systems:
            raise AssertionFailure("Registering system more than once.")
        system = system_type()
        self._systems[system_type] = system
        return system

    def set_signature(self, system_type: type, signature: Signature) -> None:
        """Set a system's signature; a signature already set is kept."""
        self._signatures.setdefault(system_type, signature.copy())

    def entity_destroyed(self, entity: int) -> None:
        for system in self._systems.values():
            system.entities.discard(entity)

    def entity_signature_changed(self, entity: int, signature: Signature) -> None:
        for system_type, system in self._systems.items():
            required = self._signatures.get(system_type, Signature())
            if (signature & required) == required:
                system.entities.add(entity)
            else:
                system.entities.discard(entity)