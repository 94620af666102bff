"""Entities that own components, and the manager that holds entities."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import TypeVar

from ecsengine.component import Component, component_type_id
from ecsengine.transform import Transform

C = TypeVar("C", bound=Component)


class ComponentInitError(RuntimeError):
    """Raised when a component refuses to attach because its init failed."""


class Entity:
    """A game object: a bag of components, one slot per component type."""

    def __init__(self) -> None:
        self._active = True
        self._slots: dict[int, Component] = {}
        self._components: list[Component] = []
        self.add_component(Transform())

    def add_component(self, component: C) -> C:
        """Attach ``component``, run its init and return it."""
        component.entity = self
        if not component.init():
            component.entity = None
            raise ComponentInitError(
                f"{type(component).__name__} failed to initialise"
            )
        self._slots[component_type_id(type(component))] = component
        self._components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the component in the slot of ``component_type``, or None."""
        return self._slots.get(component_type_id(component_type))

    def has_component(self, component_type: type[Component]) -> bool:
        return component_type_id(component_type) in self._slots

    def is_active(self) -> bool:
        return self._active

    def destroy(self) -> None:
        """Mark the entity inactive; the manager drops it on refresh."""
        self._active = False

    def draw(self) -> None:
        for component in self._components:
            component.draw()

    def update(self) -> None:
        for component in self._components:
            component.update()


class EntityManager:
    """Owns entities and drives their drawing and updating."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __contains__(self, entity: object) -> bool:
        return any(e is entity for e in self._entities)

    def draw(self) -> None:
        for entity in self._entities:
            entity.draw()

    def update(self) -> None:
        for entity in self._entities:
            entity.update()

    def refresh(self) -> None:
        """Drop entities that have been destroyed."""
        self._entities = [e for e in self._entities if e.is_active()]

    def add_entity(self, entity: Entity) -> Entity:
        self._entities.append(entity)
        return entity

    def erase_entity(self, entity: Entity) -> None:
        """Remove ``entity``; raise ValueError if this manager does not hold it."""
        for index, held in enumerate(self._entities):
            if held is entity:
                del self._entities[index]
                return
        raise ValueError("entity is not managed here")

    def clone_entity(self, entity: Entity) -> Entity:
        """Return an independent deep copy of ``entity`` with its own components."""
        return copy.deepcopy(entity)