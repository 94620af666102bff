"""Base component class and per-type component identifiers."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ecsengine.entity import Entity

MAX_ENTITIES = 5000
MAX_COMPONENTS = 32


class ComponentLimitError(RuntimeError):
    """Raised when more component types are registered than an entity can hold."""


class Component:
    """Something attached to an entity that may draw and update itself."""

    def __init__(self) -> None:
        self.entity: Entity | None = None

    def init(self) -> bool:
        """Prepare the component after it is attached; False rejects it."""
        return True

    def draw(self) -> None:
        """Draw the component; the base component draws nothing."""

    def update(self) -> None:
        """Advance the component one frame; the base component does nothing."""


_next_id = itertools.count()
_type_ids: dict[type, int] = {}


def component_type_id(component_type: type) -> int:
    """Return the stable slot number of a component class, assigning one on first use."""
    if not (isinstance(component_type, type) and issubclass(component_type, Component)):
        raise TypeError(f"{component_type!r} is not a Component type")
    try:
        return _type_ids[component_type]
    except KeyError:
        pass
    if len(_type_ids) >= MAX_COMPONENTS:
        raise ComponentLimitError(
            f"cannot register more than {MAX_COMPONENTS} component types"
        )
    type_id = next(_next_id)
    _type_ids[component_type] = type_id
    return type_id