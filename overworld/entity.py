"""Entities: named, numbered bags of components."""

from __future__ import annotations

import itertools
from typing import ClassVar, Iterator, Optional

from overworld.components import Component


class Entity:
    """A game object identified by a unique id and holding components by name."""

    _ids: ClassVar[Iterator[int]] = itertools.count()

    def __init__(self, name: str = "default") -> None:
        self.id = next(Entity._ids)
        self.name = name
        self._components: dict[str, Component] = {}

    def __repr__(self) -> str:
        return f"Entity(id={self.id}, name={self.name!r})"

    @property
    def components(self) -> dict[str, Component]:
        return dict(self._components)

    def add_component(self, component: Component) -> None:
        """Attach a component; a component of the same name already attached is kept."""
        self._components.setdefault(component.name, component)

    def has_component(self, name: str) -> bool:
        return name in self._components

    def get_component(self, name: str) -> Optional[Component]:
        return self._components.get(name)