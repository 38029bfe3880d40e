"""Builds components from their names and JSON-like data."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from overworld.components import (
    CollisionComponent,
    Component,
    FollowingComponent,
    MovementComponent,
    PatrolMovementComponent,
    PositionComponent,
    RenderableComponent,
)
from overworld.geometry import Vec2


class UnknownComponentError(LookupError):
    """Raised when a component name cannot be built."""


class ComponentFactory:
    """Creates components; textures are looked up through ``texture_loader``."""

    def __init__(self, texture_loader: Callable[[str], Any]) -> None:
        self.texture_loader = texture_loader

    def create_component(self, name: str, data: Mapping[str, Any]) -> Component:
        if name == "PositionComponent":
            return PositionComponent(data["x"], data["y"])
        if name == "MovementComponent":
            return MovementComponent(data["acceleration"], data["velocity"])
        if name == "FollowingComponent":
            return FollowingComponent(data["followId"])
        if name == "PatrolMovementComponent":
            return PatrolMovementComponent(Vec2(data["x"], data["y"]), data["radius"])
        if name == "CollisionComponent":
            return CollisionComponent(int(data["width"]), int(data["height"]))
        if name == "RenderableComponent":
            texture_name = data["texture"]
            texture = self.texture_loader(texture_name)
            size = getattr(texture, "size", None)
            return RenderableComponent(
                texture,
                texture_name,
                Vec2(data["posX"], data["posY"]),
                Vec2(data["offsetX"], data["offsetY"]),
                size if isinstance(size, Vec2) else None,
            )
        raise UnknownComponentError(f"cannot create component {name!r}")