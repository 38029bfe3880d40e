"""Owns the live entities and the bookkeeping around them."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from overworld.components import (
    CollisionComponent,
    PositionComponent,
    RenderableComponent,
)
from overworld.constants import TILE_SIZE
from overworld.entity import Entity
from overworld.factory import ComponentFactory, UnknownComponentError
from overworld.geometry import Vec2

log = logging.getLogger(__name__)


class EntityManager:
    """Keeps entities by id, tracks the mover and the renderable entities."""

    def __init__(self, factory: ComponentFactory) -> None:
        self.factory = factory
        self._entities: dict[int, Entity] = {}
        self._renderables: list[Entity] = []
        self.mover: Optional[Entity] = None

    @property
    def entities(self) -> dict[int, Entity]:
        return self._entities

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    def add_entity(self, entity: Entity) -> int:
        """Register an entity and return its id."""
        if entity.has_component("PlayerMovementComponent"):
            if self.mover is not None:
                log.error("multiple player movers registered")
            self.mover = entity
        if entity.has_component("RenderableComponent"):
            self._renderables.append(entity)
        self._entities.setdefault(entity.id, entity)
        self._create_collision_boxes()
        return entity.id

    def remove_entity(self, entity_id: int) -> None:
        entity = self._entities[entity_id]
        if entity.has_component("RenderableComponent"):
            self._renderables = [e for e in self._renderables if e is not entity]
        del self._entities[entity_id]

    def load_all_entities(self, entity_data: Iterable[Mapping[str, Any]]) -> int:
        """Build and register entities from map data; return the first id, or -1."""
        first_entity = -1
        for description in entity_data:
            entity = Entity(description["name"])
            for name, data in description.get("components", {}).items():
                try:
                    entity.add_component(self.factory.create_component(name, data))
                except UnknownComponentError as error:
                    log.error("%s", error)
            entity_id = self.add_entity(entity)
            if first_entity == -1:
                first_entity = entity_id
        self._create_collision_boxes()
        self._initialize_renderable_positions()
        return first_entity

    def unload_map(self, first_entity: int, size: int) -> None:
        if first_entity == -1:
            return
        for entity_id in range(first_entity, first_entity + size):
            self.remove_entity(entity_id)

    def get_entity(self, entity_id: int) -> Entity:
        try:
            return self._entities[entity_id]
        except KeyError:
            raise KeyError(f"no entity with id {entity_id}") from None

    def entity_exists(self, entity_id: int) -> bool:
        return entity_id in self._entities

    def render_order(self) -> list[Entity]:
        """Renderable entities sorted by the bottom edge of their sprites."""
        self._renderables.sort(key=self._sprite_bottom)
        return list(self._renderables)

    def debug_outline_lines(self) -> list[tuple[Vec2, Vec2]]:
        """Pixel-space line segments outlining every collidable collision box."""
        lines: list[tuple[Vec2, Vec2]] = []
        for entity in self._entities.values():
            collision = entity.get_component("CollisionComponent")
            if not isinstance(collision, CollisionComponent) or not collision.collidable:
                continue
            box = collision.collision_box
            top_left = box.position * TILE_SIZE
            bottom_left = Vec2(box.position.x, box.position.y + box.size.y) * TILE_SIZE
            bottom_right = (box.position + box.size) * TILE_SIZE
            top_right = Vec2(box.position.x + box.size.x, box.position.y) * TILE_SIZE
            lines.extend(
                [
                    (top_left, bottom_left),
                    (bottom_left, bottom_right),
                    (bottom_right, top_right),
                    (top_right, top_left),
                ]
            )
        return lines

    @staticmethod
    def _sprite_bottom(entity: Entity) -> float:
        renderable = entity.get_component("RenderableComponent")
        assert isinstance(renderable, RenderableComponent)
        return renderable.bounds.bottom()

    def _create_collision_boxes(self) -> None:
        for entity in self._entities.values():
            collision = entity.get_component("CollisionComponent")
            position = entity.get_component("PositionComponent")
            if isinstance(collision, CollisionComponent) and isinstance(
                position, PositionComponent
            ):
                collision.update_collision_box(position)

    def _initialize_renderable_positions(self) -> None:
        for entity in self._entities.values():
            renderable = entity.get_component("RenderableComponent")
            position = entity.get_component("PositionComponent")
            if isinstance(renderable, RenderableComponent) and isinstance(
                position, PositionComponent
            ):
                renderable.update_position(position)