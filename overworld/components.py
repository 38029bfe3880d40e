"""Components that entities are built from."""

from __future__ import annotations

import random
from typing import Any, Optional, Protocol

from overworld.constants import TILE_SIZE
from overworld.geometry import Rect, Vec2

COMPONENT_NAMES = (
    "PositionComponent",
    "MovementComponent",
    "PlayerMovementComponent",
    "PathfindingComponent",
    "FollowingComponent",
    "PatrolMovementComponent",
    "AIMovementComponent",
    "CollisionComponent",
    "RenderableComponent",
)


class _RandomSource(Protocol):
    def random(self) -> float: ...


class Component:
    """Base of all components; ``name`` keys the component on its entity."""

    name = ""


class PositionComponent(Component):
    """Position of an entity in tile coordinates."""

    name = "PositionComponent"

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.position = Vec2(x, y)

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position = Vec2(value, self.position.y)

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position = Vec2(self.position.x, value)

    def pixel_position(self) -> Vec2:
        return self.position * TILE_SIZE

    def move(self, movement: Vec2) -> None:
        self.position = self.position + movement


class MovementComponent(Component):
    """Velocity with acceleration, deceleration and a speed limit."""

    name = "MovementComponent"

    def __init__(
        self,
        acceleration: float = 0.0,
        max_speed: float = 1.0,
        x: float = 0.0,
        y: float = 0.0,
    ) -> None:
        self.velocity = Vec2(x, y)
        self.acceleration = acceleration
        self.max_speed = max_speed

    @property
    def movement(self) -> Vec2:
        return self.velocity

    def update_direction(self, x: float, y: float) -> None:
        self.velocity = Vec2(x, y)

    def _decelerate(self, speed: float) -> float:
        if speed > 0:
            return max(speed - self.acceleration, 0.0)
        if speed < 0:
            return min(speed + self.acceleration, 0.0)
        return speed

    def update(self, direction: Vec2) -> None:
        """Accelerate along a normalised direction, slowing idle axes."""
        vx = self.velocity.x + direction.x * self.acceleration
        vy = self.velocity.y + direction.y * self.acceleration

        if direction.x == 0:
            vx = self._decelerate(vx)
        if direction.y == 0:
            vy = self._decelerate(vy)

        velocity = Vec2(vx, vy)
        speed_squared = velocity.length_squared()
        if speed_squared > self.max_speed * self.max_speed:
            velocity = velocity * (self.max_speed / speed_squared ** 0.5)
        self.velocity = velocity


class PlayerMovementComponent(Component):
    """Which movement keys the player is holding."""

    name = "PlayerMovementComponent"

    def __init__(
        self, w: bool = False, a: bool = False, s: bool = False, d: bool = False
    ) -> None:
        self.w = w
        self.a = a
        self.s = s
        self.d = d

    def reset_all(self) -> None:
        self.w = self.a = self.s = self.d = False


class PathfindingComponent(Component):
    """A path of tiles to walk along, one tile at a time."""

    name = "PathfindingComponent"

    def __init__(self, tile_path: Optional[list[Vec2]] = None) -> None:
        self.tile_path = tile_path
        self.tile_path_index = 0

    def consult_tile_path(self, position: Vec2) -> Vec2:
        """Return the tile to head for, advancing once the current one is reached."""
        if self.tile_path is None:
            raise ValueError("no tile path to consult")
        tile = position.rounded()
        if (
            self.tile_path_index < len(self.tile_path) - 1
            and self.tile_path[self.tile_path_index] == tile
        ):
            self.tile_path_index += 1
        return self.tile_path[self.tile_path_index]

    def set_tile_path(self, path: Optional[list[Vec2]]) -> None:
        self.tile_path_index = 0
        self.tile_path = path


def _stuck_step(timer: float, previous: Vec2, position: Vec2, epsilon: float) -> float:
    if (previous - position).length() <= epsilon:
        return timer + 0.001
    return 0.0


class FollowingComponent(Component):
    """Follows another entity by id."""

    name = "FollowingComponent"

    def __init__(self, follow_id: int = 0) -> None:
        self.follow_id = follow_id
        self.stuck_timer = 0.0
        self.previous_position = Vec2()

    def check_if_stuck(self, position: Vec2) -> bool:
        self.stuck_timer = _stuck_step(
            self.stuck_timer, self.previous_position, position, 0.0001
        )
        self.previous_position = position
        return self.stuck_timer >= 1


class PatrolMovementComponent(PathfindingComponent):
    """Wanders to random destinations around a starting point."""

    name = "PatrolMovementComponent"

    def __init__(self, initial_position: Vec2, radius: float = 1.0) -> None:
        super().__init__()
        self.radius = radius
        self.initial_position = initial_position
        self.stuck_timer = 0.0
        self.previous_position = Vec2()
        self.destination = Vec2(-1, -1)

    def generate_destination(
        self,
        position: Vec2,
        map_size: Vec2,
        rng: Optional[_RandomSource] = None,
    ) -> Vec2:
        """Pick a new destination inside the map and return it."""
        rng = rng if rng is not None else random
        while True:
            rand_x = self.initial_position.x + (rng.random() - 0.5) * self.radius
            rand_y = self.initial_position.x + (rng.random() - 0.5) * self.radius
            destination = Vec2(rand_x + position.x, rand_y + position.y)
            if (
                0 <= destination.x <= map_size.x
                and 0 <= destination.y <= map_size.y
            ):
                break
        self.destination = destination
        self.stuck_timer = 0.0
        return destination

    def check_if_stuck(self, position: Vec2) -> bool:
        self.stuck_timer = _stuck_step(
            self.stuck_timer, self.previous_position, position, 0.001
        )
        self.previous_position = position
        return self.stuck_timer >= 1


class AIMovementComponent(PathfindingComponent):
    """Keeps time within a repeating movement cycle."""

    name = "AIMovementComponent"

    def __init__(self, cycle_length: float = 1.0) -> None:
        super().__init__()
        self.cycle_length = cycle_length
        self.current_time = 0.0

    def update(self, delta_time: float) -> None:
        self.current_time += delta_time
        if self.current_time >= self.cycle_length:
            self.current_time -= self.cycle_length


class CollisionComponent(Component):
    """A collision box, sized in pixels and stored in tile units."""

    name = "CollisionComponent"

    def __init__(self, width: float, height: float, collidable: bool = True) -> None:
        self.center = Vec2()
        self.size = Vec2(width / TILE_SIZE, height / TILE_SIZE)
        self.collision_box = Rect(Vec2(0, 0), self.size)
        self.collidable = collidable

    def update_collision_box(self, position: PositionComponent) -> None:
        self.collision_box = Rect(position.position, self.collision_box.size)


class RenderableComponent(Component):
    """A textured sprite placed at an entity's position."""

    name = "RenderableComponent"

    def __init__(
        self,
        texture: Any,
        image_name: str,
        position: Optional[Vec2] = None,
        offsets: Optional[Vec2] = None,
        texture_size: Optional[Vec2] = None,
    ) -> None:
        self.texture = texture
        self.image_name = image_name
        self.offsets = offsets if offsets is not None else Vec2()
        self.texture_size = texture_size if texture_size is not None else Vec2()
        start = position if position is not None else Vec2()
        self.sprite_position = self._place(start)

    def _place(self, position: Vec2) -> Vec2:
        return position * TILE_SIZE - self.offsets / 2.0

    @property
    def bounds(self) -> Rect:
        """The sprite's on-screen rectangle in pixels."""
        return Rect(self.sprite_position, self.texture_size)

    def update_position(self, position: PositionComponent) -> None:
        self.sprite_position = self._place(position.position)