# overworld

The core of a tile-based overworld role-playing game engine, as a plain
Python library with no third-party dependencies. World coordinates are
measured in tiles; one tile is `TILE_SIZE` (32) pixels.

## Modules

- `overworld.geometry` – `Vec2` (immutable 2D vector with `length`,
  `length_squared`, `rounded`, `+`, `-`, `*` and `/`) and `Rect`
  (top-left `position`, `size`, `bottom()`).
- `overworld.constants` – tile size, tick rate, zoom limits and step,
  player speed, acceleration and size, and the `Color` values used for
  debug tile highlights (`MAP_COLLISION_TILE`, `MAP_TRANSITION_TILE`,
  `MAP_SLIPPERY_TILE`).
- `overworld.state` – `ApplicationState` (with `clamp_zoom()`, which keeps
  `main_view_zoom` between `MIN_ZOOM` and `MAX_ZOOM`), `GameState` with its
  `Scene` and `Control`, `InputMode`, `MouseEvent` and `MouseEventType`.
- `overworld.components` – `PositionComponent`, `MovementComponent`
  (acceleration, deceleration on idle axes, speed limit),
  `PlayerMovementComponent`, `PathfindingComponent`, `FollowingComponent`,
  `PatrolMovementComponent`, `AIMovementComponent`, `CollisionComponent`
  (sized in pixels, stored in tiles) and `RenderableComponent`.
- `overworld.entity` – `Entity`, a named object with a unique id holding
  components by name. Adding a second component of the same name keeps the
  first.
- `overworld.factory` – `ComponentFactory` builds components from a name
  and a dictionary of map data. Names it cannot build raise
  `UnknownComponentError`.
- `overworld.serializer` – `ComponentSerializer.encode_component` turns
  position, collision and renderable components back into dictionaries;
  `component_outline` lists the fields a component needs. Components it
  cannot encode, and names without an outline, raise `SerializationError`.
- `overworld.entity_manager` – `EntityManager` keeps entities by id,
  tracks the player's mover, loads entities from map data
  (`load_all_entities`, returning the first new id or -1), unloads them
  (`unload_map`), gives the draw order of renderable entities
  (`render_order`, by sprite bottom edge) and the pixel-space line segments
  outlining collidable boxes (`debug_outline_lines`). Unknown component
  names in map data are logged and skipped.
- `overworld.input` – event types (`Closed`, `Resized`, `KeyPressed`,
  `KeyReleased`, `MouseButtonPressed`, `MouseButtonReleased`, `MouseMoved`,
  `TextEntered`), `Key`, `MouseButton`, `MenuCommand`, the `MenuManager`
  protocol and `InputHandler`, which turns events into player movement
  flags, zoom changes, menu loading and closing, textbox input and map-maker
  mouse state.
- `overworld.battle` – `Pokemon` (its id selects a texture name) and
  `Trainer`.
- `overworld.savegame` – `has_previous_save`, `reset_save_data` (writes a
  fresh save file, by default at `../save.data`) and `center_in_tile`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from overworld.components import MovementComponent, PlayerMovementComponent, PositionComponent
from overworld.entity import Entity
from overworld.entity_manager import EntityManager
from overworld.factory import ComponentFactory
from overworld.geometry import Vec2

factory = ComponentFactory(texture_loader=lambda name: name)
manager = EntityManager(factory)

player = Entity("Player")
player.add_component(PositionComponent(10.0, 10.0))
player.add_component(PlayerMovementComponent())
player.add_component(MovementComponent(0.5, 6.0))
manager.add_entity(player)

movement = player.get_component("MovementComponent")
movement.update(Vec2(1.0, 0.0))
print(movement.velocity)  # Vec2(x=0.5, y=0.0)

first_id = manager.load_all_entities([
    {"name": "tree", "components": {"PositionComponent": {"x": 3, "y": 4}}},
])
```

`InputHandler` needs an `ApplicationState`, an `EntityManager`, an object
implementing the `MenuManager` protocol, and a function mapping a window
pixel position to world coordinates.

## What it does not do

The package has no window, rendering, audio, tile maps, menus or game
loop, and no command to start a game or a map editor. Textures are whatever
the `texture_loader` callable returns; drawing and map loading are left to
the program that uses the library.