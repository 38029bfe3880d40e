"""Application state shared between the engine's systems."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from overworld.constants import MAX_ZOOM, MIN_ZOOM
from overworld.geometry import Vec2


class InputMode(Enum):
    GAMEPLAY = auto()
    MAPMAKER = auto()


class MouseEventType(Enum):
    NONE = auto()
    LEFTCLICK = auto()
    MIDDLECLICK = auto()
    RIGHTCLICK = auto()
    MOVE = auto()


class Scene(Enum):
    MAP = auto()
    BATTLE = auto()


class Control(Enum):
    GAMEPLAY = auto()
    MENU = auto()
    TEXTBOX = auto()


@dataclass
class GameState:
    """Which scene is shown and what currently receives input."""

    scene: Scene = Scene.MAP
    control: Control = Control.GAMEPLAY


@dataclass
class MouseEvent:
    """The latest mouse event and which buttons are held."""

    type: MouseEventType = MouseEventType.NONE
    location: Vec2 = field(default_factory=Vec2)
    left: bool = False
    middle: bool = False
    right: bool = False


@dataclass
class ApplicationState:
    """Flags and values the systems use to talk to the application."""

    mode: InputMode = InputMode.GAMEPLAY
    quit_game: bool = False
    state: GameState = field(default_factory=GameState)
    debug_mode: bool = True

    update_main_view_zoom: bool = False
    main_view_zoom: float = 1.0

    update_main_view_location: bool = False
    main_view_location: Vec2 = field(default_factory=Vec2)

    transition_map: bool = False
    new_map_id: int = 0
    new_map_entrance: int = 0

    start_battle: bool = False
    last_player_location: Vec2 = field(default_factory=lambda: Vec2(0, 0))

    def clamp_zoom(self) -> float:
        """Keep the main view zoom within the allowed range and return it."""
        self.main_view_zoom = min(max(self.main_view_zoom, MIN_ZOOM), MAX_ZOOM)
        return self.main_view_zoom