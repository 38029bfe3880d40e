"""Turns window events into changes to the application, player and menus."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Protocol, Union

from overworld.components import PlayerMovementComponent
from overworld.constants import ZOOM_INCREMENT
from overworld.entity import Entity
from overworld.entity_manager import EntityManager
from overworld.geometry import Vec2
from overworld.state import (
    ApplicationState,
    Control,
    InputMode,
    MouseEvent,
    MouseEventType,
)

log = logging.getLogger(__name__)


class Key(Enum):
    """Keyboard keys the engine reacts to."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    B = auto()
    E = auto()
    P = auto()
    HYPHEN = auto()
    EQUAL = auto()
    ESCAPE = auto()
    SPACE = auto()
    CAPSLOCK = auto()


class MouseButton(Enum):
    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()


class MenuCommand(Enum):
    """What a key press means while a menu is open."""

    NONE = auto()
    CLOSE_MENU = auto()
    NAVIGATE_UP = auto()
    NAVIGATE_DOWN = auto()
    NAVIGATE_LEFT = auto()
    NAVIGATE_RIGHT = auto()
    SELECT_OPTION = auto()


@dataclass(frozen=True)
class Closed:
    """The window was asked to close."""


@dataclass(frozen=True)
class Resized:
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class KeyPressed:
    key: Key


@dataclass(frozen=True)
class KeyReleased:
    key: Key


@dataclass(frozen=True)
class MouseButtonPressed:
    button: MouseButton
    position: Vec2 = Vec2()


@dataclass(frozen=True)
class MouseButtonReleased:
    button: MouseButton
    position: Vec2 = Vec2()


@dataclass(frozen=True)
class MouseMoved:
    position: Vec2 = Vec2()


@dataclass(frozen=True)
class TextEntered:
    unicode: str


Event = Union[
    Closed,
    Resized,
    KeyPressed,
    KeyReleased,
    MouseButtonPressed,
    MouseButtonReleased,
    MouseMoved,
    TextEntered,
]


class MenuManager(Protocol):
    """What the input handler needs from the menu system."""

    def load_menu(self, name: str) -> None: ...

    def unload_menu(self) -> None: ...

    def query_key_input(self, event: KeyPressed) -> MenuCommand: ...

    def execute_menu_command(self, command: MenuCommand) -> None: ...

    def process_mouse_event(self, mouse_event: MouseEvent) -> None: ...

    def queue_interactable_location_update(self) -> None: ...

    def queue_frame_location_update(self) -> None: ...

    def textbox_input(self, character: str) -> None: ...


_MOVEMENT_KEYS = {Key.W: "w", Key.A: "a", Key.S: "s", Key.D: "d"}

_NAVIGATION_COMMANDS = frozenset(
    {
        MenuCommand.NAVIGATE_UP,
        MenuCommand.NAVIGATE_DOWN,
        MenuCommand.NAVIGATE_LEFT,
        MenuCommand.NAVIGATE_RIGHT,
        MenuCommand.SELECT_OPTION,
    }
)


class InputHandler:
    """Routes events by the current control state and the application mode.

    ``to_world`` maps a pixel position in the window to world coordinates.
    """

    def __init__(
        self,
        state: ApplicationState,
        entity_manager: EntityManager,
        menu_manager: MenuManager,
        to_world: Callable[[Vec2], Vec2],
    ) -> None:
        self.state = state
        self.entity_manager = entity_manager
        self.menu_manager = menu_manager
        self.to_world = to_world
        self.mover: Optional[Entity] = None
        self.mouse_event = MouseEvent()
        # set when a menu was just closed so the same key does not reopen one
        self._unloaded_map = False

    def set_mover(self) -> bool:
        """Take the mover from the entity manager; report whether there is one."""
        self.mover = self.entity_manager.mover
        return self.mover is not None

    def process_input(self, event: Event) -> None:
        if isinstance(event, Closed):
            self.state.quit_game = True
            return

        self.mouse_event.type = MouseEventType.NONE
        self._update_mouse_location(event)
        self._unloaded_map = False

        control = self.state.state.control
        if control is Control.GAMEPLAY:
            self._process_gameplay(event)
        elif control is Control.MENU:
            self._process_menu(event)
        elif control is Control.TEXTBOX:
            self._process_textbox(event)

        if self.state.mode is InputMode.MAPMAKER:
            self._process_mapmaker(event)

    # helpers

    def _player_movement(self) -> PlayerMovementComponent:
        if self.mover is None:
            raise RuntimeError("no mover entity to receive input")
        movement = self.mover.get_component("PlayerMovementComponent")
        if not isinstance(movement, PlayerMovementComponent):
            raise RuntimeError("mover has no PlayerMovementComponent")
        return movement

    def _update_mouse_location(self, event: Event) -> None:
        if isinstance(event, (MouseButtonPressed, MouseButtonReleased, MouseMoved)):
            pixel = event.position
        else:
            pixel = Vec2(0, 0)
        self.mouse_event.location = self.to_world(pixel)

    def _change_state(self, control: Control) -> None:
        self._player_movement().reset_all()
        self.state.state.control = control

    # gameplay

    def _process_gameplay(self, event: Event) -> None:
        if not self.set_mover():
            log.error("mover not set")
        if isinstance(event, KeyPressed):
            self._gameplay_key_pressed(event)
        elif isinstance(event, KeyReleased):
            self._gameplay_key_released(event)

    def _gameplay_key_pressed(self, event: KeyPressed) -> None:
        movement = self._player_movement()
        key = event.key
        if key in _MOVEMENT_KEYS:
            setattr(movement, _MOVEMENT_KEYS[key], True)
        elif key is Key.HYPHEN:
            self.state.main_view_zoom += ZOOM_INCREMENT
            self.state.update_main_view_zoom = True
        elif key is Key.EQUAL:
            self.state.main_view_zoom -= ZOOM_INCREMENT
            self.state.update_main_view_zoom = True
        elif key in (Key.P, Key.ESCAPE):
            self.menu_manager.load_menu("Pause")
            self._change_state(Control.MENU)
        elif key is Key.B:
            self.menu_manager.load_menu("Battle")
            self._change_state(Control.MENU)

    def _gameplay_key_released(self, event: KeyReleased) -> None:
        movement = self._player_movement()
        if event.key in _MOVEMENT_KEYS:
            setattr(movement, _MOVEMENT_KEYS[event.key], False)

    # menus

    def _process_menu(self, event: Event) -> None:
        if isinstance(event, Resized):
            self.menu_manager.queue_interactable_location_update()
            self.menu_manager.queue_frame_location_update()
        elif isinstance(event, KeyPressed):
            self._menu_key_pressed(event)
        elif isinstance(event, MouseButtonPressed):
            self._menu_mouse_pressed(event)
        elif isinstance(event, MouseButtonReleased):
            if event.button is MouseButton.LEFT:
                self.mouse_event.left = False
        elif isinstance(event, MouseMoved):
            self.menu_manager.process_mouse_event(self.mouse_event)

    def _menu_key_pressed(self, event: KeyPressed) -> None:
        command = self.menu_manager.query_key_input(event)
        if command is MenuCommand.CLOSE_MENU:
            self.menu_manager.unload_menu()
            self._change_state(Control.GAMEPLAY)
            self._unloaded_map = True
        elif command in _NAVIGATION_COMMANDS:
            self.menu_manager.execute_menu_command(command)

    def _menu_mouse_pressed(self, event: MouseButtonPressed) -> None:
        if event.button is MouseButton.LEFT:
            self.mouse_event.left = True
        self.menu_manager.process_mouse_event(self.mouse_event)
        # leaving the menu means its release event will never arrive
        if self.state.state.control is not Control.MENU:
            self.mouse_event.left = False

    def _process_textbox(self, event: Event) -> None:
        if isinstance(event, TextEntered):
            self.menu_manager.textbox_input(event.unicode)

    # map maker

    def _process_mapmaker(self, event: Event) -> None:
        if isinstance(event, KeyPressed):
            if event.key is not Key.E:
                return
            if self.state.state.control is Control.MENU or self._unloaded_map:
                return
            self.menu_manager.load_menu("Entity")
            self._change_state(Control.MENU)
        elif isinstance(event, MouseButtonPressed):
            self._set_button(event.button, True)
            self.mouse_event.type = {
                MouseButton.LEFT: MouseEventType.LEFTCLICK,
                MouseButton.MIDDLE: MouseEventType.MIDDLECLICK,
                MouseButton.RIGHT: MouseEventType.RIGHTCLICK,
            }[event.button]
        elif isinstance(event, MouseButtonReleased):
            self._set_button(event.button, False)
        elif isinstance(event, MouseMoved):
            self.mouse_event.type = MouseEventType.MOVE

    def _set_button(self, button: MouseButton, held: bool) -> None:
        if button is MouseButton.LEFT:
            self.mouse_event.left = held
        elif button is MouseButton.MIDDLE:
            self.mouse_event.middle = held
        else:
            self.mouse_event.right = held