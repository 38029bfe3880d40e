import pytest

from overworld.constants import MAX_ZOOM, MIN_ZOOM
from overworld.geometry import Vec2
from overworld.state import (
    ApplicationState,
    Control,
    GameState,
    InputMode,
    MouseEvent,
    MouseEventType,
    Scene,
)


def test_clamp_zoom_caps_at_maximum():
    state = ApplicationState(main_view_zoom=MAX_ZOOM + 1.0)
    assert state.clamp_zoom() == MAX_ZOOM
    assert state.main_view_zoom == MAX_ZOOM


def test_clamp_zoom_raises_to_minimum():
    state = ApplicationState(main_view_zoom=MIN_ZOOM - 0.3)
    assert state.clamp_zoom() == MIN_ZOOM
    assert state.main_view_zoom == MIN_ZOOM


@pytest.mark.parametrize("zoom", [MIN_ZOOM, 1.0, MAX_ZOOM])
def test_clamp_zoom_leaves_values_in_range(zoom):
    state = ApplicationState(main_view_zoom=zoom)
    assert state.clamp_zoom() == zoom


def test_application_state_defaults():
    state = ApplicationState(mode=InputMode.MAPMAKER)
    assert state.mode is InputMode.MAPMAKER
    assert state.debug_mode is True
    assert state.main_view_zoom == 1.0
    assert state.quit_game is False
    assert state.main_view_location == Vec2(0, 0)
    assert state.state == GameState(Scene.MAP, Control.GAMEPLAY)


def test_states_do_not_share_nested_objects():
    first = ApplicationState()
    second = ApplicationState()
    first.state.control = Control.MENU
    assert second.state.control is Control.GAMEPLAY


def test_mouse_event_defaults():
    event = MouseEvent()
    assert event.type is MouseEventType.NONE
    assert (event.left, event.middle, event.right) == (False, False, False)
    assert event.location == Vec2()