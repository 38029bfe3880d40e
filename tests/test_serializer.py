import pytest

from overworld.components import (
    AIMovementComponent,
    CollisionComponent,
    FollowingComponent,
    MovementComponent,
    PatrolMovementComponent,
    PlayerMovementComponent,
    PositionComponent,
    RenderableComponent,
)
from overworld.constants import TILE_SIZE
from overworld.factory import ComponentFactory
from overworld.geometry import Vec2
from overworld.serializer import ComponentSerializer, SerializationError


@pytest.fixture
def serializer():
    return ComponentSerializer()


def test_position_round_trip(serializer):
    original = PositionComponent(4.5, 7.25)
    encoded = serializer.encode_component(original, "PositionComponent")
    rebuilt = ComponentFactory(lambda name: None).create_component(
        "PositionComponent", encoded
    )
    assert rebuilt.position == original.position


def test_collision_encoding(serializer):
    component = CollisionComponent(16, 48)
    encoded = serializer.encode_component(component, "CollisionComponent")
    assert set(encoded) == {"centerX", "centerY", "width", "height"}
    assert encoded["centerX"] == component.center.x
    assert encoded["width"] * TILE_SIZE == 16
    assert encoded["height"] * TILE_SIZE == 48


def test_renderable_encoding(serializer):
    component = RenderableComponent(None, "player")
    assert serializer.encode_component(component, "RenderableComponent") == {
        "texture": "player"
    }


@pytest.mark.parametrize(
    "component",
    [
        MovementComponent(),
        PlayerMovementComponent(),
        PatrolMovementComponent(Vec2()),
        AIMovementComponent(),
    ],
)
def test_unsupported_components_raise(serializer, component):
    with pytest.raises(SerializationError):
        serializer.encode_component(component, component.name)


def test_unknown_component_raises(serializer):
    with pytest.raises(SerializationError):
        serializer.encode_component(FollowingComponent(), "FollowingComponent")


def test_placeholder_names_encode_empty(serializer):
    assert serializer.encode_component(PositionComponent(), "newone") == {}


def test_position_outline(serializer):
    assert serializer.component_outline("PositionComponent") == {
        "x": "int",
        "y": "int",
    }


def test_collision_outline_fields(serializer):
    outline = serializer.component_outline("CollisionComponent")
    assert list(outline) == ["centerX", "centerY", "width", "height"]
    assert set(outline.values()) == {"float"}


def test_missing_outline_raises(serializer):
    with pytest.raises(SerializationError):
        serializer.component_outline("FollowingComponent")


def test_outline_is_a_copy(serializer):
    outline = serializer.component_outline("PositionComponent")
    outline["z"] = "int"
    assert "z" not in serializer.component_outline("PositionComponent")