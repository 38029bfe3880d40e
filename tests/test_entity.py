from overworld.components import MovementComponent, PositionComponent
from overworld.entity import Entity


def test_default_name():
    assert Entity().name == "default"


def test_given_name():
    assert Entity("Player").name == "Player"


def test_ids_increase():
    first = Entity()
    second = Entity()
    assert second.id == first.id + 1


def test_add_and_get_component():
    entity = Entity()
    position = PositionComponent(1, 2)
    entity.add_component(position)
    assert entity.has_component("PositionComponent")
    assert entity.get_component("PositionComponent") is position


def test_missing_component():
    entity = Entity()
    entity.add_component(MovementComponent())
    assert not entity.has_component("PositionComponent")
    assert entity.get_component("PositionComponent") is None


def test_first_component_of_a_name_is_kept():
    entity = Entity()
    first = PositionComponent(1, 1)
    entity.add_component(first)
    entity.add_component(PositionComponent(5, 5))
    assert entity.get_component("PositionComponent") is first


def test_components_view_is_a_copy():
    entity = Entity()
    entity.add_component(PositionComponent())
    view = entity.components
    view.clear()
    assert entity.has_component("PositionComponent")