import logging

import pytest

from gridrogue.ai import AIBehavior, AIComponent, AIState
from gridrogue.character import Experience, Stats
from gridrogue.components import (
    AITag,
    ComponentType,
    CorpseTag,
    Health,
    Name,
    Point,
    Renderable,
)
from gridrogue.fov import FOV
from gridrogue.world import (
    ComponentMissingError,
    EntityNotFoundError,
    World,
    component_class,
    component_type_of,
)


@pytest.fixture
def world():
    return World()


def test_entity_ids_start_at_one_and_increase(world):
    first = world.add_entity()
    second = world.add_entity()
    assert first == 1
    assert second == first + 1
    assert world.all_entities() == [first, second]


def test_add_entity_with_id_advances_counter(world):
    world.add_entity_with_id(10)
    assert 10 in world
    assert world.add_entity() == 11


def test_add_entity_with_existing_id_raises(world):
    eid = world.add_entity()
    with pytest.raises(ValueError):
        world.add_entity_with_id(eid)


def test_add_entity_with_lower_id_keeps_counter(world):
    world.add_entity_with_id(5)
    world.add_entity_with_id(2)
    assert world.add_entity() == 6


def test_remove_entity_drops_components(world):
    eid = world.add_entity()
    world.add_component(eid, ComponentType.HEALTH, Health.full(5))
    world.remove_entity(eid)
    assert not world.entity_exists(eid)
    assert not world.has_component(eid, ComponentType.HEALTH)
    assert world.entities_with_component(ComponentType.HEALTH) == []


def test_add_component_to_missing_entity_is_ignored(world):
    world.add_component(99, ComponentType.HEALTH, Health.full(5))
    assert not world.has_component(99, ComponentType.HEALTH)
    assert 99 not in world


def test_add_components_dispatches_by_class(world):
    eid = world.add_entity()
    fov = FOV(3, 10, 10)
    world.add_components(
        eid, Point(2, 3), Name("orc"), fov, Health.full(4), AITag()
    )
    assert world.get(eid, ComponentType.POSITION) == Point(2, 3)
    assert world.name(eid) == "orc"
    assert world.get(eid, ComponentType.FOV) is fov
    assert world.get(eid, ComponentType.HEALTH) == Health.full(4)
    assert world.has_component(eid, ComponentType.AI_TAG)


def test_add_components_warns_on_unknown(world, caplog):
    eid = world.add_entity()
    with caplog.at_level(logging.WARNING):
        world.add_components(eid, object(), CorpseTag())
    assert "Unknown component type" in caplog.text
    assert world.has_component(eid, ComponentType.CORPSE_TAG)


def test_get_returns_default_for_wrong_class(world):
    eid = world.add_entity()
    world.add_component(eid, ComponentType.HEALTH, "not health")
    assert world.get(eid, ComponentType.HEALTH, "fallback") == "fallback"
    assert world.has_component(eid, ComponentType.HEALTH)


def test_get_or_zero_values(world):
    eid = world.add_entity()
    assert world.get_or_zero(eid, ComponentType.POSITION) == Point()
    assert world.get_or_zero(eid, ComponentType.HEALTH) == Health()
    assert world.get_or_zero(eid, ComponentType.STATS) == Stats(0, 0, 0, 0, 0, 0)
    assert world.get_or_zero(eid, ComponentType.EXPERIENCE) == Experience(
        0, 0, 0, 0, 0, 0
    )
    assert world.get_or_zero(eid, ComponentType.FOV) is None
    assert world.get_or_zero(eid, ComponentType.PATHFINDING) is None
    assert world.get_or_zero(eid, ComponentType.TURN_ACTOR).alive is False


def test_get_or_zero_returns_stored(world):
    eid = world.add_entity()
    stats = Stats()
    world.add_component(eid, ComponentType.STATS, stats)
    assert world.get_or_zero(eid, ComponentType.STATS) is stats


def test_get_option(world):
    eid = world.add_entity()
    assert world.get_option(eid, ComponentType.HEALTH).is_none()
    world.add_component(eid, ComponentType.HEALTH, Health.full(7))
    assert world.get_option(eid, ComponentType.HEALTH).unwrap() == Health.full(7)


def test_name_empty_when_missing(world):
    eid = world.add_entity()
    assert world.name(eid) == ""


def test_move_entity(world):
    eid = world.add_entity()
    world.move_entity(eid, Point(4, 1))
    assert world.get(eid, ComponentType.POSITION) == Point(4, 1)


def test_move_missing_entity_raises(world):
    with pytest.raises(EntityNotFoundError):
        world.move_entity(42, Point(1, 1))


def test_update_component_mutates(world):
    eid = world.add_entity()
    world.add_component(eid, ComponentType.HEALTH, Health.full(10))

    def hurt(health):
        health.current_hp -= 3

    world.update_component(eid, ComponentType.HEALTH, hurt)
    assert world.get(eid, ComponentType.HEALTH) == Health(current_hp=7, max_hp=10)


def test_update_component_replacement(world):
    eid = world.add_entity()
    world.add_component(eid, ComponentType.POSITION, Point(1, 1))
    world.update_component(eid, ComponentType.POSITION, lambda p: p + Point(1, 0))
    assert world.get(eid, ComponentType.POSITION) == Point(2, 1)


def test_update_component_failure_leaves_state(world):
    eid = world.add_entity()
    world.add_component(eid, ComponentType.HEALTH, Health.full(10))

    def broken(health):
        health.current_hp = 0
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        world.update_component(eid, ComponentType.HEALTH, broken)
    assert world.get(eid, ComponentType.HEALTH) == Health.full(10)


def test_update_component_errors(world):
    with pytest.raises(EntityNotFoundError):
        world.update_component(1, ComponentType.HEALTH, lambda h: None)
    eid = world.add_entity()
    with pytest.raises(ComponentMissingError):
        world.update_component(eid, ComponentType.HEALTH, lambda h: None)
    other = world.add_entity()
    world.add_component(other, ComponentType.HEALTH, Health.full(1))
    with pytest.raises(ComponentMissingError):
        world.update_component(eid, ComponentType.HEALTH, lambda h: None)


def test_update_ai_component(world):
    eid = world.add_entity()
    world.add_component(
        eid, ComponentType.AI_COMPONENT, AIComponent.create(AIBehavior.GUARD, Point())
    )

    def chase(ai):
        ai.state = AIState.CHASING

    world.update_ai_component(eid, chase)
    assert world.get(eid, ComponentType.AI_COMPONENT).state == AIState.CHASING


def test_update_ai_component_wrong_type(world):
    eid = world.add_entity()
    world.add_component(eid, ComponentType.AI_COMPONENT, Health())
    with pytest.raises(TypeError):
        world.update_ai_component(eid, lambda ai: None)


def test_update_ai_component_missing(world):
    eid = world.add_entity()
    with pytest.raises(ComponentMissingError):
        world.update_ai_component(eid, lambda ai: None)


def test_remove_components(world):
    eid = world.add_entity()
    world.add_components(eid, Health.full(3), AITag(), Renderable(glyph="o"))
    world.remove_components(eid, ComponentType.HEALTH, ComponentType.AI_TAG)
    assert not world.has_component(eid, ComponentType.HEALTH)
    assert not world.has_component(eid, ComponentType.AI_TAG)
    assert world.has_component(eid, ComponentType.RENDERABLE)


def test_entities_with_component(world):
    a = world.add_entity()
    b = world.add_entity()
    world.add_entity()
    world.add_component(a, ComponentType.AI_TAG, AITag())
    world.add_component(b, ComponentType.AI_TAG, AITag())
    assert sorted(world.entities_with_component(ComponentType.AI_TAG)) == [a, b]


def test_component_class_and_type_of():
    assert component_class(ComponentType.HEALTH) is Health
    assert component_class("Position") is Point
    assert component_class("Bogus") is None
    assert component_type_of(Name("x")) == ComponentType.NAME
    assert component_type_of(FOV(1, 2, 2)) == ComponentType.FOV
    assert component_type_of("plain string") is None