import pytest

from gridrogue.components import (
    AITag,
    BlocksMovement,
    ComponentType,
    CorpseTag,
    Health,
    Name,
    PlayerTag,
    Point,
    Renderable,
)


def test_point_addition_is_componentwise_and_commutative():
    a = Point(3, -2)
    b = Point(-1, 5)
    total = a + b
    assert total == b + a
    assert total.x == a.x + b.x
    assert total.y == a.y + b.y


def test_point_default_is_origin_and_neutral():
    p = Point(7, 9)
    assert p + Point() == p


def test_point_multiplication_matches_repeated_addition():
    p = Point(2, -3)
    assert p * 3 == p + p + p
    assert p * 0 == Point()


def test_point_rejects_non_point_addition():
    with pytest.raises(TypeError):
        Point(1, 1) + (1, 1)


def test_point_is_hashable_and_immutable():
    p = Point(1, 2)
    assert {p: "here"}[Point(1, 2)] == "here"
    with pytest.raises(AttributeError):
        p.x = 5


def test_component_type_values_match_names():
    assert ComponentType.POSITION.value == "Position"
    assert ComponentType.PATHFINDING.value == "PathfindingComponent"
    assert ComponentType("Health") is ComponentType.HEALTH
    assert str(ComponentType.AI_TAG) == "AITag"


def test_health_full_sets_both_values():
    h = Health.full(30)
    assert h.current_hp == 30
    assert h.max_hp == 30
    assert not h.is_dead()


@pytest.mark.parametrize("hp, dead", [(0, True), (-4, True), (1, False)])
def test_health_is_dead(hp, dead):
    assert Health(current_hp=hp, max_hp=10).is_dead() is dead


def test_name_and_renderable_fields():
    assert Name("Orc").name == "Orc"
    r = Renderable(glyph="%", color=3)
    assert (r.glyph, r.color, r.tile_name) == ("%", 3, "")


def test_tags_compare_equal_within_kind():
    assert PlayerTag() == PlayerTag()
    assert AITag() == AITag()
    assert CorpseTag() == CorpseTag()
    assert BlocksMovement() != PlayerTag()