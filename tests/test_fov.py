import pytest

from gridrogue.components import Point
from gridrogue.fov import FOV


def test_new_fov_has_nothing_visible():
    fov = FOV(10, 80, 24)
    assert fov.fov_range == 10
    assert fov.visible_points(80) == []
    assert not fov.is_visible(Point(0, 0), 80)


def test_set_and_query_visible():
    fov = FOV(5, 80, 24)
    fov.set_visible(Point(3, 4), 80)
    assert fov.is_visible(Point(3, 4), 80)
    assert not fov.is_visible(Point(4, 3), 80)


def test_word_boundary():
    fov = FOV(5, 64, 4)
    fov.set_visible(Point(63, 0), 64)
    fov.set_visible(Point(0, 1), 64)
    assert fov.is_visible(Point(63, 0), 64)
    assert fov.is_visible(Point(0, 1), 64)
    assert fov.visible_points(64) == [Point(63, 0), Point(0, 1)]


@pytest.mark.parametrize("p", [Point(-1, 0), Point(0, -1), Point(80, 0), Point(0, 1000)])
def test_out_of_bounds_ignored(p):
    fov = FOV(5, 80, 24)
    fov.set_visible(p, 80)
    assert not fov.is_visible(p, 80)
    assert fov.visible_points(80) == []


def test_clear_visible():
    fov = FOV(5, 20, 20)
    for p in (Point(1, 1), Point(2, 2), Point(19, 19)):
        fov.set_visible(p, 20)
    assert len(fov.visible_points(20)) == 3
    fov.clear_visible()
    assert fov.visible_points(20) == []


def test_visible_points_row_major():
    fov = FOV(5, 10, 10)
    pts = [Point(9, 9), Point(0, 5), Point(4, 0)]
    for p in pts:
        fov.set_visible(p, 10)
    assert fov.visible_points(10) == sorted(pts, key=lambda q: (q.y, q.x))


def test_setting_twice_is_idempotent():
    fov = FOV(5, 10, 10)
    fov.set_visible(Point(2, 3), 10)
    fov.set_visible(Point(2, 3), 10)
    assert fov.visible_points(10) == [Point(2, 3)]