import pytest

from angel.collider import Collider, Rect


def test_bounds_apply_offset():
    col = Collider(offset_x=3, offset_y=-2, w=10, h=5)
    bounds = col.get_bounds(100, 50)
    assert bounds == Rect(103, 48, 10, 5)


def test_default_collider_is_empty_at_entity():
    bounds = Collider().get_bounds(7, 9)
    assert (bounds.x, bounds.y, bounds.w, bounds.h) == (7, 9, 0, 0)


def test_overlapping_rects_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert Collider.intersects(a, b) is True


@pytest.mark.parametrize(
    "b",
    [
        Rect(10, 0, 5, 5),
        Rect(-5, 0, 5, 5),
        Rect(0, 10, 5, 5),
        Rect(0, -5, 5, 5),
    ],
)
def test_touching_edges_do_not_intersect(b):
    a = Rect(0, 0, 10, 10)
    assert Collider.intersects(a, b) is False


def test_intersection_is_symmetric():
    a = Rect(0, 0, 4, 4)
    b = Rect(3, 3, 4, 4)
    c = Rect(20, 20, 1, 1)
    assert Collider.intersects(a, b) == Collider.intersects(b, a)
    assert Collider.intersects(a, c) == Collider.intersects(c, a)
    assert Collider.intersects(a, c) is False


def test_contained_rect_intersects():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(40, 40, 2, 2)
    assert Collider.intersects(outer, inner) is True


def test_colliders_on_entities():
    col = Collider(w=8, h=8)
    assert Collider.intersects(col.get_bounds(0, 0), col.get_bounds(4, 4)) is True
    assert Collider.intersects(col.get_bounds(0, 0), col.get_bounds(8, 0)) is False