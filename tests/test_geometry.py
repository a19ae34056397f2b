import math

import pytest

from snipmark.geometry import (
    Point,
    Rect,
    arrow_wings,
    handle_points,
    point_to_line_distance,
)


def test_width_and_height():
    rect = Rect(10, 20, 110, 70)
    assert rect.width() == 110 - 10
    assert rect.height() == 70 - 20


@pytest.mark.parametrize("x, y", [(10, 20), (110, 70), (50, 50)])
def test_contains_is_inclusive(x, y):
    assert Rect(10, 20, 110, 70).contains(x, y)


@pytest.mark.parametrize("x, y", [(9, 20), (111, 70), (50, 71)])
def test_contains_rejects_outside(x, y):
    assert not Rect(10, 20, 110, 70).contains(x, y)


def test_intersects_touching_and_disjoint():
    base = Rect(0, 0, 10, 10)
    assert base.intersects(Rect(10, 10, 20, 20))
    assert not base.intersects(Rect(11, 0, 20, 10))
    assert Rect(11, 0, 20, 10).intersects(Rect(11, 0, 20, 10))


def test_translated_round_trip():
    rect = Rect(3, 4, 30, 40)
    assert rect.translated(7, -9).translated(-7, 9) == rect
    moved = rect.translated(7, -9)
    assert moved.width() == rect.width() and moved.height() == rect.height()


def test_from_points_normalises():
    a, b = Point(50, 5), Point(10, 40)
    assert Rect.from_points(a, b) == Rect(10, 5, 50, 40)
    assert Rect.from_points(b, a) == Rect.from_points(a, b)


def test_handle_points_order():
    rect = Rect(10, 20, 110, 220)
    handles = handle_points(rect)
    assert len(handles) == 8
    assert handles[0] == (10, 20)
    assert handles[2] == (110, 20)
    assert handles[4] == (110, 220)
    assert handles[6] == (10, 220)
    assert handles[1][0] == handles[5][0]
    assert handles[3][1] == handles[7][1]


def test_handle_center_truncates_toward_zero():
    handles = handle_points(Rect(-3, 0, 0, 0))
    assert handles[1] == (-1, 0)


def test_distance_to_degenerate_segment():
    assert point_to_line_distance(3, 4, 0, 0, 0, 0) == pytest.approx(5.0)


def test_distance_perpendicular_to_segment():
    assert point_to_line_distance(5, 7, 0, 0, 10, 0) == pytest.approx(7.0)


def test_distance_beyond_endpoint_uses_endpoint():
    d = point_to_line_distance(13, 4, 0, 0, 10, 0)
    assert d == pytest.approx(math.hypot(13 - 10, 4))


def test_distance_on_segment_is_zero():
    assert point_to_line_distance(5, 5, 0, 0, 10, 10) == pytest.approx(0.0)


def test_short_arrow_has_no_wings():
    assert arrow_wings(Point(0, 0), Point(10, 10)) is None


def test_horizontal_arrow_wings_are_symmetric():
    end = Point(100, 0)
    wings = arrow_wings(Point(0, 0), end)
    w1, w2 = wings
    assert w1.x == w2.x
    assert w1.y == -w2.y
    assert w1.x < end.x
    assert w1.y != 0