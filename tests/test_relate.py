# -*- coding: utf-8 -*-
"""
Relate: intersection matrices and named predicates.
"""

import pytest

from geometry.errors import InvalidInputError
from geometry.model.shapes import LineString, Point, box
from operations.matrix import IntersectionMatrix
from operations.relate import relate, relate_pattern
from network.labels import Location

A = box(0, 0, 10, 10)


def test_self_relation():
    im = relate(A, A)
    assert str(im) == "2FFF1FFF2"
    assert im.get(Location.INTERIOR, Location.INTERIOR) == 2
    assert im.is_equals() and im.is_covers() and im.is_within()


def test_disjoint_squares():
    im = relate(A, box(20, 0, 30, 10))
    assert str(im) == "FF2FF1212"
    assert im.is_disjoint() and not im.is_intersects()


def test_overlapping_squares():
    im = relate(A, box(5, 5, 15, 15))
    assert str(im) == "212101212"
    assert im.is_overlaps() and not im.is_touches() and not im.is_contains()


def test_touching_squares():
    im = relate(A, box(10, 0, 20, 10))
    assert str(im) == "FF2F11212"
    assert im.is_touches() and im.is_intersects()


def test_containment():
    inner = box(2, 2, 4, 4)
    assert str(relate(A, inner)) == "212FF1FF2"
    assert relate(A, inner).is_contains()
    assert relate(inner, A).is_within()
    assert relate(inner, A).is_covered_by()


def test_line_crossing_polygon():
    im = relate(LineString([[-5, 5], [15, 5]]), A)
    assert im.get(Location.INTERIOR, Location.INTERIOR) == 1
    assert im.get(Location.BOUNDARY, Location.EXTERIOR) == 0
    assert im.is_crosses()


def test_point_in_polygon():
    im = relate(Point((5, 5)), A)
    assert im.get(Location.INTERIOR, Location.INTERIOR) == 0
    assert im.is_within()
    assert not relate(Point((10, 5)), A).is_within()
    assert relate(Point((10, 5)), A).is_touches()


def test_relate_pattern():
    assert relate_pattern(A, box(5, 5, 15, 15), "T*T***T**")
    assert not relate_pattern(A, box(20, 0, 30, 10), "T********")


def test_matrix_pattern_validation():
    im = IntersectionMatrix(2, 2)
    assert str(im) == "FFFFFFFFF"
    im.set_at_least(Location.INTERIOR, Location.INTERIOR, 1)
    im.set_at_least(Location.INTERIOR, Location.INTERIOR, 0)
    assert im.get(Location.INTERIOR, Location.INTERIOR) == 1
    assert im.matches("1********") and not im.matches("2********")
    with pytest.raises(InvalidInputError):
        im.matches("T*")
    with pytest.raises(InvalidInputError):
        im.matches("X********")
