# -*- coding: utf-8 -*-
"""
Polygonization of edge collections.
"""

import pytest

from geometry.errors import UnsupportedGeometryError
from geometry.model.shapes import GeometryCollection, LineString, Polygon
from operations.polygonize import polygonize


def test_closed_line_becomes_polygon():
    out = polygonize(LineString([[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]))
    assert isinstance(out, Polygon)
    assert out.area() == pytest.approx(100.0)


def test_crossing_lines_close_a_cell():
    lines = GeometryCollection([
        LineString([[0, 1], [3, 1]]), LineString([[0, 2], [3, 2]]),
        LineString([[1, 0], [1, 3]]), LineString([[2, 0], [2, 3]]),
    ])
    out = polygonize(lines)
    assert isinstance(out, Polygon)
    assert out.area() == pytest.approx(1.0)


def test_shared_edge_gives_two_polygons():
    lines = GeometryCollection([
        LineString([[0, 0], [2, 0], [2, 1], [0, 1], [0, 0]]),
        LineString([[1, 0], [1, 1]]),
    ])
    out = polygonize(lines)
    assert isinstance(out, GeometryCollection)
    assert sorted(p.area() for p in out) == pytest.approx([1.0, 1.0])


def test_dangles_are_dropped():
    lines = GeometryCollection([
        LineString([[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]),
        LineString([[10, 10], [15, 15]]),
        LineString([[5, 5], [5, 10]]),
    ])
    out = polygonize(lines)
    assert isinstance(out, Polygon)
    assert out.area() == pytest.approx(100.0)


def test_nested_rings_give_shell_with_hole_and_island():
    lines = GeometryCollection([
        LineString([[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]),
        LineString([[3, 3], [7, 3], [7, 7], [3, 7], [3, 3]]),
    ])
    out = polygonize(lines)
    assert len(out) == 2
    outer = max(out, key=lambda p: abs(p.area()))
    assert len(outer.holes) == 1
    assert sum(p.area() for p in out) == pytest.approx(100.0)


def test_open_lines_enclose_nothing():
    with pytest.raises(UnsupportedGeometryError):
        polygonize(LineString([[0, 0], [10, 0], [10, 10]]))
