# -*- coding: utf-8 -*-
"""
Winding number, boundary reporting and polygon containment.
"""

import numpy as np
import pytest

from geometry.errors import DegenerateGeometryError, InvalidInputError
from geometry.topology.winding import BoundaryState, is_inside_polygon, winding_number

SQUARE = np.array([[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]], dtype=float)


def test_inside_square():
    res = winding_number(SQUARE, (5, 5))
    assert res.winding_number == 1
    assert res.is_inside
    assert res.boundary is BoundaryState.UNKNOWN


def test_outside_square_with_verification():
    res = winding_number(SQUARE, (15, 5), verify_boundary=True)
    assert res.winding_number == 0
    assert res.boundary is BoundaryState.NOT_ON_BOUNDARY


def test_point_on_vertical_edge_is_on_boundary():
    assert winding_number(SQUARE, (10, 5)).boundary is BoundaryState.ON_BOUNDARY
    assert winding_number(SQUARE, (10, 5), verify_boundary=True).boundary is BoundaryState.ON_BOUNDARY


def test_horizontal_edge_needs_verification():
    # no crossing edge is collinear with (5, 0): only the second pass detects it
    assert winding_number(SQUARE, (5, 0)).boundary is BoundaryState.UNKNOWN
    assert winding_number(SQUARE, (5, 0), verify_boundary=True).boundary is BoundaryState.ON_BOUNDARY


def test_clockwise_ring_gives_negative_winding():
    assert winding_number(SQUARE[::-1], (5, 5)).winding_number == -1


def test_open_ring_is_closed():
    assert winding_number(SQUARE[:-1], (5, 5)).winding_number == 1


def test_invalid_rings():
    with pytest.raises(InvalidInputError):
        winding_number(None, (0, 0))
    with pytest.raises(DegenerateGeometryError):
        winding_number([[0, 0], [1, 1], [0, 0]], (0.5, 0.5))


def test_polygon_with_hole():
    hole = [[3, 3], [7, 3], [7, 7], [3, 7]]
    assert not is_inside_polygon(SQUARE, (5, 5), [hole])
    assert is_inside_polygon(SQUARE, (1, 1), [hole])
    assert not is_inside_polygon(SQUARE, (11, 1), [hole])


def test_polygon_null_parts():
    with pytest.raises(InvalidInputError):
        is_inside_polygon(None, (1, 1))
    with pytest.raises(InvalidInputError):
        is_inside_polygon(SQUARE, (1, 1), [None])
    with pytest.raises(InvalidInputError):
        is_inside_polygon(SQUARE, (20, 20), [None])
    with pytest.raises(InvalidInputError):
        is_inside_polygon(SQUARE, (5, 5), [[[3, 3], [7, 3], [7, 7], [3, 7]], None])
