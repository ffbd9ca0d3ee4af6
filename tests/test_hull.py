# -*- coding: utf-8 -*-
"""
Graham-scan convex hull.
"""

import numpy as np
import pytest

from geometry.errors import DegenerateGeometryError, InvalidInputError
from geometry.topology.hull import convex_hull
from geometry.topology.loop import signed_area
from geometry.topology.winding import BoundaryState, winding_number


def test_square_with_interior_and_edge_points():
    pts = [[5, 5], [0, 10], [10, 10], [10, 0], [0, 0], [5, 0], [2, 7]]
    hull = convex_hull(pts)
    assert hull.tolist() == [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]


def test_open_hull():
    hull = convex_hull([[0, 0], [4, 0], [0, 3]], closed=False)
    assert hull.shape == (3, 2)


def test_random_hull_is_ccw_and_encloses_input():
    rng = np.random.default_rng(11)
    pts = rng.uniform(-100, 100, size=(300, 2))
    hull = convex_hull(pts)
    assert signed_area(hull) > 0.0
    hull_rows = {tuple(r) for r in hull}
    assert hull_rows <= {tuple(r) for r in pts}
    for p in pts:
        res = winding_number(hull, p, verify_boundary=True)
        assert res.is_inside or res.boundary is BoundaryState.ON_BOUNDARY


def test_collinear_input():
    hull = convex_hull([[0, 0], [1, 1], [2, 2], [1, 1]])
    assert hull.tolist() == [[0, 0], [2, 2], [0, 0]]
    with pytest.raises(DegenerateGeometryError):
        convex_hull([[0, 0], [1, 1], [2, 2]], require_area=True)


def test_coincident_input():
    hull = convex_hull([[1, 1], [1, 1], [1, 1]], closed=False)
    assert hull.tolist() == [[1, 1]]


def test_invalid_input():
    with pytest.raises(InvalidInputError):
        convex_hull(None)
    with pytest.raises(InvalidInputError):
        convex_hull([[0, 0], [1, 1]])
