# -*- coding: utf-8 -*-
"""
Overlay: the four boolean operations on areal inputs.
"""

import numpy as np
import pytest

from geometry.errors import InvalidInputError, UnsupportedGeometryError
from geometry.model.precision import PrecisionModel
from geometry.model.shapes import GeometryCollection, LineString, Polygon, box
from operations.overlay import OverlayOp, overlay

A = box(0, 0, 10, 10)
B = box(5, 5, 15, 15)


@pytest.mark.parametrize("op, area", [
    ("union", 175.0),
    ("intersection", 25.0),
    ("difference", 75.0),
    ("symmetric_difference", 150.0),
])
def test_overlapping_squares(op, area):
    assert overlay(A, B, op).area() == pytest.approx(area)


def test_union_is_one_polygon():
    out = overlay(A, B, OverlayOp.UNION)
    assert isinstance(out, Polygon)
    assert out.holes == []


def test_symmetric_difference_has_two_parts():
    out = overlay(A, B, "SYMMETRIC_DIFFERENCE")
    assert isinstance(out, GeometryCollection)
    assert sorted(p.area() for p in out) == pytest.approx([75.0, 75.0])


def test_self_overlay_is_idempotent():
    assert overlay(A, A, "union").area() == pytest.approx(A.area())
    assert overlay(A, A, "intersection").area() == pytest.approx(A.area())
    assert overlay(A, A, "difference").is_empty


def test_disjoint_inputs():
    far = box(20, 20, 30, 30)
    assert overlay(A, far, "intersection").is_empty
    assert overlay(A, far, "difference").area() == pytest.approx(100.0)
    assert len(overlay(A, far, "union")) == 2


def test_difference_cuts_a_hole():
    out = overlay(A, box(3, 3, 7, 7), "difference")
    assert isinstance(out, Polygon)
    assert len(out.holes) == 1
    assert out.area() == pytest.approx(84.0)


def test_union_fills_a_hole():
    ring = Polygon([[0, 0], [10, 0], [10, 10], [0, 10]], [[[3, 3], [7, 3], [7, 7], [3, 7]]])
    out = overlay(ring, box(2, 2, 8, 8), "union")
    assert isinstance(out, Polygon)
    assert out.holes == []
    assert out.area() == pytest.approx(100.0)


def test_fixed_precision_snaps_shared_edge():
    right = box(10.0000001, 0, 20, 10)
    out = overlay(A, right, "union", PrecisionModel("fixed", scale=1000))
    assert isinstance(out, Polygon)
    assert out.area() == pytest.approx(200.0)


def test_unknown_operation():
    with pytest.raises(InvalidInputError):
        overlay(A, B, "xor")


def test_non_areal_inputs():
    with pytest.raises(UnsupportedGeometryError):
        overlay(A, LineString([[0, 0], [1, 1]]), "union")
    with pytest.raises(UnsupportedGeometryError):
        overlay(GeometryCollection([]), A, "union")
    with pytest.raises(InvalidInputError):
        overlay(None, A, "union")


def _rotated(rng, n_sides, radius):
    centre = rng.uniform(0.0, 6.0, size=2)
    angles = rng.uniform(0.0, 2.0 * np.pi) + 2.0 * np.pi * np.arange(n_sides) / n_sides
    ring = centre + radius * np.column_stack((np.cos(angles), np.sin(angles)))
    return Polygon(np.vstack((ring, ring[:1])))


@pytest.mark.parametrize("seed", range(12))
def test_area_identities_on_rotated_shapes(seed):
    rng = np.random.default_rng(seed)
    a = _rotated(rng, 4, rng.uniform(2.0, 4.0))
    b = _rotated(rng, 3, rng.uniform(2.0, 4.0))
    cfg = {"validate": True}

    union = overlay(a, b, "union", config=cfg).area()
    inter = overlay(a, b, "intersection", config=cfg).area()
    diff = overlay(a, b, "difference", config=cfg).area()
    xor = overlay(a, b, "symmetric_difference", config=cfg).area()

    assert union + inter == pytest.approx(a.area() + b.area(), rel=1e-9, abs=1e-9)
    assert xor == pytest.approx(union - inter, rel=1e-9, abs=1e-9)
    assert diff == pytest.approx(a.area() - inter, rel=1e-9, abs=1e-9)
