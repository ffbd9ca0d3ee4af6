# -*- coding: utf-8 -*-
# Topolith/geometry/topology/hull.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/5/2026

Purpose:
--------
Graham-scan convex hull of a planar point set.

Steps:
------
   1. Snap and deduplicate the input (precision-model equality).
   2. Pivot = lowest point, ties broken by smallest x.
   3. Sort the others by polar angle around the pivot using `orientation` only;
      collinear ties are ordered nearer first so they can be popped.
   4. Sweep with a stack, popping while (second-to-top, top, candidate) is not a CCW turn.

Degenerate inputs:
------------------
   - All points collinear: the hull is the two extreme points.
   - All points coincident: the hull is that single point.
   Neither is an error unless `require_area=True`.
"""

from functools import cmp_to_key
from typing import List, Optional, Tuple
import numpy as np

from ..errors import InvalidInputError, DegenerateGeometryError
from ..model.precision import PrecisionModel, resolve_precision
from ._validation import _as_xy
from .orientation import Orientation, orientation

Coordinate = Tuple[float, float]


def _dist2(a: Coordinate, b: Coordinate) -> float:
    return (b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2


def _unique(P: np.ndarray) -> List[Coordinate]:
    seen = set()
    out: List[Coordinate] = []
    for x, y in P:
        c = (float(x), float(y))
        if c not in seen:
            seen.add(c)
            out.append(c)
    return out


def convex_hull(points, precision: Optional[PrecisionModel] = None, *,
                closed: bool = True, require_area: bool = False) -> np.ndarray:
    """
    Counter-clockwise convex hull of `points`.

    Parameters
    ----------
    points : array-like (N, 2)
        Input point set, N >= 3.
    precision : PrecisionModel, optional
        Snapping/tolerance model; defaults to floating.
    closed : bool
        Repeat the first hull vertex at the end (default True).
    require_area : bool
        Raise DegenerateGeometryError when the hull has fewer than 3 vertices.

    Returns
    -------
    np.ndarray
        (H, 2) hull vertices, drawn from the (snapped) input, in CCW order.

    Raises
    ------
    InvalidInputError
        If `points` is None or has fewer than 3 rows.
    DegenerateGeometryError
        If `require_area` and the input is collinear or coincident.
    """
    pm = resolve_precision(precision)
    if points is None:
        raise InvalidInputError("The point set is None.")
    P = _as_xy(points, "points")
    if P.shape[0] < 3:
        raise InvalidInputError("Convex hull needs at least 3 points.", {"n": int(P.shape[0])})

    pts = _unique(pm.snap_array(P))
    pivot = min(pts, key=lambda c: (c[1], c[0]))
    rest = [c for c in pts if c != pivot]

    def _by_angle(a: Coordinate, b: Coordinate) -> int:
        turn = orientation(pivot, a, b, pm)
        if turn is Orientation.COUNTER_CLOCKWISE:
            return -1
        if turn is Orientation.CLOCKWISE:
            return 1
        da, db = _dist2(pivot, a), _dist2(pivot, b)
        return -1 if da < db else (1 if da > db else 0)

    rest.sort(key=cmp_to_key(_by_angle))

    stack: List[Coordinate] = [pivot]
    for c in rest:
        while len(stack) >= 2 and orientation(stack[-2], stack[-1], c, pm) is not Orientation.COUNTER_CLOCKWISE:
            stack.pop()
        stack.append(c)

    if len(stack) < 3 and require_area:
        raise DegenerateGeometryError("All hull input points are collinear.", {"n_unique": len(pts)})
    if closed and len(stack) > 1:
        stack.append(stack[0])
    return np.array(stack, dtype=float)
