# -*- coding: utf-8 -*-
# Topolith/geometry/topology/orientation.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/2/2026

Purpose:
--------
The single three-point turn predicate of the engine. Every "is r left of p->q?" decision
(winding number, hull sweep, angular sort, segment intersection) goes through
`orientation`, so tie-breaking at degenerate configurations is identical everywhere.

Numerics:
---------
   - Inputs are snapped by the precision model first.
   - Fixed precision: |det| <= collinear_tolerance  =>  COLLINEAR.
   - Floating precision: a forward error bound on the double determinant decides the sign
     when it can; otherwise the determinant is re-evaluated exactly with Fractions.
   - det(p, r, q) is computed from the same two products as det(p, q, r), so swapping the
     last two points flips the result exactly and keeps COLLINEAR.
"""

from enum import IntEnum
from fractions import Fraction
from typing import Sequence

from ..model.precision import PrecisionModel, resolve_precision

_EPSILON = 2.0 ** -53
_CCW_ERRBOUND = (3.0 + 16.0 * _EPSILON) * _EPSILON


class Orientation(IntEnum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTER_CLOCKWISE = 1

    def reverse(self) -> "Orientation":
        return Orientation(-int(self))


def _sign(v) -> Orientation:
    if v > 0:
        return Orientation.COUNTER_CLOCKWISE
    if v < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR


def _exact_det(p, q, r) -> Fraction:
    px, py = Fraction(p[0]), Fraction(p[1])
    return (Fraction(q[0]) - px) * (Fraction(r[1]) - py) - (Fraction(q[1]) - py) * (Fraction(r[0]) - px)


def orientation(p: Sequence[float], q: Sequence[float], r: Sequence[float],
                precision: PrecisionModel = None) -> Orientation:
    """
    Turn made by p -> q -> r.

    Parameters
    ----------
    p, q, r : sequence of float
        Coordinates (only X,Y used).
    precision : PrecisionModel, optional
        Defaults to the floating (no snapping) model.

    Returns
    -------
    Orientation
        COUNTER_CLOCKWISE for a left turn, CLOCKWISE for a right turn, COLLINEAR otherwise.
    """
    pm = resolve_precision(precision)
    p = pm.snap(p)
    q = pm.snap(q)
    r = pm.snap(r)

    detleft = (q[0] - p[0]) * (r[1] - p[1])
    detright = (q[1] - p[1]) * (r[0] - p[0])
    det = detleft - detright

    tol = pm.collinear_tolerance(p, q, r)
    if tol > 0.0:
        if abs(det) <= tol:
            return Orientation.COLLINEAR
        return _sign(det)

    errbound = _CCW_ERRBOUND * (abs(detleft) + abs(detright))
    if det > errbound or -det > errbound:
        return _sign(det)
    return _sign(_exact_det(p, q, r))
