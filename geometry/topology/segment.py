# -*- coding: utf-8 -*-
# Topolith/geometry/topology/segment.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/4/2026

Purpose:
--------
Segment-level predicates built on the orientation primitive:
   - point-on-segment containment (used by boundary verification),
   - segment/segment intersection including touching and collinear overlap
     (used by noding and planarity checks).

Notes:
------
   - All decisions about which side a point lies on are delegated to `orientation`.
   - Computed crossing points are snapped and clamped into the shared bounding box of both
     segments, so rounding never moves them outside either input.
"""

from typing import List, Sequence, Tuple

from ..model.precision import PrecisionModel, resolve_precision
from .orientation import Orientation, orientation

Coordinate = Tuple[float, float]


def _in_box(a: Coordinate, b: Coordinate, q: Coordinate, slack: float) -> bool:
    return (min(a[0], b[0]) - slack <= q[0] <= max(a[0], b[0]) + slack) and \
           (min(a[1], b[1]) - slack <= q[1] <= max(a[1], b[1]) + slack)


def contains(a: Sequence[float], b: Sequence[float], q: Sequence[float],
             precision: PrecisionModel = None) -> bool:
    """
    True if `q` lies on the closed segment [a, b] (endpoints included).
    """
    pm = resolve_precision(precision)
    a = pm.snap(a); b = pm.snap(b); q = pm.snap(q)
    if q == a or q == b:
        return True
    if a == b:
        return False
    if orientation(a, b, q, pm) is not Orientation.COLLINEAR:
        return False
    return _in_box(a, b, q, 0.5 * pm.grid_size)


def interior_contains(a: Sequence[float], b: Sequence[float], q: Sequence[float],
                      precision: PrecisionModel = None) -> bool:
    """True if `q` lies on [a, b] and is not one of its endpoints (after snapping)."""
    pm = resolve_precision(precision)
    sq = pm.snap(q)
    if sq == pm.snap(a) or sq == pm.snap(b):
        return False
    return contains(a, b, sq, pm)


def _crossing_point(a, b, c, d, pm: PrecisionModel) -> Coordinate:
    """Proper crossing of [a,b] and [c,d]; assumes they do cross."""
    rx, ry = b[0] - a[0], b[1] - a[1]
    sx, sy = d[0] - c[0], d[1] - c[1]
    denom = rx * sy - ry * sx
    t = ((c[0] - a[0]) * sy - (c[1] - a[1]) * sx) / denom
    x = a[0] + t * rx
    y = a[1] + t * ry
    # clamp into the intersection of both bounding boxes
    x = min(max(x, max(min(a[0], b[0]), min(c[0], d[0]))), min(max(a[0], b[0]), max(c[0], d[0])))
    y = min(max(y, max(min(a[1], b[1]), min(c[1], d[1]))), min(max(a[1], b[1]), max(c[1], d[1])))
    return pm.snap((x, y))


def intersection(a: Sequence[float], b: Sequence[float], c: Sequence[float], d: Sequence[float],
                 precision: PrecisionModel = None) -> List[Coordinate]:
    """
    Intersection of closed segments [a,b] and [c,d].

    Returns
    -------
    list of (x, y)
        []            disjoint,
        [p]           single point (proper crossing or touching),
        [p1, p2]      collinear overlap, sorted lexicographically.
    """
    pm = resolve_precision(precision)
    a = pm.snap(a); b = pm.snap(b); c = pm.snap(c); d = pm.snap(d)

    o1 = orientation(a, b, c, pm)
    o2 = orientation(a, b, d, pm)
    o3 = orientation(c, d, a, pm)
    o4 = orientation(c, d, b, pm)

    if o1 is Orientation.COLLINEAR and o2 is Orientation.COLLINEAR:
        found = set()
        for p in (c, d):
            if contains(a, b, p, pm):
                found.add(p)
        for p in (a, b):
            if contains(c, d, p, pm):
                found.add(p)
        return sorted(found)

    if o1 == o2 or o3 == o4:
        return []

    # touching cases: an endpoint lies on the other segment
    if o1 is Orientation.COLLINEAR:
        return [c]
    if o2 is Orientation.COLLINEAR:
        return [d]
    if o3 is Orientation.COLLINEAR:
        return [a]
    if o4 is Orientation.COLLINEAR:
        return [b]
    return [_crossing_point(a, b, c, d, pm)]


def parameter_along(a: Sequence[float], b: Sequence[float], q: Sequence[float]) -> float:
    """Projection parameter of q on a->b (0 at a, 1 at b); used to order split points."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    den = dx * dx + dy * dy
    if den == 0.0:
        return 0.0
    return ((q[0] - a[0]) * dx + (q[1] - a[1]) * dy) / den
