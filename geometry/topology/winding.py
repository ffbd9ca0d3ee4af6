# -*- coding: utf-8 -*-
# Topolith/geometry/topology/winding.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/4/2026

Purpose:
--------
Point-in-ring classification by winding number, with explicit three-state boundary
reporting, and polygon containment (shell + holes) derived from it.

Algorithm:
----------
For each ring edge s -> e:
   - upward crossing   (s.y <= q.y < e.y): a CCW turn (q, s, e) adds 1,
   - downward crossing (e.y <= q.y < s.y): a CW turn (q, s, e) subtracts 1,
   - a COLLINEAR turn on a crossing edge means q is on the boundary; counting continues.
If no crossing was collinear and `verify_boundary` is set, a second pass tests q against
every edge with `segment.contains`. Without verification the boundary state stays UNKNOWN:
the algorithm makes no claim, and callers must not read UNKNOWN as "not on boundary".

Notes:
------
   - O(n) per query (two passes when verification triggers).
   - A winding number of 0 means outside under the nonzero rule.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence
import numpy as np

from ..errors import InvalidInputError, DegenerateGeometryError
from ..model.precision import PrecisionModel, resolve_precision
from ._validation import _as_xy
from .loop import ensure_closed
from .orientation import Orientation, orientation
from .segment import contains


class BoundaryState(Enum):
    ON_BOUNDARY = "on_boundary"
    NOT_ON_BOUNDARY = "not_on_boundary"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class WindingResult:
    winding_number: int
    boundary: BoundaryState

    @property
    def is_inside(self) -> bool:
        """Nonzero rule; says nothing about the boundary."""
        return self.winding_number != 0


def _closed_ring(ring, pm: PrecisionModel) -> np.ndarray:
    if ring is None:
        raise InvalidInputError("The ring is None.")
    P = pm.snap_array(_as_xy(ring, "ring"))
    if np.unique(P, axis=0).shape[0] < 3:
        raise DegenerateGeometryError("The ring must contain at least 3 different coordinates.",
                                      {"n": int(P.shape[0])})
    return ensure_closed(P)


def winding_number(ring, point: Sequence[float], verify_boundary: bool = False,
                   precision: Optional[PrecisionModel] = None) -> WindingResult:
    """
    Winding number of `ring` around `point`.

    Parameters
    ----------
    ring : array-like (N, 2)
        Ring coordinates; closed by appending the first row if open.
    point : sequence of float
        Query coordinate.
    verify_boundary : bool
        Run the second, point-on-segment pass when no crossing was collinear.
    precision : PrecisionModel, optional
        Snapping/tolerance model; defaults to floating.

    Returns
    -------
    WindingResult
        (winding_number, boundary) with boundary in {ON_BOUNDARY, NOT_ON_BOUNDARY, UNKNOWN}.

    Raises
    ------
    InvalidInputError
        If `ring` or `point` is None.
    DegenerateGeometryError
        If the ring has fewer than 3 distinct coordinates.
    """
    pm = resolve_precision(precision)
    if point is None:
        raise InvalidInputError("The query coordinate is None.")
    P = _closed_ring(ring, pm)
    q = pm.snap(point)

    wn = 0
    on_boundary = False
    for i in range(P.shape[0] - 1):
        s = (float(P[i, 0]), float(P[i, 1]))
        e = (float(P[i + 1, 0]), float(P[i + 1, 1]))
        if s[1] <= q[1] < e[1]:
            turn = orientation(q, s, e, pm)
            if turn is Orientation.COUNTER_CLOCKWISE:
                wn += 1
            elif turn is Orientation.COLLINEAR:
                on_boundary = True
        elif e[1] <= q[1] < s[1]:
            turn = orientation(q, s, e, pm)
            if turn is Orientation.CLOCKWISE:
                wn -= 1
            elif turn is Orientation.COLLINEAR:
                on_boundary = True

    if on_boundary:
        state = BoundaryState.ON_BOUNDARY
    elif verify_boundary:
        state = BoundaryState.NOT_ON_BOUNDARY
        for i in range(P.shape[0] - 1):
            if contains(P[i], P[i + 1], q, pm):
                state = BoundaryState.ON_BOUNDARY
                break
    else:
        state = BoundaryState.UNKNOWN
    return WindingResult(wn, state)


def is_inside_polygon(shell, point: Sequence[float], holes: Optional[Iterable] = None,
                      precision: Optional[PrecisionModel] = None) -> bool:
    """
    Polygon containment with holes: nonzero winding against the shell and zero winding
    against every hole.

    Raises
    ------
    InvalidInputError
        If the shell or any hole is None.
    """
    if shell is None:
        raise InvalidInputError("The shell is None.")
    holes = list(holes or [])
    for k, hole in enumerate(holes):
        if hole is None:
            raise InvalidInputError("A hole is None.", {"hole": k})
    if winding_number(shell, point, False, precision).winding_number == 0:
        return False
    for hole in holes:
        if winding_number(hole, point, False, precision).winding_number != 0:
            return False
    return True
