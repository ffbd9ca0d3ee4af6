# -*- coding: utf-8 -*-
# Topolith/geometry/topology/loop.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/2/2026

Purpose:
--------
This module owns *ring-level* concerns:
   - Closure enforcement,
   - Signed area (positive = CCW),
   - Ring preparation (snap, dedupe, close, validate) used by network construction.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Functions are side-effect free (no in-place mutation).
   - Works with arrays shaped (N, 2). A "closed" ring repeats its first row at the end.
"""

import numpy as np

from ..errors import DegenerateGeometryError
from ..model.precision import PrecisionModel, resolve_precision
from ._validation import _assert_xy, _as_xy, _is_exactly_closed


# -----------------------
# Public API
# -----------------------
def ensure_closed(points: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Ensure the polyline is closed. If last != first (within `tol`), append the first.

    Notes
    -----
    - If already closed within tol, the original array reference is returned (no copy).
    """
    _assert_xy(points)
    if _is_exactly_closed(points, tol):
        return points
    return np.vstack((points, points[0]))


def signed_area(points: np.ndarray) -> float:
    """
    Shoelace signed area of a ring (explicitly closed or implicitly closed).

    Conventions
    -----------
    - Positive area => counter-clockwise (CCW) orientation.
    - A duplicate last==first row contributes a zero-length edge and does not affect the sum.
    - Fewer than 3 rows have zero area.
    """
    P = np.asarray(points, dtype=float)
    if P.ndim != 2 or P.shape[0] < 3:
        return 0.0
    x = P[:, 0]
    y = P[:, 1]
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def prepare_ring(points, precision: PrecisionModel = None) -> np.ndarray:
    """
    Snap, close and validate a ring for topology use.

    Returns
    -------
    np.ndarray
        Closed (M, 2) ring with >= 3 distinct coordinates, no consecutive duplicates.

    Raises
    ------
    InvalidInputError
        If `points` is None or not (N, 2).
    DegenerateGeometryError
        If fewer than 3 distinct coordinates survive snapping, or snapping collapses an
        edge to zero length.
    """
    pm = resolve_precision(precision)
    P = pm.snap_array(_as_xy(points, "ring"))
    distinct = np.unique(P, axis=0).shape[0] if P.shape[0] else 0
    if distinct < 3:
        raise DegenerateGeometryError("Ring must contain at least 3 distinct coordinates.",
                                      {"distinct": int(distinct)})
    P = ensure_closed(P)
    if np.any(np.all(P[1:] == P[:-1], axis=1)):
        raise DegenerateGeometryError("Ring has a zero-length edge after snapping.",
                                      {"precision": pm.kind.value})
    return P


def prepare_path(points, precision: PrecisionModel = None) -> np.ndarray:
    """
    Snap and validate an open polyline (>= 2 distinct coordinates, no zero-length edges).
    """
    pm = resolve_precision(precision)
    P = pm.snap_array(_as_xy(points, "line"))
    if P.shape[0] < 2 or np.unique(P, axis=0).shape[0] < 2:
        raise DegenerateGeometryError("Line must contain at least 2 distinct coordinates.",
                                      {"n": int(P.shape[0])})
    if np.any(np.all(P[1:] == P[:-1], axis=1)):
        raise DegenerateGeometryError("Line has a zero-length edge after snapping.",
                                      {"precision": pm.kind.value})
    return P
