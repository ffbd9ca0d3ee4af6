# -*- coding: utf-8 -*-
# Topolith/geometry/topology/_validation.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/2/2026

Purpose:
--------
Centralized validation utilities for topology operations so that every predicate rejects
malformed coordinate arrays the same way and with the same error type.

Main Tasks:
   1. Validate point array structure and data integrity
   2. Coerce array-likes to float (N, 2) arrays, dropping extra columns
   3. Closure test for ring operations
"""

from typing import Optional
import numpy as np

from ..errors import InvalidInputError


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Raises
    ------
    InvalidInputError
        If points array fails validation checks
    """
    if points is None:
        raise InvalidInputError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise InvalidInputError("Expected (N, 2) array for points.", {"shape": points.shape})

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise InvalidInputError("Non-finite coordinates detected.", {"indices": bad_indices.tolist()})


def _as_xy(points, name: str = "points") -> np.ndarray:
    """
    Coerce an array-like of coordinates to a float (N, 2) array (Z and beyond dropped).

    Raises
    ------
    InvalidInputError
        If `points` is None, not 2D, has fewer than 2 columns, or holds non-finite values.
    """
    if points is None:
        raise InvalidInputError("No coordinates provided ({} is None).".format(name))
    P = np.asarray(points, dtype=float)
    if P.ndim != 2 or P.shape[1] < 2:
        raise InvalidInputError("Expected (N, 2) coordinates.", {"name": name, "shape": P.shape})
    P = P[:, :2]
    _assert_xy(P, check_finite=True)
    return P


def _is_exactly_closed(points: np.ndarray, tol: float = 0.0) -> bool:
    """
    Check if polyline is explicitly closed (first == last within tolerance).
    """
    if points.shape[0] < 2:
        return False
    return np.allclose(points[0], points[-1], atol=tol, rtol=0.0)
