# -*- coding: utf-8 -*-
# Topolith/geometry/api.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/5/2026

Purpose
-------
Thin, import-only façade over the point-level predicates: the orientation test, the
winding number, polygon containment and the convex hull. Network-based operations live in
`network.api` and `operations.api`.

Notes
-----
- Every function accepts an optional PrecisionModel; None means the floating default.
- Coordinates may be tuples, lists or numpy rows; rings/point sets are (N, 2) array-likes.
"""

from .model.precision import PrecisionModel, PrecisionKind, DEFAULT_PRECISION
from .topology.orientation import Orientation, orientation
from .topology.winding import BoundaryState, WindingResult, winding_number, is_inside_polygon
from .topology.hull import convex_hull

__all__ = [
    "PrecisionModel",
    "PrecisionKind",
    "DEFAULT_PRECISION",
    "Orientation",
    "orientation",
    "BoundaryState",
    "WindingResult",
    "winding_number",
    "is_inside_polygon",
    "convex_hull",
]
