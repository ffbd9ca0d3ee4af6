# -*- coding: utf-8 -*-
# Topolith/operations/api.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/12/2026

Purpose
-------
High-level entry points for geometry-valued operations: overlay, relate, polygonize and
the convex hull of a geometry.
"""

from typing import Optional
import logging
import numpy as np

from geometry.errors import InvalidInputError
from geometry.model.factory import GeometryFactory, resolve_factory
from geometry.model.precision import PrecisionModel
from geometry.topology.hull import convex_hull
from network.conversion import leaf_geometries
from .overlay import OverlayOp, overlay
from .polygonize import polygonize
from .relate import relate, relate_pattern

logger = logging.getLogger(__name__)


def hull_geometry(geometry, precision: Optional[PrecisionModel] = None,
                  factory: Optional[GeometryFactory] = None):
    """
    Convex hull of all coordinates of `geometry` as a geometry.

    Returns
    -------
    geometry
        Polygon for a proper hull, LineString when all points are collinear,
        Point when they coincide.

    Raises
    ------
    InvalidInputError
        If `geometry` is None or has no coordinates.
    UnsupportedGeometryError
        If a part does not expose dimension + boundary_rings().
    """
    rings = [r for leaf in leaf_geometries(geometry) for r in leaf.boundary_rings()]
    if not rings:
        raise InvalidInputError("The geometry has no coordinates.")
    coords = np.vstack([np.asarray(r, dtype=float).reshape(-1, 2) for r in rings])
    hull = convex_hull(coords, precision, closed=False)
    fac = resolve_factory(factory)
    logger.debug("hull of %d coordinate(s): %d vertices", coords.shape[0], hull.shape[0])
    if hull.shape[0] >= 3:
        return fac.create_polygon(np.vstack((hull, hull[:1])))
    if hull.shape[0] == 2:
        return fac.create_line_string(hull)
    return fac.create_point(hull[0])


__all__ = ["OverlayOp", "overlay", "relate", "relate_pattern", "polygonize", "hull_geometry"]
