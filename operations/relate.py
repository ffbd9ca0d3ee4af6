# -*- coding: utf-8 -*-
# Topolith/operations/relate.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/11/2026

Purpose:
--------
Topological relationship of two geometries as an intersection matrix, computed over one
shared halfedge network.

Contributions:
--------------
   - every region (bounded faces and the unbounded region): dimension 2,
   - every edge: dimension 1,
   - every vertex: dimension 0,
each at the pair (location in A, location in B) given by `network.labels`.
"""

import logging
from typing import Any, Dict, Optional

from geometry.model.precision import PrecisionModel
from network.conversion import geometry_to_network
from network.labels import Location, edge_location, face_location, vertex_location
from .matrix import IntersectionMatrix

logger = logging.getLogger(__name__)


def relate(a, b, precision: Optional[PrecisionModel] = None, *,
           config: Optional[Dict[str, Any]] = None) -> IntersectionMatrix:
    """
    Compute the intersection matrix of `a` against `b`.

    Raises
    ------
    InvalidInputError
        If either input is None.
    UnsupportedGeometryError
        If an input lacks the boundary-rings capability.
    """
    net = geometry_to_network([a, b], precision, True, config=config)
    im = IntersectionMatrix(net.sources[0].dimension, net.sources[1].dimension)

    # the unbounded region lies outside both inputs
    im.set_at_least(Location.EXTERIOR, Location.EXTERIOR, 2)
    for f in net.bounded_faces():
        im.set_at_least(face_location(net, f, 0), face_location(net, f, 1), 2)
    for e in range(net.n_edges):
        im.set_at_least(edge_location(net, e, 0), edge_location(net, e, 1), 1)
    for v in range(net.n_vertices):
        im.set_at_least(vertex_location(net, v, 0), vertex_location(net, v, 1), 0)

    logger.debug("relate -> %s", im)
    return im


def relate_pattern(a, b, pattern: str, precision: Optional[PrecisionModel] = None, *,
                   config: Optional[Dict[str, Any]] = None) -> bool:
    """True if the intersection matrix of `a` and `b` matches `pattern`."""
    return relate(a, b, precision, config=config).matches(pattern)
