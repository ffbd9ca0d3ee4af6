# -*- coding: utf-8 -*-
# Topolith/operations/polygonize.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/11/2026

Purpose:
--------
Build every polygon enclosed by an arbitrary collection of edges (lines, rings, polygon
boundaries). Edges are noded, so crossing lines close faces too; dangles and bridges are
dropped.
"""

import logging
from typing import Any, Dict, Optional

from geometry.errors import UnsupportedGeometryError
from geometry.model.factory import GeometryFactory
from geometry.model.precision import PrecisionModel
from network.conversion import area_faces, geometry_to_network, network_to_geometry

logger = logging.getLogger(__name__)


def polygonize(geometry, precision: Optional[PrecisionModel] = None,
               factory: Optional[GeometryFactory] = None, *, config: Optional[Dict[str, Any]] = None):
    """
    Polygons formed by the edges of `geometry`.

    Returns
    -------
    geometry
        A single polygon, or a collection of polygons (one per enclosed face).

    Raises
    ------
    UnsupportedGeometryError
        If the edges enclose no area.
    """
    net = geometry_to_network(geometry, precision, True, config=config)
    faces = area_faces(net)
    if not faces:
        raise UnsupportedGeometryError("Input edges enclose no area; nothing to polygonize.",
                                       {"n_edges": net.n_edges})
    logger.debug("polygonize: %d face(s)", len(faces))
    return network_to_geometry(net, 2, factory)
