# -*- coding: utf-8 -*-
# Topolith/operations/overlay.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/11/2026

Purpose:
--------
Boolean set operations on areal geometries by labeling the faces of one shared network.

Steps:
------
   1. Validate the operation name and that both inputs are areal.
   2. Build one bidirectional network over (A, B); faces are labeled INTERIOR/EXTERIOR for
      each input from a representative interior point.
   3. Keep the faces whose (insideA, insideB) pair is in the operation's truth table.
   4. Dissolve kept faces across shared edges and convert back through the factory.
"""

from enum import Enum
import logging
from typing import Any, Dict, FrozenSet, Optional, Tuple

from geometry.errors import InvalidInputError, UnsupportedGeometryError
from geometry.model.factory import GeometryFactory
from geometry.model.precision import PrecisionModel
from network.conversion import geometry_to_network, network_to_geometry, source_dimensions
from network.labels import Location

logger = logging.getLogger(__name__)


class OverlayOp(str, Enum):
    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"
    SYMMETRIC_DIFFERENCE = "symmetric_difference"

    @classmethod
    def parse(cls, value) -> "OverlayOp":
        """Accept an OverlayOp or a case-insensitive name."""
        if isinstance(value, OverlayOp):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidInputError("Unknown overlay operation.",
                                    {"operation": value, "allowed": [op.value for op in cls]})


# (insideA, insideB) pairs retained by each operation
_TRUTH_TABLE: Dict[OverlayOp, FrozenSet[Tuple[bool, bool]]] = {
    OverlayOp.UNION: frozenset({(True, True), (True, False), (False, True)}),
    OverlayOp.INTERSECTION: frozenset({(True, True)}),
    OverlayOp.DIFFERENCE: frozenset({(True, False)}),
    OverlayOp.SYMMETRIC_DIFFERENCE: frozenset({(True, False), (False, True)}),
}


def _require_areal(a, b) -> None:
    for name, dims in zip(("a", "b"), source_dimensions([a, b])):
        if not dims or any(d != 2 for d in dims):
            raise UnsupportedGeometryError("Overlay inputs must be areal geometries.",
                                           {"input": name, "dimensions": dims})


def overlay(a, b, operation, precision: Optional[PrecisionModel] = None,
            factory: Optional[GeometryFactory] = None, *, config: Optional[Dict[str, Any]] = None):
    """
    Compute `a <operation> b`.

    Parameters
    ----------
    a, b : areal geometry
        Polygons or collections of polygons.
    operation : OverlayOp or str
        "union", "intersection", "difference" or "symmetric_difference" (case-insensitive).
    precision : PrecisionModel, optional
        Snapping/tolerance model (wins over `config["precision"]`).
    factory : GeometryFactory, optional
        Result builder; defaults to `ShapeFactory`.
    config : dict, optional
        Overrides for `network.config.DEFAULTS`.

    Returns
    -------
    geometry
        A polygon, or a collection of polygons (empty when nothing is kept).

    Raises
    ------
    InvalidInputError
        Unknown operation, or a None input.
    UnsupportedGeometryError
        Non-areal input.
    """
    op = OverlayOp.parse(operation)
    if a is None or b is None:
        raise InvalidInputError("Overlay inputs must not be None.")
    _require_areal(a, b)

    net = geometry_to_network([a, b], precision, True, config=config)
    table = _TRUTH_TABLE[op]

    def keep(f: int) -> bool:
        labels = net.faces[f].labels
        return (labels.get(0) is Location.INTERIOR, labels.get(1) is Location.INTERIOR) in table

    result = network_to_geometry(net, 2, factory, keep=keep, dissolve=True)
    logger.debug("overlay %s: %d bounded face(s) considered", op.value, len(net.bounded_faces()))
    return result
