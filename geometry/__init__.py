# -*- coding: utf-8 -*-
# Topolith/geometry/__init__.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/2/2026 (Updated: 3/9/2026)

Modules:
--------
- model:    Value types:
              * PrecisionModel (snapping, equality, ordering, collinear tolerance),
              * geometry variants (Point, LineString, Polygon, GeometryCollection),
              * GeometryFactory / ShapeFactory.

- topology: Planar predicates and ring algorithms:
              * orientation (robust turn test),
              * segment containment / intersection,
              * winding number and polygon containment,
              * Graham-scan convex hull,
              * ring closure/area helpers.

- errors:   Typed exceptions (TopologyError and subclasses).

- api:      Minimal public facade:
              * orientation(p, q, r, precision=None)
              * winding_number(ring, point, verify_boundary=False, precision=None)
              * is_inside_polygon(shell, point, holes=None, precision=None)
              * convex_hull(points, precision=None, closed=True, require_area=False)

            Usage:
                from geometry.api import orientation, winding_number, convex_hull
"""

__all__ = ["model", "topology", "errors", "api"]
