# -*- coding: utf-8 -*-
# Topolith/geometry/model/__init__.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/3/2026

Model Subfolder:
----------------
Value types consumed and produced by the engine.

Modules:
--------
- precision:  PrecisionModel (floating / floating_single / fixed), snapping, equality,
              ordering and collinearity tolerance; DEFAULT_PRECISION.

- shapes:     Point, LineString, Polygon, GeometryCollection exposing the shared
              boundary-rings capability (`dimension`, `boundary_rings()`).

- factory:    GeometryFactory interface and the bundled ShapeFactory.
"""

__all__ = ["precision", "shapes", "factory"]
