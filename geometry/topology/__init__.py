# -*- coding: utf-8 -*-
# Topolith/geometry/topology/__init__.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/2/2026 (Updated: 3/5/2026)

Topology Subfolder:
-------------------
Robust planar predicates and ring algorithms.

Modules:
--------
- orientation: the single three-point turn predicate (error-bounded, exact fallback).

- segment:     point-on-segment containment and segment intersection (touching and
               collinear overlap included).

- winding:     winding number with three-state boundary reporting; polygon containment.

- hull:        Graham-scan convex hull.

- loop:        closure enforcement, signed area, ring preparation.

- _validation: shared (N, 2) array validation.
"""

__all__ = ["orientation", "segment", "winding", "hull", "loop"]
