# -*- coding: utf-8 -*-
# Topolith/operations/__init__.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/11/2026

Modules:
--------
- overlay:    union / intersection / difference / symmetric difference of areal geometries.
- relate:     intersection matrix of two geometries.
- matrix:     the intersection matrix type and named predicates.
- polygonize: polygons enclosed by an edge collection.
- api:        high-level entry points.
"""

__all__ = ["overlay", "relate", "matrix", "polygonize", "api",]
