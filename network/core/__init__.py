# -*- coding: utf-8 -*-
# Topolith/network/core/__init__.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/6/2026

Modules:
--------
- halfedge: the DCEL arena (vertices, twin halfedge pairs, faces).
- noding:   splitting of segment soups at mutual intersections.
- grid:     uniform bbox grid for candidate-pair queries.
"""

__all__ = ["halfedge", "noding", "grid"]
