# -*- coding: utf-8 -*-
# Topolith/network/__init__.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/6/2026 (Updated: 3/10/2026)

Modules:
--------
- core:       halfedge arena, noding and spatial grid.
- conversion: geometry <-> network.
- labels:     face/edge/vertex locations relative to each input.
- checks:     invariant rules and their registry.
- stats:      inventory and valence of a network.
- config:     defaults and deep merge for construction options.
- api:        high-level entry points.
"""

__all__ = ["core", "conversion", "labels", "checks", "stats", "config", "api",]
