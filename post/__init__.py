# -*- coding: utf-8 -*-
# Topolith/post/__init__.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/12/2026

Modules:
--------
- plot_network: matplotlib previews of networks and geometries.
"""

__all__ = ["plot_network",]
