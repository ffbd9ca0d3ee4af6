# -*- coding: utf-8 -*-
# Topolith/network/stats.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/10/2026

Purpose:
--------
Basic topological statistics of a halfedge network: a global inventory of its elements and
the vertex degree distribution.

Notes:
------
- Histogram is returned as {degree: frequency}.
- Isolated vertices count with degree 0.
"""

import numpy as np

from .core.halfedge import Network


def inventory(net: Network) -> dict:
    """
    Build a global inventory of network size.

    Returns
    -------
    dict
        {
          "n_vertices", "n_edges", "n_halfedges", "n_faces", "n_bounded_faces",
          "n_components", "n_isolated_vertices": int,
          "bbox": {"xmin","xmax","ymin","ymax"},
          "euler_characteristic": int     # V - E + F_bounded
        }
    """
    n_bounded = len(net.bounded_faces())
    xmin, ymin, xmax, ymax = net.bbox()
    return {
        "n_vertices": net.n_vertices,
        "n_edges": net.n_edges,
        "n_halfedges": net.n_halfedges,
        "n_faces": len(net.faces),
        "n_bounded_faces": n_bounded,
        "n_components": net.n_components,
        "n_isolated_vertices": len(net.isolated_vertices()),
        "bbox": {"xmin": xmin, "xmax": xmax, "ymin": ymin, "ymax": ymax},
        "euler_characteristic": net.n_vertices - net.n_edges + n_bounded,
    }


def valence(net: Network) -> dict:
    """
    Vertex degree distribution.

    Returns
    -------
    dict
        {"min": int, "max": int, "mean": float, "std": float, "hist": {degree: frequency}}
        Zeros and an empty hist for an empty network.
    """
    counts = np.array([net.degree(v) for v in range(net.n_vertices)], dtype=int)
    if counts.size == 0:
        return {"min": 0, "max": 0, "mean": 0.0, "std": 0.0, "hist": {}}

    unique, freq = np.unique(counts, return_counts=True)
    hist = {int(u): int(f) for u, f in zip(unique, freq)}

    return {
        "min": int(counts.min()),
        "max": int(counts.max()),
        "mean": float(counts.mean()),
        "std": float(counts.std()),
        "hist": hist,
    }
