# -*- coding: utf-8 -*-
# Topolith/network/labels.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/9/2026

Purpose:
--------
Locate network faces, edges and vertices relative to each input geometry. Overlay keeps or
drops faces by these labels, and relate folds them into an intersection matrix.

Main Tasks:
-----------
   1. `interior_point`: a representative point strictly inside a face region (scan line).
   2. `label_faces`: per bounded face and source, INTERIOR or EXTERIOR by polygon containment.
   3. `face_location` / `edge_location` / `vertex_location`: per-element location rules.

Notes:
------
   - Interior points are generally off the precision grid, so containment is evaluated
     with the floating model against the (already snapped) source rings.
   - The unbounded region is EXTERIOR to every source.
"""

from enum import IntEnum
from typing import List, Sequence, Tuple

from geometry.errors import NetworkIntegrityError
from geometry.topology.winding import is_inside_polygon
from .core.halfedge import Network


class Location(IntEnum):
    INTERIOR = 0
    BOUNDARY = 1
    EXTERIOR = 2


def _crossings(rings: Sequence, y0: float) -> List[float]:
    xs: List[float] = []
    for ring in rings:
        for i in range(len(ring) - 1):
            (sx, sy), (ex, ey) = ring[i], ring[i + 1]
            if (sy < y0) != (ey < y0):
                xs.append(sx + (y0 - sy) * (ex - sx) / (ey - sy))
    return sorted(xs)


def interior_point(rings: Sequence) -> Tuple[float, float]:
    """
    Point strictly inside the region bounded by `rings` (first ring = outer boundary).

    A horizontal scan line is placed halfway between two consecutive vertex levels, nearest
    the bbox centre first; the midpoint of the widest inside interval is returned.

    Raises
    ------
    NetworkIntegrityError
        If no scan line finds an inside interval (zero-area region).
    """
    shell, holes = rings[0], list(rings[1:])
    levels = sorted({float(y) for ring in rings for y in ring[:, 1]})
    if len(levels) < 2:
        raise NetworkIntegrityError("Cannot place an interior point in a flat region.")
    centre = 0.5 * (levels[0] + levels[-1])
    mids = [0.5 * (levels[i] + levels[i + 1]) for i in range(len(levels) - 1)]
    mids.sort(key=lambda y: abs(y - centre))

    for y0 in mids:
        xs = _crossings(rings, y0)
        best, width = None, 0.0
        for x0, x1 in zip(xs[:-1], xs[1:]):
            if x1 - x0 <= width:
                continue
            p = (0.5 * (x0 + x1), y0)
            if is_inside_polygon(shell, p, holes):
                best, width = p, x1 - x0
        if best is not None:
            return best
    raise NetworkIntegrityError("No interior point found for region.", {"n_rings": len(rings)})


def region_rings(network: Network, face: int) -> list:
    """Closed rings of a bounded face region: its own cycle followed by its hole cycles."""
    rings = [network.cycle_coordinates(face)]
    # tree components enclose no area
    rings.extend(network.cycle_coordinates(h) for h in network.faces[face].holes
                 if network.faces[h].area != 0.0)
    return rings


def label_faces(network: Network) -> None:
    """Fill `Face.labels` (source index -> Location) for every bounded face."""
    areal = any(src.polygons for src in network.sources)
    for f in network.bounded_faces():
        face = network.faces[f]
        if not areal:
            face.labels = {g: Location.EXTERIOR for g in range(len(network.sources))}
            continue
        p = interior_point(region_rings(network, f))
        for g, src in enumerate(network.sources):
            inside = any(is_inside_polygon(shell, p, holes) for shell, holes in src.polygons)
            face.labels[g] = Location.INTERIOR if inside else Location.EXTERIOR


def face_location(network: Network, region: int, g: int) -> Location:
    if region < 0:
        return Location.EXTERIOR
    return network.faces[region].labels.get(g, Location.EXTERIOR)


def edge_location(network: Network, e: int, g: int) -> Location:
    """Location of edge `e` relative to source `g`."""
    tags = network.edge_tags[e]
    left = face_location(network, network.halfedge_region(2 * e), g)
    if (g, 2) in tags:
        right = face_location(network, network.halfedge_region(2 * e + 1), g)
        if left is Location.INTERIOR and right is Location.INTERIOR:
            return Location.INTERIOR
        return Location.BOUNDARY
    if (g, 1) in tags:
        return Location.INTERIOR
    return left


def vertex_location(network: Network, v: int, g: int) -> Location:
    """Location of vertex `v` relative to source `g` (area boundary, then mod-2 line rule)."""
    out = network.outgoing(v)
    on_area = on_line = False
    for h in out:
        tags = network.edge_tags[h >> 1]
        if (g, 2) in tags:
            on_area = True
            if edge_location(network, h >> 1, g) is Location.BOUNDARY:
                return Location.BOUNDARY
        if (g, 1) in tags:
            on_line = True

    region = network.halfedge_region(out[0]) if out else network.region(network.vertex_face[v])
    around = face_location(network, region, g)
    if on_area or around is Location.INTERIOR:
        return Location.INTERIOR
    if network.endpoint_counts[v].get(g, 0) % 2 == 1:
        return Location.BOUNDARY
    if on_line or g in network.point_tags[v]:
        return Location.INTERIOR
    return around
