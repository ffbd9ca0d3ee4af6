# -*- coding: utf-8 -*-
# Topolith/network/conversion.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/9/2026

Purpose:
--------
Two-way conversion between geometries and the halfedge network.

Main Tasks:
-----------
   1. `geometry_to_network`:
        - Read every input through the boundary-rings capability (dimension + rings).
        - Prepare rings/paths under the precision model, tag segments by (source, dimension).
        - Node the segment soup, insert edges, link, enumerate faces and label them.
        - Optionally run the invariant checks and fail hard on errors.
   2. `network_to_geometry`:
        - Area faces -> polygons (per face, or dissolved over a kept face set).
        - Edges with the same region on both sides -> maximal line chains.
        - Isolated vertices -> points.
        - Results are built through a GeometryFactory only.

Notes:
------
   - Ring halfedges are linked by rotating clockwise around each destination vertex, so
     pinched rings and shared vertices stay simple.
   - Holes are assigned to the smallest containing shell by winding containment.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Set, Tuple
import numpy as np

from geometry.errors import InvalidInputError, NetworkIntegrityError, UnsupportedGeometryError
from geometry.model.factory import GeometryFactory, resolve_factory
from geometry.model.precision import PrecisionModel
from geometry.topology.loop import prepare_path, prepare_ring, signed_area
from geometry.topology.winding import BoundaryState, winding_number
from .checks import run_checks
from .config import precision_from, resolve_config
from .core.halfedge import Network
from .core.noding import Segment, node_segments
from .labels import label_faces

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]


# ---------------------------------------------------------------------------
# Geometry -> Network
# ---------------------------------------------------------------------------
def leaf_geometries(geometry) -> List[Any]:
    """Flatten collections into leaf geometries exposing dimension + boundary_rings()."""
    if geometry is None:
        raise InvalidInputError("The geometry is None.")
    parts = getattr(geometry, "geometries", None)
    if parts is not None:
        out: List[Any] = []
        for g in parts:
            out.extend(leaf_geometries(g))
        return out
    if not hasattr(geometry, "dimension") or not callable(getattr(geometry, "boundary_rings", None)):
        raise UnsupportedGeometryError("Geometry does not expose dimension/boundary_rings().",
                                       {"type": type(geometry).__name__})
    if geometry.dimension not in (0, 1, 2):
        raise UnsupportedGeometryError("Unsupported geometry dimension.", {"dimension": geometry.dimension})
    return [geometry]


def _ring_segments(P: np.ndarray, tag: Tuple[int, int]) -> List[Segment]:
    return [Segment((float(P[i, 0]), float(P[i, 1])), (float(P[i + 1, 0]), float(P[i + 1, 1])), tag)
            for i in range(P.shape[0] - 1)]


def geometry_to_network(geometry, precision: Optional[PrecisionModel] = None, bidirectional: bool = True,
                        *, config: Optional[Dict[str, Any]] = None) -> Network:
    """
    Build a planar halfedge network from one geometry or a sequence of geometries.

    Parameters
    ----------
    geometry : geometry or list/tuple of geometries
        Each list element becomes one source index (0, 1, ...).
    precision : PrecisionModel, optional
        Wins over `config["precision"]`.
    bidirectional : bool
        Edges traversable both ways (True) or only in input direction (False).
    config : dict, optional
        Overrides for `network.config.DEFAULTS`.

    Returns
    -------
    Network
        Linked network with faces enumerated and labeled.

    Raises
    ------
    InvalidInputError
        If an input is None.
    UnsupportedGeometryError
        If an input lacks the boundary-rings capability.
    DegenerateGeometryError
        If a ring or line collapses under snapping.
    NetworkIntegrityError
        If validation is enabled and an error-level check fails.
    """
    cfg = resolve_config(config)
    pm = precision_from(cfg, precision)
    sources = list(geometry) if isinstance(geometry, (list, tuple)) else [geometry]
    if not sources:
        raise InvalidInputError("No geometries given.")

    net = Network(pm, bidirectional, n_sources=len(sources))
    segments: List[Segment] = []
    points: List[Tuple[Coordinate, int]] = []
    endpoints: List[Tuple[Coordinate, int]] = []

    for gi, geom in enumerate(sources):
        for leaf in leaf_geometries(geom):
            dim = leaf.dimension
            rings = leaf.boundary_rings()
            net.sources[gi].dimension = max(net.sources[gi].dimension, dim)
            if dim == 2:
                if not rings:
                    continue
                prepared = [prepare_ring(r, pm) for r in rings]
                net.sources[gi].polygons.append((prepared[0], prepared[1:]))
                for P in prepared:
                    segments.extend(_ring_segments(P, (gi, 2)))
            elif dim == 1:
                for r in rings:
                    P = prepare_path(r, pm)
                    segments.extend(_ring_segments(P, (gi, 1)))
                    endpoints.append((pm.snap(P[0]), gi))
                    endpoints.append((pm.snap(P[-1]), gi))
            else:
                for r in rings:
                    for xy in np.asarray(r, dtype=float).reshape(-1, 2):
                        points.append((pm.snap(xy), gi))

    noding = cfg["noding"]
    noded = node_segments(segments, [p for p, _ in points], pm,
                          grid_bins=int(noding["grid_bins"]), max_passes=int(noding["max_passes"]))
    for s in noded:
        net.add_edge(net.add_vertex(s.a), net.add_vertex(s.b), s.tag)
    for xy, gi in points:
        net.point_tags[net.add_vertex(xy)].add(gi)
    for xy, gi in endpoints:
        counts = net.endpoint_counts[net.add_vertex(xy)]
        counts[gi] = counts.get(gi, 0) + 1

    net.link()
    net.build_faces()
    label_faces(net)
    logger.debug("Network built: %d vertices, %d edges, %d faces (%d components)",
                 net.n_vertices, net.n_edges, len(net.faces), net.n_components)

    if cfg.get("validate"):
        report = run_checks(net, cfg.get("checks"))
        if not report["ok"]:
            failed = [rid for rid, f in report["rules"].items() if f["severity"] == "error" and not f["ok"]]
            raise NetworkIntegrityError("Network validation failed.", {"rules": failed})
    return net


# ---------------------------------------------------------------------------
# Network -> Geometry
# ---------------------------------------------------------------------------
def area_faces(network: Network, keep: Optional[Callable[[int], bool]] = None) -> List[int]:
    """
    Bounded faces with positive area. On a one-way network a face also needs every
    non-dangling boundary halfedge to be forward.
    """
    out: List[int] = []
    for f in network.bounded_faces():
        if network.faces[f].area <= 0.0:
            continue
        if not network.bidirectional:
            cyc = network.cycle(f)
            if any(not network.forward[h] for h in cyc if network.face[network.twin[h]] != f):
                continue
        if keep is not None and not keep(f):
            continue
        out.append(f)
    return out


def _trace_rings(network: Network, S: Set[int]) -> List[np.ndarray]:
    """Link boundary halfedges `S` into closed rings (clockwise rotation at each vertex)."""
    rings: List[np.ndarray] = []
    visited: Set[int] = set()
    for start in sorted(S):
        if start in visited:
            continue
        pts: List[Coordinate] = []
        h = start
        while True:
            visited.add(h)
            pts.append(network.coords[network.origin[h]])
            cand = network.next[h]
            turns = 0
            while cand not in S:
                cand = network.next[network.twin[cand]]
                turns += 1
                if turns > network.n_halfedges:
                    raise NetworkIntegrityError("Ring linking did not find a continuation.", {"halfedge": h})
            h = cand
            if h == start:
                break
            if h in visited:
                raise NetworkIntegrityError("Ring linking revisited a halfedge.", {"halfedge": h})
        pts.append(pts[0])
        rings.append(np.array(pts, dtype=float))
    return rings


def _probe_points(ring: np.ndarray):
    for xy in ring[:-1]:
        yield (float(xy[0]), float(xy[1]))
    for a, b in zip(ring[:-1], ring[1:]):
        yield (0.5 * float(a[0] + b[0]), 0.5 * float(a[1] + b[1]))


def _assemble_polygons(network: Network, rings: List[np.ndarray]) -> List[Tuple[np.ndarray, List[np.ndarray]]]:
    shells = [(r, signed_area(r)) for r in rings if signed_area(r) > 0.0]
    holes = [r for r in rings if signed_area(r) < 0.0]
    owned: Dict[int, List[np.ndarray]] = {i: [] for i in range(len(shells))}

    for hole in holes:
        best, best_area = -1, float("inf")
        for i, (shell, area) in enumerate(shells):
            if area >= best_area:
                continue
            for p in _probe_points(hole):
                res = winding_number(shell, p, True, network.precision)
                if res.boundary is BoundaryState.ON_BOUNDARY:
                    continue
                if res.winding_number != 0:
                    best, best_area = i, area
                break
        if best < 0:
            raise NetworkIntegrityError("Hole ring has no containing shell.", {"n_vertices": len(hole) - 1})
        owned[best].append(hole)
    return [(shells[i][0], owned[i]) for i in range(len(shells))]


def _polygons(network: Network, faces: List[int], dissolve: bool) -> List[Tuple[np.ndarray, List[np.ndarray]]]:
    region = [network.halfedge_region(h) for h in range(network.n_halfedges)]
    kept = set(faces)
    boundary: Dict[int, Set[int]] = {}
    for h, r in enumerate(region):
        if r not in kept:
            continue
        other = region[network.twin[h]]
        if dissolve and other not in kept:
            boundary.setdefault(-1, set()).add(h)
        elif not dissolve and other != r:
            boundary.setdefault(r, set()).add(h)
    out = []
    for key in sorted(boundary):
        out.extend(_assemble_polygons(network, _trace_rings(network, boundary[key])))
    return out


def _line_chains(network: Network) -> List[np.ndarray]:
    """Edges with the same region on both sides, merged through line-degree-2 vertices."""
    line_edges = {e for e in range(network.n_edges)
                  if network.halfedge_region(2 * e) == network.halfedge_region(2 * e + 1)}
    if not line_edges:
        return []
    out_lines: Dict[int, List[int]] = {}
    for e in sorted(line_edges):
        h = 2 * e if network.forward[2 * e] else 2 * e + 1
        for g in (h, h ^ 1):
            out_lines.setdefault(network.origin[g], []).append(g)

    chains: List[np.ndarray] = []
    used: Set[int] = set()

    def walk(h: int) -> List[Coordinate]:
        pts = [network.coords[network.origin[h]]]
        while True:
            used.add(h >> 1)
            w = network.destination(h)
            pts.append(network.coords[w])
            nxt = [g for g in out_lines[w] if (g >> 1) not in used]
            if len(out_lines[w]) != 2 or not nxt:
                return pts
            h = nxt[0]

    for v in sorted(out_lines):
        if len(out_lines[v]) == 2:
            continue
        for h in out_lines[v]:
            if (h >> 1) not in used:
                chains.append(np.array(walk(h), dtype=float))
    # closed loops made only of degree-2 vertices
    for e in sorted(line_edges):
        if e not in used:
            h = 2 * e if network.forward[2 * e] else 2 * e + 1
            chains.append(np.array(walk(h), dtype=float))
    return chains


def network_to_geometry(network: Network, target_dimension: Optional[int] = 2,
                        factory: Optional[GeometryFactory] = None, *,
                        keep: Optional[Callable[[int], bool]] = None, dissolve: bool = False):
    """
    Extract geometry of the requested dimension from a network.

    Parameters
    ----------
    network : Network
        A linked network with faces.
    target_dimension : {0, 1, 2, None}
        2 = polygons from area faces, 1 = line chains, 0 = isolated points, None = all.
    factory : GeometryFactory, optional
        Result builder; defaults to `ShapeFactory`.
    keep : callable(face_id) -> bool, optional
        Area-face filter.
    dissolve : bool
        Merge kept faces across shared edges instead of emitting one polygon per face.

    Returns
    -------
    geometry
        One part directly, otherwise a collection (empty collection when nothing matched).

    Raises
    ------
    InvalidInputError
        If `target_dimension` is not one of {0, 1, 2, None}.
    """
    if target_dimension not in (0, 1, 2, None):
        raise InvalidInputError("target_dimension must be 0, 1, 2 or None.", {"target_dimension": target_dimension})
    fac = resolve_factory(factory)
    parts: List[Any] = []

    if target_dimension in (2, None):
        for shell, holes in _polygons(network, area_faces(network, keep), dissolve):
            parts.append(fac.create_polygon(shell, holes))
    if target_dimension in (1, None):
        for chain in _line_chains(network):
            parts.append(fac.create_line_string(chain))
    if target_dimension in (0, None):
        for v in network.isolated_vertices():
            parts.append(fac.create_point(network.coords[v]))

    logger.debug("Extracted %d part(s) of dimension %s", len(parts), target_dimension)
    if len(parts) == 1:
        return parts[0]
    return fac.create_collection(parts)


def source_dimensions(geometries: Sequence[Any]) -> List[List[int]]:
    """Leaf dimensions of each geometry (used by operations for input validation)."""
    return [[leaf.dimension for leaf in leaf_geometries(g)] for g in geometries]
