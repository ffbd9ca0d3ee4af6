# -*- coding: utf-8 -*-
# Topolith/network/core/halfedge.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/7/2026

Purpose:
--------
Halfedge (DCEL) planar subdivision stored as an arena of integer ids. Vertices, halfedges
and faces reference each other only by index, so the cyclic twin/next/face structure has no
object reference cycles.

Storage Convention:
-------------------
   - Halfedges are allocated in twin pairs: h and h ^ 1; the undirected edge id is h >> 1.
     `twin` is still stored explicitly and checked by `network.checks`.
   - Per halfedge: origin, twin, next, face, forward.
   - Per edge: tag set of (source index, source dimension).
   - Per vertex: coordinate, one outgoing halfedge (-1 if isolated), outgoing list sorted
     counter-clockwise after `link()`, point tags, line-endpoint counts, and for isolated
     vertices the enclosing bounded face.
   - Faces are the `next`-cycles. Per connected component, the cycle with the smallest
     signed area is the component's outer face; its `parent` is the bounded face of another
     component that encloses it (-1 = unbounded region).

Lifecycle:
----------
   add_vertex/add_edge  ->  link()  ->  build_faces()  ->  read-only use.
"""

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Dict, List, Optional, Sequence, Set, Tuple
import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from geometry.errors import DegenerateGeometryError, NetworkIntegrityError
from geometry.model.precision import PrecisionModel, resolve_precision
from geometry.topology.loop import signed_area
from geometry.topology.orientation import Orientation, orientation
from geometry.topology.winding import winding_number

Coordinate = Tuple[float, float]


@dataclass
class Face:
    edge: int                      # one halfedge of the cycle
    area: float                    # signed shoelace area of the cycle
    component: int = -1
    is_outer: bool = False
    parent: int = -1               # outer cycles: enclosing bounded face, -1 = unbounded
    holes: List[int] = field(default_factory=list)   # bounded faces: enclosed outer cycles
    labels: Dict[int, object] = field(default_factory=dict)


@dataclass
class AreaSource:
    """Snapped polygon parts (shell, holes) of one input, kept for face labeling."""
    polygons: List[Tuple[np.ndarray, List[np.ndarray]]] = field(default_factory=list)
    dimension: int = -1


class Network:
    """
    Planar halfedge network for one conversion call.

    Parameters
    ----------
    precision : PrecisionModel, optional
        Model used to snap vertices and for all orientation tests.
    bidirectional : bool
        If True every inserted edge is traversable both ways; otherwise only in input direction.
    n_sources : int
        Number of input geometries (tags and labels are indexed 0..n_sources-1).
    """

    def __init__(self, precision: Optional[PrecisionModel] = None, bidirectional: bool = True,
                 n_sources: int = 1):
        self.precision = resolve_precision(precision)
        self.bidirectional = bool(bidirectional)
        self.sources: List[AreaSource] = [AreaSource() for _ in range(n_sources)]

        # vertices
        self.coords: List[Coordinate] = []
        self.vertex_edge: List[int] = []
        self.point_tags: List[Set[int]] = []
        self.endpoint_counts: List[Dict[int, int]] = []
        self.vertex_face: List[int] = []
        self._vertex_index: Dict[Coordinate, int] = {}
        self._out: List[List[int]] = []

        # halfedges
        self.origin: List[int] = []
        self.twin: List[int] = []
        self.next: List[int] = []
        self.face: List[int] = []
        self.forward: List[bool] = []

        # edges
        self.edge_tags: List[Set[Tuple[int, int]]] = []
        self._edge_index: Dict[Tuple[int, int], int] = {}

        # faces
        self.faces: List[Face] = []
        self.n_components = 0
        self._linked = False

    # ---------------------------------------------------------------- sizes
    @property
    def n_vertices(self) -> int:
        return len(self.coords)

    @property
    def n_halfedges(self) -> int:
        return len(self.origin)

    @property
    def n_edges(self) -> int:
        return len(self.origin) // 2

    # ---------------------------------------------------------------- construction
    def add_vertex(self, xy: Sequence[float]) -> int:
        """Return the id of the vertex at snapped `xy`, creating it if needed."""
        c = self.precision.snap(xy)
        vid = self._vertex_index.get(c)
        if vid is not None:
            return vid
        vid = len(self.coords)
        self._vertex_index[c] = vid
        self.coords.append(c)
        self.vertex_edge.append(-1)
        self.point_tags.append(set())
        self.endpoint_counts.append({})
        self.vertex_face.append(-1)
        self._out.append([])
        return vid

    def add_edge(self, u: int, v: int, tag: Optional[Tuple[int, int]] = None) -> int:
        """
        Insert the undirected edge {u, v} (or merge into the existing one).

        Returns
        -------
        int
            The halfedge running u -> v.

        Raises
        ------
        DegenerateGeometryError
            If u == v (zero-length edge after snapping).
        """
        if u == v:
            raise DegenerateGeometryError("Zero-length edge after snapping.", {"vertex": self.coords[u]})
        key = (u, v) if u < v else (v, u)
        e = self._edge_index.get(key)
        if e is None:
            e = len(self.edge_tags)
            self._edge_index[key] = e
            h = 2 * e
            self.origin.extend((u, v))
            self.twin.extend((h + 1, h))
            self.next.extend((-1, -1))
            self.face.extend((-1, -1))
            self.forward.extend((True, self.bidirectional))
            self.edge_tags.append(set())
            self._out[u].append(h)
            self._out[v].append(h + 1)
            if self.vertex_edge[u] < 0:
                self.vertex_edge[u] = h
            if self.vertex_edge[v] < 0:
                self.vertex_edge[v] = h + 1
            self._linked = False
        h = 2 * e if self.origin[2 * e] == u else 2 * e + 1
        self.forward[h] = True
        if self.bidirectional:
            self.forward[h ^ 1] = True
        if tag is not None:
            self.edge_tags[e].add(tag)
        return h

    # ---------------------------------------------------------------- navigation
    def destination(self, h: int) -> int:
        return self.origin[self.twin[h]]

    def outgoing(self, v: int) -> List[int]:
        """Outgoing halfedges of v (counter-clockwise order once linked)."""
        return list(self._out[v])

    def degree(self, v: int) -> int:
        return len(self._out[v])

    def segment(self, h: int) -> Tuple[Coordinate, Coordinate]:
        return self.coords[self.origin[h]], self.coords[self.destination(h)]

    # ---------------------------------------------------------------- linking
    def _ccw_compare(self, v: int):
        o = self.coords[v]

        def half(h: int) -> int:
            d = self.coords[self.destination(h)]
            dx, dy = d[0] - o[0], d[1] - o[1]
            return 0 if (dy > 0 or (dy == 0 and dx > 0)) else 1

        def cmp(h1: int, h2: int) -> int:
            a, b = half(h1), half(h2)
            if a != b:
                return a - b
            turn = orientation(o, self.coords[self.destination(h1)], self.coords[self.destination(h2)],
                               self.precision)
            if turn is Orientation.COUNTER_CLOCKWISE:
                return -1
            if turn is Orientation.CLOCKWISE:
                return 1
            return h1 - h2

        return cmp

    def link(self) -> None:
        """
        Sort outgoing halfedges counter-clockwise around each vertex and assign `next`:
        next(h) is the outgoing halfedge immediately clockwise from twin(h) at dest(h).
        """
        for v in range(self.n_vertices):
            self._out[v].sort(key=cmp_to_key(self._ccw_compare(v)))
        position: Dict[int, int] = {}
        for v in range(self.n_vertices):
            for i, h in enumerate(self._out[v]):
                position[h] = i
        for h in range(self.n_halfedges):
            t = self.twin[h]
            ring = self._out[self.origin[t]]
            self.next[h] = ring[(position[t] - 1) % len(ring)]
        self._linked = True

    # ---------------------------------------------------------------- faces
    def cycle(self, f: int) -> List[int]:
        """Halfedges of face `f` in `next` order."""
        start = self.faces[f].edge
        out = [start]
        h = self.next[start]
        while h != start:
            out.append(h)
            h = self.next[h]
            if len(out) > self.n_halfedges:
                raise NetworkIntegrityError("Face cycle does not close.", {"face": f})
        return out

    def cycle_coordinates(self, f: int) -> np.ndarray:
        """Closed (k+1, 2) ring of the origins along face `f`."""
        pts = [self.coords[self.origin[h]] for h in self.cycle(f)]
        pts.append(pts[0])
        return np.array(pts, dtype=float)

    def region(self, f: int) -> int:
        """Bounded face whose region `f` belongs to (-1 = unbounded region)."""
        if f < 0:
            return -1
        face = self.faces[f]
        return face.parent if face.is_outer else f

    def halfedge_region(self, h: int) -> int:
        return self.region(self.face[h])

    def _components(self) -> List[int]:
        """Connected-component label per vertex; isolated vertices are their own component."""
        n = self.n_vertices
        if n == 0:
            self.n_components = 0
            return []
        row = np.asarray(self.origin[0::2], dtype=np.int64)
        col = np.asarray(self.origin[1::2], dtype=np.int64)
        adj = coo_matrix((np.ones(row.shape[0]), (row, col)), shape=(n, n)).tocsr()
        n_components, labels = connected_components(adj, directed=False)
        self.n_components = int(n_components)
        return [int(c) for c in labels]

    def _enclosing_face(self, xy: Coordinate, component: int, candidates: List[int],
                        rings: Dict[int, np.ndarray]) -> int:
        best, best_area = -1, float("inf")
        for f in candidates:
            face = self.faces[f]
            if face.component == component or face.area >= best_area:
                continue
            ring = rings[f]
            if not (ring[:, 0].min() <= xy[0] <= ring[:, 0].max() and ring[:, 1].min() <= xy[1] <= ring[:, 1].max()):
                continue
            if winding_number(ring, xy, False, self.precision).winding_number != 0:
                best, best_area = f, face.area
        return best

    def build_faces(self) -> None:
        """
        Enumerate next-cycles into faces, designate one outer face per component and
        attach outer faces / isolated vertices to their enclosing bounded face.

        Raises
        ------
        NetworkIntegrityError
            If `link()` was not run or a cycle does not close.
        """
        if not self._linked:
            self.link()
        comp = self._components()
        self.faces = []
        self.face = [-1] * self.n_halfedges
        for h in range(self.n_halfedges):
            if self.face[h] != -1:
                continue
            fid = len(self.faces)
            g, pts, steps = h, [], 0
            while True:
                self.face[g] = fid
                pts.append(self.coords[self.origin[g]])
                g = self.next[g]
                steps += 1
                if g == h:
                    break
                if steps > self.n_halfedges or self.face[g] != -1:
                    raise NetworkIntegrityError("Broken next-cycle while enumerating faces.", {"halfedge": h})
            self.faces.append(Face(edge=h, area=signed_area(np.array(pts, dtype=float)),
                                   component=comp[self.origin[h]]))

        # one outer face per component: the cycle of smallest signed area
        outer: Dict[int, int] = {}
        for fid, face in enumerate(self.faces):
            cur = outer.get(face.component)
            if cur is None or face.area < self.faces[cur].area:
                outer[face.component] = fid
        for fid in outer.values():
            self.faces[fid].is_outer = True

        bounded = [f for f, face in enumerate(self.faces) if not face.is_outer]
        rings = {f: self.cycle_coordinates(f) for f in bounded}
        for fid in outer.values():
            face = self.faces[fid]
            probe = self.coords[self.origin[face.edge]]
            face.parent = self._enclosing_face(probe, face.component, bounded, rings)
            if face.parent >= 0:
                self.faces[face.parent].holes.append(fid)
        for v in range(self.n_vertices):
            if not self._out[v]:
                self.vertex_face[v] = self._enclosing_face(self.coords[v], comp[v], bounded, rings)

    # ---------------------------------------------------------------- queries
    def bounded_faces(self) -> List[int]:
        return [f for f, face in enumerate(self.faces) if not face.is_outer]

    def outer_faces(self) -> List[int]:
        return [f for f, face in enumerate(self.faces) if face.is_outer]

    def isolated_vertices(self) -> List[int]:
        return [v for v in range(self.n_vertices) if not self._out[v]]

    def bbox(self) -> Tuple[float, float, float, float]:
        if not self.coords:
            return (0.0, 0.0, 0.0, 0.0)
        P = np.array(self.coords, dtype=float)
        return (float(P[:, 0].min()), float(P[:, 1].min()), float(P[:, 0].max()), float(P[:, 1].max()))
