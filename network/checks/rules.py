# -*- coding: utf-8 -*-
# Topolith/network/checks/rules.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/10/2026

Purpose:
--------
Network invariant rules. Each rule inspects a built `Network` and returns one normalized
"finding" record.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error" | "warn",   # overwritten from the registry
      "ok": bool,
      "count": int,                   # number of violations (or 0)
      "examples": [...],              # capped sample (halfedge/edge/vertex ids, pairs)
      "details": {...},
      "fixable": bool,                # overwritten from the registry
    }

Notes:
------
   - Rules never mutate the network.
   - `planarity` reuses the spatial grid from `cache["spatial_grid"]`.
"""

from typing import Dict, List

from geometry.topology.segment import intersection


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict, th: Dict = None):
    cap = int((th or {}).get("max_examples", 25))
    return {
        "id": rule_id,
        "severity": "error",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:cap],
        "details": details or {},
        "fixable": False,
    }


# ---------------------------------------------------------------- errors
def twin_symmetry(net, th, cache):
    """twin(twin(h)) == h, twin(h) != h, and twins have swapped endpoints."""
    bad = []
    for h in range(net.n_halfedges):
        t = net.twin[h]
        if t == h or not (0 <= t < net.n_halfedges) or net.twin[t] != h or net.origin[t] == net.origin[h]:
            bad.append(h)
    return _finding("twin_symmetry", not bad, len(bad), bad, {}, th)


def next_continuity(net, th, cache):
    """next(h) starts where h ends."""
    bad = [h for h in range(net.n_halfedges)
           if net.next[h] < 0 or net.origin[net.next[h]] != net.destination(h)]
    return _finding("next_continuity", not bad, len(bad), bad, {}, th)


def face_closure(net, th, cache):
    """Every halfedge lies on exactly one face cycle and each cycle returns to its start."""
    bad = []
    seen = [False] * net.n_halfedges
    for f, face in enumerate(net.faces):
        h, steps = face.edge, 0
        while True:
            if net.face[h] != f or seen[h]:
                bad.append(h)
                break
            seen[h] = True
            h = net.next[h]
            steps += 1
            if h == face.edge:
                break
            if steps > net.n_halfedges:
                bad.append(face.edge)
                break
    bad.extend(h for h in range(net.n_halfedges) if not seen[h])
    return _finding("face_closure", not bad, len(bad), sorted(set(bad)), {"n_faces": len(net.faces)}, th)


def outer_faces(net, th, cache):
    """Exactly one outer face per connected component with edges."""
    per_comp: Dict[int, int] = {}
    for face in net.faces:
        if face.is_outer:
            per_comp[face.component] = per_comp.get(face.component, 0) + 1
    comps_with_edges = {net.faces[net.face[h]].component for h in range(net.n_halfedges)} if net.faces else set()
    bad = sorted(c for c in comps_with_edges if per_comp.get(c, 0) != 1)
    return _finding("outer_faces", not bad, len(bad), bad,
                    {"n_outer": sum(per_comp.values()), "n_components_with_edges": len(comps_with_edges)}, th)


def zero_length_edges(net, th, cache):
    bad = [e for e in range(net.n_edges) if net.coords[net.origin[2 * e]] == net.coords[net.origin[2 * e + 1]]]
    return _finding("zero_length_edges", not bad, len(bad), bad, {}, th)


def planarity(net, th, cache):
    """Edges may meet only at shared endpoints."""
    segs = cache["segments"]
    bb = cache["bboxes"]
    bad = []
    for i, j in cache["spatial_grid"].candidate_pairs():
        if bb[i, 0] > bb[j, 2] or bb[j, 0] > bb[i, 2] or bb[i, 1] > bb[j, 3] or bb[j, 1] > bb[i, 3]:
            continue
        (a, b), (c, d) = segs[i], segs[j]
        for p in intersection(a, b, c, d, net.precision):
            if p not in (a, b) or p not in (c, d):
                bad.append((i, j))
                break
    return _finding("planarity", not bad, len(bad), bad, {"n_edges": len(segs)}, th)


def euler_characteristic(net, th, cache):
    """V - E + F_bounded == C (one unbounded face shared by all components)."""
    n_bounded = len(net.bounded_faces())
    chi = net.n_vertices - net.n_edges + n_bounded
    ok = chi == net.n_components
    return _finding("euler_characteristic", ok, 0 if ok else 1, [] if ok else [chi],
                    {"V": net.n_vertices, "E": net.n_edges, "F_bounded": n_bounded,
                     "C": net.n_components, "chi": chi}, th)


# ---------------------------------------------------------------- warnings
def dangling_edges(net, th, cache):
    """Edges with an endpoint of degree 1."""
    bad = [e for e in range(net.n_edges)
           if net.degree(net.origin[2 * e]) == 1 or net.degree(net.origin[2 * e + 1]) == 1]
    f = _finding("dangling_edges", not bad, len(bad), bad, {}, th)
    f["severity"] = "warn"
    return f


def isolated_vertices(net, th, cache):
    bad = net.isolated_vertices()
    f = _finding("isolated_vertices", not bad, len(bad), bad, {}, th)
    f["severity"] = "warn"
    return f
