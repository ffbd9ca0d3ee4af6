# -*- coding: utf-8 -*-
# Topolith/network/checks/__init__.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/10/2026

Purpose:
--------
Public API for running halfedge-network invariant checks and returning normalized findings
suitable for tests, CI and debugging output.

Main Tasks
----------
   - Provide defaults (`DEFAULTS`) for enable/disable policy and thresholds.
   - Orchestrate registry-defined rules over a Network and a shared cache.
   - Aggregate findings and compute a top-level `ok` status.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {
    "n_vertices": int, "n_edges": int, "n_faces": int, "n_components": int,
    "thresholds": dict, "enabled": dict
  }
}
"""


from typing import Dict, Any, Optional
import copy
import logging

from ..config import _deep_merge
from ..core.grid import SegmentGrid, segment_bboxes
from ..core.halfedge import Network
from .registry import REGISTRY, get_enabled_ids

logger = logging.getLogger(__name__)


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "enabled": {
        # errors
        "twin_symmetry": True,
        "next_continuity": True,
        "face_closure": True,
        "outer_faces": True,
        "zero_length_edges": True,
        "planarity": True,
        "euler_characteristic": True,
        # warnings
        "dangling_edges": True,
        "isolated_vertices": True,
    },
    "thresholds": {
        "grid_bins": 64,
        "max_examples": 25,
    },
}


def precompute_cache(net: Network, th: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shared precomputations: edge segments, their bboxes and a spatial grid over them.
    """
    segments = [net.segment(2 * e) for e in range(net.n_edges)]
    bboxes = segment_bboxes(segments)
    return {
        "segments": segments,
        "bboxes": bboxes,
        "spatial_grid": SegmentGrid(bboxes, nx=int(th.get("grid_bins", 64))),
    }


def _meta(net: Network, cfg):
    """
    Assemble metadata snapshot (sizes, thresholds, enabled map) for the results payload.
    """
    return {
        "n_vertices": int(net.n_vertices),
        "n_edges": int(net.n_edges),
        "n_faces": int(len(net.faces)),
        "n_components": int(net.n_components),
        "thresholds": copy.deepcopy(cfg.get("thresholds", {})),
        "enabled": copy.deepcopy(cfg.get("enabled", {})),
    }


def run_checks(net: Network, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (per registry order) against a network and return findings.

    Parameters
    ----------
    net : Network
        A linked network with faces built.
    config : dict, optional
        Overrides for `DEFAULTS` with the same structure (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        Payload with keys:
          - "ok": bool (False iff any ERROR-severity rule fails).
          - "rules": dict, rule_id -> finding dict.
          - "meta": dict, network sizes, thresholds, enabled map.
    """
    cfg = _deep_merge(DEFAULTS, config or {})
    th = cfg.get("thresholds", {})
    cache = precompute_cache(net, th)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY[rid]
        finding = spec.fn(net, th, cache)
        finding["severity"] = spec.severity
        finding["id"] = rid
        finding["fixable"] = spec.fixable
        results[rid] = finding

    ok = all(f["ok"] for rid, f in results.items() if REGISTRY[rid].severity == "error")
    if not ok:
        logger.warning("Network checks failed: %s",
                       ", ".join(rid for rid, f in results.items() if not f["ok"] and f["severity"] == "error"))

    return {
        "ok": ok,
        "rules": results,
        "meta": _meta(net, cfg),
    }
