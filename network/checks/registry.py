# -*- coding: utf-8 -*-
# Topolith/network/checks/registry.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/10/2026

Purpose:
--------
Central registry of network invariant rules. Each rule is defined once here with its
metadata (id, function, severity, fixability), providing a single source of truth for
execution order and selection.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
"""


from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import rules as _r


# ---- Rule spec ----

@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(net, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"
    fixable: bool = False


# ---- Build registry ----

REGISTRY: Dict[str, RuleSpec] = {}

def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


# Errors (broken structure)
_add(RuleSpec("twin_symmetry",        _r.twin_symmetry,        "error"))
_add(RuleSpec("next_continuity",      _r.next_continuity,      "error"))
_add(RuleSpec("face_closure",         _r.face_closure,         "error"))
_add(RuleSpec("outer_faces",          _r.outer_faces,          "error"))
_add(RuleSpec("zero_length_edges",    _r.zero_length_edges,    "error", True))
_add(RuleSpec("planarity",            _r.planarity,            "error", True))
_add(RuleSpec("euler_characteristic", _r.euler_characteristic, "error"))

# Warnings (legal but often unintended)
_add(RuleSpec("dangling_edges",       _r.dangling_edges,       "warn", True))
_add(RuleSpec("isolated_vertices",    _r.isolated_vertices,    "warn", True))


# ---- Deterministic execution order ----
# Pointer structure first; then geometry; then counts.
RULES_ORDER: List[str] = [
    "twin_symmetry",
    "next_continuity",
    "face_closure",
    "outer_faces",
    "zero_length_edges",
    "planarity",
    "euler_characteristic",
    "dangling_edges",
    "isolated_vertices",
]


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter the canonical RULES_ORDER based on a user-provided enable/disable map.

    Parameters
    ----------
    enabled_map : dict[str, bool] or None
        Mapping of rule_id -> bool. If a rule_id is absent, it defaults to enabled.

    Returns
    -------
    List[str]
        Ordered list of rule ids that remain enabled, preserving RULES_ORDER.
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
