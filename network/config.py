# -*- coding: utf-8 -*-
# Topolith/network/config.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/8/2026

Purpose:
--------
Defaults and merging for network construction options.

Schema:
-------
{
  "precision": {"kind": "floating" | "floating_single" | "fixed", "scale": float | None},
  "noding":    {"grid_bins": int, "max_passes": int},
  "validate":  bool,                          # run network checks after construction
  "checks":    {"enabled": {...}, "thresholds": {...}},   # forwarded to network.checks
}
"""

from typing import Any, Dict, Optional
import copy

from geometry.model.precision import PrecisionModel


DEFAULTS: Dict[str, Any] = {
    "precision": {"kind": "floating", "scale": None},
    "noding": {"grid_bins": 64, "max_passes": 4},
    "validate": False,
    "checks": {"enabled": {}, "thresholds": {}},
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return `DEFAULTS` overlaid with `config` (a fresh dict)."""
    return _deep_merge(DEFAULTS, config or {})


def precision_from(cfg: Dict[str, Any], precision: Optional[PrecisionModel] = None) -> PrecisionModel:
    """An explicit `precision` wins over `cfg["precision"]`."""
    if precision is not None:
        return precision
    return PrecisionModel.from_config(cfg.get("precision"))
