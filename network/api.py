# -*- coding: utf-8 -*-
# Topolith/network/api.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/10/2026

Purpose
-------
High-level API for building and inspecting halfedge networks.

Main Tasks
----------
    1. `geometry_to_network` / `network_to_geometry` (re-exported from `network.conversion`).
    2. `check_network`: run the invariant rules and return the findings payload.
    3. `network_summary`: inventory + valence in one dict.
"""

from typing import Any, Dict, Optional
import logging

from .checks import run_checks
from .conversion import geometry_to_network, network_to_geometry
from .core.halfedge import Network
from .stats import inventory, valence

logger = logging.getLogger(__name__)


def check_network(net: Network, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run network invariant checks.

    Parameters
    ----------
    net : Network
        Network produced by `geometry_to_network`.
    config : dict, optional
        Overrides for `network.checks.DEFAULTS` ("enabled", "thresholds").
    """
    report = run_checks(net, config)
    logger.info("Network checks: ok=%s (%d rule(s))", report["ok"], len(report["rules"]))
    return report


def network_summary(net: Network) -> Dict[str, Any]:
    """Inventory and vertex valence of `net`."""
    return {"inventory": inventory(net), "valence": valence(net)}


__all__ = ["geometry_to_network", "network_to_geometry", "check_network", "network_summary"]
