# -*- coding: utf-8 -*-
"""
Network invariant checks, configuration merge and statistics.
"""

from geometry.model.shapes import GeometryCollection, LineString, Point, box
from network.api import check_network, network_summary
from network.checks import DEFAULTS, run_checks
from network.checks.registry import REGISTRY, RULES_ORDER, get_enabled_ids
from network.config import DEFAULTS as NETWORK_DEFAULTS, resolve_config
from network.conversion import geometry_to_network
from network.stats import inventory, valence


def test_valid_network_passes_all_rules():
    report = run_checks(geometry_to_network([box(0, 0, 10, 10), box(5, 5, 15, 15)]))
    assert report["ok"]
    assert list(report["rules"]) == RULES_ORDER
    for finding in report["rules"].values():
        assert set(finding) == {"id", "severity", "ok", "count", "examples", "details", "fixable"}
    assert report["meta"]["n_edges"] == 12
    assert report["rules"]["euler_characteristic"]["details"]["chi"] == 1


def test_broken_twin_fails():
    net = geometry_to_network(box(0, 0, 1, 1))
    net.twin[0] = 0
    report = run_checks(net)
    assert not report["ok"]
    assert not report["rules"]["twin_symmetry"]["ok"]
    assert 0 in report["rules"]["twin_symmetry"]["examples"]


def test_broken_next_fails():
    net = geometry_to_network(box(0, 0, 1, 1))
    net.next[0] = 0
    report = run_checks(net)
    assert not report["rules"]["next_continuity"]["ok"]
    assert not report["ok"]


def test_warnings_do_not_fail_the_report():
    geom = GeometryCollection([box(0, 0, 10, 10), LineString([[10, 10], [15, 15]]), Point((30, 30))])
    report = run_checks(geometry_to_network(geom))
    assert report["ok"]
    assert report["rules"]["dangling_edges"]["severity"] == "warn"
    assert report["rules"]["dangling_edges"]["count"] == 1
    assert report["rules"]["isolated_vertices"]["count"] == 1


def test_rules_can_be_disabled():
    report = check_network(geometry_to_network(box(0, 0, 1, 1)), {"enabled": {"planarity": False}})
    assert "planarity" not in report["rules"]
    assert get_enabled_ids(None) == RULES_ORDER
    assert set(REGISTRY) == set(RULES_ORDER)
    assert DEFAULTS["enabled"]["planarity"] is True


def test_config_merge_does_not_mutate_defaults():
    cfg = resolve_config({"noding": {"max_passes": 9}})
    assert cfg["noding"] == {"grid_bins": 64, "max_passes": 9}
    assert NETWORK_DEFAULTS["noding"]["max_passes"] == 4


def test_inventory_and_valence():
    net = geometry_to_network(box(0, 0, 10, 10))
    inv = inventory(net)
    assert inv["n_vertices"] == 4 and inv["n_edges"] == 4 and inv["n_halfedges"] == 8
    assert inv["n_faces"] == 2 and inv["n_bounded_faces"] == 1 and inv["n_components"] == 1
    assert inv["euler_characteristic"] == 1
    assert inv["bbox"] == {"xmin": 0.0, "xmax": 10.0, "ymin": 0.0, "ymax": 10.0}
    val = valence(net)
    assert val["hist"] == {2: 4}
    assert val["mean"] == 2.0
    assert set(network_summary(net)) == {"inventory", "valence"}
