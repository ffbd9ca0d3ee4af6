# -*- coding: utf-8 -*-
# Topolith/main.py

"""
End-to-end driver:
  1) Point predicates (orientation, winding number, convex hull)
  2) Build a network from two overlapping polygons (+ checks, summary, preview)
  3) Overlay in all four modes
  4) Relate + named predicates
  5) Polygonize a set of crossing lines
"""

import os
import json
import logging
import sys

import numpy as np

from geometry.api import orientation, winding_number, convex_hull, PrecisionModel
from geometry.model.shapes import LineString, GeometryCollection, box
from network.api import geometry_to_network, check_network, network_summary
from operations.api import overlay, relate, polygonize, hull_geometry
from post.plot_network import plot_network, plot_geometry


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Topolith")

    os.makedirs("plots", exist_ok=True)
    show = "--show" in sys.argv

    # ------------------------------------------------------------------
    # 1) Point predicates
    # ------------------------------------------------------------------
    square = np.array([[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]], dtype=float)
    log.info("orientation((0,0),(1,0),(0,1)) = %s", orientation((0, 0), (1, 0), (0, 1)).name)
    log.info("winding((5,5)) = %s", winding_number(square, (5, 5)))
    log.info("winding((10,5), verify) = %s", winding_number(square, (10, 5), verify_boundary=True))

    cloud = np.random.default_rng(7).uniform(0.0, 10.0, size=(40, 2))
    hull = convex_hull(cloud)
    log.info("convex hull of %d points: %d vertices", len(cloud), len(hull) - 1)

    # ------------------------------------------------------------------
    # 2) Network over two overlapping squares
    # ------------------------------------------------------------------
    a = box(0, 0, 10, 10)
    b = box(5, 5, 15, 15)
    pm = PrecisionModel("fixed", scale=1000.0)

    net = geometry_to_network([a, b], pm)
    findings = check_network(net)
    log.info("Network summary:\n%s", json.dumps(network_summary(net), indent=2))
    plot_network(net, show=show, save_path="plots/network.png")

    if not findings["ok"]:
        failures = [rid for rid, f in findings["rules"].items() if f["severity"] == "error" and not f["ok"]]
        print("Network validation failed: {}".format(", ".join(failures)), file=sys.stderr)
        sys.exit(1)

    # ------------------------------------------------------------------
    # 3) Overlay
    # ------------------------------------------------------------------
    for op in ("union", "intersection", "difference", "symmetric_difference"):
        result = overlay(a, b, op, pm)
        log.info("%-20s area = %.3f", op, result.area())
        plot_geometry(result, name=op, show=show, save_path="plots/overlay_{}.png".format(op))

    # ------------------------------------------------------------------
    # 4) Relate
    # ------------------------------------------------------------------
    im = relate(a, b, pm)
    log.info("relate(a, b) = %s (overlaps=%s, touches=%s)", im, im.is_overlaps(), im.is_touches())
    log.info("relate(a, hull) = %s", relate(a, hull_geometry(a)))

    # ------------------------------------------------------------------
    # 5) Polygonize a grid of crossing lines
    # ------------------------------------------------------------------
    lines = GeometryCollection([
        LineString([[0, 1], [3, 1]]), LineString([[0, 2], [3, 2]]),
        LineString([[1, 0], [1, 3]]), LineString([[2, 0], [2, 3]]),
    ])
    cells = polygonize(lines)
    log.info("polygonize: %d polygon(s), total area %.3f", len(getattr(cells, "geometries", [cells])), cells.area())
    plot_geometry(cells, name="polygonize", show=show, save_path="plots/polygonize.png")
