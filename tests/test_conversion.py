# -*- coding: utf-8 -*-
"""
Geometry <-> network conversion.
"""

import numpy as np
import pytest

from geometry.errors import DegenerateGeometryError, InvalidInputError, UnsupportedGeometryError
from geometry.model.factory import GeometryFactory
from geometry.model.precision import PrecisionModel
from geometry.model.shapes import GeometryCollection, LineString, Point, Polygon, box
from network.checks import run_checks
from network.conversion import geometry_to_network, network_to_geometry
from network.labels import Location


def test_square_round_trip():
    net = geometry_to_network(box(0, 0, 10, 10))
    assert (net.n_vertices, net.n_edges, len(net.bounded_faces())) == (4, 4, 1)
    out = network_to_geometry(net)
    assert isinstance(out, Polygon)
    assert out.area() == pytest.approx(100.0)


def test_polygon_with_hole_round_trip():
    poly = Polygon([[0, 0], [10, 0], [10, 10], [0, 10]], [[[3, 3], [3, 7], [7, 7], [7, 3]]])
    out = network_to_geometry(geometry_to_network(poly))
    # the hole itself is a bounded face too
    assert isinstance(out, GeometryCollection)
    areas = sorted(p.area() for p in out)
    assert areas == pytest.approx([16.0, 84.0])
    shell = [p for p in out if len(p.holes) == 1]
    assert len(shell) == 1


def test_overlapping_squares_are_noded():
    net = geometry_to_network([box(0, 0, 10, 10), box(5, 5, 15, 15)])
    assert net.n_vertices == 10
    assert net.n_edges == 12
    assert len(net.bounded_faces()) == 3
    labels = sorted(tuple(net.faces[f].labels[g] for g in (0, 1)) for f in net.bounded_faces())
    assert labels == sorted([(Location.INTERIOR, Location.EXTERIOR),
                             (Location.INTERIOR, Location.INTERIOR),
                             (Location.EXTERIOR, Location.INTERIOR)])
    assert run_checks(net)["ok"]


def test_dissolve_merges_kept_faces():
    net = geometry_to_network([box(0, 0, 10, 10), box(5, 5, 15, 15)])
    out = network_to_geometry(net, 2, keep=lambda f: True, dissolve=True)
    assert isinstance(out, Polygon)
    assert out.area() == pytest.approx(175.0)
    assert len(out.shell) == 9   # 8 vertices, closed


def test_crossing_lines_become_four_chains():
    net = geometry_to_network(GeometryCollection([LineString([[0, 0], [10, 10]]),
                                                  LineString([[0, 10], [10, 0]])]))
    out = network_to_geometry(net, 1)
    assert len(out) == 4
    assert all(len(line.coordinates) == 2 for line in out)


def test_polyline_chains_merge_through_degree_two_vertices():
    net = geometry_to_network(LineString([[0, 0], [1, 0], [2, 1], [3, 1]]))
    out = network_to_geometry(net, 1)
    assert isinstance(out, LineString)
    assert len(out.coordinates) == 4


def test_points_and_all_dimensions():
    geom = GeometryCollection([box(0, 0, 1, 1), Point((5, 5)), LineString([[3, 3], [4, 3]])])
    net = geometry_to_network(geom)
    assert isinstance(network_to_geometry(net, 0), Point)
    assert isinstance(network_to_geometry(net, 1), LineString)
    everything = network_to_geometry(net, None)
    assert sorted(g.dimension for g in everything) == [0, 1, 2]


def test_empty_result_is_empty_collection():
    net = geometry_to_network(LineString([[0, 0], [1, 0]]))
    out = network_to_geometry(net, 2)
    assert isinstance(out, GeometryCollection) and out.is_empty


def test_one_way_network_respects_direction():
    ccw = Polygon([[0, 0], [10, 0], [10, 10], [0, 10]])
    cw = Polygon([[0, 0], [0, 10], [10, 10], [10, 0]])
    assert isinstance(network_to_geometry(geometry_to_network(ccw, bidirectional=False)), Polygon)
    assert network_to_geometry(geometry_to_network(cw, bidirectional=False)).is_empty
    assert isinstance(network_to_geometry(geometry_to_network(cw, bidirectional=True)), Polygon)


def test_custom_factory():
    class TupleFactory(GeometryFactory):
        def create_point(self, coordinate):
            return ("point", tuple(coordinate))

        def create_line_string(self, coordinates):
            return ("line", len(coordinates))

        def create_polygon(self, shell, holes=None):
            return ("polygon", len(shell), len(holes or []))

        def create_collection(self, geometries):
            return ("collection", list(geometries))

    out = network_to_geometry(geometry_to_network(box(0, 0, 1, 1)), 2, TupleFactory())
    assert out == ("polygon", 5, 0)


def test_invalid_inputs():
    with pytest.raises(InvalidInputError):
        geometry_to_network(None)
    with pytest.raises(UnsupportedGeometryError):
        geometry_to_network(object())
    with pytest.raises(InvalidInputError):
        network_to_geometry(geometry_to_network(box(0, 0, 1, 1)), 3)


def test_degenerate_rings():
    with pytest.raises(DegenerateGeometryError):
        geometry_to_network(Polygon([[0, 0], [1, 1], [0, 0]]))
    with pytest.raises(DegenerateGeometryError):
        geometry_to_network(box(0, 0, 0.1, 0.1), PrecisionModel("fixed", scale=1))
    with pytest.raises(DegenerateGeometryError):
        geometry_to_network(LineString([[0, 0], [0, 0]]))


def test_precision_from_config_and_validation():
    cfg = {"precision": {"kind": "fixed", "scale": 1}, "validate": True}
    net = geometry_to_network(box(0.2, 0.2, 9.8, 9.8), config=cfg)
    assert sorted(net.coords) == [(0.0, 0.0), (0.0, 10.0), (10.0, 0.0), (10.0, 10.0)]
    # explicit precision wins over config
    net = geometry_to_network(box(0.2, 0.2, 9.8, 9.8), PrecisionModel(), config=cfg)
    assert (0.2, 0.2) in net.coords


def test_snapping_closes_a_sliver_gap():
    a = box(0, 0, 10, 10)
    b = Polygon(np.array([[10.0004, 0], [20, 0], [20, 10], [10.0004, 10]]))
    net = geometry_to_network([a, b], PrecisionModel("fixed", scale=1000))
    assert net.n_edges == 7
    assert len(net.bounded_faces()) == 2
