# -*- coding: utf-8 -*-
"""
Halfedge arena: construction, linking, face enumeration and nesting.
"""

import numpy as np
import pytest

from geometry.errors import DegenerateGeometryError
from geometry.model.shapes import GeometryCollection, LineString
from network.api import check_network, geometry_to_network
from network.core.grid import SegmentGrid, segment_bboxes
from network.core.halfedge import Network
from network.core.noding import Segment, node_segments


def _ring(net, coords, tag=(0, 2)):
    ids = [net.add_vertex(c) for c in coords]
    for u, v in zip(ids, ids[1:] + ids[:1]):
        net.add_edge(u, v, tag)
    return ids


def _built(*rings):
    net = Network()
    for r in rings:
        _ring(net, r)
    net.link()
    net.build_faces()
    return net


def test_square_has_one_bounded_and_one_outer_face():
    net = _built([(0, 0), (10, 0), (10, 10), (0, 10)])
    assert net.n_vertices == 4 and net.n_edges == 4 and net.n_halfedges == 8
    assert len(net.faces) == 2
    (inner,) = net.bounded_faces()
    (outer,) = net.outer_faces()
    assert net.faces[inner].area == pytest.approx(100.0)
    assert net.faces[outer].area == pytest.approx(-100.0)
    assert len(net.cycle(inner)) == 4
    assert net.region(outer) == -1


def test_twins_and_next_are_consistent():
    net = _built([(0, 0), (10, 0), (10, 10), (0, 10)], [(10, 0), (20, 0), (10, 10)])
    for h in range(net.n_halfedges):
        assert net.twin[net.twin[h]] == h
        assert net.origin[net.next[h]] == net.destination(h)
    assert len(net.bounded_faces()) == 2


def test_outgoing_sorted_counter_clockwise():
    net = Network()
    c = net.add_vertex((0, 0))
    for xy in [(0, -1), (1, 0), (-1, 0), (0, 1)]:
        net.add_edge(c, net.add_vertex(xy))
    net.link()
    dests = [net.coords[net.destination(h)] for h in net.outgoing(c)]
    assert dests == [(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0)]


def test_duplicate_edges_merge_tags():
    net = Network(bidirectional=False, n_sources=2)
    u, v = net.add_vertex((0, 0)), net.add_vertex((1, 0))
    h1 = net.add_edge(u, v, (0, 2))
    h2 = net.add_edge(v, u, (1, 2))
    assert net.n_edges == 1
    assert h2 == net.twin[h1]
    assert net.edge_tags[0] == {(0, 2), (1, 2)}
    assert net.forward[h1] and net.forward[h2]


def test_one_way_network_marks_twin_not_forward():
    net = Network(bidirectional=False)
    h = net.add_edge(net.add_vertex((0, 0)), net.add_vertex((1, 0)))
    assert net.forward[h] and not net.forward[net.twin[h]]


def test_zero_length_edge_rejected():
    net = Network()
    v = net.add_vertex((0, 0))
    with pytest.raises(DegenerateGeometryError):
        net.add_edge(v, v)


def test_nested_component_gets_parent_face():
    net = _built([(0, 0), (10, 0), (10, 10), (0, 10)], [(3, 3), (7, 3), (7, 7), (3, 7)])
    assert net.n_components == 2
    big = max(net.bounded_faces(), key=lambda f: net.faces[f].area)
    small_outer = [f for f in net.outer_faces() if net.faces[f].area == pytest.approx(-16.0)][0]
    assert net.faces[small_outer].parent == big
    assert net.faces[big].holes == [small_outer]
    assert net.region(small_outer) == big


def test_isolated_vertex_is_assigned_enclosing_face():
    net = Network()
    _ring(net, [(0, 0), (10, 0), (10, 10), (0, 10)])
    v = net.add_vertex((4, 4))
    far = net.add_vertex((40, 4))
    net.link()
    net.build_faces()
    (inner,) = net.bounded_faces()
    assert net.vertex_face[v] == inner
    assert net.vertex_face[far] == -1
    assert net.isolated_vertices() == [v, far]


def test_grid_candidate_pairs():
    segs = [((0, 0), (10, 10)), ((0, 10), (10, 0)), ((50, 50), (60, 60))]
    grid = SegmentGrid(segment_bboxes(segs), nx=4)
    pairs = list(grid.candidate_pairs())
    assert (0, 1) in pairs
    assert all(2 not in p for p in pairs)
    assert grid.query((55, 55, 55, 55)) == [2]


def test_noding_splits_crossings_and_points():
    segs = [Segment((0.0, 0.0), (10.0, 10.0), (0, 1)), Segment((0.0, 10.0), (10.0, 0.0), (1, 1))]
    noded = node_segments(segs, points=[(2.0, 2.0)])
    assert len(noded) == 5
    ends = {s.b for s in noded if s.tag == (0, 1)}
    assert (5.0, 5.0) in ends and (2.0, 2.0) in ends
    # direction preserved
    assert all(s.a[0] < s.b[0] for s in noded if s.tag == (0, 1))


def test_noding_collinear_overlap():
    segs = [Segment((0.0, 0.0), (10.0, 0.0), (0, 2)), Segment((5.0, 0.0), (15.0, 0.0), (1, 2))]
    noded = node_segments(segs)
    pieces = sorted((s.a, s.b) for s in noded)
    assert ((5.0, 0.0), (10.0, 0.0)) in pieces
    assert len(noded) == 4


def test_random_lines_node_into_a_valid_network():
    rng = np.random.default_rng(3)
    lines = [LineString(rng.uniform(0.0, 10.0, size=(2, 2))) for _ in range(15)]
    net = geometry_to_network(GeometryCollection(lines), config={"validate": True})
    report = check_network(net)
    assert report["rules"]["planarity"]["ok"]
    assert report["rules"]["euler_characteristic"]["ok"]
    # every crossing adds a vertex on both lines
    assert net.n_vertices > 30


def test_components_count_rings_and_isolated_vertices():
    net = Network()
    _ring(net, [(0, 0), (4, 0), (4, 4), (0, 4)])
    _ring(net, [(10, 0), (14, 0), (14, 4)])
    lone = net.add_vertex((20, 20))
    net.link()
    net.build_faces()
    assert net.n_components == 3
    assert len(net.outer_faces()) == 2
    assert len({net.faces[f].component for f in net.outer_faces()}) == 2
    assert net.vertex_face[lone] == -1
