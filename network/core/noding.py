# -*- coding: utf-8 -*-
# Topolith/network/core/noding.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/6/2026

Purpose:
--------
Split input segments at every mutual intersection so that the resulting arrangement is
planar (segments meet only at shared endpoints).

Main Tasks:
-----------
   1. Find candidate segment pairs through a uniform bbox grid.
   2. Intersect each pair with `geometry.topology.segment.intersection` (crossings,
      touching endpoints and collinear-overlap endpoints).
   3. Split segments at interior intersection points and at isolated input points that
      lie on them; drop pieces collapsed to zero length by snapping.
   4. Repeat while a pass still splits something (snapped crossing points can create new
      crossings), up to `max_passes`.

Notes:
------
   - Segments carry an opaque `tag` (source index, source dimension) which every piece inherits.
   - Direction is preserved: pieces of a -> b run from a towards b.
"""

from dataclasses import dataclass
import logging
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from geometry.model.precision import PrecisionModel, resolve_precision
from geometry.topology.segment import intersection, interior_contains, parameter_along
from .grid import SegmentGrid, segment_bboxes

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class Segment:
    a: Coordinate
    b: Coordinate
    tag: Tuple[int, int]

    def __getitem__(self, i):
        return (self.a, self.b)[i]


def _split_points(segments: List[Segment], points: Sequence[Coordinate],
                  pm: PrecisionModel, grid_bins: int) -> Dict[int, Set[Coordinate]]:
    """Interior split points per segment id for one noding pass."""
    splits: Dict[int, Set[Coordinate]] = {}
    bboxes = segment_bboxes(segments)
    grid = SegmentGrid(bboxes, nx=grid_bins)

    for i, j in grid.candidate_pairs():
        si, sj = segments[i], segments[j]
        # disjoint boxes share a bin only by coarse binning
        if bboxes[i, 0] > bboxes[j, 2] or bboxes[j, 0] > bboxes[i, 2] or \
           bboxes[i, 1] > bboxes[j, 3] or bboxes[j, 1] > bboxes[i, 3]:
            continue
        for p in intersection(si.a, si.b, sj.a, sj.b, pm):
            if p != si.a and p != si.b:
                splits.setdefault(i, set()).add(p)
            if p != sj.a and p != sj.b:
                splits.setdefault(j, set()).add(p)

    for p in points:
        for i in grid.query((p[0], p[1], p[0], p[1])):
            s = segments[i]
            if interior_contains(s.a, s.b, p, pm):
                splits.setdefault(i, set()).add(p)
    return splits


def _split_segment(s: Segment, cuts: Iterable[Coordinate]) -> List[Segment]:
    ordered = sorted(cuts, key=lambda p: parameter_along(s.a, s.b, p))
    out: List[Segment] = []
    prev = s.a
    for p in ordered + [s.b]:
        if p != prev:
            out.append(Segment(prev, p, s.tag))
            prev = p
    return out


def node_segments(segments: Sequence[Segment], points: Sequence[Coordinate] = (),
                  precision: PrecisionModel = None, *, grid_bins: int = 64,
                  max_passes: int = 4) -> List[Segment]:
    """
    Node a segment soup.

    Parameters
    ----------
    segments : sequence of Segment
        Input segments with snapped endpoints and nonzero length.
    points : sequence of (x, y)
        Isolated points that must become nodes where they touch a segment interior.
    precision : PrecisionModel, optional
        Snapping/tolerance model for intersection points.
    grid_bins : int
        Grid resolution (bins per axis) for candidate pairs.
    max_passes : int
        Upper bound on noding passes.

    Returns
    -------
    list of Segment
        Noded segments (duplicates are NOT merged here; the network merges them).
    """
    pm = resolve_precision(precision)
    current = list(segments)
    for n_pass in range(1, max(1, int(max_passes)) + 1):
        splits = _split_points(current, points, pm, grid_bins)
        if not splits:
            logger.debug("Noding converged after %d pass(es): %d segments", n_pass, len(current))
            return current
        noded: List[Segment] = []
        for i, s in enumerate(current):
            if i in splits:
                noded.extend(_split_segment(s, splits[i]))
            else:
                noded.append(s)
        logger.debug("Noding pass %d split %d segment(s) into %d", n_pass, len(splits), len(noded))
        current = noded

    logger.warning("Noding did not converge within %d passes; result may retain crossings.", max_passes)
    return current
