# -*- coding: utf-8 -*-
# Topolith/network/core/grid.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/6/2026

Purpose:
--------
Uniform spatial grid over segment bounding boxes for candidate-pair queries. Noding and the
planarity check only run the exact intersection predicate on pairs that share a grid bin.

Notes:
------
- Candidates are not guaranteed to intersect; they only share at least one bin.
- Degenerate extents (all boxes on one line) collapse to a single row/column.
"""

from itertools import combinations, product
from typing import Dict, Iterator, List, Optional, Set, Tuple
import numpy as np


def segment_bboxes(segments) -> np.ndarray:
    """(S, 4) array of (minx, miny, maxx, maxy) for segments given as ((ax, ay), (bx, by), ...)."""
    if not segments:
        return np.zeros((0, 4), dtype=float)
    A = np.array([s[0] for s in segments], dtype=float)
    B = np.array([s[1] for s in segments], dtype=float)
    return np.column_stack((np.minimum(A[:, 0], B[:, 0]), np.minimum(A[:, 1], B[:, 1]),
                            np.maximum(A[:, 0], B[:, 0]), np.maximum(A[:, 1], B[:, 1])))


class SegmentGrid:
    """Bins of a uniform grid over the union of all boxes, each holding the ids that touch it."""

    __slots__ = ("_bins", "_origin", "_cell", "_shape", "_n")

    def __init__(self, bboxes: np.ndarray, nx: int = 64, ny: Optional[int] = None):
        self._bins: Dict[Tuple[int, int], List[int]] = {}
        self._n = 0 if bboxes is None else int(len(bboxes))
        self._shape = (max(1, int(nx)), max(1, int(ny if ny is not None else nx)))
        if self._n == 0:
            self._origin, self._cell = np.zeros(2), np.ones(2)
            return

        lo, hi = bboxes[:, :2].min(axis=0), bboxes[:, 2:].max(axis=0)
        cell = (hi - lo) / np.array(self._shape, dtype=float)
        self._origin, self._cell = lo, np.where(cell > 0.0, cell, 1.0)

        for sid, bb in enumerate(bboxes):
            (i0, j0), (i1, j1) = self._index(bb[:2]), self._index(bb[2:])
            for key in product(range(i0, i1 + 1), range(j0, j1 + 1)):
                self._bins.setdefault(key, []).append(sid)

    def _index(self, xy) -> Tuple[int, int]:
        ij = ((np.asarray(xy, dtype=float) - self._origin) / self._cell).astype(int)
        return (min(max(int(ij[0]), 0), self._shape[0] - 1),
                min(max(int(ij[1]), 0), self._shape[1] - 1))

    def __len__(self) -> int:
        return self._n

    def candidate_pairs(self) -> Iterator[Tuple[int, int]]:
        """Unique (i, j) pairs with i < j sharing at least one bin, in sorted order."""
        seen: Set[Tuple[int, int]] = set()
        for ids in self._bins.values():
            seen.update(combinations(sorted(ids), 2))
        return iter(sorted(seen))

    def query(self, box: Tuple[float, float, float, float]) -> List[int]:
        """Ids of boxes whose bins overlap `box` (sorted, unique)."""
        if self._n == 0:
            return []
        (i0, j0), (i1, j1) = self._index(box[:2]), self._index(box[2:])
        found: Set[int] = set()
        for key in product(range(i0, i1 + 1), range(j0, j1 + 1)):
            found.update(self._bins.get(key, ()))
        return sorted(found)
