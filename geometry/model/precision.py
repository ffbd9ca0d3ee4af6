# -*- coding: utf-8 -*-
# Topolith/geometry/model/precision.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/2/2026

Purpose:
--------
The precision model every predicate consults before comparing coordinates. It decides how
coordinates are snapped, when two coordinates are equal, how they are ordered, and how much
slack a three-point collinearity test allows.

Models:
-------
   - floating:        full double precision; snapping is the identity.
   - floating_single: coordinates are rounded through float32.
   - fixed:           coordinates are rounded to a grid of 1/scale.

Notes:
------
   - Pure Python/NumPy; no logging.
   - `equals` is defined as equality after snapping, so it is consistent with `snap`.
   - `collinear_tolerance` depends on the longest side of the triangle, which keeps the
     orientation test symmetric when its last two arguments are swapped.
"""

from dataclasses import dataclass
from enum import Enum
import math
from typing import Any, Dict, Optional, Sequence, Tuple
import numpy as np

from ..errors import InvalidInputError

Coordinate = Tuple[float, float]


class PrecisionKind(str, Enum):
    FLOATING = "floating"
    FLOATING_SINGLE = "floating_single"
    FIXED = "fixed"


@dataclass(frozen=True)
class PrecisionModel:
    """
    Coordinate snapping/equality rule.

    Parameters
    ----------
    kind : PrecisionKind or str
        "floating" (default), "floating_single" or "fixed".
    scale : float, optional
        Grid scale for the fixed model (coordinates snap to multiples of 1/scale).
    """
    kind: PrecisionKind = PrecisionKind.FLOATING
    scale: Optional[float] = None

    def __post_init__(self):
        try:
            kind = PrecisionKind(self.kind)
        except ValueError:
            raise InvalidInputError("Unknown precision model kind.", {"kind": self.kind})
        object.__setattr__(self, "kind", kind)
        if kind is PrecisionKind.FIXED:
            if self.scale is None or not float(self.scale) > 0.0:
                raise InvalidInputError("Fixed precision requires a positive scale.", {"scale": self.scale})
            object.__setattr__(self, "scale", float(self.scale))

    # ---- construction ----
    @classmethod
    def from_config(cls, cfg: Optional[Dict[str, Any]]) -> "PrecisionModel":
        """Build from a {"kind": ..., "scale": ...} mapping (missing keys use defaults)."""
        if not cfg:
            return cls()
        return cls(kind=cfg.get("kind", PrecisionKind.FLOATING), scale=cfg.get("scale"))

    # ---- snapping ----
    @property
    def grid_size(self) -> float:
        return 1.0 / self.scale if self.kind is PrecisionKind.FIXED else 0.0

    def make_precise(self, value: float) -> float:
        value = float(value)
        if self.kind is PrecisionKind.FIXED:
            return math.floor(value * self.scale + 0.5) / self.scale
        if self.kind is PrecisionKind.FLOATING_SINGLE:
            return float(np.float32(value))
        return value

    def snap(self, coordinate: Sequence[float]) -> Coordinate:
        """Snap one coordinate; only X,Y are used."""
        return (self.make_precise(coordinate[0]), self.make_precise(coordinate[1]))

    def snap_array(self, points: np.ndarray) -> np.ndarray:
        """Vectorized `snap` for an (N, >=2) array; returns a new (N, 2) float array."""
        P = np.asarray(points, dtype=float)[:, :2]
        if self.kind is PrecisionKind.FIXED:
            return np.floor(P * self.scale + 0.5) / self.scale
        if self.kind is PrecisionKind.FLOATING_SINGLE:
            return P.astype(np.float32).astype(float)
        return P.copy()

    # ---- comparison ----
    def equals(self, a: Sequence[float], b: Sequence[float]) -> bool:
        return self.snap(a) == self.snap(b)

    def compare(self, a: Sequence[float], b: Sequence[float]) -> int:
        """Lexicographic order on (x, y) after snapping: -1, 0 or 1."""
        sa = self.snap(a)
        sb = self.snap(b)
        if sa < sb:
            return -1
        return 1 if sa > sb else 0

    def collinear_tolerance(self, p: Coordinate, q: Coordinate, r: Coordinate) -> float:
        """
        Largest |cross(q-p, r-p)| still treated as collinear.

        For the fixed model this is half a grid cell of point-to-line distance, measured
        against the longest side; floating models return 0 and rely on exact fallback.
        """
        if self.kind is not PrecisionKind.FIXED:
            return 0.0
        longest = max(math.hypot(q[0] - p[0], q[1] - p[1]),
                      math.hypot(r[0] - p[0], r[1] - p[1]),
                      math.hypot(r[0] - q[0], r[1] - q[1]))
        return 0.5 * self.grid_size * longest


DEFAULT_PRECISION = PrecisionModel()


def resolve_precision(precision: Optional[PrecisionModel]) -> PrecisionModel:
    """Return `precision` or the default floating model."""
    return DEFAULT_PRECISION if precision is None else precision
