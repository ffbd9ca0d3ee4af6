# -*- coding: utf-8 -*-
# Topolith/geometry/model/shapes.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/3/2026

Purpose:
--------
A closed set of geometry variants (Point, LineString, Polygon, GeometryCollection) sharing
one capability: `dimension` plus `boundary_rings()`. The engine reads geometries only through
that capability, so any value exposing it (including foreign geometry types) can be fed to
network conversion.

Conventions:
------------
   - Coordinate sequences are float arrays shaped (N, 2); a Z column is dropped on entry.
   - Polygon rings are stored as given; closure/orientation is enforced where they are used.
   - Dimension: Point 0, LineString 1, Polygon 2, collection = max of parts (-1 if empty).
   - Values are never compared by content (eq=False); arrays make equality ambiguous.
"""

from dataclasses import dataclass, field
from typing import List, Tuple
import numpy as np

from ..topology._validation import _as_xy
from ..topology.loop import signed_area


@dataclass(eq=False)
class Point:
    coordinate: Tuple[float, float]

    def __post_init__(self):
        xy = _as_xy([self.coordinate], "coordinate")
        self.coordinate = (float(xy[0, 0]), float(xy[0, 1]))

    @property
    def dimension(self) -> int:
        return 0

    def boundary_rings(self) -> List[np.ndarray]:
        return [np.array([self.coordinate], dtype=float)]

    def area(self) -> float:
        return 0.0


@dataclass(eq=False)
class LineString:
    coordinates: np.ndarray

    def __post_init__(self):
        self.coordinates = _as_xy(self.coordinates, "coordinates")

    @property
    def dimension(self) -> int:
        return 1

    def boundary_rings(self) -> List[np.ndarray]:
        return [self.coordinates]

    def area(self) -> float:
        return 0.0


@dataclass(eq=False)
class Polygon:
    shell: np.ndarray
    holes: List[np.ndarray] = field(default_factory=list)

    def __post_init__(self):
        self.shell = _as_xy(self.shell, "shell")
        self.holes = [_as_xy(h, "hole") for h in (self.holes or [])]

    @property
    def dimension(self) -> int:
        return 2

    def boundary_rings(self) -> List[np.ndarray]:
        return [self.shell] + list(self.holes)

    def area(self) -> float:
        """Planar area: |shell| minus the holes."""
        a = abs(signed_area(self.shell))
        for h in self.holes:
            a -= abs(signed_area(h))
        return a


@dataclass(eq=False)
class GeometryCollection:
    geometries: List[object] = field(default_factory=list)

    def __post_init__(self):
        self.geometries = list(self.geometries or [])

    @property
    def dimension(self) -> int:
        return max((g.dimension for g in self.geometries), default=-1)

    @property
    def is_empty(self) -> bool:
        return len(self.geometries) == 0

    def boundary_rings(self) -> List[np.ndarray]:
        rings: List[np.ndarray] = []
        for g in self.geometries:
            rings.extend(g.boundary_rings())
        return rings

    def area(self) -> float:
        return float(sum(g.area() for g in self.geometries))

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self):
        return iter(self.geometries)

    def __getitem__(self, i):
        return self.geometries[i]


def box(xmin: float, ymin: float, xmax: float, ymax: float) -> Polygon:
    """Axis-aligned rectangle as a CCW polygon (closed shell)."""
    return Polygon(np.array([[xmin, ymin], [xmax, ymin], [xmax, ymax], [xmin, ymax], [xmin, ymin]], dtype=float))
