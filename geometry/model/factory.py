# -*- coding: utf-8 -*-
# Topolith/geometry/model/factory.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/3/2026

Purpose:
--------
Geometry factory capability. The engine never instantiates result geometries directly; it
asks a factory, so callers can plug in their own representation (with CRS tagging, metadata,
etc.). `ShapeFactory` builds the bundled variants from `geometry.model.shapes`.
"""

from typing import Iterable, Optional, Sequence
import numpy as np

from .shapes import Point, LineString, Polygon, GeometryCollection


class GeometryFactory:
    """
    Interface for result construction. Subclasses implement all four methods.
    """

    def create_point(self, coordinate: Sequence[float]):
        raise NotImplementedError

    def create_line_string(self, coordinates: np.ndarray):
        raise NotImplementedError

    def create_polygon(self, shell: np.ndarray, holes: Optional[Iterable[np.ndarray]] = None):
        raise NotImplementedError

    def create_collection(self, geometries: Iterable[object]):
        raise NotImplementedError


class ShapeFactory(GeometryFactory):
    """Default factory producing `geometry.model.shapes` values."""

    def create_point(self, coordinate):
        return Point((float(coordinate[0]), float(coordinate[1])))

    def create_line_string(self, coordinates):
        return LineString(np.asarray(coordinates, dtype=float))

    def create_polygon(self, shell, holes=None):
        return Polygon(np.asarray(shell, dtype=float), [np.asarray(h, dtype=float) for h in (holes or [])])

    def create_collection(self, geometries):
        return GeometryCollection(list(geometries))


DEFAULT_FACTORY = ShapeFactory()


def resolve_factory(factory: Optional[GeometryFactory]) -> GeometryFactory:
    return DEFAULT_FACTORY if factory is None else factory
