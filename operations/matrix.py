# -*- coding: utf-8 -*-
# Topolith/operations/matrix.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/11/2026

Purpose:
--------
Dimensionally extended nine-intersection matrix and the named predicates derived from it.

Layout:
-------
Rows are the Interior/Boundary/Exterior of A, columns those of B. Entries hold the maximum
dimension of the intersection (0, 1, 2) or -1 when it is empty (printed as "F").

Pattern language (9 characters, row-major):
   T   non-empty (>= 0)
   F   empty (-1)
   *   anything
   0/1/2  exactly that dimension
"""

from typing import Iterable
import numpy as np

from geometry.errors import InvalidInputError
from network.labels import Location

_CHARS = {-1: "F", 0: "0", 1: "1", 2: "2"}


class IntersectionMatrix:
    """3x3 max-dimension matrix over (Interior, Boundary, Exterior)^2."""

    def __init__(self, dim_a: int = -1, dim_b: int = -1):
        self.values = np.full((3, 3), -1, dtype=int)
        self.dim_a = int(dim_a)
        self.dim_b = int(dim_b)

    def set_at_least(self, row: Location, col: Location, dimension: int) -> None:
        if dimension > self.values[int(row), int(col)]:
            self.values[int(row), int(col)] = dimension

    def get(self, row: Location, col: Location) -> int:
        return int(self.values[int(row), int(col)])

    def __str__(self) -> str:
        return "".join(_CHARS[int(v)] for v in self.values.ravel())

    def __repr__(self) -> str:
        return "IntersectionMatrix('{}')".format(self)

    def matches(self, pattern: str) -> bool:
        """
        Raises
        ------
        InvalidInputError
            If `pattern` is not 9 characters from {T, F, *, 0, 1, 2}.
        """
        if pattern is None or len(pattern) != 9:
            raise InvalidInputError("Pattern must have 9 characters.", {"pattern": pattern})
        for v, ch in zip(self.values.ravel(), pattern.upper()):
            if ch == "*":
                continue
            if ch == "T":
                ok = v >= 0
            elif ch == "F":
                ok = v == -1
            elif ch in "012":
                ok = v == int(ch)
            else:
                raise InvalidInputError("Invalid pattern character.", {"char": ch})
            if not ok:
                return False
        return True

    def _any(self, patterns: Iterable[str]) -> bool:
        return any(self.matches(p) for p in patterns)

    # ---- named predicates ----
    def is_disjoint(self) -> bool:
        return self.matches("FF*FF****")

    def is_intersects(self) -> bool:
        return not self.is_disjoint()

    def is_contains(self) -> bool:
        return self.matches("T*****FF*")

    def is_within(self) -> bool:
        return self.matches("T*F**F***")

    def is_covers(self) -> bool:
        return self._any(("T*****FF*", "*T****FF*", "***T**FF*", "****T*FF*"))

    def is_covered_by(self) -> bool:
        return self._any(("T*F**F***", "*TF**F***", "**FT*F***", "**F*TF***"))

    def is_equals(self) -> bool:
        return self.dim_a == self.dim_b and self.matches("T*F**FFF*")

    def is_touches(self) -> bool:
        if self.dim_a == 0 and self.dim_b == 0:
            return False
        return self._any(("FT*******", "F**T*****", "F***T****"))

    def is_crosses(self) -> bool:
        a, b = self.dim_a, self.dim_b
        if (a, b) in ((0, 1), (0, 2), (1, 2)):
            return self.matches("T*T******")
        if (a, b) in ((1, 0), (2, 0), (2, 1)):
            return self.matches("T*****T**")
        if (a, b) == (1, 1):
            return self.matches("0********")
        return False

    def is_overlaps(self) -> bool:
        a, b = self.dim_a, self.dim_b
        if a != b:
            return False
        if a == 1:
            return self.matches("1*T***T**")
        return self.matches("T*T***T**")
