# -*- coding: utf-8 -*-
# Topolith/geometry/errors.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/2/2026

Purpose
-------
Typed exceptions shared by the geometry, network and operations layers, with compact,
context-aware messages so that failures deep inside noding or face assembly still say
which ring, edge or source triggered them.

Main Tasks
----------
    1. Define TopologyError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InvalidInputError, DegenerateGeometryError,
       UnsupportedGeometryError, NetworkIntegrityError.

Notes
-----
- InvalidInputError and DegenerateGeometryError are also ValueErrors, and
  UnsupportedGeometryError is also a TypeError, so generic callers keep working.
- The "unknown boundary" outcome of the winding number is NOT an exception; see
  `geometry.topology.winding.BoundaryState`.
"""

__all__ = [
    "TopologyError",
    "InvalidInputError",
    "DegenerateGeometryError",
    "UnsupportedGeometryError",
    "NetworkIntegrityError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    try:
        parts = []
        for k in sorted(ctx.keys()):
            sv = repr(ctx[k])
            if len(sv) > 120:
                sv = sv[:117] + "..."
            parts.append("{}={}".format(k, sv))
        return " | " + ", ".join(parts)
    except Exception:
        # Context should never break error rendering
        return ""


class TopologyError(Exception):
    """
    Base class for all errors raised by the topology engine.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"ring": 2, "distinct": 2}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(TopologyError, self).__init__(message)

    def __str__(self):
        base = super(TopologyError, self).__str__()
        return base + _format_context(self.context)


class InvalidInputError(TopologyError, ValueError):
    """
    A required input is missing or malformed:
      - null ring, hole, shell or point set
      - arrays that are not (N, 2)
      - unknown operation or dimension selectors
    """


class DegenerateGeometryError(TopologyError, ValueError):
    """
    The input is well-formed but geometrically degenerate:
      - ring with fewer than 3 distinct coordinates (after snapping)
      - edge of zero length after snapping
      - all-collinear hull input where an areal hull was required
    """


class UnsupportedGeometryError(TopologyError, TypeError):
    """
    The input cannot be expressed through the boundary-rings capability, or is not
    reducible to planar rings where an operation needs them (overlay, polygonization).
    """


class NetworkIntegrityError(TopologyError):
    """
    A halfedge network violates one of its structural invariants (unpaired twins,
    open next-cycles, missing outer face). Signals a bug or pathological input.
    """
