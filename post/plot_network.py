# -*- coding: utf-8 -*-
# Topolith/post/plot_network.py

"""
Project: Topolith
Author: Topolith contributors
Date: 3/12/2026

Purpose:
--------
Quick matplotlib previews of halfedge networks and result geometries: edges colored by their
source tags, bounded faces filled, isolated vertices marked. Intended for QA of overlay and
polygonize results, not for publication.
"""

from typing import Optional
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from geometry.topology.loop import ensure_closed


def _finish(ax: Axes, title: str, created_fig: bool, show: bool, save_path: Optional[str]) -> None:
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title)
    ax.grid(True)
    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)


def _polygon_patch(shell: np.ndarray, holes, **kwargs) -> PathPatch:
    verts, codes = [], []
    for ring in [shell] + list(holes):
        R = ensure_closed(np.asarray(ring, dtype=float))
        verts.extend(R.tolist())
        codes.extend([Path.MOVETO] + [Path.LINETO] * (len(R) - 2) + [Path.CLOSEPOLY])
    return PathPatch(Path(verts, codes), **kwargs)


def plot_network(net,
                 *,
                 show_faces: bool = True,
                 show: bool = True,
                 save_path: Optional[str] = None,
                 ax: Optional[Axes] = None) -> None:
    """
    Plot a halfedge network.

    Parameters
    ----------
    net : Network
        Linked network with faces.
    show_faces : bool
        Fill bounded faces (lightly) underneath the edges.
    show : bool
        If True and we created the figure, display it.
    save_path : Optional[str]
        If given, save the figure to this path.
    ax : Optional[matplotlib.axes.Axes]
        Existing Axes to draw on; if None, a figure is created.
    """
    created_fig = False
    if ax is None:
        plt.figure(figsize=(6, 6))
        ax = plt.gca()
        created_fig = True

    if show_faces:
        for f in net.bounded_faces():
            if net.faces[f].area > 0.0:
                ring = net.cycle_coordinates(f)
                ax.fill(ring[:, 0], ring[:, 1], color=(0.85, 0.9, 1.0), lw=0)

    colors = plt.rcParams["axes.prop_cycle"].by_key()["color"]
    for e in range(net.n_edges):
        (ax0, ay0), (bx, by) = net.segment(2 * e)
        tags = sorted(net.edge_tags[e])
        color = colors[tags[0][0] % len(colors)] if len(tags) == 1 else "k"
        ax.plot([ax0, bx], [ay0, by], "-", color=color, lw=1.4)

    if net.n_vertices:
        P = np.array(net.coords, dtype=float)
        ax.plot(P[:, 0], P[:, 1], "k.", ms=4)
        iso = net.isolated_vertices()
        if iso:
            ax.plot(P[iso, 0], P[iso, 1], "rx", ms=7, label="isolated")
            ax.legend()

    _finish(ax, "Network: {} vertices, {} edges, {} faces".format(net.n_vertices, net.n_edges, len(net.faces)),
            created_fig, show, save_path)


def plot_geometry(geometry,
                  *,
                  name: str = "geometry",
                  show: bool = True,
                  save_path: Optional[str] = None,
                  ax: Optional[Axes] = None) -> None:
    """
    Plot a geometry (Point / LineString / Polygon / GeometryCollection).

    Parameters
    ----------
    geometry : geometry
        Any value exposing `dimension` and `boundary_rings()` (collections: `geometries`).
    name : str
        Title label for the figure.
    show, save_path, ax
        Same semantics as `plot_network`.
    """
    if geometry is None:
        raise ValueError("Expected a geometry, got None.")
    created_fig = False
    if ax is None:
        plt.figure(figsize=(6, 6))
        ax = plt.gca()
        created_fig = True

    def draw(g):
        parts = getattr(g, "geometries", None)
        if parts is not None:
            for p in parts:
                draw(p)
            return
        rings = g.boundary_rings()
        if g.dimension == 2:
            ax.add_patch(_polygon_patch(rings[0], rings[1:], facecolor=(0.8, 0.88, 1.0),
                                        edgecolor="b", lw=1.5))
        elif g.dimension == 1:
            for R in rings:
                ax.plot(R[:, 0], R[:, 1], "g-", lw=1.5)
        else:
            for R in rings:
                ax.plot(R[:, 0], R[:, 1], "ro", ms=5)

    draw(geometry)
    ax.autoscale_view()
    _finish(ax, "Geometry: {}".format(name), created_fig, show, save_path)
