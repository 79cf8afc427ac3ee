# -*- coding: utf-8 -*-
"""Helpers for building sample geometries and summarising them."""

import json
import os

import numpy as np


def box(factory, minx, miny, maxx, maxy):
    """Create an axis-aligned rectangle Polygon, wound counter-clockwise from its lower left corner.

    Parameters:
    -----------
    factory : GeometryFactory
        Factory owning the result
    minx, miny, maxx, maxy : float
        Bounds of the rectangle

    Returns:
    --------
    polygon : Polygon
        Rectangle polygon
    """
    return factory.create_polygon([(minx, miny), (maxx, miny), (maxx, maxy), (minx, maxy), (minx, miny)])


def square(factory, x, y, size):
    """Square of side ``size`` with its lower left corner at ``(x, y)``."""
    return box(factory, x, y, x + size, y + size)


def regular_polygon(factory, center, radius, sides=16, rotation=0.0):
    """Create a regular polygon inscribed in a circle.

    Parameters:
    -----------
    factory : GeometryFactory
        Factory owning the result
    center : tuple
        Centre of the circumscribed circle
    radius : float
        Circle radius
    sides : int
        Number of vertices
    rotation : float
        Angle of the first vertex, in radians

    Returns:
    --------
    polygon : Polygon
        Counter-clockwise polygon
    """
    if sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, got {sides}")
    angles = rotation + np.linspace(0.0, 2 * np.pi, sides, endpoint=False)
    ring = np.column_stack([center[0] + radius * np.cos(angles), center[1] + radius * np.sin(angles)])
    return factory.create_polygon(np.vstack([ring, ring[:1]]))


def point_grid(factory, minx, miny, maxx, maxy, step):
    """MultiPoint on a regular grid covering the given bounds, edges included."""
    xs = np.arange(minx, maxx + step / 2.0, step)
    ys = np.arange(miny, maxy + step / 2.0, step)
    grid_x, grid_y = np.meshgrid(xs, ys)
    return factory.create_multi_point(np.column_stack([grid_x.ravel(), grid_y.ravel()]))


def geometry_summary(geoms, output_file=None):
    """Summarise a mapping of named geometries.

    Parameters:
    -----------
    geoms : dict
        Geometries keyed by name
    output_file : str, optional
        Path to save the summary to (as JSON)

    Returns:
    --------
    summary : dict
        Per geometry: type, emptiness, dimension, vertex count, area, length and bounds
    """
    summary = {}

    for name, geom in geoms.items():
        env = geom.envelope_internal
        geom_summary = {
            "type": geom.geometry_type,
            "is_empty": geom.is_empty,
            "dimension": int(geom.dimension),
            "num_points": int(geom.num_points),
            "area": float(geom.area),
            "length": float(geom.length),
            "bounds": None if env.is_null else [env.minx, env.miny, env.maxx, env.maxy],
        }

        if geom.num_geometries > 1:
            geom_summary["num_geometries"] = geom.num_geometries

        summary[name] = geom_summary

    if output_file:
        os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
        with open(output_file, "w") as f:
            json.dump(summary, f, indent=2)

    return summary
