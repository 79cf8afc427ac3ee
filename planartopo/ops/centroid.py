# -*- coding: utf-8 -*-
"""Centroid and interior point calculators.

The calculator is chosen by the highest dimension among the non-empty components: mixed collections only contribute
those components. Degenerate input falls back to the next lower dimension, so a zero-area polygon has the
centroid of its rings and a zero-length line the centroid of its vertices.
"""

import numpy as np

from ..core.coordinates import Coordinate, signed_area
from ..core.matrix import Dimension
from .extract import component_dimension, extract_lines, extract_points, extract_polygons


def _point_centroid(coord_arrays):
    if not coord_arrays:
        return None
    coords = np.vstack(coord_arrays)
    if len(coords) == 0:
        return None
    x, y = coords.mean(axis=0)
    return Coordinate(float(x), float(y))


def _line_centroid(coord_arrays):
    total_length = 0.0
    weighted = np.zeros(2)
    for coords in coord_arrays:
        if len(coords) < 2:
            continue
        lengths = np.hypot(*np.diff(coords, axis=0).T)
        midpoints = (coords[:-1] + coords[1:]) / 2.0
        total_length += lengths.sum()
        weighted += (midpoints * lengths[:, np.newaxis]).sum(axis=0)

    if total_length == 0.0:
        return _point_centroid(coord_arrays)
    x, y = weighted / total_length
    return Coordinate(float(x), float(y))


def _ring_moments(ring):
    """Signed area and first moments of a closed ring."""
    x0, y0 = ring[:-1, 0], ring[:-1, 1]
    x1, y1 = ring[1:, 0], ring[1:, 1]
    cross = x0 * y1 - x1 * y0
    return signed_area(ring), ((x0 + x1) * cross).sum() / 6.0, ((y0 + y1) * cross).sum() / 6.0


def _area_centroid(polygons):
    total_area = 0.0
    moment_x = 0.0
    moment_y = 0.0
    for polygon in polygons:
        for ring, is_shell in ((polygon.exterior, True), *((hole, False) for hole in polygon.interiors)):
            if ring.is_empty:
                continue
            area, mx, my = _ring_moments(ring.coordinate_array)
            # shells add, holes subtract, whatever their orientation
            factor = 1.0 if (area >= 0) == is_shell else -1.0
            total_area += factor * area
            moment_x += factor * mx
            moment_y += factor * my

    if total_area == 0.0:
        rings = [ring.coordinate_array for polygon in polygons for ring in (polygon.exterior, *polygon.interiors)]
        return _line_centroid(rings)
    return Coordinate(moment_x / total_area, moment_y / total_area)


def centroid(geom):
    """Centroid Coordinate of a non-empty geometry.

    Parameters:
    -----------
    geom : Geometry
        Any non-empty geometry

    Returns:
    --------
    centroid : Coordinate
        Centre of mass of the highest dimensional components
    """
    dimension = component_dimension(geom)
    if dimension == Dimension.A:
        return _area_centroid(extract_polygons(geom))
    if dimension == Dimension.L:
        return _line_centroid([line.coordinate_array for line in extract_lines(geom)])
    return _point_centroid([point.coordinate_array for point in extract_points(geom)])


def _closest_to(coords, target):
    distances = np.hypot(coords[:, 0] - target.x, coords[:, 1] - target.y)
    x, y = coords[np.argmin(distances)]
    return Coordinate(float(x), float(y))


def interior_point(geom):
    """Interior point of a non-empty puntal or lineal geometry.

    For points this is the input vertex closest to the centroid. For lines it is the interior vertex closest to the
    centroid, or the closest endpoint when no line has an interior vertex.
    """
    target = centroid(geom)
    if component_dimension(geom) == Dimension.P:
        return _closest_to(np.vstack([point.coordinate_array for point in extract_points(geom)]), target)

    lines = [line.coordinate_array for line in extract_lines(geom)]
    interior = [coords[1:-1] for coords in lines if len(coords) > 2]
    if interior:
        return _closest_to(np.vstack(interior), target)
    return _closest_to(np.vstack([coords[[0, -1]] for coords in lines]), target)
