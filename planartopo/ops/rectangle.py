# -*- coding: utf-8 -*-
"""Fast ``intersects`` and ``contains`` evaluators for axis-aligned rectangles.

A rectangle receiver lets both predicates be decided from envelopes, point-in-polygon tests on the rectangle
corners and segment tests against the four rectangle sides, without building a full intersection matrix.
"""

import logging

import numpy as np

from ..core.geometry import GeometryType
from ..core.matrix import Location
from .extract import LINEAL_TYPES, atomic_components, extract_polygons, linear_coordinate_arrays

logger = logging.getLogger(__name__)


def _orientation(ax, ay, bx, by, px, py):
    return np.sign((bx - ax) * (py - ay) - (by - ay) * (px - ax))


def _within_span(a, b, p):
    return (np.minimum(a, b) <= p) & (p <= np.maximum(a, b))


def segments_intersect(p0, p1, q0, q1):
    """Element-wise test of closed segments ``p0-p1`` against ``q0-q1``; inputs broadcast as ``(..., 2)`` arrays."""
    d1 = _orientation(q0[..., 0], q0[..., 1], q1[..., 0], q1[..., 1], p0[..., 0], p0[..., 1])
    d2 = _orientation(q0[..., 0], q0[..., 1], q1[..., 0], q1[..., 1], p1[..., 0], p1[..., 1])
    d3 = _orientation(p0[..., 0], p0[..., 1], p1[..., 0], p1[..., 1], q0[..., 0], q0[..., 1])
    d4 = _orientation(p0[..., 0], p0[..., 1], p1[..., 0], p1[..., 1], q1[..., 0], q1[..., 1])

    proper = (d1 * d2 < 0) & (d3 * d4 < 0)

    def on_segment(a, b, p, d):
        return (d == 0) & _within_span(a[..., 0], b[..., 0], p[..., 0]) & _within_span(a[..., 1], b[..., 1], p[..., 1])

    touching = on_segment(q0, q1, p0, d1) | on_segment(q0, q1, p1, d2) | on_segment(p0, p1, q0, d3) | on_segment(p0, p1, q1, d4)
    return proper | touching


def locate_in_ring(x, y, ring):
    """Location of ``(x, y)`` relative to the area enclosed by a closed ring."""
    p, q = ring[:-1], ring[1:]
    cross = (q[:, 0] - p[:, 0]) * (y - p[:, 1]) - (q[:, 1] - p[:, 1]) * (x - p[:, 0])
    on_edge = (cross == 0) & _within_span(p[:, 0], q[:, 0], x) & _within_span(p[:, 1], q[:, 1], y)
    if on_edge.any():
        return Location.BOUNDARY

    # crossing number of a ray towards +x
    straddles = (p[:, 1] > y) != (q[:, 1] > y)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = p[:, 0] + (y - p[:, 1]) * (q[:, 0] - p[:, 0]) / (q[:, 1] - p[:, 1])
    crossings = np.count_nonzero(straddles & (x < x_cross))
    return Location.INTERIOR if crossings % 2 == 1 else Location.EXTERIOR


def locate_in_polygon(x, y, polygon):
    """Location of ``(x, y)`` relative to a non-empty Polygon, holes included."""
    location = locate_in_ring(x, y, polygon.exterior.coordinate_array)
    if location is not Location.INTERIOR:
        return location
    for hole in polygon.interiors:
        if hole.is_empty:
            continue
        hole_location = locate_in_ring(x, y, hole.coordinate_array)
        if hole_location is Location.BOUNDARY:
            return Location.BOUNDARY
        if hole_location is Location.INTERIOR:
            return Location.EXTERIOR
    return Location.INTERIOR


class RectangleIntersects:
    """Decides ``rectangle.intersects(geom)`` for an axis-aligned rectangle Polygon.

    Parameters:
    -----------
    rectangle : Polygon
        A polygon for which ``is_rectangle`` holds
    """

    def __init__(self, rectangle):
        self.rectangle = rectangle
        self.env = rectangle.envelope_internal
        coords = rectangle.exterior.coordinate_array
        self.corners = coords[:-1]
        self.sides = (coords[:-1], coords[1:])

    def intersects(self, geom):
        if not self.env.intersects(geom.envelope_internal):
            return False

        if self._envelope_intersects(geom):
            logger.debug("Rectangle intersection decided from component envelopes")
            return True

        if self._contains_corner(geom):
            logger.debug("Rectangle corner lies inside a polygonal component")
            return True

        return self._sides_intersect(geom)

    def _envelope_intersects(self, geom):
        for element in atomic_components(geom):
            env = element.envelope_internal
            if not self.env.intersects(env):
                continue
            # fully contained elements must intersect
            if self.env.contains(env):
                return True
            # a connected element whose envelope is bisected by the rectangle must cross it
            if env.minx >= self.env.minx and env.maxx <= self.env.maxx:
                return True
            if env.miny >= self.env.miny and env.maxy <= self.env.maxy:
                return True
        return False

    def _contains_corner(self, geom):
        for polygon in extract_polygons(geom):
            env = polygon.envelope_internal
            if not self.env.intersects(env):
                continue
            for x, y in self.corners:
                if not env.contains((x, y)):
                    continue
                if locate_in_polygon(x, y, polygon) is not Location.EXTERIOR:
                    return True
        return False

    def _sides_intersect(self, geom):
        side_start, side_end = self.sides
        for coords in linear_coordinate_arrays(geom):
            if len(coords) < 2:
                continue
            start = coords[:-1, np.newaxis, :]
            end = coords[1:, np.newaxis, :]
            if segments_intersect(start, end, side_start[np.newaxis], side_end[np.newaxis]).any():
                return True
        return False


class RectangleContains:
    """Decides ``rectangle.contains(geom)`` for an axis-aligned rectangle Polygon.

    Once the envelope of ``geom`` lies inside the rectangle, ``geom`` is contained unless it lies entirely in the
    rectangle boundary.
    """

    def __init__(self, rectangle):
        self.rectangle = rectangle
        self.env = rectangle.envelope_internal

    def contains(self, geom):
        if not self.env.contains(geom.envelope_internal):
            return False
        return not self.is_contained_in_boundary(geom)

    def is_contained_in_boundary(self, geom):
        for element in atomic_components(geom):
            if element.is_empty:
                continue
            # polygons can never be wholly contained in the boundary
            if element.geom_type is GeometryType.POLYGON:
                return False
            if element.geom_type is GeometryType.POINT:
                if not self._coordinates_on_boundary(element.coordinate_array).all():
                    return False
            elif element.geom_type in LINEAL_TYPES:
                if not self._line_on_boundary(element.coordinate_array):
                    return False
        return True

    def _coordinates_on_boundary(self, coords):
        env = self.env
        x, y = coords[:, 0], coords[:, 1]
        return (x == env.minx) | (x == env.maxx) | (y == env.miny) | (y == env.maxy)

    def _line_on_boundary(self, coords):
        env = self.env
        p0, p1 = coords[:-1], coords[1:]
        degenerate = np.all(p0 == p1, axis=1)
        vertical = (p0[:, 0] == p1[:, 0]) & ((p0[:, 0] == env.minx) | (p0[:, 0] == env.maxx))
        horizontal = (p0[:, 1] == p1[:, 1]) & ((p0[:, 1] == env.miny) | (p0[:, 1] == env.maxy))
        on_boundary = np.where(degenerate, self._coordinates_on_boundary(p0), vertical | horizontal)
        return bool(on_boundary.all())


def rectangle_intersects(rectangle, geom):
    return RectangleIntersects(rectangle).intersects(geom)


def rectangle_contains(rectangle, geom):
    return RectangleContains(rectangle).contains(geom)
