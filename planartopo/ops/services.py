# -*- coding: utf-8 -*-
"""Capability interface of the geometric algorithms the kernel delegates to.

The Geometry core only applies shortcuts and special cases; the actual relate, overlay, buffer, hull, distance,
validity and centroid algorithms sit behind ``GeometryServices``. Each GeometryFactory carries one implementation,
so tests can swap in a fake to exercise the dispatcher on its own.
"""

from abc import ABC, abstractmethod
from enum import Enum


class OverlayOpCode(Enum):
    """Tag of a binary set-theoretic operation."""

    INTERSECTION = 1
    UNION = 2
    DIFFERENCE = 3
    SYMDIFFERENCE = 4


class GeometryServices(ABC):
    """Algorithms consumed by the Geometry core.

    Implementations receive kernel geometries and return kernel geometries built with the factory of the first
    operand. Failures must be raised as ``TopologyException`` or ``RobustnessError``, never hidden behind a
    false predicate result.
    """

    @abstractmethod
    def relate(self, a, b):
        """DE-9IM IntersectionMatrix of ``a`` against ``b``."""

    @abstractmethod
    def overlay(self, a, b, op_code):
        """Result of the set-theoretic operation ``op_code``; simple, noded and rounded to the precision model."""

    @abstractmethod
    def unary_union(self, geom):
        """Union of all components of ``geom``."""

    @abstractmethod
    def buffer(self, geom, distance, parameters):
        """Polygonal buffer of ``geom`` built with the given BufferParameters."""

    @abstractmethod
    def convex_hull(self, geom):
        """Smallest convex geometry containing ``geom``.

        0 points give an empty GeometryCollection, 1 a Point, 2 a LineString, 3 or more a Polygon.
        """

    @abstractmethod
    def distance(self, a, b):
        """Minimum Euclidean distance between two non-empty geometries."""

    @abstractmethod
    def is_within_distance(self, a, b, distance):
        """Whether the two non-empty geometries are at most ``distance`` apart."""

    @abstractmethod
    def rectangle_intersects(self, rectangle, geom):
        """``intersects`` for an axis-aligned rectangle Polygon against any geometry."""

    @abstractmethod
    def rectangle_contains(self, rectangle, geom):
        """``contains`` for an axis-aligned rectangle Polygon against any geometry."""

    @abstractmethod
    def is_simple(self, geom):
        pass

    @abstractmethod
    def is_valid(self, geom):
        pass

    @abstractmethod
    def validation_error(self, geom):
        """Human readable reason for invalidity, or None for a valid geometry."""

    @abstractmethod
    def centroid(self, geom):
        """Centroid Coordinate of a non-empty geometry."""

    @abstractmethod
    def interior_point(self, geom):
        """Coordinate of a point in the interior of a non-empty geometry."""
