# -*- coding: utf-8 -*-
"""Shared fixtures for the planartopo test suite."""

import pytest

from planartopo import GeometryFactory, GeometryServices, IntersectionMatrix
from planartopo.core.coordinates import Coordinate
from planartopo.utils.helpers import box, square


class RecordingServices(GeometryServices):
    """Fake services that record every call and answer from canned values.

    Used to check what the geometry core decides on its own, without any real algorithm behind it.
    """

    def __init__(self, matrix="FF2F01212"):
        self.calls = []
        self.matrix = IntersectionMatrix(matrix)
        self.overlay_result = None

    def _record(self, name, *args):
        self.calls.append((name, *args))

    def called(self, name):
        return [call for call in self.calls if call[0] == name]

    def relate(self, a, b):
        self._record("relate", a, b)
        return self.matrix

    def overlay(self, a, b, op_code):
        self._record("overlay", a, b, op_code)
        if self.overlay_result is not None:
            return self.overlay_result
        return a.factory.create_geometry_collection()

    def unary_union(self, geom):
        self._record("unary_union", geom)
        return geom.clone()

    def buffer(self, geom, distance, parameters):
        self._record("buffer", geom, distance, parameters)
        return geom.factory.create_polygon()

    def convex_hull(self, geom):
        self._record("convex_hull", geom)
        return geom.clone()

    def distance(self, a, b):
        self._record("distance", a, b)
        return 42.0

    def is_within_distance(self, a, b, distance):
        self._record("is_within_distance", a, b, distance)
        return True

    def rectangle_intersects(self, rectangle, geom):
        self._record("rectangle_intersects", rectangle, geom)
        return True

    def rectangle_contains(self, rectangle, geom):
        self._record("rectangle_contains", rectangle, geom)
        return True

    def is_simple(self, geom):
        self._record("is_simple", geom)
        return True

    def is_valid(self, geom):
        self._record("is_valid", geom)
        return True

    def validation_error(self, geom):
        self._record("validation_error", geom)
        return None

    def centroid(self, geom):
        self._record("centroid", geom)
        return Coordinate(0.123456, 0.987654)

    def interior_point(self, geom):
        self._record("interior_point", geom)
        return Coordinate(0.5, 0.5)


@pytest.fixture
def factory():
    """Factory with floating precision and the default shapely services."""
    return GeometryFactory()


@pytest.fixture
def services():
    """Fresh recording fake for dispatcher tests."""
    return RecordingServices()


@pytest.fixture
def fake_factory(services):
    """Factory wired to the recording fake."""
    return GeometryFactory(services=services)


@pytest.fixture
def rectangle(factory):
    """The 10 x 10 square at the origin, an axis-aligned rectangle."""
    return box(factory, 0, 0, 10, 10)


@pytest.fixture
def unit_squares(factory):
    """Two disjoint unit squares."""
    return square(factory, 0, 0, 1), square(factory, 2, 0, 1)


@pytest.fixture
def crossing_lines(factory):
    """Two diagonals of the 2 x 2 square, crossing at (1, 1)."""
    return (
        factory.create_line_string([(0, 0), (2, 2)]),
        factory.create_line_string([(0, 2), (2, 0)]),
    )


@pytest.fixture
def triangle(factory):
    """A triangle that is not a rectangle."""
    return factory.create_polygon([(0, 0), (4, 0), (0, 4), (0, 0)])
