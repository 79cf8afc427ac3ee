# -*- coding: utf-8 -*-
"""Tests for the rectangle fast path evaluators."""

import numpy as np
import pytest

from planartopo import Location
from planartopo.ops.rectangle import (
    RectangleContains,
    RectangleIntersects,
    locate_in_polygon,
    locate_in_ring,
    segments_intersect,
)
from planartopo.utils.helpers import box, regular_polygon


@pytest.fixture
def candidates(factory):
    """Geometries around the 10 x 10 rectangle, in every relative position."""
    return {
        "inner point": factory.create_point((5, 5)),
        "corner point": factory.create_point((10, 10)),
        "outer point": factory.create_point((11, 5)),
        "edge line": factory.create_line_string([(0, 0), (10, 0)]),
        "crossing line": factory.create_line_string([(-5, 5), (15, 5)]),
        "corner-cutting line": factory.create_line_string([(8, 12), (12, 8)]),
        "line near corner": factory.create_line_string([(10.5, 12), (12, 10.5)]),
        "entering line": factory.create_line_string([(5, 5), (20, 5)]),
        "enclosing polygon": box(factory, -5, -5, 15, 15),
        "ring around": factory.create_polygon(
            [(-5, -5), (15, -5), (15, 15), (-5, 15), (-5, -5)],
            [[(-1, -1), (-1, 11), (11, 11), (11, -1), (-1, -1)]],
        ),
        "corner triangle": factory.create_polygon([(9, 12), (12, 9), (12, 12), (9, 12)]),
        "diamond over corner": factory.create_polygon([(10, 8), (12, 10), (10, 12), (8, 10), (10, 8)]),
        "inner circle": regular_polygon(factory, (5, 5), 2),
        "touching square": box(factory, 10, 0, 12, 2),
        "points in and out": factory.create_multi_point([(5, 5), (20, 20)]),
        "boundary points": factory.create_multi_point([(0, 0), (10, 5)]),
    }


def test_intersects_agrees_with_relate(rectangle, candidates):
    """The rectangle evaluator gives the same answer as the full matrix."""
    evaluator = RectangleIntersects(rectangle)
    for name, geom in candidates.items():
        expected = rectangle.relate(geom).is_intersects()
        assert evaluator.intersects(geom) == expected, name


def test_contains_agrees_with_relate(rectangle, candidates):
    """The rectangle evaluator gives the same answer as the full matrix."""
    evaluator = RectangleContains(rectangle)
    for name, geom in candidates.items():
        expected = rectangle.relate(geom).is_contains()
        assert evaluator.contains(geom) == expected, name


def test_covers_agrees_with_relate(rectangle, candidates):
    """Rectangle covers from envelopes matches the full matrix."""
    for name, geom in candidates.items():
        assert rectangle.covers(geom) == rectangle.relate(geom).is_covers(), name


def test_predicates_use_the_fast_path_on_either_side(rectangle, candidates):
    """intersects is symmetric whichever operand is the rectangle."""
    for name, geom in candidates.items():
        assert rectangle.intersects(geom) == geom.intersects(rectangle), name


def test_locate_in_ring():
    """Interior, boundary and exterior locations for a unit square ring."""
    ring = np.array([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)], dtype=float)

    assert locate_in_ring(0.5, 0.5, ring) is Location.INTERIOR
    assert locate_in_ring(1.0, 0.5, ring) is Location.BOUNDARY
    assert locate_in_ring(0.0, 0.0, ring) is Location.BOUNDARY
    assert locate_in_ring(1.5, 0.5, ring) is Location.EXTERIOR
    assert locate_in_ring(0.5, 1.0 + 1e-12, ring) is Location.EXTERIOR


def test_locate_in_polygon_with_hole(factory):
    """Points in a hole are outside the polygon."""
    polygon = factory.create_polygon(
        [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)],
        [[(2, 2), (4, 2), (4, 4), (2, 4), (2, 2)]],
    )

    assert locate_in_polygon(3, 3, polygon) is Location.EXTERIOR
    assert locate_in_polygon(2, 3, polygon) is Location.BOUNDARY
    assert locate_in_polygon(6, 6, polygon) is Location.INTERIOR


def test_segments_intersect():
    """Proper crossings, touches and collinear overlaps count; parallel segments do not."""
    p0 = np.array([(0, 0), (0, 0), (0, 0), (0, 0)], dtype=float)
    p1 = np.array([(2, 2), (2, 0), (2, 0), (1, 0)], dtype=float)
    q0 = np.array([(0, 2), (1, 0), (0, 1), (2, 0)], dtype=float)
    q1 = np.array([(2, 0), (3, 0), (2, 1), (3, 0)], dtype=float)

    assert segments_intersect(p0, p1, q0, q1).tolist() == [True, True, False, False]
