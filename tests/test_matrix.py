# -*- coding: utf-8 -*-
"""Tests for the DE-9IM IntersectionMatrix and its named queries."""

import pytest

from planartopo import Dimension, IntersectionMatrix, Location, PreconditionError


def test_string_round_trip_and_cells():
    """Matrices parse from and print to nine dimension symbols."""
    matrix = IntersectionMatrix("212101212")

    assert str(matrix) == "212101212"
    assert matrix.get(Location.INTERIOR, Location.INTERIOR) == Dimension.A
    assert matrix.get(Location.BOUNDARY, Location.BOUNDARY) == Dimension.P
    assert matrix.get(Location.EXTERIOR, Location.EXTERIOR) == Dimension.A
    assert repr(matrix) == "IntersectionMatrix('212101212')"


def test_default_matrix_is_all_false():
    """A fresh matrix has every cell empty."""
    matrix = IntersectionMatrix()
    assert str(matrix) == "FFFFFFFFF"
    assert matrix.is_disjoint()


def test_matrix_is_immutable():
    """Cells cannot be written once the matrix exists."""
    matrix = IntersectionMatrix("212101212")
    with pytest.raises(ValueError):
        matrix._cells[0, 0] = Dimension.FALSE


def test_pattern_matching_symbols():
    """0/1/2 match exactly, T any non-empty cell, F only empty cells, * anything."""
    matrix = IntersectionMatrix("0F1FF0102")

    assert matrix.matches("0F1FF0102")
    assert matrix.matches("TFTFFTTTT")
    assert matrix.matches("*********")
    assert not matrix.matches("1********")
    assert not matrix.matches("T*F******")
    assert matrix.matches("t*t******"), "symbols are case-insensitive"


def test_pattern_length_is_checked():
    """Patterns must have exactly nine symbols."""
    with pytest.raises(PreconditionError):
        IntersectionMatrix("212101212").matches("T*F")
    with pytest.raises(PreconditionError):
        IntersectionMatrix("2121")


def test_transpose_swaps_roles():
    """The transpose reads the relationship from the other side."""
    matrix = IntersectionMatrix("0FFFFF212")
    assert str(matrix.transpose()) == "0F2FF1FF2"
    assert matrix.transpose().transpose() == matrix


def test_equality_and_hash():
    """Matrices are values."""
    assert IntersectionMatrix("212101212") == IntersectionMatrix("212101212")
    assert hash(IntersectionMatrix("212101212")) == hash(IntersectionMatrix("212101212"))
    assert IntersectionMatrix("212101212") != IntersectionMatrix("FF2FF1212")


def test_contains_and_within_are_transposes():
    """Point strictly inside a polygon."""
    polygon_point = IntersectionMatrix("0F2FF1FF2")
    point_polygon = polygon_point.transpose()

    assert polygon_point.is_contains()
    assert polygon_point.is_covers()
    assert point_polygon.is_within()
    assert point_polygon.is_covered_by()
    assert not point_polygon.is_contains()


def test_touches_dimension_rules():
    """Touches needs empty interiors and is never true for two puntal geometries."""
    adjacent_polygons = IntersectionMatrix("FF2F11212")
    assert adjacent_polygons.is_touches(Dimension.A, Dimension.A)

    assert not IntersectionMatrix("F0FFFF0F2").is_touches(Dimension.P, Dimension.P)


def test_touches_transposes_for_higher_dimension_receiver():
    """A line touched by a point at its endpoint reads as touches from both sides."""
    line_point = IntersectionMatrix("FF10F0FF2")
    assert line_point.is_touches(Dimension.L, Dimension.P)
    assert line_point.transpose().is_touches(Dimension.P, Dimension.L)


def test_crosses_dimension_rules():
    """Crossing lines meet in a point; lines crossing polygons leave through the exterior."""
    assert IntersectionMatrix("0F1FF0102").is_crosses(Dimension.L, Dimension.L)
    assert not IntersectionMatrix("1FF0FF102").is_crosses(Dimension.L, Dimension.L)

    line_polygon = IntersectionMatrix("101FF0212")
    assert line_polygon.is_crosses(Dimension.L, Dimension.A)
    assert line_polygon.transpose().is_crosses(Dimension.A, Dimension.L)
    assert not line_polygon.is_crosses(Dimension.A, Dimension.A)


def test_equals_requires_same_dimension():
    """Equality demands matching dimensions and no exterior overlap."""
    same = IntersectionMatrix("2FFF1FFF2")
    assert same.is_equals(Dimension.A, Dimension.A)
    assert not same.is_equals(Dimension.A, Dimension.L)


def test_overlaps_dimension_rules():
    """Overlapping polygons share interior and each has a part outside the other."""
    overlapping = IntersectionMatrix("212101212")
    assert overlapping.is_overlaps(Dimension.A, Dimension.A)
    assert not overlapping.is_overlaps(Dimension.A, Dimension.L)

    lines = IntersectionMatrix("1010F0102")
    assert lines.is_overlaps(Dimension.L, Dimension.L)
    assert not IntersectionMatrix("0F1FF0102").is_overlaps(Dimension.L, Dimension.L)


def test_dimension_symbols():
    """Dimension symbols convert both ways."""
    assert Dimension.from_symbol("T") == Dimension.TRUE
    assert Dimension.from_symbol("f") == Dimension.FALSE
    assert Dimension.to_symbol(Dimension.L) == "1"
    assert Dimension.to_symbol(Dimension.DONTCARE) == "*"
