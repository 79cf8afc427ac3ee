# -*- coding: utf-8 -*-
"""Tests for the geometry variants and the factory that builds them."""

import numpy as np
import pytest

from planartopo import (
    Dimension,
    GeometryFactory,
    GeometryType,
    PrecisionModel,
    PreconditionError,
)
from planartopo.utils.helpers import box, geometry_summary, point_grid, regular_polygon, square


def test_point_accessors(factory):
    """Points expose their ordinates; empty points refuse to."""
    point = factory.create_point((1.5, -2))
    assert (point.x, point.y) == (1.5, -2.0)
    assert point.dimension == Dimension.P
    assert point.boundary_dimension == Dimension.FALSE
    assert point.num_points == 1

    empty = factory.create_point()
    assert empty.is_empty
    assert empty.get_coordinate() is None
    with pytest.raises(PreconditionError):
        empty.x


def test_line_string_construction_rules(factory):
    """A LineString has zero or at least two vertices."""
    with pytest.raises(PreconditionError):
        factory.create_line_string([(0, 0)])
    assert factory.create_line_string().is_empty
    assert factory.create_line_string([(0, 0), (3, 4)]).length == pytest.approx(5.0)


def test_linear_ring_construction_rules(factory):
    """A LinearRing is closed with at least four vertices."""
    with pytest.raises(PreconditionError):
        factory.create_linear_ring([(0, 0), (1, 0), (1, 1), (0, 1)])
    with pytest.raises(PreconditionError):
        factory.create_linear_ring([(0, 0), (1, 0), (0, 0)])
    ring = factory.create_linear_ring([(0, 0), (1, 0), (1, 1), (0, 0)])
    assert ring.is_closed
    assert ring.is_ring
    assert ring.boundary_dimension == Dimension.FALSE


def test_polygon_rings_and_measures(factory):
    """Polygon area subtracts its holes; length sums every ring."""
    polygon = factory.create_polygon(
        [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)],
        [[(2, 2), (4, 2), (4, 4), (2, 4), (2, 2)]],
    )

    assert polygon.area == pytest.approx(96.0)
    assert polygon.length == pytest.approx(48.0)
    assert polygon.num_interior_rings == 1
    assert polygon.num_points == 10
    assert polygon.dimension == Dimension.A
    assert polygon.boundary_dimension == Dimension.L
    assert not polygon.is_rectangle


def test_polygon_rejects_holes_in_empty_shell(factory):
    """An empty shell cannot carry holes."""
    with pytest.raises(PreconditionError):
        factory.create_polygon(None, [[(0, 0), (1, 0), (1, 1), (0, 0)]])


def test_is_rectangle(factory):
    """Only five-vertex, hole-free, axis-aligned boxes are rectangles."""
    assert box(factory, 0, 0, 3, 1).is_rectangle
    assert factory.create_polygon([(0, 0), (0, 1), (3, 1), (3, 0), (0, 0)]).is_rectangle
    assert not factory.create_polygon([(0, 0), (3, 0), (3, 1), (0, 1), (1, 0), (0, 0)]).is_rectangle
    assert not factory.create_polygon([(0, 0), (3, 0), (0, 3), (0, 0)]).is_rectangle
    assert not factory.create_polygon([(0, 0), (3, 3), (3, 0), (0, 3), (0, 0)]).is_rectangle
    assert not factory.create_line_string([(0, 0), (1, 1)]).is_rectangle


def test_boundaries(factory):
    """Boundaries follow the mod-2 rule."""
    line = factory.create_line_string([(0, 0), (1, 0), (1, 1)])
    boundary = line.get_boundary()
    assert boundary.geom_type is GeometryType.MULTIPOINT
    assert boundary.num_geometries == 2

    closed = factory.create_line_string([(0, 0), (1, 0), (1, 1), (0, 0)])
    assert closed.get_boundary().is_empty
    assert closed.boundary_dimension == Dimension.FALSE

    lines = factory.create_multi_line_string([[(0, 0), (1, 0)], [(1, 0), (2, 0)]])
    ends = lines.get_boundary()
    assert [(p.x, p.y) for p in ends] == [(0, 0), (2, 0)]

    polygon_boundary = square(factory, 0, 0, 1).get_boundary()
    assert polygon_boundary.geom_type is GeometryType.LINEARRING

    assert factory.create_point((1, 1)).get_boundary().is_empty

    with pytest.raises(PreconditionError):
        factory.create_geometry_collection([line]).get_boundary()


def test_collection_dimensions(factory):
    """Collections take the highest dimension of their members."""
    collection = factory.create_geometry_collection(
        [factory.create_point((0, 0)), factory.create_line_string([(0, 0), (1, 1)])]
    )
    assert collection.dimension == Dimension.L
    assert collection.num_geometries == 2
    assert collection.get_geometry_n(1).geom_type is GeometryType.LINESTRING
    assert factory.create_geometry_collection().dimension == Dimension.FALSE
    assert factory.create_geometry_collection().is_empty


def test_multi_types_check_members(factory):
    """Multi* collections only hold their own member kind."""
    with pytest.raises(PreconditionError):
        factory.create_multi_polygon([factory.create_point((0, 0))])


def test_build_geometry_picks_most_specific_type(factory):
    """build_geometry wraps homogeneous lists in the matching Multi type."""
    points = [factory.create_point((0, 0)), factory.create_point((1, 1))]
    assert factory.build_geometry(points).geom_type is GeometryType.MULTIPOINT
    assert factory.build_geometry(points[:1]) is points[0]
    assert factory.build_geometry([]).geom_type is GeometryType.GEOMETRYCOLLECTION

    mixed = factory.build_geometry([points[0], square(factory, 0, 0, 1)])
    assert mixed.geom_type is GeometryType.GEOMETRYCOLLECTION

    polygons = factory.build_geometry([square(factory, 0, 0, 1), square(factory, 2, 0, 1)])
    assert polygons.geom_type is GeometryType.MULTIPOLYGON


def test_create_geometry_copies_onto_factory(factory):
    """create_geometry rebuilds a geometry with another factory."""
    other = GeometryFactory(srid=3857)
    polygon = factory.create_polygon(
        [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)],
        [[(2, 2), (4, 2), (4, 4), (2, 4), (2, 2)]],
    )
    copy = other.create_geometry(factory.create_multi_polygon([polygon]))

    assert copy.srid == 3857
    assert copy.factory is other
    assert copy.get_geometry_n(0).interiors[0].factory is other
    assert copy.equals_exact(factory.create_multi_polygon([polygon]))


def test_srid_and_user_data(factory):
    """The SRID comes from the factory; user_data survives clone."""
    geom = GeometryFactory(srid=4326).create_point((1, 2))
    geom.user_data = {"name": "origin"}

    assert geom.srid == 4326
    assert geom.clone().user_data == {"name": "origin"}


def test_centroids(factory):
    """Centroids by dimension, including holes and degenerate input."""
    assert factory.create_multi_point([(0, 0), (2, 0), (4, 6)]).centroid().get_coordinate() == (2.0, 2.0)

    line = factory.create_line_string([(0, 0), (10, 0), (10, 2)])
    c = line.centroid()
    assert (c.x, c.y) == pytest.approx((35 / 6, 1 / 6))

    polygon = factory.create_polygon(
        [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)],
        [[(0, 0), (0, 2), (2, 2), (2, 0), (0, 0)]],
    )
    c = polygon.centroid()
    assert (c.x, c.y) == pytest.approx((7 / 3, 7 / 3))

    zero_length = factory.create_line_string([(1, 1), (1, 1)])
    assert zero_length.centroid().get_coordinate() == (1.0, 1.0)

    assert factory.create_polygon().centroid().is_empty


def test_interior_points(factory):
    """Interior points lie on or inside their geometry."""
    circle = regular_polygon(factory, (5, 5), 2)
    assert circle.contains(circle.interior_point())

    line = factory.create_line_string([(0, 0), (1, 1), (2, 0)])
    assert line.interior_point().get_coordinate() == (1.0, 1.0)

    points = factory.create_multi_point([(0, 0), (5, 5), (9, 9)])
    assert points.interior_point().get_coordinate() == (5.0, 5.0)

    assert factory.create_line_string().interior_point().is_empty


def test_centroid_skips_empty_higher_dimension_members(factory):
    """An empty polygon or line in a collection does not hide its points."""
    with_empty_polygon = factory.create_geometry_collection([factory.create_polygon(), factory.create_point((1, 1))])
    centroid = with_empty_polygon.centroid()
    assert not centroid.is_empty
    assert centroid.get_coordinate() == (1.0, 1.0)

    with_empty_line = factory.create_geometry_collection(
        [factory.create_line_string(), factory.create_point((1, 1)), factory.create_point((3, 1))]
    )
    assert with_empty_line.centroid().get_coordinate() == (2.0, 1.0)


def test_interior_point_skips_empty_higher_dimension_members(factory):
    """Interior points of mixed collections come from their non-empty members."""
    with_empty_line = factory.create_geometry_collection([factory.create_line_string(), factory.create_point((1, 1))])
    assert with_empty_line.interior_point().get_coordinate() == (1.0, 1.0)

    with_empty_polygon = factory.create_geometry_collection(
        [factory.create_polygon(), factory.create_line_string([(0, 0), (2, 0), (4, 0)])]
    )
    assert with_empty_polygon.interior_point().get_coordinate() == (2.0, 0.0)


def test_centroid_rounded_to_precision_model(fake_factory):
    """Computed points are rounded onto the factory's precision grid."""
    fixed = GeometryFactory(precision_model=PrecisionModel.fixed(100), services=fake_factory.services)
    centroid = square(fixed, 0, 0, 1).centroid()

    assert centroid.get_coordinate() == (0.12, 0.99)


def test_precision_model(factory):
    """Fixed models round half up to their grid; floating models keep values."""
    fixed = PrecisionModel.fixed(10)
    assert fixed.make_precise(1.25) == pytest.approx(1.3)
    assert fixed.make_precise(-1.25) == pytest.approx(-1.2)
    assert fixed.grid_size == pytest.approx(0.1)
    assert PrecisionModel().make_precise(1.23456789) == 1.23456789
    assert PrecisionModel.floating_single().make_precise(0.1) == pytest.approx(0.1, abs=1e-7)
    with pytest.raises(ValueError):
        PrecisionModel.fixed(-1)


def test_fixed_precision_overlay_is_on_grid(factory):
    """Overlay results snap to the fixed grid."""
    fixed = GeometryFactory(precision_model=PrecisionModel.fixed(1))
    a = square(fixed, 0, 0, 2)
    b = box(fixed, 0.4, 0.4, 3, 3)
    coords = a.intersection(b).get_coordinates()

    assert np.array_equal(np.round(coords), coords)


def test_repr_and_geo_interface(factory):
    """Readable repr and a GeoJSON-like mapping."""
    polygon = square(factory, 0, 0, 1)
    assert repr(polygon) == "<Polygon num_points=5 first=(0.0 0.0)>"
    assert repr(factory.create_point()) == "<Point EMPTY>"
    assert polygon.__geo_interface__["type"] == "Polygon"
    assert factory.create_point((1, 2)).__geo_interface__ == {"type": "Point", "coordinates": (1.0, 2.0)}


def test_helpers(factory, tmp_path):
    """Sample builders and the JSON summary."""
    grid = point_grid(factory, 0, 0, 2, 2, 1)
    assert grid.num_geometries == 9

    output_file = tmp_path / "summary" / "geoms.json"
    summary = geometry_summary({"grid": grid, "unit": square(factory, 0, 0, 1)}, output_file=str(output_file))

    assert output_file.exists()
    assert summary["unit"]["area"] == 1.0
    assert summary["grid"]["num_geometries"] == 9
    assert summary["grid"]["bounds"] == [0.0, 0.0, 2.0, 2.0]

    with pytest.raises(ValueError):
        regular_polygon(factory, (0, 0), 1, sides=2)
