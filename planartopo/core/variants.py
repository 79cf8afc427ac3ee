# -*- coding: utf-8 -*-
"""Concrete geometry variants.

The set of variants is closed: Point, LineString, LinearRing, Polygon, MultiPoint, MultiLineString, MultiPolygon and
GeometryCollection, each tagged with its ``GeometryType``. They supply dimension, emptiness, coordinate access,
envelope computation, exact equality, normalization and same-class comparison; every predicate and operation is
inherited from ``Geometry``.
"""

import numpy as np

from .coordinates import (
    as_coordinate_array,
    coordinates_equal,
    is_ccw,
    path_length,
    signed_area,
    to_coordinate,
)
from .envelope import Envelope
from .errors import PreconditionError
from .geometry import Geometry, GeometryType, geometry_sort_key
from .matrix import Dimension


def _normalize_ring(coords, clockwise):
    """Rotate a closed ring in place to start at its smallest vertex and orient it as requested."""
    if len(coords) == 0:
        return
    unique = coords[:-1]
    start = np.lexsort((unique[:, 1], unique[:, 0]))[0]
    ring = np.roll(unique, -start, axis=0)
    ring = np.vstack([ring, ring[:1]])
    if is_ccw(ring) == clockwise:
        ring = ring[::-1]
    coords[:] = ring


class _Vertices(Geometry):
    """Shared behaviour of the variants that own a single vertex array."""

    def __init__(self, coords, factory):
        super().__init__(factory)
        self._coords = as_coordinate_array(coords)

    @property
    def coordinate_array(self):
        """The owned vertex array. Edit it in place only if ``geometry_changed`` is called afterwards."""
        return self._coords

    @property
    def is_empty(self):
        return len(self._coords) == 0

    @property
    def num_points(self):
        return len(self._coords)

    def get_coordinate(self):
        if self.is_empty:
            return None
        return to_coordinate(self._coords[0])

    def get_coordinates(self):
        return self._coords.copy()

    def _coordinate_arrays(self):
        yield self._coords

    def _compute_envelope_internal(self):
        return Envelope.from_coordinates(self._coords)

    def equals_exact(self, other, tolerance=0.0):
        if not self._is_equivalent_class(other):
            return False
        return coordinates_equal(self._coords, other._coords, tolerance)

    def _compare_to_same_class(self, other, comparator):
        return comparator.compare(self._coords, other._coords)

    def _copy_into(self, geom):
        geom.user_data = self.user_data
        geom._envelope = self._envelope
        return geom


class Point(_Vertices):
    """A single location, or the empty point.

    Parameters:
    -----------
    coord : tuple or Coordinate, optional
        The location; None creates an empty point
    factory : GeometryFactory
        Owning factory
    """

    geom_type = GeometryType.POINT

    def __init__(self, coord, factory):
        super().__init__(coord, factory)
        if len(self._coords) > 1:
            raise PreconditionError(f"Point must have at most one coordinate, found {len(self._coords)}")

    @property
    def x(self):
        if self.is_empty:
            raise PreconditionError("x called on empty Point")
        return float(self._coords[0, 0])

    @property
    def y(self):
        if self.is_empty:
            raise PreconditionError("y called on empty Point")
        return float(self._coords[0, 1])

    @property
    def dimension(self):
        return Dimension.P

    @property
    def boundary_dimension(self):
        return Dimension.FALSE

    def get_boundary(self):
        return self._factory.create_geometry_collection()

    def clone(self):
        return self._copy_into(Point(self._coords.copy(), self._factory))

    def normalize(self):
        pass

    @property
    def __geo_interface__(self):
        if self.is_empty:
            return {"type": "Point", "coordinates": ()}
        return {"type": "Point", "coordinates": (self.x, self.y)}


class LineString(_Vertices):
    """A sequence of two or more vertices joined by straight segments, or the empty line."""

    geom_type = GeometryType.LINESTRING

    def __init__(self, coords, factory):
        super().__init__(coords, factory)
        self._validate_construction()

    def _validate_construction(self):
        if len(self._coords) == 1:
            raise PreconditionError("Invalid number of points in LineString (found 1 - must be 0 or >= 2)")

    @property
    def dimension(self):
        return Dimension.L

    @property
    def boundary_dimension(self):
        if self.is_closed:
            return Dimension.FALSE
        return Dimension.P

    @property
    def is_closed(self):
        if self.is_empty:
            return False
        return bool(np.array_equal(self._coords[0], self._coords[-1]))

    @property
    def is_ring(self):
        return self.is_closed and self.is_simple()

    @property
    def length(self):
        return path_length(self._coords)

    def get_coordinate_n(self, n):
        return to_coordinate(self._coords[n])

    def get_point_n(self, n):
        return self._factory.create_point(self._coords[n])

    @property
    def start_point(self):
        if self.is_empty:
            return None
        return self.get_point_n(0)

    @property
    def end_point(self):
        if self.is_empty:
            return None
        return self.get_point_n(len(self._coords) - 1)

    def get_boundary(self):
        # mod-2 rule: a closed line has no boundary
        if self.is_empty or self.is_closed:
            return self._factory.create_multi_point()
        return self._factory.create_multi_point([self._coords[0], self._coords[-1]])

    def reverse(self):
        return self._copy_into(type(self)(self._coords[::-1].copy(), self._factory))

    def clone(self):
        return self._copy_into(type(self)(self._coords.copy(), self._factory))

    def normalize(self):
        n = len(self._coords)
        for i in range(n // 2):
            j = n - 1 - i
            a = tuple(self._coords[i])
            b = tuple(self._coords[j])
            if a != b:
                if a > b:
                    self._coords[:] = self._coords[::-1].copy()
                return

    @property
    def __geo_interface__(self):
        return {"type": self.geometry_type, "coordinates": tuple(map(tuple, self._coords.tolist()))}


class LinearRing(LineString):
    """A closed, simple LineString used as a polygon ring."""

    geom_type = GeometryType.LINEARRING
    MINIMUM_VALID_SIZE = 4

    def _validate_construction(self):
        if self.is_empty:
            return
        if not self.is_closed:
            raise PreconditionError("Points of LinearRing do not form a closed linestring")
        if len(self._coords) < self.MINIMUM_VALID_SIZE:
            raise PreconditionError(
                f"Invalid number of points in LinearRing (found {len(self._coords)} - must be 0 or >= 4)"
            )

    @property
    def is_closed(self):
        if self.is_empty:
            return True
        return super().is_closed

    @property
    def boundary_dimension(self):
        return Dimension.FALSE

    @property
    def is_ccw(self):
        return is_ccw(self._coords)

    def normalize(self):
        _normalize_ring(self._coords, clockwise=True)


class Polygon(Geometry):
    """An area bounded by one exterior ring and zero or more interior rings (holes).

    Parameters:
    -----------
    shell : LinearRing, optional
        Exterior ring; None creates an empty polygon
    holes : list of LinearRing, optional
        Interior rings
    factory : GeometryFactory
        Owning factory
    """

    geom_type = GeometryType.POLYGON

    def __init__(self, shell, holes, factory):
        super().__init__(factory)
        if shell is None:
            shell = factory.create_linear_ring()
        holes = tuple(holes or ())
        if any(not isinstance(ring, LinearRing) for ring in (shell, *holes)):
            raise PreconditionError("Polygon rings must be LinearRings")
        if shell.is_empty and any(not hole.is_empty for hole in holes):
            raise PreconditionError("shell is empty but holes are not")
        self._shell = shell
        self._holes = holes

    @property
    def exterior(self):
        return self._shell

    @property
    def interiors(self):
        return self._holes

    @property
    def num_interior_rings(self):
        return len(self._holes)

    def get_interior_ring_n(self, n):
        return self._holes[n]

    def _children(self):
        return (self._shell, *self._holes)

    @property
    def dimension(self):
        return Dimension.A

    @property
    def boundary_dimension(self):
        return Dimension.L

    @property
    def is_empty(self):
        return self._shell.is_empty

    @property
    def num_points(self):
        return sum(ring.num_points for ring in self._children())

    def get_coordinate(self):
        return self._shell.get_coordinate()

    def get_coordinates(self):
        return np.vstack([ring.coordinate_array for ring in self._children()])

    def _coordinate_arrays(self):
        for ring in self._children():
            yield ring.coordinate_array

    def _compute_envelope_internal(self):
        return self._shell.envelope_internal

    @property
    def area(self):
        area = abs(signed_area(self._shell.coordinate_array))
        for hole in self._holes:
            area -= abs(signed_area(hole.coordinate_array))
        return area

    @property
    def length(self):
        return sum(ring.length for ring in self._children())

    @property
    def is_rectangle(self):
        """Whether this is an axis-aligned rectangle: no holes, five vertices on the envelope corners."""
        if self._holes or self._shell.num_points != 5:
            return False

        coords = self._shell.coordinate_array
        env = self.envelope_internal
        on_x = (coords[:, 0] == env.minx) | (coords[:, 0] == env.maxx)
        on_y = (coords[:, 1] == env.miny) | (coords[:, 1] == env.maxy)
        if not (on_x.all() and on_y.all()):
            return False

        # each edge must change exactly one ordinate
        steps = np.diff(coords, axis=0) != 0
        return bool(np.all(steps[:, 0] != steps[:, 1]))

    def get_boundary(self):
        if self.is_empty:
            return self._factory.create_multi_line_string()
        if not self._holes:
            return self._factory.create_linear_ring(self._shell.get_coordinates())
        return self._factory.create_multi_line_string([ring.clone() for ring in self._children()])

    def clone(self):
        polygon = Polygon(self._shell.clone(), [hole.clone() for hole in self._holes], self._factory)
        polygon.user_data = self.user_data
        return polygon

    def normalize(self):
        """Shell clockwise, holes counter-clockwise, each starting at its smallest vertex, holes sorted."""
        _normalize_ring(self._shell.coordinate_array, clockwise=True)
        for hole in self._holes:
            _normalize_ring(hole.coordinate_array, clockwise=False)
        self._holes = tuple(sorted(self._holes, key=geometry_sort_key))

    def equals_exact(self, other, tolerance=0.0):
        if not self._is_equivalent_class(other):
            return False
        if not self._shell.equals_exact(other._shell, tolerance):
            return False
        if len(self._holes) != len(other._holes):
            return False
        return all(a.equals_exact(b, tolerance) for a, b in zip(self._holes, other._holes))

    def _compare_to_same_class(self, other, comparator):
        comparison = comparator.compare(self._shell.coordinate_array, other._shell.coordinate_array)
        if comparison:
            return comparison
        return self._compare_sequences(self._holes, other._holes, comparator)

    @property
    def __geo_interface__(self):
        if self.is_empty:
            return {"type": "Polygon", "coordinates": ()}
        rings = [tuple(map(tuple, ring.coordinate_array.tolist())) for ring in self._children()]
        return {"type": "Polygon", "coordinates": tuple(rings)}


class GeometryCollection(Geometry):
    """An ordered collection of geometries of any kind; the children are owned by the collection."""

    geom_type = GeometryType.GEOMETRYCOLLECTION
    _member_type = Geometry

    def __init__(self, geoms, factory):
        super().__init__(factory)
        geoms = tuple(geoms or ())
        for geom in geoms:
            if not isinstance(geom, self._member_type):
                raise PreconditionError(f"{self.geometry_type} cannot contain {type(geom).__name__}")
        self._geoms = geoms

    @property
    def geoms(self):
        return self._geoms

    def __iter__(self):
        return iter(self._geoms)

    def __len__(self):
        return len(self._geoms)

    @property
    def num_geometries(self):
        return len(self._geoms)

    def get_geometry_n(self, n):
        return self._geoms[n]

    def _children(self):
        return self._geoms

    @property
    def dimension(self):
        return Dimension(max((geom.dimension for geom in self._geoms), default=Dimension.FALSE))

    @property
    def boundary_dimension(self):
        return Dimension(max((geom.boundary_dimension for geom in self._geoms), default=Dimension.FALSE))

    @property
    def is_empty(self):
        return all(geom.is_empty for geom in self._geoms)

    @property
    def num_points(self):
        return sum(geom.num_points for geom in self._geoms)

    def get_coordinate(self):
        for geom in self._geoms:
            if not geom.is_empty:
                return geom.get_coordinate()
        return None

    def get_coordinates(self):
        if not self._geoms:
            return as_coordinate_array()
        return np.vstack([geom.get_coordinates() for geom in self._geoms])

    def _coordinate_arrays(self):
        for geom in self._geoms:
            yield from geom._coordinate_arrays()

    def _compute_envelope_internal(self):
        envelope = Envelope.null()
        for geom in self._geoms:
            envelope = envelope.expand_to_include(geom.envelope_internal)
        return envelope

    @property
    def area(self):
        return sum(geom.area for geom in self._geoms)

    @property
    def length(self):
        return sum(geom.length for geom in self._geoms)

    def get_boundary(self):
        raise PreconditionError("This method does not support GeometryCollection arguments")

    def clone(self):
        collection = type(self)([geom.clone() for geom in self._geoms], self._factory)
        collection.user_data = self.user_data
        return collection

    def normalize(self):
        for geom in self._geoms:
            geom.normalize()
        self._geoms = tuple(sorted(self._geoms, key=geometry_sort_key))

    def equals_exact(self, other, tolerance=0.0):
        if not self._is_equivalent_class(other):
            return False
        if len(self._geoms) != len(other._geoms):
            return False
        return all(a.equals_exact(b, tolerance) for a, b in zip(self._geoms, other._geoms))

    def _compare_to_same_class(self, other, comparator):
        mine = sorted(self._geoms, key=geometry_sort_key)
        theirs = sorted(other._geoms, key=geometry_sort_key)
        return self._compare_sequences(mine, theirs, comparator)

    @property
    def __geo_interface__(self):
        return {"type": "GeometryCollection", "geometries": [geom.__geo_interface__ for geom in self._geoms]}


class MultiPoint(GeometryCollection):
    geom_type = GeometryType.MULTIPOINT
    _member_type = Point

    @property
    def dimension(self):
        return Dimension.P

    @property
    def boundary_dimension(self):
        return Dimension.FALSE

    def get_boundary(self):
        return self._factory.create_geometry_collection()

    @property
    def __geo_interface__(self):
        return {"type": "MultiPoint", "coordinates": tuple((p.x, p.y) for p in self._geoms if not p.is_empty)}


class MultiLineString(GeometryCollection):
    geom_type = GeometryType.MULTILINESTRING
    _member_type = LineString

    @property
    def dimension(self):
        return Dimension.L

    @property
    def is_closed(self):
        if self.is_empty:
            return False
        return all(line.is_closed for line in self._geoms)

    @property
    def boundary_dimension(self):
        if self.is_closed:
            return Dimension.FALSE
        return Dimension.P

    def get_boundary(self):
        """Endpoints shared by an odd number of component lines (mod-2 rule)."""
        counts = {}
        for line in self._geoms:
            if line.is_empty:
                continue
            coords = line.coordinate_array
            for end in (coords[0], coords[-1]):
                key = (float(end[0]), float(end[1]))
                counts[key] = counts.get(key, 0) + 1
        boundary = sorted(key for key, count in counts.items() if count % 2 == 1)
        return self._factory.create_multi_point(boundary)

    @property
    def __geo_interface__(self):
        return {
            "type": "MultiLineString",
            "coordinates": tuple(line.__geo_interface__["coordinates"] for line in self._geoms),
        }


class MultiPolygon(GeometryCollection):
    geom_type = GeometryType.MULTIPOLYGON
    _member_type = Polygon

    @property
    def dimension(self):
        return Dimension.A

    @property
    def boundary_dimension(self):
        return Dimension.L

    def get_boundary(self):
        rings = [ring.clone() for polygon in self._geoms for ring in polygon._children() if not ring.is_empty]
        return self._factory.create_multi_line_string(rings)

    @property
    def __geo_interface__(self):
        return {
            "type": "MultiPolygon",
            "coordinates": tuple(polygon.__geo_interface__["coordinates"] for polygon in self._geoms),
        }
