# -*- coding: utf-8 -*-
"""The abstract Geometry shared by every planar geometry variant.

Binary predicates
    Every predicate is derived from the DE-9IM matrix computed by the relate service. Before delegating, each
    predicate applies a cheap envelope test that can only prove the predicate false, and ``intersects``,
    ``contains`` and ``covers`` use specialised evaluators when one operand is an axis-aligned rectangle.
    Heterogeneous GeometryCollections are not supported as predicate operands.

Set-theoretic methods
    ``intersection``, ``union``, ``difference`` and ``sym_difference`` first resolve empty operands, then reject
    GeometryCollections, then delegate to the overlay service. Results are simple and noded, with constructed
    coordinates rounded to the factory's PrecisionModel. Rounding can move nearly coincident points together and
    collapse part of a result to a lower dimension; this is reported as a TopologyException and never repaired
    silently.

Equality
    ``equals`` is topological equality, ``equals_exact`` is structural equality within a tolerance. Python equality
    and hashing are left as identity so that topologically equal geometries stay distinct keys in dicts and sets.
"""

import functools
import logging
from enum import IntEnum

from ..config import BufferParameters
from ..ops.services import OverlayOpCode
from .coordinates import DEFAULT_COMPARATOR
from .errors import PreconditionError

logger = logging.getLogger(__name__)


class GeometryType(IntEnum):
    """Tag of each concrete variant; the value is its rank in the canonical ordering."""

    POINT = 0
    MULTIPOINT = 1
    LINESTRING = 2
    LINEARRING = 3
    MULTILINESTRING = 4
    POLYGON = 5
    MULTIPOLYGON = 6
    GEOMETRYCOLLECTION = 7


def _sign(value):
    return (value > 0) - (value < 0)


class Geometry:
    """Base class of all geometries.

    Geometries are created through a GeometryFactory and behave as values afterwards. The bounding box is computed
    lazily and cached; code that edits coordinates in place must call ``geometry_changed`` afterwards, otherwise the
    cached envelope goes stale. The cache is not synchronised: materialise ``envelope_internal`` before sharing a
    geometry between threads.

    Parameters:
    -----------
    factory : GeometryFactory
        Factory supplying the precision model, the SRID and the algorithm services
    """

    geom_type = None

    def __init__(self, factory):
        if factory is None:
            raise PreconditionError("A geometry needs a GeometryFactory")
        self._factory = factory
        self._srid = factory.srid
        self._envelope = None
        self.user_data = None

    # Context

    @property
    def factory(self):
        return self._factory

    @property
    def srid(self):
        return self._srid

    @property
    def precision_model(self):
        return self._factory.precision_model

    @property
    def services(self):
        return self._factory.services

    @property
    def geometry_type(self):
        """Name of the concrete variant, e.g. ``"Polygon"``."""
        return type(self).__name__

    # Variant capabilities

    @property
    def dimension(self):
        raise NotImplementedError

    @property
    def boundary_dimension(self):
        raise NotImplementedError

    @property
    def is_empty(self):
        raise NotImplementedError

    @property
    def num_points(self):
        raise NotImplementedError

    @property
    def num_geometries(self):
        return 1

    def get_geometry_n(self, n):
        if n != 0:
            raise IndexError(f"{self.geometry_type} has a single component, got index {n}")
        return self

    def get_coordinate(self):
        """First vertex as a Coordinate, or None when empty."""
        raise NotImplementedError

    def get_coordinates(self):
        """All vertices as a fresh ``(n, 2)`` array."""
        raise NotImplementedError

    def get_boundary(self):
        raise NotImplementedError

    @property
    def is_rectangle(self):
        return False

    @property
    def is_geometry_collection(self):
        return self.geom_type is GeometryType.GEOMETRYCOLLECTION

    @property
    def area(self):
        return 0.0

    @property
    def length(self):
        return 0.0

    def clone(self):
        raise NotImplementedError

    def normalize(self):
        """Rewrite this geometry in place into its canonical vertex order."""
        raise NotImplementedError

    def norm(self):
        """Normalized copy; this geometry is left untouched."""
        copy = self.clone()
        copy.normalize()
        return copy

    def _children(self):
        return ()

    def _coordinate_arrays(self):
        for child in self._children():
            yield from child._coordinate_arrays()

    def apply(self, coordinate_filter):
        """Edit coordinates in place and invalidate the cached envelopes.

        Parameters:
        -----------
        coordinate_filter : callable
            Called once with each owned ``(n, 2)`` vertex array; must modify it in place
        """
        for coords in self._coordinate_arrays():
            coordinate_filter(coords)
        self.geometry_changed()

    def _compute_envelope_internal(self):
        raise NotImplementedError

    def _compare_to_same_class(self, other, comparator):
        raise NotImplementedError

    # Envelope cache

    @property
    def envelope_internal(self):
        """Cached bounding box; the null Envelope for empty geometries."""
        if self._envelope is None:
            self._envelope = self._compute_envelope_internal()
        return self._envelope

    def get_envelope(self):
        """Bounding box as a geometry: an empty Point, a Point, or a closed five-vertex Polygon."""
        return self._factory.to_geometry(self.envelope_internal)

    def geometry_changed(self):
        """Drop the cached envelopes of this geometry and all of its components.

        Must be called after coordinates have been edited in place.
        """
        self._envelope = None
        for child in self._children():
            child.geometry_changed()

    # Argument checks

    @staticmethod
    def _check_geometry(other):
        if not isinstance(other, Geometry):
            raise PreconditionError(f"Expected a Geometry, got {type(other).__name__}")

    @staticmethod
    def _check_not_geometry_collection(geom):
        if geom.is_geometry_collection:
            raise PreconditionError("This method does not support GeometryCollection arguments")

    def _check_predicate_operands(self, other):
        self._check_geometry(other)
        self._check_not_geometry_collection(self)
        self._check_not_geometry_collection(other)

    # Binary predicates

    def disjoint(self, other):
        return not self.intersects(other)

    def touches(self, other):
        self._check_predicate_operands(other)
        if not self.envelope_internal.intersects(other.envelope_internal):
            return False
        return self.relate(other).is_touches(self.dimension, other.dimension)

    def intersects(self, other):
        """Whether the two geometries have at least one point in common.

        Parameters:
        -----------
        other : Geometry
            Geometry to test against

        Returns:
        --------
        result : bool
            True if the point-sets intersect
        """
        self._check_geometry(other)
        if not self.envelope_internal.intersects(other.envelope_internal):
            return False

        if self.is_rectangle:
            logger.debug("intersects: rectangle fast path on receiver")
            return self.services.rectangle_intersects(self, other)
        if other.is_rectangle:
            logger.debug("intersects: rectangle fast path on argument")
            return self.services.rectangle_intersects(other, self)

        return self.relate(other).is_intersects()

    def crosses(self, other):
        self._check_predicate_operands(other)
        if not self.envelope_internal.intersects(other.envelope_internal):
            return False
        return self.relate(other).is_crosses(self.dimension, other.dimension)

    def within(self, other):
        self._check_geometry(other)
        return other.contains(self)

    def contains(self, other):
        """Whether no point of ``other`` lies in the exterior of this geometry and their interiors meet."""
        self._check_geometry(other)
        if not self.envelope_internal.contains(other.envelope_internal):
            return False

        if self.is_rectangle:
            logger.debug("contains: rectangle fast path on receiver")
            return self.services.rectangle_contains(self, other)

        return self.relate(other).is_contains()

    def overlaps(self, other):
        self._check_predicate_operands(other)
        if not self.envelope_internal.intersects(other.envelope_internal):
            return False
        return self.relate(other).is_overlaps(self.dimension, other.dimension)

    def covers(self, other):
        """Whether every point of ``other`` is a point of this geometry."""
        self._check_geometry(other)
        if not self.envelope_internal.covers(other.envelope_internal):
            return False

        # a rectangle covers everything its envelope covers
        if self.is_rectangle:
            logger.debug("covers: rectangle receiver covers argument envelope")
            return True

        return self.relate(other).is_covers()

    def covered_by(self, other):
        self._check_geometry(other)
        return other.covers(self)

    def equals(self, other):
        """Topological equality: both geometries describe the same point-set."""
        self._check_predicate_operands(other)
        if not self.envelope_internal.equals(other.envelope_internal):
            return False
        return self.relate(other).is_equals(self.dimension, other.dimension)

    def relate(self, other):
        """Compute the DE-9IM matrix between this geometry and ``other``.

        Parameters:
        -----------
        other : Geometry
            Second operand; must not be a GeometryCollection

        Returns:
        --------
        matrix : IntersectionMatrix
            Matrix with rows for this geometry and columns for ``other``
        """
        self._check_predicate_operands(other)
        logger.debug("Delegating relate of %s and %s", self.geometry_type, other.geometry_type)
        return self.services.relate(self, other)

    def relate_pattern(self, other, pattern):
        """Whether the DE-9IM matrix with ``other`` matches a nine-character pattern such as ``"T*F**FFF*"``."""
        if not isinstance(pattern, str):
            raise PreconditionError(f"Pattern must be a string, got {type(pattern).__name__}")
        return self.relate(other).matches(pattern)

    # Set-theoretic operations

    def intersection(self, other):
        """Point-set intersection; an empty GeometryCollection if either operand is empty."""
        self._check_geometry(other)
        if self.is_empty or other.is_empty:
            return self._factory.create_geometry_collection()

        self._check_not_geometry_collection(self)
        self._check_not_geometry_collection(other)
        return self._overlay(other, OverlayOpCode.INTERSECTION)

    def union(self, other):
        """Point-set union with ``other``; a copy of the non-empty operand if the other one is empty.

        See ``unary_union`` for dissolving the components of a single geometry.
        """
        self._check_geometry(other)
        if self.is_empty:
            return other.clone()
        if other.is_empty:
            return self.clone()

        self._check_not_geometry_collection(self)
        self._check_not_geometry_collection(other)
        return self._overlay(other, OverlayOpCode.UNION)

    def difference(self, other):
        """Points of this geometry not in ``other``.

        An empty receiver yields an empty GeometryCollection, an empty argument a copy of the receiver.
        """
        self._check_geometry(other)
        if self.is_empty:
            return self._factory.create_geometry_collection()
        if other.is_empty:
            return self.clone()

        self._check_not_geometry_collection(self)
        self._check_not_geometry_collection(other)
        return self._overlay(other, OverlayOpCode.DIFFERENCE)

    def sym_difference(self, other):
        """Points in exactly one of the two geometries; a copy of the non-empty operand if the other is empty."""
        self._check_geometry(other)
        if self.is_empty:
            return other.clone()
        if other.is_empty:
            return self.clone()

        self._check_not_geometry_collection(self)
        self._check_not_geometry_collection(other)
        return self._overlay(other, OverlayOpCode.SYMDIFFERENCE)

    def _overlay(self, other, op_code):
        logger.debug("Delegating %s of %s and %s", op_code.name, self.geometry_type, other.geometry_type)
        return self.services.overlay(self, other, op_code)

    def unary_union(self):
        """Dissolve and node all components of this geometry, which may be a heterogeneous collection.

        Polygonal input always gives a polygonal result.
        """
        return self.services.unary_union(self)

    # Delegated constructions and measures

    def buffer(self, distance, quadrant_segments=None, end_cap_style=None):
        """Polygonal region within ``distance`` of this geometry.

        Parameters:
        -----------
        distance : float
            Buffer distance; negative values erode areal geometries
        quadrant_segments : int, optional
            Segments used to approximate a quarter circle, defaults to the factory's buffer parameters
        end_cap_style : EndCapStyle, optional
            ROUND, BUTT or SQUARE, defaults to the factory's buffer parameters

        Returns:
        --------
        buffer : Geometry
            Polygonal result, empty when nothing remains
        """
        defaults = self._factory.buffer_parameters
        try:
            parameters = BufferParameters(
                quadrant_segments=defaults.quadrant_segments if quadrant_segments is None else quadrant_segments,
                end_cap_style=defaults.end_cap_style if end_cap_style is None else end_cap_style,
            )
        except ValueError as exc:
            raise PreconditionError(str(exc)) from exc
        return self.services.buffer(self, float(distance), parameters)

    def convex_hull(self):
        return self.services.convex_hull(self)

    def distance(self, other):
        """Minimum distance to ``other``; 0.0 when either geometry is empty."""
        self._check_geometry(other)
        if self.is_empty or other.is_empty:
            return 0.0
        return self.services.distance(self, other)

    def is_within_distance(self, other, distance):
        self._check_geometry(other)
        if self.is_empty or other.is_empty:
            return False
        if self.envelope_internal.distance(other.envelope_internal) > distance:
            return False
        return self.services.is_within_distance(self, other, distance)

    def centroid(self):
        """Centre of mass, computed with the calculator matching this geometry's dimension."""
        if self.is_empty:
            return self._factory.create_point()
        return self._create_point_from_internal_coord(self.services.centroid(self))

    def interior_point(self):
        """A point guaranteed to lie in the interior (or, for puntal input, on) this geometry."""
        if self.is_empty:
            return self._factory.create_point()
        return self._create_point_from_internal_coord(self.services.interior_point(self))

    def _create_point_from_internal_coord(self, coord):
        return self._factory.create_point_from_internal_coord(coord)

    def is_simple(self):
        self._check_not_geometry_collection(self)
        return self.services.is_simple(self)

    def is_valid(self):
        return self.services.is_valid(self)

    def validation_error(self):
        """Reason this geometry is invalid, or None if it is valid."""
        return self.services.validation_error(self)

    # Equality and ordering

    def equals_exact(self, other, tolerance=0.0):
        """Structural equality within ``tolerance``; every variant overrides this."""
        return False

    def _is_equivalent_class(self, other):
        return isinstance(other, Geometry) and self.geom_type is other.geom_type

    def equals_norm(self, other):
        """Structural equality after normalizing both geometries."""
        self._check_geometry(other)
        return self.norm().equals_exact(other.norm())

    def compare_to(self, other, comparator=None):
        """Canonical ordering: variant kind, then emptiness, then vertex sequences.

        Parameters:
        -----------
        other : Geometry
            Geometry to compare with
        comparator : CoordinateSequenceComparator, optional
            Comparator for vertex sequences, e.g. one with a tolerance

        Returns:
        --------
        result : int
            -1, 0 or 1
        """
        self._check_geometry(other)
        if other is self:
            return 0

        kind = _sign(self.geom_type - other.geom_type)
        if kind:
            return kind

        if self.is_empty and other.is_empty:
            return 0
        if self.is_empty:
            return -1
        if other.is_empty:
            return 1

        return self._compare_to_same_class(other, comparator or DEFAULT_COMPARATOR)

    @staticmethod
    def _compare_sequences(geoms_a, geoms_b, comparator):
        # element-wise, then by length
        for a, b in zip(geoms_a, geoms_b):
            comparison = a.compare_to(b, comparator)
            if comparison:
                return comparison
        return _sign(len(geoms_a) - len(geoms_b))

    def __repr__(self):
        if self.is_empty:
            return f"<{self.geometry_type} EMPTY>"
        coord = self.get_coordinate()
        return f"<{self.geometry_type} num_points={self.num_points} first=({coord.x} {coord.y})>"


# key function for sorted(); orders geometries canonically
geometry_sort_key = functools.cmp_to_key(lambda a, b: a.compare_to(b))
