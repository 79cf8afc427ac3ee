# -*- coding: utf-8 -*-
"""GeometryServices backed by shapely (GEOS).

Kernel geometries are converted to shapely geometries on the way in and rebuilt with the factory of the first
operand on the way out. GEOS failures are translated into the kernel's own exceptions; topology failures keep the
location reported by GEOS.
"""

import logging
import re

import shapely
from shapely import geometry as shapely_geometry
from shapely.errors import GEOSException

from ..config import EndCapStyle
from ..core.coordinates import Coordinate
from ..core.errors import PreconditionError, RobustnessError, TopologyException
from ..core.geometry import GeometryType
from ..core.matrix import Dimension, IntersectionMatrix
from ..core.precision import PrecisionType
from .centroid import centroid, interior_point
from .extract import component_dimension
from .rectangle import rectangle_contains, rectangle_intersects
from .services import GeometryServices, OverlayOpCode

logger = logging.getLogger(__name__)

_OVERLAY_FUNCTIONS = {
    OverlayOpCode.INTERSECTION: shapely.intersection,
    OverlayOpCode.UNION: shapely.union,
    OverlayOpCode.DIFFERENCE: shapely.difference,
    OverlayOpCode.SYMDIFFERENCE: shapely.symmetric_difference,
}

_CAP_STYLES = {
    EndCapStyle.ROUND: "round",
    EndCapStyle.BUTT: "flat",
    EndCapStyle.SQUARE: "square",
}

_TOPOLOGY_MESSAGE = re.compile(
    r"TopologyException:\s*(?P<detail>.*?)(?:\s+at\s+(?P<x>[-+0-9.eE]+)\s+(?P<y>[-+0-9.eE]+))?\s*$", re.DOTALL
)

# GEOS snaps to within this fraction of a grid cell for fixed precision models
_FIXED_SNAP_FACTOR = 2 / 1.415


def to_shapely(geom):
    """Convert a kernel geometry into the equivalent shapely geometry."""
    geom_type = geom.geom_type
    if geom_type is GeometryType.POINT:
        if geom.is_empty:
            return shapely_geometry.Point()
        return shapely_geometry.Point(geom.coordinate_array[0])
    if geom_type is GeometryType.LINEARRING:
        if geom.is_empty:
            return shapely_geometry.LinearRing()
        return shapely_geometry.LinearRing(geom.coordinate_array)
    if geom_type is GeometryType.LINESTRING:
        if geom.is_empty:
            return shapely_geometry.LineString()
        return shapely_geometry.LineString(geom.coordinate_array)
    if geom_type is GeometryType.POLYGON:
        if geom.is_empty:
            return shapely_geometry.Polygon()
        holes = [hole.coordinate_array for hole in geom.interiors if not hole.is_empty]
        return shapely_geometry.Polygon(geom.exterior.coordinate_array, holes)

    members = [to_shapely(child) for child in geom.geoms]
    if geom_type is GeometryType.MULTIPOINT:
        return shapely_geometry.MultiPoint([m for m in members if not m.is_empty])
    if geom_type is GeometryType.MULTILINESTRING:
        return shapely_geometry.MultiLineString([m for m in members if not m.is_empty])
    if geom_type is GeometryType.MULTIPOLYGON:
        return shapely_geometry.MultiPolygon([m for m in members if not m.is_empty])
    return shapely_geometry.GeometryCollection(members)


def from_shapely(shape, factory):
    """Rebuild a shapely geometry with ``factory``.

    Parameters:
    -----------
    shape : shapely.geometry.base.BaseGeometry
        Geometry returned by shapely
    factory : GeometryFactory
        Factory owning the result

    Returns:
    --------
    geom : Geometry
        Kernel geometry of the matching variant
    """
    geom_type = shape.geom_type
    if geom_type == "Point":
        return factory.create_point(None if shape.is_empty else (shape.x, shape.y))
    if geom_type == "LineString":
        return factory.create_line_string(shapely.get_coordinates(shape))
    if geom_type == "LinearRing":
        return factory.create_linear_ring(shapely.get_coordinates(shape))
    if geom_type == "Polygon":
        if shape.is_empty:
            return factory.create_polygon()
        return factory.create_polygon(
            shapely.get_coordinates(shape.exterior),
            [shapely.get_coordinates(ring) for ring in shape.interiors],
        )

    members = [from_shapely(part, factory) for part in shape.geoms]
    if geom_type == "MultiPoint":
        return factory.create_multi_point(members)
    if geom_type == "MultiLineString":
        return factory.create_multi_line_string(members)
    if geom_type == "MultiPolygon":
        return factory.create_multi_polygon(members)
    if geom_type == "GeometryCollection":
        return factory.create_geometry_collection(members)
    raise PreconditionError(f"Unsupported shapely geometry type: {geom_type}")


def translate_error(exc, operation):
    """Map a GEOS failure to TopologyException or RobustnessError."""
    message = str(exc)
    match = _TOPOLOGY_MESSAGE.search(message)
    if match is None:
        return RobustnessError(f"{operation} failed: {message}")

    coord = None
    if match.group("x") is not None:
        try:
            coord = Coordinate(float(match.group("x")), float(match.group("y")))
        except ValueError:
            return TopologyException(message.split("TopologyException:", 1)[1].strip())
    return TopologyException(match.group("detail"), coord)


def overlay_snap_tolerance(a, b, snap_precision_factor):
    """Snap tolerance for retrying an overlay of ``a`` and ``b``."""

    def tolerance(geom):
        snap_tolerance = geom.envelope_internal.min_extent * snap_precision_factor
        model = geom.precision_model
        if model.model_type is PrecisionType.FIXED:
            snap_tolerance = max(snap_tolerance, model.grid_size * _FIXED_SNAP_FACTOR)
        return snap_tolerance

    return min(tolerance(a), tolerance(b))


class ShapelyServices(GeometryServices):
    """Default services: relate, overlay, buffer, hull, distance and validity from GEOS; centroids in numpy."""

    def _to_result(self, shape, factory):
        model = factory.precision_model
        if model.model_type is PrecisionType.FLOATING_SINGLE:
            shape = shapely.transform(shape, model.make_precise)
        return from_shapely(shape, factory)

    def relate(self, a, b):
        try:
            return IntersectionMatrix(shapely.relate(to_shapely(a), to_shapely(b)))
        except GEOSException as exc:
            raise translate_error(exc, "relate") from exc

    def overlay(self, a, b, op_code):
        """Run the overlay; on failure, retry once with the operands snapped together if the factory allows it.

        Parameters:
        -----------
        a, b : Geometry
            Non-empty, non-collection operands
        op_code : OverlayOpCode
            Operation to run

        Returns:
        --------
        result : Geometry
            The overlay result, or an empty GeometryCollection if it is empty
        """
        factory = a.factory
        function = _OVERLAY_FUNCTIONS[op_code]
        grid_size = factory.precision_model.grid_size
        shape_a, shape_b = to_shapely(a), to_shapely(b)

        try:
            result = function(shape_a, shape_b, grid_size=grid_size)
        except GEOSException as exc:
            config = factory.overlay_config
            if not config.snap_if_needed:
                raise translate_error(exc, op_code.name) from exc

            logger.warning("%s failed on original operands, retrying with snapping: %s", op_code.name, exc)
            snap_tolerance = overlay_snap_tolerance(a, b, config.snap_precision_factor)
            try:
                snapped_a = shapely.snap(shape_a, shape_b, snap_tolerance)
                snapped_b = shapely.snap(shape_b, snapped_a, snap_tolerance)
                result = function(snapped_a, snapped_b, grid_size=grid_size)
            except GEOSException as retry_exc:
                logger.warning("%s failed again after snapping with tolerance %s: %s", op_code.name, snap_tolerance, retry_exc)
                raise translate_error(exc, op_code.name) from exc
            logger.info("%s succeeded after snapping with tolerance %s", op_code.name, snap_tolerance)

        if result.is_empty:
            return factory.create_geometry_collection()
        return self._to_result(result, factory)

    def unary_union(self, geom):
        factory = geom.factory
        if geom.is_empty:
            return factory.create_geometry_collection()
        try:
            result = shapely.union_all(to_shapely(geom), grid_size=factory.precision_model.grid_size)
        except GEOSException as exc:
            raise translate_error(exc, "unary union") from exc
        if result.is_empty:
            return factory.create_geometry_collection()
        return self._to_result(result, factory)

    def buffer(self, geom, distance, parameters):
        factory = geom.factory
        if geom.is_empty:
            return factory.create_polygon()
        try:
            result = shapely.buffer(
                to_shapely(geom),
                distance,
                quad_segs=parameters.quadrant_segments,
                cap_style=_CAP_STYLES[parameters.end_cap_style],
            )
            grid_size = factory.precision_model.grid_size
            if grid_size is not None:
                result = shapely.set_precision(result, grid_size)
        except GEOSException as exc:
            raise translate_error(exc, "buffer") from exc
        if result.is_empty:
            return factory.create_polygon()
        return self._to_result(result, factory)

    def convex_hull(self, geom):
        factory = geom.factory
        if geom.is_empty:
            return factory.create_geometry_collection()
        try:
            result = shapely.convex_hull(to_shapely(geom))
        except GEOSException as exc:
            raise translate_error(exc, "convex hull") from exc
        return self._to_result(result, factory)

    def distance(self, a, b):
        try:
            return float(shapely.distance(to_shapely(a), to_shapely(b)))
        except GEOSException as exc:
            raise translate_error(exc, "distance") from exc

    def is_within_distance(self, a, b, distance):
        return self.distance(a, b) <= distance

    def rectangle_intersects(self, rectangle, geom):
        return rectangle_intersects(rectangle, geom)

    def rectangle_contains(self, rectangle, geom):
        return rectangle_contains(rectangle, geom)

    def is_simple(self, geom):
        return bool(shapely.is_simple(to_shapely(geom)))

    def is_valid(self, geom):
        return bool(shapely.is_valid(to_shapely(geom)))

    def validation_error(self, geom):
        reason = shapely.is_valid_reason(to_shapely(geom))
        if reason is None or reason == "Valid Geometry":
            return None
        return reason

    def centroid(self, geom):
        return centroid(geom)

    def interior_point(self, geom):
        if component_dimension(geom) == Dimension.A:
            try:
                point = shapely.point_on_surface(to_shapely(geom))
            except GEOSException as exc:
                raise translate_error(exc, "interior point") from exc
            return Coordinate(point.x, point.y)
        return interior_point(geom)
