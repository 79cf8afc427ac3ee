# -*- coding: utf-8 -*-
"""GeometryFactory: builds geometries and carries the context they share.

A factory is immutable once built and is shared by every geometry created from it. Constructors take ownership of
the arrays and rings they are given and never round coordinates; input is assumed to already respect the factory's
PrecisionModel.
"""

import numpy as np

from ..config import BufferParameters, OverlayConfig
from ..ops.shapely_services import ShapelyServices
from .coordinates import as_coordinate_array
from .errors import PreconditionError
from .precision import PrecisionModel
from .variants import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


class GeometryFactory:
    """Creates geometries sharing a precision model, an SRID and a set of algorithm services.

    Parameters:
    -----------
    precision_model : PrecisionModel, optional
        Rounding policy for constructed coordinates; floating by default
    srid : int
        Spatial reference identifier copied into every geometry
    services : GeometryServices, optional
        Algorithms used for relate, overlay, buffer and friends; shapely-backed by default
    buffer_parameters : BufferParameters, optional
        Defaults for ``Geometry.buffer``
    overlay_config : OverlayConfig, optional
        Retry policy of the overlay service
    """

    def __init__(self, precision_model=None, srid=0, services=None, buffer_parameters=None, overlay_config=None):
        if services is None:
            services = ShapelyServices()

        self._precision_model = precision_model if precision_model is not None else PrecisionModel()
        self._srid = int(srid)
        self._services = services
        self._buffer_parameters = buffer_parameters if buffer_parameters is not None else BufferParameters()
        self._overlay_config = overlay_config if overlay_config is not None else OverlayConfig()

    @property
    def precision_model(self):
        return self._precision_model

    @property
    def srid(self):
        return self._srid

    @property
    def services(self):
        return self._services

    @property
    def buffer_parameters(self):
        return self._buffer_parameters

    @property
    def overlay_config(self):
        return self._overlay_config

    # Primitive constructors

    def create_point(self, coord=None):
        return Point(coord, self)

    def create_line_string(self, coords=None):
        return LineString(coords, self)

    def create_linear_ring(self, coords=None):
        return LinearRing(coords, self)

    def _as_ring(self, ring):
        if isinstance(ring, LinearRing):
            return ring
        return self.create_linear_ring(ring)

    def create_polygon(self, shell=None, holes=None):
        """Create a Polygon from LinearRings or from closed coordinate sequences.

        Parameters:
        -----------
        shell : LinearRing or sequence, optional
            Exterior ring; None creates an empty polygon
        holes : list, optional
            Interior rings as LinearRings or coordinate sequences

        Returns:
        --------
        polygon : Polygon
            The new polygon, owning the given rings
        """
        shell = None if shell is None else self._as_ring(shell)
        return Polygon(shell, [self._as_ring(hole) for hole in holes or ()], self)

    # Collection constructors

    def create_multi_point(self, points=None):
        if points is not None and not isinstance(points, (list, tuple)):
            points = list(as_coordinate_array(points))
        return MultiPoint([p if isinstance(p, Point) else self.create_point(p) for p in points or ()], self)

    def create_multi_line_string(self, lines=None):
        return MultiLineString([line if isinstance(line, LineString) else self.create_line_string(line) for line in lines or ()], self)

    def create_multi_polygon(self, polygons=None):
        return MultiPolygon(list(polygons or ()), self)

    def create_geometry_collection(self, geoms=None):
        return GeometryCollection(list(geoms or ()), self)

    def build_geometry(self, geoms):
        """Wrap a list of geometries in the most specific type able to hold them.

        An empty list gives an empty GeometryCollection, a single geometry is returned as is, homogeneous
        Points, LineStrings or Polygons give the matching Multi type, anything else a GeometryCollection.
        """
        geoms = list(geoms)
        if not geoms:
            return self.create_geometry_collection()

        kinds = {type(geom) for geom in geoms}
        if len(kinds) > 1 or (isinstance(geoms[0], GeometryCollection) and len(geoms) > 1):
            return self.create_geometry_collection(geoms)
        if len(geoms) == 1:
            return geoms[0]

        kind = kinds.pop()
        if kind is Polygon:
            return self.create_multi_polygon(geoms)
        if kind is LineString:
            return self.create_multi_line_string(geoms)
        if kind is Point:
            return self.create_multi_point(geoms)
        return self.create_geometry_collection(geoms)

    def create_geometry(self, geom):
        """Deep copy of ``geom`` whose components all belong to this factory."""
        if isinstance(geom, Point):
            return self.create_point(geom.get_coordinates())
        if isinstance(geom, LinearRing):
            return self.create_linear_ring(geom.get_coordinates())
        if isinstance(geom, LineString):
            return self.create_line_string(geom.get_coordinates())
        if isinstance(geom, Polygon):
            return self.create_polygon(
                self.create_geometry(geom.exterior), [self.create_geometry(hole) for hole in geom.interiors]
            )
        if isinstance(geom, GeometryCollection):
            children = [self.create_geometry(child) for child in geom.geoms]
            return type(geom)(children, self)
        raise PreconditionError(f"Unsupported geometry type: {type(geom).__name__}")

    def to_geometry(self, envelope):
        """Materialise an Envelope: an empty Point, a Point, or a closed five-vertex Polygon."""
        if envelope.is_null:
            return self.create_point()

        if envelope.minx == envelope.maxx and envelope.miny == envelope.maxy:
            return self.create_point((envelope.minx, envelope.miny))

        ring = np.array(
            [
                (envelope.minx, envelope.miny),
                (envelope.maxx, envelope.miny),
                (envelope.maxx, envelope.maxy),
                (envelope.minx, envelope.maxy),
                (envelope.minx, envelope.miny),
            ]
        )
        return self.create_polygon(ring)

    def create_point_from_internal_coord(self, coord):
        """Point at a computed location, rounded to this factory's precision model."""
        return self.create_point(self._precision_model.make_precise(as_coordinate_array(coord)))

    def __repr__(self):
        return f"GeometryFactory(precision_model={self._precision_model}, srid={self._srid})"
