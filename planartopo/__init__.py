# -*- coding: utf-8 -*-
# planartopo/__init__.py

"""
planartopo: A planar geometry kernel with DE-9IM predicates and set-theoretic operations
=======================================================================================

planartopo models points, lines, polygons and their collections on the Euclidean plane,
in the style of the OGC Simple Features model.

Key features:
- Eight geometry variants built through a shared GeometryFactory
- Cached envelopes with cheap rejection tests
- DE-9IM IntersectionMatrix and the named spatial predicates
- Rectangle fast paths for intersects, contains and covers
- Overlay (intersection, union, difference, symmetric difference) with empty-operand rules
- Canonical ordering, normalization and exact / topological equality
- Pluggable algorithm services, backed by shapely by default
"""

__version__ = "0.1.0"

from .config import BufferParameters, EndCapStyle, OverlayConfig
from .core.coordinates import Coordinate, CoordinateSequenceComparator
from .core.envelope import Envelope
from .core.errors import GeometryError, PreconditionError, RobustnessError, TopologyException
from .core.factory import GeometryFactory
from .core.geometry import Geometry, GeometryType, geometry_sort_key
from .core.matrix import Dimension, IntersectionMatrix, Location
from .core.precision import PrecisionModel, PrecisionType
from .core.variants import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .ops.services import GeometryServices, OverlayOpCode
from .ops.shapely_services import ShapelyServices
