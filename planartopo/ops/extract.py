# -*- coding: utf-8 -*-
"""Walkers over the atomic components of a geometry."""

from ..core.geometry import GeometryType
from ..core.matrix import Dimension

LINEAL_TYPES = (GeometryType.LINESTRING, GeometryType.LINEARRING)
COLLECTION_TYPES = (
    GeometryType.MULTIPOINT,
    GeometryType.MULTILINESTRING,
    GeometryType.MULTIPOLYGON,
    GeometryType.GEOMETRYCOLLECTION,
)


def atomic_components(geom):
    """Yield the non-collection components of ``geom``, depth first."""
    if geom.geom_type in COLLECTION_TYPES:
        for child in geom.geoms:
            yield from atomic_components(child)
    else:
        yield geom


def extract_points(geom):
    return [g for g in atomic_components(geom) if g.geom_type is GeometryType.POINT and not g.is_empty]


def extract_lines(geom):
    return [g for g in atomic_components(geom) if g.geom_type in LINEAL_TYPES and not g.is_empty]


def extract_polygons(geom):
    return [g for g in atomic_components(geom) if g.geom_type is GeometryType.POLYGON and not g.is_empty]


def linear_coordinate_arrays(geom):
    """Vertex arrays of every line and polygon ring inside ``geom``."""
    for component in atomic_components(geom):
        if component.geom_type in LINEAL_TYPES:
            yield component.coordinate_array
        elif component.geom_type is GeometryType.POLYGON:
            for ring in (component.exterior, *component.interiors):
                yield ring.coordinate_array


def component_dimension(geom):
    """Highest dimension among the non-empty atomic components; Dimension.FALSE when there are none."""
    return max(
        (component.dimension for component in atomic_components(geom) if not component.is_empty),
        default=Dimension.FALSE,
    )
