"""GeoJson - Validating factory for geometry values.

Geometry constructors raise InvalidGeometryError when an invariant fails.
This factory turns that into the Optional contract callers rely on:
the diagnostic is logged at ERROR and None is returned. A None result is a
hard stop for that geometry; there are no partially built objects.
"""

import logging
from typing import Optional, Sequence, TypeVar

from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.geometry_collection import GeometryCollection
from geospatial_kit.model.line_string import LineString
from geospatial_kit.model.message import InvalidGeometryError
from geospatial_kit.model.multi_line_string import MultiLineString
from geospatial_kit.model.multi_point import MultiPoint
from geospatial_kit.model.multi_polygon import MultiPolygon
from geospatial_kit.model.point import Point
from geospatial_kit.model.polygon import Polygon

logger = logging.getLogger(__name__)

GeometryT = TypeVar("GeometryT", bound=Geometry)


def build(geometry_class: type[GeometryT], **kwargs) -> Optional[GeometryT]:
    """Construct a geometry, logging and swallowing validation failures.

    Args:
        geometry_class: Geometry subclass to instantiate
        **kwargs: Constructor arguments

    Returns:
        The geometry, or None if validation failed.
    """
    try:
        return geometry_class(**kwargs)
    except InvalidGeometryError as e:
        logger.error(e.diagnostic.message)
        return None


class GeoJson:
    """Creates geometries from already-built components.

    Example:
        geo_json = GeoJson()
        ring = geo_json.line_string(points=[geo_json.point(0, 0), ...])
        polygon = geo_json.polygon(linear_rings=[ring])  # None if ring is open
    """

    @staticmethod
    def point(longitude: float, latitude: float, altitude: Optional[float] = None) -> Optional[Point]:
        return build(Point, longitude=longitude, latitude=latitude, altitude=altitude)

    @staticmethod
    def line_string(points: Sequence[Point]) -> Optional[LineString]:
        return build(LineString, points=points)

    @staticmethod
    def polygon(linear_rings: Sequence[LineString]) -> Optional[Polygon]:
        return build(Polygon, linear_rings=linear_rings)

    @staticmethod
    def multi_point(points: Sequence[Point]) -> Optional[MultiPoint]:
        return build(MultiPoint, points=points)

    @staticmethod
    def multi_line_string(line_strings: Sequence[LineString]) -> Optional[MultiLineString]:
        return build(MultiLineString, line_strings=line_strings)

    @staticmethod
    def multi_polygon(polygons: Sequence[Polygon]) -> Optional[MultiPolygon]:
        return build(MultiPolygon, polygons=polygons)

    @staticmethod
    def geometry_collection(geometries: Optional[Sequence[Geometry]]) -> GeometryCollection:
        """Collections have no invariants, so this never fails."""
        return GeometryCollection(geometries=geometries)
