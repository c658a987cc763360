"""GeoJSON parser - Builds geometries from GeoJSON geometry dictionaries.

Accepts the seven geometry types, including nested GeometryCollections.
Coordinate arrays may be lists or tuples (shapely's ``mapping()`` output uses
tuples). Positions need at least longitude and latitude; a third value is
read as altitude and any further values are ignored.

Malformed input is logged at ERROR and yields None, never an exception.
"""

import logging
from numbers import Real
from typing import Any, Callable, Mapping, Optional

from geospatial_kit.constants import GeoJsonConfig, GeometryConfig
from geospatial_kit.model.geo_json import GeoJson
from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.geometry_collection import GeometryCollection
from geospatial_kit.model.line_string import LineString
from geospatial_kit.model.message import MalformedInputMessage
from geospatial_kit.model.multi_line_string import MultiLineString
from geospatial_kit.model.multi_point import MultiPoint
from geospatial_kit.model.multi_polygon import MultiPolygon
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.point import Point
from geospatial_kit.model.polygon import Polygon

logger = logging.getLogger(__name__)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _malformed(reason: str) -> None:
    logger.error(MalformedInputMessage(source="GeoJSON", reason=reason).message)
    return None


class GeoJsonParser:
    """Turns GeoJSON dictionaries and raw coordinate arrays into geometries.

    Example:
        parser = GeoJsonParser()
        point = parser.geometry({"type": "Point", "coordinates": [10.3, 46.9]})
        ring = parser.polygon([[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]])
    """

    def __init__(self) -> None:
        self.geo_json = GeoJson()
        self._coordinate_parsers: dict[GeoJsonObjectType, Callable[[Any], Optional[Geometry]]] = {
            GeoJsonObjectType.POINT: self.point,
            GeoJsonObjectType.LINE_STRING: self.line_string,
            GeoJsonObjectType.POLYGON: self.polygon,
            GeoJsonObjectType.MULTI_POINT: self.multi_point,
            GeoJsonObjectType.MULTI_LINE_STRING: self.multi_line_string,
            GeoJsonObjectType.MULTI_POLYGON: self.multi_polygon,
        }

    def geometry(self, geo_json: Mapping[str, Any]) -> Optional[Geometry]:
        """Parse a GeoJSON geometry dictionary.

        Returns:
            The geometry, or None if the dictionary is malformed or invalid.
        """
        return self._geometry(geo_json, depth=0)

    def _geometry(self, geo_json: Mapping[str, Any], depth: int) -> Optional[Geometry]:
        if not isinstance(geo_json, Mapping):
            return _malformed(f"expected a dictionary, got {type(geo_json).__name__}")

        type_name = geo_json.get(GeoJsonConfig.TYPE_KEY)
        try:
            object_type = GeoJsonObjectType(type_name)
        except ValueError:
            return _malformed(f"unsupported geometry type {type_name!r}")

        if object_type is GeoJsonObjectType.GEOMETRY_COLLECTION:
            return self.geometry_collection(geo_json.get(GeoJsonConfig.GEOMETRIES_KEY), depth=depth)

        coordinates = geo_json.get(GeoJsonConfig.COORDINATES_KEY)
        if not _is_array(coordinates):
            return _malformed(f'A valid {object_type.value} must have a "coordinates" array: {dict(geo_json)}')

        return self._coordinate_parsers[object_type](coordinates)

    def geometry_collection(self, geometries_json: Any, depth: int = 0) -> Optional[GeometryCollection]:
        """Parse a "geometries" array; depth counts the collections enclosing it."""
        if depth >= GeoJsonConfig.MAX_COLLECTION_DEPTH:
            return _malformed(f"GeometryCollection nested deeper than {GeoJsonConfig.MAX_COLLECTION_DEPTH} levels")
        if not _is_array(geometries_json):
            return _malformed('A valid GeometryCollection must have a "geometries" array')

        geometries = []
        for geometry_json in geometries_json:
            geometry = self._geometry(geometry_json, depth=depth + 1)
            if geometry is None:
                return _malformed("Invalid Geometry for GeometryCollection")
            geometries.append(geometry)

        return self.geo_json.geometry_collection(geometries=geometries)

    def point(self, coordinates: Any) -> Optional[Point]:
        if not _is_array(coordinates) or len(coordinates) < GeometryConfig.MIN_POSITION_VALUES:
            return _malformed(f"A valid Point must have at least longitude and latitude: {coordinates}")
        if not all(_is_number(value) for value in coordinates[:3]):
            return _malformed(f"A valid Point must have numeric coordinates: {coordinates}")

        try:
            longitude, latitude = float(coordinates[0]), float(coordinates[1])
            altitude = float(coordinates[2]) if len(coordinates) > 2 else None
        except OverflowError:
            return _malformed(f"A valid Point must have coordinates within float range: {coordinates}")

        return self.geo_json.point(longitude=longitude, latitude=latitude, altitude=altitude)

    def line_string(self, coordinates: Any) -> Optional[LineString]:
        points = self._parse_array(coordinates, parse=self.point, container="LineString", element="Point")
        if points is None:
            return None
        return self.geo_json.line_string(points=points)

    def polygon(self, coordinates: Any) -> Optional[Polygon]:
        rings = self._parse_array(
            coordinates,
            parse=self.line_string,
            container="Polygon",
            element="linear ring (LineString)",
        )
        if rings is None:
            return None
        return self.geo_json.polygon(linear_rings=rings)

    def multi_point(self, coordinates: Any) -> Optional[MultiPoint]:
        points = self._parse_array(coordinates, parse=self.point, container="MultiPoint", element="Point")
        if points is None:
            return None
        return self.geo_json.multi_point(points=points)

    def multi_line_string(self, coordinates: Any) -> Optional[MultiLineString]:
        lines = self._parse_array(
            coordinates,
            parse=self.line_string,
            container="MultiLineString",
            element="LineString",
        )
        if lines is None:
            return None
        return self.geo_json.multi_line_string(line_strings=lines)

    def multi_polygon(self, coordinates: Any) -> Optional[MultiPolygon]:
        polygons = self._parse_array(coordinates, parse=self.polygon, container="MultiPolygon", element="Polygon")
        if polygons is None:
            return None
        return self.geo_json.multi_polygon(polygons=polygons)

    @staticmethod
    def _parse_array(
        coordinates: Any,
        parse: Callable[[Any], Optional[Geometry]],
        container: str,
        element: str,
    ) -> Optional[list]:
        """Parse every member of a coordinate array, failing on the first bad one."""
        if not _is_array(coordinates):
            return _malformed(f"A valid {container} must have valid coordinates")

        parsed = []
        for member in coordinates:
            geometry = parse(member)
            if geometry is None:
                return _malformed(f"Invalid {element} in {container}")
            parsed.append(geometry)
        return parsed
