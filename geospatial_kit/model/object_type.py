"""GeoJsonObjectType - Tag for each geometry variant."""

from enum import Enum


class GeoJsonObjectType(Enum):
    """Serialized GeoJSON "type" value for each supported geometry."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
