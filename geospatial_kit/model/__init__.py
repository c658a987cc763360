"""Geometry value model.

Immutable, validated GeoJSON geometries with derived properties:
- Point: Single position (also usable as a GeodesicPoint)
- LineString: Ordered points; also the Polygon ring type
- Polygon: Exterior ring plus holes
- MultiPoint / MultiLineString / MultiPolygon: Non-empty sets
- GeometryCollection: Heterogeneous, possibly empty, possibly nested
- BoundingBox: Envelope merged with BoundingBox.best
- GeoJson: Factory returning None (and logging) on invalid input
- InvalidGeometryMessage family: Diagnostics naming the failed invariant
"""

from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geo_json import GeoJson
from geospatial_kit.model.geometry import GeoJsonDict, Geometry
from geospatial_kit.model.geometry_collection import GeometryCollection
from geospatial_kit.model.line_string import LineString
from geospatial_kit.model.message import (
    InvalidCoordinateMessage,
    InvalidGeometryError,
    InvalidGeometryMessage,
    MalformedInputMessage,
    RingNotClosedMessage,
    RingTooFewPointsMessage,
    TooFewElementsMessage,
    TooFewPointsMessage,
)
from geospatial_kit.model.multi_line_string import MultiLineString
from geospatial_kit.model.multi_point import MultiPoint
from geospatial_kit.model.multi_polygon import MultiPolygon
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.point import Point
from geospatial_kit.model.polygon import Polygon

__all__ = [
    "BoundingBox",
    "GeoJsonObjectType",
    "GeoJsonDict",
    "Geometry",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    "GeoJson",
    "InvalidGeometryMessage",
    "InvalidCoordinateMessage",
    "TooFewPointsMessage",
    "TooFewElementsMessage",
    "RingNotClosedMessage",
    "RingTooFewPointsMessage",
    "MalformedInputMessage",
    "InvalidGeometryError",
]
