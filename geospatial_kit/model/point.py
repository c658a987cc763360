"""Point - Single-position geometry.

A Point is both a Geometry and a GeodesicPoint, so it can be passed straight
to any GeodesicCalculator method.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.message import InvalidGeometryError
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.validators import validate_position


@dataclass(frozen=True, eq=False)
class Point(Geometry, GeodesicPoint):
    """A GeoJSON Point.

    Attributes:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees
        altitude: Optional altitude in meters

    Derived:
        bounding_box: Degenerate box around the point

    Raises:
        InvalidGeometryError: If a coordinate is NaN or infinite.

    Example:
        point = Point(longitude=10.295, latitude=46.985, altitude=2400.0)
    """

    type: ClassVar[GeoJsonObjectType] = GeoJsonObjectType.POINT

    bounding_box: BoundingBox = field(init=False, repr=False)

    def __post_init__(self) -> None:
        diagnostic = validate_position(longitude=self.longitude, latitude=self.latitude, altitude=self.altitude)
        if diagnostic is not None:
            raise InvalidGeometryError(diagnostic)

        object.__setattr__(self, "bounding_box", BoundingBox.from_points(points=[self]))

    @property
    def centroid(self) -> GeodesicPoint:
        return self

    @property
    def points(self) -> list["Point"]:
        return [self]

    @property
    def geo_json_coordinates(self) -> list[float]:
        if self.altitude is None:
            return [self.longitude, self.latitude]
        return [self.longitude, self.latitude, self.altitude]

    def distance(self, point: GeodesicPoint, error_distance: float = 0.0) -> float:
        return GeodesicCalculator.distance(point1=self, point2=point)

    def contains(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        return self.distance(point=point, error_distance=error_distance) <= error_distance

    def __repr__(self) -> str:
        if self.altitude is None:
            return f"Point(lon={self.longitude:.6f}, lat={self.latitude:.6f})"
        return f"Point(lon={self.longitude:.6f}, lat={self.latitude:.6f}, alt={self.altitude:.1f}m)"
