"""LineString - Ordered sequence of points joined by great-circle segments.

Also used as the linear ring type inside Polygon.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint, LineSegment
from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.message import InvalidGeometryError
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.point import Point
from geospatial_kit.model.validators import validate_line_string_points


@dataclass(frozen=True, eq=False)
class LineString(Geometry):
    """A GeoJSON LineString.

    Attributes:
        points: Ordered points (stored as a tuple)

    Derived:
        segments: Adjacent point pairs (n-1 for n points)
        bounding_box: Envelope of all points
        centroid: Arc-length midpoint
        length: Sum of segment distances in meters

    Raises:
        InvalidGeometryError: If fewer than 2 points are given.
    """

    type: ClassVar[GeoJsonObjectType] = GeoJsonObjectType.LINE_STRING

    points: Sequence[Point]

    segments: tuple[LineSegment, ...] = field(init=False, repr=False)
    bounding_box: BoundingBox = field(init=False, repr=False)
    centroid: GeodesicPoint = field(init=False, repr=False)
    length: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

        diagnostic = validate_line_string_points(points=self.points)
        if diagnostic is not None:
            raise InvalidGeometryError(diagnostic)

        segments = tuple(GeodesicCalculator.segments(points=self.points))
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "bounding_box", BoundingBox.best(p.bounding_box for p in self.points))
        object.__setattr__(self, "centroid", GeodesicCalculator.centroid_of_line(line_points=self.points))
        object.__setattr__(self, "length", GeodesicCalculator.length(line_segments=segments))

    @property
    def geo_json_coordinates(self) -> list[list[float]]:
        return [p.geo_json_coordinates for p in self.points]

    def distance(self, point: GeodesicPoint, error_distance: float = 0.0) -> float:
        return min(GeodesicCalculator.distance_to_segment(point=point, line_segment=s) for s in self.segments)

    def contains(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        return self.distance(point=point, error_distance=error_distance) <= error_distance

    def __repr__(self) -> str:
        return f"LineString({len(self.points)} points, {self.length:.0f}m)"
