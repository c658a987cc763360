"""MultiPoint - Non-empty set of points."""

from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.message import InvalidGeometryError
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.point import Point
from geospatial_kit.model.validators import validate_multi_elements


@dataclass(frozen=True, eq=False)
class MultiPoint(Geometry):
    """A GeoJSON MultiPoint.

    Attributes:
        points: One or more points (stored as a tuple)

    Derived:
        bounding_box: Envelope of all points
        centroid: Unit-weight geodesic merge of the points (order-dependent)

    Raises:
        InvalidGeometryError: If no point is given.
    """

    type: ClassVar[GeoJsonObjectType] = GeoJsonObjectType.MULTI_POINT

    points: Sequence[Point]

    bounding_box: BoundingBox = field(init=False, repr=False)
    centroid: GeodesicPoint = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

        diagnostic = validate_multi_elements(geometry_type="MultiPoint", element_type="Point", elements=self.points)
        if diagnostic is not None:
            raise InvalidGeometryError(diagnostic)

        object.__setattr__(self, "bounding_box", BoundingBox.best(p.bounding_box for p in self.points))
        object.__setattr__(self, "centroid", GeodesicCalculator.centroid_of_points(points=self.points))

    @property
    def geo_json_coordinates(self) -> list[list[float]]:
        return [p.geo_json_coordinates for p in self.points]

    def distance(self, point: GeodesicPoint, error_distance: float = 0.0) -> float:
        return min(p.distance(point=point, error_distance=error_distance) for p in self.points)

    def contains(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        return any(p.contains(point=point, error_distance=error_distance) for p in self.points)

    def __repr__(self) -> str:
        return f"MultiPoint({len(self.points)} points)"
