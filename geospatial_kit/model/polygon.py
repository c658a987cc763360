"""Polygon - Exterior linear ring with optional holes.

Ring 0 is the exterior, rings 1..n are holes. Area and centroid account for
holes; ``distance`` and ``contains`` use the exterior ring only. The stricter
``distance_to_boundary`` and ``contains_excluding_holes`` consult every ring.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from geospatial_kit.core.containment import contains_with_tolerance
from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.line_string import LineString
from geospatial_kit.model.message import InvalidGeometryError
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.point import Point
from geospatial_kit.model.validators import validate_linear_rings


@dataclass(frozen=True, eq=False)
class Polygon(Geometry):
    """A GeoJSON Polygon.

    Attributes:
        linear_rings: Exterior ring followed by hole rings (stored as a tuple)

    Derived:
        points: Every ring's points, flattened in ring order
        bounding_box: Envelope over all rings
        area: Exterior area minus hole areas, in square meters
        centroid: Exterior centroid shifted away from each hole

    Raises:
        InvalidGeometryError: If there is no ring, or a ring is open or has
            fewer than 4 points.

    Example:
        ring = LineString(points=[Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0), Point(0, 0)])
        polygon = Polygon(linear_rings=[ring])
    """

    type: ClassVar[GeoJsonObjectType] = GeoJsonObjectType.POLYGON

    linear_rings: Sequence[LineString]

    points: tuple[Point, ...] = field(init=False, repr=False)
    bounding_box: BoundingBox = field(init=False, repr=False)
    area: float = field(init=False, repr=False)
    centroid: GeodesicPoint = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "linear_rings", tuple(self.linear_rings))

        ring_points = [ring.points for ring in self.linear_rings]
        diagnostic = validate_linear_rings(rings=ring_points)
        if diagnostic is not None:
            raise InvalidGeometryError(diagnostic)

        object.__setattr__(self, "points", tuple(p for ring in ring_points for p in ring))
        object.__setattr__(self, "bounding_box", BoundingBox.best(ring.bounding_box for ring in self.linear_rings))
        object.__setattr__(self, "area", GeodesicCalculator.area(polygon_rings=ring_points))
        object.__setattr__(self, "centroid", GeodesicCalculator.centroid_of_polygon(polygon_rings=ring_points))

    @property
    def exterior_ring(self) -> LineString:
        return self.linear_rings[0]

    @property
    def holes(self) -> tuple[LineString, ...]:
        return self.linear_rings[1:]

    @property
    def geo_json_coordinates(self) -> list[list[list[float]]]:
        return [ring.geo_json_coordinates for ring in self.linear_rings]

    def distance(self, point: GeodesicPoint, error_distance: float = 0.0) -> float:
        """Distance to the exterior ring. Holes are not consulted."""
        return self.exterior_ring.distance(point=point, error_distance=error_distance)

    def contains(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        """Containment in the exterior ring, grown or shrunk by error_distance.

        Holes are not consulted; a point inside a hole is still contained.
        """
        return contains_with_tolerance(
            ring_points=self.exterior_ring.points,
            point=point,
            error_distance=error_distance,
        )

    def distance_to_boundary(self, point: GeodesicPoint) -> float:
        """Distance to the nearest ring, holes included."""
        return min(ring.distance(point=point) for ring in self.linear_rings)

    def contains_excluding_holes(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        """Containment that treats holes as outside.

        Holes are grown by the tolerance that shrinks the exterior and vice
        versa, so a positive error_distance keeps points near a hole's edge.
        """
        if not self.contains(point=point, error_distance=error_distance):
            return False
        return not any(
            contains_with_tolerance(ring_points=hole.points, point=point, error_distance=-error_distance)
            for hole in self.holes
        )

    def __repr__(self) -> str:
        return f"Polygon({len(self.holes)} holes, {len(self.points)} points, {self.area:.0f}m²)"
