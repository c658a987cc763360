"""MultiPolygon - Non-empty set of polygons.

Polygons are not checked for overlap; overlapping members are kept as given.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.message import InvalidGeometryError
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.point import Point
from geospatial_kit.model.polygon import Polygon
from geospatial_kit.model.validators import validate_multi_elements


@dataclass(frozen=True, eq=False)
class MultiPolygon(Geometry):
    """A GeoJSON MultiPolygon.

    Attributes:
        polygons: One or more polygons (stored as a tuple)

    Derived:
        points: Every polygon's points, flattened in order
        bounding_box: Envelope over all polygons
        centroid: Area-weighted merge anchored at the first polygon

    Raises:
        InvalidGeometryError: If no polygon is given.
    """

    type: ClassVar[GeoJsonObjectType] = GeoJsonObjectType.MULTI_POLYGON

    polygons: Sequence[Polygon]

    points: tuple[Point, ...] = field(init=False, repr=False)
    bounding_box: BoundingBox = field(init=False, repr=False)
    centroid: GeodesicPoint = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", tuple(self.polygons))

        diagnostic = validate_multi_elements(
            geometry_type="MultiPolygon",
            element_type="Polygon",
            elements=self.polygons,
        )
        if diagnostic is not None:
            raise InvalidGeometryError(diagnostic)

        object.__setattr__(self, "points", tuple(p for polygon in self.polygons for p in polygon.points))
        object.__setattr__(self, "bounding_box", BoundingBox.best(polygon.bounding_box for polygon in self.polygons))
        object.__setattr__(
            self,
            "centroid",
            GeodesicCalculator.centroid_of_polygons(
                polygons=[[ring.points for ring in polygon.linear_rings] for polygon in self.polygons]
            ),
        )

    @property
    def area(self) -> float:
        """Sum of member polygon areas in square meters."""
        return sum(polygon.area for polygon in self.polygons)

    @property
    def geo_json_coordinates(self) -> list[list[list[list[float]]]]:
        return [polygon.geo_json_coordinates for polygon in self.polygons]

    def distance(self, point: GeodesicPoint, error_distance: float = 0.0) -> float:
        return min(polygon.distance(point=point, error_distance=error_distance) for polygon in self.polygons)

    def contains(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        return any(polygon.contains(point=point, error_distance=error_distance) for polygon in self.polygons)

    def __repr__(self) -> str:
        return f"MultiPolygon({len(self.polygons)} polygons, {self.area:.0f}m²)"
