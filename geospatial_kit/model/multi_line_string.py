"""MultiLineString - Non-empty set of line strings."""

from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.line_string import LineString
from geospatial_kit.model.message import InvalidGeometryError
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.point import Point
from geospatial_kit.model.validators import validate_multi_elements


@dataclass(frozen=True, eq=False)
class MultiLineString(Geometry):
    """A GeoJSON MultiLineString.

    Attributes:
        line_strings: One or more line strings (stored as a tuple)

    Derived:
        points: Every line's points, flattened in order
        bounding_box: Envelope over all lines
        centroid: Length-weighted merge of each line's arc-length midpoint

    Raises:
        InvalidGeometryError: If no line string is given.
    """

    type: ClassVar[GeoJsonObjectType] = GeoJsonObjectType.MULTI_LINE_STRING

    line_strings: Sequence[LineString]

    points: tuple[Point, ...] = field(init=False, repr=False)
    bounding_box: BoundingBox = field(init=False, repr=False)
    centroid: GeodesicPoint = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "line_strings", tuple(self.line_strings))

        diagnostic = validate_multi_elements(
            geometry_type="MultiLineString",
            element_type="LineString",
            elements=self.line_strings,
        )
        if diagnostic is not None:
            raise InvalidGeometryError(diagnostic)

        object.__setattr__(self, "points", tuple(p for line in self.line_strings for p in line.points))
        object.__setattr__(self, "bounding_box", BoundingBox.best(line.bounding_box for line in self.line_strings))
        object.__setattr__(
            self,
            "centroid",
            GeodesicCalculator.centroid_of_lines(lines=[line.points for line in self.line_strings]),
        )

    @property
    def geo_json_coordinates(self) -> list[list[list[float]]]:
        return [line.geo_json_coordinates for line in self.line_strings]

    def distance(self, point: GeodesicPoint, error_distance: float = 0.0) -> float:
        return min(line.distance(point=point, error_distance=error_distance) for line in self.line_strings)

    def contains(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        return any(line.contains(point=point, error_distance=error_distance) for line in self.line_strings)

    def __repr__(self) -> str:
        return f"MultiLineString({len(self.line_strings)} lines, {len(self.points)} points)"
