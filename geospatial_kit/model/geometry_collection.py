"""GeometryCollection - Heterogeneous, possibly empty, set of geometries.

Collections may nest. Queries use existential semantics: a collection
contains a point when any member does.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Sequence

from geospatial_kit.constants import GeoJsonConfig
from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geometry import GeoJsonDict, Geometry
from geospatial_kit.model.object_type import GeoJsonObjectType


@dataclass(frozen=True, eq=False)
class GeometryCollection(Geometry):
    """A GeoJSON GeometryCollection.

    Attributes:
        geometries: Member geometries, or None (stored as a tuple when given)

    Derived:
        bounding_box: Envelope over members, None if no member has one
        centroid: Unit-weight merge of member centroids, None if no member has one
    """

    type: ClassVar[GeoJsonObjectType] = GeoJsonObjectType.GEOMETRY_COLLECTION

    geometries: Optional[Sequence[Geometry]] = None

    bounding_box: Optional[BoundingBox] = field(init=False, repr=False)
    centroid: Optional[GeodesicPoint] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.geometries is not None:
            object.__setattr__(self, "geometries", tuple(self.geometries))

        object.__setattr__(
            self,
            "bounding_box",
            BoundingBox.best(geometry.bounding_box for geometry in self.geometries or ()),
        )

        # Empty nested collections have no centroid and are skipped
        centroids = [geometry.centroid for geometry in self.geometries or () if geometry.centroid is not None]
        object.__setattr__(
            self,
            "centroid",
            GeodesicCalculator.centroid_of_points(points=centroids) if centroids else None,
        )

    @property
    def points(self) -> list:
        """Every member's points, flattened in order."""
        return [p for geometry in self.geometries or () for p in geometry.points]

    @property
    def geo_json_coordinates(self) -> list:
        # Collections serialize members under "geometries" instead
        return [geometry.geo_json_coordinates for geometry in self.geometries or ()]

    @property
    def geo_json(self) -> GeoJsonDict:
        return {
            GeoJsonConfig.TYPE_KEY: self.type.value,
            GeoJsonConfig.GEOMETRIES_KEY: [geometry.geo_json for geometry in self.geometries or ()],
        }

    def distance(self, point: GeodesicPoint, error_distance: float = 0.0) -> Optional[float]:
        """Minimum member distance, or None if there are no members to measure."""
        member_distances = (
            geometry.distance(point=point, error_distance=error_distance) for geometry in self.geometries or ()
        )
        distances = [distance for distance in member_distances if distance is not None]
        return min(distances) if distances else None

    def contains(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        return any(geometry.contains(point=point, error_distance=error_distance) for geometry in self.geometries or ())

    def __repr__(self) -> str:
        if self.geometries is None:
            return "GeometryCollection(None)"
        return f"GeometryCollection({len(self.geometries)} geometries)"
