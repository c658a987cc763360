"""Geometry - Abstract base for every GeoJSON geometry variant.

Shared behavior:
- GeoJSON serialization (``geo_json``) and ``__geo_interface__`` so shapely's
  ``shape()`` accepts any geometry
- Structural equality: same type and identical serialized payload, with no
  normalization or topological comparison

Subclasses are frozen dataclasses. Their derived fields (bounding box,
centroid, points, length, area) are computed once in ``__post_init__``.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from geospatial_kit.constants import GeoJsonConfig
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.object_type import GeoJsonObjectType

GeoJsonDict = dict[str, Any]


def _freeze(value: Any) -> Any:
    """Turn nested lists into nested tuples so payloads can be hashed."""
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, dict):
        return tuple(sorted((key, _freeze(item)) for key, item in value.items()))
    return value


class Geometry(ABC):
    """Base class for the geometry value model.

    Subclasses set ``type`` and implement the coordinate payload and the two
    queries. All queries take distances in meters.
    """

    type: ClassVar[GeoJsonObjectType]

    @property
    @abstractmethod
    def geo_json_coordinates(self) -> list:
        """Nested coordinate lists in GeoJSON order (longitude, latitude, altitude)."""

    @property
    def geo_json(self) -> GeoJsonDict:
        """GeoJSON geometry dictionary."""
        return {
            GeoJsonConfig.TYPE_KEY: self.type.value,
            GeoJsonConfig.COORDINATES_KEY: self.geo_json_coordinates,
        }

    @property
    def __geo_interface__(self) -> GeoJsonDict:
        return self.geo_json

    @abstractmethod
    def distance(self, point: GeodesicPoint, error_distance: float = 0.0) -> Optional[float]:
        """Minimum geodesic distance in meters from this geometry to the point."""

    @abstractmethod
    def contains(self, point: GeodesicPoint, error_distance: float = 0.0) -> bool:
        """Whether the point is contained, within error_distance meters."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geometry):
            return NotImplemented
        return self.type == other.type and self.geo_json == other.geo_json

    def __hash__(self) -> int:
        return hash((self.type, _freeze(self.geo_json)))
