"""BoundingBox - Axis-aligned envelope over geodesic points.

Boxes never wrap the antimeridian: merging boxes on both sides of ±180°
produces the wide non-wrapping envelope rather than the narrow wrapped one.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from geospatial_kit.core.geodesic_point import GeodesicPoint


@dataclass(frozen=True)
class BoundingBox:
    """Minimal longitude/latitude (and optional altitude) envelope.

    Attributes:
        min_longitude: Western edge in decimal degrees
        min_latitude: Southern edge in decimal degrees
        max_longitude: Eastern edge in decimal degrees
        max_latitude: Northern edge in decimal degrees
        min_altitude: Lowest altitude in meters (None if no point has altitude)
        max_altitude: Highest altitude in meters (None if no point has altitude)

    Example:
        box = BoundingBox.from_points(points=[GeodesicPoint(0, 0), GeodesicPoint(1, 2)])
        box.max_latitude  # 2
    """

    min_longitude: float
    min_latitude: float
    max_longitude: float
    max_latitude: float
    min_altitude: Optional[float] = None
    max_altitude: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate min <= max on every axis."""
        if self.min_longitude > self.max_longitude or self.min_latitude > self.max_latitude:
            raise ValueError(f"BoundingBox minimum exceeds maximum: {self}")
        if (self.min_altitude is None) != (self.max_altitude is None):
            raise ValueError(f"BoundingBox altitude needs both bounds or neither: {self}")
        if self.min_altitude is not None and self.min_altitude > self.max_altitude:
            raise ValueError(f"BoundingBox minimum altitude exceeds maximum: {self}")

    @classmethod
    def from_points(cls, points: Sequence[GeodesicPoint]) -> Optional["BoundingBox"]:
        """Envelope of a point set, or None for no points."""
        if not points:
            return None
        altitudes = [p.altitude for p in points if p.altitude is not None]
        return cls(
            min_longitude=min(p.longitude for p in points),
            min_latitude=min(p.latitude for p in points),
            max_longitude=max(p.longitude for p in points),
            max_latitude=max(p.latitude for p in points),
            min_altitude=min(altitudes) if altitudes else None,
            max_altitude=max(altitudes) if altitudes else None,
        )

    @staticmethod
    def best(boxes: Iterable[Optional["BoundingBox"]]) -> Optional["BoundingBox"]:
        """Smallest box enclosing every given box.

        None entries are skipped. Returns None if nothing is left.
        """
        boxes = [box for box in boxes if box is not None]
        if not boxes:
            return None

        min_altitudes = [box.min_altitude for box in boxes if box.min_altitude is not None]
        max_altitudes = [box.max_altitude for box in boxes if box.max_altitude is not None]
        return BoundingBox(
            min_longitude=min(box.min_longitude for box in boxes),
            min_latitude=min(box.min_latitude for box in boxes),
            max_longitude=max(box.max_longitude for box in boxes),
            max_latitude=max(box.max_latitude for box in boxes),
            min_altitude=min(min_altitudes) if min_altitudes else None,
            max_altitude=max(max_altitudes) if max_altitudes else None,
        )

    @property
    def points(self) -> list[GeodesicPoint]:
        """Corners counter-clockwise from the south-west."""
        return [
            GeodesicPoint(longitude=self.min_longitude, latitude=self.min_latitude),
            GeodesicPoint(longitude=self.max_longitude, latitude=self.min_latitude),
            GeodesicPoint(longitude=self.max_longitude, latitude=self.max_latitude),
            GeodesicPoint(longitude=self.min_longitude, latitude=self.max_latitude),
        ]

    @property
    def centroid(self) -> GeodesicPoint:
        """Center of the box in coordinate space."""
        return GeodesicPoint(
            longitude=(self.min_longitude + self.max_longitude) / 2,
            latitude=(self.min_latitude + self.max_latitude) / 2,
        )

    @property
    def geo_json(self) -> list[float]:
        """RFC 7946 bbox array: [west, south, (low,) east, north(, high)]."""
        if self.min_altitude is None:
            return [self.min_longitude, self.min_latitude, self.max_longitude, self.max_latitude]
        return [
            self.min_longitude,
            self.min_latitude,
            self.min_altitude,
            self.max_longitude,
            self.max_latitude,
            self.max_altitude,
        ]

    def contains(self, point: GeodesicPoint) -> bool:
        """Whether the point lies inside or on the edge of the box (altitude ignored)."""
        return (
            self.min_longitude <= point.longitude <= self.max_longitude
            and self.min_latitude <= point.latitude <= self.max_latitude
        )

    def __repr__(self) -> str:
        return (
            f"BoundingBox(lon=[{self.min_longitude:.6f}, {self.max_longitude:.6f}], "
            f"lat=[{self.min_latitude:.6f}, {self.max_latitude:.6f}])"
        )
