"""GeodesicPoint - The fundamental coordinate atom.

A GeodesicPoint is a longitude/latitude pair with an optional altitude.
Every geometry is built from these, and every GeodesicCalculator method
takes and returns them.

Used by:
- Point (a geometry that is also a GeodesicPoint)
- LineSegment (pair of adjacent points)
- GeodesicCalculator (all inputs and derived centroids/midpoints)
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeodesicPoint:
    """A location on the sphere in decimal degrees.

    Attributes:
        longitude: Longitude in decimal degrees, nominally (-180, 180]
        latitude: Latitude in decimal degrees, nominally [-90, 90]
        altitude: Optional altitude in meters

    Example:
        point = GeodesicPoint(longitude=10.295, latitude=46.985)
    """

    longitude: float
    latitude: float
    altitude: Optional[float] = None

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (longitude, latitude) tuple - GeoJSON order."""
        return (self.longitude, self.latitude)

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple - standard geographic order."""
        return (self.latitude, self.longitude)

    def is_geospatially_equal(self, other: "GeodesicPoint") -> bool:
        """Compare normalized coordinates instead of raw values.

        Longitude 180 and -180 name the same meridian, so they compare equal here
        even though raw equality says otherwise. Altitude must match exactly.
        """
        from geospatial_kit.core.geodesic_calculator import GeodesicCalculator

        normalized = GeodesicCalculator.normalize(point=self)
        other_normalized = GeodesicCalculator.normalize(point=other)
        return (
            normalized.longitude == other_normalized.longitude
            and normalized.latitude == other_normalized.latitude
            and self.altitude == other.altitude
        )

    def __repr__(self) -> str:
        if self.altitude is None:
            return f"GeodesicPoint(lon={self.longitude:.6f}, lat={self.latitude:.6f})"
        return f"GeodesicPoint(lon={self.longitude:.6f}, lat={self.latitude:.6f}, alt={self.altitude:.1f}m)"


@dataclass(frozen=True)
class LineSegment:
    """Pair of adjacent points on a line. Derived, never stored on geometries."""

    point1: GeodesicPoint
    point2: GeodesicPoint

    def reversed(self) -> "LineSegment":
        return LineSegment(point1=self.point2, point2=self.point1)
