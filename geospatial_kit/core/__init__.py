"""Core foundation for geodesic calculations and containment.

This module provides the mathematical backbone of the geometry model:
- GeodesicPoint: Coordinate atom (longitude, latitude, optional altitude)
- LineSegment: Pair of adjacent points
- GeodesicCalculator: Spherical distances, bearings, areas and centroids
- ring_contains / contains_with_tolerance: Point-in-ring containment
"""

from geospatial_kit.core.containment import contains_with_tolerance, ring_contains
from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint, LineSegment

__all__ = [
    # Coordinate atoms
    "GeodesicPoint",
    "LineSegment",
    # Geodesic calculator
    "GeodesicCalculator",
    # Containment
    "ring_contains",
    "contains_with_tolerance",
]
