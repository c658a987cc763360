"""Shared pytest fixtures for geospatial_kit tests.

Provides reusable geometries built from explicit coordinates.

COORDINATE SYSTEM:
    Most fixtures sit near the equator (lat~0) and prime meridian (lon~0)
    where 1 degree ≈ 111,320 meters in both directions, so expected
    distances can be checked with simple arithmetic.
"""

import pytest

from geospatial_kit.model.line_string import LineString
from geospatial_kit.model.point import Point
from geospatial_kit.model.polygon import Polygon

# Meters per degree at the equator for R = 6,378,137 m
METERS_PER_DEGREE = 111_319.49


def make_points(coordinates: list[tuple[float, float]]) -> list[Point]:
    """Helper to create Points from (lon, lat) tuples."""
    return [Point(longitude=lon, latitude=lat) for lon, lat in coordinates]


def make_ring(coordinates: list[tuple[float, float]]) -> LineString:
    """Helper to create a LineString ring from (lon, lat) tuples."""
    return LineString(points=make_points(coordinates))


# =============================================================================
# RING COORDINATES
# =============================================================================

# 1° x 1° square with its south-west corner at the origin
SQUARE = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0)]

# 0.2° x 0.2° hole centered in SQUARE
CENTER_HOLE = [(0.4, 0.4), (0.6, 0.4), (0.6, 0.6), (0.4, 0.6), (0.4, 0.4)]

# 0.2° x 0.2° hole in the north-east part of SQUARE
NORTH_EAST_HOLE = [(0.7, 0.7), (0.9, 0.7), (0.9, 0.9), (0.7, 0.9), (0.7, 0.7)]

# 1° x 1° square east of SQUARE, sharing its eastern edge
EAST_SQUARE = [(1.0, 0.0), (1.0, 1.0), (2.0, 1.0), (2.0, 0.0), (1.0, 0.0)]


# =============================================================================
# GEOMETRY FIXTURES
# =============================================================================


@pytest.fixture
def square_ring() -> LineString:
    """Closed 5-point ring around the 1° square at the origin."""
    return make_ring(SQUARE)


@pytest.fixture
def square_polygon(square_ring: LineString) -> Polygon:
    """Polygon with no holes: the 1° square at the origin (~12,392 km²)."""
    return Polygon(linear_rings=[square_ring])


@pytest.fixture
def square_with_center_hole() -> Polygon:
    """1° square with a 0.2° square hole in the middle (area 96% of the square)."""
    return Polygon(linear_rings=[make_ring(SQUARE), make_ring(CENTER_HOLE)])


@pytest.fixture
def square_with_offset_hole() -> Polygon:
    """1° square with a hole toward the north-east corner."""
    return Polygon(linear_rings=[make_ring(SQUARE), make_ring(NORTH_EAST_HOLE)])


@pytest.fixture
def equator_line() -> LineString:
    """Line along the equator from lon 0 to lon 2 through lon 1."""
    return LineString(points=make_points([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]))


@pytest.fixture
def meridian_line() -> LineString:
    """Line along the prime meridian from lat 0 to lat 1."""
    return LineString(points=make_points([(0.0, 0.0), (0.0, 1.0)]))
