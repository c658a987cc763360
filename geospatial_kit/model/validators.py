"""Validators - Structural checks run by geometry constructors.

Validators return Optional[InvalidGeometryMessage]:
- None if valid
- A message object naming the failed invariant if invalid

Design Principles:
- No exceptions inside validators; the constructor decides to raise
- Checks run in a fixed order and report the first failure only
"""

from math import isfinite
from typing import Optional, Sequence

from geospatial_kit.constants import GeometryConfig
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.message import (
    InvalidCoordinateMessage,
    InvalidGeometryMessage,
    RingNotClosedMessage,
    RingTooFewPointsMessage,
    TooFewElementsMessage,
    TooFewPointsMessage,
)


def validate_position(
    longitude: float,
    latitude: float,
    altitude: Optional[float],
) -> InvalidGeometryMessage | None:
    """Validate that every coordinate is a finite number.

    Returns:
        None if valid, InvalidCoordinateMessage for the first bad coordinate.
    """
    for name, value in (("longitude", longitude), ("latitude", latitude), ("altitude", altitude)):
        if value is None and name == "altitude":
            continue
        if not isfinite(value):
            return InvalidCoordinateMessage(name=name, value=value)
    return None


def validate_line_string_points(points: Sequence[GeodesicPoint]) -> InvalidGeometryMessage | None:
    """Validate that a LineString has enough points to form a segment.

    Returns:
        None if valid, TooFewPointsMessage otherwise.
    """
    minimum = GeometryConfig.MIN_LINE_STRING_POINTS
    if len(points) < minimum:
        return TooFewPointsMessage(minimum=minimum, actual=len(points))
    return None


def validate_linear_rings(rings: Sequence[Sequence[GeodesicPoint]]) -> InvalidGeometryMessage | None:
    """Validate Polygon rings before anything is derived from them.

    There must be at least one ring, and every ring must be closed (first point
    geospatially equal to the last) with at least MIN_LINEAR_RING_POINTS
    points. Closure is checked before the point count, ring by ring.

    Returns:
        None if valid, the first failing ring's message otherwise.
    """
    if len(rings) < GeometryConfig.MIN_MULTI_ELEMENTS:
        return TooFewElementsMessage(
            geometry_type="Polygon",
            element_type="LinearRing",
            minimum=GeometryConfig.MIN_MULTI_ELEMENTS,
            actual=len(rings),
        )

    minimum = GeometryConfig.MIN_LINEAR_RING_POINTS
    for index, ring in enumerate(rings):
        if not ring or not ring[0].is_geospatially_equal(ring[-1]):
            return RingNotClosedMessage(ring_index=index)
        if len(ring) < minimum:
            return RingTooFewPointsMessage(ring_index=index, minimum=minimum, actual=len(ring))
    return None


def validate_multi_elements(
    geometry_type: str,
    element_type: str,
    elements: Sequence[object],
) -> InvalidGeometryMessage | None:
    """Validate that a Multi* geometry is not empty.

    Returns:
        None if valid, TooFewElementsMessage otherwise.
    """
    minimum = GeometryConfig.MIN_MULTI_ELEMENTS
    if len(elements) < minimum:
        return TooFewElementsMessage(
            geometry_type=geometry_type,
            element_type=element_type,
            minimum=minimum,
            actual=len(elements),
        )
    return None
