"""Geodesic calculations on a spherical Earth.

Provides the math every geometry derives its properties from:
- Distance (Haversine formula, law of cosines alternative)
- Bearings (initial, average, final)
- Midpoint and destination point
- Coordinate normalization
- Cross-track distance from a point to a line segment
- Polygon ring area (spherical excess)
- Centroids of points, lines, linear rings, polygons and polygon sets

All calculations use a spherical Earth with the WGS-84 equatorial radius
(R = 6,378,137 m). Inputs and outputs are decimal degrees and meters;
intermediate work is done in radians.

Centroids of composite geometries use a weighted geodesic merge: starting from
the first element's centroid, each following centroid pulls the running result
toward itself along the connecting great circle. The merge is order-dependent
and is an approximation of a true spherical barycenter.
"""

import logging
from math import acos, asin, atan2, cos, degrees, fmod, pi, radians, sin, sqrt
from typing import Sequence

import numpy as np

from geospatial_kit.constants import EarthConfig
from geospatial_kit.core.geodesic_point import GeodesicPoint, LineSegment

logger = logging.getLogger(__name__)


def _clamp_unit(value: float) -> float:
    """Clamp an inverse trig input to [-1, 1] to absorb floating point overshoot."""
    return max(-1.0, min(1.0, value))


class GeodesicCalculator:
    """Stateless geodesic calculations on a sphere.

    Holds only the earth radius. Override EARTH_RADIUS_M in a subclass to use a
    different sphere; every method reads it through ``cls``.

    Coordinates are in decimal degrees (longitude, latitude).
    Bearings are in degrees clockwise from North (0-360).
    Distances and areas are in meters and square meters.
    """

    EARTH_RADIUS_M = EarthConfig.RADIUS_M

    # =========================================================================
    # BEARINGS AND PROJECTIONS
    # =========================================================================

    @classmethod
    def midpoint(cls, point1: GeodesicPoint, point2: GeodesicPoint) -> GeodesicPoint:
        """Point halfway along the great circle between two points.

        Altitude is averaged when both points carry one, otherwise dropped.
        """
        lat1, lon1 = radians(point1.latitude), radians(point1.longitude)
        lat2, lon2 = radians(point2.latitude), radians(point2.longitude)

        bx = cos(lat2) * cos(lon2 - lon1)
        by = cos(lat2) * sin(lon2 - lon1)
        lat3 = atan2(sin(lat1) + sin(lat2), sqrt((cos(lat1) + bx) ** 2 + by**2))
        lon3 = lon1 + atan2(by, cos(lat1) + bx)

        altitude = None
        if point1.altitude is not None and point2.altitude is not None:
            altitude = (point1.altitude + point2.altitude) / 2

        return GeodesicPoint(longitude=degrees(lon3), latitude=degrees(lat3), altitude=altitude)

    @classmethod
    def bearing(cls, point1: GeodesicPoint, point2: GeodesicPoint) -> float:
        """Raw bearing from point1 to point2 in degrees (-180, 180]."""
        lat1, lat2 = radians(point1.latitude), radians(point2.latitude)
        dlon = radians(point2.longitude - point1.longitude)
        y = sin(dlon) * cos(lat2)
        x = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlon)
        return degrees(atan2(y, x))

    @classmethod
    def initial_bearing(cls, point1: GeodesicPoint, point2: GeodesicPoint) -> float:
        """Compass heading to leave point1 on toward point2 (0-360)."""
        return (cls.bearing(point1=point1, point2=point2) + 360) % 360

    @classmethod
    def average_bearing(cls, point1: GeodesicPoint, point2: GeodesicPoint) -> float:
        """Heading at the geodesic midpoint toward point2 (0-360)."""
        return cls.initial_bearing(point1=cls.midpoint(point1=point1, point2=point2), point2=point2)

    @classmethod
    def final_bearing(cls, point1: GeodesicPoint, point2: GeodesicPoint) -> float:
        """Heading on arrival at point2 (0-360)."""
        return (cls.bearing(point1=point2, point2=point1) + 180) % 360

    @classmethod
    def destination_point(cls, origin: GeodesicPoint, bearing: float, distance: float) -> GeodesicPoint:
        """Point reached by travelling ``distance`` meters from origin along ``bearing``.

        The origin's altitude is passed through unchanged.

        Args:
            origin: Start point
            bearing: Heading in degrees (clockwise from North)
            distance: Distance to travel in meters

        Returns:
            Destination point in decimal degrees.
        """
        brng = radians(bearing)
        lat1 = radians(origin.latitude)
        lon1 = radians(origin.longitude)
        central_angle = distance / cls.EARTH_RADIUS_M

        lat2 = asin(_clamp_unit(sin(lat1) * cos(central_angle) + cos(lat1) * sin(central_angle) * cos(brng)))
        lon2 = lon1 + atan2(
            sin(brng) * sin(central_angle) * cos(lat1),
            cos(central_angle) - sin(lat1) * sin(lat2),
        )
        return GeodesicPoint(longitude=degrees(lon2), latitude=degrees(lat2), altitude=origin.altitude)

    # =========================================================================
    # NORMALIZATION
    # =========================================================================

    @classmethod
    def normalize(cls, point: GeodesicPoint) -> GeodesicPoint:
        """Wrap longitude into (-180, 180] and latitude into (-90, 90].

        The result is geospatially equal to the input, and normalizing twice
        gives the same point as normalizing once.
        """
        return GeodesicPoint(
            longitude=cls._normalize_coordinate(value=point.longitude, shift=360.0),
            latitude=cls._normalize_coordinate(value=point.latitude, shift=180.0),
            altitude=point.altitude,
        )

    @staticmethod
    def _normalize_coordinate(value: float, shift: float) -> float:
        # fmod keeps the sign of value (truncating remainder)
        shifted = fmod(value, shift)
        if shifted > shift / 2:
            return shifted - shift
        if shifted <= -shift / 2:
            return shifted + shift
        return shifted

    # =========================================================================
    # DISTANCES
    # =========================================================================

    @classmethod
    def distance(cls, point1: GeodesicPoint, point2: GeodesicPoint) -> float:
        """Great-circle distance in meters (Haversine, the default formula)."""
        return cls.haversine_distance(point1=point1, point2=point2)

    @classmethod
    def haversine_distance(cls, point1: GeodesicPoint, point2: GeodesicPoint) -> float:
        """Great-circle distance using the Haversine formula.

        Stays accurate below half a meter, where the law of cosines does not.
        """
        lat1, lat2 = radians(point1.latitude), radians(point2.latitude)
        dlat = lat2 - lat1
        dlon = radians(point2.longitude - point1.longitude)
        a = sin(dlat / 2) ** 2 + sin(dlon / 2) ** 2 * (cos(lat1) * cos(lat2))
        central_angle = 2 * asin(_clamp_unit(sqrt(a)))
        return cls.EARTH_RADIUS_M * central_angle

    @classmethod
    def law_of_cosines_distance(cls, point1: GeodesicPoint, point2: GeodesicPoint) -> float:
        """Great-circle distance using the spherical law of cosines."""
        lat1, lat2 = radians(point1.latitude), radians(point2.latitude)
        dlon = radians(point2.longitude - point1.longitude)
        cos_angle = sin(lat1) * sin(lat2) + cos(lat1) * cos(lat2) * cos(dlon)
        return acos(_clamp_unit(cos_angle)) * cls.EARTH_RADIUS_M

    @classmethod
    def distance_to_segment(cls, point: GeodesicPoint, line_segment: LineSegment) -> float:
        """Shortest distance in meters from a point to a great-circle segment.

        Evaluated with the segment in both directions; the smaller result wins,
        which hides the asymmetric rounding of the one-sided calculation.
        """
        forward = cls._cross_track_partial(point=point, line_segment=line_segment)
        backward = cls._cross_track_partial(point=point, line_segment=line_segment.reversed())
        return min(forward, backward)

    @classmethod
    def _cross_track_partial(cls, point: GeodesicPoint, line_segment: LineSegment) -> float:
        """One-sided segment distance.

        Algorithm:
        1. Bearing of the segment (θ12) and toward the point (θ13) from the start
        2. If they diverge by more than 90°, the start is nearest: return δ13
        3. Cross-track distance δxt and along-track distance δ14
        4. If the projection falls beyond the segment end, return distance to the end
        5. Otherwise the perpendicular |δxt| is the answer
        """
        radius = cls.EARTH_RADIUS_M
        start, end = line_segment.point1, line_segment.point2

        theta12 = radians(cls.initial_bearing(point1=start, point2=end))
        theta13 = radians(cls.initial_bearing(point1=start, point2=point))
        delta13 = cls.distance(point1=start, point2=point)

        if abs(theta13 - theta12) > pi / 2:
            return delta13

        delta_xt = asin(_clamp_unit(sin(delta13 / radius) * sin(theta13 - theta12))) * radius
        delta12 = cls.distance(point1=start, point2=end)
        delta14 = acos(_clamp_unit(cos(delta13 / radius) / cos(delta_xt / radius))) * radius

        if delta14 > delta12:
            return cls.distance(point1=end, point2=point)
        return abs(delta_xt)

    @classmethod
    def distance_to_line(cls, point: GeodesicPoint, line_points: Sequence[GeodesicPoint]) -> float:
        """Minimum segment distance from a point to a polyline (or ring)."""
        return min(
            cls.distance_to_segment(point=point, line_segment=segment) for segment in cls.segments(points=line_points)
        )

    # =========================================================================
    # MEASUREMENTS
    # =========================================================================

    @staticmethod
    def segments(points: Sequence[GeodesicPoint]) -> list[LineSegment]:
        """Adjacent point pairs of a line (n points give n-1 segments)."""
        return [LineSegment(point1=points[i], point2=points[i + 1]) for i in range(len(points) - 1)]

    @classmethod
    def length(cls, line_segments: Sequence[LineSegment]) -> float:
        """Total length in meters of a sequence of segments."""
        return sum(cls.distance(point1=segment.point1, point2=segment.point2) for segment in line_segments)

    @classmethod
    def area(cls, polygon_rings: Sequence[Sequence[GeodesicPoint]]) -> float:
        """Polygon area in square meters: exterior ring minus every hole."""
        main_ring, *holes = polygon_rings
        main_area = cls.linear_ring_area(ring_points=main_ring)
        return main_area - sum(cls.linear_ring_area(ring_points=hole) for hole in holes)

    @classmethod
    def linear_ring_area(cls, ring_points: Sequence[GeodesicPoint]) -> float:
        """Spherical excess area of a single ring in square meters.

        Sums Δλ·(2 + sin φ1 + sin φ2) over consecutive pairs, including the pair
        wrapping from the last point back to the first. The absolute value makes
        the result independent of winding direction.
        """
        lons = np.radians([p.longitude for p in ring_points])
        lats = np.radians([p.latitude for p in ring_points])
        prev_lons = np.roll(lons, 1)
        prev_lats = np.roll(lats, 1)

        total = np.sum((lons - prev_lons) * (2 + np.sin(prev_lats) + np.sin(lats)))
        area = -(total * cls.EARTH_RADIUS_M * cls.EARTH_RADIUS_M / 2)
        return abs(float(area))

    # =========================================================================
    # CENTROIDS
    # =========================================================================

    @classmethod
    def centroid_of_points(cls, points: Sequence[GeodesicPoint]) -> GeodesicPoint:
        """Unit-weight merge: each point pulls the running centroid half way."""
        return cls._weighted_merge(centroids=list(points), weights=[1.0] * len(points))

    @classmethod
    def centroid_of_line(cls, line_points: Sequence[GeodesicPoint]) -> GeodesicPoint:
        """Arc-length midpoint of a line.

        Walks the cumulative segment distances until the half-way mark and
        projects the remaining distance along the straddling segment.
        """
        segments = cls.segments(points=line_points)
        segment_lengths = [cls.distance(point1=s.point1, point2=s.point2) for s in segments]
        mid_distance = sum(segment_lengths) / 2

        walked = 0.0
        for segment, segment_length in zip(segments, segment_lengths):
            if segment_length + walked >= mid_distance:
                break
            walked += segment_length
        else:
            # Rounding left the half-way mark past the last segment
            walked -= segment_lengths[-1]

        bearing = cls.initial_bearing(point1=segment.point1, point2=segment.point2)
        return cls.destination_point(origin=segment.point1, bearing=bearing, distance=mid_distance - walked)

    @classmethod
    def centroid_of_lines(cls, lines: Sequence[Sequence[GeodesicPoint]]) -> GeodesicPoint:
        """Length-weighted merge of each line's arc-length midpoint."""
        centroids = [cls.centroid_of_line(line_points=line) for line in lines]
        weights = [cls.length(line_segments=cls.segments(points=line)) for line in lines]
        return cls._weighted_merge(centroids=centroids, weights=weights)

    @classmethod
    def centroid_of_linear_ring(cls, ring_segments: Sequence[LineSegment]) -> GeodesicPoint:
        """Planar shoelace centroid of a ring.

        Works in degrees as if they were Euclidean, which is an estimate rather
        than a spherical result. Coordinates are shifted so the first point is
        the origin to keep products of large coordinates from losing precision.
        The first point's altitude is passed through.
        """
        offset = ring_segments[0].point1
        x1 = np.array([s.point1.longitude for s in ring_segments]) - offset.longitude
        y1 = np.array([s.point1.latitude for s in ring_segments]) - offset.latitude
        x2 = np.array([s.point2.longitude for s in ring_segments]) - offset.longitude
        y2 = np.array([s.point2.latitude for s in ring_segments]) - offset.latitude

        cross = x1 * y2 - x2 * y1
        signed_area = 0.5 * float(np.sum(cross))

        if signed_area == 0:
            logger.debug(f"Degenerate ring with zero planar area at {offset}, using vertex centroid")
            return cls.centroid_of_points(points=[s.point1 for s in ring_segments])

        sum_x = float(np.sum((x1 + x2) * cross))
        sum_y = float(np.sum((y1 + y2) * cross))
        return GeodesicPoint(
            longitude=sum_x / 6 / signed_area + offset.longitude,
            latitude=sum_y / 6 / signed_area + offset.latitude,
            altitude=offset.altitude,
        )

    @classmethod
    def centroid_of_polygon(cls, polygon_rings: Sequence[Sequence[GeodesicPoint]]) -> GeodesicPoint:
        """Exterior ring centroid pushed away from each hole.

        Each hole shifts the centroid away from the hole's own centroid by
        distance · 2 · (hole area / exterior area).
        """
        main_ring, *holes = polygon_rings
        centroid = cls.centroid_of_linear_ring(ring_segments=cls.segments(points=main_ring))
        if not holes:
            return centroid

        main_area = cls.linear_ring_area(ring_points=main_ring)
        if main_area == 0:
            logger.debug("Exterior ring has zero area, holes do not shift the centroid")
            return centroid

        for hole in holes:
            hole_centroid = cls.centroid_of_linear_ring(ring_segments=cls.segments(points=hole))
            hole_area = cls.linear_ring_area(ring_points=hole)

            shift = cls.distance(point1=centroid, point2=hole_centroid) * 2 * hole_area / main_area
            bearing = cls.initial_bearing(point1=hole_centroid, point2=centroid)
            centroid = cls.destination_point(origin=centroid, bearing=bearing, distance=shift)

        return centroid

    @classmethod
    def centroid_of_polygons(cls, polygons: Sequence[Sequence[Sequence[GeodesicPoint]]]) -> GeodesicPoint:
        """Area-weighted merge of each polygon's centroid."""
        centroids = [cls.centroid_of_polygon(polygon_rings=rings) for rings in polygons]
        weights = [cls.area(polygon_rings=rings) for rings in polygons]
        return cls._weighted_merge(centroids=centroids, weights=weights)

    @classmethod
    def _weighted_merge(cls, centroids: list[GeodesicPoint], weights: list[float]) -> GeodesicPoint:
        """Pull an anchored running centroid toward each following centroid.

        The shift is distance · (weight / anchor weight) / 2 along the initial
        bearing. A zero anchor weight falls back to unit weights.
        """
        running = centroids[0]
        anchor_weight = weights[0]
        if anchor_weight == 0:
            logger.debug("Anchor element has zero weight, merging with unit weights")

        for centroid, weight in zip(centroids[1:], weights[1:]):
            ratio = weight / anchor_weight if anchor_weight != 0 else 1.0
            shift = cls.distance(point1=running, point2=centroid) * ratio / 2
            bearing = cls.initial_bearing(point1=running, point2=centroid)
            running = cls.destination_point(origin=running, bearing=bearing, distance=shift)

        return running
