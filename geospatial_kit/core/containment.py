"""Point-in-polygon containment for a single linear ring.

Two layers:
- ring_contains: exact crossing-number test on ring coordinates
- contains_with_tolerance: widens or shrinks the ring by an error distance
  in meters, using the point's geodesic distance to the ring boundary

The exact test works on raw longitude/latitude values, the same frame as
ring area, bounding box and centroid. Longitudes are not wrapped at ±180°,
so a ring is read exactly as its coordinates are written.
"""

from typing import Sequence

import numpy as np

from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.core.geodesic_point import GeodesicPoint


def ring_contains(ring_points: Sequence[GeodesicPoint], point: GeodesicPoint) -> bool:
    """Crossing-number test: is the point inside the ring?

    Casts a ray from the point toward +longitude and counts edge crossings.
    An odd count means inside. Points exactly on an edge may land either way;
    use contains_with_tolerance when boundary points matter.

    Args:
        ring_points: Ring vertices; closed or open (closed implicitly)
        point: Query point

    Returns:
        True if the point is inside the ring.
    """
    coords = np.array([(p.longitude, p.latitude) for p in ring_points], dtype=float)
    if len(coords) < 3:
        return False
    if not np.array_equal(coords[0], coords[-1]):
        coords = np.vstack([coords, coords[:1]])

    # Query point as origin
    xs = coords[:, 0] - point.longitude
    ys = coords[:, 1] - point.latitude

    x1, y1 = xs[:-1], ys[:-1]
    x2, y2 = xs[1:], ys[1:]

    straddles = (y1 > 0) != (y2 > 0)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = x1 - y1 * (x2 - x1) / (y2 - y1)

    crossings = np.count_nonzero(straddles & (x_cross > 0))
    return bool(crossings % 2 == 1)


def contains_with_tolerance(
    ring_points: Sequence[GeodesicPoint],
    point: GeodesicPoint,
    error_distance: float,
) -> bool:
    """Containment with an error distance in meters.

    Non-negative error_distance grows the ring: any point within that distance
    of the boundary is contained, the rest defer to the exact test.
    Negative error_distance shrinks the ring: a point must pass the exact test
    and be farther than |error_distance| from the boundary.

    Args:
        ring_points: Ring vertices (closed)
        point: Query point
        error_distance: Tolerance in meters (sign selects grow or shrink)

    Returns:
        True if the point counts as inside.
    """
    boundary_distance = GeodesicCalculator.distance_to_line(point=point, line_points=ring_points)

    if error_distance >= 0:
        if boundary_distance > error_distance:
            return ring_contains(ring_points=ring_points, point=point)
        return True

    return boundary_distance > abs(error_distance) and ring_contains(ring_points=ring_points, point=point)
