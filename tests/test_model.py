"""Tests for geospatial_kit model classes.

Tests: Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon,
GeometryCollection, BoundingBox, GeoJson factory
Focus: Construction invariants, derived properties, distance and containment

Note: Fixtures are defined in conftest.py.
"""

import logging
import math

import pytest
import shapely.geometry

from conftest import CENTER_HOLE, EAST_SQUARE, METERS_PER_DEGREE, SQUARE, make_points, make_ring
from geospatial_kit.core.geodesic_point import GeodesicPoint
from geospatial_kit.model.bounding_box import BoundingBox
from geospatial_kit.model.geo_json import GeoJson
from geospatial_kit.model.geometry_collection import GeometryCollection
from geospatial_kit.model.line_string import LineString
from geospatial_kit.model.message import (
    InvalidCoordinateMessage,
    InvalidGeometryError,
    RingNotClosedMessage,
    RingTooFewPointsMessage,
    TooFewElementsMessage,
    TooFewPointsMessage,
)
from geospatial_kit.model.multi_line_string import MultiLineString
from geospatial_kit.model.multi_point import MultiPoint
from geospatial_kit.model.multi_polygon import MultiPolygon
from geospatial_kit.model.object_type import GeoJsonObjectType
from geospatial_kit.model.point import Point
from geospatial_kit.model.polygon import Polygon


class TestPoint:
    """Point - single position geometry."""

    def test_geo_json_without_altitude(self) -> None:
        point = Point(longitude=10.5, latitude=46.9)
        assert point.geo_json == {"type": "Point", "coordinates": [10.5, 46.9]}

    def test_geo_json_with_altitude(self) -> None:
        point = Point(longitude=10.5, latitude=46.9, altitude=2400.0)
        assert point.geo_json["coordinates"] == [10.5, 46.9, 2400.0]

    def test_type(self) -> None:
        assert Point(longitude=0.0, latitude=0.0).type is GeoJsonObjectType.POINT

    def test_bounding_box_is_degenerate(self) -> None:
        """A point's box has zero extent."""
        box = Point(longitude=3.0, latitude=4.0, altitude=10.0).bounding_box
        assert box == BoundingBox(
            min_longitude=3.0,
            min_latitude=4.0,
            max_longitude=3.0,
            max_latitude=4.0,
            min_altitude=10.0,
            max_altitude=10.0,
        )

    def test_centroid_is_itself(self) -> None:
        point = Point(longitude=3.0, latitude=4.0)
        assert point.centroid is point
        assert point.points == [point]

    @pytest.mark.parametrize(
        "longitude,latitude,altitude,name",
        [
            (math.nan, 0.0, None, "longitude"),
            (0.0, math.inf, None, "latitude"),
            (0.0, 0.0, -math.inf, "altitude"),
        ],
    )
    def test_non_finite_coordinate_rejected(
        self, longitude: float, latitude: float, altitude: float | None, name: str
    ) -> None:
        """NaN and infinite coordinates fail construction."""
        with pytest.raises(InvalidGeometryError) as exc_info:
            Point(longitude=longitude, latitude=latitude, altitude=altitude)
        assert isinstance(exc_info.value.diagnostic, InvalidCoordinateMessage)
        assert exc_info.value.diagnostic.name == name

    def test_distance(self) -> None:
        point = Point(longitude=0.0, latitude=0.0)
        dist = point.distance(point=GeodesicPoint(longitude=0.0, latitude=1.0))
        assert dist == pytest.approx(METERS_PER_DEGREE, abs=0.01)

    def test_contains_only_itself_without_tolerance(self) -> None:
        point = Point(longitude=0.0, latitude=0.0)
        assert point.contains(point=GeodesicPoint(longitude=0.0, latitude=0.0))
        assert not point.contains(point=GeodesicPoint(longitude=0.0, latitude=0.001))

    def test_contains_within_tolerance(self) -> None:
        """A point ~111 m away is contained with a 200 m tolerance."""
        point = Point(longitude=0.0, latitude=0.0)
        assert point.contains(point=GeodesicPoint(longitude=0.0, latitude=0.001), error_distance=200.0)

    def test_structural_equality_and_hash(self) -> None:
        a = Point(longitude=1.0, latitude=2.0)
        b = Point(longitude=1.0, latitude=2.0)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_equality_is_not_normalized(self) -> None:
        """Structural equality compares raw coordinates."""
        assert Point(longitude=180.0, latitude=0.0) != Point(longitude=-180.0, latitude=0.0)
        assert Point(longitude=180.0, latitude=0.0).is_geospatially_equal(Point(longitude=-180.0, latitude=0.0))

    def test_altitude_matters_for_equality(self) -> None:
        assert Point(longitude=1.0, latitude=2.0) != Point(longitude=1.0, latitude=2.0, altitude=0.0)

    def test_immutable(self) -> None:
        point = Point(longitude=1.0, latitude=2.0)
        with pytest.raises(AttributeError):
            point.longitude = 5.0  # type: ignore[misc]

    def test_geo_interface_readable_by_shapely(self) -> None:
        shape = shapely.geometry.shape(Point(longitude=1.0, latitude=2.0))
        assert (shape.x, shape.y) == (1.0, 2.0)

    def test_repr(self) -> None:
        assert repr(Point(longitude=1.0, latitude=2.0)) == "Point(lon=1.000000, lat=2.000000)"


class TestLineString:
    """LineString - ordered points with length and arc-length centroid."""

    def test_too_few_points(self) -> None:
        with pytest.raises(InvalidGeometryError) as exc_info:
            LineString(points=make_points([(0.0, 0.0)]))
        assert exc_info.value.diagnostic == TooFewPointsMessage(minimum=2, actual=1)

    def test_points_stored_as_tuple(self, equator_line: LineString) -> None:
        assert isinstance(equator_line.points, tuple)
        assert len(equator_line.segments) == 2

    def test_length(self, equator_line: LineString) -> None:
        assert equator_line.length == pytest.approx(2 * METERS_PER_DEGREE, abs=0.1)

    def test_centroid(self, meridian_line: LineString) -> None:
        assert meridian_line.centroid.latitude == pytest.approx(0.5, abs=1e-9)

    def test_bounding_box(self, equator_line: LineString) -> None:
        box = equator_line.bounding_box
        assert (box.min_longitude, box.max_longitude) == (0.0, 2.0)
        assert (box.min_latitude, box.max_latitude) == (0.0, 0.0)

    def test_distance_to_nearest_segment(self, equator_line: LineString) -> None:
        """A point 0.01° north of the line is ~1113 m away."""
        dist = equator_line.distance(point=GeodesicPoint(longitude=1.5, latitude=0.01))
        assert dist == pytest.approx(METERS_PER_DEGREE * 0.01, rel=1e-3)

    def test_contains_needs_tolerance_off_line(self, equator_line: LineString) -> None:
        point = GeodesicPoint(longitude=1.5, latitude=0.01)
        assert not equator_line.contains(point=point)
        assert equator_line.contains(point=point, error_distance=1200.0)

    def test_geo_json(self, meridian_line: LineString) -> None:
        assert meridian_line.geo_json == {"type": "LineString", "coordinates": [[0.0, 0.0], [0.0, 1.0]]}

    def test_accepts_any_sequence(self) -> None:
        """A list and a tuple of the same points build equal lines."""
        as_list = LineString(points=make_points([(0.0, 0.0), (1.0, 1.0)]))
        as_tuple = LineString(points=tuple(make_points([(0.0, 0.0), (1.0, 1.0)])))
        assert as_list == as_tuple


class TestPolygon:
    """Polygon - exterior ring plus optional holes."""

    def test_no_rings(self) -> None:
        with pytest.raises(InvalidGeometryError) as exc_info:
            Polygon(linear_rings=[])
        assert isinstance(exc_info.value.diagnostic, TooFewElementsMessage)

    def test_open_ring_rejected(self) -> None:
        open_ring = make_ring([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])
        with pytest.raises(InvalidGeometryError) as exc_info:
            Polygon(linear_rings=[open_ring])
        assert exc_info.value.diagnostic == RingNotClosedMessage(ring_index=0)

    def test_open_hole_reports_its_index(self) -> None:
        open_hole = make_ring(CENTER_HOLE[:-1])
        with pytest.raises(InvalidGeometryError) as exc_info:
            Polygon(linear_rings=[make_ring(SQUARE), open_hole])
        assert exc_info.value.diagnostic == RingNotClosedMessage(ring_index=1)

    def test_closed_ring_with_three_points_rejected(self) -> None:
        """A closed ring needs three distinct points plus the closing one."""
        degenerate = make_ring([(0.0, 0.0), (1.0, 0.0), (0.0, 0.0)])
        with pytest.raises(InvalidGeometryError) as exc_info:
            Polygon(linear_rings=[degenerate])
        assert exc_info.value.diagnostic == RingTooFewPointsMessage(ring_index=0, minimum=4, actual=3)

    def test_triangle_accepted(self) -> None:
        triangle = Polygon(linear_rings=[make_ring([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (0.0, 0.0)])])
        assert triangle.area > 0

    def test_ring_closed_across_antimeridian(self) -> None:
        """lon 180 and lon -180 close a ring."""
        ring = make_ring([(180.0, 0.0), (180.0, 1.0), (179.0, 1.0), (179.0, 0.0), (-180.0, 0.0)])
        assert Polygon(linear_rings=[ring]).exterior_ring is ring

    def test_area(self, square_polygon: Polygon) -> None:
        assert square_polygon.area == pytest.approx(METERS_PER_DEGREE**2, rel=1e-3)

    def test_area_with_hole(self, square_polygon: Polygon, square_with_center_hole: Polygon) -> None:
        assert square_with_center_hole.area == pytest.approx(0.96 * square_polygon.area, rel=1e-3)

    def test_centroid(self, square_polygon: Polygon) -> None:
        assert square_polygon.centroid.longitude == pytest.approx(0.5)
        assert square_polygon.centroid.latitude == pytest.approx(0.5)

    def test_offset_hole_moves_centroid(self, square_with_offset_hole: Polygon) -> None:
        assert square_with_offset_hole.centroid.longitude < 0.5
        assert square_with_offset_hole.centroid.latitude < 0.5

    def test_points_include_holes(self, square_with_center_hole: Polygon) -> None:
        assert len(square_with_center_hole.points) == 10
        assert len(square_with_center_hole.holes) == 1

    def test_contains(self, square_polygon: Polygon) -> None:
        assert square_polygon.contains(point=GeodesicPoint(longitude=0.5, latitude=0.5))
        assert not square_polygon.contains(point=GeodesicPoint(longitude=2.0, latitude=2.0))

    def test_wide_polygon_contains_its_centroid(self) -> None:
        """Containment, bounding box and centroid agree on a ring wider than 180°."""
        band_ring = make_ring([(-100.0, 0.0), (100.0, 0.0), (100.0, 10.0), (-100.0, 10.0), (-100.0, 0.0)])
        band = Polygon(linear_rings=[band_ring])
        assert band.centroid.longitude == pytest.approx(0.0, abs=1e-6)
        assert band.centroid.latitude == pytest.approx(5.0)
        assert (band.bounding_box.min_longitude, band.bounding_box.max_longitude) == (-100.0, 100.0)
        assert band.contains(point=band.centroid)
        assert not band.contains(point=GeodesicPoint(longitude=170.0, latitude=5.0))

    def test_contains_with_negative_tolerance(self, square_polygon: Polygon) -> None:
        """A point ~56 m inside the boundary fails a 1000 m inward margin."""
        near_edge = GeodesicPoint(longitude=0.5, latitude=0.0005)
        assert square_polygon.contains(point=near_edge)
        assert not square_polygon.contains(point=near_edge, error_distance=-1000.0)

    def test_contains_ignores_holes(self, square_with_center_hole: Polygon) -> None:
        """Plain containment only looks at the exterior ring."""
        in_hole = GeodesicPoint(longitude=0.5, latitude=0.5)
        assert square_with_center_hole.contains(point=in_hole)

    def test_contains_excluding_holes(self, square_with_center_hole: Polygon) -> None:
        in_hole = GeodesicPoint(longitude=0.5, latitude=0.5)
        outside_hole = GeodesicPoint(longitude=0.2, latitude=0.2)
        assert not square_with_center_hole.contains_excluding_holes(point=in_hole)
        assert square_with_center_hole.contains_excluding_holes(point=outside_hole)

    def test_contains_excluding_holes_tolerance_near_hole_edge(self, square_with_center_hole: Polygon) -> None:
        """A point ~56 m inside the hole counts as solid with a 100 m tolerance."""
        just_inside_hole = GeodesicPoint(longitude=0.5, latitude=0.4005)
        assert not square_with_center_hole.contains_excluding_holes(point=just_inside_hole)
        assert square_with_center_hole.contains_excluding_holes(point=just_inside_hole, error_distance=100.0)

    def test_distance_uses_exterior_only(self, square_with_center_hole: Polygon) -> None:
        """From the hole center, distance() reports the exterior ring (~0.5°)."""
        center = GeodesicPoint(longitude=0.5, latitude=0.5)
        assert square_with_center_hole.distance(point=center) == pytest.approx(0.5 * METERS_PER_DEGREE, rel=1e-3)

    def test_distance_to_boundary_includes_holes(self, square_with_center_hole: Polygon) -> None:
        """From the hole center, the hole edge is ~0.1° away."""
        center = GeodesicPoint(longitude=0.5, latitude=0.5)
        dist = square_with_center_hole.distance_to_boundary(point=center)
        assert dist == pytest.approx(0.1 * METERS_PER_DEGREE, rel=1e-3)

    def test_geo_json_round_trips_through_shapely(self, square_with_center_hole: Polygon) -> None:
        shape = shapely.geometry.shape(square_with_center_hole)
        assert shape.geom_type == "Polygon"
        assert len(shape.interiors) == 1

    def test_equality(self, square_polygon: Polygon) -> None:
        assert square_polygon == Polygon(linear_rings=[make_ring(SQUARE)])
        assert square_polygon != Polygon(linear_rings=[make_ring(EAST_SQUARE)])


class TestMultiGeometries:
    """MultiPoint, MultiLineString, MultiPolygon - non-empty sets."""

    @pytest.mark.parametrize(
        "geometry_class,kwargs,geometry_type",
        [
            (MultiPoint, {"points": []}, "MultiPoint"),
            (MultiLineString, {"line_strings": []}, "MultiLineString"),
            (MultiPolygon, {"polygons": []}, "MultiPolygon"),
        ],
    )
    def test_empty_rejected(self, geometry_class: type, kwargs: dict, geometry_type: str) -> None:
        with pytest.raises(InvalidGeometryError) as exc_info:
            geometry_class(**kwargs)
        diagnostic = exc_info.value.diagnostic
        assert isinstance(diagnostic, TooFewElementsMessage)
        assert diagnostic.geometry_type == geometry_type
        assert diagnostic.actual == 0

    def test_multi_point_centroid(self) -> None:
        multi = MultiPoint(points=make_points([(0.0, 0.0), (0.0, 2.0)]))
        assert multi.centroid.latitude == pytest.approx(1.0, abs=1e-9)

    def test_multi_point_contains_any_member(self) -> None:
        multi = MultiPoint(points=make_points([(0.0, 0.0), (5.0, 5.0)]))
        assert multi.contains(point=GeodesicPoint(longitude=5.0, latitude=5.0))
        assert not multi.contains(point=GeodesicPoint(longitude=2.0, latitude=2.0))

    def test_multi_point_distance_is_minimum(self) -> None:
        multi = MultiPoint(points=make_points([(0.0, 0.0), (0.0, 5.0)]))
        dist = multi.distance(point=GeodesicPoint(longitude=0.0, latitude=4.0))
        assert dist == pytest.approx(METERS_PER_DEGREE, abs=0.01)

    def test_multi_line_string(self, equator_line: LineString, meridian_line: LineString) -> None:
        multi = MultiLineString(line_strings=[meridian_line, equator_line])
        assert len(multi.points) == 5
        assert multi.bounding_box.max_longitude == 2.0
        assert multi.bounding_box.max_latitude == 1.0
        assert multi.contains(point=GeodesicPoint(longitude=0.0, latitude=0.5))

    def test_multi_polygon_area_is_sum(self, square_polygon: Polygon) -> None:
        east = Polygon(linear_rings=[make_ring(EAST_SQUARE)])
        multi = MultiPolygon(polygons=[square_polygon, east])
        assert multi.area == pytest.approx(square_polygon.area + east.area)

    def test_multi_polygon_contains_either(self, square_polygon: Polygon) -> None:
        east = Polygon(linear_rings=[make_ring(EAST_SQUARE)])
        multi = MultiPolygon(polygons=[square_polygon, east])
        assert multi.contains(point=GeodesicPoint(longitude=0.5, latitude=0.5))
        assert multi.contains(point=GeodesicPoint(longitude=1.5, latitude=0.5))
        assert not multi.contains(point=GeodesicPoint(longitude=2.5, latitude=0.5))

    def test_multi_polygon_centroid_between_members(self, square_polygon: Polygon) -> None:
        east = Polygon(linear_rings=[make_ring(EAST_SQUARE)])
        multi = MultiPolygon(polygons=[square_polygon, east])
        assert multi.centroid.longitude == pytest.approx(1.0, abs=1e-6)

    def test_multi_polygon_geo_json(self, square_polygon: Polygon) -> None:
        multi = MultiPolygon(polygons=[square_polygon])
        assert multi.geo_json == {"type": "MultiPolygon", "coordinates": [square_polygon.geo_json["coordinates"]]}


class TestGeometryCollection:
    """GeometryCollection - heterogeneous, possibly empty."""

    def test_empty_collection(self) -> None:
        collection = GeometryCollection(geometries=[])
        assert collection.bounding_box is None
        assert collection.distance(point=GeodesicPoint(longitude=0.0, latitude=0.0)) is None
        assert not collection.contains(point=GeodesicPoint(longitude=0.0, latitude=0.0))
        assert collection.geo_json == {"type": "GeometryCollection", "geometries": []}

    def test_none_geometries(self) -> None:
        collection = GeometryCollection()
        assert collection.geometries is None
        assert collection.points == []

    def test_members_and_bounding_box(self, square_polygon: Polygon, equator_line: LineString) -> None:
        collection = GeometryCollection(geometries=[square_polygon, equator_line])
        box = collection.bounding_box
        assert (box.min_longitude, box.max_longitude) == (0.0, 2.0)
        assert (box.min_latitude, box.max_latitude) == (0.0, 1.0)

    def test_contains_any_member(self, square_polygon: Polygon) -> None:
        far_point = Point(longitude=10.0, latitude=10.0)
        collection = GeometryCollection(geometries=[square_polygon, far_point])
        assert collection.contains(point=GeodesicPoint(longitude=0.5, latitude=0.5))
        assert collection.contains(point=GeodesicPoint(longitude=10.0, latitude=10.0))
        assert not collection.contains(point=GeodesicPoint(longitude=5.0, latitude=5.0))

    def test_distance_is_minimum(self) -> None:
        collection = GeometryCollection(
            geometries=[Point(longitude=0.0, latitude=0.0), Point(longitude=0.0, latitude=3.0)]
        )
        dist = collection.distance(point=GeodesicPoint(longitude=0.0, latitude=2.0))
        assert dist == pytest.approx(METERS_PER_DEGREE, abs=0.01)

    def test_nested_collection(self) -> None:
        inner = GeometryCollection(geometries=[Point(longitude=1.0, latitude=1.0)])
        outer = GeometryCollection(geometries=[inner, GeometryCollection(geometries=[])])
        assert outer.bounding_box == inner.bounding_box
        assert outer.contains(point=GeodesicPoint(longitude=1.0, latitude=1.0))
        assert outer.geo_json["geometries"][0] == inner.geo_json

    def test_centroid_of_single_member(self) -> None:
        collection = GeometryCollection(geometries=[Point(longitude=3.0, latitude=4.0)])
        assert (collection.centroid.longitude, collection.centroid.latitude) == (3.0, 4.0)

    def test_centroid_merges_members(self, square_polygon: Polygon) -> None:
        """Two points pull the centroid half way; a polygon contributes its own centroid."""
        pair = GeometryCollection(geometries=[Point(longitude=0.0, latitude=0.0), Point(longitude=0.0, latitude=2.0)])
        assert pair.centroid.longitude == pytest.approx(0.0, abs=1e-9)
        assert pair.centroid.latitude == pytest.approx(1.0, abs=1e-9)

        with_polygon = GeometryCollection(geometries=[square_polygon])
        assert with_polygon.centroid.longitude == pytest.approx(square_polygon.centroid.longitude)
        assert with_polygon.centroid.latitude == pytest.approx(square_polygon.centroid.latitude)

    @pytest.mark.parametrize("geometries", [None, []])
    def test_centroid_none_without_members(self, geometries: list | None) -> None:
        assert GeometryCollection(geometries=geometries).centroid is None

    def test_centroid_skips_empty_nested_collection(self) -> None:
        inner = GeometryCollection(geometries=[Point(longitude=1.0, latitude=1.0)])
        outer = GeometryCollection(geometries=[GeometryCollection(geometries=[]), inner])
        assert outer.centroid == inner.centroid

    def test_equality(self) -> None:
        a = GeometryCollection(geometries=[Point(longitude=1.0, latitude=1.0)])
        b = GeometryCollection(geometries=(Point(longitude=1.0, latitude=1.0),))
        assert a == b
        assert hash(a) == hash(b)
        assert a != GeometryCollection(geometries=[])


class TestBoundingBox:
    """BoundingBox - envelopes and merging."""

    def test_from_points(self) -> None:
        box = BoundingBox.from_points(points=make_points([(3.0, -1.0), (-2.0, 4.0)]))
        assert box.geo_json == [-2.0, -1.0, 3.0, 4.0]

    def test_from_no_points(self) -> None:
        assert BoundingBox.from_points(points=[]) is None

    def test_altitude_bounds(self) -> None:
        points = [Point(longitude=0.0, latitude=0.0, altitude=100.0), Point(longitude=1.0, latitude=1.0)]
        box = BoundingBox.from_points(points=points)
        assert box.geo_json == [0.0, 0.0, 100.0, 1.0, 1.0, 100.0]

    def test_best_merges_and_skips_none(self) -> None:
        a = BoundingBox(min_longitude=0.0, min_latitude=0.0, max_longitude=1.0, max_latitude=1.0)
        b = BoundingBox(min_longitude=-1.0, min_latitude=0.5, max_longitude=0.5, max_latitude=3.0)
        merged = BoundingBox.best([a, None, b])
        assert merged == BoundingBox(min_longitude=-1.0, min_latitude=0.0, max_longitude=1.0, max_latitude=3.0)

    def test_best_of_nothing(self) -> None:
        assert BoundingBox.best([None, None]) is None
        assert BoundingBox.best([]) is None

    def test_across_antimeridian_does_not_wrap(self) -> None:
        """Boxes on both sides of ±180° merge into the wide envelope."""
        east = BoundingBox(min_longitude=179.0, min_latitude=0.0, max_longitude=180.0, max_latitude=1.0)
        west = BoundingBox(min_longitude=-180.0, min_latitude=0.0, max_longitude=-179.0, max_latitude=1.0)
        merged = BoundingBox.best([east, west])
        assert (merged.min_longitude, merged.max_longitude) == (-180.0, 180.0)

    def test_contains_and_centroid(self) -> None:
        box = BoundingBox(min_longitude=0.0, min_latitude=0.0, max_longitude=2.0, max_latitude=4.0)
        assert box.contains(point=GeodesicPoint(longitude=2.0, latitude=1.0))
        assert not box.contains(point=GeodesicPoint(longitude=2.1, latitude=1.0))
        assert box.centroid == GeodesicPoint(longitude=1.0, latitude=2.0)
        assert len(box.points) == 4

    def test_invalid_box_rejected(self) -> None:
        with pytest.raises(ValueError):
            BoundingBox(min_longitude=1.0, min_latitude=0.0, max_longitude=0.0, max_latitude=1.0)
        with pytest.raises(ValueError):
            BoundingBox(min_longitude=0.0, min_latitude=0.0, max_longitude=1.0, max_latitude=1.0, min_altitude=5.0)


class TestGeoJsonFactory:
    """GeoJson - validating factory returning None on failure."""

    def test_valid_geometries(self) -> None:
        geo_json = GeoJson()
        ring = geo_json.line_string(points=make_points(SQUARE))
        polygon = geo_json.polygon(linear_rings=[ring])
        assert isinstance(polygon, Polygon)
        assert geo_json.multi_polygon(polygons=[polygon]) is not None

    def test_invalid_returns_none_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        geo_json = GeoJson()
        open_ring = geo_json.line_string(points=make_points(SQUARE[:-1]))
        with caplog.at_level(logging.ERROR, logger="geospatial_kit"):
            polygon = geo_json.polygon(linear_rings=[open_ring])
        assert polygon is None
        assert "first and last points equal" in caplog.text

    def test_invalid_point_returns_none(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="geospatial_kit"):
            assert GeoJson.point(longitude=math.nan, latitude=0.0) is None
        assert "finite longitude" in caplog.text

    @pytest.mark.parametrize(
        "factory,kwargs",
        [
            ("line_string", {"points": []}),
            ("multi_point", {"points": []}),
            ("multi_line_string", {"line_strings": []}),
            ("multi_polygon", {"polygons": []}),
        ],
    )
    def test_empty_inputs_return_none(self, factory: str, kwargs: dict) -> None:
        assert getattr(GeoJson(), factory)(**kwargs) is None

    def test_geometry_collection_never_fails(self) -> None:
        assert GeoJson.geometry_collection(geometries=None) == GeometryCollection()
        assert GeoJson.geometry_collection(geometries=[]).geometries == ()
