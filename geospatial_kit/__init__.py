"""geospatial_kit - GeoJSON geometries with geodesic queries on a spherical Earth.

Features:
- Validated, immutable geometry values (Point, LineString, Polygon, the
  Multi* variants and GeometryCollection)
- Bounding box, centroid, length and area computed once at construction
- Distance and containment queries with an error distance in meters
- GeoJSON dictionary and WKT ingestion

Modules:
    core: Foundation classes (geodesic calculator, coordinate atoms, containment)
    model: Geometry value model, bounding boxes, validation diagnostics
    parser: GeoJSON and WKT parsers producing geometries

Example:
    from geospatial_kit.geospatial import Geospatial
    from geospatial_kit.core import GeodesicPoint

    geospatial = Geospatial()
    polygon = geospatial.geo_json_object_from_wkt("POLYGON ((0 0, 0 1, 1 1, 1 0, 0 0))")
    polygon.contains(GeodesicPoint(longitude=0.5, latitude=0.5))
"""
