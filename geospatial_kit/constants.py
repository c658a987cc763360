"""Configuration constants for geospatial_kit.

All tunable parameters are centralized here.

Classes:
    EarthConfig: Spherical earth model parameters
    GeometryConfig: Structural minimums enforced by geometry constructors
    LogConfig: Package logger name and default verbosity
    GeoJsonConfig: Serialized key names and collection nesting limit
"""

import logging


class EarthConfig:
    """Spherical earth model parameters."""

    # WGS-84 equatorial radius in meters
    RADIUS_M = 6_378_137.0


class GeometryConfig:
    """Structural minimums checked when geometries are constructed."""

    MIN_LINE_STRING_POINTS = 2
    # Closed ring: 3 distinct points plus the closing point
    MIN_LINEAR_RING_POINTS = 4
    MIN_MULTI_ELEMENTS = 1
    # A position needs at least longitude and latitude
    MIN_POSITION_VALUES = 2


class LogConfig:
    """Package logger settings."""

    PACKAGE_LOGGER = "geospatial_kit"
    DEFAULT_LEVEL = logging.WARNING


class GeoJsonConfig:
    """Key names and nesting limit for GeoJSON dictionaries."""

    TYPE_KEY = "type"
    COORDINATES_KEY = "coordinates"
    GEOMETRIES_KEY = "geometries"
    # GeometryCollections may hold collections, up to this many levels deep
    MAX_COLLECTION_DEPTH = 64
