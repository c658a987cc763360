"""Parsers that turn GeoJSON dictionaries and WKT text into geometries.

- GeoJsonParser: GeoJSON geometry dictionaries and raw coordinate arrays
- WktParser: Well-Known Text, read with shapely and routed through GeoJsonParser
"""

from geospatial_kit.parser.geojson_parser import GeoJsonParser
from geospatial_kit.parser.wkt_parser import WktParser

__all__ = [
    "GeoJsonParser",
    "WktParser",
]
