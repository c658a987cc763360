"""WKT parser - Builds geometries from Well-Known Text.

shapely reads the text (every simple-features type, with or without Z);
its GeoJSON mapping is then handed to GeoJsonParser so validation and
diagnostics are identical for both input formats. Number parsing is shapely's
(locale-independent, full precision). Measure (M) values have no GeoJSON
counterpart, so M and ZM input is rejected rather than read as altitude.
"""

import logging
from typing import Optional

import shapely
import shapely.wkt
from shapely.errors import ShapelyError
from shapely.geometry import mapping

from geospatial_kit.model.geometry import Geometry
from geospatial_kit.model.message import MalformedInputMessage
from geospatial_kit.parser.geojson_parser import GeoJsonParser

logger = logging.getLogger(__name__)


class WktParser:
    """Turns WKT strings into geometries.

    Example:
        parser = WktParser()
        line = parser.geometry("LINESTRING (30 10, 10 30, 40 40)")
    """

    def __init__(self, geo_json_parser: Optional[GeoJsonParser] = None) -> None:
        self.geo_json_parser = geo_json_parser or GeoJsonParser()

    def geometry(self, wkt: str) -> Optional[Geometry]:
        """Parse a WKT string.

        Returns:
            The geometry, or None if the text is malformed, empty or invalid.
        """
        if not isinstance(wkt, str):
            return self._malformed(f"expected a string, got {type(wkt).__name__}")
        if not wkt.strip():
            return self._malformed("blank text")

        try:
            shape = shapely.wkt.loads(wkt)
        except ShapelyError as e:
            return self._malformed(f"{wkt!r} ({e})")

        if shape.is_empty:
            return self._malformed(f"empty geometry {wkt!r}")
        if shapely.has_m(shape):
            return self._malformed(f"measure (M) coordinates are not supported: {wkt!r}")

        return self.geo_json_parser.geometry(mapping(shape))

    @staticmethod
    def _malformed(reason: str) -> None:
        logger.error(MalformedInputMessage(source="WKT", reason=reason).message)
        return None
