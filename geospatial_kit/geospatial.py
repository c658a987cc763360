"""Geospatial - Configured entry point to the library.

Bundles the geometry factory, the geodesic calculator and both parsers.
Creating an instance applies the configured log level to the package logger;
the library never installs handlers of its own.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from geospatial_kit.constants import LogConfig
from geospatial_kit.core.geodesic_calculator import GeodesicCalculator
from geospatial_kit.model.geo_json import GeoJson
from geospatial_kit.model.geometry import Geometry
from geospatial_kit.parser.geojson_parser import GeoJsonParser
from geospatial_kit.parser.wkt_parser import WktParser


@dataclass(frozen=True)
class ConfigurationModel:
    """Configuration for a Geospatial instance.

    Attributes:
        log_level: Verbosity of the geospatial_kit logger (a logging level)
    """

    log_level: int = LogConfig.DEFAULT_LEVEL


@dataclass
class Geospatial:
    """Facade over the factory, calculator and parsers.

    Example:
        geospatial = Geospatial(configuration=ConfigurationModel(log_level=logging.ERROR))
        polygon = geospatial.geo_json_object({"type": "Polygon", "coordinates": [...]})
        distance_m = geospatial.calculator.distance(point1=a, point2=b)
    """

    configuration: ConfigurationModel = field(default_factory=ConfigurationModel)
    geo_json: GeoJson = field(init=False, repr=False)
    calculator: GeodesicCalculator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        logging.getLogger(LogConfig.PACKAGE_LOGGER).setLevel(self.configuration.log_level)

        self.geo_json = GeoJson()
        self.calculator = GeodesicCalculator()
        self._geo_json_parser = GeoJsonParser()
        self._wkt_parser = WktParser(geo_json_parser=self._geo_json_parser)

    def geo_json_object(self, geo_json: Mapping[str, Any]) -> Optional[Geometry]:
        """Geometry from a GeoJSON dictionary, or None if it is malformed."""
        return self._geo_json_parser.geometry(geo_json)

    def geo_json_object_from_wkt(self, wkt: str) -> Optional[Geometry]:
        """Geometry from Well-Known Text, or None if it is malformed."""
        return self._wkt_parser.geometry(wkt)
