"""Message - Diagnostics for geometries that fail validation.

Each diagnostic names the invariant that failed:
- Coordinates that are not finite numbers
- Too few points in a line or ring, too few elements in a Multi* geometry
- Linear rings that are not closed
- Input that a parser cannot read

Validators return these objects; geometry constructors raise them wrapped in
InvalidGeometryError; factories and parsers log them and return None.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class InvalidGeometryMessage(ABC):
    """Abstract base class for validation diagnostics.

    Subclasses store the failing values and compute message as property.
    Use isinstance() to check which invariant failed.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description of the failed invariant."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidCoordinateMessage(InvalidGeometryMessage):
    """A coordinate value is NaN or infinite.

    Attributes:
        name: Which coordinate ("longitude", "latitude", "altitude")
        value: The offending value
    """

    name: str
    value: float

    @property
    def message(self) -> str:
        return f"A valid Point must have a finite {self.name}, got {self.value}"


@dataclass(frozen=True)
class TooFewPointsMessage(InvalidGeometryMessage):
    """A LineString has fewer points than required.

    Attributes:
        minimum: Required number of points
        actual: Number of points given
    """

    minimum: int
    actual: int

    @property
    def message(self) -> str:
        return f"A valid LineString must have at least {self.minimum} points, got {self.actual}"


@dataclass(frozen=True)
class TooFewElementsMessage(InvalidGeometryMessage):
    """A composite geometry has fewer elements than required.

    Attributes:
        geometry_type: The composite being built (e.g., "MultiPoint")
        element_type: The required element (e.g., "Point")
        minimum: Required number of elements
        actual: Number of elements given
    """

    geometry_type: str
    element_type: str
    minimum: int
    actual: int

    @property
    def message(self) -> str:
        plural = "" if self.minimum == 1 else "s"
        return (
            f"A valid {self.geometry_type} must have at least {self.minimum} "
            f"{self.element_type}{plural}, got {self.actual}"
        )


@dataclass(frozen=True)
class RingNotClosedMessage(InvalidGeometryMessage):
    """A Polygon linear ring's first and last points differ.

    Attributes:
        ring_index: Position of the ring (0 = exterior)
    """

    ring_index: int

    @property
    def message(self) -> str:
        return f"A valid Polygon LinearRing must have the first and last points equal (ring {self.ring_index})"


@dataclass(frozen=True)
class RingTooFewPointsMessage(InvalidGeometryMessage):
    """A Polygon linear ring has fewer than the minimum number of points.

    Attributes:
        ring_index: Position of the ring (0 = exterior)
        minimum: Required number of points, closing point included
        actual: Number of points given
    """

    ring_index: int
    minimum: int
    actual: int

    @property
    def message(self) -> str:
        return (
            f"A valid Polygon LinearRing must have at least {self.minimum} points "
            f"(ring {self.ring_index} has {self.actual})"
        )


@dataclass(frozen=True)
class MalformedInputMessage(InvalidGeometryMessage):
    """Parser input could not be turned into coordinates.

    Attributes:
        source: Input format ("GeoJSON" or "WKT")
        reason: What was wrong
    """

    source: str
    reason: str

    @property
    def message(self) -> str:
        return f"Malformed {self.source}: {self.reason}"


class InvalidGeometryError(ValueError):
    """Raised by geometry constructors when an invariant fails.

    Attributes:
        diagnostic: The InvalidGeometryMessage describing the failure
    """

    def __init__(self, diagnostic: InvalidGeometryMessage) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
