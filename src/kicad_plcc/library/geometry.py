"""
Geometry data model for generated footprints.

Every object here is immutable once computed. A ``FootprintGeometry`` is
the complete, layer-annotated description of one footprint; the
serializer in :mod:`kicad_plcc.library.footprint` only reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ZERO_TIMESTAMP = "00000000-0000-0000-0000-000000000000"

SMD_LAYERS = ("F.Cu", "F.Paste", "F.Mask")
THROUGH_HOLE_LAYERS = ("*.Cu", "*.Mask")


@dataclass(frozen=True)
class Point:
    """An (x, y) coordinate in millimeters."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class LineSegment:
    """One drawn outline stroke."""

    start: Point
    end: Point
    width: float
    layer: str


class PadKind(str, Enum):
    """Pad mounting type, valued by its .kicad_mod token."""

    SMD = "smd"
    THROUGH_HOLE = "thru_hole"


@dataclass(frozen=True)
class DrillSpec:
    """Drill hole of a through-hole pad, offset from the pad center."""

    diameter: float
    offset: Point


@dataclass(frozen=True)
class Pad:
    """A rectangular copper pad for one pin."""

    number: int
    position: Point
    size: Point  # (width, height)
    kind: PadKind
    layers: tuple[str, ...]
    drill: DrillSpec | None = None

    @property
    def nominal(self) -> Point:
        """Pin contact point before the drill shift was applied."""
        if self.drill is None:
            return self.position
        return self.position + self.drill.offset

    @property
    def area(self) -> float:
        return self.size.x * self.size.y


@dataclass(frozen=True)
class MountingOptions:
    """
    How the plug is mounted on the board.

    Attributes:
        double_sided: Through-hole pads with vias (True) or plain SMD pads
        via_outside: Bias the drill toward the package exterior (True) or interior
        timestamp: Placeholder tstamp written on every record
    """

    double_sided: bool = True
    via_outside: bool = True
    timestamp: str = ZERO_TIMESTAMP


@dataclass(frozen=True)
class TextAnchors:
    """Anchor points of the reference, value and user texts."""

    reference: Point
    value: Point
    user: Point


@dataclass(frozen=True)
class FootprintGeometry:
    """Pads, outlines and text anchors of one footprint."""

    pads: tuple[Pad, ...]
    front_silkscreen: tuple[LineSegment, ...]
    back_silkscreen: tuple[LineSegment, ...]
    courtyard: tuple[LineSegment, ...]
    fabrication: tuple[LineSegment, ...]
    text: TextAnchors

    @property
    def silkscreen(self) -> tuple[LineSegment, ...]:
        """Front then back silkscreen, in emission order."""
        return self.front_silkscreen + self.back_silkscreen

    @property
    def lines(self) -> tuple[LineSegment, ...]:
        """All line segments in emission order."""
        return self.silkscreen + self.courtyard + self.fabrication

    def pad(self, number: int) -> Pad:
        """Return the pad for a pin number."""
        for pad in self.pads:
            if pad.number == number:
                return pad
        raise KeyError(number)
