"""
PLCC socket plug footprint generator.

Generates footprints for the APW932x / W932x surface mount PLCC plugs.
Pads can be plain SMD pads, or through-hole pads whose drill is offset
toward one end so the plug can be soldered from both sides.
"""

from __future__ import annotations

import logging

from ..catalog import DEFAULT_VENDOR, ComponentSpec, lookup
from ..footprint import DEFAULT_REFERENCE, PlccFootprint
from ..geometry import (
    SMD_LAYERS,
    THROUGH_HOLE_LAYERS,
    ZERO_TIMESTAMP,
    DrillSpec,
    FootprintGeometry,
    MountingOptions,
    Pad,
    PadKind,
    Point,
    TextAnchors,
)
from .outline import courtyard, fabrication, silkscreen_outline

logger = logging.getLogger(__name__)

DRILL_DIAMETER = 0.3
FONT_HEIGHT = 1.0
USER_TEXT_Y = 0.525


def drill_offset(position: Point, size: Point, via_outside: bool = True) -> Point:
    """
    Drill offset of a through-hole pad, relative to the pad center.

    The offset runs along the long axis of the pad, a quarter of its length
    toward the package center. With ``via_outside`` False it is reversed.
    """
    if size.x > size.y:
        ox = size.x / 4 if position.x < 0 else -(size.x / 4)
        oy = 0.0
    else:
        ox = 0.0
        oy = size.y / 4 if position.y < 0 else -(size.y / 4)

    if not via_outside:
        ox, oy = -ox, -oy
    return Point(ox, oy)


def make_pad(number: int, nominal: Point, size: Point, options: MountingOptions) -> Pad:
    """Create the pad for one pin at its nominal contact position."""
    if not options.double_sided:
        return Pad(number, nominal, size, PadKind.SMD, SMD_LAYERS)

    offset = drill_offset(nominal, size, options.via_outside)
    return Pad(
        number,
        nominal - offset,
        size,
        PadKind.THROUGH_HOLE,
        THROUGH_HOLE_LAYERS,
        drill=DrillSpec(DRILL_DIAMETER, offset),
    )


def pin_groups(spec: ComponentSpec) -> list[tuple[int, int]]:
    """
    Inclusive pin number ranges of the five pad rows.

    Pin 1 sits at the top center; numbering runs clockwise: top right half,
    right edge, bottom edge, left edge, top left half.
    """
    cp1 = 1 + spec.pins_x // 2
    cp3 = cp1 + 1 + (spec.pins_y - 1)
    cp5 = cp3 + 1 + (spec.pins_x - 1)
    cp7 = cp5 + 1 + (spec.pins_y - 1)
    return [
        (1, cp1),
        (cp1 + 1, cp3),
        (cp3 + 1, cp5),
        (cp5 + 1, cp7),
        (cp7 + 1, spec.pins),
    ]


def layout_pads(spec: ComponentSpec, options: MountingOptions) -> tuple[Pad, ...]:
    """
    Compute all pads of a plug in pin number order.

    Args:
        spec: Catalog entry
        options: Mounting options

    Returns:
        One pad per pin, pins 1..spec.pins
    """
    pitch = spec.pitch
    a = spec.body.a
    c = spec.body.c
    pad_width = spec.pad_width
    pad_length = spec.pad_length

    pins_width = spec.pins_x * pitch
    pins_height = spec.pins_y * pitch

    horizontal = Point(pad_width, pad_length)
    vertical = Point(pad_length, pad_width)

    top_y = -(c - pad_length) / 2
    bottom_y = (c - pad_length) / 2
    right_x = (a - pad_length) / 2
    left_x = -(a - pad_length) / 2

    # (start x, start y, step x, step y, pad size) per row
    rows = [
        (0.0, top_y, pitch, 0.0, horizontal),
        (right_x, -(pins_height - pitch) / 2, 0.0, pitch, vertical),
        ((pins_width - pitch) / 2, bottom_y, -pitch, 0.0, horizontal),
        (left_x, (pins_height - pitch) / 2, 0.0, -pitch, vertical),
        (-(pins_width - pitch) / 2, top_y, pitch, 0.0, horizontal),
    ]

    pads = []
    for (first, last), (px, py, dx, dy, size) in zip(pin_groups(spec), rows):
        for number in range(first, last + 1):
            pads.append(make_pad(number, Point(px, py), size, options))
            # accumulated, not multiplied by the index
            px += dx
            py += dy

    return tuple(pads)


def text_anchors(spec: ComponentSpec) -> TextAnchors:
    """Reference above the body, value below it, user text at the center."""
    offset = spec.body.a / 2 + FONT_HEIGHT
    return TextAnchors(
        reference=Point(0.0, -offset),
        value=Point(0.0, offset + 0.5),
        user=Point(0.0, USER_TEXT_Y),
    )


def build_geometry(
    spec: ComponentSpec, options: MountingOptions | None = None
) -> FootprintGeometry:
    """
    Compute the complete geometry of a plug footprint.

    Args:
        spec: Catalog entry
        options: Mounting options (default: double sided, vias outside)

    Returns:
        A new FootprintGeometry
    """
    if options is None:
        options = MountingOptions()

    geometry = FootprintGeometry(
        pads=layout_pads(spec, options),
        front_silkscreen=silkscreen_outline(spec, "F.SilkS"),
        back_silkscreen=silkscreen_outline(spec, "B.SilkS"),
        courtyard=courtyard(spec),
        fabrication=fabrication(),
        text=text_anchors(spec),
    )
    logger.debug(
        "%s: %d pads, %d silkscreen, %d courtyard, %d fabrication lines",
        spec.name,
        len(geometry.pads),
        len(geometry.silkscreen),
        len(geometry.courtyard),
        len(geometry.fabrication),
    )
    return geometry


def create_plcc(
    pins: int,
    double_sided: bool = True,
    via_outside: bool = True,
    vendor: str = DEFAULT_VENDOR,
    timestamp: str | None = None,
    reference: str | None = None,
) -> PlccFootprint:
    """
    Create a PLCC plug footprint.

    Args:
        pins: Total number of pins (20, 28, 32, 44, 52, 68 or 84)
        double_sided: Through-hole pads with vias instead of SMD pads
        via_outside: Offset the drills toward the outside of the package
        vendor: Catalog to use ("adaptplus" or "winslow")
        timestamp: Placeholder tstamp for every record
        reference: Reference designator text

    Returns:
        PlccFootprint ready for export

    Raises:
        InvalidPinCountError: If the pin count is not in the catalog

    Example:
        >>> fp = create_plcc(pins=84)
        >>> fp.save("MyLib.pretty/APW9328.kicad_mod")
    """
    spec = lookup(pins, vendor)
    logger.debug(
        "Using %s (%dx%d pins) from %s catalog", spec.name, spec.pins_x, spec.pins_y, vendor
    )

    options = MountingOptions(
        double_sided=double_sided,
        via_outside=via_outside,
        timestamp=timestamp or ZERO_TIMESTAMP,
    )
    return PlccFootprint(
        spec,
        options,
        build_geometry(spec, options),
        reference=reference or DEFAULT_REFERENCE,
    )
