"""
Silkscreen, courtyard and fabrication outlines for PLCC plugs.

The silkscreen frame is derived from the body size. The corner marks and
the fabrication outline are hand-measured artwork of the 84 pin APW9328.
"""

from __future__ import annotations

from ..catalog import ComponentSpec
from ..geometry import LineSegment, Point

SILK_WIDTH = 0.12
SILK_MARK_WIDTH = 0.1
SILK_MARGIN = 0.2
COURTYARD_WIDTH = 0.05
FAB_WIDTH = 0.1

# Reference component the corner mark artwork was measured on
REFERENCE_PINS = 84
REFERENCE_BODY_A = 36.60
REFERENCE_BODY_C = 36.60

# Corner mark coordinates of the reference component. X terms first, then Y.
REFERENCE_MARKS = {
    "inner": 13.675,
    "outer": 14.175,
    "edge": 15.325,
    "top": -14.8,
    "top_inner": -13.65,
    "top_gap": -13.15,
    "bottom": 15.85,
    "bottom_gap": 14.2,
}
_MARK_X_TERMS = ("inner", "outer", "edge")

# Fabrication outline of the reference body: outer frame with pin 1
# chamfer, inner frame, and the pin 1 notch.
# TODO: replace with an outline scaled per body size once a real 3D model
# for the plugs exists; the current one does not change with pin count.
FABRICATION_ARTWORK = (
    ((-18, -17.475), (17, -17.475)),
    ((18, 18.525), (-18, 18.525)),
    ((18, -16.475), (18, 18.525)),
    ((-18, 18.525), (-18, -17.475)),
    ((17, -17.475), (18, -16.475)),
    ((-16.73, -16.205), (16.73, -16.205)),
    ((-16.73, 17.255), (-16.73, -16.205)),
    ((15.175, 15.7), (-15.175, 15.7)),
    ((-15.175, 15.7), (-15.175, -14.65)),
    ((-15.175, -14.65), (14.175, -14.65)),
    ((15.175, -13.65), (15.175, 15.7)),
    ((16.73, 17.255), (-16.73, 17.255)),
    ((0, -16.475), (-0.5, -17.475)),
    ((0.5, -17.475), (0, -16.475)),
    ((16.73, -16.205), (16.73, 17.255)),
    ((14.175, -14.65), (15.175, -13.65)),
)


def _line(start, end, width: float, layer: str) -> LineSegment:
    return LineSegment(Point(*start), Point(*end), width, layer)


def corner_marks(spec: ComponentSpec) -> dict[str, float]:
    """
    Corner mark coordinates for a component.

    The reference artwork is used verbatim for the 84 pin plug. Other sizes
    scale it by their body size relative to the reference; this is an
    approximation, the marks are not derived from the part's own pad rows
    and have not been checked against fabricated boards.
    """
    if spec.pins == REFERENCE_PINS:
        return dict(REFERENCE_MARKS)

    scale_x = spec.body.a / REFERENCE_BODY_A
    scale_y = spec.body.c / REFERENCE_BODY_C
    return {
        key: value * (scale_x if key in _MARK_X_TERMS else scale_y)
        for key, value in REFERENCE_MARKS.items()
    }


def silkscreen_outline(spec: ComponentSpec, layer: str = "F.SilkS") -> tuple[LineSegment, ...]:
    """
    Silkscreen outline on one layer.

    A frame around the body, open on top around pin 1 and chamfered at the
    top-right corner, followed by the marks delimiting the pad rows at each
    corner.
    """
    ox = spec.body.a / 2
    oy = spec.body.c / 2

    #     x1/y1  x2/y2
    #       +------\
    #       |      |
    #       +------+
    #     x4/y4  x3/y3
    x1, y1 = -ox - SILK_MARGIN, -oy - SILK_MARGIN
    x2, y2 = ox + SILK_MARGIN, -oy - SILK_MARGIN
    x3, y3 = ox + SILK_MARGIN, oy + SILK_MARGIN
    x4, y4 = -ox - SILK_MARGIN, oy + SILK_MARGIN

    frame = [
        ((x2, y2 + 1), (x3, y3)),  # right
        ((x4, y4), (x1, y1)),  # left
        ((x3, y3), (x4, y4)),  # bottom
        ((x2 - 1, y2), (x2, y2 + 1)),  # chamfer
        ((x1, y1), (-1.0, y1)),  # top, left of pin 1
        ((1.0, y1), (x2 - 1, y2)),  # top, right of pin 1
    ]

    m = corner_marks(spec)
    marks = [
        ((m["inner"], m["top"]), (m["outer"], m["top"])),
        ((m["outer"], m["top"]), (m["edge"], m["top_inner"])),
        ((-m["inner"], m["top"]), (-m["edge"], m["top"])),
        ((m["edge"], m["top_inner"]), (m["edge"], m["top_gap"])),
        ((m["edge"], m["bottom"]), (m["edge"], m["bottom_gap"])),
        ((-m["inner"], m["bottom"]), (-m["edge"], m["bottom"])),
        ((-m["edge"], m["bottom"]), (-m["edge"], m["bottom_gap"])),
        ((-m["edge"], m["top"]), (-m["edge"], m["top_gap"])),
        ((m["inner"], m["bottom"]), (m["edge"], m["bottom"])),
    ]

    return tuple(
        [_line(start, end, SILK_WIDTH, layer) for start, end in frame]
        + [_line(start, end, SILK_MARK_WIDTH, layer) for start, end in marks]
    )


def courtyard(spec: ComponentSpec) -> tuple[LineSegment, ...]:
    """Rectangular courtyard at the body extents."""
    ox = spec.body.a / 2
    oy = spec.body.c / 2
    corners = [
        ((-ox, -oy), (ox, -oy)),
        ((-ox, oy), (-ox, -oy)),
        ((ox, oy), (-ox, oy)),
        ((ox, -oy), (ox, oy)),
    ]
    return tuple(_line(start, end, COURTYARD_WIDTH, "F.CrtYd") for start, end in corners)


def fabrication() -> tuple[LineSegment, ...]:
    """Fabrication layer outline, the same for every pin count."""
    return tuple(
        _line(start, end, FAB_WIDTH, "F.Fab") for start, end in FABRICATION_ARTWORK
    )
