"""
Library module for PLCC plug footprint generation.

Usage:
    from kicad_plcc.library import create_plcc

    # 84 pin plug, through-hole pads with vias outside
    fp = create_plcc(pins=84)
    fp.save("MyFootprints.pretty/APW9328.kicad_mod")

    # 44 pin plug, plain SMD pads
    fp = create_plcc(pins=44, double_sided=False)
    print(fp.to_sexp())
"""

from .catalog import (
    SUPPORTED_PIN_COUNTS,
    BodyDimensions,
    ComponentSpec,
    catalog,
    lookup,
)
from .footprint import PlccFootprint
from .generators import (
    build_geometry,
    courtyard,
    create_plcc,
    fabrication,
    layout_pads,
    silkscreen_outline,
    text_anchors,
)
from .geometry import (
    DrillSpec,
    FootprintGeometry,
    LineSegment,
    MountingOptions,
    Pad,
    PadKind,
    Point,
    TextAnchors,
)

__all__ = [
    # Catalog
    "SUPPORTED_PIN_COUNTS",
    "BodyDimensions",
    "ComponentSpec",
    "catalog",
    "lookup",
    # Data model
    "Point",
    "LineSegment",
    "PadKind",
    "DrillSpec",
    "Pad",
    "MountingOptions",
    "TextAnchors",
    "FootprintGeometry",
    # Generators
    "create_plcc",
    "build_geometry",
    "layout_pads",
    "silkscreen_outline",
    "courtyard",
    "fabrication",
    "text_anchors",
    # Export
    "PlccFootprint",
]
