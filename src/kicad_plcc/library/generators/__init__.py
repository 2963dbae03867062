"""
Footprint generators for PLCC socket plugs.
"""

from .outline import corner_marks, courtyard, fabrication, silkscreen_outline
from .plcc import build_geometry, create_plcc, layout_pads, pin_groups, text_anchors

__all__ = [
    "create_plcc",
    "build_geometry",
    "layout_pads",
    "pin_groups",
    "text_anchors",
    "silkscreen_outline",
    "corner_marks",
    "courtyard",
    "fabrication",
]
