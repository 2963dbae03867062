"""
kicad-plcc: KiCad footprint generator for PLCC socket plugs.

Generates .kicad_mod footprints for the AdaptPlus APW932x (and Winslow
W932x) surface mount PLCC plugs, for 20 to 84 pins.

Modules:
    library: Component catalog, geometry engine and .kicad_mod export
    config: Configuration file support
    cli: The ``plcc-gen`` command

Quick Start::

    from kicad_plcc import create_plcc

    fp = create_plcc(pins=84, double_sided=True, via_outside=True)
    fp.save("PLCC.pretty/APW9328.kicad_mod")
"""

__version__ = "0.2.0"

from kicad_plcc.logging import disable_verbose, enable_verbose
from kicad_plcc.library import (
    SUPPORTED_PIN_COUNTS,
    ComponentSpec,
    FootprintGeometry,
    MountingOptions,
    PlccFootprint,
    build_geometry,
    create_plcc,
    lookup,
)

__all__ = [
    "__version__",
    "SUPPORTED_PIN_COUNTS",
    "ComponentSpec",
    "FootprintGeometry",
    "MountingOptions",
    "PlccFootprint",
    "build_geometry",
    "create_plcc",
    "lookup",
    "enable_verbose",
    "disable_verbose",
]
