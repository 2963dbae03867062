"""
Catalog of supported PLCC socket plugs.

Dimensions are taken from the manufacturer datasheets. A, B, C and D are
the datasheet body dimensions: A and C are the outer extents along X and Y,
B and D the inner ones.
"""

from __future__ import annotations

from dataclasses import dataclass

from kicad_plcc.exceptions import ConfigurationError, InvalidPinCountError

DEFAULT_VENDOR = "adaptplus"


@dataclass(frozen=True)
class BodyDimensions:
    """Datasheet body dimensions in mm."""

    a: float
    b: float
    c: float
    d: float


@dataclass(frozen=True)
class ComponentSpec:
    """One catalog entry."""

    name: str
    pins: int
    pins_x: int
    pins_y: int
    pitch: float
    body: BodyDimensions
    pad_width: float

    @property
    def pad_length(self) -> float:
        """Pad length, half the difference of the outer and inner Y extents."""
        return (self.body.c - self.body.d) / 2


def _spec(name, pins, pins_x, pins_y, a, b, c, d, pitch=1.27, pad_width=0.9):
    return ComponentSpec(
        name=name,
        pins=pins,
        pins_x=pins_x,
        pins_y=pins_y,
        pitch=pitch,
        body=BodyDimensions(a, b, c, d),
        pad_width=pad_width,
    )


# AdaptPlus APW932x
ADAPTPLUS_SPECS = (
    _spec("APW9322", 20, 5, 5, 15.00, 8.70, 15.00, 8.70),
    _spec("APW9323", 28, 7, 7, 17.40, 11.15, 17.40, 11.15),
    _spec("APW9324", 32, 7, 9, 17.40, 11.15, 19.90, 13.60),
    _spec("APW9325", 44, 11, 11, 22.50, 16.40, 22.50, 16.40),
    _spec("APW9326", 52, 13, 13, 25.10, 18.90, 25.10, 18.90),
    _spec("APW9327", 68, 17, 17, 30.10, 23.90, 30.10, 23.90),
    _spec("APW9328", 84, 21, 21, 36.60, 27.50, 36.60, 27.50),
)

# Winslow W932x
WINSLOW_SPECS = (
    _spec("W9322", 20, 5, 5, 15.00, 8.70, 15.00, 8.70),
    _spec("W9323", 28, 7, 7, 17.40, 11.15, 17.40, 11.15),
    _spec("W9324", 32, 7, 9, 17.40, 11.02, 19.90, 13.60),
    _spec("W9325", 44, 11, 11, 22.50, 16.40, 22.50, 16.40),
    _spec("W9326", 52, 13, 13, 25.10, 18.90, 25.10, 18.90),
    _spec("W9327", 68, 17, 17, 30.10, 23.90, 30.10, 23.90),
    _spec("W9328", 84, 21, 21, 35.20, 28.90, 35.20, 28.90),
)

CATALOGS = {
    "adaptplus": ADAPTPLUS_SPECS,
    "winslow": WINSLOW_SPECS,
}

SUPPORTED_PIN_COUNTS = tuple(spec.pins for spec in ADAPTPLUS_SPECS)


def catalog(vendor: str = DEFAULT_VENDOR) -> tuple[ComponentSpec, ...]:
    """Return the catalog entries of a vendor."""
    try:
        return CATALOGS[vendor]
    except KeyError:
        raise ConfigurationError(
            f"Unknown vendor catalog: {vendor}",
            context={"vendor": vendor, "available": ", ".join(CATALOGS)},
            suggestions=["Use one of the available vendor catalogs"],
        ) from None


def lookup(pins: int, vendor: str = DEFAULT_VENDOR) -> ComponentSpec:
    """
    Find the catalog entry for a pin count.

    Args:
        pins: Total number of pins
        vendor: Catalog to search ("adaptplus" or "winslow")

    Returns:
        The matching ComponentSpec

    Raises:
        InvalidPinCountError: If no entry has that pin count
        ConfigurationError: If the vendor is unknown
    """
    specs = catalog(vendor)
    for spec in specs:
        if spec.pins == pins:
            return spec
    raise InvalidPinCountError(pins, supported=(spec.pins for spec in specs))
