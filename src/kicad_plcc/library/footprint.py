"""
KiCad .kicad_mod export of PLCC plug footprints.

Renders a FootprintGeometry in the KiCad 6 footprint grammar
(``version 20210228``). Numbers are printed with fixed precision so the
output is stable across runs and platforms.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kicad_plcc.exceptions import ExportError
from kicad_plcc.utils import ensure_parent_dir

from .catalog import ComponentSpec
from .geometry import FootprintGeometry, LineSegment, MountingOptions, Pad, Point

FORMAT_VERSION = 20210228
DEFAULT_REFERENCE = "IC2"
MODEL_PATH = "${{KISYS3DMOD}}/Package_LCC.3dshapes/PLCC-{pins}_SMD-Socket.wrl"


def _fmt(val: float) -> str:
    """Format a coordinate with three decimals."""
    return f"{val:.3f}"


def _layers(layers: tuple[str, ...]) -> str:
    return " ".join(f'"{layer}"' for layer in layers)


def text_to_sexp(text_type: str, text: str, position: Point, layer: str, tstamp: str) -> str:
    """Convert a text annotation to KiCad S-expression format."""
    return (
        f'  (fp_text {text_type} "{text}" (at {position.x:.0f} {_fmt(position.y)} -180)'
        f' (layer "{layer}")\n'
        f"    (effects (font (size {_fmt(1.0)} {_fmt(1.0)}) (thickness 0.15)))\n"
        f"    (tstamp {tstamp})\n"
        "  )\n"
    )


def line_to_sexp(line: LineSegment, tstamp: str) -> str:
    """Convert a line segment to KiCad S-expression format."""
    return (
        f"  (fp_line (start {_fmt(line.start.x)} {_fmt(line.start.y)})"
        f" (end {_fmt(line.end.x)} {_fmt(line.end.y)})"
        f' (layer "{line.layer}") (width {line.width:g}) (tstamp {tstamp}))\n'
    )


def pad_to_sexp(pad: Pad, tstamp: str) -> str:
    """Convert a pad to KiCad S-expression format."""
    parts = [
        f'  (pad "{pad.number}" {pad.kind.value} rect'
        f" (at {_fmt(pad.position.x)} {_fmt(pad.position.y)}) (locked)"
        f" (size {_fmt(pad.size.x)} {_fmt(pad.size.y)}) "
    ]
    if pad.drill is not None:
        parts.append(
            f"(drill {pad.drill.diameter:.1f}"
            f" (offset {_fmt(pad.drill.offset.x)} {_fmt(pad.drill.offset.y)})) "
        )
    parts.append(f"(layers {_layers(pad.layers)}) ")
    parts.append(f"(tstamp {tstamp}))\n")
    return "".join(parts)


def model_to_sexp(pins: int) -> str:
    """Convert the 3D model reference to KiCad S-expression format."""
    return (
        f'(model "{MODEL_PATH.format(pins=pins)}"\n'
        "    (offset (xyz 0 0 0))\n"
        "    (scale (xyz 1 1 1))\n"
        "    (rotate (xyz 0 0 0))\n"
        "  )\n"
    )


@dataclass(frozen=True)
class PlccFootprint:
    """
    A generated PLCC plug footprint.

    Couples the catalog entry and mounting options with the computed
    geometry, and exports them to a .kicad_mod file.
    """

    spec: ComponentSpec
    options: MountingOptions
    geometry: FootprintGeometry
    reference: str = DEFAULT_REFERENCE

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def description(self) -> str:
        return f"PLCC plug, {self.spec.pins} pins, surface mount"

    def to_sexp(self) -> str:
        """Convert footprint to KiCad S-expression format."""
        tstamp = self.options.timestamp
        geometry = self.geometry

        lines = [
            f'(footprint "{self.name}" (version {FORMAT_VERSION}) (generator pcbnew)'
            ' (layer "F.Cu")\n',
            "  (tedit 60690F97)\n",
            f'  (descr "{self.description}")\n',
            '  (tags "plcc smt")\n',
            "  (autoplace_cost180 1)\n",
            "  (attr smd)\n",
        ]

        lines.append(
            text_to_sexp("reference", self.reference, geometry.text.reference, "F.SilkS", tstamp)
        )
        lines.append(text_to_sexp("value", self.name, geometry.text.value, "F.Fab", tstamp))
        lines.append(text_to_sexp("user", "${REFERENCE}", geometry.text.user, "F.Fab", tstamp))

        for line in geometry.lines:
            lines.append(line_to_sexp(line, tstamp))

        for pad in geometry.pads:
            lines.append(pad_to_sexp(pad, tstamp))

        lines.append(model_to_sexp(self.spec.pins))
        lines.append(")\n")
        return "".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Summarize the footprint as JSON-serializable data."""
        return {
            "name": self.name,
            "description": self.description,
            "pins": self.spec.pins,
            "double_sided": self.options.double_sided,
            "via_outside": self.options.via_outside,
            "pads": [
                {
                    "number": pad.number,
                    "type": pad.kind.value,
                    "x": pad.position.x,
                    "y": pad.position.y,
                    "width": pad.size.x,
                    "height": pad.size.y,
                    "layers": list(pad.layers),
                    **(
                        {
                            "drill": pad.drill.diameter,
                            "drill_offset": list(pad.drill.offset.as_tuple()),
                        }
                        if pad.drill is not None
                        else {}
                    ),
                }
                for pad in self.geometry.pads
            ],
            "lines": {
                "silkscreen": len(self.geometry.silkscreen),
                "courtyard": len(self.geometry.courtyard),
                "fabrication": len(self.geometry.fabrication),
            },
            "text": {
                "reference": list(self.geometry.text.reference.as_tuple()),
                "value": list(self.geometry.text.value.as_tuple()),
                "user": list(self.geometry.text.user.as_tuple()),
            },
        }

    def save(self, filepath: str | Path) -> Path:
        """
        Save footprint to a .kicad_mod file.

        Raises:
            ExportError: If the file cannot be written
        """
        filepath = Path(filepath)
        content = self.to_sexp()
        try:
            ensure_parent_dir(filepath).write_text(content)
        except OSError as e:
            raise ExportError(
                "Cannot write footprint file",
                context={"file": str(filepath), "reason": e.strerror or str(e)},
                suggestions=["Check that the output directory is writable"],
            ) from e
        return filepath
