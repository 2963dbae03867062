"""
Command-line interface for kicad-plcc.

Usage:
    plcc-gen -p|--pins PINS [-o|--outfile FILE] [options]

Examples:
    # 84 pin plug, through-hole pads, vias outside, to stdout
    plcc-gen --pins 84

    # 44 pin plug with plain SMD pads, written to a file
    plcc-gen -p 44 -s -o PLCC.pretty/APW9325.kicad_mod

    # Vias toward the package center
    plcc-gen -p 68 --via-inside

    # Winslow catalog
    plcc-gen -p 84 --vendor winslow

    # List the catalog
    plcc-gen --list

    # Write a config template
    plcc-gen --init-config
"""

import argparse
import json
import sys
from typing import List, Optional

from kicad_plcc import __version__
from kicad_plcc.config import Config
from kicad_plcc.exceptions import PlccError, UsageError
from kicad_plcc.library.catalog import CATALOGS, SUPPORTED_PIN_COUNTS, catalog
from kicad_plcc.library.generators import create_plcc
from kicad_plcc.logging import enable_verbose

from .config_cmd import init_config, show_config
from .utils import print_error

__all__ = ["main", "build_parser", "list_catalog"]


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as exceptions."""

    def error(self, message):
        self.print_usage(sys.stderr)
        raise UsageError(message)


def build_parser(config: Optional[Config] = None) -> argparse.ArgumentParser:
    """Build the plcc-gen argument parser with defaults from config."""
    if config is None:
        config = Config()

    pins_str = ", ".join(str(p) for p in SUPPORTED_PIN_COUNTS)

    parser = _ArgumentParser(
        prog="plcc-gen",
        description="Generate KiCad footprints for APW932x PLCC plugs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
        add_help=False,
    )
    parser.add_argument("-p", "--pins", type=int, help=f"Number of pins ({pins_str})")
    parser.add_argument("-o", "--outfile", help="Output file (default: stdout)")
    parser.add_argument(
        "-d",
        "--double-sided",
        dest="double_sided",
        action="store_const",
        const=True,
        help="Use double-sided pads with vias (default)",
    )
    parser.add_argument(
        "-s",
        "--single-sided",
        dest="double_sided",
        action="store_const",
        const=False,
        help="Use single-sided SMD pads only",
    )
    parser.add_argument(
        "-v",
        "--via-outside",
        dest="via_outside",
        action="store_const",
        const=True,
        help="Place vias outside the footprint (default)",
    )
    parser.add_argument(
        "-V",
        "--via-inside",
        dest="via_outside",
        action="store_const",
        const=False,
        help="Place vias inside the footprint",
    )
    parser.add_argument(
        "--vendor",
        choices=list(CATALOGS),
        help=f"Component catalog (default: {config.defaults.vendor})",
    )
    parser.add_argument("--timestamp", help="Placeholder tstamp written on every record")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output footprint data as JSON (instead of .kicad_mod format)",
    )
    parser.add_argument("--list", action="store_true", help="List the component catalog")
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show effective configuration with sources",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Create a template .plcc-gen.toml in the current directory",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"plcc-gen {__version__}")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")

    parser.set_defaults(
        double_sided=config.defaults.double_sided,
        via_outside=config.defaults.via_outside,
        vendor=config.defaults.vendor,
        timestamp=config.output.timestamp,
        verbose=config.defaults.verbose,
    )
    return parser


def list_catalog(vendor: str, output_format: str = "text") -> int:
    """List the catalog entries of a vendor."""
    specs = catalog(vendor)

    if output_format == "json":
        data = [
            {
                "name": spec.name,
                "pins": spec.pins,
                "pins_x": spec.pins_x,
                "pins_y": spec.pins_y,
                "pitch": spec.pitch,
                "body": {"a": spec.body.a, "b": spec.body.b, "c": spec.body.c, "d": spec.body.d},
                "pad_width": spec.pad_width,
            }
            for spec in specs
        ]
        print(json.dumps(data, indent=2))
        return 0

    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"PLCC plugs ({vendor})")
    table.add_column("Pins", justify="right")
    table.add_column("Name")
    table.add_column("Grid", justify="right")
    table.add_column("A", justify="right")
    table.add_column("B", justify="right")
    table.add_column("C", justify="right")
    table.add_column("D", justify="right")
    table.add_column("Pitch", justify="right")
    table.add_column("Pad width", justify="right")

    for spec in specs:
        table.add_row(
            str(spec.pins),
            spec.name,
            f"{spec.pins_x}x{spec.pins_y}",
            f"{spec.body.a:.2f}",
            f"{spec.body.b:.2f}",
            f"{spec.body.c:.2f}",
            f"{spec.body.d:.2f}",
            f"{spec.pitch:.2f}",
            f"{spec.pad_width:.2f}",
        )

    Console().print(table)
    return 0


def _output_footprint(fp, args) -> int:
    """Output the generated footprint."""
    if args.json:
        print(json.dumps(fp.to_dict(), indent=2))
        return 0

    if args.outfile:
        path = fp.save(args.outfile)
        print(f"Saved: {path}")
        return 0

    sys.stdout.write(fp.to_sexp())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the plcc-gen command."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.help:
        parser.print_help()
        return 0

    try:
        config = Config.load()
    except PlccError as e:
        print_error(e)
        return 1

    # config values fill in whatever the command line left unset
    parser = build_parser(config)
    args = parser.parse_args(argv)

    if args.verbose:
        enable_verbose("DEBUG")

    if args.show_config:
        return show_config(config)
    if args.init_config:
        return init_config()

    try:
        if args.list:
            return list_catalog(args.vendor, "json" if args.json else "text")

        if args.pins is None:
            print("Error: --pins option is required", file=sys.stderr)
            parser.print_usage(sys.stderr)
            return 1

        fp = create_plcc(
            pins=args.pins,
            double_sided=args.double_sided,
            via_outside=args.via_outside,
            vendor=args.vendor,
            timestamp=args.timestamp,
            reference=config.output.reference,
        )
        return _output_footprint(fp, args)
    except PlccError as e:
        print_error(e, verbose=args.verbose)
        return 1
