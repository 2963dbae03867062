"""
Config file options of plcc-gen.

    plcc-gen --show-config     effective settings and the file each came from
    plcc-gen --init-config     write a commented .plcc-gen.toml here
"""

import sys
from dataclasses import fields
from pathlib import Path

from kicad_plcc.config import (
    CONFIG_FILENAMES,
    SECTIONS,
    USER_CONFIG_PATH,
    Config,
    generate_template,
    get_config_paths,
)

__all__ = ["show_config", "init_config"]


def _toml_value(value) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def show_config(config: Config) -> int:
    """Print the merged settings in TOML syntax, annotated with their source."""
    print("# Effective plcc-gen configuration")
    for section_name, section_cls in SECTIONS.items():
        section = getattr(config, section_name)
        print()
        print(f"[{section_name}]")
        for f in fields(section_cls):
            source = config.get_source(f"{section_name}.{f.name}")
            origin = source if source == "default" else Path(source).name
            print(f"{f.name} = {_toml_value(getattr(section, f.name))}  # from: {origin}")

    paths = get_config_paths()
    print()
    print(f"# User config: {paths['user'] or 'not found'}")
    print(f"# Project config: {paths['project'] or 'not found'}")
    return 0


def init_config() -> int:
    """Write the config template into the working directory."""
    target = Path.cwd() / CONFIG_FILENAMES[0]
    if target.exists():
        print(f"Error: {target} already exists, edit it instead", file=sys.stderr)
        return 1

    try:
        target.write_text(generate_template())
    except OSError as e:
        print(f"Error: cannot write {target}: {e.strerror or e}", file=sys.stderr)
        return 1

    print(f"Created config template: {target}")
    print(f"Defaults for all projects go in {USER_CONFIG_PATH}")
    return 0
