"""
Configuration files for plcc-gen.

Two TOML files are read, later ones overriding earlier ones:

1. User defaults: ``~/.config/plcc-gen/config.toml``
2. Project settings: ``.plcc-gen.toml`` (or ``plcc-gen.toml``), found by
   walking up from the working directory to the repository root

Command line flags override both.
"""

import sys
import warnings
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from kicad_plcc.exceptions import ConfigurationError
from kicad_plcc.library.catalog import DEFAULT_VENDOR
from kicad_plcc.library.geometry import ZERO_TIMESTAMP

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAMES = [".plcc-gen.toml", "plcc-gen.toml"]
USER_CONFIG_PATH = Path.home() / ".config" / "plcc-gen" / "config.toml"


@dataclass
class DefaultsConfig:
    """``[defaults]``: generator options."""

    double_sided: bool = True
    via_outside: bool = True
    vendor: str = DEFAULT_VENDOR
    verbose: bool = False


@dataclass
class OutputConfig:
    """``[output]``: text written into the footprint."""

    timestamp: str = ZERO_TIMESTAMP
    reference: str = "IC2"


SECTIONS = {"defaults": DefaultsConfig, "output": OutputConfig}
KNOWN_KEYS = {name: {f.name for f in fields(cls)} for name, cls in SECTIONS.items()}


class ConfigError(ConfigurationError):
    """A config file could not be read or holds a bad value."""


@dataclass
class Config:
    """Settings merged from built-in defaults and config files."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # "section.key" -> file that set it
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Read the user and project config files.

        Args:
            start_dir: Where the project config search starts (default: cwd)

        Raises:
            ConfigError: If a file is not valid TOML or a value has the wrong type
        """
        config = cls()
        for path in (_user_config(), _find_project_config(start_dir or Path.cwd())):
            if path is not None:
                _merge_config(config, _load_toml_file(path), str(path))
        return config

    def get_source(self, key: str) -> str:
        """File that set ``section.key``, or ``"default"``."""
        return self._sources.get(key, "default")


def _user_config() -> Path | None:
    return USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Search ``start_dir`` and its parents for a project config file.

    The search ends at the first directory containing ``.git``, or at the
    filesystem root.
    """
    for directory in (start_dir.resolve(), *start_dir.resolve().parents):
        for filename in CONFIG_FILENAMES:
            candidate = directory / filename
            if candidate.is_file():
                return candidate
        if (directory / ".git").exists():
            return None
    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Parse one TOML file.

    Raises:
        ConfigError: If the file is unreadable or not valid TOML
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(config: Config, data: dict[str, Any], source: str) -> None:
    """Apply the known sections of ``data`` onto ``config``, recording ``source``."""
    for section_name, values in data.items():
        if section_name not in SECTIONS:
            warnings.warn(f"Unknown config key '{section_name}' in {source}", stacklevel=4)
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"[{section_name}] must be a table in {source}")

        section = getattr(config, section_name)
        for key, value in values.items():
            if key not in KNOWN_KEYS[section_name]:
                warnings.warn(
                    f"Unknown config key '{section_name}.{key}' in {source}", stacklevel=4
                )
                continue

            expected = type(getattr(section, key))
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Bad value for {section_name}.{key} in {source}",
                    context={"value": repr(value), "expected": expected.__name__},
                )
            setattr(section, key, value)
            config._sources[f"{section_name}.{key}"] = source


def generate_template() -> str:
    """Commented-out config file listing every option."""
    return """# plcc-gen configuration
# Project: .plcc-gen.toml next to your footprint library
# User:    ~/.config/plcc-gen/config.toml

[defaults]
# true: through-hole pads with vias, false: SMD pads only
# double_sided = true

# true: drills toward the outside of the package, false: toward the center
# via_outside = true

# Dimension catalog, "adaptplus" or "winslow"
# vendor = "adaptplus"

# Debug logging on stderr
# verbose = false

[output]
# tstamp written on every record
# timestamp = "00000000-0000-0000-0000-000000000000"

# Reference designator text
# reference = "IC2"
"""


def get_config_paths() -> dict[str, Path | None]:
    """The user and project config files ``Config.load()`` would read."""
    return {"user": _user_config(), "project": _find_project_config(Path.cwd())}
