"""
Filesystem helpers shared by the exporter and the CLI.
"""

from __future__ import annotations

from pathlib import Path

__all__ = ["ensure_parent_dir"]


def ensure_parent_dir(path: Path) -> Path:
    """
    Make sure the directory that will hold ``path`` exists.

    Missing ancestors are created as well; an existing directory is left
    alone. ``path`` is returned so the call can be chained with a write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
