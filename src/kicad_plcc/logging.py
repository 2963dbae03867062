"""
Logging setup for kicad-plcc.

Modules log to children of the ``kicad_plcc`` logger. Nothing is printed
until verbose output is switched on, either with ``plcc-gen --verbose`` or
from Python::

    from kicad_plcc import create_plcc, enable_verbose

    enable_verbose()
    create_plcc(pins=84)  # logs the catalog entry and element counts
"""

import logging

DEFAULT_FORMAT = "[%(levelname)s] %(message)s"

_logger = logging.getLogger("kicad_plcc")
_logger.addHandler(logging.NullHandler())


def _drop_stream_handlers() -> None:
    for handler in list(_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            _logger.removeHandler(handler)


def enable_verbose(level: str = "DEBUG", format: str = None) -> None:
    """Send package log records at ``level`` and above to stderr.

    Args:
        level: "DEBUG", "INFO", "WARNING" or "ERROR", any case
        format: Formatter string (default: ``[LEVEL] message``)
    """
    numeric = getattr(logging, level.upper())
    _logger.setLevel(numeric)
    _drop_stream_handlers()

    handler = logging.StreamHandler()
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))
    _logger.addHandler(handler)


def disable_verbose() -> None:
    """Silence package logging again."""
    _logger.setLevel(logging.WARNING)
    _drop_stream_handlers()
