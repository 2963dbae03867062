"""
Exceptions raised by kicad-plcc.

Every error carries a short message, a ``context`` mapping with the values
that caused it, and ``suggestions`` the user can act on. The CLI prints all
three, through Rich when stderr is a terminal.

Example::

    from kicad_plcc.exceptions import InvalidPinCountError

    raise InvalidPinCountError(99, supported=(20, 28, 32, 44, 52, 68, 84))
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional


class PlccError(Exception):
    """
    Base class of all kicad-plcc errors.

    Attributes:
        message: One-line description
        context: Values that led to the error (pins, file, ...)
        suggestions: What the user can do about it
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = dict(context or {})
        self.suggestions = list(suggestions or [])
        super().__init__(message)

    def _format_message(self) -> str:
        """Message followed by indented Context and Suggestions blocks."""
        lines = [self.message]
        if self.context:
            lines += ["", "Context:"]
            lines += [f"  {key}: {value}" for key, value in self.context.items()]
        if self.suggestions:
            lines += ["", "Suggestions:"]
            lines += [f"  - {suggestion}" for suggestion in self.suggestions]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self._format_message()

    def __rich_console__(self, console, options):
        yield f"[bold red]Error:[/bold red] {self.message}"
        if self.context:
            yield "[dim]Context:[/dim]"
            yield from (f"  [cyan]{key}[/cyan]: {value}" for key, value in self.context.items())
        if self.suggestions:
            yield "[dim]Suggestions:[/dim]"
            yield from (f"  - {suggestion}" for suggestion in self.suggestions)


class ComponentError(PlccError):
    """A catalog lookup failed."""


class InvalidPinCountError(ComponentError):
    """
    No catalog entry has the requested pin count.

    Example::

        raise InvalidPinCountError(99, supported=(20, 28, 32, 44, 52, 68, 84))

    Attributes:
        pins: The pin count that was requested
        supported: The pin counts the catalog does offer
    """

    def __init__(self, pins: int, supported: Iterable[int]):
        self.pins = pins
        self.supported = tuple(supported)
        supported_str = ", ".join(str(p) for p in self.supported)
        super().__init__(
            f"Unsupported pin count {pins}",
            context={"pins": pins, "supported": supported_str},
            suggestions=[f"Supported pin counts: {supported_str}"],
        )


class UsageError(PlccError):
    """
    Command line usage error.

    Raised for a missing required option, an unrecognized option, or an
    option value that cannot be parsed.
    """

    pass


class ConfigurationError(PlccError):
    """
    A setting names something that does not exist, or a config file is bad.

    Example::

        raise ConfigurationError(
            "Unknown vendor catalog",
            context={"vendor": "acme", "available": ["adaptplus", "winslow"]},
            suggestions=["Use one of the available vendor catalogs"]
        )
    """

    pass


class ExportError(PlccError):
    """
    Writing the generated footprint failed.

    Example::

        raise ExportError(
            "Cannot open output file",
            context={"file": "/read-only/PLCC-84.kicad_mod", "reason": "Permission denied"},
        )
    """

    pass


__all__ = [
    "PlccError",
    "ComponentError",
    "InvalidPinCountError",
    "UsageError",
    "ConfigurationError",
    "ExportError",
]
