"""Error reporting for the plcc-gen command."""

from __future__ import annotations

import sys
import traceback
from functools import lru_cache

from rich.console import Console

from kicad_plcc.exceptions import PlccError

__all__ = ["format_error", "print_error"]


@lru_cache(maxsize=None)
def _stderr_console() -> Console:
    return Console(stderr=True)


def print_error(e: Exception, verbose: bool = False) -> None:
    """
    Report a failed invocation on stderr.

    With ``--verbose`` the traceback is printed. Otherwise a PlccError is
    rendered through Rich, context and suggestions included, when stderr is
    a terminal; pipes and redirected output get ``format_error`` text.
    """
    if verbose:
        print(traceback.format_exc(), file=sys.stderr)
        return

    console = _stderr_console()
    if console.is_terminal and isinstance(e, PlccError):
        console.print(e)
    else:
        print(format_error(e), file=sys.stderr)


def format_error(e: Exception) -> str:
    """Plain text form of an exception, prefixed with ``Error:``."""
    if isinstance(e, PlccError):
        return f"Error: {e}"
    return f"Error: {type(e).__name__}: {e}"
