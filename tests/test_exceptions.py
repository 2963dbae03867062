"""Tests for kicad_plcc.exceptions and logging helpers."""

import io
import logging

import pytest
from rich.console import Console

from kicad_plcc.exceptions import (
    ComponentError,
    ConfigurationError,
    ExportError,
    InvalidPinCountError,
    PlccError,
    UsageError,
)
from kicad_plcc.logging import disable_verbose, enable_verbose


class TestPlccError:
    """Tests for the base exception class."""

    def test_basic_message(self):
        err = PlccError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.message == "Something went wrong"
        assert err.context == {}
        assert err.suggestions == []

    def test_with_context_and_suggestions(self):
        err = PlccError(
            "Cannot write footprint file",
            context={"file": "out.kicad_mod", "reason": "Permission denied"},
            suggestions=["Check that the output directory is writable"],
        )
        msg = str(err)
        assert msg.startswith("Cannot write footprint file")
        assert "Context:" in msg
        assert "file: out.kicad_mod" in msg
        assert "reason: Permission denied" in msg
        assert "Suggestions:" in msg
        assert "- Check that the output directory is writable" in msg

    def test_rich_rendering(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=100, force_terminal=False, color_system=None)

        console.print(PlccError("Bad value", context={"pins": 99}, suggestions=["Try 84"]))

        out = buffer.getvalue()
        assert "Error: Bad value" in out
        assert "pins: 99" in out
        assert "- Try 84" in out
        assert "[bold red]" not in out


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize("cls", [ComponentError, UsageError, ConfigurationError, ExportError])
    def test_subclasses(self, cls):
        assert issubclass(cls, PlccError)

    def test_invalid_pin_count(self):
        err = InvalidPinCountError(30, supported=[20, 28, 32])
        assert isinstance(err, ComponentError)
        assert err.pins == 30
        assert err.supported == (20, 28, 32)
        assert err.context == {"pins": 30, "supported": "20, 28, 32"}
        assert err.suggestions == ["Supported pin counts: 20, 28, 32"]

    def test_catch_as_base(self):
        with pytest.raises(PlccError):
            raise InvalidPinCountError(99, supported=(84,))


class TestLogging:
    """Tests for the verbose logging helpers."""

    def test_silent_by_default(self, capsys):
        logging.getLogger("kicad_plcc.library").debug("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_enable_verbose(self, capsys):
        enable_verbose("DEBUG")
        logging.getLogger("kicad_plcc.library").debug("pads laid out")
        assert "[DEBUG] pads laid out" in capsys.readouterr().err

    def test_enable_verbose_level(self, capsys):
        enable_verbose("warning")
        log = logging.getLogger("kicad_plcc.cli")
        log.info("quiet")
        log.warning("loud")
        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "[WARNING] loud" in err

    def test_enable_twice_single_handler(self):
        enable_verbose()
        enable_verbose()
        handlers = [
            h
            for h in logging.getLogger("kicad_plcc").handlers
            if not isinstance(h, logging.NullHandler)
        ]
        assert len(handlers) == 1

    def test_disable_verbose(self, capsys):
        enable_verbose()
        disable_verbose()
        logging.getLogger("kicad_plcc").debug("gone")
        assert "gone" not in capsys.readouterr().err
