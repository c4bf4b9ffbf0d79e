"""Tests for the centralized logging utility."""

from io import StringIO

import pytest

from loopbench.utils.logger import Logger, LoggerNotConfiguredError


def test_logger_unconfigured():
    """Test that using Logger before configuration raises error."""
    # Reset logger state for test
    Logger._configured = False

    with pytest.raises(LoggerNotConfiguredError):
        Logger.get("test")


def test_logger_configuration():
    """Test logger configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    assert Logger.is_configured()

    log = Logger.get("test_config")
    log.debug("Debug message")

    content = output.getvalue()
    assert "DEBUG" in content
    assert "[loopbench.test_config]" in content
    assert "Debug message" in content


def test_logger_set_level():
    """Test changing log level."""
    output = StringIO()
    Logger.configure(level="INFO", output=output, timestamps=False)

    log = Logger.get("test_level")
    log.debug("Hidden")
    assert "Hidden" not in output.getvalue()

    Logger.set_level("DEBUG")
    log.debug("Visible")
    assert "Visible" in output.getvalue()


def test_logger_direct_methods():
    """Test the classmethod shortcuts."""
    output = StringIO()
    Logger.configure(level="WARNING", output=output, timestamps=False)

    Logger.info("suite", "quiet")
    Logger.error("suite", "loud")

    content = output.getvalue()
    assert "quiet" not in content
    assert "ERROR [loopbench.suite] loud" in content


def test_logger_helpers_skip_when_unconfigured():
    """Test that the direct helpers are no-ops before configuration."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    Logger._configured = False

    Logger.debug("suite", "dropped", exc_info=True)
    Logger.error("suite", "dropped")

    assert output.getvalue() == ""


def test_logger_debug_with_traceback():
    """Test that exc_info attaches the active exception."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)

    try:
        raise KeyError("missing")
    except KeyError:
        Logger.debug("suite", "lookup failed", exc_info=True)

    assert "lookup failed" in output.getvalue()
    assert "Traceback" in output.getvalue()


def test_logger_invalid_level():
    """Test that unknown level names are rejected."""
    with pytest.raises(ValueError):
        Logger.configure(level="CHATTY")
