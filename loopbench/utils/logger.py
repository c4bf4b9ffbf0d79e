"""Centralized logging for loopbench.

The CLI configures logging once at startup. Library code (runner, scenarios,
suite, registry) logs through the classmethod helpers, which do nothing
until the logger is configured, so the harness can be used from plain
Python without any logging setup.

Usage:
    from loopbench.utils.logger import Logger

    Logger.configure(level="INFO")

    Logger.info("suite", "Starting suite...")
    log = Logger.get("benchmark.AttributeLayoutBenchmark")
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO


class LogLevel(Enum):
    """Log levels accepted by Logger.configure()."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised by Logger.get() before Logger.configure() has been called."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class Logger:
    """Namespaced loggers under the "loopbench" root.

    ``get()`` requires configuration; the ``debug``/``info``/``warning``/
    ``error`` helpers are silently skipped without it.

    Example:
        >>> Logger.configure(level="DEBUG", output="stdout", timestamps=False)
        >>> Logger.info("suite", "Running 4 benchmarks")
        INFO [loopbench.suite] Running 4 benchmarks
    """

    _configured: bool = False
    _root_name: str = "loopbench"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "INFO",
        output: str | Path | TextIO | None = None,
        timestamps: bool = True,
    ) -> None:
        """Configure the root logger. Calling again replaces the handler.

        Args:
            level: "DEBUG", "INFO", "WARNING", "ERROR" or a LogLevel.
            output: None for stderr (stdout stays free for reports),
                "stdout", a file path, or any object with ``write()``.
            timestamps: Prefix messages with the time.

        Raises:
            ValueError: If level or output is not recognized.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        handler: logging.Handler
        if output is None:
            handler = logging.StreamHandler(sys.stderr)
        elif output == "stdout":
            handler = logging.StreamHandler(sys.stdout)
        elif isinstance(output, str | Path):
            handler = logging.FileHandler(str(output))
        elif hasattr(output, "write"):
            handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        prefix = "%(asctime)s " if timestamps else ""
        handler.setFormatter(
            logging.Formatter(f"{prefix}%(levelname)s [%(name)s] %(message)s")
        )

        root = logging.getLogger(cls._root_name)
        for existing in root.handlers[:]:
            root.removeHandler(existing)
            existing.close()
        root.addHandler(handler)
        root.propagate = False
        cls._configured = True
        cls.set_level(level)

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get ``loopbench.<name>``, or the root logger if name is None.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str | LogLevel) -> None:
        """Change the level of the root logger and its handlers.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        root = cls.get()
        root.setLevel(level.to_logging_level())
        for handler in root.handlers:
            handler.setLevel(level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured

    # -------------------------------------------------------------------------
    # Library helpers (no-ops until configured)
    # -------------------------------------------------------------------------

    @classmethod
    def _log(
        cls, level: int, name: str, message: str, exc_info: bool = False
    ) -> None:
        if cls._configured:
            cls.get(name).log(level, message, exc_info=exc_info)

    @classmethod
    def debug(cls, name: str, message: str, exc_info: bool = False) -> None:
        """Log a debug message under ``loopbench.<name>``."""
        cls._log(logging.DEBUG, name, message, exc_info)

    @classmethod
    def info(cls, name: str, message: str) -> None:
        """Log an info message under ``loopbench.<name>``."""
        cls._log(logging.INFO, name, message)

    @classmethod
    def warning(cls, name: str, message: str) -> None:
        """Log a warning under ``loopbench.<name>``."""
        cls._log(logging.WARNING, name, message)

    @classmethod
    def error(cls, name: str, message: str) -> None:
        """Log an error under ``loopbench.<name>``."""
        cls._log(logging.ERROR, name, message)
