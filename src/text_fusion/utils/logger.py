from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO

# Levelled logger shared by the whole package
# Use: from text_fusion.utils.logger import log
# log.info("message")
# log.debug("[COMPARE] recount", extra={"count": 3})
# log("legacy INFO-level call")


class LogLevel(IntEnum):
    """Log severity levels."""
    DEBUG = 10
    INFO = 20
    WARN = 30
    WARNING = 30  # Alias for WARN
    ERROR = 40
    CRITICAL = 50


class Logger:
    """Small levelled logger that keeps quiet while a Textual app owns the terminal."""

    def __init__(self):
        self._level = LogLevel.INFO
        self._file_handle: TextIO | None = None
        self._file_path: Path | None = None
        self._format_string = "{timestamp} [{level:8}] {message}"

        self._configure_from_env()

    def _configure_from_env(self) -> None:
        """Configure logger from environment variables."""
        if os.environ.get("DEBUG") == "1":
            self._level = LogLevel.DEBUG
            self.set_file_output(Path(tempfile.gettempdir()) / "text_fusion_debug.log")

        level_str = os.environ.get("LOG_LEVEL", "").upper()
        if level_str in LogLevel.__members__:
            self._level = LogLevel[level_str]

    @property
    def level(self) -> LogLevel:
        return self._level

    def set_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self._level = level

    def set_file_output(self, path: Path, append: bool = True) -> None:
        """Mirror log records into a file."""
        try:
            if self._file_handle:
                self._file_handle.close()
            self._file_handle = open(path, "a" if append else "w", encoding="utf-8")
            self._file_path = path
        except OSError:
            # Can't log errors about logging setup
            self._file_handle = None
            self._file_path = None

    def _can_write_console(self) -> bool:
        """Only write to the console when no Textual app is active."""
        try:
            from textual._context import active_app  # lazy import

            return active_app.get(None) is None
        except (ImportError, AttributeError, RuntimeError):
            return False

    def _format_message(self, level: LogLevel, message: str, extra: dict | None = None) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        formatted = self._format_string.format(timestamp=timestamp, level=level.name, message=message)
        if extra:
            formatted += f" | {extra}"
        return formatted

    def _write(self, level: LogLevel, *args: Any, sep: str = " ", extra: dict | None = None) -> None:
        if level < self._level:
            return

        formatted = self._format_message(level, sep.join(str(a) for a in args), extra)

        if self._file_handle:
            try:
                self._file_handle.write(formatted + "\n")
                self._file_handle.flush()
            except OSError:
                pass

        if self._can_write_console():
            try:
                sys.stderr.write(formatted + "\n")
                sys.stderr.flush()
            except (OSError, ValueError):
                # Never raise from logging
                pass

    def debug(self, *args: Any, **kwargs) -> None:
        self._write(LogLevel.DEBUG, *args, **kwargs)

    def info(self, *args: Any, **kwargs) -> None:
        self._write(LogLevel.INFO, *args, **kwargs)

    def warn(self, *args: Any, **kwargs) -> None:
        self._write(LogLevel.WARN, *args, **kwargs)

    def warning(self, *args: Any, **kwargs) -> None:
        """Alias for warn()."""
        self.warn(*args, **kwargs)

    def error(self, *args: Any, **kwargs) -> None:
        self._write(LogLevel.ERROR, *args, **kwargs)

    def critical(self, *args: Any, **kwargs) -> None:
        self._write(LogLevel.CRITICAL, *args, **kwargs)

    def __call__(self, *args: Any, sep: str = " ") -> None:
        """Legacy call style - log at INFO level."""
        self.info(*args, sep=sep)


# Singleton logger instance
log = Logger()
