"""Logging configuration utilities for struct menus."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


DEFAULT_LOG_FILENAME = "structmenu.log"
DEFAULT_MAX_BYTES = 1024 * 1024
DEFAULT_BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

ANSI_RESET = "\x1b[0m"
ANSI_COLORS = {
    logging.DEBUG: "\x1b[36m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[35m",
}


class ColorFormatter(logging.Formatter):
    """Formatter that adds ANSI colors to log levels."""

    def __init__(self, fmt: str, use_color: bool = True) -> None:
        super().__init__(fmt)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with color if enabled.

        Args:
            record: The log record to format.

        Returns:
            The formatted log message.
        """
        original_levelname = record.levelname
        if self._use_color:
            color = ANSI_COLORS.get(record.levelno)
            if color:
                record.levelname = f"{color}{record.levelname}{ANSI_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def configure_logging(
    log_file: Path | None = None,
    debug: bool = False,
    use_stream: bool = False,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> Path | None:
    """Configure root logging for a menu session.

    A full-screen menu owns the terminal, so the stream handler is off by
    default and records go to the rotating log file only.

    Args:
        log_file: Log file path, or None to skip file logging.
        debug: Whether to enable debug-level logging.
        use_stream: Also log to stderr.
        max_bytes: Maximum size of a log file before rotation.

    Returns:
        The path to the active log file, if any.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    handlers: list[logging.Handler] = []

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=DEFAULT_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    if use_stream:
        stream_handler = logging.StreamHandler()
        stream_supports_color = False
        if hasattr(stream_handler.stream, "isatty"):
            stream_supports_color = stream_handler.stream.isatty()
        stream_handler.setFormatter(
            ColorFormatter(LOG_FORMAT, use_color=stream_supports_color)
        )
        stream_handler.setLevel(log_level)
        handlers.append(stream_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    if handlers:
        for handler in handlers:
            root_logger.addHandler(handler)
    else:
        root_logger.addHandler(logging.NullHandler())

    # prompt_toolkit logs input parsing at debug level.
    logging.getLogger("prompt_toolkit").setLevel(logging.WARNING)

    return log_file
