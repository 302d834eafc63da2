"""Logging utilities for LeanSpec.

This module provides standalone structlog logger factories that write
JSON-formatted or text-formatted logs to a file or to stderr. Each logger is
self-contained and does not modify global structlog configuration.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from leanspec.config import LoggingConfig

LogFormatType = Literal["json", "text"]

LOGGER_NAME = "leanspec"


def _get_log_level() -> int:
    """Get the log level from environment variables.

    Checks LEANSPEC_DEBUG first (sets DEBUG if present), then
    LEANSPEC_LOG_LEVEL. Defaults to INFO if neither is set.

    Returns:
        The logging level as an integer.
    """
    if getenv("LEANSPEC_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(getenv("LEANSPEC_LOG_LEVEL", "info").upper(), logging.INFO)


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        respect_env: If True, LEANSPEC_DEBUG overrides to DEBUG level.

    Returns:
        The logging level as an integer.
    """
    if respect_env and getenv("LEANSPEC_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def create_logger(
    level: str | None = None,
    *,
    log_format: LogFormatType = "json",
    log_file: str = "",
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> FilteringBoundLogger:
    """Create a standalone structlog logger.

    The log level is determined by (in order of precedence):
    1. LEANSPEC_DEBUG environment variable (if set, enables DEBUG level)
    2. The `level` parameter (if provided)
    3. LEANSPEC_LOG_LEVEL environment variable
    4. Default: INFO

    Args:
        level: Optional log level string (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to the log file (opened in append mode). Logs go to
            stderr when empty.
        max_bytes: Maximum size in bytes before rotation. Must be set with
            backup_count (and a log file) for rotation to be enabled.
        backup_count: Number of rotated log files to keep.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    if level is not None:
        effective_level = _log_level_from_string(level, respect_env=True)
    else:
        effective_level = _get_log_level()

    raw_logger: object
    if log_file and max_bytes is not None and backup_count is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Use stdlib logging with RotatingFileHandler for proper rotation support
        stdlib_logger = logging.getLogger(f"{LOGGER_NAME}.{log_path.stem}.{id(log_path)}")
        stdlib_logger.handlers.clear()
        stdlib_logger.propagate = False
        stdlib_logger.setLevel(effective_level)

        handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        handler.setLevel(effective_level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        stdlib_logger.addHandler(handler)
        raw_logger = stdlib_logger
    elif log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        raw_logger = structlog.WriteLoggerFactory(file=log_path.open("a"))()
    else:
        raw_logger = structlog.WriteLoggerFactory(file=sys.stderr)()

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(effective_level)

    # wrap_logger builds a standalone logger without touching global config
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw_logger,
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )


def create_logger_from_config(config: LoggingConfig) -> FilteringBoundLogger:
    """Create a logger from a logging configuration section."""
    return create_logger(
        config.level.value,
        log_format=config.format.value,
        log_file=config.file,
    )


def get_logger() -> FilteringBoundLogger:
    """Return the package logger used when no logger is injected.

    The returned logger follows the global structlog configuration of the
    host application.
    """
    return cast("FilteringBoundLogger", structlog.get_logger(LOGGER_NAME))
