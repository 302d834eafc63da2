"""Utility helpers for LeanSpec."""

from ._logging import (
    LogFormatType,
    create_logger,
    create_logger_from_config,
    get_logger,
)

__all__ = [
    "LogFormatType",
    "create_logger",
    "create_logger_from_config",
    "get_logger",
]
