"""Configuration for LeanSpec."""

from ._loader import deep_merge, parse_env_vars, parse_string_value, read_toml_file
from ._models import (
    CONFIG_FILENAME,
    Config,
    GraphConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "GraphConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "deep_merge",
    "parse_env_vars",
    "parse_string_value",
    "read_toml_file",
]
