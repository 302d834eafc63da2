# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models for LeanSpec.

All models are frozen Pydantic models. Unknown keys are ignored so a
configuration file can carry settings for other tools.
"""

from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from leanspec.exceptions import ConfigValidationError

from ._loader import deep_merge, parse_env_vars, read_toml_file

if TYPE_CHECKING:
    from typing import Self

CONFIG_FILENAME: Final = "leanspec.toml"


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty logs to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""


class GraphConfig(BaseModel):
    """Relationship graph query settings."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    default_depth: int = Field(
        default=3, ge=0, description="Default traversal depth for graph queries."
    )
    include_archived: bool = Field(
        default=False, description="Traverse archived specs by default."
    )


class Config(BaseModel):
    """LeanSpec configuration.

    Attributes:
        specs_dir: Corpus root, relative to the project root.
        readme: File name of the document inside each spec directory.
        graph: Graph query settings.
        logging: Logging settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    specs_dir: str = Field(default="specs", min_length=1, description="Corpus root.")
    readme: str = Field(
        default="README.md", min_length=1, description="Spec document file name."
    )
    graph: GraphConfig = Field(default_factory=GraphConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # ----- Construction -----

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, source: str | None = None) -> Self:
        """Build a configuration from a dictionary.

        Args:
            data: Raw configuration values.
            source: Where the values came from, for error context.

        Returns:
            The validated configuration.

        Raises:
            ConfigValidationError: If a value fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"])
            msg = f"Invalid configuration value for '{key}': {error['msg']}"
            raise ConfigValidationError(
                msg,
                key=key,
                value=error.get("input"),
                expected=error["type"],
                source=source,
            ) from e

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a TOML file.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed.
            ConfigValidationError: If a value fails validation.
        """
        return cls.from_dict(read_toml_file(path), source=str(path))

    @classmethod
    def load(cls, project_root: Path | None = None, *, include_env: bool = True) -> Self:
        """Load configuration for a project.

        Reads ``leanspec.toml`` from the project root when present, then
        applies ``LEANSPEC_*`` environment variable overrides.

        Args:
            project_root: Project directory (defaults to the working directory).
            include_env: Whether to apply environment variable overrides.

        Returns:
            The validated configuration.

        Raises:
            ConfigLoadError: If the config file cannot be read or parsed.
            ConfigValidationError: If a value fails validation.
        """
        root = project_root if project_root is not None else Path.cwd()
        config_path = root / CONFIG_FILENAME

        data: dict[str, Any] = {}
        source = "default"
        if config_path.is_file():
            data = read_toml_file(config_path)
            source = str(config_path)
        if include_env:
            env_data = parse_env_vars()
            if env_data:
                data = deep_merge(data, env_data)
                source = "env"
        return cls.from_dict(data, source=source)

    # ----- Accessors -----

    def specs_path(self, project_root: Path) -> Path:
        """Resolve the corpus root against a project directory."""
        return project_root / self.specs_dir
