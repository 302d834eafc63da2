"""LeanSpec exceptions."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class LeanSpecError(Exception):
    """Base exception for LeanSpec errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(LeanSpecError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column
        self.cause: Exception | None = cause


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Spec Exceptions
# =============================================================================


class SpecError(LeanSpecError):
    """Base exception for specification errors."""


class SpecIOError(SpecError):
    """Raised when a specification file cannot be read or written.

    Attributes:
        path: The file path involved in the failed operation.
        operation: The operation that failed (e.g., 'read', 'write').
        cause: The underlying exception.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        operation: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and I/O context.

        Args:
            message: Human-readable error message.
            path: The file path involved in the failed operation.
            operation: The operation that failed.
            cause: The underlying exception.
        """
        super().__init__(message)
        self.path: Path | None = path
        self.operation: str | None = operation
        self.cause: Exception | None = cause


class SpecWriteError(SpecIOError):
    """Raised when an atomic write fails.

    The target file is left in its prior state when this is raised.
    """


class SpecParseError(SpecError):
    """Raised when a specification document cannot be parsed.

    Attributes:
        path: The file path of the document, if known.
        line: The line number of the error, if known.
        content_type: The kind of content being parsed (e.g., 'frontmatter').
        cause: The underlying exception.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        content_type: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and parse context.

        Args:
            message: Human-readable error message.
            path: The file path of the document, if known.
            line: The line number of the error, if known.
            content_type: The kind of content being parsed.
            cause: The underlying exception.
        """
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.content_type: str | None = content_type
        self.cause: Exception | None = cause


class SpecNotFoundError(SpecError, KeyError):
    """Raised when a specification cannot be found.

    Attributes:
        spec_id: The ID of the specification that was not found.
    """

    def __init__(self, message: str, *, spec_id: str | None = None) -> None:
        """Initialize with error message and spec context.

        Args:
            message: Human-readable error message.
            spec_id: The ID of the specification that was not found.
        """
        super().__init__(message)
        self.spec_id: str | None = spec_id

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class SpecValidationError(SpecError, ValueError):
    """Raised when specification validation fails.

    Attributes:
        spec_id: The ID of the specification that failed validation.
        field: The field that failed validation.
        value: The invalid value.
        expected: Description of what was expected.
    """

    def __init__(
        self,
        message: str,
        *,
        spec_id: str | None = None,
        field: str | None = None,
        value: Any = None,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str | None = None,
    ) -> None:
        """Initialize with error message and validation context.

        Args:
            message: Human-readable error message.
            spec_id: The ID of the specification that failed validation.
            field: The field that failed validation.
            value: The invalid value.
            expected: Description of what was expected.
        """
        super().__init__(message)
        self.spec_id: str | None = spec_id
        self.field: str | None = field
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str | None = expected


class DuplicateIdError(SpecError, ValueError):
    """Raised when a duplicate ID is detected.

    Attributes:
        entity_id: The ID that already exists.
        entity_type: The type of entity (e.g., 'spec').
    """

    def __init__(
        self,
        message: str,
        *,
        entity_id: str,
        entity_type: str | None = None,
    ) -> None:
        """Initialize with error message and duplicate context.

        Args:
            message: Human-readable error message.
            entity_id: The ID that already exists.
            entity_type: The type of entity (e.g., 'spec').
        """
        super().__init__(message)
        self.entity_id: str = entity_id
        self.entity_type: str | None = entity_type


class CircularDependencyError(SpecError, ValueError):
    """Raised when a new dependency would create a cycle.

    Attributes:
        cycle: List of spec IDs forming the circular dependency.
    """

    def __init__(
        self,
        message: str,
        *,
        cycle: list[str] | None = None,
    ) -> None:
        """Initialize with error message and cycle context.

        Args:
            message: Human-readable error message.
            cycle: List of spec IDs forming the circular dependency.
        """
        super().__init__(message)
        self.cycle: list[str] | None = cycle
