"""hookfacts exceptions."""

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hookfacts.git._queries import GitQuery


class HookfactsError(Exception):
    """Base exception for hookfacts errors."""


# =============================================================================
# Execution Exceptions
# =============================================================================


class ExecError(HookfactsError):
    """Base exception for external command execution errors."""


class ExitCodeError(ExecError):
    """Raised when an external command exits with a non-zero status.

    Attributes:
        exit_code: The exit status reported by the process.
        stderr: Captured standard error, if any.
    """

    def __init__(self, exit_code: int, *, stderr: str = "") -> None:
        """Initialize with the exit status and captured standard error.

        Args:
            exit_code: The non-zero exit status.
            stderr: Captured standard error text.
        """
        super().__init__(f"Exit code: {exit_code}")
        self.exit_code: int = exit_code
        self.stderr: str = stderr


class CommandTimeoutError(ExecError):
    """Raised when an external command does not finish in time."""

    def __init__(self, message: str, *, timeout_ms: int) -> None:
        """Initialize with error message and the timeout that was exceeded."""
        super().__init__(message)
        self.timeout_ms: int = timeout_ms


# =============================================================================
# Git Exceptions
# =============================================================================


class GitQueryError(HookfactsError):
    """Raised when a repository fact cannot be computed.

    Attributes:
        query: The query that failed.
        cause: The underlying error (non-zero exit or launch failure).
    """

    def __init__(
        self,
        message: str,
        *,
        query: "GitQuery",  # noqa: UP037
        cause: BaseException,
    ) -> None:
        """Initialize with error message, failed query and inner cause.

        Args:
            message: Human-readable error message.
            query: The query that failed.
            cause: The underlying error.
        """
        super().__init__(message)
        self.query: "GitQuery" = query  # noqa: UP037
        self.cause: BaseException = cause


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(HookfactsError):
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
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.source: str | None = source
