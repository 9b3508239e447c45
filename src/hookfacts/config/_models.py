# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module provides the Pydantic models for hookfacts configuration and the
Config container that loads them from defaults, TOML files and the
environment.
"""

from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hookfacts.config._defaults import DEFAULT_CONFIG
from hookfacts.config._loader import deep_merge, parse_env_vars, read_toml_file
from hookfacts.exceptions import ConfigValidationError


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


class GitConfig(BaseModel):
    """Git execution settings.

    Attributes:
        executable: Name or path of the git executable.
        cwd: Directory git runs in (empty means the current directory).
        timeout_ms: Per-command timeout in milliseconds (0 disables it).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", coerce_numbers_to_str=True
    )

    executable: str = Field(default="git", min_length=1)
    cwd: str = ""
    timeout_ms: int = Field(default=0, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty writes to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="ignore", coerce_numbers_to_str=True
    )

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods to create instances so that defaults are merged
    and validation errors are reported as ConfigValidationError.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    git: GitConfig = Field(default_factory=GitConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, source: str | None = None) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Args:
            data: Dictionary of configuration values.
            source: Description of where the values came from, for errors.

        Returns:
            Validated configuration object.

        Raises:
            ConfigValidationError: If a value is invalid.
        """
        merged = deep_merge(DEFAULT_CONFIG, data)
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"])
            msg = f"Invalid configuration value for '{key}': {error['msg']}"
            raise ConfigValidationError(
                msg,
                key=key,
                value=error.get("input"),
                source=source,
            ) from e

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a specific TOML file.

        Args:
            path: Path to the TOML config file.

        Returns:
            Configuration object from the file merged over the defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        return cls.from_dict(read_toml_file(path), source=str(path))

    @classmethod
    def load(
        cls,
        *,
        path: Path | None = None,
        include_env: bool = True,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in precedence order (defaults -> file -> env).

        Args:
            path: Optional TOML config file. Skipped if it does not exist.
            include_env: Include HOOKFACTS_ environment variables.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If the config file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        data: dict[str, Any] = {}
        sources: list[str] = []

        if path is not None and path.is_file():
            data = deep_merge(data, read_toml_file(path))
            sources.append(str(path))

        if include_env:
            env_data = parse_env_vars()
            if env_data:
                data = deep_merge(data, env_data)
                sources.append("env")

        return cls.from_dict(data, source=", ".join(sources) or None)
