"""Utility functions for hookfacts."""

from ._exec import (
    MAX_OUTPUT_BYTES,
    CommandResult,
    Executor,
    ProcessExecutor,
    build_command,
    truncate_output,
)
from ._lazy import AsyncLazy, LazyState
from ._logging import LogFormatType, create_logger, create_null_logger

__all__ = [
    "MAX_OUTPUT_BYTES",
    "AsyncLazy",
    "CommandResult",
    "Executor",
    "LazyState",
    "LogFormatType",
    "ProcessExecutor",
    "build_command",
    "create_logger",
    "create_null_logger",
    "truncate_output",
]
