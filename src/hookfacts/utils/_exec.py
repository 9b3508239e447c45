"""Execution utilities for external commands.

This module provides async helpers for running an executable with an argument
string, either buffered (output captured for parsing) or direct (console I/O
inherited so output streams live).
"""

import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, final

import anyio

from hookfacts.exceptions import CommandTimeoutError

# Maximum output size in bytes kept for diagnostics
MAX_OUTPUT_BYTES: int = 102400  # 100KB


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result from a buffered command execution.

    Attributes:
        exit_code: Process exit code.
        stdout: Standard output from the command.
        stderr: Standard error from the command.
    """

    exit_code: int
    stdout: str = ""
    stderr: str = ""


class Executor(Protocol):
    """Runs an executable with an argument string."""

    async def exec_buffered(
        self,
        executable: str,
        args: str,
        *,
        cwd: str | Path | None = None,
    ) -> CommandResult:
        """Run a command and capture its output."""
        ...

    async def exec_direct(
        self,
        executable: str,
        args: str,
        *,
        cwd: str | Path | None = None,
    ) -> int:
        """Run a command with inherited console I/O and return its exit code."""
        ...


def truncate_output(output: str, max_bytes: int = MAX_OUTPUT_BYTES) -> str:
    """Truncate output to max bytes, preserving valid UTF-8.

    Args:
        output: The string to truncate.
        max_bytes: Maximum size in bytes.

    Returns:
        Truncated string with indicator if truncated.
    """
    if not output:
        return output

    encoded = output.encode("utf-8")
    if len(encoded) <= max_bytes:
        return output

    # Drop any multi-byte sequence cut in half at the boundary
    truncated = encoded[:max_bytes].decode("utf-8", errors="ignore")

    return truncated + "\n... [output truncated]"


def build_command(executable: str, args: str) -> list[str]:
    """Build the argument vector for an executable and an argument string.

    Args:
        executable: Name or path of the executable.
        args: Argument string, split with shell-like quoting rules.

    Returns:
        The full command list.
    """
    return [executable, *shlex.split(args)]


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


@final
class ProcessExecutor:
    """Executor backed by real subprocesses.

    Launch failures (missing executable, permission denied) propagate as
    OSError. A non-zero exit is reported in the result, not raised.

    Attributes:
        timeout_ms: Per-command timeout in milliseconds, 0 for none.
    """

    __slots__ = ("_env", "timeout_ms")

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        timeout_ms: int = 0,
    ) -> None:
        """Initialize the executor.

        Args:
            env: Additional environment variables layered over os.environ.
            timeout_ms: Per-command timeout in milliseconds, 0 for none.
        """
        self._env: dict[str, str] = dict(env) if env else {}
        self.timeout_ms = timeout_ms

    def _build_env(self) -> dict[str, str] | None:
        if not self._env:
            return None
        return {**os.environ, **self._env}

    def _deadline(self) -> float | None:
        return self.timeout_ms / 1000.0 if self.timeout_ms > 0 else None

    def _timeout_error(self, command: list[str]) -> CommandTimeoutError:
        msg = f"Command timed out after {self.timeout_ms}ms: {shlex.join(command)}"
        return CommandTimeoutError(msg, timeout_ms=self.timeout_ms)

    async def exec_buffered(
        self,
        executable: str,
        args: str,
        *,
        cwd: str | Path | None = None,
    ) -> CommandResult:
        """Run a command and capture its output.

        Args:
            executable: Name or path of the executable.
            args: Argument string.
            cwd: Working directory, or None for the current directory.

        Returns:
            CommandResult with exit code and decoded output.

        Raises:
            OSError: If the process cannot be launched.
            CommandTimeoutError: If the timeout elapses first.
        """
        command = build_command(executable, args)
        try:
            with anyio.fail_after(self._deadline()):
                completed = await anyio.run_process(
                    command,
                    cwd=cwd,
                    env=self._build_env(),
                    check=False,
                )
        except TimeoutError as e:
            raise self._timeout_error(command) from e

        return CommandResult(
            exit_code=completed.returncode,
            stdout=_decode(completed.stdout),
            stderr=_decode(completed.stderr),
        )

    async def exec_direct(
        self,
        executable: str,
        args: str,
        *,
        cwd: str | Path | None = None,
    ) -> int:
        """Run a command with inherited stdin, stdout and stderr.

        Args:
            executable: Name or path of the executable.
            args: Argument string.
            cwd: Working directory, or None for the current directory.

        Returns:
            The process exit code.

        Raises:
            OSError: If the process cannot be launched.
            CommandTimeoutError: If the timeout elapses first.
        """
        command = build_command(executable, args)
        try:
            with anyio.fail_after(self._deadline()):
                async with await anyio.open_process(
                    command,
                    stdin=None,
                    stdout=None,
                    stderr=None,
                    cwd=cwd,
                    env=self._build_env(),
                ) as process:
                    return await process.wait()
        except TimeoutError as e:
            raise self._timeout_error(command) from e
