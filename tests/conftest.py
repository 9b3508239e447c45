"""Shared test fixtures for hookfacts tests."""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

import anyio
import pytest

from hookfacts.utils import CommandResult


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@dataclass(slots=True)
class FakeExecutor:
    """Executor that answers from a table and counts invocations.

    Attributes:
        results: Canned result per argument string. Missing entries return
            exit code 0 with empty output.
        errors: Exception raised per argument string instead of a result.
        delay: Seconds to sleep before answering, so concurrent callers
            overlap with an in-flight invocation.
        calls: Number of buffered invocations per argument string.
        direct_calls: Argument strings passed to exec_direct, in order.
    """

    results: dict[str, CommandResult] = field(default_factory=dict)
    errors: dict[str, BaseException] = field(default_factory=dict)
    delay: float = 0.0
    direct_exit_code: int = 0
    calls: Counter[str] = field(default_factory=Counter)
    direct_calls: list[str] = field(default_factory=list)
    cwds: list[str | Path | None] = field(default_factory=list)
    executables: list[str] = field(default_factory=list)

    def set_stdout(self, args: str, stdout: str) -> None:
        self.results[args] = CommandResult(exit_code=0, stdout=stdout)

    def set_exit_code(self, args: str, exit_code: int, stderr: str = "") -> None:
        self.results[args] = CommandResult(exit_code=exit_code, stderr=stderr)

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    async def exec_buffered(
        self,
        executable: str,
        args: str,
        *,
        cwd: str | Path | None = None,
    ) -> CommandResult:
        self.calls[args] += 1
        self.executables.append(executable)
        self.cwds.append(cwd)
        if self.delay:
            await anyio.sleep(self.delay)
        if args in self.errors:
            raise self.errors[args]
        return self.results.get(args, CommandResult(exit_code=0))

    async def exec_direct(
        self,
        executable: str,
        args: str,
        *,
        cwd: str | Path | None = None,
    ) -> int:
        self.direct_calls.append(args)
        self.executables.append(executable)
        self.cwds.append(cwd)
        return self.direct_exit_code


@pytest.fixture
def fake_executor() -> FakeExecutor:
    """Create a FakeExecutor with no canned results."""
    return FakeExecutor()
