"""Cached repository facts.

This module provides GitRepository, which answers a fixed set of questions
about the current repository by running git once per question and sharing
the answer with every later caller.
"""

from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TYPE_CHECKING, final

from hookfacts.exceptions import ExitCodeError, GitQueryError
from hookfacts.utils import (
    AsyncLazy,
    CommandResult,
    Executor,
    ProcessExecutor,
    create_null_logger,
    truncate_output,
)

from ._queries import GitQuery, split_lines, trim_output

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


@final
class GitRepository:
    """Repository query cache.

    Each accessor runs git on first use and memoizes the shaped output.
    Concurrent callers share one subprocess. A failed query stays failed
    for the lifetime of the instance.

    Attributes:
        executable: Name or path of the git executable.
        cwd: Working directory git runs in, or None for the current directory.
    """

    __slots__ = (
        "_current_branch",
        "_executor",
        "_git_dir_relative_path",
        "_git_path",
        "_hooks_path",
        "_last_commit_files",
        "_logger",
        "_staged_files",
        "_tracked_files",
        "cwd",
        "executable",
    )

    def __init__(
        self,
        executor: Executor | None = None,
        *,
        executable: str = "git",
        cwd: str | Path | None = None,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the cache. No process is started until first access.

        Args:
            executor: Process executor (defaults to ProcessExecutor).
            executable: Name or path of the git executable.
            cwd: Working directory for git, or None for the current directory.
            logger: Logger for query diagnostics (defaults to a null logger).
        """
        self._executor: Executor = (
            executor if executor is not None else ProcessExecutor()
        )
        self.executable = executable
        self.cwd = cwd
        self._logger = logger if logger is not None else create_null_logger()

        self._git_path = AsyncLazy(self._text_query(GitQuery.GIT_PATH))
        self._git_dir_relative_path = AsyncLazy(self._text_query(GitQuery.GIT_DIR))
        self._current_branch = AsyncLazy(self._text_query(GitQuery.CURRENT_BRANCH))
        self._hooks_path = AsyncLazy(self._text_query(GitQuery.HOOKS_PATH))
        self._staged_files = AsyncLazy(self._list_query(GitQuery.STAGED_FILES))
        self._last_commit_files = AsyncLazy(
            self._list_query(GitQuery.LAST_COMMIT_FILES)
        )
        self._tracked_files = AsyncLazy(self._list_query(GitQuery.TRACKED_FILES))

    async def get_git_path(self) -> str:
        """Return the absolute path of the repository's top-level directory."""
        return await self._git_path

    async def get_git_dir_relative_path(self) -> str:
        """Return the path of the .git directory relative to the working directory."""
        return await self._git_dir_relative_path

    async def get_current_branch(self) -> str:
        """Return the checked-out branch name (empty when HEAD is detached)."""
        return await self._current_branch

    async def get_hooks_path(self) -> str:
        """Return the configured core.hooksPath value."""
        return await self._hooks_path

    async def get_staged_files(self) -> tuple[str, ...]:
        """Return staged paths, excluding deletions."""
        return await self._staged_files

    async def get_last_commit_files(self) -> tuple[str, ...]:
        """Return paths changed since the previous commit, excluding deletions."""
        return await self._last_commit_files

    async def get_tracked_files(self) -> tuple[str, ...]:
        """Return every path tracked by git."""
        return await self._tracked_files

    async def exec(self, args: str) -> int:
        """Run git with inherited console I/O. Not cached.

        Args:
            args: Git argument string.

        Returns:
            The git exit code.
        """
        return await self._executor.exec_direct(self.executable, args, cwd=self.cwd)

    async def exec_buffered(self, args: str) -> CommandResult:
        """Run git and capture its output. Not cached.

        Args:
            args: Git argument string.

        Returns:
            CommandResult with exit code and output.
        """
        return await self._executor.exec_buffered(self.executable, args, cwd=self.cwd)

    def _text_query(self, query: GitQuery) -> Callable[[], Awaitable[str]]:
        async def run() -> str:
            return trim_output(await self._run_query(query))

        return run

    def _list_query(self, query: GitQuery) -> Callable[[], Awaitable[tuple[str, ...]]]:
        async def run() -> tuple[str, ...]:
            return split_lines(await self._run_query(query))

        return run

    async def _run_query(self, query: GitQuery) -> str:
        """Run the query's git command and return its raw standard output.

        Raises:
            GitQueryError: If git exits non-zero, times out, cannot be launched
                or the executor fails in any other way.
        """
        log = self._logger.bind(query=query.value, args=query.args)
        log.debug("git_query_started")

        try:
            result = await self.exec_buffered(query.args)
            if result.exit_code != 0:
                raise ExitCodeError(result.exit_code, stderr=result.stderr)
        except Exception as e:
            stderr = e.stderr if isinstance(e, ExitCodeError) else ""
            log.debug(
                "git_query_failed",
                error=str(e),
                error_type=type(e).__name__,
                stderr=truncate_output(stderr),
            )
            raise GitQueryError(query.error_message, query=query, cause=e) from e

        log.debug("git_query_completed", exit_code=result.exit_code)
        return result.stdout
