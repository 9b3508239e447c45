"""Per-process context shared by hook runs."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hookfacts.config import Config
from hookfacts.git import GitRepository
from hookfacts.utils import Executor, ProcessExecutor, create_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


@dataclass(frozen=True, slots=True)
class HookContext:
    """Objects a hooks run needs, created once at process start.

    Attributes:
        config: Loaded configuration.
        logger: Logger configured from the logging section.
        git: Repository query cache shared by every consumer in the process.
    """

    config: Config
    logger: "FilteringBoundLogger"  # noqa: UP037
    git: GitRepository


def create_context(
    config: Config | None = None,
    *,
    executor: Executor | None = None,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> HookContext:
    """Build the context for one process.

    Args:
        config: Configuration to use (defaults to Config.load()).
        executor: Process executor (defaults to a ProcessExecutor honoring
            git.timeout_ms).
        logger: Logger to use (defaults to one built from config.logging).

    Returns:
        A new HookContext.
    """
    if config is None:
        config = Config.load()

    if logger is None:
        logger = create_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,
            log_file=config.logging.file,
        )

    if executor is None:
        executor = ProcessExecutor(timeout_ms=config.git.timeout_ms)

    git = GitRepository(
        executor,
        executable=config.git.executable,
        cwd=config.git.cwd or None,
        logger=logger,
    )
    return HookContext(config=config, logger=logger, git=git)
