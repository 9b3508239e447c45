"""Compute-once async values.

This module provides AsyncLazy, a single-flight cache around a no-argument
async factory. The first awaiter runs the factory; every other awaiter,
concurrent or later, receives the same value or the same exception.
"""

from collections.abc import Awaitable, Callable, Generator
from enum import StrEnum
from typing import cast, final

import anyio


class LazyState(StrEnum):
    """Lifecycle of an AsyncLazy value."""

    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


@final
class AsyncLazy[T]:
    """Lazily computed async value shared by all awaiters.

    The factory runs at most once per successful or failed attempt. A failure
    (any ``Exception``) is cached like a value: later awaits re-raise the same
    exception instead of running the factory again.

    The factory runs in a shielded cancel scope, so anyio-level cancellation of
    the awaiter that started it does not abort the computation. Cancellation
    that still reaches the factory, such as a native ``task.cancel()`` or
    ``asyncio.wait_for`` timeout, or any other ``BaseException``, is not
    cached: the value goes back to pending, the error propagates to the
    starter, and the next awaiter (including woken waiters) starts a new run.

    Example:
        >>> lazy = AsyncLazy(fetch_branch)
        >>> branch = await lazy
        >>> branch is await lazy.get()
        True
    """

    __slots__ = ("_error", "_event", "_factory", "_state", "_value")

    def __init__(self, factory: Callable[[], Awaitable[T]]) -> None:
        """Initialize with the factory that produces the value.

        Args:
            factory: No-argument async callable.
        """
        self._factory = factory
        self._state = LazyState.PENDING
        self._event: anyio.Event | None = None
        self._value: T | None = None
        self._error: Exception | None = None

    @property
    def state(self) -> LazyState:
        """Return the current lifecycle state."""
        return self._state

    @property
    def started(self) -> bool:
        """Return True while the factory runs or once it has finished."""
        return self._state is not LazyState.PENDING

    @property
    def done(self) -> bool:
        """Return True once a value or an error has been stored."""
        return self._state in (LazyState.DONE, LazyState.FAILED)

    def __await__(self) -> Generator[object, None, T]:
        return self.get().__await__()

    async def get(self) -> T:
        """Return the value, computing it on first use.

        Returns:
            The value produced by the factory.

        Raises:
            Exception: Whatever the factory raised, on this and every later call.
        """
        while True:
            if self._state is LazyState.PENDING:
                # Check and transition happen with no checkpoint in between
                self._state = LazyState.RUNNING
                event = self._event = anyio.Event()
                with anyio.CancelScope(shield=True):
                    await self._run(event)
            elif self._state is LazyState.RUNNING:
                await cast("anyio.Event", self._event).wait()
                # The run may have been interrupted and reset to pending
                continue

            return self._result()

    async def _run(self, event: anyio.Event) -> None:
        try:
            self._value = await self._factory()
        except Exception as e:
            self._error = e
            self._state = LazyState.FAILED
        except BaseException:
            self._state = LazyState.PENDING
            self._event = None
            raise
        else:
            self._state = LazyState.DONE
        finally:
            event.set()

    def _result(self) -> T:
        if self._error is not None:
            raise self._error
        return cast("T", self._value)
