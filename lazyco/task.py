"""Lazily started tasks and blocking waits on awaitables."""

from __future__ import annotations

import functools
import threading
from typing import Any, Awaitable, Callable, Coroutine, Generator, Generic, Optional, TypeVar

from lazyco.awaitable import Suspend, is_awaitable

T = TypeVar("T")


class BrokenPromise(RuntimeError):
    """Raised when awaiting a task that has no coroutine behind it."""

    def __init__(self, message: str = "broken promise") -> None:
        super().__init__(message)


class _WhenReady:
    """Awaits completion of a task without retrieving its result."""

    __slots__ = ("_task",)

    def __init__(self, task: Task[Any]) -> None:
        self._task = task

    def __await__(self) -> Generator[Any, Any, None]:
        task = self._task
        task._start()
        if not task.is_ready():
            yield from Suspend(task._try_set_continuation).__await__()


class Task(Generic[T]):
    """A lazily started operation that produces a result.

    The wrapped coroutine does not begin running until the task is first
    awaited (or passed to :func:`sync_wait`).  A task built without a
    coroutine raises :class:`BrokenPromise` when awaited.
    """

    def __init__(self, coroutine: Optional[Coroutine[Any, Any, T]] = None) -> None:
        self._coroutine = coroutine
        self._broken = coroutine is None
        self._lock = threading.Lock()
        self._started = False
        self._done = coroutine is None
        self._result: Any = None
        self._exception: Optional[BaseException] = None
        self._continuation: Optional[Callable[..., None]] = None

    def is_ready(self) -> bool:
        """True if awaiting the task would not suspend."""
        return self._done

    def when_ready(self) -> Awaitable[None]:
        """An awaitable that waits for completion without fetching the result."""
        return _WhenReady(self)

    def __await__(self) -> Generator[Any, Any, T]:
        yield from _WhenReady(self).__await__()
        return self._outcome()

    def __repr__(self) -> str:
        state = "ready" if self._done else ("running" if self._started else "pending")
        return f"<Task {state}>"

    def __del__(self) -> None:
        coroutine = getattr(self, "_coroutine", None)
        if coroutine is not None and not getattr(self, "_started", True):
            coroutine.close()

    def _start(self) -> None:
        with self._lock:
            if self._started or self._coroutine is None:
                return
            self._started = True
        self._step()

    def _step(self, value: Any = None) -> None:
        coroutine = self._coroutine
        advance: Callable[[Any], Any] = coroutine.send
        argument: Any = value
        while True:
            try:
                yielded = advance(argument)
            except StopIteration as stop:
                self._finish(stop.value, None)
                return
            except Exception as exc:
                self._finish(None, exc)
                return
            if not isinstance(yielded, Suspend):
                advance = coroutine.throw
                argument = TypeError(f"a task cannot await {yielded!r}")
                continue
            try:
                outcome = yielded.on_suspend(self._step)
            except Exception as exc:
                advance, argument = coroutine.throw, exc
                continue
            if outcome is not False:
                return
            advance, argument = coroutine.send, None

    def _finish(self, result: Any, exception: Optional[BaseException]) -> None:
        self._result = result
        self._exception = exception
        with self._lock:
            self._done = True
            continuation, self._continuation = self._continuation, None
        if continuation is not None:
            continuation()

    def _try_set_continuation(self, resume: Callable[..., None]) -> bool:
        with self._lock:
            if self._done:
                return False
            self._continuation = resume
            return True

    def _outcome(self) -> T:
        if self._broken:
            raise BrokenPromise()
        if self._exception is not None:
            raise self._exception
        return self._result


def task(func: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., Task[T]]:
    """Decorate an ``async def`` function so that calling it returns a lazy Task."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Task[T]:
        return Task(func(*args, **kwargs))

    return wrapper


def make_task(awaitable: Awaitable[T]) -> Task[T]:
    """Wrap any awaitable in a lazy Task that yields its result."""
    if not is_awaitable(awaitable):
        raise TypeError(f"object is not awaitable: {awaitable!r}")

    async def _await() -> T:
        return await awaitable

    return Task(_await())


def sync_wait(awaitable: Awaitable[T]) -> T:
    """Run ``awaitable`` to completion, blocking the calling thread, and return its result."""
    runner = awaitable if isinstance(awaitable, Task) else make_task(awaitable)
    finished = threading.Event()
    runner._start()
    if runner._try_set_continuation(lambda _value=None: finished.set()):
        finished.wait()
    return runner._outcome()