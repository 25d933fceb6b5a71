"""An awaitable auto-reset event for coordinating coroutines."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable, Deque, Generator

from lazyco.awaitable import Suspend


class AsyncAutoResetEvent:
    """An event that lets one awaiting coroutine through per ``set()``.

    Awaiting an event that is set resets it and continues without
    suspending.  Otherwise the awaiting coroutine is suspended until some
    thread calls ``set()``.  A ``set()`` resumes exactly one waiter, oldest
    first, and leaves the event not set.  The waiter may be resumed inside
    the call to ``set()``.
    """

    __slots__ = ("_lock", "_is_set", "_waiters")

    def __init__(self, initially_set: bool = False) -> None:
        self._lock = threading.Lock()
        self._is_set = bool(initially_set)
        self._waiters: Deque[Callable[..., None]] = deque()

    def set(self) -> None:
        """Put the event in the 'set' state, or resume one waiter if there is one.

        Does nothing if the event is already set.
        """
        with self._lock:
            if not self._waiters:
                self._is_set = True
                return
            resume = self._waiters.popleft()
        resume()

    def reset(self) -> None:
        """Put the event in the 'not set' state; does nothing if it is not set."""
        with self._lock:
            self._is_set = False

    def _try_wait(self, resume: Callable[..., None]) -> bool:
        with self._lock:
            if self._is_set:
                self._is_set = False
                return False
            self._waiters.append(resume)
            return True

    def __await__(self) -> Generator[Any, Any, None]:
        yield from Suspend(self._try_wait).__await__()

    def __repr__(self) -> str:
        state = "set" if self._is_set else "not set"
        return f"<AsyncAutoResetEvent {state}, {len(self._waiters)} waiting>"