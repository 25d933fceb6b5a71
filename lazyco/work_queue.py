"""Per-worker work queues with stealing and sleep/wake signalling."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque, Optional

POINTER_SIZE = 8
# Keep each worker's local queue under 1MB of slots.
MAX_LOCAL_QUEUE_SIZE = 1024 * 1024 // POINTER_SIZE
INITIAL_LOCAL_QUEUE_SIZE = 256


class WorkerState:
    """The state a pool keeps for one worker thread.

    The owning worker pushes and pops operations at the head of its local
    queue (newest first); other workers steal from the tail (oldest first).
    The local queue grows by doubling up to ``MAX_LOCAL_QUEUE_SIZE`` slots and
    always keeps one slot free.  The state also carries the worker's
    sleeping flag and the signal used to wake it.
    """

    def __init__(self) -> None:
        self._queue: Deque[Any] = deque()
        self._buffer_size = INITIAL_LOCAL_QUEUE_SIZE
        self._remote_lock = threading.Lock()
        self._wake = threading.Condition(threading.Lock())
        self._is_sleeping = False
        self._signalled = False

    @property
    def capacity(self) -> int:
        """The current size of the local buffer, in slots."""
        return self._buffer_size

    def __len__(self) -> int:
        return len(self._queue)

    def try_local_enqueue(self, operation: Any) -> bool:
        """Push ``operation`` onto the local queue.

        Returns False if the queue is full and cannot grow, or if growing it
        would mean waiting for a thief to finish; the caller should then
        queue the operation elsewhere.
        """
        if len(self._queue) < self._buffer_size - 1:
            self._queue.append(operation)
            return True
        if self._buffer_size >= MAX_LOCAL_QUEUE_SIZE:
            return False
        if not self._remote_lock.acquire(blocking=False):
            return False
        try:
            self._buffer_size *= 2
            self._queue.append(operation)
        finally:
            self._remote_lock.release()
        return True

    def try_local_pop(self) -> Optional[Any]:
        """Take the newest operation from the local queue, or None if it is empty."""
        try:
            return self._queue.pop()
        except IndexError:
            return None

    def try_steal(self, blocking: bool = True) -> Optional[Any]:
        """Take the oldest operation from the queue, or None if it is empty.

        With ``blocking`` false, raises BlockingIOError instead of waiting
        when another thread is already stealing from this queue.
        """
        if not self._remote_lock.acquire(blocking=blocking):
            raise BlockingIOError("work queue is busy")
        try:
            return self._queue.popleft()
        except IndexError:
            return None
        finally:
            self._remote_lock.release()

    def has_any_queued_work(self) -> bool:
        """True if the queue holds work, checked while excluding thieves."""
        with self._remote_lock:
            return bool(self._queue)

    def approx_has_any_queued_work(self) -> bool:
        """A cheap check for queued work that may be momentarily out of date."""
        return bool(self._queue)

    def try_wake_up(self) -> bool:
        """Wake the worker if it announced it would sleep.

        Returns True if this call is the one that woke it.
        """
        with self._wake:
            if not self._is_sleeping:
                return False
            self._is_sleeping = False
            self._signalled = True
            self._wake.notify()
            return True

    def notify_intent_to_sleep(self) -> None:
        """Announce that the worker is about to sleep."""
        with self._wake:
            self._is_sleeping = True

    def sleep_until_woken(self, timeout: Optional[float] = None) -> bool:
        """Block until woken or until ``timeout`` seconds pass.

        Consumes the wake-up signal.  Returns True if a signal was received.
        """
        with self._wake:
            woken = self._wake.wait_for(lambda: self._signalled, timeout)
            self._signalled = False
            return bool(woken)