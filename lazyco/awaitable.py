"""The basic suspension primitive and awaitability checks."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Generator


class Suspend:
    """An awaitable that suspends the awaiting coroutine.

    When awaited, the coroutine driver calls ``on_suspend(resume)``.  The
    coroutine stays suspended until ``resume(value)`` is called, and the
    ``await`` expression then evaluates to ``value``.  If ``on_suspend``
    returns ``False`` the coroutine is not suspended and continues at once
    with the value ``None``.
    """

    __slots__ = ("on_suspend",)

    def __init__(self, on_suspend: Callable[[Callable[..., None]], Any]) -> None:
        self.on_suspend = on_suspend

    def __await__(self) -> Generator[Suspend, Any, Any]:
        return (yield self)


def is_awaitable(obj: object) -> bool:
    """True if ``obj`` can be used in an ``await`` expression."""
    return inspect.isawaitable(obj)