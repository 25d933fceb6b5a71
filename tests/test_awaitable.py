import asyncio

import pytest

from lazyco.awaitable import Suspend, is_awaitable


async def _coroutine_function():
    return 1


def _plain_function():
    return 1


def _generator():
    yield 1


def test_coroutine_object_is_awaitable():
    coro = _coroutine_function()
    try:
        assert is_awaitable(coro) is True
    finally:
        coro.close()


def test_suspend_is_awaitable():
    assert is_awaitable(Suspend(lambda resume: None)) is True


class _CustomAwaitable:
    def __await__(self):
        return (yield)


def test_object_with_await_method_is_awaitable():
    assert is_awaitable(_CustomAwaitable()) is True


@pytest.mark.parametrize(
    "obj",
    [5, "text", None, _plain_function, _coroutine_function, _CustomAwaitable],
)
def test_non_awaitables(obj):
    assert is_awaitable(obj) is False


def test_plain_generator_is_not_awaitable():
    gen = _generator()
    assert is_awaitable(gen) is False


def test_suspend_yields_itself_and_returns_sent_value():
    suspend = Suspend(lambda resume: None)
    gen = suspend.__await__()
    assert next(gen) is suspend
    with pytest.raises(StopIteration) as stop:
        gen.send("resumed")
    assert stop.value.value == "resumed"


def test_suspend_keeps_callback():
    calls = []
    suspend = Suspend(calls.append)
    suspend.on_suspend("resume")
    assert calls == ["resume"]


def test_future_is_awaitable():
    loop = asyncio.new_event_loop()
    try:
        assert is_awaitable(loop.create_future()) is True
    finally:
        loop.close()