import threading

from lazyco.events import AsyncAutoResetEvent
from lazyco.task import sync_wait, task


@task
async def waiter(event, log, name):
    await event
    log.append(name)
    return name


def start(t):
    """Begin running a task without blocking; returns the pending driver."""
    driver = t.__await__()
    try:
        next(driver)
    except StopIteration:
        pass
    return driver


def test_initially_set_event_lets_one_waiter_through():
    event = AsyncAutoResetEvent(True)
    log = []
    first = waiter(event, log, "a")
    second = waiter(event, log, "b")
    start(first)
    start(second)
    assert first.is_ready()
    assert not second.is_ready()
    assert log == ["a"]


def test_waiter_suspends_until_set():
    event = AsyncAutoResetEvent()
    log = []
    t = waiter(event, log, "a")
    start(t)
    assert not t.is_ready()
    assert log == []
    event.set()
    assert t.is_ready()
    assert log == ["a"]


def test_each_set_resumes_one_waiter_in_order():
    event = AsyncAutoResetEvent()
    log = []
    tasks = [waiter(event, log, name) for name in ("a", "b", "c")]
    for t in tasks:
        start(t)
    event.set()
    assert log == ["a"]
    event.set()
    assert log == ["a", "b"]
    assert not tasks[2].is_ready()
    event.set()
    assert log == ["a", "b", "c"]


def test_set_resuming_waiter_leaves_event_not_set():
    event = AsyncAutoResetEvent()
    log = []
    start(waiter(event, log, "a"))
    event.set()
    later = waiter(event, log, "b")
    start(later)
    assert not later.is_ready()
    assert log == ["a"]


def test_set_is_idempotent():
    event = AsyncAutoResetEvent()
    event.set()
    event.set()
    log = []
    first = waiter(event, log, "a")
    second = waiter(event, log, "b")
    start(first)
    start(second)
    assert first.is_ready()
    assert not second.is_ready()


def test_reset_clears_set_state():
    event = AsyncAutoResetEvent(True)
    event.reset()
    log = []
    t = waiter(event, log, "a")
    start(t)
    assert not t.is_ready()
    event.set()
    assert log == ["a"]


def test_sync_wait_on_set_event_consumes_it():
    event = AsyncAutoResetEvent(True)
    log = []
    assert sync_wait(event) is None
    t = waiter(event, log, "a")
    start(t)
    assert not t.is_ready()


def test_set_from_another_thread():
    event = AsyncAutoResetEvent()
    log = []
    timer = threading.Timer(0.05, event.set)
    timer.start()
    try:
        assert sync_wait(waiter(event, log, "done")) == "done"
    finally:
        timer.join()
    assert log == ["done"]