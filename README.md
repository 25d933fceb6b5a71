# lazyco

Building blocks for coroutine-based programs. It has no third-party dependencies.

| Module | Contents |
| --- | --- |
| `lazyco.task` | `Task`, the `task` decorator, `make_task`, `sync_wait` and `BrokenPromise` |
| `lazyco.awaitable` | `Suspend`, the basic suspension primitive, and `is_awaitable` |
| `lazyco.events` | `AsyncAutoResetEvent` |
| `lazyco.work_queue` | `WorkerState`, a per-worker queue with stealing and sleep/wake signalling |
| `lazyco.ipv4` | `IPv4Address` and `IPv4Endpoint` |
| `lazyco.ipv6` | `IPv6Address` and `IPv6Endpoint` |
| `lazyco.ip` | `IPAddress` and `IPEndpoint`, which hold either family |

## Installation

```
pip install lazyco
```

## Tasks

A `Task` wraps a coroutine. The coroutine does not start until the task is first awaited or passed to `sync_wait`.

```python
from lazyco.task import Task, BrokenPromise, task, make_task, sync_wait

@task
async def answer():
    return 42

t = answer()
assert not t.is_ready()
assert sync_wait(t) == 42
assert t.is_ready()
```

Other ways to use a task:

- `make_task(awaitable)` wraps any awaitable in a lazy task. It raises `TypeError` for an object that is not awaitable.
- `await t.when_ready()` waits for the task to complete without fetching its result or re-raising its exception.
- Awaiting `Task()`, which has no coroutine, raises `BrokenPromise`.
- An exception raised inside the coroutine is re-raised to whoever awaits the task.

Tasks can await each other, `AsyncAutoResetEvent`, and `Suspend`. A task cannot await other awaitables, such as asyncio futures; awaiting one raises `TypeError` inside the coroutine.

### Suspension

`Suspend(on_suspend)` is the primitive the other awaitables are built on:

1. When a coroutine awaits a `Suspend`, `on_suspend(resume)` is called.
2. The coroutine then waits until `resume(value)` is called, and the `await` evaluates to `value`.
3. If `on_suspend` returns `False`, the coroutine does not wait and continues at once with `None`.

`is_awaitable(obj)` reports whether `obj` can be awaited.

## Events

`AsyncAutoResetEvent` lets one waiting coroutine through for each `set()` call:

- Awaiting a set event resets the event and continues without suspending.
- Otherwise the awaiting coroutine is suspended.
- `set()` resumes the oldest waiter, and that waiter runs inside the call to `set()`.
- If nobody is waiting, `set()` leaves the event set.
- `reset()` clears the event.

```python
import threading
from lazyco.events import AsyncAutoResetEvent
from lazyco.task import task, sync_wait

event = AsyncAutoResetEvent()

@task
async def waiter():
    await event
    return "woken"

threading.Timer(0.01, event.set).start()
assert sync_wait(waiter()) == "woken"
```

## Worker queues

`WorkerState` is the state a work-stealing scheduler keeps for one worker thread.

Queue operations:

- `try_local_enqueue(op)` and `try_local_pop()` push and pop at the newest end of the queue.
- `try_steal()` takes the oldest operation.
- `try_steal(blocking=False)` raises `BlockingIOError` instead of waiting when another thread is already stealing.
- The local queue starts with 256 slots and doubles as it fills, always keeping one slot free.
- The queue grows up to `MAX_LOCAL_QUEUE_SIZE` slots. When it cannot take another operation, `try_local_enqueue` returns `False`.

Checking for work:

- `has_any_queued_work()` checks while excluding thieves.
- `approx_has_any_queued_work()` is a cheap check that may be momentarily out of date.

Sleeping and waking:

- `notify_intent_to_sleep()` marks the worker as about to sleep.
- `try_wake_up()` wakes a worker that has announced it will sleep, and returns whether this call was the one that woke it.
- `sleep_until_woken(timeout)` blocks until woken or until the timeout passes.

```python
from lazyco.work_queue import WorkerState

state = WorkerState()
for op in ("a", "b", "c"):
    state.try_local_enqueue(op)
assert state.try_local_pop() == "c"
assert state.try_steal() == "a"
```

## Addresses and endpoints

These are immutable, hashable and ordered value types:

- IPv4 addresses order by integer value.
- IPv6 addresses order by their bytes.
- End-points order by address, then by port.
- `IPAddress` and `IPEndpoint` sort IPv4 before IPv6.

`from_string` returns `None` when the text cannot be parsed.

```python
from lazyco.ipv4 import IPv4Address, IPv4Endpoint
from lazyco.ipv6 import IPv6Address
from lazyco.ip import IPAddress, IPEndpoint

IPv4Address.from_string("10.1.2.3").is_private_network()        # True
IPv4Address.from_string("3232235521")                            # IPv4Address(octets=(192, 168, 0, 1))
IPv4Endpoint.from_string("127.0.0.1:8080").port                  # 8080
IPv6Address.loopback().to_string()                               # "::1"
IPv6Address.from_prefix(0x0011223344556677, 0x8899aabbccddeeff).to_string()
# "11:2233:4455:6677:8899:aabb:ccdd:eeff"
IPEndpoint.from_string("[::1]:80").port()                        # 80
IPAddress(IPv4Address.loopback()) < IPAddress(IPv6Address.unspecified())  # True
```

Parsing rules:

- `IPv4Address.from_string` accepts dotted decimal, or a single integer below 2**32.
- `IPv6Address.from_string` accepts at most one `::`, and an optional trailing dotted IPv4 address.
- IPv6 end-points are written `[address]:port`.

## What it does not do

- **No thread pool.** `WorkerState` provides the per-worker queue and wake-up signalling, but there are no worker threads or scheduler built on it. Nothing moves a task onto another thread.
- **No async generators.** There are no async generators or mapping over them.
- **No networking.** There are no sockets or I/O. The address and end-point types only represent, compare and parse values.