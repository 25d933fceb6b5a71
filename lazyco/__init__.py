"""Lazy coroutine tasks, an auto-reset event, work-stealing worker queues and IP address types."""

__version__ = "0.1.0"

__all__ = [
    "ipv4",
    "ipv6",
    "ip",
    "awaitable",
    "task",
    "events",
    "work_queue",
]