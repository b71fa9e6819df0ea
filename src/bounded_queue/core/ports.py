# src/bounded_queue/core/ports.py

from __future__ import annotations

"""
Ports (callable shapes) the queue accepts from callers.
"""

from typing import Any, Callable, Protocol

QueueTask = Callable[[], Any]
# Zero-argument unit of work: a coroutine function, or any callable returning a value or an awaitable.

DrainCallback = Callable[[], None]


class QueueSettings(Protocol):
    """The subset of Settings that AsyncQueue.from_settings reads."""

    concurrency: int
    auto_start: bool
