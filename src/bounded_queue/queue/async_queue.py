# src/bounded_queue/queue/async_queue.py

from __future__ import annotations

"""
Bounded-concurrency task queue.

Tasks are admitted into a priority backlog and dispatched onto the running
event loop, at most `concurrency` at a time. Each admission returns an
asyncio.Future that settles with the task's result or exception.

Everything runs on the event loop thread: state is only touched between
awaits, so there are no locks. The queue is not thread-safe.
"""

import asyncio
import heapq
import inspect
import itertools
import logging
from typing import Any

from ..core.ports import DrainCallback, QueueSettings, QueueTask
from .queue_models import DEFAULT_PRIORITY, TaskEntry

logger = logging.getLogger(__name__)


class AsyncQueue:
    """
    Priority queue of async tasks with a concurrency limit.

    - add(): admit a task, get a future back
    - pause() / start(): stop and resume dispatching (running tasks are not touched)
    - clear(): drop the backlog
    - on_empty() / drained(): notification when backlog is empty and nothing runs
    """

    def __init__(self, concurrency: int = 1, *, auto_start: bool = True) -> None:
        concurrency = int(concurrency)
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")

        self._concurrency = concurrency
        self._auto_start = bool(auto_start)

        self._backlog: list[TaskEntry] = []
        self._seq = itertools.count()
        self._running = 0
        self._paused = False
        self._drain_waiters: list[DrainCallback] = []

        # Strong refs to dispatched runners; the loop only keeps weak ones.
        self._runners: set[asyncio.Task[None]] = set()

    @classmethod
    def from_settings(cls, settings: QueueSettings) -> AsyncQueue:
        return cls(settings.concurrency, auto_start=settings.auto_start)

    # ------------------------------------------------------------------
    # Admission / control
    # ------------------------------------------------------------------

    def add(self, task: QueueTask, *, priority: int = DEFAULT_PRIORITY) -> asyncio.Future[Any]:
        """
        Admit a task and return its completion handle.

        Must be called with a running event loop. When auto_start is on and the
        queue is not paused, dispatch happens before this returns.
        """
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        entry = TaskEntry(priority=priority, seq=next(self._seq), task=task, future=future)
        heapq.heappush(self._backlog, entry)

        if self._auto_start and not self._paused:
            self._process()
        return future

    def start(self) -> None:
        self._paused = False
        self._process()

    def pause(self) -> None:
        """Stop dispatching new tasks. Running tasks keep going."""
        self._paused = True

    def clear(self, *, cancel: bool = False) -> int:
        """
        Drop every backlog entry and return how many were dropped.

        By default dropped futures are never settled. Pass cancel=True to
        cancel them so awaiting callers get CancelledError instead.
        Running tasks are not affected.
        """
        dropped, self._backlog = self._backlog, []
        if cancel:
            for entry in dropped:
                entry.future.cancel()
        if dropped:
            logger.debug("Cleared %d backlog entries (cancel=%s)", len(dropped), cancel)

        self._check_empty()
        return len(dropped)

    def on_empty(self, callback: DrainCallback) -> None:
        """
        Run callback once, when the backlog is empty and nothing is running.

        Fires synchronously if the queue is already idle. One-shot: register
        again for the next drain.
        """
        self._drain_waiters.append(callback)
        if not self._backlog and self._running == 0:
            self._check_empty()

    async def drained(self) -> None:
        """Wait until the queue is idle."""
        waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()

        def _wake() -> None:
            if not waiter.done():
                waiter.set_result(None)

        self.on_empty(_wake)
        await waiter

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of tasks waiting in the backlog."""
        return len(self._backlog)

    @property
    def pending(self) -> int:
        """Number of tasks currently running."""
        return self._running

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def concurrency(self) -> int:
        return self._concurrency

    @property
    def auto_start(self) -> bool:
        return self._auto_start

    def __repr__(self) -> str:
        return (
            f"<AsyncQueue size={self.size} pending={self._running} "
            f"concurrency={self._concurrency} paused={self._paused}>"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _process(self) -> None:
        if self._paused:
            return

        while self._running < self._concurrency and self._backlog:
            entry = heapq.heappop(self._backlog)
            self._running += 1
            logger.debug("Dispatch seq=%s priority=%s running=%d", entry.seq, entry.priority, self._running)

            runner = asyncio.get_running_loop().create_task(self._run(entry))
            self._runners.add(runner)
            runner.add_done_callback(self._runners.discard)

    async def _run(self, entry: TaskEntry) -> None:
        runner_cancelled = False
        try:
            result = entry.task()
            if inspect.isawaitable(result):
                result = await result
        except asyncio.CancelledError:
            entry.future.cancel()
            # The runner itself was cancelled (e.g. loop shutdown): stop dispatching.
            # Otherwise the task raised CancelledError on its own and only its handle is affected.
            if asyncio.current_task().cancelling():
                runner_cancelled = True
                raise
            logger.debug("Task seq=%s raised CancelledError", entry.seq)
        except Exception as e:
            logger.debug("Task seq=%s failed: %r", entry.seq, e)
            entry.settle(error=e)
        else:
            if not entry.settle(result=result):
                logger.debug("Task seq=%s finished after its handle was cancelled", entry.seq)
        finally:
            self._running -= 1
            if not runner_cancelled:
                self._process()
                self._check_empty()

    def _check_empty(self) -> None:
        if self._backlog or self._running:
            return

        waiters, self._drain_waiters = self._drain_waiters, []
        for cb in waiters:
            try:
                cb()
            except Exception:
                logger.exception("on_empty callback failed")
