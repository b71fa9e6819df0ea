# src/bounded_queue/queue/queue_models.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from ..core.ports import QueueTask

DEFAULT_PRIORITY = 1


@dataclass(order=True, slots=True)
class TaskEntry:
    """
    One admitted unit of work.

    Ordering is by (-priority, seq) so a min-heap pops the highest priority
    first, and the admission counter keeps equal priorities FIFO.
    """

    _sort_key: tuple[int, int] = field(init=False, repr=False)
    priority: int = field(compare=False)
    seq: int = field(compare=False)
    task: QueueTask = field(compare=False, repr=False)
    future: asyncio.Future[Any] = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        self._sort_key = (-self.priority, self.seq)

    def settle(self, *, result: Any = None, error: BaseException | None = None) -> bool:
        """
        Resolve or reject the completion handle.

        Returns False if the handle was already done (e.g. the caller cancelled it).
        """
        if self.future.done():
            return False
        if error is not None:
            self.future.set_exception(error)
        else:
            self.future.set_result(result)
        return True
