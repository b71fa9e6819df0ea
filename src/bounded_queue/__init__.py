"""
bounded_queue: an asyncio task queue with priority admission and a concurrency limit.
"""

from .queue.async_queue import AsyncQueue
from .queue.queue_models import DEFAULT_PRIORITY, TaskEntry

__all__ = ["AsyncQueue", "TaskEntry", "DEFAULT_PRIORITY"]
