"""
Queue subsystem.

Components:
- queue_models.py: backlog entry (TaskEntry) and defaults
- async_queue.py: AsyncQueue, the bounded-concurrency dispatcher
"""
