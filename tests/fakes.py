# tests/fakes.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field


class JobFailed(RuntimeError):
    pass


@dataclass(slots=True)
class JobRecorder:
    """
    Deterministic job factory for queue tests.

    - Records the order in which jobs start and finish
    - Tracks how many jobs run at once (peak)
    - Jobs can be held open on an Event so tests control when they finish
    """

    started: list[str] = field(default_factory=list)
    finished: list[str] = field(default_factory=list)
    running: int = 0
    peak: int = 0

    def job(
        self,
        name: str,
        *,
        delay: float = 0.0,
        fail: bool = False,
        gate: asyncio.Event | None = None,
    ):
        async def run() -> str:
            self.started.append(name)
            self.running += 1
            self.peak = max(self.peak, self.running)
            try:
                if gate is not None:
                    await gate.wait()
                await asyncio.sleep(delay)
                if fail:
                    raise JobFailed(name)
                return name
            finally:
                self.running -= 1
                self.finished.append(name)

        return run
