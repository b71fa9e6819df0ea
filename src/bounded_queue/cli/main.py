# src/bounded_queue/cli/main.py

"""
Demo entrypoint.

Initializes logging, builds an AsyncQueue from settings, pushes a synthetic
workload through it and reports completion order and peak concurrency.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..queue.async_queue import AsyncQueue

logger = logging.getLogger(__name__)


class DemoJobError(RuntimeError):
    pass


@dataclass(slots=True)
class DemoReport:
    finished: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    peak_running: int = 0


def _make_job(name: str, delay: float, queue: AsyncQueue, report: DemoReport, *, fail: bool = False):
    async def job() -> str:
        report.peak_running = max(report.peak_running, queue.pending)
        logger.info("start %s (running=%d, backlog=%d)", name, queue.pending, queue.size)
        await asyncio.sleep(delay)
        if fail:
            raise DemoJobError(f"{name} failed on purpose")
        return name

    return job


async def run_demo(settings: Settings) -> DemoReport:
    """
    Run settings.demo_jobs jobs with cycling priorities.

    The middle job fails on purpose to show that failures stay local.
    """
    queue = AsyncQueue.from_settings(settings)
    report = DemoReport()

    # Admit everything first so the priority order is visible.
    queue.pause()

    futures = {}
    fail_at = settings.demo_jobs // 2
    for i in range(settings.demo_jobs):
        name = f"job-{i}"
        priority = settings.demo_base_priority + (i % 3)
        job = _make_job(name, settings.demo_job_delay, queue, report, fail=(i == fail_at))
        futures[name] = queue.add(job, priority=priority)
        logger.debug("queued %s priority=%s", name, priority)

    logger.info("Queued %d jobs; concurrency=%d", queue.size, queue.concurrency)
    queue.start()

    for name, fut in futures.items():
        fut.add_done_callback(lambda f, name=name: _record(report, name, f))

    await queue.drained()
    # Done-callbacks are scheduled with call_soon; let them run.
    await asyncio.sleep(0)
    return report


def _record(report: DemoReport, name: str, fut: asyncio.Future) -> None:
    if fut.cancelled():
        return
    err = fut.exception()
    if err is not None:
        logger.warning("%s: %s", name, err)
        report.failed.append(name)
    else:
        report.finished.append(name)


def main() -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s demo...", settings.app_name)
    report = asyncio.run(run_demo(settings))

    logger.info("Completion order: %s", ", ".join(report.finished) or "-")
    if report.failed:
        logger.info("Failed: %s", ", ".join(report.failed))
    logger.info("Peak running: %d (limit %d)", report.peak_running, settings.concurrency)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
