# src/bounded_queue/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole process.
- Queue defaults can be tuned without touching code.
- Tests build their own Settings via Settings.from_env() under a patched env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "BQUEUE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Queue defaults ----
    concurrency: int
    auto_start: bool

    # ---- Demo workload ----
    demo_jobs: int
    demo_job_delay: float
    demo_base_priority: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "bounded-queue").strip() or "bounded-queue"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/bqueue"))

        # A queue needs at least one slot.
        concurrency = max(1, _env_int(_k("CONCURRENCY"), 1))
        auto_start = _env_bool(_k("AUTO_START"), True)

        demo_jobs = max(0, _env_int(_k("DEMO_JOBS"), 8))
        demo_job_delay = max(0.0, _env_float(_k("DEMO_JOB_DELAY"), 0.1))
        demo_base_priority = _env_int(_k("DEMO_BASE_PRIORITY"), 1)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            concurrency=concurrency,
            auto_start=auto_start,
            demo_jobs=demo_jobs,
            demo_job_delay=demo_job_delay,
            demo_base_priority=demo_base_priority,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
