# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from bounded_queue.config import ENV_PREFIX, Settings

from .fakes import JobRecorder

_SETTINGS_KEYS = (
    "APP_NAME",
    "LOG_LEVEL",
    "DATA_DIR",
    "CONCURRENCY",
    "AUTO_START",
    "DEMO_BASE_PRIORITY",
    "DEMO_JOBS",
    "DEMO_JOB_DELAY",
)


@pytest.fixture()
def recorder() -> JobRecorder:
    return JobRecorder()


@pytest.fixture()
def env_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Build Settings from a patched environment.

    Every BQUEUE_* variable is cleared first, so a developer's shell or .env
    cannot leak into the result. Returns a builder: pass only what the test needs.
    """

    def build(**overrides: str) -> Settings:
        for key in _SETTINGS_KEYS:
            monkeypatch.delenv(f"{ENV_PREFIX}_{key}", raising=False)
        monkeypatch.setenv(f"{ENV_PREFIX}_DATA_DIR", str(tmp_path / "data"))
        for key, value in overrides.items():
            monkeypatch.setenv(f"{ENV_PREFIX}_{key.upper()}", value)
        return Settings.from_env()

    return build
