# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.

Note: BQUEUE_* only sets defaults for AsyncQueue.from_settings() and the demo CLI.
AsyncQueue(...) constructed directly ignores the environment.
"""

ENV_VARS = {
    # App / logging
    "BQUEUE_APP_NAME": "App display name (default: bounded-queue).",
    "BQUEUE_LOG_LEVEL": "Console logging level (default: INFO).",
    "BQUEUE_DATA_DIR": "Local data directory, holds bqueue.log (default: .local/bqueue).",
    # Queue
    "BQUEUE_CONCURRENCY": "Max tasks running at once (default: 1, values < 1 become 1).",
    "BQUEUE_AUTO_START": "Dispatch on add() (true/false, default: true).",
    # Demo
    "BQUEUE_DEMO_JOBS": "Number of synthetic jobs the demo runs (default: 8).",
    "BQUEUE_DEMO_JOB_DELAY": "Seconds each demo job sleeps (default: 0.1).",
    "BQUEUE_DEMO_BASE_PRIORITY": "Lowest priority in the demo workload; jobs cycle base..base+2 (default: 1).",
}
