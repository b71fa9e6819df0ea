"""
Command-line entrypoints.

- main.py: `bounded-queue-demo`, runs a synthetic workload through AsyncQueue
"""
