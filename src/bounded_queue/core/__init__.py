"""
Shared shapes used across the package.

- ports.py: task/callback aliases and the settings protocol read by AsyncQueue.from_settings
"""
