"""Utilities for network programs: codecs, SHA-1, ring buffer, timers, task queues, file helpers and logging."""

__version__ = "0.1.0"