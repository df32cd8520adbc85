"""Storage backends for profiling runs.

This module provides the run store protocol and its implementations.

Example:
    >>> from uprofiler_runs.storage import FileRunStore
    >>> store = FileRunStore("/var/tmp/uprofiler")
    >>> run_id = store.save_run(data, "myapp")
"""

from __future__ import annotations

from uprofiler_runs.storage.base import RunStore
from uprofiler_runs.storage.file_store import FileRunStore
from uprofiler_runs.storage.memory_store import MemoryRunStore

__all__ = [
    "FileRunStore",
    "MemoryRunStore",
    "RunStore",
]
