"""uprofiler-runs: storage for uprofiler profiling runs."""

from __future__ import annotations

from uprofiler_runs.core.config import Settings
from uprofiler_runs.core.exceptions import (
    ConfigurationError,
    CorruptRunError,
    InvalidRunKeyError,
    PayloadEncodingError,
    RunWriteError,
    UprofilerRunsError,
)
from uprofiler_runs.core.types import RunRecord, RunResult, RunStatus
from uprofiler_runs.storage import FileRunStore, MemoryRunStore, RunStore

__version__ = "0.1.0"
__all__ = [
    # Stores
    "FileRunStore",
    "MemoryRunStore",
    "RunStore",
    # Types
    "RunRecord",
    "RunResult",
    "RunStatus",
    # Config
    "Settings",
    # Exceptions
    "ConfigurationError",
    "CorruptRunError",
    "InvalidRunKeyError",
    "PayloadEncodingError",
    "RunWriteError",
    "UprofilerRunsError",
    # Version
    "__version__",
]
