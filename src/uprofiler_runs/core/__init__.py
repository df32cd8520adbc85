"""Core components for uprofiler-runs."""

from __future__ import annotations

from uprofiler_runs.core.config import DEFAULT_SUFFIX, Settings
from uprofiler_runs.core.exceptions import (
    ConfigurationError,
    CorruptRunError,
    InvalidRunKeyError,
    PayloadEncodingError,
    RunWriteError,
    UprofilerRunsError,
)
from uprofiler_runs.core.types import RunRecord, RunResult, RunStatus

__all__ = [
    # Config
    "DEFAULT_SUFFIX",
    "Settings",
    # Exceptions
    "ConfigurationError",
    "CorruptRunError",
    "InvalidRunKeyError",
    "PayloadEncodingError",
    "RunWriteError",
    "UprofilerRunsError",
    # Types
    "RunRecord",
    "RunResult",
    "RunStatus",
]
