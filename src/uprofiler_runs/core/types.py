"""Core type definitions for uprofiler-runs.

This module defines the values exchanged with run stores: the result of a
lookup and the records produced when listing stored runs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RunStatus(str, Enum):
    """Outcome of a run lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class RunResult:
    """Result of looking up a run by id and namespace.

    A missing or undecodable run is a normal outcome: ``payload`` is None and
    ``status`` says why. Unpacking yields ``(payload, description)``.

    Attributes:
        run_id: The requested run id.
        namespace: The requested namespace.
        payload: The decoded profiling data, or None.
        description: Human-readable description of the run or the failure.
        status: Lookup outcome.

    Example:
        >>> payload, description = store.get_run("5f2e1a", "myapp")
        >>> description
        'uprofiler Run (Namespace=myapp)'
    """

    run_id: str
    namespace: str
    payload: Any
    description: str
    status: RunStatus = RunStatus.FOUND

    @classmethod
    def not_found(cls, run_id: str, namespace: str) -> RunResult:
        """Build the result for a run that was never saved."""
        return cls(
            run_id=run_id,
            namespace=namespace,
            payload=None,
            description=f"Invalid Run Id = {run_id}",
            status=RunStatus.NOT_FOUND,
        )

    @property
    def found(self) -> bool:
        """Whether the payload was loaded."""
        return self.status is RunStatus.FOUND

    def __iter__(self) -> Iterator[Any]:
        yield self.payload
        yield self.description


class RunRecord(BaseModel):
    """A stored run as surfaced by ``list_runs``.

    Attributes:
        run_id: Run identifier.
        namespace: Namespace the run was saved under.
        modified_time: Last modification time (timezone-aware).
        path: Storage location, when the backend has one.
    """

    model_config = ConfigDict(frozen=True)

    run_id: str = Field(..., description="Run identifier")
    namespace: str = Field(..., description="Run namespace")
    modified_time: datetime = Field(..., description="Last modification time")
    path: str | None = Field(default=None, description="Storage location")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "run_id": self.run_id,
            "namespace": self.namespace,
            "modified_time": self.modified_time.isoformat(),
            "path": self.path,
        }
