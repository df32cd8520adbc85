"""Base protocol for run storage backends.

This module defines the RunStore protocol that all storage backends must implement.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uprofiler_runs.core.types import RunRecord, RunResult

# Called once per non-fatal problem with a human-readable message
ErrorReporter = Callable[[str], None]


@runtime_checkable
class RunStore(Protocol):
    """Protocol for profiling run storage backends.

    A run is identified by ``(run_id, namespace)``. Saving the same pair
    twice overwrites the earlier payload.

    Example:
        >>> class MyStore:
        ...     def get_run(self, run_id: str, namespace: str) -> RunResult: ...
        ...     def save_run(self, payload, namespace, run_id=None) -> str: ...
        ...     def list_runs(self, namespace=None, limit=None) -> list[RunRecord]: ...
        >>> isinstance(MyStore(), RunStore)
        True
    """

    def get_run(self, run_id: str, namespace: str) -> RunResult:
        """Get a run by id and namespace.

        A missing run is not an error: the result has a None payload,
        ``RunStatus.NOT_FOUND`` and a description saying so.

        Args:
            run_id: The run identifier.
            namespace: The namespace the run was saved under.

        Returns:
            The lookup result; unpacks to ``(payload, description)``.
        """
        ...

    def save_run(self, payload: Any, namespace: str, run_id: str | None = None) -> str:
        """Save profiling data for a run.

        The caller may pass a run_id it promises to be unique; otherwise the
        store generates one.

        Args:
            payload: The profiling data to store.
            namespace: The namespace to save under.
            run_id: Optional run identifier.

        Returns:
            The run id the payload is stored under.

        Raises:
            PayloadEncodingError: If the payload cannot be encoded.
            RunWriteError: If the payload could not be persisted.
        """
        ...

    def list_runs(self, namespace: str | None = None, limit: int | None = None) -> list[RunRecord]:
        """List stored runs.

        Args:
            namespace: Only return runs in this namespace (None for all).
            limit: Maximum number of records to return (None for all).

        Returns:
            Run records, most recently modified first.

        Raises:
            ValueError: If limit is negative.
        """
        ...
