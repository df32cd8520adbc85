"""In-memory run store implementation."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from uprofiler_runs.core.types import RunRecord, RunResult
from uprofiler_runs.storage.base import ErrorReporter
from uprofiler_runs.storage.codec import decode_payload, encode_payload
from uprofiler_runs.storage.ids import generate_run_id, is_valid_key, validate_key

logger = logging.getLogger(__name__)


class MemoryRunStore:
    """In-memory store for profiling runs.

    Simple dictionary-based store. Payloads are kept encoded, so later
    changes to the caller's object do not leak in. Data is lost when the
    process exits.

    Example:
        >>> store = MemoryRunStore()
        >>> run_id = store.save_run({"main()": {"ct": 1}}, "myapp")
        >>> store.get_run(run_id, "myapp").found
        True
    """

    def __init__(self, error_reporter: ErrorReporter | None = None) -> None:
        self._runs: dict[tuple[str, str], tuple[str, datetime]] = {}
        self._report = error_reporter or logger.warning

    def get_run(self, run_id: str, namespace: str) -> RunResult:
        """Get a run by id and namespace."""
        entry = None
        if is_valid_key(run_id) and is_valid_key(namespace):
            entry = self._runs.get((run_id, namespace))
        if entry is None:
            self._report(f"Could not find run {run_id!r} in namespace {namespace!r}")
            return RunResult.not_found(run_id, namespace)

        content, _ = entry
        return RunResult(
            run_id=run_id,
            namespace=namespace,
            payload=decode_payload(content),
            description=f"uprofiler Run (Namespace={namespace})",
        )

    def save_run(self, payload: Any, namespace: str, run_id: str | None = None) -> str:
        """Save profiling data for a run, overwriting any previous payload."""
        validate_key(namespace, "namespace")
        content = encode_payload(payload)
        if run_id is None:
            run_id = generate_run_id()
        validate_key(run_id, "run_id")

        # Re-insert so dict order tracks modification order
        self._runs.pop((run_id, namespace), None)
        self._runs[(run_id, namespace)] = (content, datetime.now(timezone.utc))
        return run_id

    def list_runs(self, namespace: str | None = None, limit: int | None = None) -> list[RunRecord]:
        """List stored runs, most recently saved first."""
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        records = [
            RunRecord(run_id=run_id, namespace=run_namespace, modified_time=modified)
            for (run_id, run_namespace), (_, modified) in reversed(self._runs.items())
            if namespace is None or run_namespace == namespace
        ]
        if limit is not None:
            records = records[:limit]
        return records

    def __len__(self) -> int:
        """Return the number of stored runs."""
        return len(self._runs)
