"""Filesystem storage for profiling runs.

Each run lives in its own file named ``<run_id>.<namespace>.<suffix>`` inside
the store's directory. The name alone identifies the run, so listing needs
no separate index.
"""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from uprofiler_runs.core.config import Settings
from uprofiler_runs.core.exceptions import ConfigurationError, CorruptRunError, RunWriteError
from uprofiler_runs.core.types import RunRecord, RunResult, RunStatus
from uprofiler_runs.storage.base import ErrorReporter
from uprofiler_runs.storage.codec import decode_payload, encode_payload
from uprofiler_runs.storage.ids import generate_run_id, is_valid_key, validate_key

logger = logging.getLogger(__name__)


class FileRunStore:
    """Directory-backed run store.

    Writes replace the whole file and are not atomic: a crash mid-write can
    leave a truncated file, which later reads back as ``RunStatus.CORRUPT``.
    No locking is done; concurrent saves of the same run race.

    Example:
        >>> store = FileRunStore("/var/tmp/uprofiler")
        >>> run_id = store.save_run({"main()": {"ct": 1, "wt": 120}}, "myapp")
        >>> payload, description = store.get_run(run_id, "myapp")
        >>> [r.run_id for r in store.list_runs(namespace="myapp")]
        ['...']
    """

    def __init__(
        self,
        directory: str | os.PathLike[str] | None = None,
        *,
        suffix: str | None = None,
        settings: Settings | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        """Initialize the file store.

        The directory is resolved in order: the ``directory`` argument, the
        configured ``output_dir``, then the system temp directory (with a
        warning). The directory is not created.

        Args:
            directory: Directory holding run files.
            suffix: File suffix; defaults to the configured suffix.
            settings: Settings to consult; defaults to ``Settings()``.
            error_reporter: Called with a message for non-fatal problems.
                Defaults to ``logger.warning``.

        Raises:
            ConfigurationError: If the suffix is empty or contains '.', or
                the environment holds invalid settings.
        """
        self._report = error_reporter or logger.warning
        if settings is None:
            try:
                settings = Settings()
            except ValidationError as e:
                raise ConfigurationError(f"Invalid UPROFILER_* settings: {e}") from e

        resolved = os.fspath(directory) if directory else ""
        if not resolved:
            resolved = settings.output_dir or ""
            if not resolved:
                resolved = tempfile.gettempdir()
                self._report(
                    "Warning: Must specify directory location for uprofiler runs. "
                    f"Trying {resolved} as default. You can either pass the "
                    "directory location as an argument to the constructor "
                    "for FileRunStore() or set the UPROFILER_OUTPUT_DIR "
                    "environment variable."
                )

        suffix = settings.suffix if suffix is None else suffix
        if not suffix or "." in suffix:
            raise ConfigurationError(f"Invalid run file suffix: {suffix!r}")

        self._directory = resolved
        self._suffix = suffix

    @property
    def directory(self) -> str:
        """Directory holding run files."""
        return self._directory

    @property
    def suffix(self) -> str:
        """Suffix of run file names."""
        return self._suffix

    def gen_run_id(self, namespace: str) -> str:  # noqa: ARG002
        """Generate a unique run id for a namespace."""
        return generate_run_id()

    def file_name(self, run_id: str, namespace: str) -> str:
        """Get the file path for a run.

        Returns:
            ``<directory>/<run_id>.<namespace>.<suffix>``.
        """
        return os.path.join(self._directory, f"{run_id}.{namespace}.{self._suffix}")

    def get_run(self, run_id: str, namespace: str) -> RunResult:
        """Get a run by id and namespace.

        Args:
            run_id: The run identifier.
            namespace: The namespace the run was saved under.

        Returns:
            A FOUND result with the decoded payload, a NOT_FOUND result if no
            file exists, or a CORRUPT result if the file cannot be decoded.
        """
        if not (is_valid_key(run_id) and is_valid_key(namespace)):
            # Never saved, and must not reach the filesystem
            self._report(f"Could not find run {run_id!r} in namespace {namespace!r}")
            return RunResult.not_found(run_id, namespace)

        path = Path(self.file_name(run_id, namespace))
        if not path.exists():
            self._report(f"Could not find file {path}")
            return RunResult.not_found(run_id, namespace)

        try:
            payload = decode_payload(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, CorruptRunError) as e:
            self._report(f"Could not load run from {path}: {e}")
            return RunResult(
                run_id=run_id,
                namespace=namespace,
                payload=None,
                description=f"Corrupt Run Id = {run_id} (Namespace={namespace})",
                status=RunStatus.CORRUPT,
            )

        logger.debug(f"Loaded run {run_id} from {path}")
        return RunResult(
            run_id=run_id,
            namespace=namespace,
            payload=payload,
            description=f"uprofiler Run (Namespace={namespace})",
        )

    def save_run(self, payload: Any, namespace: str, run_id: str | None = None) -> str:
        """Save profiling data for a run.

        Any existing file for the same run is overwritten.

        Args:
            payload: The profiling data to store.
            namespace: The namespace to save under.
            run_id: Optional run identifier, trusted to be unique.

        Returns:
            The run id the payload is stored under.

        Raises:
            PayloadEncodingError: If the payload is not JSON serializable.
            RunWriteError: If the file could not be written.
        """
        validate_key(namespace, "namespace")
        content = encode_payload(payload)

        if run_id is None:
            run_id = self.gen_run_id(namespace)
        validate_key(run_id, "run_id")

        path = self.file_name(run_id, namespace)
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            self._report(f"Could not open {path}: {e}")
            raise RunWriteError(f"Could not write run {run_id} to {path}: {e}", run_id=run_id, path=path) from e

        logger.debug(f"Saved run {run_id} in {path}")
        return run_id

    def list_runs(self, namespace: str | None = None, limit: int | None = None) -> list[RunRecord]:
        """List stored runs.

        Files whose names do not carry both a run id and a namespace are
        skipped, as are files removed while the directory is being scanned.

        Args:
            namespace: Only return runs in this namespace (None for all).
            limit: Maximum number of records to return (None for all).

        Returns:
            Run records, most recently modified first.

        Raises:
            ValueError: If limit is negative.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        directory = Path(self._directory)
        if not directory.is_dir():
            return []

        entries: list[tuple[float, Path]] = []
        for path in directory.glob(f"*.{self._suffix}"):
            try:
                stat = path.stat()
            except FileNotFoundError:
                continue
            if path.is_file():
                entries.append((stat.st_mtime, path))

        # Most recent first
        entries.sort(key=lambda entry: entry[0], reverse=True)

        records: list[RunRecord] = []
        for mtime, path in entries:
            parts = path.name.split(".")
            if len(parts) < 3 or not parts[0] or not parts[1]:
                continue
            run_id, run_namespace = parts[0], parts[1]
            if namespace is not None and run_namespace != namespace:
                continue
            records.append(
                RunRecord(
                    run_id=run_id,
                    namespace=run_namespace,
                    modified_time=datetime.fromtimestamp(mtime, tz=timezone.utc),
                    path=str(path),
                )
            )

        if limit is not None:
            records = records[:limit]

        return records

    def __repr__(self) -> str:
        return f"FileRunStore(directory={self._directory!r}, suffix={self._suffix!r})"
