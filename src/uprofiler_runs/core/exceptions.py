"""Custom exceptions for uprofiler-runs.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from UprofilerRunsError for easy catching.
"""

from __future__ import annotations


class UprofilerRunsError(Exception):
    """Base exception for all uprofiler-runs errors.

    Example:
        >>> try:
        ...     store.save_run(data, "myapp")
        ... except UprofilerRunsError as e:
        ...     print(f"uprofiler-runs error: {e}")
    """


class ConfigurationError(UprofilerRunsError):
    """Raised when configuration is invalid.

    Example:
        >>> raise ConfigurationError("Suffix must not contain '.': 'a.b'")
    """


class InvalidRunKeyError(UprofilerRunsError, ValueError):
    """Raised when a run id or namespace cannot be used as a storage key.

    Keys end up in file names of the form ``<run_id>.<namespace>.<suffix>``,
    so they must be non-empty and free of dots and path separators.

    Example:
        >>> raise InvalidRunKeyError("Invalid namespace 'my.app': must not contain '.'")
    """


class PayloadEncodingError(UprofilerRunsError, TypeError):
    """Raised when a payload cannot be serialized by the store's encoding.

    Example:
        >>> raise PayloadEncodingError("Object of type set is not JSON serializable")
    """


class RunWriteError(UprofilerRunsError):
    """Raised when a run could not be durably written.

    Attributes:
        run_id: The run id the payload was meant to be stored under.
        path: The file path (or other location) that failed.
    """

    def __init__(self, message: str, run_id: str, path: str | None = None) -> None:
        super().__init__(message)
        self.run_id = run_id
        self.path = path


class CorruptRunError(UprofilerRunsError):
    """Raised when stored run content cannot be decoded.

    Example:
        >>> raise CorruptRunError("Expecting value: line 1 column 1 (char 0)")
    """
