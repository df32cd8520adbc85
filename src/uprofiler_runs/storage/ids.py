"""Run id generation and storage key validation."""

from __future__ import annotations

import uuid

from uprofiler_runs.core.exceptions import InvalidRunKeyError

_FORBIDDEN = (".", "/", "\\")


def generate_run_id() -> str:
    """Generate a new run id.

    Random UUID4 hex: 32 lowercase hex characters. Needs no coordination
    between processes sharing a directory.
    """
    return uuid.uuid4().hex


def validate_key(value: str, field: str) -> str:
    """Check that a run id or namespace can be embedded in a file name.

    Args:
        value: The run id or namespace.
        field: Name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidRunKeyError: If the value is empty or contains '.' or a path separator.
    """
    if not isinstance(value, str) or not value:
        raise InvalidRunKeyError(f"Invalid {field} {value!r}: must be a non-empty string")
    for char in _FORBIDDEN:
        if char in value:
            raise InvalidRunKeyError(f"Invalid {field} {value!r}: must not contain {char!r}")
    return value


def is_valid_key(value: str) -> bool:
    """Whether ``value`` could have been saved as a run id or namespace."""
    return isinstance(value, str) and bool(value) and not any(char in value for char in _FORBIDDEN)
