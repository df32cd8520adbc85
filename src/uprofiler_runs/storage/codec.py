"""Payload encoding for stored runs.

Runs are stored as JSON text with no header, checksum or version tag.
Only payloads that JSON can represent exactly are accepted: mappings with
string keys, lists, strings, numbers, booleans and None. Anything else
(tuples, non-string keys, arbitrary objects) is rejected rather than
stored in a changed form.
"""

from __future__ import annotations

import json
from typing import Any

from uprofiler_runs.core.exceptions import CorruptRunError, PayloadEncodingError


def _check_representable(value: Any, location: str) -> None:
    """Reject values that would not come back equal from JSON."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise PayloadEncodingError(
                    f"Payload is not serializable: non-string key {key!r} at {location}"
                )
            _check_representable(item, f"{location}[{key!r}]")
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _check_representable(item, f"{location}[{index}]")
    elif isinstance(value, tuple):
        raise PayloadEncodingError(f"Payload is not serializable: tuple at {location}, use a list")


def encode_payload(payload: Any) -> str:
    """Encode a payload to JSON text.

    Args:
        payload: The profiling data.

    Returns:
        JSON text with sorted keys.

    Raises:
        PayloadEncodingError: If the payload cannot be stored as JSON
            without changing it.
    """
    _check_representable(payload, "payload")
    try:
        return json.dumps(payload, sort_keys=True)
    except (TypeError, ValueError) as e:
        raise PayloadEncodingError(f"Payload is not serializable: {e}") from e


def decode_payload(text: str) -> Any:
    """Decode JSON text produced by ``encode_payload``.

    Raises:
        CorruptRunError: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptRunError(f"Run content is not valid JSON: {e}") from e
