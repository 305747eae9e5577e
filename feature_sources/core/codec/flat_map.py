"""
Flat-map codec.

Encodes a string-to-string mapping as a JSON object so it fits in a single
text column, and parses it back. Encoding is deterministic: keys are sorted
and separators are compact, so equal mappings always produce equal blobs.
Parsing is lenient about key order and whitespace but strict about shape.
"""

import json
from collections.abc import Mapping

from feature_sources.core.errors import MalformedBlobError

EMPTY_BLOB = "{}"


def serialize(mapping: Mapping[str, str]) -> str:
    """
    Serialize a flat mapping to a text blob.

    Args:
        mapping: String keys to string values

    Returns:
        JSON object text; EMPTY_BLOB for an empty mapping

    Raises:
        TypeError: If a key or value is not a string
    """
    if not mapping:
        return EMPTY_BLOB

    for key, value in mapping.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"Flat mappings hold strings only, got {type(key).__name__}: {type(value).__name__}"
            )

    return json.dumps(dict(mapping), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _reject_duplicates(pairs: list[tuple[str, object]]) -> dict[str, object]:
    result: dict[str, object] = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"duplicate key '{key}'")
        result[key] = value
    return result


def deserialize(blob: str | None, column: str | None = None) -> dict[str, str]:
    """
    Parse a text blob back into a flat mapping.

    Args:
        blob: Text produced by serialize(); None or blank means empty
        column: Storage column the blob came from (for error messages)

    Returns:
        The decoded mapping

    Raises:
        MalformedBlobError: If the blob is not a JSON object of string values
    """
    if blob is None or not blob.strip():
        return {}

    try:
        decoded = json.loads(blob, object_pairs_hook=_reject_duplicates)
    except (ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError, as are duplicate keys
        raise MalformedBlobError(blob, str(e), column) from e

    if not isinstance(decoded, dict):
        raise MalformedBlobError(
            blob, f"expected a JSON object, got {type(decoded).__name__}", column
        )

    for key, value in decoded.items():
        if not isinstance(value, str):
            raise MalformedBlobError(
                blob, f"value for '{key}' is {type(value).__name__}, expected string", column
            )

    return decoded
