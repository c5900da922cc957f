"""Read the JSON document from stdin and decode it into a field mapping.

The top-level value must be an object; keys keep their document order.
"""

from __future__ import annotations

import json
import sys
from typing import Any, BinaryIO

# Names used in error messages for non-object top-level values
_JSON_KINDS: dict[type, str] = {
    list: "array",
    str: "string",
    bool: "bool",
    int: "number",
    float: "number",
    type(None): "null",
}


def _reject_constant(name: str) -> Any:
    """Refuse NaN/Infinity, which json.loads accepts but JSON does not."""
    raise ValueError(f"invalid character {name!r} looking for beginning of value")


def read_input(stream: BinaryIO | None = None) -> bytes:
    """Read every byte from *stream* (stdin by default) until EOF."""
    source = stream if stream is not None else sys.stdin.buffer
    return source.read()


def decode_object(data: bytes) -> dict[str, Any]:
    """Decode *data* as a single JSON object.

    Raises ValueError (json.JSONDecodeError included) when the input is not
    valid JSON or its top-level value is not an object. Nesting deeper than
    the interpreter's recursion limit is reported as a ValueError too.
    """
    try:
        value = json.loads(data, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("exceeded max depth") from exc
    if not isinstance(value, dict):
        kind = _JSON_KINDS.get(type(value), type(value).__name__)
        raise ValueError(f"cannot decode JSON {kind} into a struct")
    return value
