"""Strict JSON parsing and canonical 2-space serialization."""

from __future__ import annotations

import json
from typing import Any

CANONICAL_INDENT = 2


class NestingDepthError(ValueError):
    """Raised when a JSON value is nested deeper than the interpreter can walk."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_strict(text: str) -> Any:
    """Parse JSON text, rejecting the NaN/Infinity extensions json accepts by default.

    Raises:
        NestingDepthError: If the text is nested too deeply to parse.
        ValueError: If the text is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise NestingDepthError("JSON is nested too deeply") from e


def dumps_canonical(value: Any) -> str:
    """Serialize a value with 2-space indentation and unescaped Unicode."""
    try:
        return json.dumps(value, indent=CANONICAL_INDENT, ensure_ascii=False)
    except RecursionError as e:
        raise NestingDepthError("JSON is nested too deeply") from e


def dumps_compact(value: Any) -> str:
    """Serialize a value on one line without spaces."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except RecursionError as e:
        raise NestingDepthError("JSON is nested too deeply") from e
