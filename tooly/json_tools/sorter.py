"""
Alphabetical deep sort of JSON object keys.
"""

from __future__ import annotations

from typing import Any

from tooly.errors import SortError
from tooly.json_tools.serialization import NestingDepthError, dumps_canonical, loads_strict

NESTING_MESSAGE = "JSON is nested too deeply to sort"


def deep_sort(value: Any) -> Any:
    """Recursively order object keys by code point.

    Arrays keep their element order, but object elements inside them are
    sorted too. Primitives are returned as-is.

    Args:
        value: A parsed JSON value.

    Returns:
        A new value with every object's keys in ascending code point order
        (uppercase before lowercase).

    Examples:
        >>> deep_sort({"b": 1, "a": [{"d": 1, "c": 2}]})
        {'a': [{'c': 2, 'd': 1}], 'b': 1}
    """
    if isinstance(value, dict):
        return {key: deep_sort(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [deep_sort(item) for item in value]
    return value


def sort_keys(text: str) -> str:
    """Parse JSON text and return it deep-sorted in canonical 2-space form.

    Args:
        text: JSON text.

    Returns:
        The sorted, canonical JSON text.

    Raises:
        SortError: If the text is not valid JSON, or is nested too deeply
            to sort.
    """
    try:
        parsed = loads_strict(text)
    except NestingDepthError as e:
        raise SortError(NESTING_MESSAGE) from e
    except ValueError as e:
        raise SortError("Invalid JSON: cannot sort keys") from e

    try:
        return dumps_canonical(deep_sort(parsed))
    except (RecursionError, NestingDepthError) as e:
        raise SortError(NESTING_MESSAGE) from e
