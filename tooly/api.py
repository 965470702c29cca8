"""
Public call interface for the Smart Converter core.

Every function here returns a tagged ``Result`` instead of raising, so a
presentation layer can show ``result.error.message`` without try/except.

Usage:
    from tooly import api

    result = api.decode("base64", "SGVsbG8=")
    if result.ok:
        print(result.value)      # Hello
    else:
        print(result.error)      # DecodeError message
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from tooly import codecs, json_tools
from tooly.codecs import EncodingFormat
from tooly.errors import ToolyError
from tooly.json_tools import BeautifyResult, JsonNode

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success value or error of one operation.

    Attributes:
        value: The value on success, None on failure.
        error: The error on failure, None on success.
    """

    value: T | None = None
    error: ToolyError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def _call(fn: Callable[[], T]) -> Result[T]:
    try:
        return Result(value=fn())
    except ToolyError as e:
        return Result(error=e)


def encode(fmt: EncodingFormat | str, text: str) -> Result[str]:
    """Encode plain text in ``fmt``."""
    return _call(lambda: codecs.encode(fmt, text))


def decode(fmt: EncodingFormat | str, text: str) -> Result[str]:
    """Decode text from ``fmt``."""
    return _call(lambda: codecs.decode(fmt, text))


def beautify(text: str) -> Result[BeautifyResult]:
    """Beautify (and if needed repair) JSON text."""
    return _call(lambda: json_tools.beautify(text))


def sort_keys(text: str) -> Result[str]:
    """Deep-sort the object keys of JSON text."""
    return _call(lambda: json_tools.sort_keys(text))


def build_tree(text: str) -> Result[JsonNode]:
    """Parse JSON text into a path-addressed tree."""
    return _call(lambda: json_tools.build_tree(text))
