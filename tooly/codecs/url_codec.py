"""
Percent-encoding codec (URL component encoding).

Encoding escapes every character except the unreserved set
``A-Z a-z 0-9 - _ . ! ~ * ' ( )``. Decoding is strict: a stray ``%`` or an
escape run that is not valid UTF-8 is an error rather than being passed
through.
"""

from __future__ import annotations

import re
from urllib.parse import quote, unquote_to_bytes

from tooly.codecs.base import Codec, EncodingFormat
from tooly.errors import DecodeError, EncodeError

# quote() always leaves letters, digits and "_.-~" alone
URL_SAFE_CHARS = "!*'()"

_ESCAPE_RUN_RE = re.compile(r"(?:%[0-9A-Fa-f]{2})+")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

INVALID_URL_MESSAGE = "Invalid URL encoded string"


def _decode_escape_run(match: re.Match[str]) -> str:
    try:
        return unquote_to_bytes(match.group(0)).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(INVALID_URL_MESSAGE) from e


class URLCodec(Codec):
    """Percent-encoding of a complete string."""

    label = "URL Encoded"
    placeholder = "Enter URL encoded text..."

    @property
    def format(self) -> EncodingFormat:
        return EncodingFormat.URL_ENCODED

    def encode(self, text: str) -> str:
        try:
            return quote(text, safe=URL_SAFE_CHARS, encoding="utf-8", errors="strict")
        except UnicodeEncodeError as e:
            raise EncodeError("Failed to encode as URL") from e

    def decode(self, text: str) -> str:
        if _BAD_ESCAPE_RE.search(text):
            raise DecodeError(INVALID_URL_MESSAGE)
        return _ESCAPE_RUN_RE.sub(_decode_escape_run, text)
