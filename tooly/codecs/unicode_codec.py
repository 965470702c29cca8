"""
Unicode escape codec (``\\uXXXX`` sequences).
"""

from __future__ import annotations

import re

from tooly.codecs.base import Codec, EncodingFormat
from tooly.codecs.hex_codec import utf16_code_units

_ESCAPE_RE = re.compile(r"\\u([0-9a-fA-F]{4})")


def _join_surrogates(text: str) -> str:
    """Merge adjacent surrogate halves into their code point; lone halves are kept."""
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


class UnicodeEscapeCodec(Codec):
    """ASCII passes through; everything above 127 becomes ``\\uXXXX``."""

    label = "Unicode Escaped"
    placeholder = "Enter Unicode escaped text (e.g., \\u0048\\u0065\\u006c\\u006c\\u006f)..."

    @property
    def format(self) -> EncodingFormat:
        return EncodingFormat.UNICODE_ESCAPE

    def encode(self, text: str) -> str:
        return "".join(
            chr(unit) if unit <= 127 else f"\\u{unit:04x}"
            for unit in utf16_code_units(text)
        )

    def decode(self, text: str) -> str:
        decoded = _ESCAPE_RE.sub(lambda m: chr(int(m.group(1), 16)), text)
        return _join_surrogates(decoded)
