"""
Hex / ASCII codec.

Each UTF-16 code unit becomes lowercase hex (at least two digits),
space-separated. Decoding turns every byte pair back into one character
whose code equals the byte value; no multi-byte reassembly is attempted,
so only code units up to 0xff survive a round trip.
"""

from __future__ import annotations

import re

from tooly.codecs.base import Codec, EncodingFormat
from tooly.errors import DecodeError

_WHITESPACE_RE = re.compile(r"\s+")
_HEX_PAIR_RE = re.compile(r"[0-9A-Fa-f]{2}")


def utf16_code_units(text: str) -> list[int]:
    """Split text into UTF-16 code units (astral characters become surrogate pairs).

    Args:
        text: Any string, including lone surrogates.

    Returns:
        The list of 16-bit code unit values.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


class HexCodec(Codec):
    """Space-separated hexadecimal character codes."""

    label = "Hex"
    placeholder = "Enter hex string (e.g., 48 65 6c 6c 6f)..."

    @property
    def format(self) -> EncodingFormat:
        return EncodingFormat.HEX

    def encode(self, text: str) -> str:
        return " ".join(f"{unit:02x}" for unit in utf16_code_units(text))

    def decode(self, text: str) -> str:
        clean = _WHITESPACE_RE.sub("", text)
        if len(clean) % 2 != 0:
            raise DecodeError("Invalid hex string length")

        chars: list[str] = []
        for i in range(0, len(clean), 2):
            pair = clean[i:i + 2]
            if not _HEX_PAIR_RE.fullmatch(pair):
                raise DecodeError("Invalid hex character")
            chars.append(chr(int(pair, 16)))
        return "".join(chars)
