"""
Base64 codec with a fault-tolerant fallback decoder.

Encoding is UTF-8 safe. Decoding never fails on malformed input: characters
outside the alphabet are stripped, missing padding is added, and when strict
decoding still fails the robust bit-buffer decoder recovers whatever bytes
it can.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re

from tooly.codecs.base import Codec, EncodingFormat
from tooly.errors import EncodeError

logger = logging.getLogger(__name__)

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

_ALPHABET_INDEX: dict[str, int] = {char: idx for idx, char in enumerate(BASE64_ALPHABET)}

_NON_ALPHABET_RE = re.compile(r"[^A-Za-z0-9+/]")


def bytes_to_text(data: bytes) -> str:
    """Interpret bytes as UTF-8, falling back to one character per byte.

    Args:
        data: The raw decoded bytes.

    Returns:
        The UTF-8 text, or the raw byte string if the bytes are not UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def robust_base64_decode(text: str) -> str:
    """Decode as much of a damaged Base64 string as possible.

    Scans character by character: ``=`` terminates the stream, characters
    outside the alphabet are skipped, and every other character feeds six
    bits into a buffer from which whole bytes are emitted.

    Args:
        text: Arbitrary text, possibly containing invalid characters or
            premature padding.

    Returns:
        The recovered text (UTF-8 if possible, raw bytes otherwise).

    Examples:
        >>> robust_base64_decode("SGVs!!bG8=")
        'Hello'
    """
    output = bytearray()
    buffer = 0
    bits_collected = 0

    for char in text:
        if char == "=":
            break
        index = _ALPHABET_INDEX.get(char)
        if index is None:
            continue

        buffer = ((buffer << 6) | index) & 0xFFFFFF
        bits_collected += 6

        if bits_collected >= 8:
            bits_collected -= 8
            output.append((buffer >> bits_collected) & 0xFF)

    return bytes_to_text(bytes(output))


class Base64Codec(Codec):
    """Standard-alphabet Base64 over UTF-8 bytes."""

    label = "Base64"
    placeholder = "Enter Base64 text..."

    @property
    def format(self) -> EncodingFormat:
        return EncodingFormat.BASE64

    def encode(self, text: str) -> str:
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodeError("Failed to encode as Base64") from e
        return base64.b64encode(data).decode("ascii")

    def decode(self, text: str) -> str:
        clean = _NON_ALPHABET_RE.sub("", text)
        if not clean:
            return ""

        padded = clean + "=" * (-len(clean) % 4)

        try:
            return base64.b64decode(padded, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            logger.debug("Strict Base64 decode failed (%s), using robust decoder", e)
            return robust_base64_decode(padded)
