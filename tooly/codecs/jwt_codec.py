"""
JWT decoder.

Splits a token into header, payload and signature. Header and payload are
Base64-decoded and parsed as JSON; the signature is surfaced verbatim and is
never verified.
"""

from __future__ import annotations

import logging

from tooly.codecs.base import Codec, EncodingFormat
from tooly.codecs.base64_codec import Base64Codec
from tooly.errors import DecodeError, EncodeError
from tooly.json_tools.serialization import dumps_compact, loads_strict

logger = logging.getLogger(__name__)

INVALID_JWT_MESSAGE = "Invalid JWT token"

# base64url → standard alphabet, so the shared Base64 decoder keeps these bits
_BASE64URL_TABLE = str.maketrans("-_", "+/")


class JWTCodec(Codec):
    """Decode-only codec for JSON Web Tokens."""

    label = "JWT Token"
    plain_label = "Decoded JWT"
    placeholder = "Enter JWT token..."
    supports_encode = False

    def __init__(self) -> None:
        self._base64 = Base64Codec()

    @property
    def format(self) -> EncodingFormat:
        return EncodingFormat.JWT

    def encode(self, text: str) -> str:
        raise EncodeError("JWT encoding not supported - JWT is decode-only")

    def _decode_segment(self, segment: str) -> object:
        return loads_strict(self._base64.decode(segment.translate(_BASE64URL_TABLE)))

    def decode(self, text: str) -> str:
        parts = text.split(".")
        if len(parts) != 3:
            raise DecodeError(INVALID_JWT_MESSAGE) from ValueError("Invalid JWT format")

        try:
            header = self._decode_segment(parts[0])
            payload = self._decode_segment(parts[1])
            return dumps_compact({"header": header, "payload": payload, "signature": parts[2]})
        except ValueError as e:
            logger.debug("JWT segment could not be decoded: %s", e)
            raise DecodeError(INVALID_JWT_MESSAGE) from e
