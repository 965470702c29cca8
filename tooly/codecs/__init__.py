"""
Codecs module for the Smart Converter.

This module provides a unified interface for converting text to and from
Base64, URL encoding, JWT, Hex and Unicode escapes.

Usage:
    from tooly.codecs import EncodingFormat, decode, encode

    encode(EncodingFormat.BASE64, "Hello")   # 'SGVsbG8='
    decode("hex", "48 69")                   # 'Hi'

    # Or work with a codec directly
    from tooly.codecs import get_codec
    codec = get_codec("jwt")
    codec.supports_encode  # False
"""

from tooly.codecs.base import Codec, EncodingFormat
from tooly.codecs.base64_codec import Base64Codec, robust_base64_decode
from tooly.codecs.hex_codec import HexCodec
from tooly.codecs.jwt_codec import JWTCodec
from tooly.codecs.registry import (
    FORMAT_NAMES,
    SUPPORTED_FORMATS,
    decode,
    encode,
    get_codec,
    resolve_format,
)
from tooly.codecs.unicode_codec import UnicodeEscapeCodec
from tooly.codecs.url_codec import URLCodec

__all__ = [
    # Base class
    "Codec",
    "EncodingFormat",
    # Registry
    "encode",
    "decode",
    "get_codec",
    "resolve_format",
    "FORMAT_NAMES",
    "SUPPORTED_FORMATS",
    # Codecs
    "Base64Codec",
    "URLCodec",
    "JWTCodec",
    "HexCodec",
    "UnicodeEscapeCodec",
    "robust_base64_decode",
]
