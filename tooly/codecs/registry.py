"""
Codec lookup and format-dispatching encode/decode helpers.

This module maps EncodingFormat values (or their string names) to codec
instances and exposes the two conversion entry points used by the
converter orchestrator and the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tooly.codecs.base import EncodingFormat

if TYPE_CHECKING:
    from tooly.codecs.base import Codec


# Mapping of format names to formats
FORMAT_NAMES: dict[str, EncodingFormat] = {fmt.value: fmt for fmt in EncodingFormat}

# Supported format names
SUPPORTED_FORMATS = frozenset(FORMAT_NAMES)

_CODECS: dict[EncodingFormat, "Codec"] = {}


def resolve_format(fmt: EncodingFormat | str) -> EncodingFormat:
    """Normalize a format given as an enum member or a name.

    Args:
        fmt: An EncodingFormat, or one of "base64", "url", "jwt", "hex",
            "unicode" (case-insensitive).

    Returns:
        The matching EncodingFormat.

    Raises:
        ValueError: If the name is not a supported format.

    Examples:
        >>> resolve_format("HEX")
        <EncodingFormat.HEX: 'hex'>
    """
    if isinstance(fmt, EncodingFormat):
        return fmt

    name = str(fmt).strip().lower()
    if name not in FORMAT_NAMES:
        raise ValueError(
            f"Unsupported format '{fmt}'. "
            f"Supported formats: {', '.join(sorted(SUPPORTED_FORMATS))}"
        )
    return FORMAT_NAMES[name]


def get_codec(fmt: EncodingFormat | str) -> "Codec":
    """Get the codec for a format.

    Codecs are stateless, so one shared instance per format is cached.

    Args:
        fmt: The format (enum member or name).

    Returns:
        The Codec instance for the format.

    Raises:
        ValueError: If the format name is not supported.

    Examples:
        >>> get_codec("base64").decode("SGVsbG8=")
        'Hello'
    """
    # Import codecs here to avoid circular imports
    from tooly.codecs.base64_codec import Base64Codec
    from tooly.codecs.hex_codec import HexCodec
    from tooly.codecs.jwt_codec import JWTCodec
    from tooly.codecs.unicode_codec import UnicodeEscapeCodec
    from tooly.codecs.url_codec import URLCodec

    encoding = resolve_format(fmt)

    if not _CODECS:
        _CODECS.update(
            {
                EncodingFormat.BASE64: Base64Codec(),
                EncodingFormat.URL_ENCODED: URLCodec(),
                EncodingFormat.JWT: JWTCodec(),
                EncodingFormat.HEX: HexCodec(),
                EncodingFormat.UNICODE_ESCAPE: UnicodeEscapeCodec(),
            }
        )

    return _CODECS[encoding]


def encode(fmt: EncodingFormat | str, text: str) -> str:
    """Encode plain text in the given format.

    Raises:
        EncodeError: If the format cannot encode the text.
    """
    return get_codec(fmt).encode(text)


def decode(fmt: EncodingFormat | str, text: str) -> str:
    """Decode text from the given format.

    Raises:
        DecodeError: If the text is malformed for the format.
    """
    return get_codec(fmt).decode(text)
