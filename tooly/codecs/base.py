"""
Abstract base class for text codecs.

This module defines the EncodingFormat enumeration and the Codec interface
that every format-specific codec must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from tooly.errors import EncodeError


class EncodingFormat(Enum):
    """Encoding formats supported by the Smart Converter."""

    BASE64 = "base64"
    URL_ENCODED = "url"
    JWT = "jwt"
    HEX = "hex"
    UNICODE_ESCAPE = "unicode"


class Codec(ABC):
    """Abstract base class for a bidirectional text codec.

    All format-specific codecs (Base64, URL, JWT, Hex, Unicode escape) must
    inherit from this class and implement the abstract members. Decode-only
    formats set ``supports_encode`` to False and inherit the refusing
    ``encode`` below.

    Class Attributes:
        label: Display label for the encoded side.
        plain_label: Display label for the plain side.
        placeholder: Hint text for an empty encoded buffer.
        supports_encode: Whether plain text can be encoded in this format.
    """

    label: str = "Encoded"
    plain_label: str = "Plain Text"
    placeholder: str = "Enter encoded text..."
    supports_encode: bool = True

    @property
    @abstractmethod
    def format(self) -> EncodingFormat:
        """Return the format this codec implements."""
        pass

    @abstractmethod
    def decode(self, text: str) -> str:
        """Decode text from this format.

        Args:
            text: The encoded text.

        Returns:
            The decoded, human-readable text.

        Raises:
            DecodeError: If the input is malformed for this format.
        """
        pass

    def encode(self, text: str) -> str:
        """Encode plain text into this format.

        Args:
            text: The plain text.

        Returns:
            The encoded text.

        Raises:
            EncodeError: If the text cannot be encoded.
        """
        raise EncodeError(f"{self.label} encoding not supported")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format.value!r})"
