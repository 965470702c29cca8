"""Tests for the Base64 codec and its robust fallback decoder."""

from __future__ import annotations

import pytest

from tooly.codecs import Base64Codec, robust_base64_decode
from tooly.codecs.base64_codec import bytes_to_text


@pytest.fixture
def codec() -> Base64Codec:
    return Base64Codec()


class TestBase64Encode:
    """Tests for Base64Codec.encode."""

    def test_ascii(self, codec):
        """Plain ASCII encodes to standard Base64."""
        assert codec.encode("Hello") == "SGVsbG8="

    def test_utf8_multibyte(self, codec):
        """Non-ASCII text is encoded via its UTF-8 bytes."""
        assert codec.encode("é") == "w6k="

    def test_empty(self, codec):
        """Empty input encodes to empty output."""
        assert codec.encode("") == ""

    def test_lone_surrogate_fails(self, codec):
        """Text with no UTF-8 form raises EncodeError."""
        from tooly.errors import EncodeError

        with pytest.raises(EncodeError, match="Failed to encode as Base64"):
            codec.encode("\ud800")


class TestBase64Decode:
    """Tests for Base64Codec.decode."""

    def test_hello(self, codec):
        """Standard Base64 decodes to text."""
        assert codec.decode("SGVsbG8=") == "Hello"

    def test_invalid_characters_are_skipped(self, codec):
        """Characters outside the alphabet are ignored rather than raising."""
        assert codec.decode("!!!SGVsbG8h!!!") == "Hello!"

    def test_missing_padding(self, codec):
        """Missing padding is added before decoding."""
        assert codec.decode("SGVsbG8") == "Hello"

    def test_embedded_whitespace(self, codec):
        """Line breaks inside wrapped Base64 are ignored."""
        assert codec.decode("SGVs\nbG8g\r\nV29y bGQ=") == "Hello World"

    def test_only_invalid_characters(self, codec):
        """Input with no alphabet characters decodes to an empty string."""
        assert codec.decode("!!! ???") == ""

    def test_non_utf8_bytes_fall_back(self, codec):
        """Bytes that are not UTF-8 come back one character per byte."""
        assert codec.decode("/w==") == "\xff"

    def test_unicode_roundtrip(self, codec):
        """Text with accents, CJK and emoji survives encode then decode."""
        for text in ("héllo wörld", "你好", "😀 ok", "line1\nline2"):
            assert codec.decode(codec.encode(text)) == text


class TestRobustDecoder:
    """Tests for the bit-buffer fallback decoder."""

    def test_skips_invalid_characters(self):
        """Characters outside the alphabet are skipped."""
        assert robust_base64_decode("SGVs!!bG8=") == "Hello"

    def test_stops_at_padding(self):
        """The first '=' ends the stream, even mid-input."""
        assert robust_base64_decode("SGVs=bG8=") == "Hel"

    def test_partial_group(self):
        """Trailing bits that do not fill a byte are dropped."""
        assert robust_base64_decode("SGVsbA") == "Hell"

    def test_empty(self):
        """Empty input yields empty output."""
        assert robust_base64_decode("") == ""


class TestBytesToText:
    """Tests for bytes_to_text."""

    def test_utf8(self):
        assert bytes_to_text("你好".encode("utf-8")) == "你好"

    def test_latin1_fallback(self):
        assert bytes_to_text(b"\xff\xfe") == "\xff\xfe"
