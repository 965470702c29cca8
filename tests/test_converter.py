"""Tests for the Smart Converter orchestrator."""

from __future__ import annotations

import base64
import json

import pytest

from tooly.codecs import EncodingFormat
from tooly.converter import ConversionOrchestrator, LastEdited


@pytest.fixture
def converter() -> ConversionOrchestrator:
    return ConversionOrchestrator()


class TestInitialState:
    """Tests for the starting state."""

    def test_defaults(self, converter):
        state = converter.state
        assert state.format is EncodingFormat.BASE64
        assert state.encoded_text == ""
        assert state.plain_text == ""
        assert state.last_edited is LastEdited.NONE
        assert state.error == ""

    def test_format_by_name(self):
        assert ConversionOrchestrator("hex").format is EncodingFormat.HEX


class TestEditing:
    """Tests for editing either buffer."""

    def test_edit_encoded_decodes(self, converter):
        converter.edit_encoded("SGVsbG8=")
        assert converter.state.plain_text == "Hello"
        assert converter.state.last_edited is LastEdited.ENCODED
        assert converter.state.error == ""

    def test_edit_plain_encodes(self, converter):
        converter.edit_plain("Hello")
        assert converter.state.encoded_text == "SGVsbG8="
        assert converter.state.last_edited is LastEdited.PLAIN

    def test_decode_error_clears_plain(self):
        converter = ConversionOrchestrator(EncodingFormat.HEX)
        converter.edit_encoded("48 69")
        converter.edit_encoded("48 65 6")
        assert converter.state.error == "Invalid hex string length"
        assert converter.state.plain_text == ""
        assert converter.state.encoded_text == "48 65 6"

    def test_error_cleared_by_next_success(self):
        converter = ConversionOrchestrator(EncodingFormat.URL_ENCODED)
        converter.edit_encoded("100%")
        assert converter.state.error == "Invalid URL encoded string"
        converter.edit_encoded("100%25")
        assert converter.state.error == ""
        assert converter.state.plain_text == "100%"

    def test_blank_encoded_clears_plain(self, converter):
        converter.edit_encoded("SGVsbG8=")
        converter.edit_encoded("   ")
        assert converter.state.plain_text == ""
        assert converter.state.error == ""

    def test_blank_plain_clears_encoded(self, converter):
        converter.edit_plain("Hello")
        converter.edit_plain("\n")
        assert converter.state.encoded_text == ""

    def test_clear_encoded(self, converter):
        converter.edit_encoded("SGVsbG8=")
        converter.clear_encoded()
        assert converter.state.encoded_text == ""
        assert converter.state.plain_text == ""


class TestJWT:
    """Tests for the decode-only JWT format."""

    @pytest.fixture
    def jwt_converter(self, hs256_jwt) -> ConversionOrchestrator:
        converter = ConversionOrchestrator(EncodingFormat.JWT)
        converter.edit_encoded(hs256_jwt)
        return converter

    def test_decodes_token(self, jwt_converter):
        decoded = json.loads(jwt_converter.state.plain_text)
        assert decoded["header"] == {"alg": "HS256"}
        assert decoded["payload"] == {"sub": "1234567890"}

    def test_plain_is_read_only(self, jwt_converter, hs256_jwt):
        """Edits to the plain buffer are ignored."""
        before = jwt_converter.state.plain_text
        assert jwt_converter.plain_editable is False
        jwt_converter.edit_plain("anything")
        assert jwt_converter.state.plain_text == before
        assert jwt_converter.state.encoded_text == hs256_jwt
        assert jwt_converter.state.last_edited is LastEdited.ENCODED

    def test_clear_plain_keeps_token(self, jwt_converter, hs256_jwt):
        jwt_converter.clear_plain()
        assert jwt_converter.state.plain_text == ""
        assert jwt_converter.state.encoded_text == hs256_jwt

    def test_invalid_token(self):
        converter = ConversionOrchestrator(EncodingFormat.JWT)
        converter.edit_encoded("not-a-token")
        assert converter.state.error == "Invalid JWT token"


class TestSetFormat:
    """Tests for switching formats."""

    def test_buffers_kept_by_default(self, converter):
        converter.edit_plain("Hi")
        converter.set_format("hex")
        assert converter.format is EncodingFormat.HEX
        assert converter.state.encoded_text == "SGk="
        assert converter.state.plain_text == "Hi"

    def test_reconvert_after_plain_edit(self, converter):
        converter.edit_plain("Hi")
        converter.set_format(EncodingFormat.HEX, reconvert=True)
        assert converter.state.encoded_text == "48 69"

    def test_reconvert_after_encoded_edit(self, converter):
        converter.edit_encoded("48 69")
        converter.set_format("hex", reconvert=True)
        assert converter.state.plain_text == "Hi"

    def test_reconvert_to_jwt_reports_error(self, converter):
        """Re-encoding into a decode-only format surfaces the codec error."""
        converter.edit_plain("Hi")
        converter.set_format("jwt", reconvert=True)
        assert converter.state.error == "JWT encoding not supported - JWT is decode-only"

    def test_unknown_format(self, converter):
        with pytest.raises(ValueError):
            converter.set_format("rot13")


class TestBeautifyAndSort:
    """Tests for plain-buffer rewrites."""

    def test_beautify(self, converter):
        converter.edit_plain("{name:'Bob', age:30,}")
        encoded_before = converter.state.encoded_text

        result = converter.beautify_plain()

        assert result is not None and not result.already_canonical
        assert converter.state.plain_text == '{\n  "name": "Bob",\n  "age": 30\n}'
        assert converter.state.last_edited is LastEdited.NONE
        # The rewrite does not trigger an encode
        assert converter.state.encoded_text == encoded_before

    def test_beautify_already_canonical(self, converter):
        converter.edit_plain('{\n  "a": 1\n}')
        result = converter.beautify_plain()
        assert result.already_canonical is True
        assert converter.state.last_edited is LastEdited.PLAIN

    def test_beautify_trims_padded_canonical(self, converter):
        """Canonical JSON with a trailing newline is rewritten without it."""
        converter.edit_plain('{\n  "a": 1\n}\n')
        result = converter.beautify_plain()
        assert result.already_canonical is False
        assert converter.state.plain_text == '{\n  "a": 1\n}'
        assert converter.state.last_edited is LastEdited.NONE

    def test_beautify_blank(self, converter):
        assert converter.beautify_plain() is None
        assert converter.state.error == "No content to beautify"

    def test_beautify_failure(self, converter):
        converter.edit_plain("hello world")
        assert converter.beautify_plain() is None
        assert converter.state.error == "Content could not be beautified"
        assert converter.state.plain_text == "hello world"

    def test_beautify_decoded_jwt(self, hs256_jwt):
        """A read-only plain buffer can still be reformatted."""
        converter = ConversionOrchestrator(EncodingFormat.JWT)
        converter.edit_encoded(hs256_jwt)
        converter.beautify_plain()
        assert converter.state.plain_text.startswith('{\n  "header": {\n    "alg": "HS256"')

    def test_sort(self, converter):
        converter.edit_plain('{"b":1,"a":{"z":2,"y":3}}')
        assert converter.sort_plain() is True
        assert converter.state.plain_text == '{\n  "a": {\n    "y": 3,\n    "z": 2\n  },\n  "b": 1\n}'
        assert converter.state.last_edited is LastEdited.NONE

    def test_sort_blank(self, converter):
        assert converter.sort_plain() is False
        assert converter.state.error == "No content to sort"

    def test_sort_invalid(self, converter):
        converter.edit_plain("{a:1}")
        assert converter.sort_plain() is False
        assert converter.state.error == "Invalid JSON: cannot sort keys"


class TestStructuralView:
    """Tests for the collapse state of the plain buffer."""

    def test_refresh_tree(self, converter):
        converter.edit_plain('{"a": {"b": [1, 2]}}')
        assert converter.refresh_tree() is True
        assert converter.collapse.root.find(".a.b") is not None

    def test_refresh_tree_not_a_container(self, converter):
        converter.edit_plain("42")
        assert converter.refresh_tree() is False
        assert converter.collapse.root is None

    def test_refresh_tree_invalid(self, converter):
        converter.edit_plain("{a: 1}")
        assert converter.refresh_tree() is False

    def test_toggle_and_all(self, converter):
        converter.edit_plain('{"a": {"b": [1, 2]}}')
        converter.refresh_tree()
        assert converter.toggle_collapse(".a") is True
        converter.collapse_all()
        assert converter.collapse.collapsed == {"", ".a", ".a.b"}
        converter.expand_all()
        assert converter.collapse.collapsed == frozenset()

    def test_text_change_resets_collapse(self, converter):
        """Any change to the plain text clears the collapse set, including a sort."""
        converter.edit_plain('{"b": {"x": 1}, "a": 2}')
        converter.refresh_tree()
        converter.collapse_all()
        converter.sort_plain()
        assert converter.collapse.collapsed == frozenset()
        assert converter.collapse.root is None


class TestDeepNesting:
    """Deeply nested input sets the error instead of raising."""

    DEPTH = 50_000

    def test_beautify(self, converter):
        converter.edit_plain("[" * self.DEPTH)
        assert converter.beautify_plain() is None
        assert converter.state.error == "JSON is nested too deeply to beautify"
        assert converter.state.plain_text == "[" * self.DEPTH

    def test_sort(self, converter):
        converter.edit_plain("[" * self.DEPTH + "]" * self.DEPTH)
        assert converter.sort_plain() is False
        assert converter.state.error == "JSON is nested too deeply to sort"

    def test_refresh_tree(self, converter):
        converter.edit_plain('{"a":' * self.DEPTH + "1" + "}" * self.DEPTH)
        assert converter.refresh_tree() is False
        assert converter.collapse.root is None

    def test_decode_jwt(self):
        converter = ConversionOrchestrator(EncodingFormat.JWT)
        segment = base64.b64encode(("[" * self.DEPTH + "]" * self.DEPTH).encode()).decode()
        converter.edit_encoded(f"{segment}.e30.sig")
        assert converter.state.error == "Invalid JWT token"
        assert converter.state.plain_text == ""
