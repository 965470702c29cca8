"""
Conversion orchestrator for the Smart Converter.

Owns the pair of text buffers (encoded and plain), the active format, which
side was edited last, the visible error, and the collapse state of the
structural JSON view. Editing one side re-derives the other:

    edit encoded  →  decode  →  plain
    edit plain    →  encode  →  encoded   (not allowed for JWT)

Codec and JSON functions stay pure; this class is the only place state
changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from tooly.codecs import EncodingFormat, get_codec, resolve_format
from tooly.errors import ParseError, ToolyError
from tooly.json_tools import BeautifyResult, CollapseState, beautify, build_tree, sort_keys

logger = logging.getLogger(__name__)


class LastEdited(Enum):
    """Which buffer the user edited most recently."""

    NONE = "none"
    ENCODED = "encoded"
    PLAIN = "plain"


@dataclass
class ConverterState:
    """The converter's buffers and status.

    Attributes:
        format: The active encoding format.
        encoded_text: The encoded (left) buffer.
        plain_text: The plain (right) buffer.
        last_edited: Which buffer was edited last.
        error: The visible error message ("" when there is none).
    """

    format: EncodingFormat = EncodingFormat.BASE64
    encoded_text: str = ""
    plain_text: str = ""
    last_edited: LastEdited = LastEdited.NONE
    error: str = ""


class ConversionOrchestrator:
    """Keeps the encoded and plain buffers in sync.

    Every public method runs to completion and never raises on bad input;
    failures are reported through ``state.error``.

    Usage:
        converter = ConversionOrchestrator()
        converter.edit_encoded("SGVsbG8=")
        converter.state.plain_text  # 'Hello'
    """

    def __init__(self, fmt: EncodingFormat | str = EncodingFormat.BASE64) -> None:
        self.state = ConverterState(format=resolve_format(fmt))
        self.collapse = CollapseState()

    @property
    def format(self) -> EncodingFormat:
        return self.state.format

    @property
    def plain_editable(self) -> bool:
        """Whether the plain buffer accepts edits under the active format."""
        return get_codec(self.state.format).supports_encode

    # -- buffer edits -----------------------------------------------------

    def edit_encoded(self, text: str) -> None:
        """Replace the encoded buffer and decode it into the plain buffer."""
        self.state.encoded_text = text
        self.state.last_edited = LastEdited.ENCODED
        self._decode()

    def edit_plain(self, text: str) -> None:
        """Replace the plain buffer and encode it into the encoded buffer.

        Under a decode-only format (JWT) the plain buffer is read-only and
        this is a no-op.
        """
        if not self.plain_editable:
            logger.debug("Ignoring plain edit: %s is decode-only", self.state.format.value)
            return

        self.state.last_edited = LastEdited.PLAIN
        self._set_plain(text)
        self._encode()

    def clear_encoded(self) -> None:
        self.edit_encoded("")

    def clear_plain(self) -> None:
        """Empty the plain buffer (and with it the encoded buffer)."""
        if not self.plain_editable:
            # A read-only plain buffer is still cleared, but nothing is encoded
            self._set_plain("")
            self.state.error = ""
            return
        self.edit_plain("")

    def set_format(self, fmt: EncodingFormat | str, reconvert: bool = False) -> None:
        """Switch the active format.

        Buffers are retained as they are. With ``reconvert`` the last
        conversion direction is re-run immediately in the new format.

        Args:
            fmt: The new format.
            reconvert: Re-derive the non-edited buffer right away.
        """
        self.state.format = resolve_format(fmt)
        logger.debug("Format changed to %s", self.state.format.value)

        if not reconvert:
            return
        if self.state.last_edited is LastEdited.ENCODED:
            self._decode()
        elif self.state.last_edited is LastEdited.PLAIN:
            self._encode()

    # -- plain-buffer rewrites --------------------------------------------

    def beautify_plain(self) -> BeautifyResult | None:
        """Beautify the plain buffer in place.

        Returns:
            The BeautifyResult, or None if beautification failed (the error
            is set instead).
        """
        try:
            result = beautify(self.state.plain_text)
        except ToolyError as e:
            self.state.error = e.message
            return None

        self.state.error = ""
        if not result.already_canonical:
            self.state.last_edited = LastEdited.NONE
            self._set_plain(result.text)
        return result

    def sort_plain(self) -> bool:
        """Deep-sort the keys of the plain buffer in place.

        Returns:
            True on success, False if the buffer is not valid JSON.
        """
        if not self.state.plain_text.strip():
            self.state.error = "No content to sort"
            return False

        try:
            sorted_text = sort_keys(self.state.plain_text)
        except ToolyError as e:
            self.state.error = e.message
            return False

        self.state.error = ""
        self.state.last_edited = LastEdited.NONE
        self._set_plain(sorted_text)
        return True

    # -- structural view --------------------------------------------------

    def refresh_tree(self) -> bool:
        """Rebuild the structural tree from the plain buffer.

        Returns:
            True if the plain buffer is a JSON object or array (and so has a
            collapsible tree), False otherwise.
        """
        try:
            root = build_tree(self.state.plain_text)
        except ParseError:
            self.collapse.reset(None)
            return False

        if not root.is_container:
            self.collapse.reset(None)
            return False

        self.collapse.reset(root)
        return True

    def toggle_collapse(self, path: str) -> bool:
        return self.collapse.toggle(path)

    def collapse_all(self) -> None:
        self.collapse.collapse_all()

    def expand_all(self) -> None:
        self.collapse.expand_all()

    # -- internals --------------------------------------------------------

    def _set_plain(self, text: str) -> None:
        if text != self.state.plain_text:
            self.state.plain_text = text
            self.collapse.reset(None)

    def _decode(self) -> None:
        if not self.state.encoded_text.strip():
            self._set_plain("")
            self.state.error = ""
            return

        try:
            decoded = get_codec(self.state.format).decode(self.state.encoded_text)
        except ToolyError as e:
            logger.debug("Decode failed (%s): %s", self.state.format.value, e)
            self.state.error = e.message
            self._set_plain("")
            return

        self.state.error = ""
        self._set_plain(decoded)

    def _encode(self) -> None:
        if not self.state.plain_text.strip():
            self.state.encoded_text = ""
            self.state.error = ""
            return

        try:
            encoded = get_codec(self.state.format).encode(self.state.plain_text)
        except ToolyError as e:
            logger.debug("Encode failed (%s): %s", self.state.format.value, e)
            self.state.error = e.message
            self.state.encoded_text = ""
            return

        self.state.error = ""
        self.state.encoded_text = encoded
