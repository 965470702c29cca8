"""
Exception hierarchy for the Tooly text utilities.

Every error derives from ValueError, so code that treats bad input the
usual way (``except ValueError``) keeps working. The public boundary
(``tooly.api``, the converter orchestrator, the CLI and the TUI) catches
these and turns them into a single user-facing message.

Hierarchy:
    ToolyError
    ├── CodecError
    │   ├── EncodeError
    │   └── DecodeError
    ├── BeautifyError
    ├── SortError
    └── ParseError
"""

from __future__ import annotations


class ToolyError(ValueError):
    """Base class for all recoverable Tooly errors.

    Attributes:
        message: Human-readable message shown to the user.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CodecError(ToolyError):
    """Raised when a codec cannot convert its input."""


class EncodeError(CodecError):
    """Raised when plain text cannot be encoded (e.g. JWT, which is decode-only)."""


class DecodeError(CodecError):
    """Raised when encoded text is malformed for the active format."""


class BeautifyError(ToolyError):
    """Raised when content could not be parsed or repaired into JSON."""


class SortError(ToolyError):
    """Raised when content is not valid JSON, so keys cannot be ordered."""


class ParseError(ToolyError):
    """Raised when a structural tree cannot be built from the text."""
