"""
Fault-tolerant JSON beautifier.

Beautification runs in stages, each attempted only when the previous one
failed:

    1. Already canonical (byte for byte): returned unchanged and flagged.
    2. Strict parse: re-serialized with 2-space indentation.
    3. Repair pipeline: an ordered sequence of text rewrites (quote bare
       keys, single → double quotes, drop trailing commas, balance closers),
       then a strict re-parse.
    4. Line-level fallback: each line, or each single-level ``{...}`` inside
       it, is beautified where it parses; everything else is kept verbatim.

If nothing changed, the content could not be beautified.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from tooly.errors import BeautifyError
from tooly.json_tools.serialization import NestingDepthError, dumps_canonical, loads_strict

logger = logging.getLogger(__name__)

_BARE_KEY_RE = re.compile(r"([{,]\s*)([a-zA-Z_$][a-zA-Z0-9_$]*)\s*:")
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_FLAT_OBJECT_RE = re.compile(r"\{[^{}]*\}")


@dataclass(frozen=True)
class BeautifyResult:
    """Outcome of a successful beautify.

    Attributes:
        text: The formatted text.
        already_canonical: True if the input was exactly the canonical
            serialization and was returned unchanged. Canonical JSON with
            surrounding whitespace is returned trimmed and not flagged.
    """

    text: str
    already_canonical: bool = False


def quote_bare_keys(text: str) -> str:
    """Wrap identifier-like keys that follow ``{`` or ``,`` in double quotes.

    >>> quote_bare_keys("{name: 1, _id: 2}")
    '{"name": 1, "_id": 2}'
    """
    return _BARE_KEY_RE.sub(r'\1"\2":', text)


def replace_single_quotes(text: str) -> str:
    """Turn every single quote into a double quote."""
    return text.replace("'", '"')


def remove_trailing_commas(text: str) -> str:
    """Drop commas that sit directly (modulo whitespace) before ``}`` or ``]``."""
    return _TRAILING_COMMA_RE.sub(r"\1", text)


def balance_closers(text: str) -> str:
    """Append the ``}`` and then the ``]`` characters the text is short of."""
    missing_braces = text.count("{") - text.count("}")
    missing_brackets = text.count("[") - text.count("]")
    return text + "}" * max(missing_braces, 0) + "]" * max(missing_brackets, 0)


# Order matters: keys are quoted before quotes are normalized
REPAIR_PIPELINE: tuple[Callable[[str], str], ...] = (
    quote_bare_keys,
    replace_single_quotes,
    remove_trailing_commas,
    balance_closers,
)


def repair_json_text(text: str) -> str:
    """Apply every rewrite of the repair pipeline in order."""
    for rewrite in REPAIR_PIPELINE:
        text = rewrite(text)
    return text


def _beautify_flat_objects(line: str) -> str:
    processed = line
    for match in _FLAT_OBJECT_RE.findall(line):
        try:
            parsed = loads_strict(match)
        except ValueError:
            continue
        processed = processed.replace(match, dumps_canonical(parsed), 1)
    return processed


def beautify_lines(text: str) -> str:
    """Best-effort beautification of text that does not parse as a whole.

    Args:
        text: The (trimmed) input text.

    Returns:
        The lines joined with newlines, each beautified where possible.
    """
    processed_lines: list[str] = []

    for line in text.split("\n"):
        trimmed_line = line.strip()
        try:
            processed_lines.append(dumps_canonical(loads_strict(trimmed_line)))
            continue
        except ValueError:
            pass

        if _FLAT_OBJECT_RE.search(trimmed_line):
            processed_lines.append(_beautify_flat_objects(trimmed_line))
        else:
            processed_lines.append(line)

    return "\n".join(processed_lines)


def beautify(text: str) -> BeautifyResult:
    """Format JSON-ish text as canonical 2-space JSON, repairing it if needed.

    Args:
        text: The text to beautify.

    Returns:
        A BeautifyResult with the formatted text.

    Raises:
        BeautifyError: If the text is blank, is nested too deeply to
            format, or could not be changed into anything better.

    Examples:
        >>> beautify("{name:'Bob', age:30,}").text
        '{\\n  "name": "Bob",\\n  "age": 30\\n}'
    """
    trimmed = text.strip()
    if not trimmed:
        raise BeautifyError("No content to beautify")

    try:
        canonical = dumps_canonical(loads_strict(trimmed))
    except NestingDepthError as e:
        raise BeautifyError("JSON is nested too deeply to beautify") from e
    except ValueError:
        canonical = None

    if canonical is not None:
        return BeautifyResult(canonical, already_canonical=canonical == text)

    repaired = repair_json_text(trimmed)
    try:
        beautified = dumps_canonical(loads_strict(repaired))
        logger.debug("JSON repaired by heuristic pipeline")
    except ValueError:
        logger.debug("Repair pipeline failed, falling back to line-level beautify")
        beautified = beautify_lines(trimmed)

    if beautified == trimmed:
        raise BeautifyError("Content could not be beautified")

    return BeautifyResult(beautified)
