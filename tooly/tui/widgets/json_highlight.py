"""
Line highlighting for JSON the converter could not parse.

Marks the problems Beautify knows how to repair (unquoted keys, single
quotes, trailing commas) on top of ordinary JSON token colors.
"""

from __future__ import annotations

import re

from rich.text import Text

INVALID_JSON_NOTICE = "⚠ Invalid JSON detected. Press Beautify to fix common errors."

# (pattern, style) pairs applied in order; later spans win on overlap
HIGHLIGHT_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r'"(?:[^"\\]|\\.)*"(?=\s*:)'), "bold blue"),
    (re.compile(r'(?<=:)\s*"(?:[^"\\]|\\.)*"'), "green"),
    (re.compile(r"(?<=:)\s*-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?(?=\s*[,}\]]|\s*$)"), "dark_orange"),
    (re.compile(r"\b(?:true|false)\b"), "magenta"),
    (re.compile(r"\bnull\b"), "dim italic"),
    (re.compile(r"(?<=[{,])\s*[A-Za-z_$][\w$]*(?=\s*:)"), "black on yellow"),
    (re.compile(r"'[^']*'"), "black on yellow"),
    (re.compile(r",(?=\s*[}\]])"), "bold white on red"),
)


def highlight_invalid_json(text: str) -> Text:
    """Return ``text`` as rich Text with repairable problems marked."""
    highlighted = Text(text)
    for pattern, style in HIGHLIGHT_RULES:
        highlighted.highlight_regex(pattern, style)
    return highlighted


def render_invalid_json(text: str) -> Text:
    """Notice line followed by the highlighted text."""
    rendered = Text(INVALID_JSON_NOTICE + "\n\n", style="bold yellow")
    rendered.append_text(highlight_invalid_json(text))
    return rendered
