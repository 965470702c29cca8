"""
Diff Master: line- or character-level text differences.

Differences are computed with difflib.SequenceMatcher and returned as an
ordered list of parts, each tagged added, removed or unchanged.

Diff Types:
    - unchanged: Present in both texts
    - removed: Only in the left text
    - added: Only in the right text
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from typing import Literal

DiffMode = Literal["lines", "chars"]

DIFF_MODES: tuple[str, ...] = ("lines", "chars")


@dataclass(frozen=True)
class DiffPart:
    """A run of text with its diff type."""

    kind: str
    value: str


@dataclass
class DiffStats:
    """Counts per diff type (lines in line mode, characters in char mode)."""

    added: int = 0
    removed: int = 0
    unchanged: int = 0


@dataclass
class TextDiff:
    """Result of diffing two texts."""

    parts: list[DiffPart] = field(default_factory=list)
    stats: DiffStats = field(default_factory=DiffStats)
    mode: str = "lines"

    @property
    def identical(self) -> bool:
        return all(part.kind == "unchanged" for part in self.parts)


def _tokenize(text: str, mode: str) -> list[str]:
    if mode == "lines":
        return text.splitlines(keepends=True)
    return list(text)


def _measure(value: str, mode: str) -> int:
    if mode == "lines":
        return value.count("\n")
    return len(value)


def diff_texts(left: str, right: str, mode: DiffMode = "lines") -> TextDiff:
    """Diff two texts.

    Args:
        left: The original text (A).
        right: The modified text (B).
        mode: "lines" or "chars".

    Returns:
        A TextDiff with ordered parts and per-type stats.

    Raises:
        ValueError: If mode is not "lines" or "chars".

    Examples:
        >>> [p.kind for p in diff_texts("a\\nb\\n", "a\\nc\\n").parts]
        ['unchanged', 'removed', 'added']
    """
    if mode not in DIFF_MODES:
        raise ValueError(f"Unsupported diff mode '{mode}'. Supported modes: lines, chars")

    left_tokens = _tokenize(left, mode)
    right_tokens = _tokenize(right, mode)
    matcher = difflib.SequenceMatcher(None, left_tokens, right_tokens, autojunk=False)

    result = TextDiff(mode=mode)

    def _add(kind: str, tokens: list[str]) -> None:
        value = "".join(tokens)
        if not value:
            return
        result.parts.append(DiffPart(kind, value))
        setattr(result.stats, kind, getattr(result.stats, kind) + _measure(value, mode))

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _add("unchanged", left_tokens[i1:i2])
        else:
            # "replace" yields the removal first, then the addition
            _add("removed", left_tokens[i1:i2])
            _add("added", right_tokens[j1:j2])

    return result


def side_by_side(diff: TextDiff) -> tuple[list[DiffPart], list[DiffPart]]:
    """Split a diff into the left view (no additions) and the right view (no removals)."""
    left = [part for part in diff.parts if part.kind != "added"]
    right = [part for part in diff.parts if part.kind != "removed"]
    return left, right
