"""
List Wizard: set operations over two delimited lists.

Lists may be separated by commas, newlines, tabs, semicolons or pipes.
Every result keeps first-occurrence order (A's items before B's).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_DELIMITER_RE = re.compile(r"[,\n\r\t;|]+")


def parse_list(text: str) -> list[str]:
    """Split text into unique, trimmed, non-empty items.

    Examples:
        >>> parse_list("a, b\\nb;c | ")
        ['a', 'b', 'c']
    """
    if not text.strip():
        return []
    items = (item.strip() for item in _DELIMITER_RE.split(text))
    return list(dict.fromkeys(item for item in items if item))


@dataclass
class ListComparison:
    """Results of comparing list A with list B."""

    intersection: list[str] = field(default_factory=list)
    union: list[str] = field(default_factory=list)
    only_in_a: list[str] = field(default_factory=list)
    only_in_b: list[str] = field(default_factory=list)
    symmetric_difference: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.union

    def sections(self) -> list[tuple[str, list[str]]]:
        """(title, items) pairs in display order."""
        return [
            ("Intersection (A ∩ B)", self.intersection),
            ("Union (A ∪ B)", self.union),
            ("Only in A (A - B)", self.only_in_a),
            ("Only in B (B - A)", self.only_in_b),
            ("Symmetric Difference (A △ B)", self.symmetric_difference),
        ]


def compare_lists(list_a: str, list_b: str) -> ListComparison:
    """Compute the set operations between two delimited lists.

    Args:
        list_a: Text of list A.
        list_b: Text of list B.

    Returns:
        A ListComparison (empty if both lists are empty).
    """
    items_a = parse_list(list_a)
    items_b = parse_list(list_b)
    set_a = set(items_a)
    set_b = set(items_b)

    only_in_a = [item for item in items_a if item not in set_b]
    only_in_b = [item for item in items_b if item not in set_a]

    return ListComparison(
        intersection=[item for item in items_a if item in set_b],
        union=items_a + only_in_b,
        only_in_a=only_in_a,
        only_in_b=only_in_b,
        symmetric_difference=only_in_a + only_in_b,
    )
