"""Tests for the List Wizard set operations."""

from __future__ import annotations

from tooly.tools import ListComparison, compare_lists, parse_list


class TestParseList:
    """Tests for parse_list()."""

    def test_all_delimiters(self):
        """Commas, newlines, tabs, semicolons and pipes all separate items."""
        assert parse_list("a, b;c|d\ne\t f\r\ng") == ["a", "b", "c", "d", "e", "f", "g"]

    def test_trims_and_drops_empty(self):
        assert parse_list("  a  ,, ,\n\n b ") == ["a", "b"]

    def test_deduplicates_in_order(self):
        """The first occurrence of a repeated item wins."""
        assert parse_list("b, a, b, c, a") == ["b", "a", "c"]

    def test_empty(self):
        assert parse_list("") == []


class TestCompareLists:
    """Tests for compare_lists()."""

    def test_operations(self):
        result = compare_lists("apple, banana, cherry", "banana\ncherry\ndate")
        assert result.intersection == ["banana", "cherry"]
        assert result.union == ["apple", "banana", "cherry", "date"]
        assert result.only_in_a == ["apple"]
        assert result.only_in_b == ["date"]
        assert result.symmetric_difference == ["apple", "date"]

    def test_identical_lists(self):
        result = compare_lists("x|y", "y;x")
        assert result.intersection == ["x", "y"]
        assert result.symmetric_difference == []

    def test_one_list_empty(self):
        result = compare_lists("a, b", "")
        assert not result.is_empty
        assert result.intersection == []
        assert result.only_in_a == ["a", "b"]

    def test_both_empty(self):
        assert compare_lists(" ", "\n").is_empty

    def test_sections(self):
        """Sections are listed in display order with their items."""
        titles = [title for title, _ in compare_lists("a", "b").sections()]
        assert titles == [
            "Intersection (A ∩ B)",
            "Union (A ∪ B)",
            "Only in A (A - B)",
            "Only in B (B - A)",
            "Symmetric Difference (A △ B)",
        ]

    def test_default_is_empty(self):
        assert ListComparison().is_empty
