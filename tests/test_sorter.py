"""Tests for the deep JSON key sorter."""

from __future__ import annotations

import json

import pytest

from tooly.errors import SortError
from tooly.json_tools import deep_sort, sort_keys


class TestSortKeys:
    """Tests for sort_keys()."""

    def test_nested_objects(self):
        """Keys are sorted at every level and output is 2-space indented."""
        assert sort_keys('{"b":1,"a":{"z":2,"y":3}}') == (
            '{\n  "a": {\n    "y": 3,\n    "z": 2\n  },\n  "b": 1\n}'
        )

    def test_idempotent(self, nested_document):
        """Sorting sorted output changes nothing."""
        once = sort_keys(json.dumps(nested_document))
        assert sort_keys(once) == once

    def test_value_preserving(self, nested_document):
        """Sorting never changes the parsed value."""
        assert json.loads(sort_keys(json.dumps(nested_document))) == nested_document

    def test_code_point_order(self):
        """Uppercase keys sort before lowercase ones."""
        assert list(json.loads(sort_keys('{"b":1,"B":2,"a":3}'))) == ["B", "a", "b"]

    def test_arrays_keep_order(self):
        """Array elements stay in place, but objects inside them are sorted."""
        result = json.loads(sort_keys('[3, {"y": 1, "x": 2}, 1]'))
        assert result == [3, {"x": 2, "y": 1}, 1]
        assert list(result[1]) == ["x", "y"]

    def test_primitive(self):
        assert sort_keys("true") == "true"

    @pytest.mark.parametrize("text", ["", "{a:1}", "{'a': 1}", '{"a": 1,}'])
    def test_invalid_json(self, text):
        with pytest.raises(SortError, match="Invalid JSON: cannot sort keys"):
            sort_keys(text)


class TestDeepSort:
    """Tests for deep_sort()."""

    def test_returns_new_value(self):
        """The input is not modified."""
        original = {"b": {"d": 1, "c": 2}, "a": 0}
        result = deep_sort(original)
        assert list(original) == ["b", "a"]
        assert list(result) == ["a", "b"]
        assert list(result["b"]) == ["c", "d"]

    def test_primitives_unchanged(self):
        for value in (None, True, 1, 2.5, "text"):
            assert deep_sort(value) == value
