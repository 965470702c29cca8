"""Tests for the tooly-cli command line."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Path to the module
CLI_MODULE = "tooly.cli"


def run_cli(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    """Run the CLI with given arguments."""
    env = {**os.environ, "PYTHONUTF8": "1"}
    return subprocess.run(
        [sys.executable, "-m", CLI_MODULE, *args],
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        cwd=Path(__file__).parent.parent,
    )


class TestCLIBasic:
    """Basic CLI functionality tests."""

    def test_help_flag(self):
        """--help should show usage."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()

    def test_missing_command(self):
        """A subcommand is required."""
        result = run_cli()
        assert result.returncode != 0

    def test_unknown_format(self):
        result = run_cli("decode", "rot13", "abc")
        assert result.returncode != 0
        assert "invalid choice" in result.stderr


class TestCLICodecs:
    """Tests for encode/decode."""

    def test_encode_argument(self):
        result = run_cli("encode", "base64", "Hello")
        assert result.returncode == 0
        assert result.stdout == "SGVsbG8=\n"

    def test_decode_stdin(self):
        """TEXT is read from stdin when omitted; the trailing newline is dropped."""
        result = run_cli("decode", "hex", stdin="48 65 6c 6c 6f\n")
        assert result.returncode == 0
        assert result.stdout == "Hello\n"

    def test_decode_error(self):
        result = run_cli("decode", "hex", "48 65 6")
        assert result.returncode == 1
        assert result.stderr.strip() == "Error: Invalid hex string length"
        assert result.stdout == ""

    def test_encode_jwt_refused(self):
        result = run_cli("encode", "jwt", "{}")
        assert result.returncode == 1
        assert "decode-only" in result.stderr

    def test_decode_jwt_pretty(self, hs256_jwt):
        result = run_cli("decode", "jwt", hs256_jwt, "--pretty")
        assert result.returncode == 0
        assert json.loads(result.stdout)["payload"] == {"sub": "1234567890"}
        assert result.stdout.startswith('{\n  "header"')

    def test_unicode_roundtrip(self):
        encoded = run_cli("encode", "unicode", "héllo").stdout.rstrip("\n")
        assert encoded == "h\\u00e9llo"
        assert run_cli("decode", "unicode", encoded).stdout == "héllo\n"


class TestCLIJson:
    """Tests for beautify, sort and tree."""

    def test_beautify(self):
        result = run_cli("beautify", "{name:'Bob', age:30,}")
        assert result.returncode == 0
        assert result.stdout == '{\n  "name": "Bob",\n  "age": 30\n}\n'

    def test_beautify_blank(self):
        result = run_cli("beautify", stdin="\n")
        assert result.returncode == 1
        assert "No content to beautify" in result.stderr

    def test_sort(self):
        result = run_cli("sort", stdin='{"b":1,"a":{"z":2,"y":3}}')
        assert result.returncode == 0
        assert result.stdout == '{\n  "a": {\n    "y": 3,\n    "z": 2\n  },\n  "b": 1\n}\n'

    def test_sort_invalid(self):
        result = run_cli("sort", "{a:1}")
        assert result.returncode == 1
        assert "Invalid JSON: cannot sort keys" in result.stderr

    def test_tree_collapse_path(self, write_text):
        path = write_text("data.json", '{"users": [1, 2], "n": 3}')
        result = run_cli("tree", str(path), "--collapse", ".users")
        assert result.returncode == 0
        assert result.stdout == '{\n  "users": [ ... 2 items ],\n  "n": 3\n}\n'

    def test_tree_collapse_all(self):
        result = run_cli("tree", "--collapse-all", stdin='{"a": {"b": 1}}')
        assert result.stdout == "{ ... 1 key }\n"

    def test_tree_paths(self):
        result = run_cli("tree", "--paths", stdin='{"a": [true]}')
        assert result.stdout.splitlines() == ["(root)", ".a", ".a[0]"]

    def test_sort_deeply_nested(self):
        """Nesting too deep to sort is an error, not a traceback."""
        result = run_cli("sort", stdin="[" * 50_000 + "]" * 50_000)
        assert result.returncode == 1
        assert result.stderr.strip() == "Error: JSON is nested too deeply to sort"

    def test_tree_invalid(self):
        result = run_cli("tree", stdin="{a: 1}")
        assert result.returncode == 1
        assert result.stderr.startswith("Error: Invalid JSON")

    def test_tree_file_not_found(self):
        result = run_cli("tree", "/nonexistent/data.json")
        assert result.returncode == 1
        assert "not found" in result.stderr.lower()


class TestCLITools:
    """Tests for diff, lists and time."""

    def test_diff_lines(self, write_text):
        left = write_text("a.txt", "one\ntwo\nthree\n")
        right = write_text("b.txt", "one\n2\nthree\n")
        result = run_cli("diff", str(left), str(right))
        assert result.returncode == 0
        assert result.stdout.splitlines() == ["  one", "- two", "+ 2", "  three"]
        assert "1 added, 1 removed, 2 unchanged" in result.stderr

    def test_diff_identical(self, write_text):
        path = write_text("same.txt", "x\n")
        result = run_cli("diff", str(path), str(path))
        assert "No differences found" in result.stderr

    def test_lists(self, write_text):
        list_a = write_text("a.txt", "apple, banana")
        list_b = write_text("b.txt", "banana\ncherry")
        result = run_cli("lists", str(list_a), str(list_b))
        assert result.returncode == 0
        assert "## Intersection (A ∩ B) (1)\nbanana\n" in result.stdout
        assert "## Only in B (B - A) (1)\ncherry\n" in result.stdout

    def test_time(self):
        result = run_cli("time", "1640995200", "-z", "UTC", "-z", "JST")
        assert result.returncode == 0
        assert result.stdout.splitlines() == [
            "UTC: 01/01/2022, 12:00:00 AM UTC",
            "JST: 01/01/2022, 09:00:00 AM JST",
        ]

    @pytest.mark.parametrize("zone", ["Mars", "utc"])
    def test_time_unknown_zone(self, zone):
        result = run_cli("time", "0", "--zone", zone)
        assert result.returncode != 0


class TestCLILogging:
    """Tests for --log-level."""

    def test_debug_logs_to_stderr(self):
        """Decisions are logged at DEBUG on stderr, never on stdout."""
        result = run_cli("--log-level", "DEBUG", "decode", "base64", "/w==")
        assert result.returncode == 0
        assert result.stdout == "\xff\n"
        assert "robust decoder" in result.stderr
