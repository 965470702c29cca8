"""
Tooly CLI - the Smart Converter and helper tools without the TUI.

Subcommands:
    - encode / decode: Base64, URL, JWT (decode only), Hex, Unicode escape
    - beautify: Repair and pretty-print JSON
    - sort: Deep-sort JSON object keys
    - tree: Render JSON structurally, optionally collapsed
    - diff: Line or character diff of two files
    - lists: Set operations between two list files
    - time: Epoch timestamps in several time zones

TEXT arguments are read from stdin when omitted.

Usage:
    uv run python -m tooly.cli decode base64 SGVsbG8=
    echo "{name:'Bob',}" | uv run python -m tooly.cli beautify
    uv run python -m tooly.cli tree data.json --collapse-all
    uv run python -m tooly.cli diff before.txt after.txt --mode chars
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from tooly import api
from tooly.codecs import SUPPORTED_FORMATS
from tooly.errors import ToolyError
from tooly.json_tools import CollapseState
from tooly.logging_config import LOG_LEVELS, setup_logging
from tooly.tools import DEFAULT_ZONES, TIMEZONES, compare_lists, convert_epochs, diff_texts

logger = logging.getLogger(__name__)

DIFF_MARKERS = {"added": "+", "removed": "-", "unchanged": " "}


def read_text(value: str | None) -> str:
    """Return the TEXT argument, or stdin (minus one trailing newline) when omitted."""
    if value is not None:
        return value
    data = sys.stdin.read()
    if data.endswith("\n"):
        data = data[:-1]
        if data.endswith("\r"):
            data = data[:-1]
    return data


def read_file(path: str) -> str:
    """Read a UTF-8 file, exiting with an error if it does not exist."""
    if not os.path.exists(path):
        fail(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def cmd_encode(args: argparse.Namespace) -> None:
    result = api.encode(args.format, read_text(args.text))
    if not result.ok:
        fail(result.error.message)
    print(result.value)


def cmd_decode(args: argparse.Namespace) -> None:
    result = api.decode(args.format, read_text(args.text))
    if not result.ok:
        fail(result.error.message)

    output = result.value
    if args.pretty:
        pretty = api.beautify(output)
        if pretty.ok:
            output = pretty.value.text
    print(output)


def cmd_beautify(args: argparse.Namespace) -> None:
    result = api.beautify(read_text(args.text))
    if not result.ok:
        fail(result.error.message)
    if result.value.already_canonical:
        logger.info("Input is already canonical JSON")
    print(result.value.text)


def cmd_sort(args: argparse.Namespace) -> None:
    result = api.sort_keys(read_text(args.text))
    if not result.ok:
        fail(result.error.message)
    print(result.value)


def cmd_tree(args: argparse.Namespace) -> None:
    text = read_file(args.file) if args.file else read_text(None)
    result = api.build_tree(text)
    if not result.ok:
        fail(result.error.message)

    state = CollapseState(result.value)
    if args.collapse_all:
        state.collapse_all()
    for path in args.collapse or []:
        if not state.is_collapsed(path):
            state.toggle(path)
    if args.paths:
        for node in result.value.iter_nodes():
            print(node.path or "(root)")
        return
    try:
        print(state.render())
    except ToolyError as e:
        fail(e.message)


def cmd_diff(args: argparse.Namespace) -> None:
    diff = diff_texts(read_file(args.left), read_file(args.right), mode=args.mode)
    if diff.identical:
        print("No differences found", file=sys.stderr)

    for part in diff.parts:
        marker = DIFF_MARKERS[part.kind]
        if args.mode == "lines":
            for line in part.value.splitlines():
                print(f"{marker} {line}")
        else:
            print(f"{marker} {part.value!r}")

    stats = diff.stats
    print(
        f"{stats.added} added, {stats.removed} removed, {stats.unchanged} unchanged",
        file=sys.stderr,
    )


def cmd_lists(args: argparse.Namespace) -> None:
    comparison = compare_lists(read_file(args.list_a), read_file(args.list_b))
    if comparison.is_empty:
        return
    for title, items in comparison.sections():
        print(f"## {title} ({len(items)})")
        for item in items:
            print(item)
        print()


def cmd_time(args: argparse.Namespace) -> None:
    zones = args.zone or list(DEFAULT_ZONES)
    for label, formatted in convert_epochs(read_text(args.text), zones).items():
        print(f"{label}: {formatted}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per tool."""
    parser = argparse.ArgumentParser(
        prog="tooly-cli",
        description="Simple tools for everyday coding: encode/decode, beautify and "
        "sort JSON, diff texts, compare lists and convert epoch timestamps.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level for stderr logging (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    formats = sorted(SUPPORTED_FORMATS)

    encode_parser = subparsers.add_parser("encode", help="Encode plain text")
    encode_parser.add_argument("format", choices=formats, help="Encoding format")
    encode_parser.add_argument("text", nargs="?", help="Text to encode (default: stdin)")
    encode_parser.set_defaults(func=cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode encoded text")
    decode_parser.add_argument("format", choices=formats, help="Encoding format")
    decode_parser.add_argument("text", nargs="?", help="Text to decode (default: stdin)")
    decode_parser.add_argument(
        "--pretty", action="store_true", help="Beautify the decoded text if it is JSON"
    )
    decode_parser.set_defaults(func=cmd_decode)

    beautify_parser = subparsers.add_parser("beautify", help="Repair and pretty-print JSON")
    beautify_parser.add_argument("text", nargs="?", help="JSON text (default: stdin)")
    beautify_parser.set_defaults(func=cmd_beautify)

    sort_parser = subparsers.add_parser("sort", help="Sort JSON object keys recursively")
    sort_parser.add_argument("text", nargs="?", help="JSON text (default: stdin)")
    sort_parser.set_defaults(func=cmd_sort)

    tree_parser = subparsers.add_parser("tree", help="Render JSON structurally")
    tree_parser.add_argument("file", nargs="?", help="JSON file (default: stdin)")
    tree_parser.add_argument(
        "--collapse-all", action="store_true", help="Collapse every container"
    )
    tree_parser.add_argument(
        "--collapse",
        action="append",
        metavar="PATH",
        help="Collapse the node at PATH (e.g. .users[0]); repeatable",
    )
    tree_parser.add_argument(
        "--paths", action="store_true", help="List every node path instead of rendering"
    )
    tree_parser.set_defaults(func=cmd_tree)

    diff_parser = subparsers.add_parser("diff", help="Diff two text files")
    diff_parser.add_argument("left", help="Original file (A)")
    diff_parser.add_argument("right", help="Modified file (B)")
    diff_parser.add_argument(
        "-m", "--mode",
        choices=["lines", "chars"],
        default="lines",
        help="Diff granularity (default: lines)",
    )
    diff_parser.set_defaults(func=cmd_diff)

    lists_parser = subparsers.add_parser("lists", help="Set operations between two lists")
    lists_parser.add_argument("list_a", help="File with list A")
    lists_parser.add_argument("list_b", help="File with list B")
    lists_parser.set_defaults(func=cmd_lists)

    time_parser = subparsers.add_parser("time", help="Convert epoch timestamps")
    time_parser.add_argument("text", nargs="?", help="Timestamps (default: stdin)")
    time_parser.add_argument(
        "-z", "--zone",
        action="append",
        choices=[tz.name for tz in TIMEZONES],
        help="Time zone to show; repeatable (default: UTC and PST/PDT)",
    )
    time_parser.set_defaults(func=cmd_time)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the Tooly CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
