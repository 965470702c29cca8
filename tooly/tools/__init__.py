"""Helpers behind the Diff Master, List Wizard and Time Converter tabs."""

from tooly.tools.list_wizard import ListComparison, compare_lists, parse_list
from tooly.tools.text_diff import DiffPart, DiffStats, TextDiff, diff_texts, side_by_side
from tooly.tools.time_converter import (
    DEFAULT_ZONES,
    TIMEZONES,
    convert_epochs,
    current_epoch_ms,
    epoch_to_datetime,
    parse_epochs,
)

__all__ = [
    # List Wizard
    "parse_list",
    "compare_lists",
    "ListComparison",
    # Diff Master
    "diff_texts",
    "side_by_side",
    "DiffPart",
    "DiffStats",
    "TextDiff",
    # Time Converter
    "TIMEZONES",
    "DEFAULT_ZONES",
    "parse_epochs",
    "epoch_to_datetime",
    "convert_epochs",
    "current_epoch_ms",
]
