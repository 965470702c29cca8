"""Views (one per tab) for the Tooly TUI."""

from tooly.tui.views.converter_pane import ConverterPane
from tooly.tui.views.diff_pane import DiffPane
from tooly.tui.views.list_pane import ListPane
from tooly.tui.views.time_pane import TimePane

__all__ = [
    "ConverterPane",
    "DiffPane",
    "ListPane",
    "TimePane",
]
