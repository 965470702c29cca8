"""TUI widgets for Tooly."""

from tooly.tui.widgets.json_highlight import highlight_invalid_json, render_invalid_json
from tooly.tui.widgets.json_tree_panel import JsonTreePanel, node_label

__all__ = [
    # JSON tree panel
    "JsonTreePanel",
    "node_label",
    # Invalid JSON highlighting
    "highlight_invalid_json",
    "render_invalid_json",
]
