"""
List Wizard pane: set operations between two delimited lists.

Results refresh as either list is edited.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Label, Static, TextArea

from tooly.tools import ListComparison, compare_lists
from tooly.tui.mixins import CopyFeedbackMixin

EMPTY_HINT = "Enter items in both lists (separated by commas, newlines, tabs, ; or |)"


def render_comparison(comparison: ListComparison) -> Text:
    """Render every result section with its item count."""
    if comparison.is_empty:
        return Text(EMPTY_HINT, style="dim")

    rendered = Text()
    for title, items in comparison.sections():
        rendered.append(f"{title} ({len(items)})\n", style="bold")
        rendered.append((", ".join(items) if items else "(none)") + "\n\n")
    return rendered


class ListPane(CopyFeedbackMixin, Vertical):
    """Two list inputs and their intersection, union and differences."""

    def compose(self) -> ComposeResult:
        with Horizontal(id="list-inputs"):
            with Vertical(classes="tool-column"):
                yield Label("List A", classes="column-header")
                yield TextArea(id="list-a")
            with Vertical(classes="tool-column"):
                yield Label("List B", classes="column-header")
                yield TextArea(id="list-b")
        with Horizontal(classes="button-row"):
            yield Button("Swap", id="list-swap")
            yield Button("Copy Union", id="list-copy-union")
            yield Button("Clear", id="list-clear", variant="warning")
        with VerticalScroll(id="list-output-scroll"):
            yield Static(render_comparison(ListComparison()), id="list-output")

    def comparison(self) -> ListComparison:
        return compare_lists(
            self.query_one("#list-a", TextArea).text,
            self.query_one("#list-b", TextArea).text,
        )

    def refresh_results(self) -> None:
        self.query_one("#list-output", Static).update(render_comparison(self.comparison()))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id in ("list-a", "list-b"):
            self.refresh_results()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        list_a = self.query_one("#list-a", TextArea)
        list_b = self.query_one("#list-b", TextArea)

        if event.button.id == "list-swap":
            a_text, b_text = list_a.text, list_b.text
            list_a.load_text(b_text)
            list_b.load_text(a_text)
            self.refresh_results()
        elif event.button.id == "list-copy-union":
            self.copy_with_feedback(event.button, "\n".join(self.comparison().union))
        elif event.button.id == "list-clear":
            list_a.load_text("")
            list_b.load_text("")
            self.refresh_results()
