"""
Diff Master pane: compare two texts line by line or character by character.

The result is shown side by side (A without additions, B without removals)
or as one unified view.
"""

from __future__ import annotations

from typing import Iterable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Label, RadioButton, RadioSet, Static, TextArea

from tooly.tools import DiffPart, TextDiff, diff_texts, side_by_side

DIFF_STYLES = {
    "added": "green on #0f2f14",
    "removed": "red on #3a1111",
    "unchanged": "",
}

DIFF_MARKERS = {"added": "+ ", "removed": "- ", "unchanged": "  "}


def render_parts(parts: Iterable[DiffPart], mode: str) -> Text:
    """Render diff parts as one rich Text.

    Line mode prefixes every line with a +/- marker; character mode colors
    runs inline.
    """
    rendered = Text()
    for part in parts:
        style = DIFF_STYLES[part.kind]
        if mode == "lines":
            for line in part.value.splitlines():
                rendered.append(DIFF_MARKERS[part.kind] + line + "\n", style=style)
        else:
            rendered.append(part.value, style=style)
    return rendered


def render_diff(diff: TextDiff) -> Text:
    """Render the unified view of a diff."""
    return render_parts(diff.parts, diff.mode)


def render_side_by_side(diff: TextDiff) -> tuple[Text, Text]:
    """Render the A column (no additions) and the B column (no removals)."""
    left, right = side_by_side(diff)
    return render_parts(left, diff.mode), render_parts(right, diff.mode)


def diff_summary(diff: TextDiff) -> str:
    if diff.identical:
        return "No differences found"
    unit = "lines" if diff.mode == "lines" else "chars"
    stats = diff.stats
    return f"+{stats.added} added  -{stats.removed} removed  {stats.unchanged} unchanged ({unit})"


class DiffPane(Vertical):
    """Two input areas and a colored diff of them."""

    _compared = False

    def compose(self) -> ComposeResult:
        with Horizontal(id="diff-inputs"):
            with Vertical(classes="tool-column"):
                yield Label("Original (A)", classes="column-header")
                yield TextArea(id="diff-left")
            with Vertical(classes="tool-column"):
                yield Label("Modified (B)", classes="column-header")
                yield TextArea(id="diff-right")
        with Horizontal(classes="button-row"):
            with RadioSet(id="diff-mode"):
                yield RadioButton("Lines", value=True, id="mode-lines")
                yield RadioButton("Characters", id="mode-chars")
            with RadioSet(id="diff-view"):
                yield RadioButton("Side by side", value=True, id="view-split")
                yield RadioButton("Unified", id="view-unified")
            yield Button("Compare", id="diff-compare", variant="primary")
            yield Button("Swap", id="diff-swap")
            yield Button("Clear", id="diff-clear", variant="warning")
        yield Label("", id="diff-stats")
        with Horizontal(id="diff-split"):
            with VerticalScroll(classes="diff-side-scroll"):
                yield Static("", id="diff-output-left")
            with VerticalScroll(classes="diff-side-scroll"):
                yield Static("", id="diff-output-right")
        with VerticalScroll(id="diff-output-scroll"):
            yield Static("", id="diff-output")

    def on_mount(self) -> None:
        self._show_view()

    @property
    def diff_mode(self) -> str:
        chars = self.query_one("#mode-chars", RadioButton)
        return "chars" if chars.value else "lines"

    @property
    def split_view(self) -> bool:
        return not self.query_one("#view-unified", RadioButton).value

    def _show_view(self) -> None:
        split = self.split_view
        self.query_one("#diff-split", Horizontal).display = split
        self.query_one("#diff-output-scroll", VerticalScroll).display = not split

    def _show_outputs(self, unified: Text | str, left: Text | str, right: Text | str) -> None:
        self.query_one("#diff-output", Static).update(unified)
        self.query_one("#diff-output-left", Static).update(left)
        self.query_one("#diff-output-right", Static).update(right)

    def compare(self) -> TextDiff:
        left = self.query_one("#diff-left", TextArea).text
        right = self.query_one("#diff-right", TextArea).text
        diff = diff_texts(left, right, mode=self.diff_mode)
        self._compared = True
        self._show_outputs(render_diff(diff), *render_side_by_side(diff))
        self.query_one("#diff-stats", Label).update(diff_summary(diff))
        return diff

    def on_button_pressed(self, event: Button.Pressed) -> None:
        left = self.query_one("#diff-left", TextArea)
        right = self.query_one("#diff-right", TextArea)

        if event.button.id == "diff-compare":
            self.compare()
        elif event.button.id == "diff-swap":
            left_text, right_text = left.text, right.text
            left.load_text(right_text)
            right.load_text(left_text)
        elif event.button.id == "diff-clear":
            left.load_text("")
            right.load_text("")
            self._compared = False
            self._show_outputs("", "", "")
            self.query_one("#diff-stats", Label).update("")

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        if event.radio_set.id == "diff-mode":
            event.stop()
            if self._compared:
                self.compare()
        elif event.radio_set.id == "diff-view":
            event.stop()
            self._show_view()
