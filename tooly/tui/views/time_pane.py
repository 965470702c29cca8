"""
Time Converter pane: epoch timestamps shown in the selected time zones.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Input, Label, SelectionList, Static

from tooly.tools import DEFAULT_ZONES, TIMEZONES, convert_epochs, current_epoch_ms
from tooly.tools.time_converter import INVALID_TIMESTAMP
from tooly.tui.mixins import VimNavigationMixin


def render_times(results: dict[str, str]) -> Text:
    """One ``label: time`` line per result; invalid inputs in red."""
    if not results:
        return Text("Enter one or more epoch timestamps (seconds or milliseconds)", style="dim")

    rendered = Text()
    for label, formatted in results.items():
        rendered.append(f"{label}: ", style="bold")
        style = "red" if formatted == INVALID_TIMESTAMP else ""
        rendered.append(formatted + "\n", style=style)
    return rendered


class TimePane(VimNavigationMixin, Vertical):
    """Epoch input, zone selection and the converted times."""

    BINDINGS = VimNavigationMixin.VIM_BINDINGS

    def compose(self) -> ComposeResult:
        with Horizontal(classes="button-row"):
            yield Input(placeholder="Epoch timestamps, e.g. 1640995200 1640995200000", id="time-input")
            yield Button("Now", id="time-now", variant="primary")
            yield Button("Clear", id="time-clear", variant="warning")
        with Horizontal(id="time-body"):
            with Vertical(id="time-zones-column"):
                yield Label("Time Zones", classes="column-header")
                yield SelectionList[str](
                    *(
                        (f"{tz.name}  {tz.location}", tz.name, tz.name in DEFAULT_ZONES)
                        for tz in TIMEZONES
                    ),
                    id="time-zones",
                )
            with VerticalScroll(id="time-output-scroll"):
                yield Static(render_times({}), id="time-output")

    @property
    def selected_zones(self) -> list[str]:
        """Selected zone names in table order."""
        selected = set(self.query_one("#time-zones", SelectionList).selected)
        return [tz.name for tz in TIMEZONES if tz.name in selected]

    def refresh_results(self) -> None:
        text = self.query_one("#time-input", Input).value
        results = convert_epochs(text, self.selected_zones)
        self.query_one("#time-output", Static).update(render_times(results))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "time-input":
            self.refresh_results()

    def on_selection_list_selected_changed(self, event: SelectionList.SelectedChanged) -> None:
        self.refresh_results()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        time_input = self.query_one("#time-input", Input)
        if event.button.id == "time-now":
            time_input.value = str(current_epoch_ms())
        elif event.button.id == "time-clear":
            time_input.value = ""
        self.refresh_results()
