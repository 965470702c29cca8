"""
Main Textual application for Tooly.

One tab per tool:
    - Smart Converter: Base64, URL, JWT, Hex and Unicode escapes, with JSON
      beautify, key sorting and a collapsible tree view
    - Diff Master: Line and character diffs
    - List Wizard: Set operations between two lists
    - Time Converter: Epoch timestamps across time zones
"""

import argparse
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, TabbedContent, TabPane

from tooly.codecs import EncodingFormat, SUPPORTED_FORMATS
from tooly.logging_config import LOG_LEVELS, setup_logging
from tooly.tui.views import ConverterPane, DiffPane, ListPane, TimePane

logger = logging.getLogger(__name__)

TAB_IDS = ("converter", "diff", "wizard", "time")


class ToolyApp(App):
    """A Textual app bundling Tooly's everyday coding tools."""

    TITLE = "Tooly"
    SUB_TITLE = "Simple tools for everyday coding"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    TabbedContent {
        height: 1fr;
    }

    TabPane {
        padding: 0 1;
    }

    /* Shared column layout */
    .tool-column {
        width: 1fr;
        height: 1fr;
        padding: 0 1;
    }

    .column-header {
        height: 1;
        text-style: bold;
        color: $text;
    }

    .button-row {
        height: auto;
    }

    .button-row Button {
        margin: 0 1 0 0;
    }

    TextArea {
        height: 1fr;
    }

    /* Converter */
    #converter-body {
        height: 1fr;
    }

    #format-select {
        width: auto;
        height: auto;
        margin: 1 1;
    }

    #plain-tree {
        height: 1fr;
        border: solid $primary;
    }

    #plain-highlight {
        height: 1fr;
        border: solid $warning;
        padding: 0 1;
    }

    .error-line {
        height: auto;
        color: $error;
        text-style: bold;
        padding: 0 1;
    }

    /* Diff Master / List Wizard */
    #diff-inputs, #list-inputs {
        height: 1fr;
    }

    #diff-mode, #diff-view {
        width: auto;
        height: auto;
        layout: horizontal;
    }

    #diff-split {
        height: 1fr;
    }

    .diff-side-scroll {
        width: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    #diff-stats {
        height: 1;
        color: $text-muted;
    }

    #diff-output-scroll, #list-output-scroll, #time-output-scroll {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    /* Time Converter */
    #time-input {
        width: 1fr;
    }

    #time-body {
        height: 1fr;
    }

    #time-zones-column {
        width: 48;
    }

    /* Tree styling */
    Tree {
        background: $surface;
        padding: 1;
    }

    Tree > .tree--cursor {
        background: $secondary;
    }

    Tree > .tree--guides {
        color: $text-muted;
    }

    Static {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("f1", "show_tab('converter')", "Converter"),
        Binding("f2", "show_tab('diff')", "Diff"),
        Binding("f3", "show_tab('wizard')", "Lists"),
        Binding("f4", "show_tab('time')", "Time"),
    ]

    def __init__(
        self,
        initial_tab: str = "converter",
        input_format: EncodingFormat | str = EncodingFormat.BASE64,
    ):
        """Initialize the app.

        Args:
            initial_tab: ID of the tab shown first (see TAB_IDS).
            input_format: Encoding format the converter starts with.
        """
        super().__init__()
        if initial_tab not in TAB_IDS:
            raise ValueError(f"Unknown tab '{initial_tab}'. Expected one of: {', '.join(TAB_IDS)}")
        self._initial_tab = initial_tab
        self._input_format = input_format

    def compose(self) -> ComposeResult:
        yield Header()
        with TabbedContent(initial=self._initial_tab, id="tabs"):
            with TabPane("Smart Converter", id="converter"):
                yield ConverterPane(self._input_format, id="converter-pane")
            with TabPane("Diff Master", id="diff"):
                yield DiffPane(id="diff-pane")
            with TabPane("List Wizard", id="wizard"):
                yield ListPane(id="list-pane")
            with TabPane("Time Converter", id="time"):
                yield TimePane(id="time-pane")
        yield Footer()

    def action_show_tab(self, tab: str) -> None:
        """Switch to the tab with the given ID."""
        self.query_one("#tabs", TabbedContent).active = tab

    def on_tabbed_content_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        logger.debug("Switched to tab %s", event.pane.id)


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Simple tools for everyday coding in a terminal UI: encode/decode, "
        "JSON beautify and tree view, text diff, list operations and epoch conversion."
    )
    parser.add_argument(
        "--tab",
        choices=TAB_IDS,
        default="converter",
        help="Tab to open first (default: converter)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=sorted(SUPPORTED_FORMATS),
        default=EncodingFormat.BASE64.value,
        help="Initial converter format (default: base64)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level for the log file (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file (the TUI never logs to the terminal)",
    )
    args = parser.parse_args()

    setup_logging(args.log_level, args.log_file, to_stderr=False)
    logger.info("Starting Tooly on tab %s", args.tab)

    app = ToolyApp(initial_tab=args.tab, input_format=args.format)
    app.run()


if __name__ == "__main__":
    main()
