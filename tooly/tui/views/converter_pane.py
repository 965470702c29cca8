"""
Smart Converter pane.

Encoded text on the left, a format selector in the middle, plain text on the
right. Editing either side re-derives the other through the
ConversionOrchestrator; after Beautify or Sort Keys the plain side also shows
a collapsible JSON tree (or, for unparseable input, a highlighted view of what
Beautify could repair).
"""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Label, RadioButton, RadioSet, Static, TextArea

from tooly.codecs import EncodingFormat, get_codec
from tooly.converter import ConversionOrchestrator
from tooly.tui.mixins import CopyFeedbackMixin, VimNavigationMixin
from tooly.tui.widgets import JsonTreePanel, render_invalid_json

logger = logging.getLogger(__name__)


class ConverterPane(CopyFeedbackMixin, VimNavigationMixin, Vertical):
    """Two-way converter between encoded and plain text."""

    BINDINGS = VimNavigationMixin.VIM_BINDINGS + [
        Binding("e", "expand_all", "Expand All"),
        Binding("c", "collapse_all", "Collapse All"),
    ]

    def __init__(
        self,
        fmt: EncodingFormat | str = EncodingFormat.BASE64,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.converter = ConversionOrchestrator(fmt)

    def compose(self) -> ComposeResult:
        codec = get_codec(self.converter.format)
        with Horizontal(id="converter-body"):
            with Vertical(id="encoded-column", classes="tool-column"):
                yield Label(codec.label, id="encoded-label", classes="column-header")
                yield TextArea(id="encoded-input")
                with Horizontal(classes="button-row"):
                    yield Button("Copy", id="copy-encoded")
                    yield Button("Clear", id="clear-encoded", variant="warning")
            with RadioSet(id="format-select"):
                for fmt in EncodingFormat:
                    yield RadioButton(
                        get_codec(fmt).label,
                        value=fmt is self.converter.format,
                        id=f"format-{fmt.value}",
                    )
            with Vertical(id="plain-column", classes="tool-column"):
                yield Label(codec.plain_label, id="plain-label", classes="column-header")
                with Horizontal(classes="button-row"):
                    yield Button("Beautify", id="beautify", variant="primary")
                    yield Button("Sort Keys", id="sort-keys")
                    yield Button("Copy", id="copy-plain")
                    yield Button("Clear", id="clear-plain", variant="warning")
                yield TextArea(id="plain-input")
                yield JsonTreePanel(label="(no JSON)", id="plain-tree")
                yield Static("", id="plain-highlight")
        yield Static("", id="converter-error", classes="error-line")

    def on_mount(self) -> None:
        self._apply_format()
        self._hide_structure()
        self._sync()

    # -- state → widgets --------------------------------------------------

    def _sync(self) -> None:
        """Copy the orchestrator's buffers and error into the widgets."""
        state = self.converter.state

        encoded = self.query_one("#encoded-input", TextArea)
        if encoded.text != state.encoded_text:
            encoded.load_text(state.encoded_text)

        plain = self.query_one("#plain-input", TextArea)
        if plain.text != state.plain_text:
            plain.load_text(state.plain_text)
            self._hide_structure()

        error = self.query_one("#converter-error", Static)
        error.update(state.error)
        error.display = bool(state.error)

    def _apply_format(self) -> None:
        codec = get_codec(self.converter.format)
        self.query_one("#encoded-label", Label).update(codec.label)
        self.query_one("#encoded-input", TextArea).tooltip = codec.placeholder
        self.query_one("#plain-label", Label).update(codec.plain_label)

        # JWT is decode-only: the plain side can be read and reformatted, not typed into
        self.query_one("#plain-input", TextArea).read_only = not self.converter.plain_editable

    def _show_structure(self) -> None:
        tree = self.query_one("#plain-tree", JsonTreePanel)
        highlight = self.query_one("#plain-highlight", Static)
        highlight.display = False
        if self.converter.refresh_tree():
            tree.load_state(self.converter.collapse)
            tree.display = True
        else:
            tree.display = False

    def _show_invalid(self) -> None:
        self.query_one("#plain-tree", JsonTreePanel).display = False
        highlight = self.query_one("#plain-highlight", Static)
        highlight.update(render_invalid_json(self.converter.state.plain_text))
        highlight.display = True

    def _hide_structure(self) -> None:
        self.query_one("#plain-tree", JsonTreePanel).display = False
        self.query_one("#plain-highlight", Static).display = False

    # -- events -----------------------------------------------------------

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Feed user edits into the orchestrator.

        Programmatic updates also post Changed; those already match the
        orchestrator's buffers and are ignored.
        """
        text = event.text_area.text
        state = self.converter.state

        if event.text_area.id == "encoded-input":
            if text == state.encoded_text:
                return
            self.converter.edit_encoded(text)
        elif event.text_area.id == "plain-input":
            if text == state.plain_text or not self.converter.plain_editable:
                return
            self.converter.edit_plain(text)
            self._hide_structure()
        else:
            return
        self._sync()

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        if event.radio_set.id != "format-select" or event.pressed.id is None:
            return
        fmt = EncodingFormat(event.pressed.id.removeprefix("format-"))
        if fmt is self.converter.format:
            return
        self.converter.set_format(fmt)
        self._apply_format()
        self._sync()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        state = self.converter.state

        if button_id == "copy-encoded":
            self.copy_with_feedback(event.button, state.encoded_text)
        elif button_id == "copy-plain":
            self.copy_with_feedback(event.button, state.plain_text)
        elif button_id == "clear-encoded":
            self.converter.clear_encoded()
            self._sync()
        elif button_id == "clear-plain":
            self.converter.clear_plain()
            self._sync()
        elif button_id == "beautify":
            self.action_beautify()
        elif button_id == "sort-keys":
            self.action_sort_keys()

    def on_json_tree_panel_node_toggled(self, event: JsonTreePanel.NodeToggled) -> None:
        action = "collapsed" if event.collapsed else "expanded"
        logger.debug("Node %r %s", event.node_path or "(root)", action)

    # -- actions ----------------------------------------------------------

    def action_beautify(self) -> None:
        result = self.converter.beautify_plain()
        self._sync()
        if result is None:
            if self.converter.state.plain_text.strip():
                self._show_invalid()
            return
        if result.already_canonical:
            self.notify("Already formatted")
        self._show_structure()

    def action_sort_keys(self) -> None:
        ok = self.converter.sort_plain()
        self._sync()
        if ok:
            self._show_structure()
        elif self.converter.state.plain_text.strip():
            self._show_invalid()

    def action_expand_all(self) -> None:
        tree = self.query_one("#plain-tree", JsonTreePanel)
        if not tree.display:
            return
        self.converter.expand_all()
        tree.rebuild()
        self.notify("Expanded all nodes")

    def action_collapse_all(self) -> None:
        tree = self.query_one("#plain-tree", JsonTreePanel)
        if not tree.display:
            return
        self.converter.collapse_all()
        tree.rebuild()
        self.notify("Collapsed all nodes")
