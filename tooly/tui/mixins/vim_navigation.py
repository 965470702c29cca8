"""
Vim Navigation Mixin for vim-style keybindings in the tool tabs.

Provides j/k/g/G navigation for list-like widgets (the JSON tree and the
time zone list) by delegating to the focused widget's native navigation
methods. Text areas consume these keys themselves, so the bindings only
take effect while a navigable widget has focus.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.binding import Binding
from textual.widgets import OptionList, Tree

if TYPE_CHECKING:
    from textual.widget import Widget


class VimNavigationMixin:
    """Mixin providing vim-style navigation keybindings.

    This mixin adds vim keybindings that delegate to the focused widget:
    - j/k: Move cursor down/up (works with Tree and OptionList/SelectionList)
    - g: Jump to first item
    - G: Jump to last item

    Usage:
        class MyPane(VimNavigationMixin, Vertical):
            BINDINGS = VimNavigationMixin.VIM_BINDINGS + [...]
    """

    VIM_BINDINGS = [
        Binding("j", "vim_down", "Down", show=False),
        Binding("k", "vim_up", "Up", show=False),
        Binding("g", "vim_top", "Top", show=False),
        Binding("G", "vim_bottom", "Bottom", show=False),
    ]

    def _get_navigable_widget(self) -> Widget | None:
        """Get the currently focused widget if it supports navigation."""
        focused = self.app.focused
        if isinstance(focused, (OptionList, Tree)):
            return focused
        return None

    def action_vim_down(self) -> None:
        """Move cursor down (vim j key)."""
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.action_cursor_down()

    def action_vim_up(self) -> None:
        """Move cursor up (vim k key)."""
        widget = self._get_navigable_widget()
        if widget is not None:
            widget.action_cursor_up()

    def action_vim_top(self) -> None:
        """Jump to first item (vim g)."""
        widget = self._get_navigable_widget()
        if widget is None:
            return

        if isinstance(widget, OptionList):
            if widget.option_count > 0:
                widget.highlighted = 0
        elif isinstance(widget, Tree):
            widget.select_node(widget.root)
            widget.scroll_home()

    def action_vim_bottom(self) -> None:
        """Jump to last item (vim G)."""
        widget = self._get_navigable_widget()
        if widget is None:
            return

        if isinstance(widget, OptionList):
            if widget.option_count > 0:
                widget.highlighted = widget.option_count - 1
        elif isinstance(widget, Tree):
            widget.scroll_end()
