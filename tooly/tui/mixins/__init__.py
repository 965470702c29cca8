"""Mixins for the TUI application."""

from tooly.tui.mixins.copy_feedback import CopyFeedbackMixin
from tooly.tui.mixins.vim_navigation import VimNavigationMixin

__all__ = [
    "CopyFeedbackMixin",
    "VimNavigationMixin",
]
