"""
Copy Feedback Mixin for the copy buttons of the tool tabs.

Copies text to the system clipboard and swaps the button label to a
confirmation for a short while:

    class MyPane(CopyFeedbackMixin, Vertical):
        def on_button_pressed(self, event):
            if event.button.id == "copy-output":
                self.copy_with_feedback(event.button, self.output_text)
"""

from __future__ import annotations

import logging

from textual.widgets import Button

logger = logging.getLogger(__name__)


class CopyFeedbackMixin:
    """Mixin providing clipboard copy with transient button feedback."""

    # Seconds the confirmation label stays on the button
    COPY_FEEDBACK_DELAY: float = 2.0

    COPIED_LABEL = "✓ Copied!"

    def _copy_labels(self) -> dict[Button, str]:
        labels = getattr(self, "_original_copy_labels", None)
        if labels is None:
            labels = self._original_copy_labels = {}
        return labels

    def copy_with_feedback(self, button: Button, text: str) -> bool:
        """Copy ``text`` and show the confirmation on ``button``.

        Returns:
            True if the text was handed to the clipboard.
        """
        if not text:
            self.app.notify("Nothing to copy", severity="warning")
            return False

        try:
            self.app.copy_to_clipboard(text)
        except Exception as e:
            logger.warning("Clipboard copy failed: %s", e)
            self.app.notify(f"Copy failed: {e}", severity="error")
            return False

        labels = self._copy_labels()
        labels.setdefault(button, str(button.label))
        button.label = self.COPIED_LABEL
        self.set_timer(self.COPY_FEEDBACK_DELAY, lambda: self._restore_label(button))
        return True

    def _restore_label(self, button: Button) -> None:
        original_label = self._copy_labels().pop(button, None)
        if original_label is not None:
            button.label = original_label
