"""
Transient notification overlay.

Notes
-----
A toast is a child label that floats over the bottom of its parent and hides
itself after a fixed duration. Showing a new message restarts the timer.
"""

from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel, QWidget

LONG_DURATION_MS = 2750


class Toast(QLabel):
    """Snackbar-style message shown over the bottom edge of a parent widget."""

    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWordWrap(True)
        self.setStyleSheet(
            "background-color: #323232; color: white; padding: 10px 16px; border-radius: 4px;"
        )
        self.hide()

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.hide)

    def show_message(self, text: str, duration_ms: int = LONG_DURATION_MS) -> None:
        self.setText(text)
        self._reposition()
        self.raise_()
        self.show()
        self._timer.start(duration_ms)

    def _reposition(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        margin = 16
        width = max(min(parent.width() - 2 * margin, 480), 120)
        self.setFixedWidth(width)
        self.adjustSize()
        self.move((parent.width() - width) // 2, parent.height() - self.height() - margin)
