"""Window activation tracking."""

import logging
from typing import Optional
from PyQt6.QtCore import QObject, QEvent, pyqtSignal
from PyQt6.QtWidgets import QWidget

logger = logging.getLogger(__name__)


class FocusWatcher(QObject):
    """
    Event filter that reports window activation changes.

    Usage:
        watcher = FocusWatcher(parent=self)
        watcher.watch(self.window())
        watcher.focus_changed.connect(synchronizer.on_focus_changed)
    """

    focus_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._window: Optional[QWidget] = None

    @property
    def watched_window(self) -> Optional[QWidget]:
        return self._window

    def watch(self, window: QWidget) -> None:
        """Move the filter to window. No-op if already watching it."""
        if window is self._window:
            return
        if self._window is not None:
            self._window.removeEventFilter(self)
        self._window = window
        window.installEventFilter(self)
        logger.debug(f"Watching focus of {type(window).__name__}")

    def eventFilter(self, obj, event):
        if obj is self._window:
            if event.type() == QEvent.Type.WindowActivate:
                self.focus_changed.emit(True)
            elif event.type() == QEvent.Type.WindowDeactivate:
                self.focus_changed.emit(False)
        return super().eventFilter(obj, event)
