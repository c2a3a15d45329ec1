"""In-process ListStore backed by a Python list and a Qt signal."""

import logging
from typing import Callable, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal, pyqtBoundSignal

from copylist_view.core.exceptions import SubscriptionError
from copylist_view.protocols import DEFAULT_UPDATE_TOPIC

logger = logging.getLogger(__name__)


class SignalSubscription:
    """SubscriptionHandle that disconnects a handler from a bound signal."""

    def __init__(self, signal: pyqtBoundSignal, handler: Callable[[], None]):
        self._signal = signal
        self._handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        try:
            self._signal.disconnect(self._handler)
        except TypeError:
            # Already disconnected (e.g. sender destroyed)
            logger.debug("Subscription handler was not connected")


class InMemoryListStore(QObject):
    """
    Owns a copy list in this process and notifies on every mutation.

    Usage:
        store = InMemoryListStore(["/tmp/a.txt"])
        handle = store.subscribe("list_updated", on_change)
        store.add_to_copy_list("/tmp/b.txt")   # on_change() runs
        handle.cancel()
    """

    list_updated = pyqtSignal()

    def __init__(self, paths: Optional[List[str]] = None, parent=None):
        super().__init__(parent)
        self._paths: List[str] = list(paths or [])

    def get_copy_list(self) -> List[str]:
        return list(self._paths)

    def add_to_copy_list(self, path: str) -> None:
        self._paths.append(path)
        logger.debug(f"Added {path!r} ({len(self._paths)} entries)")
        self.list_updated.emit()

    def remove_from_copy_list(self, path: str) -> None:
        """Remove every entry equal to path; absent path is a no-op."""
        before = len(self._paths)
        self._paths = [p for p in self._paths if p != path]
        logger.debug(f"Removed {before - len(self._paths)} entr(ies) for {path!r}")
        self.list_updated.emit()

    def clear_copy_list(self) -> None:
        self._paths.clear()
        logger.debug("Cleared copy list")
        self.list_updated.emit()

    def subscribe(self, topic: str, handler: Callable[[], None]) -> SignalSubscription:
        if topic != DEFAULT_UPDATE_TOPIC:
            raise SubscriptionError(f"Unknown topic: {topic!r}")
        self.list_updated.connect(handler)
        return SignalSubscription(self.list_updated, handler)
