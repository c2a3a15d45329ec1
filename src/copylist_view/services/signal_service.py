"""
Signal blocking helpers.

Context managers guarantee signals are unblocked even if the body raises.
"""

from contextlib import contextmanager
from PyQt6.QtCore import QObject
import logging

logger = logging.getLogger(__name__)


class SignalService:
    """
    Helpers for temporarily silencing Qt objects.

    Examples:
        with SignalService.block_signals(list_widget):
            list_widget.clear()
    """

    @staticmethod
    @contextmanager
    def block_signals(*objects: QObject):
        """Context manager for blocking signals, restoring the previous state."""
        previous = []
        for obj in objects:
            if obj is not None:
                previous.append((obj, obj.blockSignals(True)))
                logger.debug(f"Blocked signals on {type(obj).__name__}")

        try:
            yield
        finally:
            for obj, was_blocked in reversed(previous):
                obj.blockSignals(was_blocked)
                logger.debug(f"Restored signals on {type(obj).__name__}")
