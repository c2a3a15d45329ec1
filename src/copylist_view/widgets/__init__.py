"""
Qt widgets for the copy list view.
"""

from .focus_watcher import FocusWatcher
from .copy_list_widget import CopyListWidget, CopyListRowWidget, ListWidgetRowContainer

__all__ = [
    "FocusWatcher",
    "CopyListWidget",
    "CopyListRowWidget",
    "ListWidgetRowContainer",
]
