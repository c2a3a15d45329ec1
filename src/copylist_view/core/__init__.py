"""
Core synchronization layer.

The ViewSynchronizer, the row records it renders, and the error types
it reports. Depends on PyQt6 only for QObject signals and QThread.
"""

from .exceptions import CopyListError, FetchError, MutationError, SubscriptionError
from .rendered_rows import RenderedRow, PlaceholderRow, RowContainer, InMemoryRowContainer
from .background_task import BackgroundTask, BackgroundTaskPool
from .view_synchronizer import ViewSynchronizer, SyncState

__all__ = [
    "CopyListError",
    "FetchError",
    "MutationError",
    "SubscriptionError",
    "RenderedRow",
    "PlaceholderRow",
    "RowContainer",
    "InMemoryRowContainer",
    "BackgroundTask",
    "BackgroundTaskPool",
    "ViewSynchronizer",
    "SyncState",
]
