"""
copylist-view: PyQt6 view layer mirroring an externally owned copy list.

A rendered list of file paths stays consistent with a list owned by another
component, refreshing on change notifications, window focus regain and the
user's own delete / clear actions.

Architecture:
- Tier 1 (Protocols): ListStore contract and ViewConfig
- Tier 2 (Core): ViewSynchronizer, row records, error types
- Tier 3 (Services): signal helpers, in-process ListStore
- Tier 4 (Widgets): QListWidget-backed panel and focus tracking
"""

__version__ = "0.1.0"

from copylist_view.core import (
    FetchError,
    MutationError,
    SubscriptionError,
    ViewSynchronizer,
    SyncState,
    InMemoryRowContainer,
)
from copylist_view.protocols import ListStore, ViewConfig

__all__ = [
    "__version__",
    "FetchError",
    "MutationError",
    "SubscriptionError",
    "ViewSynchronizer",
    "SyncState",
    "InMemoryRowContainer",
    "ListStore",
    "ViewConfig",
]
