"""
Service layer.

Signal helpers and the in-process ListStore used by the demo app.
"""

from .signal_service import SignalService
from .in_memory_list_store import InMemoryListStore, SignalSubscription

__all__ = [
    "SignalService",
    "InMemoryListStore",
    "SignalSubscription",
]
