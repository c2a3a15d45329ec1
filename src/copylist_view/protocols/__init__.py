"""
Collaborator protocols and configuration.

Contracts for the external list owner plus the application-wide
view configuration.
"""

from .list_store import ListStore, SubscriptionHandle
from .view_config import ViewConfig, set_view_config, get_view_config, DEFAULT_UPDATE_TOPIC

__all__ = [
    "ListStore",
    "SubscriptionHandle",
    "ViewConfig",
    "set_view_config",
    "get_view_config",
    "DEFAULT_UPDATE_TOPIC",
]
