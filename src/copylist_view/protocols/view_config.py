"""Base configuration class for the copy list view.

Provides hooks for applications to customize synchronization and row rendering.
"""

from typing import Optional
from dataclasses import dataclass

DEFAULT_UPDATE_TOPIC = "list_updated"


@dataclass
class ViewConfig:
    """Configuration for copy list synchronization and rendering.

    Applications can subclass this to provide custom configuration.

    Attributes:
        update_topic: Notification topic the synchronizer subscribes to
        placeholder_text: Text of the single row shown when the list is empty
        delete_button_text: Label of the per-row delete control
        clear_button_text: Label of the clear-all button
        title_text: Header text shown above the list
        refresh_on_focus: Whether regaining window focus triggers a refresh
        run_in_background: Run ListStore calls in QThreads instead of inline
        log_dir: Directory for the optional log file
        log_level: Default logging level name for the demo app
    """

    update_topic: str = DEFAULT_UPDATE_TOPIC
    placeholder_text: str = "No files copied yet."
    delete_button_text: str = "Delete"
    clear_button_text: str = "Clear List"
    title_text: str = "Copy List"
    refresh_on_focus: bool = True
    run_in_background: bool = False
    log_dir: Optional[str] = None
    log_level: str = "INFO"


# Global config instance (set by application)
_view_config: Optional[ViewConfig] = None


def set_view_config(config: Optional[ViewConfig]) -> None:
    """Set the global view configuration.

    Args:
        config: ViewConfig instance, or None to restore defaults
    """
    global _view_config
    _view_config = config


def get_view_config() -> ViewConfig:
    """Get the current view configuration.

    Returns:
        Current ViewConfig or default if not set
    """
    if _view_config is None:
        return ViewConfig()
    return _view_config
