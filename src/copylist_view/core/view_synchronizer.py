"""
Keeps a rendered row container consistent with an external copy list.

Every trigger (initial load, change notification, focus regain, and the
follow-up to a delete or clear request) ends in refresh(), which re-fetches
the whole list and replaces every row. Because no refresh applies a delta,
any number of overlapping or duplicated triggers converge on the state of
the most recent fetch.

The fetch always completes before the container is touched. Rows are
cleared and rebuilt in one uninterrupted pass on the synchronizer's thread.
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from copylist_view.core.background_task import BackgroundTaskPool
from copylist_view.core.exceptions import (
    FetchError,
    MutationError,
    SubscriptionError,
    as_error,
)
from copylist_view.core.rendered_rows import PlaceholderRow, RenderedRow, RowContainer
from copylist_view.protocols import ListStore, SubscriptionHandle, ViewConfig, get_view_config

logger = logging.getLogger(__name__)


class SyncState(Enum):
    """Lifecycle of a ViewSynchronizer."""
    UNINITIALIZED = "uninitialized"
    SUBSCRIBING = "subscribing"
    READY = "ready"
    CLOSED = "closed"


class ViewSynchronizer(QObject):
    """
    Mirror a ListStore's copy list into a RowContainer.

    Usage:
        sync = ViewSynchronizer(store, container)
        sync.error_occurred.connect(show_error)
        sync.start()                       # subscribe + initial load

        focus_watcher.focus_changed.connect(sync.on_focus_changed)
        clear_button.clicked.connect(lambda: sync.clear_all())

    Failures never propagate out of the public operations. They are logged and
    emitted on error_occurred, and the rows already rendered stay in place.
    """

    state_changed = pyqtSignal(object)      # SyncState
    refreshed = pyqtSignal(list)            # paths rendered by the refresh
    error_occurred = pyqtSignal(Exception)  # FetchError / MutationError / SubscriptionError

    def __init__(
        self,
        store: ListStore,
        container: RowContainer,
        config: Optional[ViewConfig] = None,
        parent=None
    ):
        super().__init__(parent)
        self._store = store
        self._container = container
        self._config = config or get_view_config()
        self._state = SyncState.UNINITIALIZED
        self._subscription: Optional[SubscriptionHandle] = None
        self._focused = False
        self._tasks = BackgroundTaskPool()

    # ========== LIFECYCLE ==========

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def is_subscribed(self) -> bool:
        """False while degraded to focus- and action-driven refreshes only."""
        return self._subscription is not None

    @property
    def tasks(self) -> BackgroundTaskPool:
        return self._tasks

    def start(self) -> None:
        """Subscribe to change notifications, then run the initial load."""
        if self._state is not SyncState.UNINITIALIZED:
            logger.warning(f"[SYNC] start() ignored in state {self._state.value}")
            return

        self._set_state(SyncState.SUBSCRIBING)
        topic = self._config.update_topic
        try:
            self._subscription = self._store.subscribe(topic, self.on_external_change)
            logger.info(f"[SYNC] Subscribed to '{topic}'")
        except Exception as e:
            self._subscription = None
            self._report(as_error(e, SubscriptionError, f"Failed to subscribe to '{topic}'"))
            logger.warning("[SYNC] Continuing without change notifications")

        self._set_state(SyncState.READY)
        self.refresh()

    def shutdown(self) -> None:
        """Cancel the subscription and stop reacting to triggers."""
        if self._state is SyncState.CLOSED:
            return
        if self._subscription is not None:
            try:
                self._subscription.cancel()
            except Exception as e:
                logger.warning(f"[SYNC] Failed to cancel subscription: {e}")
            self._subscription = None
        self._tasks.cleanup()
        self._set_state(SyncState.CLOSED)

    # ========== TRIGGERS ==========

    def refresh(self) -> bool:
        """Fetch the full list and rebuild every row.

        Returns:
            True if the rows were rebuilt (or, in background mode, the fetch
            was started), False if the fetch failed or the synchronizer is
            closed.
        """
        if self._state is SyncState.CLOSED:
            logger.debug("[SYNC] refresh() after shutdown ignored")
            return False

        if self._config.run_in_background:
            self._tasks.run(
                target=self._store.get_copy_list,
                on_success=self._render,
                on_error=self._on_fetch_failed,
            )
            return True

        try:
            paths = self._store.get_copy_list()
        except Exception as e:
            self._on_fetch_failed(e)
            return False
        self._render(paths)
        return True

    def delete_entry(self, path: str) -> bool:
        """Ask the store to remove path, then refresh."""
        logger.debug(f"[SYNC] delete_entry({path!r})")
        return self._mutate(self._store.remove_from_copy_list, (path,), f"Failed to remove '{path}'")

    def clear_all(self) -> bool:
        """Ask the store to empty the list, then refresh."""
        logger.debug("[SYNC] clear_all()")
        return self._mutate(self._store.clear_copy_list, (), "Failed to clear copy list")

    def on_external_change(self) -> None:
        """Notification handler; safe to call any number of times per mutation."""
        logger.debug("[SYNC] Change notification received")
        self.refresh()

    def on_focus_regained(self) -> None:
        """Catch up on mutations whose notifications were missed while unfocused."""
        logger.debug("[SYNC] Focus regained")
        self.refresh()

    def on_focus_changed(self, focused: bool) -> None:
        """Window focus signal adapter. Only unfocused -> focused refreshes."""
        focused = bool(focused)
        regained = focused and not self._focused
        self._focused = focused
        if regained and self._config.refresh_on_focus:
            self.on_focus_regained()

    # ========== INTERNALS ==========

    def _mutate(self, target: Callable[..., Any], args: Tuple, message: str) -> bool:
        if self._state is SyncState.CLOSED:
            logger.debug("[SYNC] Mutation after shutdown ignored")
            return False

        def on_error(e: Exception):
            self._report(as_error(e, MutationError, message))

        if self._config.run_in_background:
            self._tasks.run(
                target=target,
                args=args,
                on_success=lambda _result: self.refresh(),
                on_error=on_error,
            )
            return True

        try:
            target(*args)
        except Exception as e:
            on_error(e)
            return False
        return self.refresh()

    def _render(self, paths: Sequence[str]) -> None:
        if self._state is SyncState.CLOSED:
            return
        entries: List[str] = list(paths)

        self._container.clear()
        if not entries:
            self._container.append(PlaceholderRow(self._config.placeholder_text))
        else:
            for path in entries:
                self._container.append(RenderedRow(path=path, on_delete=self.delete_entry))

        logger.debug(f"[SYNC] Rendered {len(entries)} row(s)")
        self.refreshed.emit(entries)

    def _on_fetch_failed(self, e: Exception) -> None:
        self._report(as_error(e, FetchError, "Failed to fetch copy list"))

    def _report(self, error: Exception) -> None:
        if self._state is SyncState.CLOSED:
            logger.debug(f"[SYNC] Dropping {type(error).__name__} delivered after shutdown: {error}")
            return
        logger.error(f"[SYNC] {type(error).__name__}: {error}", exc_info=error)
        self.error_occurred.emit(error)

    def _set_state(self, state: SyncState) -> None:
        logger.debug(f"[SYNC] {self._state.value} -> {state.value}")
        self._state = state
        self.state_changed.emit(state)
