"""Copy list panel: rendered rows, clear button and focus-driven catch-up."""

import logging
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton, QListWidget, QListWidgetItem,
)

from copylist_view.core import (
    PlaceholderRow, RenderedRow, ViewSynchronizer,
)
from copylist_view.core.rendered_rows import Row
from copylist_view.protocols import ListStore, ViewConfig, get_view_config
from copylist_view.services import SignalService
from copylist_view.widgets.focus_watcher import FocusWatcher

logger = logging.getLogger(__name__)

# --- Module-level constants ---
PATH_ROLE = Qt.ItemDataRole.UserRole
ROW_MARGINS = (6, 2, 6, 2)


class CopyListRowWidget(QWidget):
    """Path label plus a delete button for one RenderedRow.

    The button consumes its own click, so activating it never reaches the
    list's itemClicked/itemActivated handlers.
    """

    def __init__(self, row: RenderedRow, delete_text: str = "Delete", parent=None):
        super().__init__(parent)
        self.row = row

        layout = QHBoxLayout(self)
        layout.setContentsMargins(*ROW_MARGINS)
        layout.setSpacing(8)

        self.path_label = QLabel(row.path)
        self.path_label.setToolTip(row.path)
        self.path_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.path_label, 1)

        self.delete_button = QPushButton(delete_text)
        self.delete_button.setObjectName("delete_btn")
        self.delete_button.clicked.connect(self._on_delete_clicked)
        layout.addWidget(self.delete_button)

    def _on_delete_clicked(self, checked: bool = False):
        self.row.activate_delete()


class ListWidgetRowContainer:
    """RowContainer backed by a QListWidget."""

    def __init__(self, list_widget: QListWidget, delete_text: str = "Delete"):
        self._list = list_widget
        self._delete_text = delete_text

    @property
    def list_widget(self) -> QListWidget:
        return self._list

    def clear(self) -> None:
        with SignalService.block_signals(self._list):
            self._list.clear()

    def append(self, row: Row) -> None:
        with SignalService.block_signals(self._list):
            if isinstance(row, PlaceholderRow):
                item = QListWidgetItem(row.text)
                item.setFlags(Qt.ItemFlag.NoItemFlags)
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self._list.addItem(item)
                return

            row_widget = CopyListRowWidget(row, self._delete_text)
            item = QListWidgetItem()
            item.setData(PATH_ROLE, row.path)
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

    def paths(self) -> List[str]:
        """Paths of data rows in display order."""
        result = []
        for i in range(self._list.count()):
            path = self._list.item(i).data(PATH_ROLE)
            if path is not None:
                result.append(path)
        return result

    def has_placeholder(self) -> bool:
        return any(self._list.item(i).data(PATH_ROLE) is None for i in range(self._list.count()))

    def row_widget(self, index: int) -> Optional[CopyListRowWidget]:
        item = self._list.item(index)
        if item is None:
            return None
        return self._list.itemWidget(item)


class CopyListWidget(QWidget):
    """
    Panel mirroring a ListStore's copy list.

    Usage:
        store = InMemoryListStore()
        panel = CopyListWidget(store)
        panel.show()

    The panel starts its synchronizer on construction unless auto_start is
    False. Call shutdown() (or close the panel) to drop the subscription.
    """

    def __init__(
        self,
        store: ListStore,
        config: Optional[ViewConfig] = None,
        auto_start: bool = True,
        parent=None
    ):
        super().__init__(parent)
        self._config = config or get_view_config()

        self._setup_ui()

        self.container = ListWidgetRowContainer(self.list_widget, self._config.delete_button_text)
        self.synchronizer = ViewSynchronizer(store, self.container, self._config, parent=self)
        self.synchronizer.error_occurred.connect(self._on_error)
        self.synchronizer.refreshed.connect(self._on_refreshed)

        self.focus_watcher = FocusWatcher(parent=self)
        self.focus_watcher.watch(self.window())
        self.focus_watcher.focus_changed.connect(self.synchronizer.on_focus_changed)

        if auto_start:
            self.synchronizer.start()

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        self.title_label = QLabel(self._config.title_text)
        header.addWidget(self.title_label, 1)

        self.clear_button = QPushButton(self._config.clear_button_text)
        self.clear_button.setObjectName("clear_list_btn")
        self.clear_button.clicked.connect(self._on_clear_clicked)
        header.addWidget(self.clear_button)
        layout.addLayout(header)

        self.list_widget = QListWidget()
        self.list_widget.setObjectName("file_list")
        self.list_widget.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self.list_widget, 1)

        self.status_label = QLabel("")
        self.status_label.setObjectName("status_label")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

    def _on_clear_clicked(self, checked: bool = False):
        self.synchronizer.clear_all()

    def _on_refreshed(self, paths: list):
        self.status_label.setText("")

    def _on_error(self, error: Exception):
        self.status_label.setText(str(error))

    def shutdown(self):
        self.synchronizer.shutdown()

    def showEvent(self, event):
        # Embedding may have changed the top-level window since construction
        self.focus_watcher.watch(self.window())
        super().showEvent(event)

    def closeEvent(self, event):
        self.shutdown()
        super().closeEvent(event)
