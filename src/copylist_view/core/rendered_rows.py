"""
Rendered row records and the container contract they are appended to.

Rows are plain records built fresh on every refresh. The delete callback
lives on the record itself, so containers only need to call
``row.activate_delete()`` when the row's delete control fires.
"""

from dataclasses import dataclass
from typing import Callable, List, Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class RenderedRow:
    """One on-screen entry for a file path."""

    path: str
    on_delete: Callable[[str], None]

    def activate_delete(self) -> None:
        """Request deletion of the path captured when this row was rendered."""
        self.on_delete(self.path)


@dataclass(frozen=True)
class PlaceholderRow:
    """Empty-state row shown when the copy list has no entries."""

    text: str


Row = Union[RenderedRow, PlaceholderRow]


@runtime_checkable
class RowContainer(Protocol):
    """Owned mutable container holding the rendered rows."""

    def clear(self) -> None:
        ...

    def append(self, row: Row) -> None:
        ...


class InMemoryRowContainer:
    """List-backed RowContainer for headless use."""

    def __init__(self):
        self.rows: List[Row] = []
        self.clear_count = 0

    def clear(self) -> None:
        self.rows = []
        self.clear_count += 1

    def append(self, row: Row) -> None:
        self.rows.append(row)

    def paths(self) -> List[str]:
        """Paths of data rows in render order."""
        return [row.path for row in self.rows if isinstance(row, RenderedRow)]

    def has_placeholder(self) -> bool:
        return any(isinstance(row, PlaceholderRow) for row in self.rows)

    def row_for(self, path: str) -> RenderedRow:
        """Return the first data row rendered for path."""
        for row in self.rows:
            if isinstance(row, RenderedRow) and row.path == path:
                return row
        raise KeyError(path)
