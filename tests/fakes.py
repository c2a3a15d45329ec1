"""Test doubles for the ListStore protocol."""

from typing import Callable, List, Optional

from copylist_view.core import FetchError, MutationError


class FakeSubscription:
    def __init__(self, store: "FakeListStore", handler: Callable[[], None]):
        self._store = store
        self._handler = handler
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True
        if self._handler in self._store.handlers:
            self._store.handlers.remove(self._handler)


class FakeListStore:
    """Plain-Python ListStore that records calls and can be told to fail.

    Mutations do not notify on their own; tests call notify() to deliver
    notifications at the point in the interleaving they want.
    """

    def __init__(self, paths: Optional[List[str]] = None):
        self.paths: List[str] = list(paths or [])
        self.handlers: List[Callable[[], None]] = []
        self.calls: List[tuple] = []
        self.fail_fetch: Optional[Exception] = None
        self.fail_mutation: Optional[Exception] = None
        self.fail_subscribe: Optional[Exception] = None
        self.auto_notify = False

    @property
    def fetch_count(self) -> int:
        return sum(1 for call in self.calls if call[0] == "get_copy_list")

    def get_copy_list(self) -> List[str]:
        self.calls.append(("get_copy_list",))
        if self.fail_fetch is not None:
            raise self.fail_fetch
        return list(self.paths)

    def remove_from_copy_list(self, path: str) -> None:
        self.calls.append(("remove_from_copy_list", path))
        if self.fail_mutation is not None:
            raise self.fail_mutation
        self.paths = [p for p in self.paths if p != path]
        if self.auto_notify:
            self.notify()

    def clear_copy_list(self) -> None:
        self.calls.append(("clear_copy_list",))
        if self.fail_mutation is not None:
            raise self.fail_mutation
        self.paths = []
        if self.auto_notify:
            self.notify()

    def subscribe(self, topic: str, handler: Callable[[], None]) -> FakeSubscription:
        self.calls.append(("subscribe", topic))
        if self.fail_subscribe is not None:
            raise self.fail_subscribe
        self.handlers.append(handler)
        return FakeSubscription(self, handler)

    def notify(self) -> None:
        for handler in list(self.handlers):
            handler()


def unreachable_fetch() -> FetchError:
    return FetchError("backend unreachable")


def rejected_mutation() -> MutationError:
    return MutationError("backend rejected request")
