"""Protocols for the external copy list owner and its notification channel."""

from typing import Protocol, Callable, Sequence, runtime_checkable


@runtime_checkable
class SubscriptionHandle(Protocol):
    """Handle returned by ListStore.subscribe()."""

    def cancel(self) -> None:
        """Stop delivering notifications to the subscribed handler."""
        ...


@runtime_checkable
class ListStore(Protocol):
    """Protocol for the process that owns the authoritative copy list.

    Calls may block or fail; failures surface as FetchError / MutationError.
    Notifications on the update topic carry no payload, are delivered at least
    once and are unordered relative to the caller's own pending mutations.
    """

    def get_copy_list(self) -> Sequence[str]:
        """Return the current ordered list of file paths."""
        ...

    def remove_from_copy_list(self, path: str) -> None:
        """Remove entries matching path. Absent path is a no-op."""
        ...

    def clear_copy_list(self) -> None:
        """Empty the list."""
        ...

    def subscribe(self, topic: str, handler: Callable[[], None]) -> SubscriptionHandle:
        """Register handler for change notifications on topic."""
        ...
