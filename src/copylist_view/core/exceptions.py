"""Copy list synchronization exceptions."""


class CopyListError(Exception):
    """Base class for recoverable copy list failures."""


class FetchError(CopyListError):
    """Raised when the copy list cannot be retrieved from the ListStore."""


class MutationError(CopyListError):
    """Raised when a delete or clear request cannot be submitted."""


class SubscriptionError(CopyListError):
    """Raised when the change notification subscription cannot be established."""


def as_error(exc: Exception, kind: type, message: str) -> CopyListError:
    """Return exc if it is already of kind, else wrap it with exc as cause."""
    if isinstance(exc, kind):
        return exc
    wrapped = kind(f"{message}: {exc}")
    wrapped.__cause__ = exc
    return wrapped
