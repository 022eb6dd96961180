"""Application wide error types.

Every error carries a message already resolved from the message catalog.
"""


class WalletAppError(Exception):
    """Base class for errors surfaced to API clients."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(WalletAppError):
    """Raised when a single entity lookup misses."""


class EmptyResultError(NotFoundError):
    """Raised when a collection or page query returns no rows."""


class ElementAlreadyExistsError(WalletAppError):
    """Raised when a unique attribute is already taken."""


class ElementInUseError(WalletAppError):
    """Raised when an entity cannot be removed because other records refer to it."""


class InvalidSortPropertyError(WalletAppError):
    """Raised when a page request sorts by an unknown property."""


__all__ = [
    "WalletAppError",
    "NotFoundError",
    "EmptyResultError",
    "ElementAlreadyExistsError",
    "ElementInUseError",
    "InvalidSortPropertyError",
]
