"""
Domain errors raised by the shop services.

The HTTP layer maps them onto status codes in ``shopapp.main``.
"""


class ShopAppError(Exception):
    """Base class for errors raised by the shop services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ShopValidationError(ShopAppError):
    """A shop failed a business rule (e.g. overlapping opening hours)."""


class NotFoundError(ShopAppError):
    """The requested record does not exist."""


class PersistenceFailure(ShopAppError):
    """The store rejected a write. Only the store's message is kept."""
