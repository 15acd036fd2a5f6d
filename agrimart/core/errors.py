class StorefrontError(Exception):
    """Base class for errors raised by the storefront services."""


class EmptyCartError(StorefrontError):
    """Checkout was attempted with no cart lines."""

    def __init__(self, message: str = "Your cart is empty"):
        super().__init__(message)


class OrderCreationError(StorefrontError):
    """Writing the order, its lines or clearing the cart failed."""


class TransientStoreError(StorefrontError):
    """A catalog or cart read/write against the database failed."""


class StorageUnavailableError(StorefrontError):
    """The client-side store holding the session identifier is unusable."""
