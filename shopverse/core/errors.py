# shopverse/core/errors.py
"""Domain exceptions raised by services and translated to HTTP in main.py."""


class ShopError(Exception):
    """Base exception for all storefront errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ShopError):
    """Missing or malformed input."""

    status_code = 400


class NotFoundError(ShopError):
    """Referenced product, cart, item or order does not exist."""

    status_code = 404


class UnauthorizedError(ShopError):
    """Missing or invalid user/admin identity."""

    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class EmptyCartError(ShopError):
    """Checkout attempted with no cart entries."""

    status_code = 400

    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message)


class StoreError(ShopError):
    """
    Persistence layer could not write a collection.

    The message is shown to clients, so it must never contain paths.
    """

    status_code = 500

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__("Server error")
