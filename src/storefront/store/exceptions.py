"""Cart and checkout exceptions."""


class CartError(ValueError):
    """Base error for cart operations."""


class InvalidQuantityError(CartError):
    """Raised when a quantity is not a positive whole number."""


class EmptyCartError(CartError):
    """Raised when checking out an empty cart."""

    def __init__(self, message="Your cart is empty"):
        super().__init__(message)
