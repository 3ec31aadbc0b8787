"""Dashboard exceptions."""


class CannotDeleteSelfError(ValueError):
    """Raised when an admin tries to delete their own account."""

    def __init__(self):
        super().__init__("You cannot delete your own account.")


class NotACustomerError(ValueError):
    """Raised when a customer operation targets a non-customer account."""
