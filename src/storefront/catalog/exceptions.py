"""Catalog exceptions."""


class ProductValidationError(ValueError):
    """Raised when product data is missing required fields."""

    def __init__(self, message, fields=None):
        self.fields = fields or []
        super().__init__(message)
