"""Order exceptions."""


class InvalidStatusError(ValueError):
    """Raised when an order or payment status is not a known choice."""

    def __init__(self, status, valid):
        self.status = status
        self.valid = list(valid)
        super().__init__(f"Invalid status: {status}. Must be one of {self.valid}")
