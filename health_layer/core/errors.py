"""Errors raised by health types."""


class InvalidStatusError(ValueError):
    """Raised when a health status is missing."""

    def __init__(self, message: str = "Status must not be null") -> None:
        super().__init__(message)
