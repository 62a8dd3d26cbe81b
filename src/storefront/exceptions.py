"""Errors raised by the storefront's data access layer."""


class DataAccessError(Exception):
    """A storefront data call failed (network, server or decoding error)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
