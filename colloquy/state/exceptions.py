"""Errors raised by dialog state stores."""


class StateStoreError(Exception):
    """Raised when a stored dialog stack cannot be read or written."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.message = message
        self.key = key
        super().__init__(message)
