"""Persistence errors."""


class StoreError(Exception):
    """Raised when the mapping document cannot be read or written.

    A missing document is not an error; it reads as an empty document.
    """
