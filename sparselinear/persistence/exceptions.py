"""Custom exceptions for the object store."""


class ObjectStoreError(Exception):
    """Raised when a serialized object cannot be written or read."""
    pass
