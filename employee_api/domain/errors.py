from __future__ import annotations


class ValidationError(ValueError):
    """Malformed or out-of-range request input."""


class StorageError(Exception):
    """An underlying store call failed (connection, constraint, query)."""


class EncodingError(Exception):
    """A successful result could not be serialized."""
