"""Custom exceptions for the keyvalue_store package."""

from __future__ import annotations


class KeyValueStoreError(Exception):
    """Base exception for all key-value store errors."""


class KeyTypeError(KeyValueStoreError, TypeError):
    """Raised when a key type is unusable or a key does not belong to a store."""


class EncodeError(KeyValueStoreError):
    """Raised by the codec when a structured value cannot be serialized.

    Stores catch this on ``save``; it never reaches their callers.
    """

    def __init__(self, value_type: type, detail: str = "") -> None:
        self.value_type = value_type
        msg = f"Cannot encode value of type '{value_type.__qualname__}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class MediumError(KeyValueStoreError):
    """Raised when the external medium fails to read or write a value."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Medium error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class StoreConfigError(KeyValueStoreError):
    """Raised when a store configuration is invalid."""
