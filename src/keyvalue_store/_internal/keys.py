"""Key types — ``str``-valued enums whose values address storage."""

from __future__ import annotations

from enum import Enum
from typing import Any

from keyvalue_store.exceptions import KeyTypeError


def validate_key_type(key_type: Any) -> type[Enum]:
    """Check that *key_type* is an ``Enum`` whose members all have ``str`` values.

    Enum semantics guarantee that two distinct members never share a value
    (a duplicate becomes an alias), so each member maps to exactly one raw form.
    """
    if not (isinstance(key_type, type) and issubclass(key_type, Enum)):
        raise KeyTypeError(f"Key type must be an Enum subclass, got {key_type!r}")
    if not len(key_type):
        raise KeyTypeError(f"Key type '{key_type.__qualname__}' has no members")
    bad = [m.name for m in key_type if not isinstance(m.value, str)]
    if bad:
        raise KeyTypeError(
            f"Key type '{key_type.__qualname__}' has non-str values for: {', '.join(bad)}"
        )
    return key_type


def check_key(key_type: type[Enum], key: Any) -> None:
    if not isinstance(key, key_type):
        raise KeyTypeError(f"{key!r} is not a member of key type '{key_type.__qualname__}'")


def raw_form(key: Enum) -> str:
    """Return the string token used to address *key* on a string-keyed medium."""
    value: str = key.value
    return value
