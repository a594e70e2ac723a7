"""Value codec — converts values to the primitives a medium stores, and back.

Every value belongs to exactly one :class:`ValueCategory`, picked from its
runtime type at the call site.  Categories are never stored alongside the
value, so reading a key under a different category than it was written with
simply yields the caller's default.

=============  ==========================  ================================
Category       Stored primitive            Rebuilt on load via
=============  ==========================  ================================
NUMERIC        the ``int``/``float``       exact type (or lossless bridge)
TEXT           the ``str``                 ``type(default)``
RAW_INT        ``member.value`` (``int``)  ``type(default)(raw)``
RAW_STRING     ``member.value`` (``str``)  ``type(default)(raw)``
STRUCTURED     JSON ``bytes`` (pydantic)   ``TypeAdapter.validate_json``
=============  ==========================  ================================
"""

from __future__ import annotations

import logging
from enum import Enum, Flag, StrEnum
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from keyvalue_store.exceptions import EncodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValueCategory(StrEnum):
    """How a value is reduced to a storable primitive."""

    NUMERIC = "numeric"
    TEXT = "text"
    RAW_INT = "raw_int"
    RAW_STRING = "raw_string"
    STRUCTURED = "structured"


def categorize(value: Any) -> ValueCategory:
    """Return the category *value* is saved and loaded under.

    Enum members are classified by the type of their ``value`` first, so
    ``IntEnum``/``StrEnum`` members are enums here, not numbers or text.
    Booleans are structured: they are not numbers in this model.
    """
    if isinstance(value, Enum):
        raw = value.value
        if isinstance(raw, int) and not isinstance(raw, bool):
            return ValueCategory.RAW_INT
        if isinstance(raw, str):
            return ValueCategory.RAW_STRING
        return ValueCategory.STRUCTURED
    if isinstance(value, bool):
        return ValueCategory.STRUCTURED
    if isinstance(value, int | float):
        return ValueCategory.NUMERIC
    if isinstance(value, str):
        return ValueCategory.TEXT
    return ValueCategory.STRUCTURED


@lru_cache(maxsize=256)
def _adapter(tp: type) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


# ── encoding ─────────────────────────────────────────────────


def encode_structured(value: Any) -> bytes:
    """Serialize *value* to JSON bytes using its type's default field names.

    Raises:
        EncodeError: pydantic cannot build a schema for, or serialize, *value*.
    """
    try:
        return _adapter(type(value)).dump_json(value)
    except (PydanticUserError, PydanticSerializationError) as exc:
        raise EncodeError(type(value), str(exc)) from exc


def encode(value: Any, category: ValueCategory | None = None) -> Any:
    """Return the primitive form of *value* for *category* (inferred if omitted)."""
    category = category or categorize(value)
    if category in (ValueCategory.RAW_INT, ValueCategory.RAW_STRING):
        return value.value
    if category is ValueCategory.STRUCTURED:
        return encode_structured(value)
    return value


# ── decoding ─────────────────────────────────────────────────


def _decode_number(stored: Any, default: T, bridge_numbers: bool) -> T:
    if isinstance(stored, bool) or not isinstance(stored, int | float):
        return default
    target = type(default)
    if isinstance(stored, target):
        return stored
    if not bridge_numbers:
        return default
    try:
        converted = target(stored)  # type: ignore[call-arg]
    except (TypeError, ValueError, OverflowError):
        return default
    return converted if converted == stored else default


def _decode_text(stored: Any, default: T) -> T:
    if not isinstance(stored, str):
        return default
    target = type(default)
    if type(stored) is target:
        return stored  # type: ignore[return-value]
    try:
        return target(stored)  # type: ignore[call-arg]
    except (TypeError, ValueError):
        return default


def _flag_mask(flag_type: type[Flag]) -> int:
    mask = 0
    for member in flag_type.__members__.values():
        mask |= member.value
    return mask


def _decode_raw(stored: Any, default: T, raw_type: type) -> T:
    if isinstance(stored, bool) or not isinstance(stored, raw_type):
        return default
    target = type(default)
    # Flags accept combinations of defined bits, nothing else.
    if issubclass(target, Flag) and stored & ~_flag_mask(target):
        return default
    try:
        return target(stored)  # type: ignore[call-arg]
    except (TypeError, ValueError):
        return default


def _decode_structured(stored: Any, default: T) -> T:
    if isinstance(stored, bytearray | memoryview):
        stored = bytes(stored)
    if not isinstance(stored, bytes):
        return default
    try:
        value: T = _adapter(type(default)).validate_json(stored)
    except (ValidationError, PydanticUserError) as exc:
        logger.debug("Falling back to default %s: %s", type(default).__qualname__, exc)
        return default
    return value


def decode(
    stored: Any,
    default: T,
    category: ValueCategory | None = None,
    *,
    bridge_numbers: bool = False,
) -> T:
    """Rebuild a value of ``type(default)`` from *stored*, or return *default*.

    Never raises.  ``None`` means nothing is stored.  *bridge_numbers* lets a
    stored ``int``/``float`` convert to the other numeric type when no
    precision is lost, mirroring media that keep a single native number type.
    """
    if stored is None:
        return default
    category = category or categorize(default)
    if category is ValueCategory.NUMERIC:
        return _decode_number(stored, default, bridge_numbers)
    if category is ValueCategory.TEXT:
        return _decode_text(stored, default)
    if category is ValueCategory.RAW_INT:
        return _decode_raw(stored, default, int)
    if category is ValueCategory.RAW_STRING:
        return _decode_raw(stored, default, str)
    return _decode_structured(stored, default)
