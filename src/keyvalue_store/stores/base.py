"""KeyValueStore protocol — typed load/save keyed by a ``str``-valued enum."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from keyvalue_store._internal.keys import check_key, validate_key_type
from keyvalue_store.codec import ValueCategory, categorize, decode, encode, encode_structured
from keyvalue_store.exceptions import EncodeError, MediumError

if TYPE_CHECKING:
    from keyvalue_store.stores.erased import AnyKeyValueStore

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Enum)
T = TypeVar("T")
NumberT = TypeVar("NumberT", bound=int | float)
TextT = TypeVar("TextT", bound=str)
EnumT = TypeVar("EnumT", bound=Enum)

_LOAD_METHODS: dict[ValueCategory, str] = {
    ValueCategory.NUMERIC: "load_number",
    ValueCategory.TEXT: "load_text",
    ValueCategory.RAW_INT: "load_int_enum",
    ValueCategory.RAW_STRING: "load_str_enum",
    ValueCategory.STRUCTURED: "load_structured",
}

_SAVE_METHODS: dict[ValueCategory, str] = {
    ValueCategory.NUMERIC: "save_number",
    ValueCategory.TEXT: "save_text",
    ValueCategory.RAW_INT: "save_int_enum",
    ValueCategory.RAW_STRING: "save_str_enum",
    ValueCategory.STRUCTURED: "save_structured",
}


def _require(value: Any, category: ValueCategory, operation: str) -> None:
    if categorize(value) is not category:
        raise TypeError(
            f"{operation}() expects a {category} value, got {type(value).__qualname__}"
        )


class KeyValueStore(ABC, Generic[K]):
    """Abstract capability shared by every store and by the erased wrapper.

    Values come in five categories (see :class:`~keyvalue_store.codec.ValueCategory`),
    each with its own ``load_*``/``save_*`` pair.  :meth:`load` and :meth:`save`
    pick the pair from the runtime type of the default or the value, so most
    callers never name a category.

    Loads are total: a missing key, a value stored under another category, or
    bytes that fail to decode all return the caller's *default* object itself.
    Saves are best-effort: a structured value that cannot be serialized, or a
    primitive the medium refuses, is logged and dropped, leaving whatever the
    key held before.  A medium that fails on read likewise yields the default.
    """

    @property
    @abstractmethod
    def key_type(self) -> type[K]:
        """The enum whose members address this store."""
        ...

    # ── per-category loads ───────────────────────────────────

    @abstractmethod
    def load_number(self, key: K, default: NumberT) -> NumberT: ...

    @abstractmethod
    def load_text(self, key: K, default: TextT) -> TextT: ...

    @abstractmethod
    def load_int_enum(self, key: K, default: EnumT) -> EnumT: ...

    @abstractmethod
    def load_str_enum(self, key: K, default: EnumT) -> EnumT: ...

    @abstractmethod
    def load_structured(self, key: K, default: T) -> T: ...

    # ── per-category saves ───────────────────────────────────

    @abstractmethod
    def save_number(self, value: int | float, key: K) -> None: ...

    @abstractmethod
    def save_text(self, value: str, key: K) -> None: ...

    @abstractmethod
    def save_int_enum(self, value: Enum, key: K) -> None: ...

    @abstractmethod
    def save_str_enum(self, value: Enum, key: K) -> None: ...

    @abstractmethod
    def save_structured(self, value: Any, key: K) -> None: ...

    # ── dispatch ─────────────────────────────────────────────

    def load(self, key: K, default: T) -> T:
        """Load the value for *key* in the category of *default*, or *default*."""
        loader = getattr(self, _LOAD_METHODS[categorize(default)])
        value: T = loader(key, default)
        return value

    def save(self, value: Any, key: K) -> None:
        """Save *value* for *key* in the category of *value*."""
        getattr(self, _SAVE_METHODS[categorize(value)])(value, key)

    def erase(self) -> AnyKeyValueStore[K]:
        """Return a type-erased wrapper over this store."""
        from keyvalue_store.stores.erased import AnyKeyValueStore

        return AnyKeyValueStore(self)


class BackedKeyValueStore(KeyValueStore[K]):
    """Base for stores that keep one primitive per key on some backing medium.

    Subclasses implement :meth:`_read` and :meth:`_write`; every typed operation
    is built on those two and the value codec, and touches the medium once.

    Class Variables:
        _bridge_numbers: Whether a stored ``int`` may load as ``float`` (and a
                         whole ``float`` as ``int``), as on media with a single
                         native number type.
    """

    _bridge_numbers: ClassVar[bool] = False

    def __init__(self, key_type: type[K]) -> None:
        self._key_type: type[K] = validate_key_type(key_type)

    @property
    def key_type(self) -> type[K]:
        return self._key_type

    @abstractmethod
    def _read(self, key: K) -> Any | None:
        """Return the primitive stored for *key*, or ``None`` if absent."""
        ...

    @abstractmethod
    def _write(self, key: K, primitive: Any) -> None:
        """Create or overwrite the primitive stored for *key*."""
        ...

    def _load(self, key: K, default: T, category: ValueCategory, operation: str) -> T:
        _require(default, category, operation)
        check_key(self._key_type, key)
        try:
            stored = self._read(key)
        except MediumError as exc:
            logger.warning("Falling back to default for key '%s': %s", key.value, exc)
            return default
        return decode(stored, default, category, bridge_numbers=self._bridge_numbers)

    def _save(self, value: Any, key: K, category: ValueCategory, operation: str) -> None:
        _require(value, category, operation)
        check_key(self._key_type, key)
        self._write_or_drop(key, encode(value, category))

    def _write_or_drop(self, key: K, primitive: Any) -> None:
        try:
            self._write(key, primitive)
        except MediumError as exc:
            logger.warning("Dropped save for key '%s': %s", key.value, exc)

    # ── KeyValueStore ────────────────────────────────────────

    def load_number(self, key: K, default: NumberT) -> NumberT:
        return self._load(key, default, ValueCategory.NUMERIC, "load_number")

    def load_text(self, key: K, default: TextT) -> TextT:
        return self._load(key, default, ValueCategory.TEXT, "load_text")

    def load_int_enum(self, key: K, default: EnumT) -> EnumT:
        return self._load(key, default, ValueCategory.RAW_INT, "load_int_enum")

    def load_str_enum(self, key: K, default: EnumT) -> EnumT:
        return self._load(key, default, ValueCategory.RAW_STRING, "load_str_enum")

    def load_structured(self, key: K, default: T) -> T:
        return self._load(key, default, ValueCategory.STRUCTURED, "load_structured")

    def save_number(self, value: int | float, key: K) -> None:
        self._save(value, key, ValueCategory.NUMERIC, "save_number")

    def save_text(self, value: str, key: K) -> None:
        self._save(value, key, ValueCategory.TEXT, "save_text")

    def save_int_enum(self, value: Enum, key: K) -> None:
        self._save(value, key, ValueCategory.RAW_INT, "save_int_enum")

    def save_str_enum(self, value: Enum, key: K) -> None:
        self._save(value, key, ValueCategory.RAW_STRING, "save_str_enum")

    def save_structured(self, value: Any, key: K) -> None:
        _require(value, ValueCategory.STRUCTURED, "save_structured")
        check_key(self._key_type, key)
        try:
            data = encode_structured(value)
        except EncodeError as exc:
            # Prior value for the key is left as it was.
            logger.warning("Dropped save for key '%s': %s", key.value, exc)
            return
        self._write_or_drop(key, data)
