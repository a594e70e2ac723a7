"""keyvalue_store — strongly-typed load/save over pluggable key-value backends.

Keys are ``str``-valued enums.  Values are numbers, text, int- or str-backed
enums, or anything pydantic can serialize.  Loads never fail: they fall back to
the default you pass in.
"""

from keyvalue_store.codec import ValueCategory, categorize
from keyvalue_store.config import StoreConfig, create_store
from keyvalue_store.exceptions import (
    EncodeError,
    KeyTypeError,
    KeyValueStoreError,
    MediumError,
    StoreConfigError,
)
from keyvalue_store.media import Medium, MemoryMedium, SQLiteMedium
from keyvalue_store.stores import (
    AnyKeyValueStore,
    DefaultsStore,
    InMemoryKeyValueStore,
    KeyValueStore,
)

__all__ = [
    "AnyKeyValueStore",
    "DefaultsStore",
    "EncodeError",
    "InMemoryKeyValueStore",
    "KeyTypeError",
    "KeyValueStore",
    "KeyValueStoreError",
    "Medium",
    "MediumError",
    "MemoryMedium",
    "SQLiteMedium",
    "StoreConfig",
    "StoreConfigError",
    "ValueCategory",
    "categorize",
    "create_store",
]
