"""Typed key-value stores and their type-erased wrapper."""

from keyvalue_store.stores.base import BackedKeyValueStore, KeyValueStore
from keyvalue_store.stores.defaults import SEPARATOR, DefaultsStore
from keyvalue_store.stores.erased import AnyKeyValueStore
from keyvalue_store.stores.memory import InMemoryKeyValueStore

__all__ = [
    "SEPARATOR",
    "AnyKeyValueStore",
    "BackedKeyValueStore",
    "DefaultsStore",
    "InMemoryKeyValueStore",
    "KeyValueStore",
]
