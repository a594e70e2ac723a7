"""Store configuration and the factory that builds stores from it.

Example:
    config = StoreConfig.model_validate_json(
        '{"type": "persistent", "path": "settings.db", "prefix": "com.example.app"}'
    )
    store = create_store(config, SettingsKey)
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, TypeVar

from pydantic import BaseModel

from keyvalue_store.exceptions import StoreConfigError
from keyvalue_store.media.sqlite import SQLiteMedium
from keyvalue_store.stores.defaults import DefaultsStore
from keyvalue_store.stores.erased import AnyKeyValueStore
from keyvalue_store.stores.memory import InMemoryKeyValueStore

K = TypeVar("K", bound=Enum)


class StoreConfig(BaseModel):
    """Which backend to build and where it keeps its data.

    Attributes:
        type: Store type ("memory" or "persistent")
        path: SQLite database file for the persistent store.  Empty means the
              process-wide shared medium.
        prefix: Key namespace, required for the persistent store
    """

    type: Literal["memory", "persistent"] = "memory"
    path: str = ""
    prefix: str = ""


def create_store(config: StoreConfig, key_type: type[K]) -> AnyKeyValueStore[K]:
    """Build the store described by *config*, erased to :class:`AnyKeyValueStore`.

    Raises:
        StoreConfigError: A persistent store is requested without a prefix.
    """
    if config.type == "persistent":
        if not config.prefix:
            raise StoreConfigError("Persistent store requires 'prefix' configuration")
        medium = SQLiteMedium(config.path) if config.path else SQLiteMedium.standard()
        return DefaultsStore(key_type, config.prefix, medium).erase()
    return InMemoryKeyValueStore(key_type).erase()
