"""InMemoryKeyValueStore — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from keyvalue_store._internal.keys import check_key
from keyvalue_store.stores.base import BackedKeyValueStore, K


class InMemoryKeyValueStore(BackedKeyValueStore[K]):
    """In-memory store keyed by the enum members themselves.  Data is lost on process exit.

    Parameters:
        key_type:        The ``str``-valued enum addressing this store.
        initial_content: Optional seed, kept as-is.  Values must already be in
                         stored form: raw ``int``/``str`` for enums and JSON
                         ``bytes`` for structured values.

    Numbers load only as the exact type they were saved with.
    """

    def __init__(self, key_type: type[K], initial_content: Mapping[K, Any] | None = None) -> None:
        super().__init__(key_type)
        self._values: dict[K, Any] = dict(initial_content or {})
        for key in self._values:
            check_key(self._key_type, key)

    def _read(self, key: K) -> Any | None:
        return self._values.get(key)

    def _write(self, key: K, primitive: Any) -> None:
        self._values[key] = primitive

    def snapshot(self) -> dict[K, Any]:
        """Return a shallow copy of the stored primitives."""
        return dict(self._values)
