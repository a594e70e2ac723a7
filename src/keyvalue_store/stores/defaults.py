"""DefaultsStore — typed store persisted on a shared, string-keyed medium under a prefix."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from keyvalue_store._internal.keys import raw_form
from keyvalue_store.media.sqlite import SQLiteMedium
from keyvalue_store.stores.base import BackedKeyValueStore, K

if TYPE_CHECKING:
    from keyvalue_store.media.base import Medium

SEPARATOR = "/"


class DefaultsStore(BackedKeyValueStore[K]):
    """Persistent store that namespaces every key with a prefix.

    Each key is written to the medium as ``f"{prefix}/{key.value}"``.  Stores
    sharing one medium stay isolated as long as their prefixes differ; picking
    distinct prefixes is up to the caller.

    Parameters:
        key_type: The ``str``-valued enum addressing this store.
        prefix:   Non-empty namespace, e.g. ``"com.example.app"``.
        medium:   Backing medium.  Defaults to the process-wide
                  :meth:`SQLiteMedium.standard` instance.

    Durability, batching and locking are whatever the medium provides.  Because
    the medium keeps one native number per slot, a stored ``int`` loads as a
    ``float`` (and a whole ``float`` as an ``int``) when nothing is lost.
    """

    _bridge_numbers: ClassVar[bool] = True

    def __init__(self, key_type: type[K], prefix: str, medium: Medium | None = None) -> None:
        super().__init__(key_type)
        if not isinstance(prefix, str) or not prefix:
            raise ValueError("DefaultsStore requires a non-empty string prefix")
        self._prefix = prefix
        self._medium: Medium = medium if medium is not None else SQLiteMedium.standard()

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def medium(self) -> Medium:
        return self._medium

    def qualified_key(self, key: K) -> str:
        """Return the medium key for *key*: prefix, separator, raw form."""
        return f"{self._prefix}{SEPARATOR}{raw_form(key)}"

    def _read(self, key: K) -> Any | None:
        return self._medium.get(self.qualified_key(key))

    def _write(self, key: K, primitive: Any) -> None:
        self._medium.set(self.qualified_key(key), primitive)
