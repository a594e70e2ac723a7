"""AnyKeyValueStore — hides which concrete store backs a handle."""

from __future__ import annotations

from enum import Enum
from typing import Any

from keyvalue_store.stores.base import EnumT, K, KeyValueStore, NumberT, T, TextT


class AnyKeyValueStore(KeyValueStore[K]):
    """Type-erased wrapper around exactly one :class:`KeyValueStore`.

    Useful for dependency injection, or for exposing a store without leaking
    its persistence mechanism::

        class SettingsKey(StrEnum):
            LAUNCH_COUNT = "launchCount"
            USERNAME = "username"

        concrete = DefaultsStore(SettingsKey, prefix="com.example.app")
        store: AnyKeyValueStore[SettingsKey] = AnyKeyValueStore(concrete)
        # or: store = concrete.erase()

        store.save(1, SettingsKey.LAUNCH_COUNT)
        store.load(SettingsKey.LAUNCH_COUNT, 0)  # -> 1

    Every operation forwards unchanged to the wrapped store; there is no
    caching and no state of its own.  The wrapped store is fixed for life.
    Wrapping an ``AnyKeyValueStore`` wraps its underlying store instead.
    """

    def __init__(self, base: KeyValueStore[K]) -> None:
        if not isinstance(base, KeyValueStore):
            raise TypeError(f"Expected a KeyValueStore, got {type(base).__qualname__}")
        if isinstance(base, AnyKeyValueStore):
            base = base._base
        self._base: KeyValueStore[K] = base

    @property
    def key_type(self) -> type[K]:
        return self._base.key_type

    def erase(self) -> AnyKeyValueStore[K]:
        return self

    def __repr__(self) -> str:
        return f"AnyKeyValueStore({self._base!r})"

    # ── forwarding ───────────────────────────────────────────

    def load_number(self, key: K, default: NumberT) -> NumberT:
        return self._base.load_number(key, default)

    def load_text(self, key: K, default: TextT) -> TextT:
        return self._base.load_text(key, default)

    def load_int_enum(self, key: K, default: EnumT) -> EnumT:
        return self._base.load_int_enum(key, default)

    def load_str_enum(self, key: K, default: EnumT) -> EnumT:
        return self._base.load_str_enum(key, default)

    def load_structured(self, key: K, default: T) -> T:
        return self._base.load_structured(key, default)

    def save_number(self, value: int | float, key: K) -> None:
        self._base.save_number(value, key)

    def save_text(self, value: str, key: K) -> None:
        self._base.save_text(value, key)

    def save_int_enum(self, value: Enum, key: K) -> None:
        self._base.save_int_enum(value, key)

    def save_str_enum(self, value: Enum, key: K) -> None:
        self._base.save_str_enum(value, key)

    def save_structured(self, value: Any, key: K) -> None:
        self._base.save_structured(value, key)
