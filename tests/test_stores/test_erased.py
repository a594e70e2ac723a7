"""Tests for AnyKeyValueStore."""

from unittest.mock import MagicMock

import pytest
from models import Priority, Profile, SettingsKey, Theme

from keyvalue_store import AnyKeyValueStore, DefaultsStore, InMemoryKeyValueStore, MemoryMedium


@pytest.fixture
def spy():
    base = InMemoryKeyValueStore(SettingsKey)
    return MagicMock(spec=base, wraps=base)


@pytest.mark.parametrize(
    ("method", "default"),
    [
        ("load_number", 0),
        ("load_text", "Guest"),
        ("load_int_enum", Priority.LOW),
        ("load_str_enum", Theme.SYSTEM),
        ("load_structured", Profile(name="guest", age=0)),
    ],
)
def test_load_forwards_to_same_named_method(spy, method, default):
    store = AnyKeyValueStore(spy)
    assert store.load(SettingsKey.COUNT, default) is default
    getattr(spy, method).assert_called_once_with(SettingsKey.COUNT, default)


@pytest.mark.parametrize(
    ("method", "value"),
    [
        ("save_number", 3),
        ("save_text", "Alice"),
        ("save_int_enum", Priority.HIGH),
        ("save_str_enum", Theme.DARK),
        ("save_structured", Profile(name="Alice", age=30)),
    ],
)
def test_save_forwards_to_same_named_method(spy, method, value):
    store = AnyKeyValueStore(spy)
    store.save(value, SettingsKey.NAME)
    getattr(spy, method).assert_called_once_with(value, SettingsKey.NAME)


def _session(store):
    """A fixed sequence of saves and loads; returns every load result."""
    results = [store.load(SettingsKey.NAME, "Guest")]
    store.save(3, SettingsKey.COUNT)
    store.save("Alice", SettingsKey.NAME)
    store.save(Theme.DARK, SettingsKey.THEME)
    store.save(Priority.NORMAL, SettingsKey.PRIORITY)
    store.save(Profile(name="Alice", age=30), SettingsKey.PROFILE)
    results += [
        store.load(SettingsKey.COUNT, 0),
        store.load(SettingsKey.COUNT, 0.0),
        store.load(SettingsKey.NAME, "Guest"),
        store.load(SettingsKey.THEME, Theme.SYSTEM),
        store.load(SettingsKey.PRIORITY, Priority.LOW),
        store.load(SettingsKey.PROFILE, Profile(name="guest", age=0)),
        store.load(SettingsKey.PROFILE, 0),
    ]
    return results


def test_erasure_is_transparent_in_memory():
    direct = InMemoryKeyValueStore(SettingsKey)
    wrapped = InMemoryKeyValueStore(SettingsKey)
    assert _session(direct) == _session(AnyKeyValueStore(wrapped))
    assert direct.snapshot() == wrapped.snapshot()


def test_erasure_is_transparent_persistent():
    direct_medium, wrapped_medium = MemoryMedium(), MemoryMedium()
    direct = DefaultsStore(SettingsKey, prefix="app", medium=direct_medium)
    erased = DefaultsStore(SettingsKey, prefix="app", medium=wrapped_medium).erase()
    assert _session(direct) == _session(erased)
    assert {k: direct_medium.get(k) for k in direct_medium.keys()} == {
        k: wrapped_medium.get(k) for k in wrapped_medium.keys()
    }


def test_shares_state_with_wrapped_store():
    base = InMemoryKeyValueStore(SettingsKey)
    erased = base.erase()
    erased.save("Alice", SettingsKey.NAME)
    assert base.load(SettingsKey.NAME, "") == "Alice"
    base.save(7, SettingsKey.COUNT)
    assert erased.load(SettingsKey.COUNT, 0) == 7


def test_erase_matches_constructor():
    base = InMemoryKeyValueStore(SettingsKey)
    assert isinstance(base.erase(), AnyKeyValueStore)
    assert base.erase().key_type is AnyKeyValueStore(base).key_type is SettingsKey


def test_erasing_twice_does_not_nest():
    base = InMemoryKeyValueStore(SettingsKey)
    erased = AnyKeyValueStore(base)
    assert erased.erase() is erased
    rewrapped = AnyKeyValueStore(erased)
    assert rewrapped._base is base


def test_rejects_non_store():
    with pytest.raises(TypeError):
        AnyKeyValueStore({"count": 1})
