"""Tests for InMemoryKeyValueStore."""

import pytest
from models import OtherKey, Priority, Profile, SettingsKey, Theme

from keyvalue_store import InMemoryKeyValueStore, KeyTypeError


def test_indexed_by_key_member(memory_store):
    memory_store.save(3, SettingsKey.COUNT)
    assert memory_store.snapshot() == {SettingsKey.COUNT: 3}


def test_enums_kept_in_raw_form(memory_store):
    memory_store.save(Priority.HIGH, SettingsKey.PRIORITY)
    memory_store.save(Theme.DARK, SettingsKey.THEME)
    snap = memory_store.snapshot()
    assert type(snap[SettingsKey.PRIORITY]) is int
    assert snap[SettingsKey.THEME] == "dark"


def test_structured_kept_as_json_bytes(memory_store):
    memory_store.save(Profile(name="Alice", age=30), SettingsKey.PROFILE)
    assert isinstance(memory_store.snapshot()[SettingsKey.PROFILE], bytes)


def test_seed_is_used_as_is():
    store = InMemoryKeyValueStore(
        SettingsKey,
        initial_content={
            SettingsKey.COUNT: 10,
            SettingsKey.THEME: "light",
            SettingsKey.PRIORITY: 2,
            SettingsKey.PROFILE: b'{"name": "Seed", "age": 5}',
        },
    )
    assert store.load(SettingsKey.COUNT, 0) == 10
    assert store.load(SettingsKey.THEME, Theme.SYSTEM) is Theme.LIGHT
    assert store.load(SettingsKey.PRIORITY, Priority.LOW) is Priority.NORMAL
    assert store.load(SettingsKey.PROFILE, Profile(name="", age=0)) == Profile(name="Seed", age=5)


def test_seed_in_wrong_form_gives_default():
    default = Profile(name="guest", age=0)
    store = InMemoryKeyValueStore(
        SettingsKey,
        initial_content={
            SettingsKey.PROFILE: Profile(name="Seed", age=5),
            SettingsKey.THEME: Theme.DARK,
        },
    )
    assert store.load(SettingsKey.PROFILE, default) is default
    # A StrEnum member is a str, so it still resolves by value.
    assert store.load(SettingsKey.THEME, Theme.SYSTEM) is Theme.DARK


def test_seed_is_copied():
    seed = {SettingsKey.COUNT: 1}
    store = InMemoryKeyValueStore(SettingsKey, initial_content=seed)
    store.save(2, SettingsKey.COUNT)
    assert seed[SettingsKey.COUNT] == 1


def test_seed_with_foreign_key_rejected():
    with pytest.raises(KeyTypeError):
        InMemoryKeyValueStore(SettingsKey, initial_content={OtherKey.COUNT: 1})


def test_numbers_do_not_bridge(memory_store):
    memory_store.save(3, SettingsKey.COUNT)
    assert memory_store.load(SettingsKey.COUNT, 0.0) == 0.0

    memory_store.save(3.0, SettingsKey.COUNT)
    assert memory_store.load(SettingsKey.COUNT, 0) == 0


def test_stores_are_independent():
    a = InMemoryKeyValueStore(SettingsKey)
    b = InMemoryKeyValueStore(SettingsKey)
    a.save("Alice", SettingsKey.NAME)
    assert b.load(SettingsKey.NAME, "Guest") == "Guest"
