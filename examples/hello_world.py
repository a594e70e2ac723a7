"""
keyvalue_store — Hello World

Typed keys, typed values, and a default for every load.
Swap the backend without touching the code that uses it.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum, StrEnum

from keyvalue_store import (
    AnyKeyValueStore,
    DefaultsStore,
    InMemoryKeyValueStore,
    SQLiteMedium,
)

# ─── Your keys and values (plain enums and dataclasses) ───


class SettingsKey(StrEnum):
    LAUNCH_COUNT = "launchCount"
    USERNAME = "username"
    THEME = "preferredTheme"
    PRIORITY = "priority"
    PROFILE = "profile"


class Theme(StrEnum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


@dataclass
class Profile:
    name: str
    age: int


# ─── Code that only knows "a store" ───


def record_launch(store: AnyKeyValueStore[SettingsKey]) -> None:
    count = store.load(SettingsKey.LAUNCH_COUNT, 0)
    store.save(count + 1, SettingsKey.LAUNCH_COUNT)


def describe(store: AnyKeyValueStore[SettingsKey]) -> None:
    print(f"  launches = {store.load(SettingsKey.LAUNCH_COUNT, 0)}")
    print(f"  username = {store.load(SettingsKey.USERNAME, 'guest')}")
    print(f"  theme    = {store.load(SettingsKey.THEME, Theme.SYSTEM)}")
    print(f"  priority = {store.load(SettingsKey.PRIORITY, Priority.LOW)!r}")
    print(f"  profile  = {store.load(SettingsKey.PROFILE, Profile('guest', 0))}")


def main():
    logging.basicConfig(level=logging.INFO)

    # ──────────────────────────────────────
    #  1. In-memory store (tests, previews)
    # ──────────────────────────────────────
    print("=== In-memory ===\n")
    memory = InMemoryKeyValueStore(SettingsKey).erase()
    describe(memory)

    record_launch(memory)
    memory.save("alice", SettingsKey.USERNAME)
    memory.save(Theme.DARK, SettingsKey.THEME)
    memory.save(Priority.HIGH, SettingsKey.PRIORITY)
    memory.save(Profile("Alice", 30), SettingsKey.PROFILE)
    print()
    describe(memory)

    # ──────────────────────────────────────
    #  2. Persistent store on a shared SQLite file
    # ──────────────────────────────────────
    print("\n=== Persistent (run me twice) ===\n")
    medium = SQLiteMedium("hello_world.db")
    persistent = DefaultsStore(SettingsKey, prefix="com.example.hello", medium=medium).erase()
    record_launch(persistent)
    describe(persistent)

    # ──────────────────────────────────────
    #  3. Saves that cannot be encoded are dropped, not raised
    # ──────────────────────────────────────
    print("\n=== Unencodable save ===\n")
    persistent.save({"handle": object()}, SettingsKey.PROFILE)
    describe(persistent)

    medium.close()


if __name__ == "__main__":
    main()
