"""Shared test fixtures."""

import pytest
from models import SettingsKey

from keyvalue_store import DefaultsStore, InMemoryKeyValueStore, MemoryMedium, SQLiteMedium


@pytest.fixture
def memory_store():
    return InMemoryKeyValueStore(SettingsKey)


@pytest.fixture
def medium():
    return MemoryMedium()


@pytest.fixture
def defaults_store(medium):
    return DefaultsStore(SettingsKey, prefix="com.example.app", medium=medium)


@pytest.fixture
def sqlite_medium(tmp_path):
    m = SQLiteMedium(str(tmp_path / "defaults.db"))
    yield m
    m.close()


@pytest.fixture(params=["memory", "defaults", "sqlite", "erased"])
def store(request, tmp_path):
    """Every backend, plus an erased wrapper, behind the same contract."""
    if request.param == "memory":
        return InMemoryKeyValueStore(SettingsKey)
    if request.param == "defaults":
        return DefaultsStore(SettingsKey, prefix="app", medium=MemoryMedium())
    if request.param == "sqlite":
        m = SQLiteMedium(str(tmp_path / "contract.db"))
        request.addfinalizer(m.close)
        return DefaultsStore(SettingsKey, prefix="app", medium=m)
    return InMemoryKeyValueStore(SettingsKey).erase()
