"""External media that persistent stores read from and write to."""

from keyvalue_store.media.base import Medium
from keyvalue_store.media.memory import MemoryMedium
from keyvalue_store.media.sqlite import DEFAULT_DB_PATH, SQLiteMedium

__all__ = ["DEFAULT_DB_PATH", "Medium", "MemoryMedium", "SQLiteMedium"]
