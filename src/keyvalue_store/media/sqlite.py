"""SQLiteMedium — durable, single-file medium using the standard ``sqlite3`` module."""

from __future__ import annotations

import sqlite3
import threading
from typing import Any, ClassVar

from keyvalue_store.exceptions import MediumError

DEFAULT_DB_PATH = "keyvalue_store.db"

# No declared type on ``value``: SQLite keeps INTEGER, REAL, TEXT and BLOB as given.
_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS defaults (
    key   TEXT PRIMARY KEY NOT NULL,
    value
)
"""


def _to_primitive(value: Any) -> int | float | str | bytes:
    if isinstance(value, bool):
        raise MediumError("set", "booleans are not a primitive shape")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bytes | bytearray | memoryview):
        return bytes(value)
    raise MediumError("set", f"unsupported value type '{type(value).__qualname__}'")


class SQLiteMedium:
    """Persistent medium backed by a single SQLite file.

    Every ``set`` commits immediately.  A lock serializes use of the single
    connection, so one instance may be shared across threads.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
    """

    _standard: ClassVar[SQLiteMedium | None] = None
    _standard_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, db_path: str = DEFAULT_DB_PATH) -> None:
        self._db_path = db_path
        self._db: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @classmethod
    def standard(cls) -> SQLiteMedium:
        """Return the process-wide shared medium at :data:`DEFAULT_DB_PATH`."""
        with cls._standard_lock:
            if cls._standard is None:
                cls._standard = cls()
            return cls._standard

    @classmethod
    def reset_standard(cls) -> None:
        """Close and forget the shared medium; the next :meth:`standard` reopens it."""
        with cls._standard_lock:
            if cls._standard is not None:
                cls._standard.close()
                cls._standard = None

    @property
    def db_path(self) -> str:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        if self._db is None:
            try:
                self._db = sqlite3.connect(self._db_path, check_same_thread=False)
                self._db.execute(_CREATE_TABLE)
                self._db.commit()
            except sqlite3.Error as exc:
                raise MediumError("connect", str(exc)) from exc
        return self._db

    def close(self) -> None:
        with self._lock:
            if self._db:
                self._db.close()
                self._db = None

    # ── Medium protocol ──────────────────────────────────────

    def get(self, key: str) -> Any | None:
        with self._lock:
            db = self._connect()
            try:
                row = db.execute("SELECT value FROM defaults WHERE key = ?", (key,)).fetchone()
            except sqlite3.Error as exc:
                raise MediumError("get", str(exc)) from exc
        if row is None:
            return None
        return row[0]

    def set(self, key: str, value: Any) -> None:
        primitive = _to_primitive(value)
        with self._lock:
            db = self._connect()
            try:
                db.execute(
                    "INSERT OR REPLACE INTO defaults (key, value) VALUES (?, ?)",
                    (key, primitive),
                )
                db.commit()
            except (sqlite3.Error, OverflowError) as exc:
                raise MediumError("set", str(exc)) from exc
