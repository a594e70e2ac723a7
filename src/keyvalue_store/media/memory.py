"""MemoryMedium — dict-backed medium, shared in-process only."""

from __future__ import annotations

from typing import Any


class MemoryMedium:
    """In-memory medium.  Useful for sharing between several prefixed stores in tests."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def keys(self) -> list[str]:
        return list(self._data)
