"""Medium protocol — the external string-keyed store a persistent backend writes to."""

from __future__ import annotations

from typing import Any, Protocol


class Medium(Protocol):
    """A flat key-value medium that understands ``str`` keys and primitive values.

    Supported value shapes are ``int``, ``float``, ``str`` and ``bytes``.
    Durability and cross-process behaviour belong to the implementation.
    """

    def get(self, key: str) -> Any | None:
        """Return the stored primitive, or ``None`` if not found."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Create or overwrite a primitive."""
        ...
