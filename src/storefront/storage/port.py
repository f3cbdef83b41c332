"""Durable store port (abstract interface).

A synchronous key/value store scoped to one origin. Values are JSON
documents; adapters raise ``StorageError`` when a value cannot be read,
serialised or written.
"""

from abc import ABC, abstractmethod
from typing import Any


class DurableStore(ABC):
    """Abstract durable key/value store."""

    @abstractmethod
    def read(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or ``None`` if absent."""
        ...

    @abstractmethod
    def write(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; a missing key is not an error."""
        ...
