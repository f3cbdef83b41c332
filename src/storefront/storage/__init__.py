"""Durable store factory.

Builds the adapter selected by settings:
- JsonFileStore when a state directory is configured
- MemoryStore otherwise (development and tests)
"""

from storefront.config import Settings
from storefront.storage.file_adapter import JsonFileStore
from storefront.storage.memory_adapter import MemoryStore
from storefront.storage.port import DurableStore


def create_store(settings: Settings) -> DurableStore:
    """Return the durable store for the configured origin."""
    if settings.state_dir:
        return JsonFileStore(settings.state_dir, origin=settings.origin)
    return MemoryStore()


__all__ = ["DurableStore", "JsonFileStore", "MemoryStore", "create_store"]
