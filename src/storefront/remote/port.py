"""Remote database port (abstract interface).

The catalog and order collections live in a document database addressed by
slash-separated paths. Adapters raise ``RemoteCallError`` for every failure;
callers go through ``RemoteService``, which turns those into results.
"""

from abc import ABC, abstractmethod
from typing import Any


def normalise_path(path: str) -> str:
    """Strip surrounding slashes: ``"/menu/"`` and ``"menu"`` address the same node."""
    return path.strip().strip("/")


class RemoteDatabase(ABC):
    """Abstract document database reachable by path."""

    @abstractmethod
    async def get(self, path: str) -> Any | None:
        """Return the document at ``path``, or ``None`` if nothing is stored there."""
        ...

    @abstractmethod
    async def push(self, path: str, data: Any) -> str:
        """Append ``data`` as a new child of ``path`` and return the generated key."""
        ...

    async def aclose(self) -> None:
        """Release any connections held by the adapter."""
        return None
