"""Configurable fake remote database for development and testing.

Keeps documents in a nested dictionary, the same tree shape the real
database exposes. It can be told to fail, and writes can be held open to
exercise callers while a call is still pending.
"""

import asyncio
import copy
from typing import Any
from uuid import uuid4

from storefront.exceptions import RemoteCallError
from storefront.remote.port import RemoteDatabase, normalise_path


class FakeDatabase(RemoteDatabase):
    """In-memory remote database."""

    def __init__(self, data: dict | None = None) -> None:
        self.data: dict = copy.deepcopy(data) if data else {}
        self.should_succeed: bool = True
        self.failure_reason: str = "Service unavailable"
        self.calls: list[dict] = []
        self._writes_open = asyncio.Event()
        self._writes_open.set()

    def configure(self, should_succeed: bool, failure_reason: str = "Service unavailable") -> None:
        """Configure database behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def hold_writes(self) -> None:
        """Make every ``push`` wait until ``release_writes`` is called."""
        self._writes_open.clear()

    def release_writes(self) -> None:
        self._writes_open.set()

    async def get(self, path: str) -> Any | None:
        self.calls.append({"method": "get", "path": path})
        if not self.should_succeed:
            raise RemoteCallError(self.failure_reason)

        node: Any = self.data
        for segment in self._segments(path):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return copy.deepcopy(node)

    async def push(self, path: str, data: Any) -> str:
        self.calls.append({"method": "push", "path": path, "data": data})
        await self._writes_open.wait()
        if not self.should_succeed:
            raise RemoteCallError(self.failure_reason)

        node = self.data
        for segment in self._segments(path):
            node = node.setdefault(segment, {})
        key = f"-fake{uuid4().hex[:16]}"
        node[key] = copy.deepcopy(data)
        return key

    @staticmethod
    def _segments(path: str) -> list[str]:
        normalised = normalise_path(path)
        return normalised.split("/") if normalised else []
