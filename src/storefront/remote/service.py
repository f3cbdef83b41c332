"""Remote catalog/order service: the only way the storefront talks to the database.

Every call returns a ``RemoteResult``. Adapter failures are logged and turned
into failed results here, so nothing remote ever escapes as an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from storefront.exceptions import RemoteCallError
from storefront.remote.port import RemoteDatabase

logger = structlog.get_logger(__name__)

NO_DATA = "No data found at the specified path"


@dataclass(frozen=True)
class RemoteResult:
    """Outcome of a remote call."""

    success: bool
    data: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, data: Any = None) -> RemoteResult:
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> RemoteResult:
        return cls(success=False, error=error)


def _validate_arguments(*args) -> None:
    for arg in args:
        if not arg or not isinstance(arg, str):
            raise RemoteCallError("Invalid arguments provided")


class RemoteService:
    def __init__(self, database: RemoteDatabase) -> None:
        self.database = database

    async def read(self, path: str) -> RemoteResult:
        """Read the document at ``path``; an empty node is a failure."""
        try:
            _validate_arguments(path)
            data = await self.database.get(path)
        except RemoteCallError as exc:
            logger.error("Remote read failed", path=path, error=str(exc))
            return RemoteResult.failed(str(exc))
        if data is None:
            return RemoteResult.failed(NO_DATA)
        return RemoteResult.ok(data)

    async def read_many(self, path: str) -> RemoteResult:
        """Read a collection as a list of records, each carrying its key as ``id``."""
        result = await self.read(path)
        if not result.success:
            return result
        if not isinstance(result.data, dict):
            return RemoteResult.failed(f"Expected a collection at {path}")
        records = [
            {**value, "id": key} if isinstance(value, dict) else {"id": key, "value": value}
            for key, value in result.data.items()
        ]
        return RemoteResult.ok(records)

    async def read_one(self, path: str, record_id: str) -> RemoteResult:
        try:
            _validate_arguments(path, record_id)
        except RemoteCallError as exc:
            return RemoteResult.failed(str(exc))
        return await self.read(f"{path.rstrip('/')}/{record_id}")

    async def create(self, path: str, record: dict) -> RemoteResult:
        """Append ``record`` under ``path``; the result carries ``{"id": key}``."""
        try:
            _validate_arguments(path)
            key = await self.database.push(path, record)
        except RemoteCallError as exc:
            logger.error("Remote create failed", path=path, error=str(exc))
            return RemoteResult.failed(str(exc))
        logger.info("Remote record created", path=path, record_id=key)
        return RemoteResult.ok({"id": key})

    async def create_many(self, path: str, records: list[dict]) -> RemoteResult:
        """Append each record in turn; stops at the first failure."""
        if not isinstance(records, list):
            return RemoteResult.failed("Data must be a list")
        keys = []
        for record in records:
            result = await self.create(path, record)
            if not result.success:
                return RemoteResult(success=False, data=keys, error=result.error)
            keys.append(result.data["id"])
        return RemoteResult.ok(keys)

    async def aclose(self) -> None:
        await self.database.aclose()
