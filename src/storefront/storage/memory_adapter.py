"""In-memory durable store for tests and ephemeral sessions.

Values are kept as serialised JSON text, so anything that would not survive
a real write fails here too.
"""

import json
from typing import Any

from storefront.exceptions import StorageError
from storefront.storage.port import DurableStore


class MemoryStore(DurableStore):
    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.writes: list[str] = []

    def read(self, key: str) -> Any | None:
        raw = self.data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def write(self, key: str, value: Any) -> None:
        try:
            self.data[key] = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Value for {key!r} is not JSON serialisable: {exc}") from exc
        self.writes.append(key)

    def delete(self, key: str) -> None:
        self.data.pop(key, None)
