"""JSON-file durable store: one directory per origin, one file per key.

Writes go to a temporary file that is then renamed over the target, so a
crash mid-write never leaves a truncated document behind.
"""

import json
import os
import re
import tempfile
from pathlib import Path
from typing import Any

import structlog

from storefront.exceptions import StorageError
from storefront.storage.port import DurableStore

logger = structlog.get_logger(__name__)

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]")


def _safe_name(value: str) -> str:
    return _UNSAFE.sub("_", value) or "_"


class JsonFileStore(DurableStore):
    def __init__(self, root: str | os.PathLike, origin: str = "default") -> None:
        self.directory = Path(root) / _safe_name(origin)

    def _path_for(self, key: str) -> Path:
        return self.directory / f"{_safe_name(key)}.json"

    def read(self, key: str) -> Any | None:
        path = self._path_for(key)
        try:
            with path.open(encoding="utf-8") as fh:
                return json.load(fh)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            raise StorageError(f"Could not read {key!r} from {path}: {exc}") from exc

    def write(self, key: str, value: Any) -> None:
        path = self._path_for(key)
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Value for {key!r} is not JSON serialisable: {exc}") from exc

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Could not write {key!r} to {path}: {exc}") from exc

        logger.debug("Stored value", key=key, path=str(path))

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not delete {key!r} at {path}: {exc}") from exc
