"""Menu catalog: loads and seeds the menu through the remote service."""

from __future__ import annotations

import structlog
from protean.exceptions import ValidationError

from storefront.catalog.menu import DEMO_MENU, MenuItem
from storefront.config import MENU_PATH
from storefront.remote.service import RemoteResult, RemoteService

logger = structlog.get_logger(__name__)


class MenuCatalog:
    def __init__(self, remote: RemoteService, path: str = MENU_PATH) -> None:
        self.remote = remote
        self.path = path

    async def load_menu(self) -> RemoteResult:
        """Fetch the menu as a list of ``MenuItem``.

        Records that do not form a valid menu item are skipped.
        """
        result = await self.remote.read_many(self.path)
        if not result.success:
            return result

        items = []
        for record in result.data:
            try:
                items.append(MenuItem.from_record(record["id"], record))
            except (ValidationError, ValueError) as exc:
                logger.warning("Skipping invalid menu record", record_id=record["id"], error=str(exc))
        return RemoteResult.ok(items)

    async def find(self, item_id: str) -> RemoteResult:
        result = await self.remote.read_one(self.path, item_id)
        if not result.success:
            return result
        if not isinstance(result.data, dict):
            return RemoteResult.failed(f"Menu item {item_id} is malformed")
        try:
            return RemoteResult.ok(MenuItem.from_record(item_id, result.data))
        except (ValidationError, ValueError) as exc:
            return RemoteResult.failed(f"Menu item {item_id} is invalid: {exc}")

    async def seed(self, records: list[dict] | None = None) -> RemoteResult:
        """Publish ``records`` (the demo menu by default) to the menu path."""
        return await self.remote.create_many(self.path, list(records if records is not None else DEMO_MENU))
