"""Service layer for item business logic."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from inventory_api.errors import BulkDeleteError, NotFoundError, StorageError
from inventory_api.repositories.item_repository import ITEM_FIELDS, ItemRecord, ItemRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BulkDeleteResult:
    deleted: int
    failed: int


class ItemService:
    """Item use-cases."""

    def __init__(self, repository: ItemRepository) -> None:
        self._repo = repository

    def list_items(self) -> Sequence[ItemRecord]:
        return self._repo.list_items()

    def resolve_existing(self, item_id: str) -> ItemRecord:
        """Return the stored item or raise :class:`NotFoundError`."""

        item = self._repo.get_by_id(item_id)
        if item is None:
            logger.info("Item %s not found", item_id)
            raise NotFoundError(item_id)
        return item

    def get_item(self, item_id: str) -> ItemRecord:
        return self.resolve_existing(item_id)

    def create_item(self, data: Mapping[str, Any]) -> ItemRecord:
        item = self._repo.create(data)
        logger.info("Created item %s", item.id)
        return item

    def update_item(self, item_id: str, data: Mapping[str, Any]) -> ItemRecord:
        self.resolve_existing(item_id)
        # The item can vanish between the lookup and the write.
        if not self._repo.replace(item_id, data):
            raise NotFoundError(item_id)
        logger.info("Updated item %s", item_id)
        return ItemRecord(id=item_id, **{key: data[key] for key in ITEM_FIELDS})

    def delete_item(self, item_id: str) -> None:
        self.resolve_existing(item_id)
        if not self._repo.delete(item_id):
            raise NotFoundError(item_id)
        logger.info("Deleted item %s", item_id)

    def delete_all_items(self) -> BulkDeleteResult:
        """Delete every item, one by one, and report how many failed.

        Raises :class:`BulkDeleteError` when at least one deletion failed.
        Ids already gone by the time they are deleted count as deleted.
        """

        ids = self._repo.list_ids()
        deleted = 0
        failed = 0
        for item_id in ids:
            try:
                self._repo.delete(item_id)
            except StorageError:
                failed += 1
                continue
            deleted += 1

        if failed:
            logger.warning("Bulk delete: %d deleted, %d failed", deleted, failed)
            raise BulkDeleteError(deleted=deleted, failed=failed)

        logger.info("Bulk delete: %d deleted", deleted)
        return BulkDeleteResult(deleted=deleted, failed=0)
