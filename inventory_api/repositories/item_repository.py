"""Repository layer for Item persistence."""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from inventory_api.errors import StorageError

logger = logging.getLogger(__name__)

ITEM_FIELDS = ("name", "type", "price", "amount")


@dataclass(frozen=True)
class ItemRecord:
    id: str
    name: str
    type: str
    price: float
    amount: int


class ItemRepository(Protocol):
    """Storage contract the item service relies on.

    ``get_by_id`` returns None for ids that do not resolve (malformed ones
    included); ``replace`` and ``delete`` return False in the same case.
    Transport failures raise :class:`StorageError`.
    """

    def list_items(self) -> Sequence[ItemRecord]: ...

    def list_ids(self) -> Sequence[str]: ...

    def get_by_id(self, item_id: str) -> ItemRecord | None: ...

    def create(self, data: Mapping[str, Any]) -> ItemRecord: ...

    def replace(self, item_id: str, data: Mapping[str, Any]) -> bool: ...

    def delete(self, item_id: str) -> bool: ...


def _to_record(item_id: str, doc: Mapping[str, Any]) -> ItemRecord:
    return ItemRecord(
        id=str(item_id),
        name=str(doc.get("name")),
        type=str(doc.get("type")),
        price=float(doc.get("price") or 0.0),
        amount=int(doc.get("amount") or 0),
    )


def _fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {key: data[key] for key in ITEM_FIELDS}


def _object_id(item_id: str) -> ObjectId | None:
    try:
        return ObjectId(item_id)
    except (InvalidId, TypeError):
        return None


class MongoItemRepository:
    """CRUD operations for Item on a MongoDB collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def list_items(self) -> Sequence[ItemRecord]:
        try:
            return [_to_record(d["_id"], d) for d in self._collection.find({})]
        except PyMongoError as exc:
            logger.exception("Failed to list items")
            raise StorageError(details=str(exc)) from exc

    def list_ids(self) -> Sequence[str]:
        try:
            return [str(d["_id"]) for d in self._collection.find({}, {"_id": 1})]
        except PyMongoError as exc:
            logger.exception("Failed to enumerate item ids")
            raise StorageError(details=str(exc)) from exc

    def get_by_id(self, item_id: str) -> ItemRecord | None:
        oid = _object_id(item_id)
        if oid is None:
            return None
        try:
            doc = self._collection.find_one({"_id": oid})
        except PyMongoError as exc:
            logger.exception("Failed to fetch item %s", item_id)
            raise StorageError(details=str(exc)) from exc
        if not doc:
            return None
        return _to_record(doc["_id"], doc)

    def create(self, data: Mapping[str, Any]) -> ItemRecord:
        doc = _fields(data)
        try:
            result = self._collection.insert_one(doc)
        except PyMongoError as exc:
            logger.exception("Failed to create item")
            raise StorageError(details=str(exc)) from exc
        return _to_record(result.inserted_id, doc)

    def replace(self, item_id: str, data: Mapping[str, Any]) -> bool:
        oid = _object_id(item_id)
        if oid is None:
            return False
        try:
            result = self._collection.replace_one({"_id": oid}, _fields(data))
        except PyMongoError as exc:
            logger.exception("Failed to update item %s", item_id)
            raise StorageError(details=str(exc)) from exc
        return result.matched_count > 0

    def delete(self, item_id: str) -> bool:
        oid = _object_id(item_id)
        if oid is None:
            return False
        try:
            result = self._collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            logger.exception("Failed to delete item %s", item_id)
            raise StorageError(details=str(exc)) from exc
        return result.deleted_count > 0


class InMemoryItemRepository:
    """Dict-backed store used by tests and ``STORE_BACKEND=memory``."""

    def __init__(self) -> None:
        self._docs: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def list_items(self) -> Sequence[ItemRecord]:
        with self._lock:
            return [_to_record(item_id, doc) for item_id, doc in self._docs.items()]

    def list_ids(self) -> Sequence[str]:
        with self._lock:
            return list(self._docs)

    def get_by_id(self, item_id: str) -> ItemRecord | None:
        with self._lock:
            doc = self._docs.get(item_id)
        if doc is None:
            return None
        return _to_record(item_id, doc)

    def create(self, data: Mapping[str, Any]) -> ItemRecord:
        doc = _fields(data)
        with self._lock:
            item_id = uuid.uuid4().hex
            self._docs[item_id] = doc
        return _to_record(item_id, doc)

    def replace(self, item_id: str, data: Mapping[str, Any]) -> bool:
        with self._lock:
            if item_id not in self._docs:
                return False
            self._docs[item_id] = _fields(data)
        return True

    def delete(self, item_id: str) -> bool:
        with self._lock:
            return self._docs.pop(item_id, None) is not None
