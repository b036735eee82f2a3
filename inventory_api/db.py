"""MongoDB client and item repository wiring.

The client is created once per process and shared by every request.
"""

from __future__ import annotations

import logging

from flask import Flask, current_app
from pymongo import MongoClient

from inventory_api.repositories.item_repository import (
    InMemoryItemRepository,
    ItemRepository,
    MongoItemRepository,
)
from inventory_api.services.item_service import ItemService

logger = logging.getLogger(__name__)


def create_mongo_client(uri: str, timeout_ms: int) -> MongoClient:
    # MongoClient connects lazily; the first operation surfaces failures.
    return MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)


def _build_repository(app: Flask) -> ItemRepository:
    backend = str(app.config.get("STORE_BACKEND", "mongo")).lower().strip()
    if backend == "memory":
        logger.info("Using in-memory item store")
        return InMemoryItemRepository()
    if backend != "mongo":
        raise RuntimeError(f"Unknown STORE_BACKEND: {backend!r}")

    client = create_mongo_client(
        str(app.config["MONGODB_URI"]),
        int(app.config["MONGODB_TIMEOUT_MS"]),
    )
    app.extensions["mongo_client"] = client
    db_name = str(app.config["MONGODB_DB"])
    collection_name = str(app.config["ITEMS_COLLECTION"])
    logger.info("Using MongoDB collection %s.%s", db_name, collection_name)
    return MongoItemRepository(client[db_name][collection_name])


def init_db(app: Flask, repository: ItemRepository | None = None) -> None:
    """Register the item repository and service on the app.

    Passing ``repository`` skips the configured backend.
    """

    if repository is None:
        repository = _build_repository(app)

    app.extensions["item_repository"] = repository
    app.extensions["item_service"] = ItemService(repository)


def get_item_service() -> ItemService:
    """Get the app's item service."""

    service: ItemService | None = current_app.extensions.get("item_service")
    if service is None:
        raise RuntimeError("Item store not initialized")
    return service
