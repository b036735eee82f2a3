"""Seed the items collection with sample inventory.

Usage (PowerShell):
  $env:MONGODB_URI = 'mongodb://localhost:27017'
  $env:MONGODB_DB = 'inventory'
  ./.venv/Scripts/python scripts/seed_items.py --drop

Options:
  --drop            delete every existing item first
  --skip-existing   skip samples whose name is already stored
"""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pymongo import MongoClient

from inventory_api.repositories.item_repository import ItemRepository, MongoItemRepository
from inventory_api.schemas.item import ItemSchema
from inventory_api.services.item_service import ItemService


logger = logging.getLogger(__name__)

SAMPLE_ITEMS: list[dict[str, Any]] = [
    {
        "name": "Bolsa de basura perfumada c. cierre 30 l. EROSKI, paquete 20 uds",
        "type": "Limpieza",
        "price": 1.80,
        "amount": 18000,
    },
    {
        "name": "Limpiador ph neutro DON LIMPIO, garrafa 1,3 litros",
        "type": "Limpieza",
        "price": 2.95,
        "amount": 1000,
    },
    {
        "name": "Quitagrasas maxi KH-7, pistola 900 ml",
        "type": "Limpieza",
        "price": 3.89,
        "amount": 7897,
    },
    {
        "name": "Croquetas de cocido-jamón serrano LA COCINERA, bolsa 500 g",
        "type": "Congelados",
        "price": 4.55,
        "amount": 791,
    },
    {
        "name": "Hamburguesa",
        "type": "Alimentación",
        "price": 2.55,
        "amount": 5621,
    },
]


def seed(
    repository: ItemRepository,
    items: Iterable[Mapping[str, Any]] = SAMPLE_ITEMS,
    *,
    drop: bool = False,
    skip_existing: bool = False,
) -> list[str]:
    """Insert ``items`` and return the new ids.

    Each sample goes through the same schema as the API, so bad samples fail
    loudly with a marshmallow ValidationError.
    """

    service = ItemService(repository)
    if drop:
        result = service.delete_all_items()
        logger.info("Dropped %s existing items", result.deleted)

    existing = {item.name for item in service.list_items()} if skip_existing else set()
    schema = ItemSchema()

    created: list[str] = []
    for raw in items:
        data = schema.load(dict(raw))
        if data["name"] in existing:
            logger.info("Skipping existing item %r", data["name"])
            continue
        created.append(service.create_item(data).id)
    return created


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the items collection with sample inventory")
    parser.add_argument("--mongo-uri", dest="mongo_uri", type=str, default=None)
    parser.add_argument("--mongo-db", dest="mongo_db", type=str, default=None)
    parser.add_argument("--collection", dest="collection", type=str, default=None)
    parser.add_argument("--drop", action="store_true", help="Delete every existing item first")
    parser.add_argument("--skip-existing", action="store_true", help="Skip samples whose name already exists")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    mongo_uri = args.mongo_uri or os.getenv("MONGODB_URI") or "mongodb://localhost:27017"
    mongo_db = args.mongo_db or os.getenv("MONGODB_DB") or "inventory"
    collection = args.collection or os.getenv("ITEMS_COLLECTION") or "items"

    logger.info("MongoDB: %s (db=%s, collection=%s)", mongo_uri, mongo_db, collection)

    client = MongoClient(mongo_uri)
    try:
        repository = MongoItemRepository(client[mongo_db][collection])
        created = seed(repository, drop=args.drop, skip_existing=args.skip_existing)
    finally:
        client.close()

    logger.info("Seeded %s items", len(created))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
