"""Item routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from inventory_api.db import get_item_service
from inventory_api.schemas.item import ItemSchema, ItemWithIdSchema
from inventory_api.utils.responses import (
    RESPONSE_CREATE_SUCCESS,
    RESPONSE_DELETE_SUCCESS,
    RESPONSE_UPDATE_SUCCESS,
    ok,
)

items_bp = Blueprint("items", __name__)

_item_schema = ItemSchema()
_items_schema = ItemWithIdSchema(many=True)


def _load_item_body() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    return _item_schema.load(payload)


@items_bp.get("/getItems")
def list_items():
    """List all items, ids included."""

    items = get_item_service().list_items()
    return ok(_items_schema.dump(items))


@items_bp.get("/getItem/<item_id>")
def get_item(item_id: str):
    """Get a single item's fields by id."""

    item = get_item_service().get_item(item_id)
    return ok(_item_schema.dump(item))


@items_bp.post("/createItem")
def create_item():
    """Create an item; the store assigns its id."""

    data = _load_item_body()
    item = get_item_service().create_item(data)
    return ok({"message": RESPONSE_CREATE_SUCCESS, "id": item.id})


@items_bp.put("/updateItem/<item_id>")
def update_item(item_id: str):
    """Fully replace an item. The body is validated before the id is looked up."""

    data = _load_item_body()
    item = get_item_service().update_item(item_id, data)
    return ok(
        {
            "message": RESPONSE_UPDATE_SUCCESS,
            "id": item.id,
            "item": _item_schema.dump(item),
        }
    )


@items_bp.delete("/deleteItem/<item_id>")
def delete_item(item_id: str):
    """Delete one item by id."""

    get_item_service().delete_item(item_id)
    return ok({"message": RESPONSE_DELETE_SUCCESS, "id": item_id})


@items_bp.delete("/deleteAllItems")
def delete_all_items():
    """Delete every item; responds once all deletions have finished."""

    result = get_item_service().delete_all_items()
    return ok({"message": RESPONSE_DELETE_SUCCESS, "deleted": result.deleted, "failed": result.failed})
