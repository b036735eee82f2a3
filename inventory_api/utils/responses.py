"""Helpers for consistent JSON responses and the user-facing messages."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify

RESPONSE_ERROR = "Ups... Something went wrong! 😟"
RESPONSE_HINT = "Check the item object => {name: STRING, type: STRING, price: NUMBER, amount: NUMBER}"
RESPONSE_NOT_FOUND = "Ups... This route doesn't exist 😯"
RESPONSE_ITEM_NOT_FOUND = "This item doesn't exist in the database 😅"
RESPONSE_INVALID_ITEM = "Invalid item format"
RESPONSE_CREATE_SUCCESS = "Successfully created 😄!"
RESPONSE_UPDATE_SUCCESS = "Successfully updated 🙂!"
RESPONSE_DELETE_SUCCESS = "Successfully deleted 😶‍🌫️!"


def ok(data: Any, status_code: int = 200) -> Response:
    """Success response."""

    return jsonify(data), status_code


def fail(
    message: str,
    status_code: int,
    *,
    hint: str | None = None,
    error: Any | None = None,
    **extra: Any,
) -> Response:
    """Error response.

    Always carries ``message``; ``hint`` and ``error`` only when given.
    """

    body: dict[str, Any] = {"message": message}
    if hint is not None:
        body["hint"] = hint
    if error is not None:
        body["error"] = error
    body.update(extra)
    return jsonify(body), status_code
