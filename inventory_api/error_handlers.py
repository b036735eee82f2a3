"""Centralized error handlers."""

from __future__ import annotations

import logging

from flask import Flask, current_app, request
from marshmallow import ValidationError as MarshmallowValidationError
from werkzeug.exceptions import HTTPException

from inventory_api.errors import AppError, ValidationError
from inventory_api.utils.responses import RESPONSE_ERROR, RESPONSE_HINT, RESPONSE_NOT_FOUND, fail

logger = logging.getLogger(__name__)

# Endpoints that take an item body; their failures carry the shape hint.
_ITEM_BODY_ENDPOINTS = frozenset({"items.create_item", "items.update_item"})


def _hint() -> str | None:
    return RESPONSE_HINT if request.endpoint in _ITEM_BODY_ENDPOINTS else None


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        details = exc.details
        if exc.status_code >= 500 and not current_app.config.get("EXPOSE_ERROR_DETAILS", False):
            details = None
        return fail(exc.message, exc.status_code, hint=exc.hint or _hint(), error=details, **exc.extra)

    @app.errorhandler(MarshmallowValidationError)
    def _handle_schema_error(exc: MarshmallowValidationError):
        # exc.messages is a dict of field -> list[str]
        logger.info("Rejected item body: %s", exc.messages)
        wrapped = ValidationError(details=exc.messages)
        return fail(wrapped.message, wrapped.status_code, hint=RESPONSE_HINT, error=wrapped.details)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        status = int(getattr(exc, "code", 500) or 500)
        # Known path with an unsupported verb is still an unknown route.
        if status in (404, 405):
            return fail(RESPONSE_NOT_FOUND, 404)

        return fail(
            getattr(exc, "description", None) or RESPONSE_ERROR,
            status,
            error={"name": getattr(exc, "name", "HTTPException")},
        )

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        error = str(exc) if current_app.config.get("EXPOSE_ERROR_DETAILS", False) else None
        return fail(RESPONSE_ERROR, 500, hint=_hint(), error=error)
