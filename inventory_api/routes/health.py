"""Liveness route. Does not touch the item store."""

from __future__ import annotations

from flask import Blueprint, current_app

from inventory_api.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    return ok({"status": "ok", "store": current_app.config.get("STORE_BACKEND")})
