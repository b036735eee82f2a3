"""Flask application package."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dotenv import load_dotenv
from flask import Flask

if TYPE_CHECKING:
    from inventory_api.repositories.item_repository import ItemRepository


def create_app(config_object: object | None = None, repository: ItemRepository | None = None) -> Flask:
    """Application factory.

    Args:
        config_object: Config class or object; defaults to the one picked by APP_ENV.
        repository: Item store to use instead of the configured backend.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from inventory_api.config import get_config
    from inventory_api.db import init_db
    from inventory_api.error_handlers import register_error_handlers
    from inventory_api.logging_config import configure_logging
    from inventory_api.routes.health import health_bp
    from inventory_api.routes.items import items_bp

    app = Flask(__name__)
    app.config.from_object(config_object or get_config())
    app.json.ensure_ascii = False  # type: ignore[attr-defined]

    configure_logging(app)
    init_db(app, repository)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(items_bp)

    return app
