from __future__ import annotations

import logging
import os

from flask import Flask, jsonify

from . import extensions as ext
from .config import config_by_name
from .errors import register_error_handlers
from .storage import DatabaseStorage, Storage, init_storage


def create_app(
    config_name: str | dict | None = None, storage: Storage | None = None
) -> Flask:
    """Create and configure the Flask application (factory).

    ``config_name`` selects one of config_by_name; a dict is applied on top of
    the development config instead. ``storage`` replaces the SQL-backed store
    (tests pass an InMemoryStorage).
    """
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")

    app = Flask(__name__)

    # Load configuration (fall back to dict-style config_name)
    if isinstance(config_name, dict):
        app.config.from_object(config_by_name["development"])
        app.config.update(config_name)
    else:
        app.config.from_object(config_by_name[config_name])

    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    ext.init_extensions(app)
    init_storage(app, storage if storage is not None else DatabaseStorage(ext.db))
    register_error_handlers(app)

    from .blueprints.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy"})

    bootstrap(app)
    return app


def bootstrap(app: Flask) -> None:
    """One-time start-up work: create tables and seed an empty store.

    Runs inside create_app, never from request handling.
    """
    if not (
        app.config.get("CREATE_TABLES_ON_STARTUP") or app.config.get("SEED_ON_STARTUP")
    ):
        return

    from .seed import seed_database
    from .storage import get_storage

    with app.app_context():
        if app.config.get("CREATE_TABLES_ON_STARTUP"):
            ext.db.create_all()
            app.logger.debug("create_all complete")
        if app.config.get("SEED_ON_STARTUP"):
            try:
                seed_database(get_storage())
            except Exception:
                # seed errors are logged; startup continues
                app.logger.exception("Seeding failed")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Process-wide logging for scripts and the dev server."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
