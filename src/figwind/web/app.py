from __future__ import annotations

from flask import Flask

from figwind.config import FigwindConfig
from figwind.store.db import Database
from figwind.store.dictionary import DictionaryStore
from figwind.store.migrations import run_migrations


def create_app(
    db: Database | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})
    settings: FigwindConfig = app.config.setdefault("FIGWIND", FigwindConfig())

    if db is None:
        db = Database(":memory:")
        db.connect()
        run_migrations(db)

    app.extensions["db"] = db
    app.extensions["dictionary"] = DictionaryStore(db, storage_key=settings.storage_key)

    from figwind.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
