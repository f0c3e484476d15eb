from __future__ import annotations

import pytest

from figwind.store.db import Database
from figwind.store.migrations import run_migrations
from figwind.web.app import create_app


@pytest.fixture
def db():
    """Create a fresh in-memory database with migrations for each test."""
    database = Database(":memory:")
    database.connect()
    run_migrations(database)
    yield database
    database.close()


@pytest.fixture
def app(db):
    """Create a Flask app for testing."""
    application = create_app(db=db)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
