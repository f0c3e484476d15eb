from __future__ import annotations

from figwind.store.db import Database

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL DEFAULT ''
);
"""


def run_migrations(db: Database) -> None:
    """Create all tables."""
    db.connection.executescript(SCHEMA)
    db.commit()
