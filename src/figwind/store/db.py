from __future__ import annotations

import sqlite3


class Database:
    """SQLite connection holding figwind's key/value settings."""

    def __init__(self, path: str = ":memory:") -> None:
        self._path = path
        self._conn: sqlite3.Connection | None = None

    def connect(self) -> None:
        """Open connection and enable WAL mode."""
        self._conn = sqlite3.connect(self._path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        assert self._conn is not None, "Database not connected"
        return self._conn.execute(sql, params)

    def fetch_one(self, sql: str, params: tuple = ()) -> sqlite3.Row | None:
        return self.execute(sql, params).fetchone()

    def commit(self) -> None:
        assert self._conn is not None, "Database not connected"
        self._conn.commit()

    @property
    def connection(self) -> sqlite3.Connection:
        assert self._conn is not None, "Database not connected"
        return self._conn

    # --- kv_store -------------------------------------------------------

    def get_value(self, key: str) -> str | None:
        """Return the raw text stored under *key*, or None."""
        row = self.fetch_one("SELECT value FROM kv_store WHERE key = ?", (key,))
        return None if row is None else row["value"]

    def put_value(self, key: str, value: str) -> None:
        """Insert or replace the text under *key* and commit."""
        self.execute(
            """INSERT INTO kv_store (key, value) VALUES (?, ?)
               ON CONFLICT(key) DO UPDATE SET value = excluded.value""",
            (key, value),
        )
        self.commit()

    def __enter__(self) -> Database:
        self.connect()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
