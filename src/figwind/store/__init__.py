from __future__ import annotations

from figwind.store.db import Database
from figwind.store.dictionary import DEFAULT_STORAGE_KEY, DictionaryStore
from figwind.store.migrations import run_migrations

__all__ = [
    "Database",
    "run_migrations",
    "DictionaryStore",
    "DEFAULT_STORAGE_KEY",
]
