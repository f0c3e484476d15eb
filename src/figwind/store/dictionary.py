"""Persistent CSS-variable to Tailwind dictionary."""
from __future__ import annotations

import json
import logging
import sqlite3
from typing import Mapping

from figwind.errors import DictionaryError
from figwind.store.db import Database

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "figma-tailwind-var-dict"


class DictionaryStore:
    """Mapping of CSS custom-property names (``--Heading-Font``) to Tailwind values.

    The whole mapping is stored as one JSON object under ``storage_key`` in
    the ``kv_store`` table and rewritten after every mutation. Loading never
    fails: missing or malformed data yields an empty dictionary. Failed
    writes are logged and otherwise ignored.

    Passing ``db=None`` gives a purely in-memory store.
    """

    def __init__(
        self,
        db: Database | None = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._db = db
        self._key = storage_key
        self._entries: dict[str, str] = {}
        self.load()

    # --- persistence ----------------------------------------------------

    def load(self) -> None:
        """(Re)load the mapping from the database."""
        self._entries = self._read()

    def _read(self) -> dict[str, str]:
        if self._db is None:
            return {}
        try:
            raw = self._db.get_value(self._key)
        except sqlite3.Error as exc:
            logger.warning("Could not read variable dictionary: %s", exc)
            return {}
        if raw is None:
            return {}
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed variable dictionary under %r", self._key)
            return {}
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            logger.warning("Ignoring malformed variable dictionary under %r", self._key)
            return {}
        return data

    def save(self) -> None:
        """Serialize and persist the full mapping."""
        if self._db is None:
            return
        payload = json.dumps(self._entries)
        try:
            self._db.put_value(self._key, payload)
        except sqlite3.Error as exc:
            logger.warning("Could not persist variable dictionary: %s", exc)

    # --- mapping API ----------------------------------------------------

    def get(self, name: str) -> str | None:
        """Return the Tailwind value for *name*, or None."""
        return self._entries.get(name)

    def set(self, name: str, value: str) -> None:
        """Add or replace an entry. Blank names or values are rejected."""
        name = name.strip()
        value = value.strip()
        if not name or not value:
            raise DictionaryError(
                "variable name and value must both be non-blank",
                name=name,
                value=value,
            )
        self._entries[name] = value
        logger.debug("Dictionary set %s -> %s", name, value)
        self.save()

    def remove(self, name: str) -> bool:
        """Remove *name*. Returns False (and writes nothing) if absent."""
        if name not in self._entries:
            return False
        del self._entries[name]
        logger.debug("Dictionary removed %s", name)
        self.save()
        return True

    def update(self, mapping: Mapping[str, str]) -> int:
        """Bulk upsert; blank or non-string entries are skipped. Returns the count added."""
        added = 0
        for name, value in mapping.items():
            if not isinstance(name, str) or not isinstance(value, str):
                logger.warning("Skipping non-string dictionary entry %r", name)
                continue
            if not name.strip() or not value.strip():
                logger.warning("Skipping blank dictionary entry %r", name)
                continue
            self._entries[name.strip()] = value.strip()
            added += 1
        if added:
            self.save()
        return added

    def all(self) -> dict[str, str]:
        """Return a copy of the whole mapping."""
        return dict(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
