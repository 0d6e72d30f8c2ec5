# ABOUTME: Loads and persists the library and follow registries in SQLite.
# ABOUTME: Each registry is stored whole as one JSON blob in the state table.

import json
import logging
import sqlite3
from collections.abc import Callable
from typing import Any

from booked.db.mapping import dict_to_entry, entry_to_dict
from booked.library.follows import FollowRegistry
from booked.library.store import LibraryStore

logger = logging.getLogger(__name__)

LIBRARIES_KEY = "libraries"
FOLLOWS_KEY = "follows"


class StateRepository:
    """Wraps a sqlite3 connection and reads/writes the registry blobs."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def _read(self, name: str) -> Any:
        cursor = self._conn.execute("SELECT payload FROM state WHERE name = ?", (name,))
        row = cursor.fetchone()
        return json.loads(row["payload"]) if row else None

    def _write(self, name: str, payload: Any) -> None:
        self._conn.execute(
            "INSERT INTO state (name, payload) VALUES (?, ?) "
            "ON CONFLICT(name) DO UPDATE SET payload = excluded.payload, "
            "date_modified = strftime('%Y-%m-%dT%H:%M:%S', 'now')",
            (name, json.dumps(payload)),
        )

    @staticmethod
    def _libraries_payload(store: LibraryStore) -> dict[str, Any]:
        return {
            owner: [entry_to_dict(book) for book in books]
            for owner, books in store.libraries.items()
        }

    def load_store(self, clock: Callable[[], str] | None = None) -> LibraryStore:
        """Build a LibraryStore from the persisted libraries (empty if none)."""
        raw = self._read(LIBRARIES_KEY) or {}
        libraries = {
            owner: [dict_to_entry(item) for item in books] for owner, books in raw.items()
        }
        logger.debug("Loaded %d libraries", len(libraries))
        return LibraryStore(libraries, clock=clock)

    def save_store(self, store: LibraryStore) -> None:
        """Persist every library held by the store."""
        with self._conn:
            self._write(LIBRARIES_KEY, self._libraries_payload(store))
        logger.debug("Saved %d libraries", len(store.libraries))

    def load_follows(self) -> FollowRegistry:
        """Build a FollowRegistry from the persisted follow lists (empty if none)."""
        raw = self._read(FOLLOWS_KEY) or {}
        return FollowRegistry({owner: list(followed) for owner, followed in raw.items()})

    def save_follows(self, registry: FollowRegistry) -> None:
        """Persist every follow list held by the registry."""
        with self._conn:
            self._write(FOLLOWS_KEY, registry.follows)
        logger.debug("Saved follow lists for %d accounts", len(registry.follows))

    def save(self, store: LibraryStore, registry: FollowRegistry) -> None:
        """Persist both registries in one transaction.

        If either write fails, neither is kept.
        """
        with self._conn:
            self._write(LIBRARIES_KEY, self._libraries_payload(store))
            self._write(FOLLOWS_KEY, registry.follows)
        logger.debug(
            "Saved %d libraries and %d follow lists", len(store.libraries), len(registry.follows)
        )
