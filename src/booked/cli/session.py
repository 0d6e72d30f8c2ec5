# ABOUTME: Opens the library database for one CLI command and persists the result.
# ABOUTME: State is saved only when the command body finishes without raising.

import sqlite3
from collections.abc import Iterator
from contextlib import closing, contextmanager
from dataclasses import dataclass
from pathlib import Path

from booked.db.connection import DEFAULT_DB_PATH, open_library
from booked.db.repository import StateRepository
from booked.library.follows import FollowRegistry
from booked.library.store import LibraryStore


@dataclass
class Session:
    """Loaded state for a single command invocation."""

    store: LibraryStore
    follows: FollowRegistry


@contextmanager
def open_session(db_path: Path | None, *, persist: bool = True) -> Iterator[Session]:
    """Load the store and follow registry, yield them, then save on success.

    If the body raises, nothing is written and the exception propagates.
    Read-only commands pass persist=False.
    """
    conn: sqlite3.Connection = open_library(db_path or DEFAULT_DB_PATH)
    with closing(conn):
        repo = StateRepository(conn)
        session = Session(store=repo.load_store(), follows=repo.load_follows())
        yield session
        if persist:
            repo.save(session.store, session.follows)
