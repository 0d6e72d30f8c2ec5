# ABOUTME: SQLite database connection management for the Booked library.
# ABOUTME: Opens or creates the database file and applies the schema.

import sqlite3
from pathlib import Path

from booked.db.schema import SCHEMA_V1

DEFAULT_DB_PATH = Path.home() / ".booked" / "library.db"


def open_library(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the Booked library database.

    Creates the database file and parent directories if they don't exist.
    Sets WAL journal mode and sqlite3.Row factory for dict-like column access.

    Args:
        path: Path to the database file. Defaults to ~/.booked/library.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.executescript(SCHEMA_V1)

    return conn
