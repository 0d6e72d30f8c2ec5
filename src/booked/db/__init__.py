# ABOUTME: Public API for the Booked database layer.
# ABOUTME: Exports connection management, the state repository, and record mapping.

from booked.db.connection import DEFAULT_DB_PATH, open_library
from booked.db.mapping import dict_to_entry, entry_to_dict
from booked.db.repository import StateRepository

__all__ = [
    "DEFAULT_DB_PATH",
    "StateRepository",
    "dict_to_entry",
    "entry_to_dict",
    "open_library",
]
