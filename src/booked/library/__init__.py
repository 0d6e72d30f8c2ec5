# ABOUTME: Public API for the Booked library store.
# ABOUTME: Exports the store, follow registry, aggregation helpers, types, and errors.

from booked.library.errors import (
    CollectionNotFoundError,
    DuplicateKeyError,
    InvalidChapterError,
    LibraryError,
    NoFollowListError,
    RecordNotFoundError,
    SelfFollowError,
)
from booked.library.follows import FollowRegistry
from booked.library.stats import (
    FollowedAccount,
    compute_stats,
    currently_reading,
    followed_overview,
    reading_stats,
)
from booked.library.store import LibraryStore
from booked.library.types import BookEntry, ProgressUpdate, ReadingStats, ReadingStatus

__all__ = [
    "BookEntry",
    "CollectionNotFoundError",
    "DuplicateKeyError",
    "FollowRegistry",
    "FollowedAccount",
    "InvalidChapterError",
    "LibraryError",
    "LibraryStore",
    "NoFollowListError",
    "ProgressUpdate",
    "ReadingStats",
    "ReadingStatus",
    "RecordNotFoundError",
    "SelfFollowError",
    "compute_stats",
    "currently_reading",
    "followed_overview",
    "reading_stats",
]
