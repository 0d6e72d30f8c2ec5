# ABOUTME: Read-only aggregation over a library: status counts and filtered views.
# ABOUTME: Nothing here is stored; every call rescans the library.

from dataclasses import dataclass, field

from booked.library.follows import FollowRegistry
from booked.library.store import LibraryStore
from booked.library.types import BookEntry, ReadingStats, ReadingStatus


@dataclass
class FollowedAccount:
    """A snapshot of one followed account's library."""

    account: str
    stats: ReadingStats
    currently_reading: list[str] = field(default_factory=list)


def compute_stats(books: list[BookEntry]) -> ReadingStats:
    """Count books by reading status.

    Each bucket is an explicit status match, so the buckets always sum to
    total_books.
    """
    counts = dict.fromkeys(ReadingStatus, 0)
    for book in books:
        counts[book.reading_status] += 1

    return ReadingStats(
        total_books=len(books),
        currently_reading=counts[ReadingStatus.READING],
        completed=counts[ReadingStatus.COMPLETED],
        to_read=counts[ReadingStatus.TO_READ],
        on_hold=counts[ReadingStatus.ON_HOLD],
        abandoned=counts[ReadingStatus.ABANDONED],
    )


def reading_stats(store: LibraryStore, owner: str) -> ReadingStats:
    """Status counts for an account's library (all zero if it has none)."""
    return compute_stats(store.get_collection(owner))


def currently_reading(store: LibraryStore, owner: str) -> list[BookEntry]:
    """Books the owner is reading right now, in library order."""
    return [
        book
        for book in store.get_collection(owner)
        if book.reading_status is ReadingStatus.READING
    ]


def followed_overview(
    store: LibraryStore, follows: FollowRegistry, caller: str
) -> list[FollowedAccount]:
    """Stats and in-progress titles for each account the caller follows.

    Accounts appear in follow order. Followed accounts with no library show
    zero counts.
    """
    overview = []
    for account in follows.list_followed(caller):
        books = store.get_collection(account)
        overview.append(
            FollowedAccount(
                account=account,
                stats=compute_stats(books),
                currently_reading=[
                    b.title for b in books if b.reading_status is ReadingStatus.READING
                ],
            )
        )
    return overview
