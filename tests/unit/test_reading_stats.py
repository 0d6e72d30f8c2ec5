# ABOUTME: Unit tests for library aggregation: status counts and filtered views.
# ABOUTME: Validates reading_stats accounting, currently_reading order, and followed_overview.

from booked.library.follows import FollowRegistry
from booked.library.stats import (
    compute_stats,
    currently_reading,
    followed_overview,
    reading_stats,
)
from booked.library.store import LibraryStore
from booked.library.types import ReadingStats, ReadingStatus
from tests.fixtures.books import (
    ALICE,
    BOB,
    CAROL,
    ISBN_1984,
    ISBN_GATSBY,
    ISBN_MOCKINGBIRD,
    make_book,
)


def _add_classics(store: LibraryStore, owner: str) -> None:
    store.create_record(owner, make_book(ISBN_1984, "1984", ReadingStatus.READING))
    store.create_record(
        owner, make_book(ISBN_MOCKINGBIRD, "To Kill a Mockingbird", ReadingStatus.COMPLETED)
    )
    store.create_record(owner, make_book(ISBN_GATSBY, "The Great Gatsby", ReadingStatus.TO_READ))


class TestReadingStats:
    """Tests for reading_stats."""

    def test_one_of_each(self, store: LibraryStore) -> None:
        """Reading, completed, and to-read books are counted once each."""
        _add_classics(store, ALICE)
        assert reading_stats(store, ALICE) == ReadingStats(
            total_books=3, currently_reading=1, completed=1, to_read=1, on_hold=0, abandoned=0
        )

    def test_unknown_owner_is_all_zero(self, store: LibraryStore) -> None:
        """An owner with no library gets zero counts."""
        assert reading_stats(store, ALICE) == ReadingStats()

    def test_abandoned_counted_separately(self, store: LibraryStore) -> None:
        """Abandoned books have their own bucket and stay in the total."""
        _add_classics(store, ALICE)
        store.create_record(ALICE, make_book("isbn-hold", "Ulysses", ReadingStatus.ON_HOLD))
        store.create_record(ALICE, make_book("isbn-quit", "Moby Dick", ReadingStatus.ABANDONED))

        stats = reading_stats(store, ALICE)

        assert stats.total_books == 5
        assert stats.on_hold == 1
        assert stats.abandoned == 1
        assert stats.not_active == 2

    def test_buckets_sum_to_total(self, store: LibraryStore) -> None:
        """Every book lands in exactly one bucket."""
        for i, status in enumerate(ReadingStatus):
            store.create_record(ALICE, make_book(f"isbn-{i}", f"Book {i}", status))
        stats = reading_stats(store, ALICE)
        assert stats.total_books == 5
        assert (
            stats.currently_reading + stats.completed + stats.to_read
            + stats.on_hold + stats.abandoned
        ) == stats.total_books

    def test_compute_stats_on_plain_list(self) -> None:
        """compute_stats works on any list of books."""
        books = [make_book(status=ReadingStatus.READING), make_book(status=ReadingStatus.READING)]
        assert compute_stats(books).currently_reading == 2


class TestCurrentlyReading:
    """Tests for currently_reading."""

    def test_filters_to_reading(self, store: LibraryStore) -> None:
        """Only Reading books are returned."""
        _add_classics(store, ALICE)
        books = currently_reading(store, ALICE)
        assert [b.title for b in books] == ["1984"]

    def test_preserves_library_order(self, store: LibraryStore) -> None:
        """Results follow library order."""
        store.create_record(ALICE, make_book(ISBN_GATSBY, "The Great Gatsby", ReadingStatus.READING))
        store.create_record(ALICE, make_book(ISBN_1984, "1984", ReadingStatus.COMPLETED))
        store.create_record(
            ALICE, make_book(ISBN_MOCKINGBIRD, "To Kill a Mockingbird", ReadingStatus.READING)
        )
        titles = [b.title for b in currently_reading(store, ALICE)]
        assert titles == ["The Great Gatsby", "To Kill a Mockingbird"]

    def test_follows_start_reading(self, store: LibraryStore) -> None:
        """A book shows up once reading starts."""
        store.create_record(ALICE, make_book())
        assert currently_reading(store, ALICE) == []
        store.start_reading(ALICE, ISBN_1984)
        assert len(currently_reading(store, ALICE)) == 1

    def test_unknown_owner_is_empty(self, store: LibraryStore) -> None:
        """No library means nothing in progress."""
        assert currently_reading(store, ALICE) == []


class TestFollowedOverview:
    """Tests for followed_overview."""

    def test_snapshot_per_followed_account(
        self, store: LibraryStore, follows: FollowRegistry
    ) -> None:
        """Each followed account gets stats and in-progress titles, in follow order."""
        _add_classics(store, BOB)
        follows.follow(ALICE, BOB)
        follows.follow(ALICE, CAROL)

        overview = followed_overview(store, follows, ALICE)

        assert [entry.account for entry in overview] == [BOB, CAROL]
        assert overview[0].stats.total_books == 3
        assert overview[0].currently_reading == ["1984"]
        assert overview[1].stats == ReadingStats()
        assert overview[1].currently_reading == []

    def test_nobody_followed(self, store: LibraryStore, follows: FollowRegistry) -> None:
        """No follows yields an empty overview."""
        assert followed_overview(store, follows, ALICE) == []
