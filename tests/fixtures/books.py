# ABOUTME: Shared test data for Booked tests: account names, ISBNs, and a book factory.
# ABOUTME: Mirrors a small real-world library of classics.

from booked.library.types import BookEntry, ReadingStatus

ALICE = "alice.testnet"
BOB = "bob.testnet"
CAROL = "carol.testnet"

ISBN_1984 = "978-0451524935"
ISBN_MOCKINGBIRD = "978-0061120084"
ISBN_GATSBY = "978-0743273565"

FIXED_NOW = "2024-12-22T10:30:00"


def make_book(
    isbn: str = ISBN_1984,
    title: str = "1984",
    status: ReadingStatus = ReadingStatus.TO_READ,
    total_chapters: int | None = 10,
) -> BookEntry:
    """Build a BookEntry with realistic descriptive fields."""
    return BookEntry(
        isbn=isbn,
        title=title,
        author="George Orwell",
        acquisition_date="2024-01-15",
        condition="Good",
        personal_comments="Still relevant today",
        reading_status=status,
        total_chapters=total_chapters,
        last_read_position="Not started",
    )
