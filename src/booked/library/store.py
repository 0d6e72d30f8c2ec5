# ABOUTME: The library store: per-account book collections keyed by ISBN.
# ABOUTME: Add, query, replace, and delete books; merge reading progress; manage chapter notes.

import copy
import logging
from collections.abc import Callable
from datetime import datetime, timezone

from booked.library.errors import (
    CollectionNotFoundError,
    DuplicateKeyError,
    InvalidChapterError,
    RecordNotFoundError,
)
from booked.library.types import BookEntry, ProgressUpdate, ReadingStatus

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string without fractional seconds."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")


class LibraryStore:
    """Holds every account's library and the operations on them.

    Mutations address only the caller's own library. Reads accept any
    account. Values handed in or out are copies, so callers never hold a
    reference to a stored BookEntry.

    Not thread-safe: the host runs one operation at a time.
    """

    def __init__(
        self,
        libraries: dict[str, list[BookEntry]] | None = None,
        *,
        clock: Callable[[], str] | None = None,
    ) -> None:
        self._libraries: dict[str, list[BookEntry]] = libraries if libraries is not None else {}
        self._clock = clock or utc_timestamp

    @property
    def libraries(self) -> dict[str, list[BookEntry]]:
        """The underlying account -> books mapping, for persistence."""
        return self._libraries

    # --- Collection primitives ---

    def _library_for(self, caller: str) -> list[BookEntry]:
        library = self._libraries.get(caller)
        if library is None:
            raise CollectionNotFoundError(f"Library not found for {caller}")
        return library

    def _index_of(self, library: list[BookEntry], caller: str, isbn: str) -> int:
        for index, book in enumerate(library):
            if book.isbn == isbn:
                return index
        raise RecordNotFoundError(f"Book {isbn} not found in the library of {caller}")

    def _book_for(self, caller: str, isbn: str) -> BookEntry:
        library = self._library_for(caller)
        return library[self._index_of(library, caller, isbn)]

    def _find(self, owner: str, isbn: str) -> BookEntry | None:
        for book in self._libraries.get(owner, []):
            if book.isbn == isbn:
                return book
        return None

    def create_record(self, owner: str, book: BookEntry) -> None:
        """Add a book to the owner's library, creating the library if needed.

        Raises:
            DuplicateKeyError: If the library already holds a book with this ISBN.
        """
        if self._find(owner, book.isbn) is not None:
            raise DuplicateKeyError(
                f"Book with ISBN {book.isbn} already exists in the library of {owner}"
            )

        logger.info("Adding book: %s by %s", book.title, book.author)
        self._libraries.setdefault(owner, []).append(copy.deepcopy(book))

    def get_collection(self, owner: str) -> list[BookEntry]:
        """Return a copy of the owner's library, empty if there is none."""
        return copy.deepcopy(self._libraries.get(owner, []))

    def get_record(self, owner: str, isbn: str) -> BookEntry | None:
        """Return a copy of one book from the owner's library, or None."""
        book = self._find(owner, isbn)
        return copy.deepcopy(book) if book is not None else None

    def replace_record(self, caller: str, isbn: str, book: BookEntry) -> None:
        """Overwrite the caller's book at isbn with a complete new entry.

        This is a full replacement, not a merge. The new entry's own isbn is
        not checked against the slot it replaces.

        Raises:
            CollectionNotFoundError: If the caller has no library.
            RecordNotFoundError: If no book with this ISBN exists.
        """
        library = self._library_for(caller)
        index = self._index_of(library, caller, isbn)

        if book.isbn != isbn:
            logger.warning("Replacing book %s with an entry keyed %s", isbn, book.isbn)
        logger.info("Updating book: %s", book.title)
        library[index] = copy.deepcopy(book)

    def delete_record(self, caller: str, isbn: str) -> str:
        """Remove a book from the caller's library.

        Returns:
            The title of the removed book.

        Raises:
            CollectionNotFoundError: If the caller has no library.
            RecordNotFoundError: If no book with this ISBN exists.
        """
        library = self._library_for(caller)
        removed = library.pop(self._index_of(library, caller, isbn))
        logger.info("Deleted book: %s", removed.title)
        return removed.title

    def total_record_count(self) -> int:
        """Number of books across every library."""
        return sum(len(library) for library in self._libraries.values())

    # --- Reading progress ---

    def apply_progress(self, caller: str, isbn: str, update: ProgressUpdate) -> None:
        """Merge a partial progress update into one of the caller's books.

        Only fields present in the update change. Completed chapters are
        added to the read set; no check is made against total_chapters.

        Raises:
            CollectionNotFoundError: If the caller has no library.
            RecordNotFoundError: If no book with this ISBN exists.
            InvalidChapterError: If a chapter number is negative, or a
                completed chapter is below 1.
        """
        book = self._book_for(caller, isbn)

        if update.current_chapter is not None and update.current_chapter < 0:
            raise InvalidChapterError(
                f"Current chapter cannot be negative: {update.current_chapter}"
            )
        for chapter in update.chapters_completed:
            if chapter < 1:
                raise InvalidChapterError(f"Chapter number must be at least 1, got {chapter}")

        logger.info("Updating reading progress for: %s", book.title)

        if update.current_chapter is not None:
            book.current_chapter = update.current_chapter
            logger.info("Current chapter: %d", update.current_chapter)

        for chapter in update.chapters_completed:
            book.chapters_read.add(chapter)
            logger.info("Completed chapter: %d", chapter)

        if update.last_read_position is not None:
            book.last_read_position = update.last_read_position
            logger.info("Last read position: %s", update.last_read_position)

        if update.last_read_date is not None:
            book.last_read_date = update.last_read_date

        if update.reading_status is not None:
            book.reading_status = update.reading_status
            logger.info("Reading status changed to: %s", update.reading_status.value)

    def start_reading(self, caller: str, isbn: str, starting_chapter: int | None = None) -> None:
        """Mark a book as being read, from starting_chapter (default 1)."""
        book = self._book_for(caller, isbn)
        chapter = 1 if starting_chapter is None else starting_chapter
        if chapter < 0:
            raise InvalidChapterError(f"Current chapter cannot be negative: {chapter}")

        book.reading_status = ReadingStatus.READING
        book.current_chapter = chapter
        logger.info("Started reading %s from chapter %d", book.title, chapter)

    def mark_completed(self, caller: str, isbn: str) -> None:
        """Mark a book as completed and stamp the read date.

        When total_chapters is known, every chapter 1..total is marked read.
        """
        book = self._book_for(caller, isbn)

        book.reading_status = ReadingStatus.COMPLETED
        book.last_read_date = self._clock()
        logger.info("Marked %s as completed", book.title)

        if book.total_chapters is not None:
            book.chapters_read.update(range(1, book.total_chapters + 1))
            logger.info("Marked all %d chapters as completed", book.total_chapters)

    # --- Chapter notes ---

    def set_chapter_note(self, caller: str, isbn: str, chapter: int, note: str) -> None:
        """Add or overwrite the note for one chapter of a book.

        Raises:
            CollectionNotFoundError: If the caller has no library.
            RecordNotFoundError: If no book with this ISBN exists.
            InvalidChapterError: If chapter is below 1 or above total_chapters.
        """
        book = self._book_for(caller, isbn)

        if book.total_chapters is not None and chapter > book.total_chapters:
            raise InvalidChapterError(
                f"Chapter number {chapter} exceeds total chapters {book.total_chapters}"
            )
        if chapter < 1:
            raise InvalidChapterError("Chapter number must be at least 1")

        book.chapter_notes[chapter] = note
        logger.info("Added/updated note for chapter %d of %s", chapter, book.title)

    def get_chapter_note(self, owner: str, isbn: str, chapter: int) -> str | None:
        """Return the note for one chapter, or None if anything is missing."""
        book = self._find(owner, isbn)
        if book is None:
            return None
        return book.chapter_notes.get(chapter)

    def get_all_chapter_notes(self, owner: str, isbn: str) -> dict[int, str]:
        """Return a copy of every chapter note on a book, empty if absent."""
        book = self._find(owner, isbn)
        return dict(book.chapter_notes) if book is not None else {}

    def delete_chapter_note(self, caller: str, isbn: str, chapter: int) -> bool:
        """Remove the note for one chapter.

        Returns:
            True if a note was removed, False if there was none.
        """
        book = self._book_for(caller, isbn)

        if book.chapter_notes.pop(chapter, None) is not None:
            logger.info("Deleted note for chapter %d of %s", chapter, book.title)
            return True
        logger.info("No note found for chapter %d - nothing to delete", chapter)
        return False
