# ABOUTME: Core data structures for the Booked library store.
# ABOUTME: BookEntry is the unit of storage; ProgressUpdate and ReadingStats flow around it.

from dataclasses import dataclass, field
from enum import Enum


class ReadingStatus(Enum):
    """Where a reader is with a book. Any status may follow any other."""

    TO_READ = "ToRead"
    READING = "Reading"
    COMPLETED = "Completed"
    ON_HOLD = "OnHold"
    ABANDONED = "Abandoned"

    @classmethod
    def parse(cls, value: str) -> "ReadingStatus":
        """Look up a status by its stored name, case-insensitively.

        Accepts "Reading", "reading", "on_hold", "OnHold" and so on.

        Raises:
            ValueError: If the value names no status.
        """
        wanted = value.replace("_", "").replace("-", "").lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        raise ValueError(f"Unknown reading status: {value!r}")


@dataclass
class BookEntry:
    """One book in an account's library.

    The isbn is the lookup key and must be unique within a library. The
    descriptive fields are free-form strings; nothing validates them. The
    remaining fields track reading progress and per-chapter notes.
    """

    isbn: str
    title: str
    author: str = ""
    acquisition_date: str = ""
    condition: str = ""
    personal_comments: str = ""
    media_hash: str | None = None

    reading_status: ReadingStatus = ReadingStatus.TO_READ
    current_chapter: int = 0
    total_chapters: int | None = None
    chapters_read: set[int] = field(default_factory=set)
    last_read_position: str = ""
    last_read_date: str | None = None

    chapter_notes: dict[int, str] = field(default_factory=dict)

    @property
    def progress_fraction(self) -> float | None:
        """Share of total_chapters marked read, or None without a known total.

        Chapters outside 1..total_chapters are ignored.
        """
        if not self.total_chapters:
            return None
        done = sum(1 for ch in self.chapters_read if 1 <= ch <= self.total_chapters)
        return done / self.total_chapters


@dataclass
class ProgressUpdate:
    """A partial update to a book's reading progress.

    Fields left as None (or an empty chapters_completed) are not touched.
    """

    current_chapter: int | None = None
    chapters_completed: list[int] = field(default_factory=list)
    last_read_position: str | None = None
    last_read_date: str | None = None
    reading_status: ReadingStatus | None = None


@dataclass(frozen=True)
class ReadingStats:
    """Per-status counts for one library, computed on request."""

    total_books: int = 0
    currently_reading: int = 0
    completed: int = 0
    to_read: int = 0
    on_hold: int = 0
    abandoned: int = 0

    @property
    def not_active(self) -> int:
        """Books neither reading, completed, nor queued: on hold plus abandoned."""
        return self.total_books - self.currently_reading - self.completed - self.to_read
