# ABOUTME: Converts between BookEntry dataclasses and JSON-compatible dicts.
# ABOUTME: Handles the set/dict fields and the status enum, which JSON cannot hold directly.

from typing import Any

from booked.library.types import BookEntry, ReadingStatus


def entry_to_dict(book: BookEntry) -> dict[str, Any]:
    """Convert a BookEntry to a dict suitable for json.dumps.

    chapters_read becomes an ascending list and chapter_notes is keyed by
    the chapter number as a string.
    """
    return {
        "isbn": book.isbn,
        "title": book.title,
        "author": book.author,
        "acquisition_date": book.acquisition_date,
        "condition": book.condition,
        "personal_comments": book.personal_comments,
        "media_hash": book.media_hash,
        "reading_status": book.reading_status.value,
        "current_chapter": book.current_chapter,
        "total_chapters": book.total_chapters,
        "chapters_read": sorted(book.chapters_read),
        "last_read_position": book.last_read_position,
        "last_read_date": book.last_read_date,
        "chapter_notes": {str(ch): note for ch, note in sorted(book.chapter_notes.items())},
    }


def dict_to_entry(data: dict[str, Any]) -> BookEntry:
    """Convert a decoded JSON dict back to a BookEntry.

    Missing optional fields fall back to the BookEntry defaults.
    """
    return BookEntry(
        isbn=data["isbn"],
        title=data["title"],
        author=data.get("author", ""),
        acquisition_date=data.get("acquisition_date", ""),
        condition=data.get("condition", ""),
        personal_comments=data.get("personal_comments", ""),
        media_hash=data.get("media_hash"),
        reading_status=ReadingStatus(data.get("reading_status", ReadingStatus.TO_READ.value)),
        current_chapter=data.get("current_chapter", 0),
        total_chapters=data.get("total_chapters"),
        chapters_read=set(data.get("chapters_read") or []),
        last_read_position=data.get("last_read_position", ""),
        last_read_date=data.get("last_read_date"),
        chapter_notes={int(ch): note for ch, note in (data.get("chapter_notes") or {}).items()},
    )
