# ABOUTME: Reading progress commands: progress, start, and finish.
# ABOUTME: progress merges a partial update; start and finish are status shortcuts.

from pathlib import Path

import click
from rich.console import Console

from booked.cli.options import account_option, db_option, status_option
from booked.cli.output import escape, fail
from booked.cli.session import open_session
from booked.library.errors import LibraryError
from booked.library.types import ProgressUpdate, ReadingStatus

console = Console()


@click.command("progress")
@click.argument("isbn")
@click.option("--chapter", "current_chapter", type=click.IntRange(min=0), default=None,
              help="Chapter you are on now.")
@click.option("--done", "chapters_completed", type=click.IntRange(min=1), multiple=True,
              help="Chapter you finished (repeatable).")
@click.option("--position", "last_read_position", default=None,
              help='Where you stopped, e.g. "page 45".')
@click.option("--date", "last_read_date", default=None, help="When you last read (YYYY-MM-DD).")
@status_option
@account_option()
@db_option
def progress(
    isbn: str,
    current_chapter: int | None,
    chapters_completed: tuple[int, ...],
    last_read_position: str | None,
    last_read_date: str | None,
    status: ReadingStatus | None,
    account: str,
    db_path: Path | None,
) -> None:
    """Record reading progress; omitted fields are left as they are."""
    update = ProgressUpdate(
        current_chapter=current_chapter,
        chapters_completed=list(chapters_completed),
        last_read_position=last_read_position,
        last_read_date=last_read_date,
        reading_status=status,
    )
    try:
        with open_session(db_path) as session:
            session.store.apply_progress(account, isbn, update)
            book = session.store.get_record(account, isbn)
    except LibraryError as exc:
        fail(console, exc)

    assert book is not None
    console.print(
        f"Progress saved for [bold]{escape(book.title)}[/bold]: "
        f"chapter {book.current_chapter}, "
        f"{len(book.chapters_read)} chapter(s) read, [cyan]{book.reading_status.value}[/cyan]."
    )


@click.command("start")
@click.argument("isbn")
@click.option("--chapter", "starting_chapter", type=click.IntRange(min=0), default=None,
              help="Chapter to start from (default: 1).")
@account_option()
@db_option
def start(isbn: str, starting_chapter: int | None, account: str, db_path: Path | None) -> None:
    """Start reading a book."""
    try:
        with open_session(db_path) as session:
            session.store.start_reading(account, isbn, starting_chapter)
            book = session.store.get_record(account, isbn)
    except LibraryError as exc:
        fail(console, exc)

    assert book is not None
    console.print(
        f"Started [bold]{escape(book.title)}[/bold] at chapter {book.current_chapter}."
    )


@click.command("finish")
@click.argument("isbn")
@account_option()
@db_option
def finish(isbn: str, account: str, db_path: Path | None) -> None:
    """Mark a book as completed."""
    try:
        with open_session(db_path) as session:
            session.store.mark_completed(account, isbn)
            book = session.store.get_record(account, isbn)
    except LibraryError as exc:
        fail(console, exc)

    assert book is not None
    console.print(f"Finished [bold]{escape(book.title)}[/bold] [green]Completed[/green].")
