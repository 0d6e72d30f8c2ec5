# ABOUTME: Book management commands: add, ls, info, edit, rm, and total.
# ABOUTME: Thin wrappers over LibraryStore that render results with Rich.

import dataclasses
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from booked.cli.options import account_option, db_option, resolve_owner, status_option
from booked.cli.output import escape, fail
from booked.cli.session import open_session
from booked.library.errors import LibraryError
from booked.library.types import BookEntry, ReadingStatus

console = Console()


def _chapters_display(book: BookEntry) -> str:
    read = len(book.chapters_read)
    if book.total_chapters is None:
        return f"{read} read"
    return f"{read}/{book.total_chapters}"


@click.command("add")
@click.argument("isbn")
@click.argument("title")
@click.option("--author", default="", help="Author name.")
@click.option("--acquired", "acquisition_date", default="", help="Acquisition date (YYYY-MM-DD).")
@click.option("--condition", default="", help='Physical condition, e.g. "Like New".')
@click.option("--comment", "personal_comments", default="", help="Personal comments.")
@click.option("--media", "media_hash", default=None, help="External media reference (e.g. IPFS hash).")
@click.option("--chapters", "total_chapters", type=click.IntRange(min=0), default=None,
              help="Total number of chapters.")
@status_option
@account_option()
@db_option
def add(
    isbn: str,
    title: str,
    author: str,
    acquisition_date: str,
    condition: str,
    personal_comments: str,
    media_hash: str | None,
    total_chapters: int | None,
    status: ReadingStatus | None,
    account: str,
    db_path: Path | None,
) -> None:
    """Add a book to your library."""
    book = BookEntry(
        isbn=isbn,
        title=title,
        author=author,
        acquisition_date=acquisition_date,
        condition=condition,
        personal_comments=personal_comments,
        media_hash=media_hash,
        total_chapters=total_chapters,
        reading_status=status or ReadingStatus.TO_READ,
    )
    try:
        with open_session(db_path) as session:
            session.store.create_record(account, book)
    except LibraryError as exc:
        fail(console, exc)

    console.print(f"Added [bold]{escape(title)}[/bold] ({escape(isbn)}).")


@click.command("ls")
@click.argument("owner", required=False)
@account_option(required=False)
@db_option
def ls(owner: str | None, account: str | None, db_path: Path | None) -> None:
    """List the books in a library (yours by default)."""
    owner = resolve_owner(owner, account)
    with open_session(db_path, persist=False) as session:
        books = session.store.get_collection(owner)

    if not books:
        console.print(f"[yellow]No books in the library of {escape(owner)}.[/yellow]")
        return

    table = Table()
    table.add_column("ISBN", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Status", style="cyan")
    table.add_column("Chapters", justify="right")

    for book in books:
        table.add_row(
            escape(book.isbn),
            escape(book.title),
            escape(book.author) if book.author else "[dim]unknown[/dim]",
            book.reading_status.value,
            _chapters_display(book),
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")


@click.command("info")
@click.argument("isbn")
@click.option("--owner", default=None, help="Library to look in (default: --as account).")
@account_option(required=False)
@db_option
def info(isbn: str, owner: str | None, account: str | None, db_path: Path | None) -> None:
    """Show every field of one book, including chapter notes."""
    owner = resolve_owner(owner, account)
    with open_session(db_path, persist=False) as session:
        book = session.store.get_record(owner, isbn)

    if book is None:
        console.print(
            f"[red]Book {escape(isbn)} not found in the library of {escape(owner)}.[/red]"
        )
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ISBN", escape(book.isbn))
    table.add_row("Title", escape(book.title))
    table.add_row("Author", escape(book.author or "unknown"))
    if book.acquisition_date:
        table.add_row("Acquired", escape(book.acquisition_date))
    if book.condition:
        table.add_row("Condition", escape(book.condition))
    if book.personal_comments:
        table.add_row("Comments", escape(book.personal_comments))
    if book.media_hash:
        table.add_row("Media", escape(book.media_hash))
    table.add_row("Status", book.reading_status.value)
    table.add_row("Chapter", str(book.current_chapter))
    table.add_row("Read", _chapters_display(book))
    if book.chapters_read:
        table.add_row("Chapters read", ", ".join(str(ch) for ch in sorted(book.chapters_read)))
    if book.last_read_position:
        table.add_row("Position", escape(book.last_read_position))
    if book.last_read_date:
        table.add_row("Last read", escape(book.last_read_date))
    for chapter, note in sorted(book.chapter_notes.items()):
        table.add_row(f"Note ch. {chapter}", escape(note))

    console.print(table)


@click.command("edit")
@click.argument("isbn")
@click.option("--title", default=None, help="New title.")
@click.option("--author", default=None, help="New author.")
@click.option("--acquired", "acquisition_date", default=None, help="New acquisition date.")
@click.option("--condition", default=None, help="New condition.")
@click.option("--comment", "personal_comments", default=None, help="New personal comments.")
@click.option("--media", "media_hash", default=None, help="New external media reference.")
@click.option("--chapters", "total_chapters", type=click.IntRange(min=0), default=None,
              help="New total number of chapters.")
@account_option()
@db_option
def edit(isbn: str, account: str, db_path: Path | None, **changes: str | int | None) -> None:
    """Edit the descriptive fields of one of your books."""
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        console.print("[yellow]Nothing to change.[/yellow]")
        return

    try:
        with open_session(db_path) as session:
            current = session.store.get_record(account, isbn)
            if current is None:
                # Let the store raise the precise not-found error.
                current = BookEntry(isbn=isbn, title="")
            session.store.replace_record(account, isbn, dataclasses.replace(current, **changes))
    except LibraryError as exc:
        fail(console, exc)

    console.print(f"Updated {escape(isbn)}: {', '.join(sorted(changes))}.")


@click.command("rm")
@click.argument("isbn")
@account_option()
@db_option
def rm(isbn: str, account: str, db_path: Path | None) -> None:
    """Remove one of your books."""
    try:
        with open_session(db_path) as session:
            title = session.store.delete_record(account, isbn)
    except LibraryError as exc:
        fail(console, exc)

    console.print(f"Removed [bold]{escape(title)}[/bold].")


@click.command("total")
@db_option
def total(db_path: Path | None) -> None:
    """Count books across every library."""
    with open_session(db_path, persist=False) as session:
        count = session.store.total_record_count()
    console.print(f"{count} book(s) across all libraries")
