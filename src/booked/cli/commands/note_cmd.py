# ABOUTME: The `booked note` command group for per-chapter notes.
# ABOUTME: Provides set, get, ls, and rm subcommands.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from booked.cli.options import account_option, db_option, resolve_owner
from booked.cli.output import escape, fail
from booked.cli.session import open_session
from booked.library.errors import LibraryError

console = Console()


@click.group("note")
def note() -> None:
    """Manage chapter notes."""


@note.command("set")
@click.argument("isbn")
@click.argument("chapter", type=int)
@click.argument("text")
@account_option()
@db_option
def note_set(isbn: str, chapter: int, text: str, account: str, db_path: Path | None) -> None:
    """Add or replace the note for a chapter."""
    try:
        with open_session(db_path) as session:
            session.store.set_chapter_note(account, isbn, chapter, text)
    except LibraryError as exc:
        fail(console, exc)

    console.print(f"Saved note for chapter [cyan]{chapter}[/cyan] of {escape(isbn)}.")


@note.command("get")
@click.argument("isbn")
@click.argument("chapter", type=int)
@click.option("--owner", default=None, help="Library to look in (default: --as account).")
@account_option(required=False)
@db_option
def note_get(
    isbn: str, chapter: int, owner: str | None, account: str | None, db_path: Path | None
) -> None:
    """Show the note for a chapter."""
    owner = resolve_owner(owner, account)
    with open_session(db_path, persist=False) as session:
        text = session.store.get_chapter_note(owner, isbn, chapter)

    if text is None:
        console.print(f"[yellow]No note for chapter {chapter}.[/yellow]")
        return
    console.print(text, markup=False)


@note.command("ls")
@click.argument("isbn")
@click.option("--owner", default=None, help="Library to look in (default: --as account).")
@account_option(required=False)
@db_option
def note_ls(isbn: str, owner: str | None, account: str | None, db_path: Path | None) -> None:
    """List every note on a book."""
    owner = resolve_owner(owner, account)
    with open_session(db_path, persist=False) as session:
        notes = session.store.get_all_chapter_notes(owner, isbn)

    if not notes:
        console.print("[yellow]No chapter notes.[/yellow]")
        return

    table = Table()
    table.add_column("Chapter", style="cyan", justify="right")
    table.add_column("Note")
    for chapter, text in sorted(notes.items()):
        table.add_row(str(chapter), escape(text))

    console.print(table)


@note.command("rm")
@click.argument("isbn")
@click.argument("chapter", type=int)
@account_option()
@db_option
def note_rm(isbn: str, chapter: int, account: str, db_path: Path | None) -> None:
    """Delete the note for a chapter."""
    try:
        with open_session(db_path) as session:
            removed = session.store.delete_chapter_note(account, isbn, chapter)
    except LibraryError as exc:
        fail(console, exc)

    if removed:
        console.print(f"Deleted note for chapter [cyan]{chapter}[/cyan].")
    else:
        console.print(f"[yellow]No note for chapter {chapter} - nothing to delete.[/yellow]")
