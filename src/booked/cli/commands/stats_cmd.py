# ABOUTME: The `booked stats` and `booked reading` commands.
# ABOUTME: Renders status counts and the currently-reading list for a library.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from booked.cli.options import account_option, db_option, resolve_owner
from booked.cli.output import escape
from booked.cli.session import open_session
from booked.library.stats import currently_reading, reading_stats

console = Console()


@click.command("stats")
@click.argument("owner", required=False)
@account_option(required=False)
@db_option
def stats(owner: str | None, account: str | None, db_path: Path | None) -> None:
    """Show reading statistics for a library (yours by default)."""
    owner = resolve_owner(owner, account)
    with open_session(db_path, persist=False) as session:
        result = reading_stats(session.store, owner)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Status", style="bold", width=18)
    table.add_column("Books", justify="right")

    table.add_row("Total", str(result.total_books))
    table.add_row("Reading", str(result.currently_reading))
    table.add_row("Completed", str(result.completed))
    table.add_row("To read", str(result.to_read))
    table.add_row("On hold", str(result.on_hold))
    table.add_row("Abandoned", str(result.abandoned))

    console.print(table)


@click.command("reading")
@click.argument("owner", required=False)
@account_option(required=False)
@db_option
def reading(owner: str | None, account: str | None, db_path: Path | None) -> None:
    """List books currently being read."""
    owner = resolve_owner(owner, account)
    with open_session(db_path, persist=False) as session:
        books = currently_reading(session.store, owner)

    if not books:
        console.print("[yellow]Nothing in progress.[/yellow]")
        return

    for book in books:
        where = f", {escape(book.last_read_position)}" if book.last_read_position else ""
        console.print(
            f"[bold]{escape(book.title)}[/bold] - chapter {book.current_chapter}{where}"
        )
