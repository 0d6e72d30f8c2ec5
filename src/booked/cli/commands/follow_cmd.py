# ABOUTME: Follow commands: follow, unfollow, and following.
# ABOUTME: following shows each followed account's reading stats.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from booked.cli.options import account_option, db_option
from booked.cli.output import escape, fail
from booked.cli.session import open_session
from booked.library.errors import LibraryError
from booked.library.stats import followed_overview

console = Console()


@click.command("follow")
@click.argument("target")
@account_option()
@db_option
def follow(target: str, account: str, db_path: Path | None) -> None:
    """Follow another account's library."""
    try:
        with open_session(db_path) as session:
            added = session.follows.follow(account, target)
    except LibraryError as exc:
        fail(console, exc)

    if added:
        console.print(f"Now following [cyan]{escape(target)}[/cyan].")
    else:
        console.print(f"[yellow]Already following {escape(target)}.[/yellow]")


@click.command("unfollow")
@click.argument("target")
@account_option()
@db_option
def unfollow(target: str, account: str, db_path: Path | None) -> None:
    """Stop following an account."""
    try:
        with open_session(db_path) as session:
            removed = session.follows.unfollow(account, target)
    except LibraryError as exc:
        fail(console, exc)

    if removed:
        console.print(f"Unfollowed [cyan]{escape(target)}[/cyan].")
    else:
        console.print(f"[yellow]Not following {escape(target)}.[/yellow]")


@click.command("following")
@account_option()
@db_option
def following(account: str, db_path: Path | None) -> None:
    """List the accounts you follow with their reading stats."""
    with open_session(db_path, persist=False) as session:
        overview = followed_overview(session.store, session.follows, account)

    if not overview:
        console.print("[yellow]You are not following anyone.[/yellow]")
        return

    table = Table()
    table.add_column("Account", style="cyan")
    table.add_column("Books", justify="right")
    table.add_column("Completed", justify="right")
    table.add_column("Reading now")

    for entry in overview:
        table.add_row(
            escape(entry.account),
            str(entry.stats.total_books),
            str(entry.stats.completed),
            escape(", ".join(entry.currently_reading)) or "[dim]-[/dim]",
        )

    console.print(table)
