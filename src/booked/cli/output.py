# ABOUTME: Shared console helpers for Booked CLI commands.
# ABOUTME: Reports store errors and exits; user text is escaped before it meets Rich markup.

from typing import NoReturn

from rich.console import Console
from rich.markup import escape

from booked.library.errors import LibraryError

__all__ = ["escape", "fail"]


def fail(console: Console, exc: LibraryError) -> NoReturn:
    """Print a store error in red and exit with status 1."""
    console.print(f"[red]{escape(str(exc))}[/red]")
    raise SystemExit(1) from exc
