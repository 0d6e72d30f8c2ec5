# ABOUTME: Shared Click options for Booked CLI commands.
# ABOUTME: Provides reusable decorators for --db, --as, and --status, and owner resolution.

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from booked.db.connection import DEFAULT_DB_PATH
from booked.library.types import ReadingStatus

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    help=f"Path to library database (default: {DEFAULT_DB_PATH})",
)


def account_option(required: bool = True) -> Callable[..., Any]:
    """The --as option naming the account a command acts for.

    Required options carry no default, so click insists on a value from the
    command line or BOOKED_ACCOUNT.
    """
    extra: dict[str, Any] = {} if required else {"default": None}
    return click.option(
        "--as",
        "account",
        envvar="BOOKED_ACCOUNT",
        required=required,
        help="Account to act as (env: BOOKED_ACCOUNT).",
        **extra,
    )


def _parse_status(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> ReadingStatus | None:
    if value is None:
        return None
    try:
        return ReadingStatus.parse(value)
    except ValueError as exc:
        choices = ", ".join(s.value for s in ReadingStatus)
        raise click.BadParameter(f"{value!r} is not one of {choices}") from exc


status_option = click.option(
    "--status",
    "status",
    default=None,
    callback=_parse_status,
    help="Reading status: ToRead, Reading, Completed, OnHold, or Abandoned.",
)


def resolve_owner(owner: str | None, account: str | None) -> str:
    """Pick the library to read: an explicit owner, else the acting account."""
    resolved = owner or account
    if not resolved:
        raise click.UsageError("No account given. Pass an account or use --as.")
    return resolved
