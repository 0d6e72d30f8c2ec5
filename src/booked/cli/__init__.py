# ABOUTME: CLI package for Booked, built on Click.
# ABOUTME: Defines the root command group, logging switch, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from booked.cli.commands import book_cmd, follow_cmd, note_cmd, progress_cmd, stats_cmd


@click.group()
@click.version_option(package_name="booked")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log each library operation.")
def cli(verbose: bool) -> None:
    """Booked - your book library, reading progress, and chapter notes."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False, show_time=False)],
        )


cli.add_command(book_cmd.add)
cli.add_command(book_cmd.ls)
cli.add_command(book_cmd.info)
cli.add_command(book_cmd.edit)
cli.add_command(book_cmd.rm)
cli.add_command(book_cmd.total)
cli.add_command(progress_cmd.progress)
cli.add_command(progress_cmd.start)
cli.add_command(progress_cmd.finish)
cli.add_command(note_cmd.note)
cli.add_command(stats_cmd.stats)
cli.add_command(stats_cmd.reading)
cli.add_command(follow_cmd.follow)
cli.add_command(follow_cmd.unfollow)
cli.add_command(follow_cmd.following)
