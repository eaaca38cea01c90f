# ABOUTME: The `booklog add` command: the interactive wizard for logging one book.
# ABOUTME: Picks a collection, builds and reviews a record, then appends it to the file.

import logging
from datetime import date
from pathlib import Path

import click
from rich.console import Console

from booklog.cli.builder import RecordBuilder
from booklog.cli.options import alt_file_option, file_option
from booklog.cli.review import ReviewSession
from booklog.config import (
    DATE_FORMAT_ENVVAR,
    LOCAL_TARGET,
    get_date_format,
    known_targets,
)
from booklog.records.types import DATE_FORMATS, DEFAULT_DATE_FORMAT
from booklog.store.collection import CollectionError, CollectionStore

logger = logging.getLogger(__name__)


def _select_target(collection_path: Path | None, alt_path: Path | None) -> Path:
    """Resolve which collection file to write to.

    An explicit --file wins. Otherwise, if an alternate target is configured,
    the operator chooses between it and the local default.
    """
    if collection_path is not None:
        return collection_path

    targets = known_targets(alt_path)
    if len(targets) == 1:
        return targets[0].path

    for target in targets:
        click.echo(f"  {target.name}: {target.path}")
    choice = click.prompt(
        "Which collection?",
        type=click.Choice([target.name for target in targets]),
        default=LOCAL_TARGET,
    )
    return next(target.path for target in targets if target.name == choice)


@click.command("add")
@file_option
@alt_file_option
@click.option(
    "--date-format",
    "date_format_label",
    type=click.Choice(list(DATE_FORMATS)),
    default=DEFAULT_DATE_FORMAT.label,
    envvar=DATE_FORMAT_ENVVAR,
    show_default=True,
    help="Layout for yearRead dates.",
)
def add(
    collection_path: Path | None,
    alt_path: Path | None,
    date_format_label: str,
) -> None:
    """Interactively add a book to a collection."""
    console = Console()

    store = CollectionStore(_select_target(collection_path, alt_path))
    try:
        if store.ensure():
            console.print(f"[dim]Created empty collection at {store.path}[/dim]")
        # Fail before any prompting if the existing file is unreadable.
        store.load()
    except CollectionError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    builder = RecordBuilder(today=date.today(), date_format=get_date_format(date_format_label))
    record = ReviewSession(builder, console=console).run()

    try:
        collection = store.add(record)
    except CollectionError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    logger.debug("Collection at %s now holds %d record(s)", store.path, len(collection))
    console.print(f"Book added to {store.path} successfully!")
