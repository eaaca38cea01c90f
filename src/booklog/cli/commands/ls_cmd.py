# ABOUTME: The `booklog ls` command for listing logged books.
# ABOUTME: Displays a Rich table of every record in the collection file.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from booklog.cli.options import file_option
from booklog.config import DEFAULT_COLLECTION_PATH
from booklog.store import CollectionError, CollectionStore


@click.command("ls")
@file_option
def ls(collection_path: Path | None) -> None:
    """List all books in a collection."""
    console = Console()
    store = CollectionStore(collection_path or DEFAULT_COLLECTION_PATH)

    try:
        records = store.load()
    except CollectionError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if not records:
        console.print("[yellow]No books in the collection.[/yellow]")
        return

    table = Table()
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("ISBN", no_wrap=True)
    table.add_column("Read", no_wrap=True)
    table.add_column("Rating", justify="right")
    table.add_column("Cover", width=5)

    for i, record in enumerate(records, start=1):
        table.add_row(
            str(i),
            record.title,
            record.author,
            record.isbn,
            record.year_read,
            record.rating_display or "[dim]—[/dim]",
            "local" if record.local_cover else "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")
