# ABOUTME: Interactive review of a built record before it is saved.
# ABOUTME: Shows the record in a Rich table plus its JSON, and loops back to re-edit on rejection.

import json
from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.table import Table

from booklog.cli.builder import RecordBuilder
from booklog.cli.prompts import ask_yes_no
from booklog.records import BookRecord, normalize, record_to_dict


class ReviewSession:
    """Confirm-or-edit loop around a RecordBuilder.

    Each rejected pass re-runs the builder with the rejected answers as
    prompt defaults. Nothing leaves this loop until the operator accepts.
    """

    def __init__(self, builder: RecordBuilder, *, console: Console | None = None) -> None:
        self._builder = builder
        self._console = console or Console()

    def show(self, record: BookRecord) -> None:
        """Render a record as a field table followed by the JSON to be stored."""
        table = Table(title="New book", show_header=False)
        table.add_column("Field", style="bold", width=12)
        table.add_column("Value")

        table.add_row("Title", record.title)
        table.add_row("Author", record.author)
        table.add_row("ISBN", record.isbn)
        table.add_row("Year read", record.year_read)
        table.add_row("Rating", record.rating_display or "—")
        table.add_row("Local cover", "yes" if record.local_cover else "no")

        self._console.print(table)
        self._console.print("Generated JSON content:")
        self._console.print_json(json.dumps(record_to_dict(record)), indent=2)

    def run(self, answers: Mapping[str, Any] | None = None) -> BookRecord:
        """Build (unless answers are given), then review until accepted.

        Returns:
            The normalized record the operator accepted.
        """
        if answers is None:
            answers = self._builder.build()

        while True:
            record = normalize(answers)
            self.show(record)
            if ask_yes_no("Do you accept the generated JSON content?", default=True):
                return record
            answers = self._builder.build(defaults=answers)
