# ABOUTME: Shared Click options for booklog CLI commands.
# ABOUTME: Provides reusable decorators for the collection path and alternate target.

from pathlib import Path

import click

from booklog.config import ALT_FILE_ENVVAR, DEFAULT_COLLECTION_PATH, FILE_ENVVAR

file_option = click.option(
    "-f",
    "--file",
    "collection_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar=FILE_ENVVAR,
    help=f"Collection file to use (default: ./{DEFAULT_COLLECTION_PATH}).",
)

alt_file_option = click.option(
    "--alt-file",
    "alt_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar=ALT_FILE_ENVVAR,
    help="A second collection file offered as a choice when --file is not given.",
)
