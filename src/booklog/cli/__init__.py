# ABOUTME: CLI package for booklog, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import click

from booklog.cli.commands import add_cmd, ls_cmd


@click.group()
@click.version_option(package_name="booklog")
def cli() -> None:
    """booklog - log the books you read into a JSON collection."""


cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
