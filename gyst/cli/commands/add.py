"""Add command - stage a file for commit."""

import click
from gyst.core.errors import GystError
from gyst.core.repository import Repository
from gyst.cli.output import success, error, info


@click.command('add', context_settings={'ignore_unknown_options': True})
@click.argument('paths', nargs=-1)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Stores the file's current content and stages it for the next commit.
    Adding a file that is already staged replaces the earlier version.

    Examples:
        gyst add notes.txt
    """
    if len(paths) != 1:
        click.echo(error("Usage: gyst add <file>"), err=True)
        raise click.Abort()

    path = paths[0]

    try:
        repo = Repository.require()
        entry = repo.index.add_file(path)
    except GystError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    click.echo(success(f"Added file: {path}"))
    click.echo(info(f"  {entry.path} -> {entry.hash}"))
