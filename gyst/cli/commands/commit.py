"""Commit command - create a commit from staged changes."""

import click
from gyst.core.errors import GystError
from gyst.core.repository import Repository
from gyst.cli.output import success, error, info


@click.command('commit', context_settings={'ignore_unknown_options': True})
@click.option('-m', '--message', 'message_opt', help='Commit message')
@click.argument('words', nargs=-1)
def commit_cmd(message_opt, words):
    """
    Record staged changes to the repository.

    The commit message is every remaining argument joined with spaces.
    The staging area is emptied once the commit is recorded.

    Examples:
        gyst commit Initial import
        gyst commit -m "Fix typo"
    """
    parts = ([message_opt] if message_opt else []) + list(words)
    if not parts:
        click.echo(error("Usage: gyst commit <message>"), err=True)
        raise click.Abort()

    message = ' '.join(parts)

    try:
        repo = Repository.require()
        parent = repo.chain.current_head()
        commit_hash = repo.chain.commit(message)
    except GystError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    click.echo(success(f"Commit successfully created: {commit_hash}"))
    if parent:
        click.echo(info(f"Parent: {parent[:7]}"))
    else:
        click.echo(info("(root commit)"))
