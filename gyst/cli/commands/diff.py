"""Diff command - show the changes a commit made against its parent."""

import click
from gyst.core.errors import CommitNotFound, GystError
from gyst.core.repository import Repository
from gyst.cli.output import error, info


def show_commit_diff(revs, no_color):
    """Shared body of ``diff`` and ``show``."""
    if len(revs) != 1:
        click.echo(error("Usage: gyst diff <commit-hash>"), err=True)
        raise click.Abort()

    rev = revs[0]

    try:
        repo = Repository.require()
        commit_hash = repo.refs.resolve_reference(rev)
        if commit_hash is None:
            raise CommitNotFound(f"Commit {rev} not found")
        diffs = repo.diff.diff_commit(commit_hash)
    except GystError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    click.echo(info(f"Changes in commit {commit_hash}:"))
    click.echo()

    if not diffs:
        click.echo(info("No files in this commit"))
        return

    click.echo(repo.diff.format_diff(diffs, color=not no_color))


@click.command('diff')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('revs', nargs=-1)
def diff_cmd(no_color, revs):
    """
    Show changes between a commit and its parent.

    For each file in the commit, prints the lines added (++) and removed
    (--) relative to the parent's version of the same file. The commit may
    be given as a full hash, a unique prefix, or HEAD.

    Examples:
        gyst diff 3f2a9c1
        gyst diff HEAD --no-color
    """
    show_commit_diff(revs, no_color)


@click.command('show')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('revs', nargs=-1)
def show_cmd(no_color, revs):
    """
    Show a commit's changes (same as diff).

    Examples:
        gyst show 3f2a9c1
    """
    show_commit_diff(revs, no_color)
