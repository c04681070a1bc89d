"""Log command - show commit history."""

from datetime import datetime
from itertools import islice

import click
from colorama import Fore, Style
from gyst.core.errors import GystError
from gyst.core.repository import Repository
from gyst.cli.output import SEPARATOR, error, info


def format_timestamp(timestamp: str) -> str:
    """Format an ISO-8601 timestamp to a readable date."""
    try:
        dt = datetime.fromisoformat(timestamp.replace('Z', '+00:00'))
        return dt.strftime("%a %b %d %H:%M:%S %Y %z").strip()
    except ValueError:
        return timestamp or "Unknown date"


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show commits in one-line format')
def log_cmd(max_count, oneline):
    """
    Show commit history.

    Lists commits from HEAD back to the first commit, newest first.

    Examples:
        gyst log
        gyst log -n 5
        gyst log --oneline
    """
    try:
        repo = Repository.require()
        head = repo.chain.current_head()

        if head is None:
            click.echo(info("No commits yet."))
            return

        commits = repo.chain.history(head)
        if max_count is not None:
            commits = islice(commits, max(max_count, 0))

        for commit in commits:
            if oneline:
                summary = commit.message.split('\n')[0]
                click.echo(f"{Fore.YELLOW}{commit.hash[:7]}{Style.RESET_ALL} {summary}")
                continue

            click.echo(SEPARATOR)
            click.echo()
            click.echo(f"{Fore.YELLOW}Commit: {commit.hash}{Style.RESET_ALL}")
            click.echo(f"Date:   {format_timestamp(commit.timestamp)}")
            click.echo()
            for line in commit.message.split('\n'):
                click.echo(f"    {line}")
            click.echo()
    except GystError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
