"""Initialize a new Gyst repository."""

import click
from gyst.core.repository import Repository
from gyst.cli.output import success, error


@click.command('init')
def init_cmd():
    """
    Initialize a new Gyst repository.

    Creates a .gyst directory in the current directory. Running it again
    in an existing repository does nothing.

    Examples:
        gyst init
    """
    repo = Repository('.')

    try:
        created = repo.init()
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {repo.gyst_dir}"), err=True)
        raise click.Abort()
    except OSError as e:
        click.echo(error(f"Failed to initialize repository: {e}"), err=True)
        raise click.Abort()

    if created:
        click.echo(success(f"Initialized empty Gyst repository in {repo.gyst_dir}"))
