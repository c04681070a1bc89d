"""Main CLI entry point for Gyst."""

import click
from colorama import init
from loguru import logger

from gyst import __version__
from gyst.cli.output import BANNER, info, warning
from gyst.cli.commands import init_cmd, add_cmd, commit_cmd, log_cmd, diff_cmd, show_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


def _echo_sink(message):
    """Route loguru records through the CLI output helpers on stderr."""
    record = message.record
    text = record['message']
    if record['level'].no >= logger.level('WARNING').no:
        click.echo(warning(text), err=True)
    else:
        click.echo(info(text), err=True)


# Handler installed by configure_logging; loguru's default handler has id 0
_handler_id = 0


def configure_logging(verbose: bool = False) -> None:
    """
    Replace loguru's default handler with the CLI sink.

    Only the default handler or the sink added by a previous call is
    removed; handlers added by other code stay in place.
    """
    global _handler_id
    try:
        logger.remove(_handler_id)
    except ValueError:
        pass  # already removed
    _handler_id = logger.add(_echo_sink, level='DEBUG' if verbose else 'WARNING', format='{message}')


class GystGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GystGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose):
    configure_logging(verbose)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(diff_cmd)
cli.add_command(show_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
