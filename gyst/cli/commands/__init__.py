"""CLI commands for Gyst."""

from gyst.cli.commands.init import init_cmd
from gyst.cli.commands.add import add_cmd
from gyst.cli.commands.commit import commit_cmd
from gyst.cli.commands.log import log_cmd
from gyst.cli.commands.diff import diff_cmd, show_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'diff_cmd', 'show_cmd']
