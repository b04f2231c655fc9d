"""
Main CLI entry point for commitstat.

This module wires all subcommands together, configures `rich-click`
for colorized help output and owns the query engine for one invocation.
"""

import dataclasses
import logging

import rich_click as click

from commitstat import __version__
from commitstat.commands import log, refresh, refs
from commitstat.commands.env import env_cmd
from commitstat.config import load_settings
from commitstat.core.engine import QueryEngine


# Global rich-click configuration
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT = "dim"
click.rich_click.STYLE_OPTION = "bold cyan"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_METAVAR = "magenta"
click.rich_click.STYLE_USAGE = "bold"
click.rich_click.STYLE_HEADER_TEXT = "bold"
click.rich_click.STYLE_FOOTER_TEXT = "dim"
click.rich_click.MAX_WIDTH = 100


@click.group()
@click.version_option(version=__version__, prog_name="commitstat")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--timeout', type=float, default=None,
              help='Seconds before a git command is killed (env: COMMITSTAT_GIT_TIMEOUT)')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, timeout: float):
    """[bold]commitstat[/bold] — commit history and code statistics for git repositories.

    Subcommands:

    - [cyan]history[/cyan] — list commits filtered by branch, author, dates and hashes
    - [cyan]stats[/cyan] — lines and files added, modified and deleted
    - [cyan]branches[/cyan] — local and remote branches
    - [cyan]authors[/cyan] — distinct authors on a branch
    - [cyan]refresh[/cyan] — reload several repositories at once
    - [cyan]env[/cyan] — check the git installation

    Examples:
      [dim]# Statistics for one author since the start of the year[/dim]
      commitstat stats . --author alice --since 2024-01-01
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    if timeout and timeout > 0:
        settings = dataclasses.replace(settings, git_timeout=timeout)

    engine = QueryEngine(settings)
    ctx.obj = engine
    ctx.call_on_close(engine.reset_all)


# Register commands
cli.add_command(log.history)
cli.add_command(log.stats)
cli.add_command(refs.branches)
cli.add_command(refs.authors)
cli.add_command(refresh.refresh)
cli.add_command(env_cmd)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
