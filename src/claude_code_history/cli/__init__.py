"""Command line interface for viewing Claude Code conversation history."""

import logging

import click
from click_default_group import DefaultGroup

from .browse import browse_cmd
from .help import help_cmd
from .projects import projects_cmd
from .search import search_cmd
from .sessions import sessions_cmd
from .show import show_cmd
from .utils import format_table, get_projects_dir


@click.group(
    cls=DefaultGroup,
    default="help",
    default_if_no_args=True,
    invoke_without_command=True,
)
@click.version_option(None, "-v", "--version", package_name="claude-code-history")
@click.option(
    "-s",
    "--source",
    type=click.Path(file_okay=False),
    help="Directory containing Claude projects (default: ~/.claude/projects).",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Log debug details (skipped lines, ignored entries) to stderr.",
)
@click.pass_context
def cli(ctx, source, debug):
    """View Claude Code conversation history.

    Lists projects and sessions, shows a session's messages with tool calls
    summarized, and searches across all conversations.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["source"] = source
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(projects_cmd, "projects")
cli.add_command(sessions_cmd, "sessions")
cli.add_command(show_cmd, "show")
cli.add_command(search_cmd, "search")
cli.add_command(browse_cmd, "browse")
cli.add_command(help_cmd, "help")


def main():
    cli()


__all__ = [
    "cli",
    "main",
    "projects_cmd",
    "sessions_cmd",
    "show_cmd",
    "search_cmd",
    "browse_cmd",
    "help_cmd",
    "format_table",
    "get_projects_dir",
]
