"""Show the conversation history of one session."""

import click

from ..query import show_session
from .utils import echo_session_view, get_projects_dir


@click.command("show")
@click.argument("project")
@click.argument("session")
@click.option(
    "-f",
    "--full",
    is_flag=True,
    help="Show full content instead of a 3-line preview.",
)
@click.option(
    "-l",
    "--limit",
    type=click.IntRange(min=1),
    help="Show only the first N messages.",
)
@click.option(
    "-r",
    "--recent",
    type=click.IntRange(min=1),
    help="Show only the most recent N messages (takes precedence over --limit).",
)
@click.pass_context
def show_cmd(ctx, project, session, full, limit, recent):
    """Show conversation history for SESSION in PROJECT.

    Examples:

        claude-code-history show -home-me-app 1f3c0d2e --recent 10

        claude-code-history show -home-me-app 1f3c0d2e --full
    """
    projects_dir = get_projects_dir(ctx)
    view = show_session(
        projects_dir, project, session, full=full, limit=limit, recent=recent
    )

    if view is None:
        click.echo(f"Session not found: {session}")
        return

    echo_session_view(view, project, session, full=full)
