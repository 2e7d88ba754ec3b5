"""List the sessions of a project."""

import click

from ..query import summarize_sessions
from .utils import format_datetime, format_table, get_projects_dir


@click.command("sessions")
@click.argument("project")
@click.pass_context
def sessions_cmd(ctx, project):
    """List all sessions for PROJECT.

    PROJECT is the folder name as shown by the projects command.
    """
    projects_dir = get_projects_dir(ctx)
    summaries = summarize_sessions(projects_dir, project)

    if not summaries:
        click.echo(f"No sessions found for project: {project}")
        return

    rows = [
        (s.id, format_datetime(s.start_time), s.message_count) for s in summaries
    ]
    click.echo(format_table(["Session ID", "Start Time", "Messages"], rows))
