"""Interactive project and session picker."""

import click
import questionary

from ..parsers import get_project_display_name
from ..query import list_projects, show_session, summarize_sessions
from .utils import echo_session_view, format_datetime, get_projects_dir


def build_project_choices(projects):
    """Build questionary choices showing the readable name next to the folder."""
    return [
        questionary.Choice(
            title=f"{get_project_display_name(name):30}  {name}", value=name
        )
        for name in projects
    ]


def build_session_choices(summaries):
    """Build questionary choices for sessions, most recent first.

    Naive start times are taken as local time so they sort alongside aware ones.
    """
    ordered = sorted(summaries, key=lambda s: s.start_time.astimezone(), reverse=True)
    return [
        questionary.Choice(
            title=f"{format_datetime(s.start_time)}  {s.message_count:5d} msgs  {s.id}",
            value=s.id,
        )
        for s in ordered
    ]


@click.command("browse")
@click.option(
    "-f",
    "--full",
    is_flag=True,
    help="Show full content instead of a 3-line preview.",
)
@click.option(
    "-r",
    "--recent",
    type=click.IntRange(min=1),
    help="Show only the most recent N messages of the chosen session.",
)
@click.pass_context
def browse_cmd(ctx, full, recent):
    """Pick a project and session interactively, then show it."""
    projects_dir = get_projects_dir(ctx)
    projects = list_projects(projects_dir)
    if not projects:
        click.echo("No projects found.")
        return

    project = questionary.select(
        "Select a project:",
        choices=build_project_choices(projects),
    ).ask()
    if project is None:
        click.echo("No project selected.")
        return

    summaries = summarize_sessions(projects_dir, project)
    if not summaries:
        click.echo(f"No sessions found for project: {project}")
        return

    session_id = questionary.select(
        "Select a session:",
        choices=build_session_choices(summaries),
    ).ask()
    if session_id is None:
        click.echo("No session selected.")
        return

    view = show_session(projects_dir, project, session_id, full=full, recent=recent)
    if view is None:
        click.echo(f"Session not found: {session_id}")
        return

    echo_session_view(view, project, session_id, full=full)
