"""List projects with Claude Code history."""

import click

from ..parsers import get_project_display_name
from ..query import list_projects
from .utils import format_table, get_projects_dir


@click.command("projects")
@click.pass_context
def projects_cmd(ctx):
    """List all projects with Claude Code history."""
    projects_dir = get_projects_dir(ctx)
    projects = list_projects(projects_dir)

    if not projects:
        click.echo("No projects found.")
        return

    rows = [(name, get_project_display_name(name)) for name in projects]
    click.echo(format_table(["Project", "Name"], rows))
