"""Search all conversations for a keyword."""

import click

from ..query import search_sessions
from .utils import format_datetime, get_projects_dir


@click.command("search")
@click.argument("keyword")
@click.option(
    "-p",
    "--project",
    help="Search within a specific project folder only.",
)
@click.pass_context
def search_cmd(ctx, keyword, project):
    """Search for KEYWORD in all conversations (case-insensitive)."""
    projects_dir = get_projects_dir(ctx)
    report = search_sessions(projects_dir, keyword, project=project)

    for result in report.results:
        click.echo(f"\n📁 {result.project} / {result.session_id[:8]}...")
        click.echo(f"Found {result.count} matches:")
        for preview in result.previews:
            click.echo(
                f"  [{format_datetime(preview.timestamp)}] {preview.role.icon} {preview.text}"
            )
        if result.hidden > 0:
            click.echo(f"  ... and {result.hidden} more matches")

    click.echo(f"\nTotal results: {report.total}")
