"""Shared helpers for the command line interface."""

import click

from ..config import ConfigError, resolve_projects_dir
from ..query import preview_lines

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
TIME_FORMAT = "%H:%M:%S"
MESSAGE_RULE = "─" * 60


def get_projects_dir(ctx):
    """Resolve the projects directory for the current invocation.

    Raises click.ClickException when it cannot be determined.
    """
    ctx.ensure_object(dict)
    if "projects_dir" not in ctx.obj:
        try:
            ctx.obj["projects_dir"] = resolve_projects_dir(ctx.obj.get("source"))
        except ConfigError as e:
            raise click.ClickException(str(e))
    return ctx.obj["projects_dir"]


def local_time(value):
    """Convert an aware timestamp to local time; naive values are kept."""
    if value.tzinfo is None:
        return value
    return value.astimezone()


def format_datetime(value):
    return local_time(value).strftime(DATETIME_FORMAT)


def format_time(value):
    return local_time(value).strftime(TIME_FORMAT)


def format_table(headers, rows):
    """Format rows as a left-aligned text table with a header rule.

    Args:
        headers: Column titles
        rows: List of row sequences, one value per column

    Returns:
        The table as a single string.
    """
    rows = [[str(value) for value in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in rows:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    def format_row(values):
        return "  ".join(v.ljust(w) for v, w in zip(values, widths)).rstrip()

    lines = [format_row(headers), format_row(["-" * w for w in widths])]
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def echo_session_view(view, project, session_id, full=False):
    """Print a SessionView: header, messages and truncation footer."""
    session = view.session
    click.echo(f"\nProject: {project}")
    click.echo(f"Session: {session_id}")
    click.echo(
        f"Time: {format_datetime(session.start_time)} - {format_time(session.end_time)}"
    )
    click.echo(f"Messages: {view.total}\n")

    for i, rendered in enumerate(view.messages):
        if i > 0:
            click.echo(MESSAGE_RULE)
        click.echo(f"\n[{format_time(rendered.message.timestamp)}] {rendered.role.label}:")
        click.echo(rendered.content if full else preview_lines(rendered.content))
        click.echo("")

    note = view.truncation_note
    if note:
        click.echo(f"\n({note})")
