"""Help command, also used for unknown or missing subcommands."""

import click


@click.command("help")
@click.argument("command", required=False)
@click.pass_context
def help_cmd(ctx, command):
    """Show help for COMMAND, or the overall usage."""
    group_ctx = ctx.parent
    group = group_ctx.command

    sub = group.commands.get(command) if command else None
    if sub is None or sub is ctx.command:
        click.echo(group_ctx.get_help())
        return

    with click.Context(sub, info_name=command, parent=group_ctx) as sub_ctx:
        click.echo(sub.get_help(sub_ctx))
