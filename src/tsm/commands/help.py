"""Help command."""

import typer

from tsm.console import console


def show_help(ctx: typer.Context) -> None:
    """Show this help."""
    parent = ctx.parent or ctx
    console.print(parent.get_help())
