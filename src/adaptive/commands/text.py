"""Text helper commands."""

import click

from ..text import lc


@click.command(name="lc")
@click.argument("text", nargs=-1)
def lc_cmd(text: tuple[str, ...]):
    """Print TEXT in lowercase."""
    click.echo(lc(" ".join(text)))
