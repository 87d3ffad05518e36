"""Ask a yes/no question from the shell."""

import sys

import click

from ..config import Config
from ..interactive import confirm


@click.command(name="confirm")
@click.argument("question")
@click.argument("default", required=False)
def cmd(question: str, default: str):
    """Ask QUESTION and succeed when the answer is yes.

    DEFAULT is "y" or "n" (default: ADAPTIVE_CONFIRM_DEFAULT or "y").
    """
    if default is None:
        default = Config().confirm_default
    sys.exit(0 if confirm(question, default) else 1)
