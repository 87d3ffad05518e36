"""Emptiness predicates as shell-style commands.

Each command exits 0 when the predicate holds and 1 when it does not, so they
can be used directly in shell conditionals.
"""

import os
import sys

import click

from ..empty import is_empty, is_empty_string, not_empty


@click.command(name="is_empty")
@click.argument("name", required=False, default="")
def is_empty_cmd(name: str):
    """Succeed when NAME is empty.

    NAME is looked up as an environment variable. Anything that is not a set
    variable is checked as literal text.
    """
    sys.exit(0 if is_empty(name, os.environ) else 1)


@click.command(name="is_empty_string")
@click.argument("value", required=False, default="")
def is_empty_string_cmd(value: str):
    """Succeed when VALUE is an empty string."""
    sys.exit(0 if is_empty_string(value) else 1)


@click.command(name="not_empty")
@click.argument("value", required=False, default="")
def not_empty_cmd(value: str):
    """Succeed when VALUE is not an empty string."""
    sys.exit(0 if not_empty(value) else 1)
