#!/usr/bin/env python3
"""CLI entry point for the adaptive shell helpers."""

import sys

import click

from .config import Config
from .debug import set_debug_filter, setup_logging
from .output import set_quiet
from .commands import confirm, configure, empty, text


class FunctionDispatcher(click.Group):
    """Group that dispatches ``<function> [args...]`` like a sourced script."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            click.echo(f"Error: Unknown function '{cmd_name}'", err=True)
            click.echo(f"Run '{ctx.command_path} --help' for available functions", err=True)
            ctx.exit(1)
        return super().resolve_command(ctx, args)

    def format_usage(self, ctx: click.Context, formatter: click.HelpFormatter):
        formatter.write_usage(ctx.command_path, "<function> [args...]")

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter):
        rows = []
        for name in sorted(self.list_commands(ctx)):
            if name.startswith("_"):
                continue
            command = self.get_command(ctx, name)
            if command is None or command.hidden:
                continue
            rows.append((name, command.get_short_help_str()))

        if rows:
            with formatter.section("Available functions"):
                formatter.write_dl(rows)


@click.group(
    cls=FunctionDispatcher,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(package_name="adaptive-shell")
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress non-essential output. Errors are still shown.",
)
@click.option(
    "--debug",
    "debug_filter",
    metavar="FILTER",
    default=None,
    help="Trace 'true' (everything) or a comma separated list of functions.",
)
@click.pass_context
def main(ctx: click.Context, quiet: bool, debug_filter: str):
    """Interactive shell-bootstrap helpers."""
    config = Config()
    set_quiet(quiet or config.quiet)
    if debug_filter is not None:
        set_debug_filter(debug_filter)
    setup_logging(quiet=quiet or config.quiet)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


# Register functions
main.add_command(empty.is_empty_cmd)
main.add_command(empty.is_empty_string_cmd)
main.add_command(empty.not_empty_cmd)
main.add_command(configure.cmd)
main.add_command(confirm.cmd)
main.add_command(text.lc_cmd)


if __name__ == "__main__":
    sys.exit(main())
