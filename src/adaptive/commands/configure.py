"""Report the git identity configured on this host."""

import sys

import click

from ..config import Config
from ..git import GIT_SCOPES, GitIdentity, get_git_identity
from ..output import err_console, logc


@click.command(name="configure_git")
@click.option(
    "--scope",
    type=click.Choice(GIT_SCOPES),
    default=None,
    help="Git config file to read (default: ADAPTIVE_GIT_SCOPE or global).",
)
def cmd(scope: str):
    """Show the git name, email and signing key for this host."""
    config = Config()
    if scope is None:
        errors = config.validate()
        if errors:
            for error in errors:
                err_console.error(f"✗ {error}", markup=False)
            sys.exit(1)
        scope = config.git_scope

    show_git_identity(get_git_identity(scope))


def show_git_identity(identity: GitIdentity):
    """Print the configured-identity banner or setup guidance."""
    if identity.is_configured:
        logc("- {{BOLD}}{{BLUE}}git{{RESET}}{{BOLD}} is configured:")
        logc(f"    - Name: \t{{{{YELLOW}}}}{identity.name}{{{{RESET}}}}")
        logc(f"    - Email:\t{{{{YELLOW}}}}{identity.email}{{{{RESET}}}}")
        logc(f"    - Signing Key: {{{{YELLOW}}}}{identity.signing_key}{{{{RESET}}}}")
    else:
        logc(
            "- your {{BOLD}}{{GREEN}}git{{RESET}} configuration is taken from the "
            "{{BLUE}}~/.config/git/config{{RESET}} file"
        )
        logc(
            "- if you've linked your config to a shared directory or are using git "
            "dotfiles to sync across machines then you should have this set but it "
            "doesn't look like that has been done on this host yet."
        )
        logc("")
