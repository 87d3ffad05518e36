"""
Git utilities for reading the user's git identity.

Used by ``configure_git`` to report the name, email and signing key git
will use on this host.
"""

import subprocess
from dataclasses import dataclass

from .debug import debug
from .empty import not_empty
from .text import strip_trailing

GIT_SCOPES = ("global", "system", "local")


@dataclass
class GitIdentity:
    """Identity values from git config (empty string when unset)."""

    name: str = ""
    email: str = ""
    signing_key: str = ""

    @property
    def is_configured(self) -> bool:
        """True when any of name, email or signing key is set."""
        return not_empty(self.name) or not_empty(self.email) or not_empty(self.signing_key)


def get_git_config(key: str, scope: str = "global") -> str:
    """Get a git config value.

    Args:
        key: Git config key (e.g., "user.name")
        scope: One of "global", "system" or "local"

    Returns:
        Config value, or an empty string if git is missing or the key is unset
    """
    if scope not in GIT_SCOPES:
        raise ValueError(f"Unknown git config scope: {scope}")

    try:
        result = subprocess.run(
            ["git", "config", f"--{scope}", "--get", key],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as e:
        # git not installed, not in PATH, or timed out
        debug("get_git_config", f"could not run git for {key}: {e}")
        return ""

    if result.returncode != 0:
        debug("get_git_config", f"{key} is not set in {scope} config")
        return ""
    return strip_trailing(result.stdout, "\n")


def get_git_identity(scope: str = "global") -> GitIdentity:
    """Read user.name, user.email and user.signingkey from git config."""
    return GitIdentity(
        name=get_git_config("user.name", scope),
        email=get_git_config("user.email", scope),
        signing_key=get_git_config("user.signingkey", scope),
    )


def is_git_available() -> bool:
    """Check if git is available on the system."""
    try:
        result = subprocess.run(
            ["git", "--version"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return False
