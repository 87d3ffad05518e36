"""Configuration management for the adaptive shell helpers."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .git import GIT_SCOPES

DEFAULT_ROOT = Path.home() / ".config" / "sh"


class Config:
    """Application configuration loaded from the environment and .env files."""

    def __init__(self, project_dir: Optional[Path] = None):
        """Initialize config from .env in the project dir and the adaptive root."""
        self.project_dir = project_dir or Path.cwd()

        # Variables already in the environment take precedence
        load_dotenv(self.project_dir / ".env")

        self.root = Path(os.getenv("ADAPTIVE_SHELL") or DEFAULT_ROOT).expanduser()
        if self.root != self.project_dir:
            load_dotenv(self.root / ".env")

        self.debug = os.getenv("DEBUG", "")
        self.quiet = os.getenv("ADAPTIVE_QUIET", "false").lower() in ("1", "true", "yes")
        self.git_scope = os.getenv("ADAPTIVE_GIT_SCOPE", "global").lower()
        self.confirm_default = os.getenv("ADAPTIVE_CONFIRM_DEFAULT", "y").lower()

    def validate(self) -> list[str]:
        """Validate configuration values."""
        errors = []

        if self.git_scope not in GIT_SCOPES:
            errors.append(
                f"ADAPTIVE_GIT_SCOPE must be one of {', '.join(GIT_SCOPES)} (got '{self.git_scope}')"
            )
        if self.confirm_default not in ("y", "n"):
            errors.append(
                f"ADAPTIVE_CONFIRM_DEFAULT must be 'y' or 'n' (got '{self.confirm_default}')"
            )

        return errors
