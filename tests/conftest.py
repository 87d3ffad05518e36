"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from adaptive.debug import set_debug_filter
from adaptive.output import set_quiet


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_env_file(temp_dir: Path) -> Path:
    """Create a mock .env file."""
    env_file = temp_dir / ".env"
    env_file.write_text(
        """DEBUG=is_empty
ADAPTIVE_QUIET=true
ADAPTIVE_GIT_SCOPE=local
ADAPTIVE_CONFIRM_DEFAULT=n
"""
    )
    return env_file


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch, temp_dir):
    """Isolate tests from actual environment variables and global switches."""
    config_keys = [
        "DEBUG",
        "ADAPTIVE_SHELL",
        "ADAPTIVE_QUIET",
        "ADAPTIVE_GIT_SCOPE",
        "ADAPTIVE_CONFIRM_DEFAULT",
    ]
    for key in config_keys:
        monkeypatch.delenv(key, raising=False)

    # Keep a real ~/.config/sh/.env from leaking into tests
    monkeypatch.setenv("ADAPTIVE_SHELL", str(temp_dir / "root"))

    saved = dict(os.environ)

    yield

    # load_dotenv writes straight into os.environ
    os.environ.clear()
    os.environ.update(saved)
    set_quiet(False)
    set_debug_filter(None)
