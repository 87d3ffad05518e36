"""Tests for git identity helpers."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from adaptive.git import GitIdentity, get_git_config, get_git_identity, is_git_available


def _completed(stdout: str = "", returncode: int = 0) -> Mock:
    return Mock(stdout=stdout, returncode=returncode)


@pytest.mark.unit
class TestGetGitConfig:
    @patch("adaptive.git.subprocess.run")
    def test_reads_value_and_strips_newline(self, mock_run):
        mock_run.return_value = _completed("Jane Doe\n")

        assert get_git_config("user.name") == "Jane Doe"
        mock_run.assert_called_once_with(
            ["git", "config", "--global", "--get", "user.name"],
            capture_output=True,
            text=True,
            timeout=5,
        )

    @patch("adaptive.git.subprocess.run")
    def test_unset_key_is_empty(self, mock_run):
        mock_run.return_value = _completed("", returncode=1)
        assert get_git_config("user.signingkey") == ""

    @patch("adaptive.git.subprocess.run")
    def test_git_missing_is_empty(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")
        assert get_git_config("user.email") == ""

    @patch("adaptive.git.subprocess.run")
    def test_timeout_is_empty(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="git", timeout=5)
        assert get_git_config("user.email") == ""

    @patch("adaptive.git.subprocess.run")
    def test_scope_is_passed_through(self, mock_run):
        mock_run.return_value = _completed("x\n")
        get_git_config("user.name", scope="local")
        assert mock_run.call_args[0][0][2] == "--local"

    def test_unknown_scope_rejected(self):
        with pytest.raises(ValueError):
            get_git_config("user.name", scope="worktree-ish")


@pytest.mark.unit
class TestGitIdentity:
    @patch("adaptive.git.get_git_config")
    def test_get_git_identity(self, mock_config):
        values = {
            "user.name": "Jane Doe",
            "user.email": "jane@example.com",
            "user.signingkey": "",
        }
        mock_config.side_effect = lambda key, scope: values[key]

        identity = get_git_identity()

        assert identity == GitIdentity("Jane Doe", "jane@example.com", "")
        assert identity.is_configured is True

    def test_not_configured(self):
        assert GitIdentity().is_configured is False

    def test_signing_key_alone_counts(self):
        assert GitIdentity(signing_key="ABC123").is_configured is True


@pytest.mark.unit
class TestGitAvailable:
    @patch("adaptive.git.subprocess.run")
    def test_available(self, mock_run):
        mock_run.return_value = _completed("git version 2.44.0\n")
        assert is_git_available() is True

    @patch("adaptive.git.subprocess.run")
    def test_not_installed(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")
        assert is_git_available() is False
