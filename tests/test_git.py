"""Tests for preform.git module."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from preform.exceptions import GitError
from preform.git import _git, get_repo_root, resolve_base_dir


class TestGit:
    """Tests for _git function."""

    def test_successful_command(self, mocker):
        """Test successful git command execution."""
        mock_result = MagicMock()
        mock_result.stdout = "output\n"
        mocker.patch("subprocess.run", return_value=mock_result)

        assert _git(["status"]) == "output"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="fatal: nope"),
        )

        with pytest.raises(GitError) as exc_info:
            _git(["status"])

        assert "fatal: nope" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            _git(["status"])

        assert "not installed" in str(exc_info.value)


class TestGetRepoRoot:
    """Tests for get_repo_root function."""

    def test_returns_path(self, mocker):
        """Test that repo root path is returned."""
        mocker.patch("preform.git._git", return_value="/path/to/repo")
        assert get_repo_root() == Path("/path/to/repo")

    def test_not_a_repo(self, mocker):
        """Test the error outside a repository."""
        mocker.patch("preform.git._git", side_effect=GitError("boom"))
        with pytest.raises(GitError) as exc_info:
            get_repo_root()
        assert "Not in a git repository" in str(exc_info.value)


class TestResolveBaseDir:
    """Tests for resolve_base_dir function."""

    def test_explicit_wins(self, mocker, temp_dir):
        """Test that an explicit directory skips git."""
        mock_root = mocker.patch("preform.git.get_repo_root")
        assert resolve_base_dir(temp_dir) == temp_dir
        mock_root.assert_not_called()

    def test_uses_repo_root(self, mocker, temp_dir):
        """Test that the repo root is used inside a repo."""
        mocker.patch("preform.git.get_repo_root", return_value=temp_dir)
        assert resolve_base_dir() == temp_dir

    def test_falls_back_to_cwd(self, mocker, temp_dir, monkeypatch):
        """Test the fallback outside a repo."""
        mocker.patch("preform.git.get_repo_root", side_effect=GitError("no repo"))
        monkeypatch.chdir(temp_dir)
        assert resolve_base_dir() == Path.cwd()
