"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from preform.form import FormSession, KeyEvent, KeyKind, keys_from_text


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def session(temp_dir):
    """A form session with the default types and an empty store."""
    return FormSession(temp_dir)


def press(session, *keys):
    """Feed keys to a session.

    Strings are typed character by character, KeyKind values are pressed
    as-is. Returns the result of the last handle_key call.
    """
    finished = False
    for key in keys:
        if isinstance(key, KeyKind):
            events = [KeyEvent(key)]
        else:
            events = keys_from_text(key)
        for event in events:
            finished = session.handle_key(event)
    return finished
