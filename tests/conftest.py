"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


class FakeGit:
    """Stands in for GitClient without running git."""

    def __init__(self, subjects=None, history_error=None, commit_error=None):
        self.subjects = subjects or []
        self.history_error = history_error
        self.commit_error = commit_error
        self.committed = []

    def list_subjects(self):
        if self.history_error is not None:
            raise self.history_error
        return list(self.subjects)

    def commit(self, message):
        if self.commit_error is not None:
            raise self.commit_error
        self.committed.append(message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_git():
    """Factory for fake git clients."""
    return FakeGit


@pytest.fixture
def sample_subjects():
    """Sample git log subjects, most recent first."""
    return [
        "feat(auth): add login",
        "bad line no colon",
        "fix: typo",
        "Merge branch 'main' into feature",
        "chore(deps): bump typer",
        "docs(readme): explain scopes: all of them",
        "refactor(auth): split session handling",
    ]


@pytest.fixture
def config_dir(temp_dir, monkeypatch):
    """Point kommit's configuration directory at a temporary directory."""
    config_path = temp_dir / ".kommit"
    monkeypatch.setattr("kommit.config._CONFIG_DIR", config_path)
    return config_path


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
