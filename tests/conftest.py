"""Pytest configuration and fixtures."""

import subprocess
from pathlib import Path

import pytest
import structlog

from gopen.config.settings import get_settings


def _git(repo_path: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo_path, capture_output=True, check=True)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep git alias and gopen variables from leaking into tests."""
    for name in ("GIT_PREFIX", "GOPEN_REMOTE", "GOPEN_LOG_LEVEL", "GOPEN_GIT_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository on branch main with a GitHub remote."""
    repo_path = tmp_path / "test-repo"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")
    _git(repo_path, "config", "commit.gpgsign", "false")
    _git(repo_path, "remote", "add", "origin", "git@github.com:user/repo.git")
    _git(repo_path, "remote", "add", "mirror", "https://gitlab.com/group/sub/repo.git")

    (repo_path / "docs").mkdir()
    (repo_path / "docs" / "entity.md").write_text("# Entity\n\nContent here.\n")
    (repo_path / "README.md").write_text("# Test Repo\n")
    (repo_path / "main.go").write_text("package main\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")

    return repo_path
