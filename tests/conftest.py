"""Pytest fixtures for gitglance tests."""

import shutil
import subprocess
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def clear_caches(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Clear the config cache and isolate the config dir for each test."""
    from gitglance.config import clear_config_cache

    monkeypatch.setenv("GITGLANCE_CONFIG_DIR", str(tmp_path / "gitglance-config"))
    clear_config_cache()

    yield

    clear_config_cache()


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A repository with one committed file, so status starts clean."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test")
    _git(repo, "config", "commit.gpgsign", "false")
    (repo / "tracked.txt").write_text("one\n")
    _git(repo, "add", "tracked.txt")
    _git(repo, "commit", "-m", "initial")
    return repo


@pytest.fixture
def git():
    """Run a git command in a repository: git(repo, "add", "file")."""
    return _git
