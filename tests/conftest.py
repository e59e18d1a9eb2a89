"""
Shared pytest fixtures for gitstamp tests.

This module provides fixtures for both unit and integration tests:
- memory_repo: An empty in-memory repository
- tagged_history: The lightweight-tag-before-annotated-tag history
- temp_git_repo: An isolated real git repository with one commit
- git: Helper to run git commands with deterministic dates
"""

import os
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from gitstamp.plugins.vcs.memory import InMemoryRepository

BASE_TIMESTAMP = 1_600_000_000


@pytest.fixture
def memory_repo() -> InMemoryRepository:
    """Create an empty in-memory repository."""
    return InMemoryRepository()


@pytest.fixture
def tagged_history(memory_repo: InMemoryRepository) -> InMemoryRepository:
    """
    Build a three-commit history:

        HEAD            third addition
        lightweight-tag second line
        annotated-tag   initial commit

    Returns:
        The populated repository with HEAD on the third commit
    """
    memory_repo.commit("initial commit")
    memory_repo.tag("annotated-tag", annotated=True)
    memory_repo.commit("second line")
    memory_repo.tag("lightweight-tag")
    memory_repo.commit("third addition")
    return memory_repo


@pytest.fixture
def git(tmp_path: Path) -> Callable[..., str]:
    """
    Provide a helper running git in tmp_path with monotonically
    increasing author, committer and tagger dates.

    Returns:
        A callable taking git arguments and returning stdout
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    clock = {"now": BASE_TIMESTAMP}

    def run_git(*args: str) -> str:
        clock["now"] += 60
        date = f"{clock['now']} +0000"
        env = {
            **os.environ,
            "GIT_AUTHOR_NAME": "Test User",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test User",
            "GIT_COMMITTER_EMAIL": "test@example.com",
            "GIT_AUTHOR_DATE": date,
            "GIT_COMMITTER_DATE": date,
            "GIT_CONFIG_NOSYSTEM": "1",
            "HOME": str(tmp_path),
        }
        result = subprocess.run(
            ["git", *args],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    return run_git


@pytest.fixture
def temp_git_repo(tmp_path: Path, git: Callable[..., str]) -> Path:
    """
    Create a temporary git repository with an initial commit.

    Returns:
        Path to the temporary repository root
    """
    git("init", "-q")
    git("config", "commit.gpgsign", "false")
    git("config", "tag.gpgsign", "false")
    (tmp_path / "README.md").write_text("initial\n")
    git("add", "README.md")
    git("commit", "-q", "-m", "initial commit")
    return tmp_path
