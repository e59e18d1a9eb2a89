"""Integration test fixtures: a real git history with mixed tag kinds."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def lightweight_before_annotated(temp_git_repo: Path, git: Callable[..., str]) -> Path:
    """
    Build the history:

        HEAD            third addition
        lightweight-tag second line
        annotated-tag   initial commit

    Returns:
        Path to the repository root
    """
    git("tag", "-a", "annotated-tag", "-m", "annotated")
    (temp_git_repo / "README.md").write_text("initial\nsecond line\n")
    git("commit", "-q", "-am", "second line")
    git("tag", "lightweight-tag")
    (temp_git_repo / "README.md").write_text("initial\nsecond line\nthird addition\n")
    git("commit", "-q", "-am", "third addition")
    return temp_git_repo
