"""
Integration tests comparing gitstamp against `git describe`.

Every scenario here has a single nearest tag, so the output must be
byte-identical to git's own.
"""

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from gitstamp.cli import cli
from gitstamp.core.exceptions import (
    InvalidArgumentError,
    MalformedGraphError,
    NoReachableTagError,
)
from gitstamp.core.models.describe import DescribeOptions
from gitstamp.plugins.vcs.git import GitRepository
from gitstamp.services.describe import DescribeService


def gitstamp_label(repo_root: Path, rev: str = "HEAD", **options) -> str:
    service = DescribeService(GitRepository(repo_root))
    return service.describe(rev, DescribeOptions(**options)).label


SCENARIOS = [
    ([], {}),
    (["--tags"], {"include_lightweight": True}),
    (["--tags", "--match", "annotated*"], {"include_lightweight": True, "match_patterns": ["annotated*"]}),
    (["--tags", "--exclude", "light*"], {"include_lightweight": True, "exclude_patterns": ["light*"]}),
    (["--long"], {"long": True}),
    (["--abbrev=12"], {"abbrev": 12}),
    (["--tags", "--dirty"], {"include_lightweight": True, "dirty_marker": "-dirty"}),
]


class TestMatchesGitDescribe:
    """gitstamp output equals git describe output."""

    @pytest.mark.parametrize(("git_args", "options"), SCENARIOS)
    def test_head(self, lightweight_before_annotated, git, git_args, options):
        """HEAD two commits past the annotated tag, one past the lightweight tag."""
        expected = git("describe", *git_args).strip()
        assert gitstamp_label(lightweight_before_annotated, **options) == expected

    @pytest.mark.parametrize(("git_args", "options"), SCENARIOS)
    def test_dirty_worktree(self, lightweight_before_annotated, git, git_args, options):
        """A modified tracked file is marked dirty only when a marker is requested."""
        (lightweight_before_annotated / "README.md").write_text("changed\n")
        expected = git("describe", *git_args).strip()
        assert gitstamp_label(lightweight_before_annotated, **options) == expected

    def test_exact_match_on_tag(self, lightweight_before_annotated, git):
        """Describing a tagged commit yields the tag name."""
        expected = git("describe", "annotated-tag").strip()
        assert gitstamp_label(lightweight_before_annotated, "annotated-tag") == expected

    def test_exact_dirty(self, lightweight_before_annotated, git):
        """A dirty exact match renders as tag plus marker."""
        git("checkout", "-q", "lightweight-tag")
        (lightweight_before_annotated / "README.md").write_text("changed\n")
        expected = git("describe", "--tags", "--dirty").strip()
        assert expected == "lightweight-tag-dirty"
        assert gitstamp_label(
            lightweight_before_annotated, include_lightweight=True, dirty_marker="-dirty"
        ) == expected

    def test_always_without_tags(self, temp_git_repo, git):
        """With no tags --always prints the abbreviated id."""
        expected = git("describe", "--always").strip()
        assert gitstamp_label(temp_git_repo, always=True) == expected

    def test_no_tags_fails_like_git(self, temp_git_repo, git):
        """With no tags and no fallback both tools fail."""
        with pytest.raises(subprocess.CalledProcessError):
            git("describe")
        with pytest.raises(NoReachableTagError):
            gitstamp_label(temp_git_repo)


class TestNewestTagOnCommit:
    """Several tags on the same commit."""

    @pytest.mark.parametrize(
        ("first", "second"),
        [("0.0.1-SNAPSHOT", "OName-0.0.1"), ("OName-0.0.1", "0.0.1-SNAPSHOT")],
    )
    def test_later_annotated_tag_wins(self, lightweight_before_annotated, git, first, second):
        """The tag created last wins, whichever name it has."""
        git("tag", "-a", first, "-m", first)
        git("tag", "-a", second, "-m", second)
        assert gitstamp_label(lightweight_before_annotated, include_lightweight=True) == second


class TestGitRepository:
    """Tests for the git storage provider."""

    def test_list_tags(self, lightweight_before_annotated, git):
        """Tags are listed with their kind, peeled target and date."""
        repo = GitRepository(lightweight_before_annotated)
        tags = {t.name: t for t in repo.list_tags()}

        assert tags["annotated-tag"].annotated is True
        assert tags["annotated-tag"].target == git("rev-parse", "annotated-tag^{commit}").strip()
        assert tags["lightweight-tag"].annotated is False
        assert tags["lightweight-tag"].target == git("rev-parse", "lightweight-tag").strip()

    def test_annotated_tag_dated_by_tagger(self, lightweight_before_annotated):
        """Annotated tags carry their own date, later than their commit."""
        repo = GitRepository(lightweight_before_annotated)
        tag = next(t for t in repo.list_tags() if t.name == "annotated-tag")
        assert tag.timestamp > repo.get_commit(tag.target).timestamp

    def test_lightweight_tag_dated_by_commit(self, lightweight_before_annotated):
        """Lightweight tags carry their commit's date."""
        repo = GitRepository(lightweight_before_annotated)
        tag = next(t for t in repo.list_tags() if t.name == "lightweight-tag")
        assert tag.timestamp == repo.get_commit(tag.target).timestamp

    def test_get_commit_parents(self, lightweight_before_annotated, git):
        """Commits are loaded with their parents."""
        repo = GitRepository(lightweight_before_annotated)
        head = repo.resolve("HEAD")
        assert repo.get_commit(head).parents == (git("rev-parse", "HEAD~1").strip(),)

    def test_missing_commit(self, temp_git_repo):
        """An unknown object id is a malformed-graph error."""
        with pytest.raises(MalformedGraphError):
            GitRepository(temp_git_repo).get_commit("0123456789" * 4)

    def test_resolve_invalid(self, temp_git_repo):
        """An unknown revision is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            GitRepository(temp_git_repo).resolve("no-such-branch")

    def test_is_dirty(self, temp_git_repo):
        """Modifying a tracked file makes the tree dirty; untracked files do not."""
        repo = GitRepository(temp_git_repo)
        (temp_git_repo / "untracked.txt").write_text("x")
        assert repo.is_dirty() is False
        (temp_git_repo / "README.md").write_text("changed\n")
        assert repo.is_dirty() is True


class TestCliEndToEnd:
    """The CLI against a real repository."""

    def test_describe_tags(self, lightweight_before_annotated: Path, git: Callable[..., str]):
        """gitstamp -C DIR describe --tags prints git's label."""
        runner = CliRunner()
        result = runner.invoke(cli, ["-C", str(lightweight_before_annotated), "describe", "--tags"])
        assert result.exit_code == 0, result.output
        assert result.output == git("describe", "--tags")

    def test_not_a_repository(self, tmp_path: Path):
        """Outside a repository describe fails cleanly."""
        outside = tmp_path / "plain"
        outside.mkdir()
        runner = CliRunner()
        result = runner.invoke(cli, ["-C", str(outside), "describe"])
        assert result.exit_code != 0
