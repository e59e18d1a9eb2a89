"""
Git repository provider.

Reads commits, tags and working-tree state from a git checkout by
invoking the ``git`` executable.
"""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from ...core.exceptions import GitCommandError, InvalidArgumentError, MalformedGraphError
from ...core.models.graph import CommitRef, TagCandidate
from .base import BaseRepositoryProvider

# Tab-separated fields; ref names cannot contain control characters
TAG_FORMAT = "%09".join(
    [
        "%(refname:strip=2)",
        "%(objecttype)",
        "%(objectname)",
        "%(*objecttype)",
        "%(*objectname)",
        "%(taggerdate:unix)",
        "%(committerdate:unix)",
        "%(*committerdate:unix)",
    ]
)

_MISSING_OBJECT_MARKERS = (
    "bad object",
    "bad revision",
    "unknown revision",
    "not a valid object",
    "could not read",
)


def _to_datetime(value: str) -> datetime:
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


class GitRepository(BaseRepositoryProvider):
    """
    Git implementation of the repository collaborator.

    Commits are loaded with a single ``git log`` per uncached starting
    point and kept in memory for the lifetime of the provider.

    Usage:
        repo = GitRepository("/path/to/checkout")
        head = repo.resolve("HEAD")
        commit = repo.get_commit(head)
    """

    def __init__(self, repo_root: str | Path) -> None:
        self.repo_root = Path(repo_root)
        self._commits: dict[str, CommitRef] = {}

    @property
    def name(self) -> str:
        return "git"

    @staticmethod
    def get_repo_root(path: str | None = None) -> str | None:
        """Get the git repository root directory."""
        try:
            cmd = ["git", "rev-parse", "--show-toplevel"]
            if path:
                out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL, cwd=path)
            else:
                out = subprocess.check_output(cmd, stderr=subprocess.DEVNULL)
            return out.decode().strip()
        except (subprocess.CalledProcessError, FileNotFoundError):
            return None

    def _git(self, *args: str) -> str:
        """Run a git command in the repository and return its stdout."""
        cmd = ["git", *args]
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_root,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitCommandError("git executable not found", command=cmd, cause=e) from e
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                "git command failed", command=cmd, stderr=(e.stderr or "").strip(), cause=e
            ) from e
        return result.stdout

    # -------------------------------------------------------------------------
    # ICommitGraph
    # -------------------------------------------------------------------------

    def get_commit(self, commit_id: str) -> CommitRef:
        commit = self._commits.get(commit_id)
        if commit is None:
            self._load_history(commit_id)
            commit = self._commits.get(commit_id)
        if commit is None:
            raise MalformedGraphError("Commit object not found", object_id=commit_id)
        return commit

    def _load_history(self, commit_id: str) -> None:
        """Load ``commit_id`` and all of its ancestors into the cache."""
        try:
            out = self._git("log", "--format=%H %ct %P", commit_id, "--")
        except GitCommandError as e:
            stderr = str(e.context.get("stderr", "")).lower()
            if any(marker in stderr for marker in _MISSING_OBJECT_MARKERS):
                raise MalformedGraphError(
                    "Commit object not found", object_id=commit_id, cause=e
                ) from e
            raise

        for line in out.splitlines():
            fields = line.split()
            if len(fields) < 2 or fields[0] in self._commits:
                continue
            self._commits[fields[0]] = CommitRef(
                id=fields[0],
                parents=tuple(fields[2:]),
                timestamp=_to_datetime(fields[1]),
            )

    def iter_commit_ids(self) -> Iterator[str]:
        out = self._git("rev-list", "--all")
        return iter(out.split())

    def abbreviate(self, commit_id: str, min_length: int) -> str:
        """Abbreviate using git's own object-database-wide uniqueness check."""
        return self._git("rev-parse", f"--short={min_length}", commit_id).strip()

    # -------------------------------------------------------------------------
    # ITagReader
    # -------------------------------------------------------------------------

    def list_tags(self) -> list[TagCandidate]:
        """
        List tags that peel to a commit.

        Annotated tags are dated by their tagger date (falling back to the
        target's commit date when the tag has none); lightweight tags by
        their commit's date. Tags on trees or blobs are skipped.
        """
        out = self._git("for-each-ref", f"--format={TAG_FORMAT}", "refs/tags")

        tags: list[TagCandidate] = []
        for line in out.splitlines():
            if not line:
                continue
            name, objtype, objname, peeled_type, peeled_name, tagger, committed, peeled_committed = (
                line.split("\t")
            )
            if objtype == "commit":
                tags.append(
                    TagCandidate(
                        name=name,
                        target=objname,
                        annotated=False,
                        timestamp=_to_datetime(committed),
                    )
                )
            elif objtype == "tag" and peeled_type == "commit":
                tags.append(
                    TagCandidate(
                        name=name,
                        target=peeled_name,
                        annotated=True,
                        timestamp=_to_datetime(tagger or peeled_committed),
                    )
                )
        return tags

    # -------------------------------------------------------------------------
    # IDirtyState / IRepository
    # -------------------------------------------------------------------------

    def is_dirty(self) -> bool:
        """Tracked files differ from HEAD (untracked files are ignored)."""
        out = self._git("status", "--porcelain=v1", "--untracked-files=no")
        return bool(out.strip())

    def resolve(self, rev: str) -> str:
        try:
            return self._git("rev-parse", "--verify", "--quiet", f"{rev}^{{commit}}").strip()
        except GitCommandError as e:
            raise InvalidArgumentError(
                "Not a valid commit", argument="rev", value=rev, cause=e
            ) from e
