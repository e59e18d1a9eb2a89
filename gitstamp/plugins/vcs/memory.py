"""
In-memory repository provider.

A dict-backed commit graph with tags, used by tests and by callers that
already hold their history in memory. Timestamps default to a
deterministic clock that advances one minute per commit or tag, so
creation order is reflected in timestamps without sleeping.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta, timezone

from ...core.exceptions import InvalidArgumentError, MalformedGraphError
from ...core.models.graph import CommitRef, TagCandidate
from .base import BaseRepositoryProvider

EPOCH = datetime(2020, 1, 1, tzinfo=timezone.utc)


class InMemoryRepository(BaseRepositoryProvider):
    """
    Repository provider holding commits and tags in dictionaries.

    Usage:
        repo = InMemoryRepository()
        root = repo.commit("initial")
        repo.tag("v1.0", annotated=True)
        head = repo.commit("second")
        repo.resolve("HEAD") == head.id
    """

    def __init__(self, start: datetime = EPOCH) -> None:
        self._commits: dict[str, CommitRef] = {}
        self._tags: dict[str, TagCandidate] = {}
        self._head: str | None = None
        self._clock = start
        self.dirty = False

    @property
    def name(self) -> str:
        return "memory"

    @property
    def head(self) -> str | None:
        return self._head

    def _tick(self) -> datetime:
        self._clock += timedelta(minutes=1)
        return self._clock

    # -------------------------------------------------------------------------
    # Building history
    # -------------------------------------------------------------------------

    def add_commit(
        self,
        commit_id: str,
        parents: Iterable[str] = (),
        timestamp: datetime | None = None,
    ) -> CommitRef:
        """
        Add a commit with an explicit id.

        Parents are not required to exist, which allows malformed graphs
        to be modelled.
        """
        commit = CommitRef(
            id=commit_id,
            parents=tuple(parents),
            timestamp=timestamp or self._tick(),
        )
        self._commits[commit.id] = commit
        return commit

    def commit(
        self,
        message: str = "",
        parents: Iterable[str] | None = None,
        timestamp: datetime | None = None,
    ) -> CommitRef:
        """
        Create a commit on top of HEAD (or ``parents``) and move HEAD to it.

        The id is a SHA-1 over the message, parents and timestamp.
        """
        if parents is None:
            parents = (self._head,) if self._head else ()
        parents = tuple(parents)
        timestamp = timestamp or self._tick()

        digest = hashlib.sha1()
        digest.update(message.encode())
        for parent in parents:
            digest.update(parent.encode())
        digest.update(timestamp.isoformat().encode())

        commit = self.add_commit(digest.hexdigest(), parents, timestamp)
        self._head = commit.id
        return commit

    def checkout(self, rev: str) -> None:
        """Point HEAD at ``rev``."""
        self._head = self.resolve(rev)

    def tag(
        self,
        name: str,
        target: str | None = None,
        annotated: bool = False,
        timestamp: datetime | None = None,
    ) -> TagCandidate:
        """
        Tag ``target`` (default HEAD), replacing any existing tag of that name.

        Lightweight tags take the target commit's timestamp and reject an
        explicit one; annotated tags get their own creation time.
        """
        if timestamp is not None and not annotated:
            raise InvalidArgumentError(
                "Lightweight tags are dated by their commit",
                argument="timestamp",
                value=timestamp.isoformat(),
            )
        commit = self.get_commit(self.resolve(target or "HEAD"))
        if annotated:
            tag = TagCandidate(
                name=name,
                target=commit.id,
                annotated=True,
                timestamp=timestamp or self._tick(),
            )
        else:
            tag = TagCandidate.lightweight(name, commit)
        self._tags[name] = tag
        return tag

    # -------------------------------------------------------------------------
    # IRepository
    # -------------------------------------------------------------------------

    def get_commit(self, commit_id: str) -> CommitRef:
        try:
            return self._commits[commit_id]
        except KeyError:
            raise MalformedGraphError(
                "Commit object not found", object_id=commit_id
            ) from None

    def iter_commit_ids(self) -> Iterator[str]:
        return iter(self._commits)

    def list_tags(self) -> list[TagCandidate]:
        return list(self._tags.values())

    def is_dirty(self) -> bool:
        return self.dirty

    def resolve(self, rev: str) -> str:
        """Resolve 'HEAD', a tag name, a full id or a unique id prefix."""
        if rev == "HEAD":
            if self._head is None:
                raise InvalidArgumentError("HEAD does not point at a commit", argument="rev")
            return self._head
        if rev in self._tags:
            return self._tags[rev].target
        if rev in self._commits:
            return rev

        matches = [c for c in self._commits if len(rev) >= 4 and c.startswith(rev)]
        if len(matches) == 1:
            return matches[0]
        if matches:
            raise InvalidArgumentError("Ambiguous revision", argument="rev", value=rev)
        raise InvalidArgumentError("Unknown revision", argument="rev", value=rev)
