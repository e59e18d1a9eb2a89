"""
Commit graph models.

Read-only views of the objects the storage layer hands to the describe
core: commits with their parent pointers, and tags with their target.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AwareDatetime, Field

from .base import ImmutableModel

ObjectId = Annotated[str, Field(pattern=r"^[0-9a-f]{4,64}$")]


class CommitRef(ImmutableModel):
    """A commit as seen by the traversal: identity, parents and commit time."""

    id: ObjectId
    parents: tuple[ObjectId, ...] = ()
    timestamp: AwareDatetime

    @property
    def is_root(self) -> bool:
        return not self.parents


class TagCandidate(ImmutableModel):
    """A tag reference pointing at a commit.

    For annotated tags ``timestamp`` is the tag's own creation time; for
    lightweight tags it is the target commit's time.
    """

    name: Annotated[str, Field(min_length=1)]
    target: ObjectId
    annotated: bool = False
    timestamp: AwareDatetime

    @classmethod
    def lightweight(cls, name: str, commit: CommitRef) -> TagCandidate:
        """Build a lightweight tag on ``commit``, dated by the commit."""
        return cls(name=name, target=commit.id, annotated=False, timestamp=commit.timestamp)

    @property
    def kind(self) -> str:
        return "annotated" if self.annotated else "lightweight"
