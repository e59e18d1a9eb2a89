"""
Repository collaborator interface definitions.

The describe core never touches storage directly. It reads commits,
tags and the dirty signal through these interfaces so that a git
checkout, an in-memory graph or any other object store can back it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..models.graph import CommitRef, TagCandidate


class ICommitGraph(ABC):
    """
    Read-only access to the commit graph.

    Implementations may cache; the describe core calls ``get_commit``
    at most once per visited commit.
    """

    @abstractmethod
    def get_commit(self, commit_id: str) -> CommitRef:
        """
        Look up a commit by its full id.

        Args:
            commit_id: Full lowercase hex commit id

        Returns:
            CommitRef with parents and commit timestamp

        Raises:
            MalformedGraphError: If the commit cannot be resolved
        """
        pass

    @abstractmethod
    def iter_commit_ids(self) -> Iterable[str]:
        """
        Iterate over every commit id known to the repository.

        Used to compute unique abbreviations.
        """
        pass

    def abbreviate(self, commit_id: str, min_length: int) -> str:
        """
        Shortest prefix of ``commit_id`` that is unique in the repository.

        Args:
            commit_id: Full lowercase hex commit id
            min_length: Minimum prefix length

        Returns:
            A prefix of at least ``min_length`` characters
        """
        from ...describe.abbrev import shortest_unique_prefix

        return shortest_unique_prefix(commit_id, self.iter_commit_ids(), min_length)


class ITagReader(ABC):
    """Read-only access to tag references."""

    @abstractmethod
    def list_tags(self) -> list[TagCandidate]:
        """
        Return every tag reference that peels to a commit.

        Lightweight tags carry their target commit's timestamp.
        """
        pass


class IDirtyState(ABC):
    """Working-state signal for the checked-out commit."""

    @abstractmethod
    def is_dirty(self) -> bool:
        """Return True if the working state differs from the checked-out commit."""
        pass


class IRepository(ICommitGraph, ITagReader, IDirtyState):
    """
    A complete storage collaborator.

    Adds revision resolution on top of the graph, tag and dirty readers.
    """

    @abstractmethod
    def resolve(self, rev: str) -> str:
        """
        Resolve a revision expression to a full commit id.

        Args:
            rev: Revision (e.g. 'HEAD', a tag name, an id prefix)

        Returns:
            Full lowercase hex commit id

        Raises:
            InvalidArgumentError: If the revision does not name a commit
        """
        pass
