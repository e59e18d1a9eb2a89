"""
Describe engine.

Finds the nearest eligible tag reachable from a starting commit and
renders the result the way ``git describe`` does:

1. If the starting commit carries an eligible tag, it wins at distance 0.
2. Otherwise walk parent edges breadth-first, recording the shortest
   distance to every commit the first time it is reached. Commits come off
   the work-list in non-decreasing distance order, so once a tagged commit
   has been found at distance ``d`` the walk stops as soon as the next
   commit to expand is itself ``d`` or more away: nothing closer remains.
3. Tags on the winning commit(s) are ranked newest first, then by name.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from ..core.exceptions import NoReachableTagError
from ..core.interfaces.repository import ICommitGraph
from ..core.models.describe import DescribeOptions, DescribeResult
from ..core.models.graph import CommitRef, TagCandidate
from .tag_index import TagIndex


def rank_tags(tags: Iterable[TagCandidate]) -> list[TagCandidate]:
    """
    Order tags best first.

    Later timestamps win; exact timestamp ties are broken by the
    lexically greater name so the outcome never depends on the order
    the tags were listed in.
    """
    return sorted(tags, key=lambda t: (t.timestamp, t.name), reverse=True)


class DescribeEngine:
    """
    Runs the describe search over a commit graph.

    One engine serves one describe call: the TagIndex it holds is built
    for that call's options and discarded with it.

    Usage:
        index = TagIndex.build(repo.list_tags(), include_lightweight=True)
        engine = DescribeEngine(repo, index)
        result = engine.describe(head_id, options)
        print(result.label)
    """

    def __init__(self, graph: ICommitGraph, index: TagIndex) -> None:
        self._graph = graph
        self._index = index

    def describe(
        self,
        start_id: str,
        options: DescribeOptions | None = None,
        dirty: bool = False,
    ) -> DescribeResult:
        """
        Describe ``start_id`` relative to its nearest eligible tag.

        Args:
            start_id: Full id of the starting commit
            options: Describe options (defaults apply when None)
            dirty: Whether the working state differs from the start commit

        Returns:
            DescribeResult whose label is the describe string

        Raises:
            NoReachableTagError: No eligible tag is reachable and the hash
                fallback is disabled (or exact_match was requested)
            MalformedGraphError: A commit on the walk cannot be resolved
        """
        options = options or DescribeOptions()
        start = self._graph.get_commit(start_id)

        exact = self._index.lookup(start.id)
        if exact:
            return self._result(start.id, rank_tags(exact)[0], 0, options, dirty)

        if options.exact_match:
            raise NoReachableTagError("No tag exactly matches the commit", commit=start.id)

        found = self._search(start)
        if found is None:
            if options.always:
                return self._result(start.id, None, 0, options, dirty)
            raise NoReachableTagError(
                "No names found, cannot describe anything", commit=start.id
            )

        distance, candidates = found
        return self._result(start.id, rank_tags(candidates)[0], distance, options, dirty)

    def _search(self, start: CommitRef) -> tuple[int, list[TagCandidate]] | None:
        """
        Breadth-first walk from ``start`` (exclusive) to the nearest tags.

        Returns:
            (distance, tags on every tagged commit at that distance), or
            None if no ancestor carries an eligible tag
        """
        distances: dict[str, int] = {start.id: 0}
        pending: deque[tuple[str, int]] = deque([(start.id, 0)])
        best_distance: int | None = None
        candidates: list[TagCandidate] = []

        while pending:
            commit_id, distance = pending.popleft()
            if best_distance is not None and distance >= best_distance:
                break

            commit = start if commit_id == start.id else self._graph.get_commit(commit_id)
            for parent_id in commit.parents:
                if parent_id in distances:
                    continue
                distances[parent_id] = distance + 1

                tags = self._index.lookup(parent_id)
                if tags:
                    best_distance = distance + 1
                    candidates.extend(tags)
                pending.append((parent_id, distance + 1))

        if best_distance is None:
            return None
        return best_distance, candidates

    def _result(
        self,
        commit_id: str,
        tag: TagCandidate | None,
        distance: int,
        options: DescribeOptions,
        dirty: bool,
    ) -> DescribeResult:
        return DescribeResult(
            tag=tag,
            commits_ahead=distance,
            commit_id=commit_id,
            abbreviated_id=self._graph.abbreviate(commit_id, options.abbrev),
            dirty=dirty,
            long=options.long,
            dirty_marker=options.dirty_marker,
        )


def describe(
    graph: ICommitGraph,
    tags: Iterable[TagCandidate],
    start_id: str,
    options: DescribeOptions | None = None,
    dirty: bool = False,
) -> DescribeResult:
    """Build a TagIndex for ``options`` and describe ``start_id`` in one call."""
    options = options or DescribeOptions()
    index = TagIndex.build(
        tags,
        match_patterns=options.match_patterns,
        exclude_patterns=options.exclude_patterns,
        include_lightweight=options.include_lightweight,
    )
    return DescribeEngine(graph, index).describe(start_id, options, dirty=dirty)
