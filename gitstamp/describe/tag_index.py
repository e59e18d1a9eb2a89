"""
Eligible-tag index for a single describe call.

Classifies every tag in the repository as eligible or not for the
current options and exposes constant-time lookup from a commit id to
the eligible tags that target it.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator

from ..core.models.graph import TagCandidate
from .patterns import GlobPattern, compile_globs


class TagIndex:
    """
    Mapping from commit id to the eligible tags targeting it.

    Built once per describe call and read-only afterwards. Lookups return
    tags in no particular order; ranking is left to the caller.

    Usage:
        index = TagIndex.build(repo.list_tags(), match_patterns=("v*",))
        tags_on_head = index.lookup(head_id)
    """

    def __init__(self, by_commit: dict[str, tuple[TagCandidate, ...]]) -> None:
        self._by_commit = by_commit

    @classmethod
    def build(
        cls,
        all_tags: Iterable[TagCandidate],
        match_patterns: Iterable[str] = (),
        exclude_patterns: Iterable[str] = (),
        include_lightweight: bool = False,
    ) -> TagIndex:
        """
        Build the index from every tag known to the repository.

        A tag is eligible iff it is annotated (or lightweight tags are
        included), it matches at least one match pattern (or none are
        given), and it matches no exclude pattern.

        Args:
            all_tags: Every tag reference in the repository
            match_patterns: Glob patterns a tag name must match
            exclude_patterns: Glob patterns a tag name must not match
            include_lightweight: Whether lightweight tags are eligible

        Returns:
            TagIndex of eligible tags (possibly empty)

        Raises:
            InvalidPatternError: If any pattern is malformed
        """
        matchers = compile_globs(list(match_patterns))
        excluders = compile_globs(list(exclude_patterns))

        grouped: dict[str, list[TagCandidate]] = defaultdict(list)
        for tag in all_tags:
            if cls._is_eligible(tag, matchers, excluders, include_lightweight):
                grouped[tag.target].append(tag)

        return cls({commit_id: tuple(tags) for commit_id, tags in grouped.items()})

    @staticmethod
    def _is_eligible(
        tag: TagCandidate,
        matchers: tuple[GlobPattern, ...],
        excluders: tuple[GlobPattern, ...],
        include_lightweight: bool,
    ) -> bool:
        if not (include_lightweight or tag.annotated):
            return False
        if matchers and not any(m.matches(tag.name) for m in matchers):
            return False
        return not any(x.matches(tag.name) for x in excluders)

    def lookup(self, commit_id: str) -> tuple[TagCandidate, ...]:
        """Return the eligible tags targeting ``commit_id`` (empty if none)."""
        return self._by_commit.get(commit_id, ())

    def __contains__(self, commit_id: object) -> bool:
        return commit_id in self._by_commit

    def __iter__(self) -> Iterator[TagCandidate]:
        for tags in self._by_commit.values():
            yield from tags

    def __len__(self) -> int:
        return sum(len(tags) for tags in self._by_commit.values())

    @property
    def is_empty(self) -> bool:
        return not self._by_commit
