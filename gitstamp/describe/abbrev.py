"""Unique abbreviation of commit ids."""

from __future__ import annotations

from collections.abc import Iterable


def _common_prefix_len(a: str, b: str) -> int:
    n = min(len(a), len(b))
    for i in range(n):
        if a[i] != b[i]:
            return i
    return n


def shortest_unique_prefix(commit_id: str, known_ids: Iterable[str], min_length: int) -> str:
    """
    Return the shortest prefix of ``commit_id`` that no other known id shares.

    The prefix is at least ``min_length`` characters and never longer than
    ``commit_id`` itself.

    Args:
        commit_id: Full commit id to abbreviate
        known_ids: Every commit id in the repository (may include commit_id)
        min_length: Minimum prefix length

    Returns:
        Abbreviated id
    """
    if min_length >= len(commit_id):
        return commit_id

    longest_shared = 0
    for other in known_ids:
        if other == commit_id:
            continue
        longest_shared = max(longest_shared, _common_prefix_len(commit_id, other))

    return commit_id[: max(min_length, longest_shared + 1)]
