"""
The describe core: tag eligibility, nearest-tag search and ranking.

Pure with respect to repository state; storage is reached only through
the collaborator interfaces in :mod:`gitstamp.core.interfaces`.
"""

from .abbrev import shortest_unique_prefix
from .engine import DescribeEngine, describe, rank_tags
from .patterns import GlobPattern, compile_glob
from .tag_index import TagIndex

__all__ = [
    "DescribeEngine",
    "GlobPattern",
    "TagIndex",
    "compile_glob",
    "describe",
    "rank_tags",
    "shortest_unique_prefix",
]
