"""
gitstamp - human-readable version labels from git history.

Library usage:
    from gitstamp import DescribeOptions, DescribeService, GitRepository

    service = DescribeService(GitRepository("."))
    print(service.describe("HEAD", DescribeOptions(include_lightweight=True)))
"""

from .core.exceptions import (
    DescribeError,
    GitstampException,
    InvalidPatternError,
    MalformedGraphError,
    NoReachableTagError,
)
from .core.models import CommitRef, DescribeOptions, DescribeResult, TagCandidate
from .describe import DescribeEngine, TagIndex
from .plugins.vcs import GitRepository, InMemoryRepository
from .services import DescribeService

__all__ = [
    "CommitRef",
    "DescribeEngine",
    "DescribeError",
    "DescribeOptions",
    "DescribeResult",
    "DescribeService",
    "GitRepository",
    "GitstampException",
    "InMemoryRepository",
    "InvalidPatternError",
    "MalformedGraphError",
    "NoReachableTagError",
    "TagCandidate",
    "TagIndex",
]
