"""
Domain models for gitstamp.

Re-exports the Pydantic models used across the describe core, the storage
providers and the CLI.
"""

from .base import GitstampBaseModel, ImmutableModel
from .config import DescribeConfig, LoggingConfig
from .describe import DEFAULT_ABBREV, DEFAULT_DIRTY_MARKER, DescribeOptions, DescribeResult
from .graph import CommitRef, ObjectId, TagCandidate

__all__ = [
    "DEFAULT_ABBREV",
    "DEFAULT_DIRTY_MARKER",
    "CommitRef",
    "DescribeConfig",
    "DescribeOptions",
    "DescribeResult",
    "GitstampBaseModel",
    "ImmutableModel",
    "LoggingConfig",
    "ObjectId",
    "TagCandidate",
]
