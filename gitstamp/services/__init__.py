"""
Services for gitstamp.

Services:
- DescribeService: Describe revisions of a repository
- GitstampLogger / NullLogger: Diagnostic logging
"""

from .describe import DescribeService
from .logging import GitstampLogger, NullLogger

__all__ = [
    "DescribeService",
    "GitstampLogger",
    "NullLogger",
]
