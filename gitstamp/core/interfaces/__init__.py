"""
Interfaces for gitstamp collaborators.

Storage is consumed through these abstractions, never directly.
"""

from .logger import ILogger
from .repository import ICommitGraph, IDirtyState, IRepository, ITagReader

__all__ = [
    "ICommitGraph",
    "IDirtyState",
    "ILogger",
    "IRepository",
    "ITagReader",
]
