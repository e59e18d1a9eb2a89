"""
Repository provider plugins.

Provides the storage collaborators the describe core reads from.
"""

from .base import BaseRepositoryProvider
from .git import GitRepository
from .memory import InMemoryRepository

__all__ = [
    "BaseRepositoryProvider",
    "GitRepository",
    "InMemoryRepository",
]
