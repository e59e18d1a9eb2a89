"""
Base repository provider.

Defines the shared shape of storage providers that back the describe core.
"""

from abc import abstractmethod

from ...core.interfaces.repository import IRepository


class BaseRepositoryProvider(IRepository):
    """
    Abstract base class for repository providers.

    A provider is the single collaborator a describe call needs: it
    resolves revisions, reads commits and tags, and reports dirty state.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the provider name (e.g., 'git', 'memory')."""
        pass
