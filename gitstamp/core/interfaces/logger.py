"""
Logger interface for diagnostic output.

The describe core does not log. Callers (the describe service and the
CLI) report outcomes and errors through this interface; the label
itself is written to stdout by the CLI, never through a logger.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Diagnostic logger used by services and commands."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def set_level(self, level: str) -> None:
        """
        Set the logging level.

        Args:
            level: One of 'debug', 'info', 'warning', 'error'
        """
        pass
