"""
Click context extension for gitstamp CLI.

Provides GitstampContext dataclass that holds gitstamp-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.interfaces.logger import ILogger
from ..core.settings import GitstampSettings, load_settings
from ..plugins.vcs.git import GitRepository
from ..services.describe import DescribeService
from ..services.logging import GitstampLogger


@dataclass
class GitstampContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Directory the command runs against
        repo_root: Path to git repository root (None if not in a repo)
        settings: Merged configuration
        logger: Diagnostic logger (stderr / log file)
    """

    cwd: Path
    repo_root: Path | None
    settings: GitstampSettings
    logger: ILogger

    @classmethod
    def create(
        cls,
        cwd: Path | None = None,
        config_path: Path | None = None,
        verbose: bool = False,
    ) -> GitstampContext:
        """Create a GitstampContext for the given directory.

        Args:
            cwd: Working directory override (defaults to Path.cwd())
            config_path: Explicit config file
            verbose: Log debug output to stderr

        Returns:
            Configured GitstampContext instance
        """
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(config_path=config_path, start_dir=str(cwd))
        logger = GitstampLogger.from_config(settings.logging, verbose=verbose)
        if settings.config_error:
            logger.warning("%s; using defaults", settings.config_error)
        elif settings.config_file:
            logger.debug("Loaded config from %s", settings.config_file)

        root = GitRepository.get_repo_root(str(cwd))
        return cls(
            cwd=cwd,
            repo_root=Path(root) if root else None,
            settings=settings,
            logger=logger,
        )

    @property
    def has_repo(self) -> bool:
        """Check if we're in a git repository."""
        return self.repo_root is not None

    def describe_service(self) -> DescribeService:
        """Create a DescribeService over the current repository."""
        if self.repo_root is None:
            raise RuntimeError("describe_service() requires a git repository")
        return DescribeService(GitRepository(self.repo_root), logger=self.logger)
