"""
Describe service.

Wires a repository provider to the describe core: resolves the revision,
reads tags into a TagIndex, consults the dirty signal and runs the
engine. This is the layer that logs; the core does not.
"""

from __future__ import annotations

from ..core.exceptions import GitstampException, InvalidArgumentError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.repository import IRepository
from ..core.models.describe import DescribeOptions, DescribeResult
from ..core.models.graph import TagCandidate
from ..describe.engine import DescribeEngine, rank_tags
from ..describe.tag_index import TagIndex
from .logging import NullLogger


class DescribeService:
    """
    Service for describing revisions of a repository.

    Usage:
        service = DescribeService(GitRepository(repo_root))
        result = service.describe("HEAD", DescribeOptions(include_lightweight=True))
        print(result.label)
    """

    def __init__(self, repository: IRepository, logger: ILogger | None = None) -> None:
        self._repo = repository
        self._logger = logger or NullLogger()

    def build_index(self, options: DescribeOptions) -> TagIndex:
        """Build the eligible-tag index for ``options``."""
        return TagIndex.build(
            self._repo.list_tags(),
            match_patterns=options.match_patterns,
            exclude_patterns=options.exclude_patterns,
            include_lightweight=options.include_lightweight,
        )

    def describe(self, rev: str = "HEAD", options: DescribeOptions | None = None) -> DescribeResult:
        """
        Describe ``rev``.

        The dirty signal is only consulted when a dirty marker is set, and
        only for HEAD: the working state says nothing about other commits.

        Args:
            rev: Revision to describe
            options: Describe options (defaults apply when None)

        Returns:
            DescribeResult for the revision

        Raises:
            InvalidArgumentError: Unknown revision, or dirty marker with rev != HEAD
            InvalidPatternError: A match or exclude pattern is malformed
            NoReachableTagError: No eligible tag reachable and no fallback
            MalformedGraphError: The commit graph references a missing object
        """
        options = options or DescribeOptions()
        try:
            if options.dirty_marker is not None and rev != "HEAD":
                raise InvalidArgumentError(
                    "A dirty marker can only be used when describing HEAD",
                    argument="rev",
                    value=rev,
                )
            index = self.build_index(options)
            start_id = self._repo.resolve(rev)
            dirty = options.dirty_marker is not None and self._repo.is_dirty()

            self._logger.debug(
                "Describing %s (%s) against %d eligible tag(s)", rev, start_id, len(index)
            )
            result = DescribeEngine(self._repo, index).describe(start_id, options, dirty=dirty)
        except GitstampException as e:
            self._logger.warning("Describe of %s failed: %s", rev, e)
            raise

        self._logger.debug("Described %s as %s", rev, result.label)
        return result

    def eligible_tags(self, options: DescribeOptions | None = None) -> list[TagCandidate]:
        """Return the tags eligible under ``options``, newest first."""
        return rank_tags(self.build_index(options or DescribeOptions()))
