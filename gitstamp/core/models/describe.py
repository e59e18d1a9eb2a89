"""
Describe configuration and result models.

DescribeOptions is the configuration surface a describe call recognizes;
DescribeResult is the outcome, whose rendering is the only byte-exact
output of the tool.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field, computed_field

from .base import ImmutableModel
from .graph import ObjectId, TagCandidate

DEFAULT_ABBREV = 7
DEFAULT_DIRTY_MARKER = "-dirty"


class DescribeOptions(ImmutableModel):
    """Options for a single describe call.

    Attributes:
        match_patterns: Only tags matching at least one glob are eligible
        exclude_patterns: Tags matching any of these globs are ineligible
        include_lightweight: Consider lightweight tags, not only annotated ones
        always: Fall back to the abbreviated hash when no tag is reachable
        abbrev: Minimum length of the abbreviated commit id
        long: Always render the ``tag-N-gHASH`` form, even on an exact match
        dirty_marker: Suffix appended when the working state is dirty;
            None disables dirty marking
        exact_match: Only accept a tag on the starting commit itself
    """

    model_config = ConfigDict(
        frozen=True,
        strict=False,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )

    match_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    include_lightweight: bool = False
    always: bool = False
    abbrev: Annotated[int, Field(ge=4, le=64)] = DEFAULT_ABBREV
    long: bool = False
    dirty_marker: str | None = None
    exact_match: bool = False


class DescribeResult(ImmutableModel):
    """Outcome of a describe call.

    ``tag`` is None when no tag was reachable and the hash fallback was used.
    """

    tag: TagCandidate | None = None
    commits_ahead: Annotated[int, Field(ge=0)] = 0
    commit_id: ObjectId
    abbreviated_id: ObjectId
    dirty: bool = False
    long: bool = False
    dirty_marker: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def label(self) -> str:
        """Render the describe label."""
        if self.tag is None:
            text = self.abbreviated_id
        elif self.commits_ahead == 0 and not self.long:
            text = self.tag.name
        else:
            text = f"{self.tag.name}-{self.commits_ahead}-g{self.abbreviated_id}"

        if self.dirty and self.dirty_marker:
            text += self.dirty_marker
        return text

    @property
    def is_exact(self) -> bool:
        return self.tag is not None and self.commits_ahead == 0

    def __str__(self) -> str:
        return self.label
