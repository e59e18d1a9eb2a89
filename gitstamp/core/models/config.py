"""
Configuration models.

Provides Pydantic models for gitstamp configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import GitstampBaseModel
from .describe import DEFAULT_ABBREV, DEFAULT_DIRTY_MARKER, DescribeOptions

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(GitstampBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class DescribeConfig(ConfigBaseModel):
    """Describe configuration section ([describe] / [tool.gitstamp.describe])."""

    match: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    tags: bool = False
    always: bool = False
    abbrev: int = DEFAULT_ABBREV
    long: bool = False
    dirty: bool = False
    dirty_marker: str = DEFAULT_DIRTY_MARKER

    @field_validator("match", "exclude", mode="before")
    @classmethod
    def split_patterns(cls, v: Any) -> Any:
        """Accept a single pattern or a comma-separated string (env vars)."""
        if isinstance(v, str):
            return [p.strip() for p in v.split(",") if p.strip()]
        return v

    @field_validator("abbrev")
    @classmethod
    def validate_abbrev(cls, v: int) -> int:
        if not 4 <= v <= 64:
            raise ValueError("abbrev must be between 4 and 64")
        return v

    def to_options(self, **overrides: Any) -> DescribeOptions:
        """Build DescribeOptions, letting non-None overrides win."""
        values: dict[str, Any] = {
            "match_patterns": tuple(self.match),
            "exclude_patterns": tuple(self.exclude),
            "include_lightweight": self.tags,
            "always": self.always,
            "abbrev": self.abbrev,
            "long": self.long,
            "dirty_marker": self.dirty_marker if self.dirty else None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return DescribeOptions(**values)


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
