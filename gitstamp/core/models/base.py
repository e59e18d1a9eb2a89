"""
Base Pydantic models for gitstamp.

Provides common configuration and base classes for all gitstamp models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GitstampBaseModel(BaseModel):
    """Base model for all gitstamp Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
        - revalidate_instances: Trust model instances (performance)
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ImmutableModel(GitstampBaseModel):
    """Immutable base model for values that must not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )
