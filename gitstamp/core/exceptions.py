"""
Custom exception hierarchy for gitstamp.

Every error a describe call can surface is an explicit, typed exception
carrying the offending identifier in its context, so callers can report
it without the core doing any logging of its own.
"""

from __future__ import annotations


class GitstampException(Exception):
    """
    Base exception for all gitstamp errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (commit ids, patterns, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether the caller can recover by changing its input
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Describe Errors
# =============================================================================


class DescribeError(GitstampException):
    """Base class for errors raised by a describe call."""

    pass


class NoReachableTagError(DescribeError):
    """
    No eligible tag is reachable from the starting commit.

    Raised when traversal exhausts the history and the hash fallback is
    disabled. Recoverable by enabling the fallback or relaxing the filters.
    """

    exit_code: int = 128

    def __init__(
        self,
        message: str,
        *,
        commit: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if commit:
            ctx["commit"] = commit
        super().__init__(message, context=ctx, cause=cause)
        self.commit = commit


class MalformedGraphError(DescribeError):
    """
    A referenced commit cannot be resolved by the storage layer.

    A missing object is not transient, so the call is aborted and never
    retried.
    """

    exit_code: int = 128
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        object_id: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if object_id:
            ctx["object_id"] = object_id
        super().__init__(message, context=ctx, cause=cause)
        self.object_id = object_id


class InvalidPatternError(DescribeError, ValueError):
    """
    A configured glob pattern is syntactically invalid.

    Raised while building the tag index, before any traversal work.
    Inherits from ValueError so it can surface through model validation.
    """

    def __init__(
        self,
        message: str,
        *,
        pattern: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if pattern is not None:
            ctx["pattern"] = pattern
        super().__init__(message, context=ctx, cause=cause)
        self.pattern = pattern


# =============================================================================
# Git Errors
# =============================================================================


class GitCommandError(GitstampException):
    """
    The git executable failed or is not installed.

    Raised by the git storage provider for anything other than a missing
    object, which is reported as MalformedGraphError instead.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        stderr: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = " ".join(command)
        if stderr:
            ctx["stderr"] = stderr
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Configuration Errors
# =============================================================================


class GitstampConfigError(GitstampException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(GitstampConfigError):
    """
    Error reading or parsing a configuration file.

    Raised when an explicitly requested config file is missing or unreadable.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(GitstampConfigError, ValueError):
    """Invalid configuration value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidArgumentError(GitstampException, ValueError):
    """
    Invalid command-line argument or function parameter.

    Raised when user input fails validation.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
