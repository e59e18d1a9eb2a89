"""
Click decorators for gitstamp CLI commands.

- require_git: Ensures we're in a git repository
- handle_errors: Turns gitstamp exceptions into Click errors
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ..core.exceptions import GitstampException

if TYPE_CHECKING:
    from .context import GitstampContext

F = TypeVar("F", bound=Callable[..., Any])


class GitstampClickException(click.ClickException):
    """ClickException carrying the exit code of the underlying error."""

    def __init__(self, error: GitstampException) -> None:
        super().__init__(str(error))
        self.exit_code = error.exit_code


def require_git(f: F) -> F:
    """Decorator to require a git repository.

    Usage:
        @click.command()
        @click.pass_obj
        @require_git
        def describe(ctx: GitstampContext, rev: str):
            ...

    Note:
        This decorator should be applied AFTER @click.pass_obj so that
        the GitstampContext is available.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx_maybe: Any = args[0] if args else kwargs.get("ctx")

        if ctx_maybe is None:
            raise click.ClickException(
                "Internal error: GitstampContext not available. "
                "Ensure @click.pass_obj is applied before @require_git."
            )
        ctx: GitstampContext = ctx_maybe

        if not ctx.has_repo:
            raise click.ClickException(
                "Not in a git repository.\n"
                "gitstamp reads tags and history from the enclosing git repository."
            )

        return f(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def handle_errors(f: F) -> F:
    """Decorator converting GitstampException into a Click error with its exit code."""

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except GitstampException as e:
            raise GitstampClickException(e) from e

    return wrapper  # type: ignore[return-value]
