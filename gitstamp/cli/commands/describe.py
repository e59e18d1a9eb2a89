"""
Native Click implementation of the describe command.

Usage: gitstamp describe [REV] [--tags] [--match GLOB] [--dirty[=MARK]] ...
"""

from __future__ import annotations

import click

from ...core.models.describe import DEFAULT_DIRTY_MARKER
from ..context import GitstampContext
from ..decorators import handle_errors, require_git


def _check_dirty_marker(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    # "--dirty HEAD" would otherwise consume the revision as the marker
    if value is not None and not value.startswith("-"):
        raise click.BadParameter(
            f"marker must start with '-' (use --dirty=-MARK); got {value!r}"
        )
    return value


@click.command("describe")
@click.argument("rev", default="HEAD")
@click.option(
    "--tags/--no-tags",
    "tags",
    default=None,
    help="Consider lightweight tags as well as annotated ones.",
)
@click.option(
    "--match",
    "match",
    multiple=True,
    metavar="GLOB",
    help="Only consider tags matching GLOB (repeatable).",
)
@click.option(
    "--exclude",
    "exclude",
    multiple=True,
    metavar="GLOB",
    help="Do not consider tags matching GLOB (repeatable).",
)
@click.option(
    "--always/--no-always",
    "always",
    default=None,
    help="Show the abbreviated commit id when no tag is reachable.",
)
@click.option("--long", "long_format", is_flag=True, default=None, help="Always use the long format.")
@click.option("--abbrev", type=click.IntRange(4, 64), default=None, help="Minimum hash length.")
@click.option(
    "--dirty",
    "dirty_marker",
    is_flag=False,
    flag_value=DEFAULT_DIRTY_MARKER,
    default=None,
    metavar="[=MARK]",
    callback=_check_dirty_marker,
    help=(
        f"Append MARK (default '{DEFAULT_DIRTY_MARKER}') if the working tree is dirty. "
        "MARK must be attached with '=' and start with '-'."
    ),
)
@click.option("--exact-match", is_flag=True, default=None, help="Only output exact tag matches.")
@click.pass_obj
@require_git
@handle_errors
def describe(
    ctx: GitstampContext,
    rev: str,
    tags: bool | None,
    match: tuple[str, ...],
    exclude: tuple[str, ...],
    always: bool | None,
    long_format: bool | None,
    abbrev: int | None,
    dirty_marker: str | None,
    exact_match: bool | None,
) -> None:
    """Name REV (default HEAD) after the nearest reachable tag."""
    options = ctx.settings.describe.to_options(
        match_patterns=match or None,
        exclude_patterns=exclude or None,
        include_lightweight=tags,
        always=always,
        long=long_format,
        abbrev=abbrev,
        dirty_marker=dirty_marker,
        exact_match=exact_match,
    )

    result = ctx.describe_service().describe(rev, options)
    click.echo(result.label)
