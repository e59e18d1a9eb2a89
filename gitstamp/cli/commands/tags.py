"""
Native Click implementation of the tags command.

Usage: gitstamp tags [--tags] [--match GLOB] [--exclude GLOB]
"""

from __future__ import annotations

import click

from ..context import GitstampContext
from ..decorators import handle_errors, require_git


@click.command("tags")
@click.option("--tags/--no-tags", "tags", default=None, help="Include lightweight tags.")
@click.option("--match", "match", multiple=True, metavar="GLOB", help="Only tags matching GLOB.")
@click.option("--exclude", "exclude", multiple=True, metavar="GLOB", help="Skip tags matching GLOB.")
@click.pass_obj
@require_git
@handle_errors
def tags(
    ctx: GitstampContext,
    tags: bool | None,
    match: tuple[str, ...],
    exclude: tuple[str, ...],
) -> None:
    """List the tags describe would consider, newest first."""
    options = ctx.settings.describe.to_options(
        match_patterns=match or None,
        exclude_patterns=exclude or None,
        include_lightweight=tags,
    )

    eligible = ctx.describe_service().eligible_tags(options)
    if not eligible:
        click.echo("No eligible tags.", err=True)
        return

    width = max(len(tag.name) for tag in eligible)
    for tag in eligible:
        click.echo(
            f"{tag.name:<{width}}  {tag.kind:<11}  {tag.target[: options.abbrev]}  "
            f"{tag.timestamp.isoformat()}"
        )
