"""
Click-based CLI for gitstamp.

Usage:
    from gitstamp.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import GitstampException
from .context import GitstampContext

try:
    from importlib.metadata import version

    __version__ = version("gitstamp")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gitstamp")
@click.option(
    "-C",
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Run as if started in DIRECTORY.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this TOML file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    directory: Path | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """gitstamp - version labels from git history

    Names a commit after the nearest reachable tag, the way
    `git describe` does, for stamping build artifacts.

    \b
    Commands:
        gitstamp describe [REV]   Describe REV (default HEAD)
        gitstamp tags             List tags eligible for describe
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        ctx.obj = GitstampContext.create(
            cwd=directory, config_path=config_path, verbose=verbose
        )
    except GitstampException as e:
        raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "GitstampContext",
    "__version__",
    "cli",
    "register_commands",
]
