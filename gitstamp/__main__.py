"""
Entry point for the `gitstamp` command-line interface.

gitstamp names a commit after the nearest reachable tag ("v1.2-3-gabc1234"),
for build tooling that stamps artifacts with a version derived from
repository state.
"""


def main():
    """Main entry point for the gitstamp CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
