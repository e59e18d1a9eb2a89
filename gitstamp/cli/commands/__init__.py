"""
Click command implementations for gitstamp CLI.

Each module corresponds to a gitstamp command (e.g., describe.py
implements 'gitstamp describe'). Commands are registered with the main
CLI group via register_commands() in gitstamp.cli.
"""

from .describe import describe
from .tags import tags

COMMANDS = [
    describe,
    tags,
]

__all__ = [
    "COMMANDS",
    "describe",
    "tags",
]
