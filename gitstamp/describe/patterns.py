"""
Shell-style glob matching for tag names.

Patterns are anchored and case-sensitive, like ``git describe --match``:

- ``*`` matches any run of characters (including ``/``)
- ``?`` matches exactly one character
- ``[abc]``, ``[a-z]``, ``[!a-z]`` / ``[^a-z]`` match character classes
- ``\\x`` matches ``x`` literally

Unlike :func:`fnmatch.translate`, malformed patterns are rejected instead of
being silently treated as literals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..core.exceptions import InvalidPatternError


@dataclass(frozen=True)
class GlobPattern:
    """A compiled glob pattern."""

    pattern: str
    regex: re.Pattern[str] = field(repr=False, compare=False)

    def matches(self, name: str) -> bool:
        """Return True if the whole of ``name`` matches the pattern."""
        return self.regex.fullmatch(name) is not None


def compile_glob(pattern: str) -> GlobPattern:
    """
    Compile a glob pattern.

    Args:
        pattern: Glob pattern, e.g. ``v[0-9]*`` or ``release-?.*``

    Returns:
        GlobPattern usable for anchored matching

    Raises:
        InvalidPatternError: If the pattern is empty or malformed
    """
    if not pattern:
        raise InvalidPatternError("Empty tag pattern", pattern=pattern)

    parts: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif c == "?":
            parts.append(".")
        elif c == "\\":
            if i >= n:
                raise InvalidPatternError("Trailing backslash in tag pattern", pattern=pattern)
            parts.append(re.escape(pattern[i]))
            i += 1
        elif c == "[":
            char_class, i = _parse_class(pattern, i)
            parts.append(char_class)
        else:
            parts.append(re.escape(c))

    return GlobPattern(pattern=pattern, regex=re.compile("".join(parts), re.DOTALL))


def compile_globs(patterns: tuple[str, ...] | list[str]) -> tuple[GlobPattern, ...]:
    """Compile several patterns, failing on the first invalid one."""
    return tuple(compile_glob(p) for p in patterns)


def _parse_class(pattern: str, start: int) -> tuple[str, int]:
    """Translate a ``[...]`` class beginning after ``[``; return regex and next index."""
    n = len(pattern)
    j = start
    negate = False
    if j < n and pattern[j] in "!^":
        negate = True
        j += 1

    items: list[str] = []
    first = True
    while True:
        if j >= n:
            raise InvalidPatternError("Unterminated character class in tag pattern", pattern=pattern)
        c = pattern[j]
        if c == "]" and not first:
            j += 1
            break
        first = False

        c, j = _class_char(pattern, j)
        # A '-' right before the closing ']' is literal
        if j + 1 < n and pattern[j] == "-" and pattern[j + 1] != "]":
            hi, j = _class_char(pattern, j + 1)
            if hi < c:
                raise InvalidPatternError(
                    f"Reversed range {c}-{hi} in tag pattern", pattern=pattern
                )
            items.append(f"{re.escape(c)}-{re.escape(hi)}")
        else:
            items.append(re.escape(c))

    return f"[{'^' if negate else ''}{''.join(items)}]", j


def _class_char(pattern: str, j: int) -> tuple[str, int]:
    if pattern[j] == "\\":
        j += 1
        if j >= len(pattern):
            raise InvalidPatternError("Unterminated character class in tag pattern", pattern=pattern)
    return pattern[j], j + 1
