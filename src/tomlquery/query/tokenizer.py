"""Path string tokenizer.

A path is a list of segments joined by a one-character separator (``.`` by
default). A segment written as ``[N]`` becomes an :class:`Index` step, any
other non-empty segment becomes a :class:`Key` step.
"""

from __future__ import annotations

import re

from ..config import QUERY_CONFIG
from ..errors import MalformedPath
from .steps import Index, Key, QueryPath, Step

# ASCII digits only; ``\d`` would also accept other Unicode digits
_INDEX_PATTERN = re.compile(r"\[([0-9]+)\]")

_RESERVED_SEPARATORS = frozenset("[]")


def check_separator(separator: str) -> str:
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    if separator in _RESERVED_SEPARATORS:
        raise ValueError(f"separator {separator!r} is reserved for index steps")
    return separator


def _make_step(segment: str, position: int, path: str) -> Step:
    if not segment:
        raise MalformedPath(position, "empty segment", path)

    if segment.startswith("["):
        match = _INDEX_PATTERN.fullmatch(segment)
        if match is None:
            raise MalformedPath(
                position, f"index segment {segment!r} must be [digits]", path
            )
        return Index(position=int(match.group(1)))

    if "[" in segment:
        raise MalformedPath(
            position + segment.index("["),
            f"key segment {segment!r} contains '['",
            path,
        )
    return Key(name=segment)


def tokenize(path: str, separator: str | None = None) -> QueryPath:
    """Split ``path`` into steps.

    Raises :class:`MalformedPath` for an empty path, an empty segment (leading,
    trailing or doubled separator) or a bracketed segment that is not a
    non-negative decimal index.
    """

    if separator is None:
        separator = QUERY_CONFIG.separator
    check_separator(separator)

    if not path:
        raise MalformedPath(0, "empty path", path)

    steps: list[Step] = []
    position = 0
    for segment in path.split(separator):
        steps.append(_make_step(segment, position, path))
        position += len(segment) + 1

    return QueryPath(steps=tuple(steps), separator=separator)


def as_query_path(path: str | QueryPath, separator: str | None = None) -> QueryPath:
    """Accept either a path string or an already tokenized path."""

    if isinstance(path, QueryPath):
        return path
    return tokenize(path, separator)


__all__ = ["as_query_path", "check_separator", "tokenize"]
