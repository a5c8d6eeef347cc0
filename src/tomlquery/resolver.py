"""Read, set, insert and delete values addressed by a path.

Every call tokenizes (or accepts) a path and walks it from the document root;
no node references are kept between calls. Mutating calls check the whole
path before touching the document, so a call that raises leaves the document
as it was.
"""

from __future__ import annotations

import copy
from typing import Final, TypeAlias, assert_never

from .errors import IndexOutOfBounds, MalformedPath, NotAnArray, NotATable, NotFound
from .query import Index, Key, QueryPath, Step, as_query_path
from .runtime.logging import get_logger
from .value import Value, ValueKind, kind_of, validate_value

PathLike: TypeAlias = str | QueryPath

_OP_COLORS: Final = {
    "read": "cyan",
    "set": "yellow",
    "insert": "green",
    "delete": "red",
}


class _Absent:
    """Sentinel for a key step whose entry is missing."""


_ABSENT: Final = _Absent()


def _log_op(operation: str, query: QueryPath) -> None:
    get_logger().debug(
        "%s %s",
        operation,
        query,
        extra={"tomlquery_op_color": _OP_COLORS[operation]},
    )


def _lookup(node: Value, step: Step) -> Value | _Absent:
    """Apply one step; a missing key yields ``_ABSENT`` instead of raising."""

    match step:
        case Key(name=name):
            if not isinstance(node, dict):
                raise NotATable(step, kind_of(node))
            return node.get(name, _ABSENT)
        case Index(position=position):
            if not isinstance(node, list):
                raise NotAnArray(step, kind_of(node))
            if position >= len(node):
                raise IndexOutOfBounds(position, len(node))
            return node[position]
        case _:
            assert_never(step)


def _walk(doc: Value, query: QueryPath, depth: int) -> Value:
    """Resolve the first ``depth`` steps of ``query`` with read semantics."""

    node = doc
    for matched, step in enumerate(query.steps[:depth]):
        child = _lookup(node, step)
        if isinstance(child, _Absent):
            raise NotFound(query.prefix(matched), step)
        node = child
    return node


def _terminal(query: QueryPath) -> Step:
    if not query.steps:
        raise MalformedPath(0, "empty path")
    return query.last


def read(doc: Value, path: PathLike, *, separator: str | None = None) -> Value:
    """Return the node ``path`` points at.

    The node is returned as stored in the document, not copied.
    """

    query = as_query_path(path, separator)
    _terminal(query)
    node = _walk(doc, query, len(query.steps))
    _log_op("read", query)
    return node


def set(
    doc: Value, path: PathLike, value: Value, *, separator: str | None = None
) -> Value:
    """Replace the node at ``path`` and return the value it held.

    The path must already resolve; nothing is created. Tables and arrays are
    stored as deep copies.
    """

    query = as_query_path(path, separator)
    last = _terminal(query)
    validate_value(value)

    parent = _walk(doc, query, len(query.steps) - 1)
    previous = _lookup(parent, last)
    if isinstance(previous, _Absent):
        raise NotFound(query.parent, last)

    _log_op("set", query)
    _assign(parent, last, _owned(value))
    return previous


def insert(
    doc: Value, path: PathLike, value: Value, *, separator: str | None = None
) -> bool:
    """Write ``value`` at ``path``, creating missing intermediate tables.

    Returns ``True`` when the terminal entry did not exist before and
    ``False`` when an existing entry was overwritten. Index steps are never
    created: an index past the end of its array raises
    :class:`IndexOutOfBounds`, and an index step below a table that would have
    to be created raises :class:`NotAnArray`. Tables and arrays are stored as
    deep copies.
    """

    query = as_query_path(path, separator)
    last = _terminal(query)
    validate_value(value)
    value = _owned(value)

    ancestors = query.steps[:-1]
    node = doc
    existing = 0
    for step in ancestors:
        child = _lookup(node, step)
        if isinstance(child, _Absent):
            break
        node = child
        existing += 1

    missing = ancestors[existing:]
    if missing:
        # Everything below the first missing key lands in fresh tables.
        for step in (*missing[1:], last):
            if isinstance(step, Index):
                raise NotAnArray(step, ValueKind.TABLE)
        _log_op("insert", query)
        for step in missing:
            assert isinstance(step, Key) and isinstance(node, dict)
            table: Value = {}
            node[step.name] = table
            node = table
        _assign(node, last, value)
        return True

    current = _lookup(node, last)
    _log_op("insert", query)
    _assign(node, last, value)
    return isinstance(current, _Absent)


def delete(doc: Value, path: PathLike, *, separator: str | None = None) -> bool:
    """Remove the entry at ``path``.

    Returns ``False`` without raising when every ancestor exists but the
    terminal entry does not. Removing an array element shifts every later
    element down by one, so paths computed earlier against those positions
    address different elements afterwards.
    """

    query = as_query_path(path, separator)
    last = _terminal(query)

    parent = _walk(doc, query, len(query.steps) - 1)
    match last:
        case Key(name=name):
            if not isinstance(parent, dict):
                raise NotATable(last, kind_of(parent))
            _log_op("delete", query)
            if name not in parent:
                return False
            del parent[name]
            return True
        case Index(position=position):
            if not isinstance(parent, list):
                raise NotAnArray(last, kind_of(parent))
            _log_op("delete", query)
            if position >= len(parent):
                return False
            del parent[position]
            return True
        case _:
            assert_never(last)


def _owned(value: Value) -> Value:
    if isinstance(value, (dict, list)):
        return copy.deepcopy(value)
    return value


def _assign(container: Value, step: Step, value: Value) -> None:
    match step:
        case Key(name=name):
            assert isinstance(container, dict)
            container[name] = value
        case Index(position=position):
            assert isinstance(container, list)
            container[position] = value
        case _:
            assert_never(step)


__all__ = ["PathLike", "delete", "insert", "read", "set"]
