"""Typed access to scalar values.

Each supported scalar kind has one :class:`ScalarType` implementation. A typed
operation resolves the node with the plain resolver and then requires the
node to be of exactly that kind: there is no coercion, so an integer is not
accepted where a float is requested and ``"1"`` is never parsed as a number.
"""

from __future__ import annotations

import datetime
from typing import ClassVar, Generic, TypeVar, cast

from . import resolver
from .errors import IndexOutOfBounds, NotFound, TypeMismatch
from .query import as_query_path
from .resolver import PathLike
from .value import Datetime, Value, ValueKind, kind_of

T = TypeVar("T")


class ScalarType(Generic[T]):
    """Checks and unwraps values of one scalar kind."""

    kind: ClassVar[ValueKind]

    def unwrap(self, value: Value) -> T:
        actual = kind_of(value)
        if actual is not self.kind:
            raise TypeMismatch(self.kind, actual)
        return cast(T, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StringType(ScalarType[str]):
    kind = ValueKind.STRING


class IntegerType(ScalarType[int]):
    kind = ValueKind.INTEGER


class FloatType(ScalarType[float]):
    kind = ValueKind.FLOAT


class BooleanType(ScalarType[bool]):
    kind = ValueKind.BOOLEAN


class DatetimeType(ScalarType[Datetime]):
    """Offset/local date-times, local dates and local times."""

    kind = ValueKind.DATETIME

    def unwrap(self, value: Value) -> Datetime:
        result = super().unwrap(value)
        assert isinstance(result, (datetime.datetime, datetime.date, datetime.time))
        return result


STRING = StringType()
INTEGER = IntegerType()
FLOAT = FloatType()
BOOLEAN = BooleanType()
DATETIME = DatetimeType()


def read_typed(
    doc: Value, path: PathLike, scalar: ScalarType[T], *, separator: str | None = None
) -> T:
    return scalar.unwrap(resolver.read(doc, path, separator=separator))


def set_typed(
    doc: Value,
    path: PathLike,
    scalar: ScalarType[T],
    value: T,
    *,
    separator: str | None = None,
) -> T:
    """Replace a value of kind ``scalar`` with another one of the same kind.

    Both the new value and the one being replaced must match ``scalar``; a
    mismatch raises :class:`TypeMismatch` before anything is written.
    """

    scalar.unwrap(cast(Value, value))
    query = as_query_path(path, separator)
    previous = scalar.unwrap(resolver.read(doc, query))
    resolver.set(doc, query, cast(Value, value))
    return previous


def insert_typed(
    doc: Value,
    path: PathLike,
    scalar: ScalarType[T],
    value: T,
    *,
    separator: str | None = None,
) -> bool:
    scalar.unwrap(cast(Value, value))
    return resolver.insert(doc, path, cast(Value, value), separator=separator)


def delete_typed(
    doc: Value, path: PathLike, scalar: ScalarType[T], *, separator: str | None = None
) -> bool:
    """Delete the entry at ``path`` only if it is of kind ``scalar``.

    An absent terminal entry returns ``False`` like :func:`resolver.delete`.
    """

    query = as_query_path(path, separator)
    try:
        current = resolver.read(doc, query)
    except (NotFound, IndexOutOfBounds):
        # delete tells an absent terminal (False) from a broken ancestor (raise)
        return resolver.delete(doc, query)
    scalar.unwrap(current)
    return resolver.delete(doc, query)


def read_string(doc: Value, path: PathLike, *, separator: str | None = None) -> str:
    return read_typed(doc, path, STRING, separator=separator)


def read_int(doc: Value, path: PathLike, *, separator: str | None = None) -> int:
    return read_typed(doc, path, INTEGER, separator=separator)


def read_float(doc: Value, path: PathLike, *, separator: str | None = None) -> float:
    return read_typed(doc, path, FLOAT, separator=separator)


def read_bool(doc: Value, path: PathLike, *, separator: str | None = None) -> bool:
    return read_typed(doc, path, BOOLEAN, separator=separator)


def read_datetime(
    doc: Value, path: PathLike, *, separator: str | None = None
) -> Datetime:
    return read_typed(doc, path, DATETIME, separator=separator)


__all__ = [
    "BOOLEAN",
    "BooleanType",
    "DATETIME",
    "DatetimeType",
    "FLOAT",
    "FloatType",
    "INTEGER",
    "IntegerType",
    "STRING",
    "ScalarType",
    "StringType",
    "delete_typed",
    "insert_typed",
    "read_bool",
    "read_datetime",
    "read_float",
    "read_int",
    "read_string",
    "read_typed",
    "set_typed",
]
