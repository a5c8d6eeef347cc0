"""Document: a root table bundled with every path operation."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from typing import BinaryIO, TypeVar

from . import resolver, typed
from .errors import IndexOutOfBounds, NotFound
from .query import check_separator
from .resolver import PathLike
from .serialization import insert_serialized, read_partial, set_serialized
from .typed import ScalarType
from .value import Datetime, Table, Value

S = TypeVar("S")
T = TypeVar("T")


@dataclass
class Document:
    """Owns a root table and forwards path operations to the resolver.

    ``separator`` overrides the configured separator for every call made
    through this document. Like the functions it wraps, a Document performs
    no locking.
    """

    root: Table = field(default_factory=dict)
    separator: str | None = None

    def __post_init__(self) -> None:
        if self.separator is not None:
            check_separator(self.separator)

    @classmethod
    def loads(cls, text: str, *, separator: str | None = None) -> Document:
        return cls(tomllib.loads(text), separator=separator)

    @classmethod
    def load(cls, fp: BinaryIO, *, separator: str | None = None) -> Document:
        return cls(tomllib.load(fp), separator=separator)

    # -- Primitives -----------------------------------------------------

    def read(self, path: PathLike) -> Value:
        return resolver.read(self.root, path, separator=self.separator)

    def get(self, path: PathLike, default: Value | None = None) -> Value | None:
        """Like :meth:`read`, but return ``default`` when nothing is there.

        Shape mismatches and malformed paths still raise.
        """

        try:
            return self.read(path)
        except (NotFound, IndexOutOfBounds):
            return default

    def contains(self, path: PathLike) -> bool:
        try:
            self.read(path)
        except (NotFound, IndexOutOfBounds):
            return False
        return True

    __contains__ = contains

    def set(self, path: PathLike, value: Value) -> Value:
        return resolver.set(self.root, path, value, separator=self.separator)

    def insert(self, path: PathLike, value: Value) -> bool:
        return resolver.insert(self.root, path, value, separator=self.separator)

    def delete(self, path: PathLike) -> bool:
        return resolver.delete(self.root, path, separator=self.separator)

    # -- Typed access ---------------------------------------------------

    def read_typed(self, path: PathLike, scalar: ScalarType[T]) -> T:
        return typed.read_typed(self.root, path, scalar, separator=self.separator)

    def set_typed(self, path: PathLike, scalar: ScalarType[T], value: T) -> T:
        return typed.set_typed(
            self.root, path, scalar, value, separator=self.separator
        )

    def insert_typed(self, path: PathLike, scalar: ScalarType[T], value: T) -> bool:
        return typed.insert_typed(
            self.root, path, scalar, value, separator=self.separator
        )

    def delete_typed(self, path: PathLike, scalar: ScalarType[T]) -> bool:
        return typed.delete_typed(self.root, path, scalar, separator=self.separator)

    def read_string(self, path: PathLike) -> str:
        return self.read_typed(path, typed.STRING)

    def read_int(self, path: PathLike) -> int:
        return self.read_typed(path, typed.INTEGER)

    def read_float(self, path: PathLike) -> float:
        return self.read_typed(path, typed.FLOAT)

    def read_bool(self, path: PathLike) -> bool:
        return self.read_typed(path, typed.BOOLEAN)

    def read_datetime(self, path: PathLike) -> Datetime:
        return self.read_typed(path, typed.DATETIME)

    # -- Structured access ----------------------------------------------

    def read_partial(self, target: type[S], path: PathLike | None = None) -> S:
        return read_partial(self.root, target, path, separator=self.separator)

    def insert_serialized(self, path: PathLike, value: object) -> bool:
        return insert_serialized(self.root, path, value, separator=self.separator)

    def set_serialized(self, path: PathLike, value: object) -> Value:
        return set_serialized(self.root, path, value, separator=self.separator)


__all__ = ["Document"]
