"""Read and write structured objects at a path."""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

from .. import resolver
from ..resolver import PathLike
from ..value import Value
from .serializer import DocumentSerializer

S = TypeVar("S")


@runtime_checkable
class Partial(Protocol):
    """A structured type that knows where it lives in a document.

    Declare ``LOCATION`` as a class variable and :func:`read_partial` can be
    called without an explicit path::

        class Server(BaseModel):
            LOCATION: ClassVar[str] = "server"

            host: str
            port: int
    """

    LOCATION: ClassVar[str]


def location_of(target: Any) -> str:
    location = target.LOCATION if isinstance(target, Partial) else None
    if not isinstance(location, str):
        raise TypeError(
            f"{target!r} declares no LOCATION; pass the path to read_partial explicitly"
        )
    return location


def read_partial(
    doc: Value,
    target: type[S],
    path: PathLike | None = None,
    *,
    separator: str | None = None,
) -> S:
    """Locate the subtree at ``path`` and convert it to ``target``.

    ``path`` defaults to ``target.LOCATION``. Path resolution errors propagate
    unchanged; conversion errors raise :class:`ConversionFailure`.
    """

    if path is None:
        path = location_of(target)
    subtree = resolver.read(doc, path, separator=separator)
    return DocumentSerializer.deserialize(subtree, target)


def read_deserialized(
    doc: Value, path: PathLike, target: type[S], *, separator: str | None = None
) -> S:
    return read_partial(doc, target, path, separator=separator)


def insert_serialized(
    doc: Value, path: PathLike, value: object, *, separator: str | None = None
) -> bool:
    """Serialize ``value`` and insert it at ``path``.

    The value is converted before the document is touched, so a conversion
    failure leaves the document unchanged.
    """

    subtree = DocumentSerializer.serialize(value)
    return resolver.insert(doc, path, subtree, separator=separator)


def set_serialized(
    doc: Value, path: PathLike, value: object, *, separator: str | None = None
) -> Value:
    subtree = DocumentSerializer.serialize(value)
    return resolver.set(doc, path, subtree, separator=separator)


__all__ = [
    "Partial",
    "insert_serialized",
    "location_of",
    "read_deserialized",
    "read_partial",
    "set_serialized",
]
