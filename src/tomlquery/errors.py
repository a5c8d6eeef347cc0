"""Exception taxonomy for path resolution.

Every failure raised by the resolver, the typed accessors and the structured
bridge derives from :class:`TomlQueryError`. Each exception keeps the values
that describe the failure as attributes so callers can branch on them without
parsing messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .query.steps import QueryPath, Step
    from .value import ValueKind


class TomlQueryError(Exception):
    """Base class for all tomlquery errors."""


class MalformedPath(TomlQueryError, ValueError):
    """The path string does not follow the path grammar."""

    def __init__(self, position: int, reason: str, path: str | None = None) -> None:
        self.position = position
        self.reason = reason
        self.path = path
        if path is None:
            message = f"malformed path at position {position}: {reason}"
        else:
            message = f"malformed path {path!r} at position {position}: {reason}"
        super().__init__(message)


class NotFound(TomlQueryError):
    """A key step names an entry that is not present in its table."""

    def __init__(self, prefix: QueryPath, step: Step) -> None:
        self.prefix = prefix
        self.step = step
        location = str(prefix) if prefix.steps else "<root>"
        super().__init__(f"{step} is not present in {location}")


class ShapeMismatch(TomlQueryError):
    """A step met a node of the wrong kind."""

    expected: str = "container"

    def __init__(self, step: Step, actual: ValueKind) -> None:
        self.step = step
        self.actual = actual
        super().__init__(
            f"cannot apply {step}: expected {self.expected}, found {actual.value}"
        )


class NotATable(ShapeMismatch):
    """A key step was applied to something other than a table."""

    expected = "table"


class NotAnArray(ShapeMismatch):
    """An index step was applied to something other than an array."""

    expected = "array"


class IndexOutOfBounds(TomlQueryError, IndexError):
    """An index step points past the end of its array."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of bounds for array of length {length}")


class TypeMismatch(TomlQueryError, TypeError):
    """A typed accessor found a value of a different kind than requested."""

    def __init__(self, expected: ValueKind, actual: ValueKind) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected.value}, found {actual.value}")


class ConversionFailure(TomlQueryError):
    """Converting between a document subtree and a structured type failed."""

    def __init__(self, inner: Exception) -> None:
        self.inner = inner
        super().__init__(str(inner))


__all__ = [
    "ConversionFailure",
    "IndexOutOfBounds",
    "MalformedPath",
    "NotATable",
    "NotAnArray",
    "NotFound",
    "ShapeMismatch",
    "TomlQueryError",
    "TypeMismatch",
]
