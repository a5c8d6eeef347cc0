"""Document value model.

Documents are plain Python trees, the same shape ``tomllib.loads`` returns:
dicts for tables, lists for arrays and native scalars for everything else.
"""

from __future__ import annotations

import datetime
import enum
from typing import TypeAlias

Datetime: TypeAlias = datetime.datetime | datetime.date | datetime.time
Scalar: TypeAlias = str | int | float | bool | Datetime
Value: TypeAlias = Scalar | list["Value"] | dict[str, "Value"]
Table: TypeAlias = dict[str, Value]
Array: TypeAlias = list[Value]

INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


class ValueKind(str, enum.Enum):
    TABLE = "table"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"


def kind_of(value: object) -> ValueKind:
    """Return the variant of ``value``.

    Raises ``TypeError`` for objects that are not document values and
    ``ValueError`` for integers outside the signed 64-bit range.
    """

    match value:
        case dict():
            return ValueKind.TABLE
        case list():
            return ValueKind.ARRAY
        case str():
            return ValueKind.STRING
        # bool is a subclass of int and has to be matched first
        case bool():
            return ValueKind.BOOLEAN
        case int():
            if not INTEGER_MIN <= value <= INTEGER_MAX:
                raise ValueError(f"integer {value} does not fit in 64 bits")
            return ValueKind.INTEGER
        case float():
            return ValueKind.FLOAT
        case datetime.datetime() | datetime.date() | datetime.time():
            return ValueKind.DATETIME
        case _:
            raise TypeError(
                f"{type(value).__name__} is not a document value: {value!r}"
            )


def validate_value(value: object) -> None:
    """Check that ``value`` and everything below it is a document value.

    A container that contains itself raises ``ValueError``; the same container
    reached through two sibling entries is allowed.
    """

    # ids of the containers on the path from the root to the current node
    active: set[int] = set()
    stack: list[tuple[object, bool]] = [(value, False)]
    while stack:
        current, leaving = stack.pop()
        if leaving:
            active.discard(id(current))
            continue
        kind = kind_of(current)
        if kind is ValueKind.TABLE:
            assert isinstance(current, dict)
            for key in current:
                if not isinstance(key, str):
                    raise TypeError(f"table keys must be strings, got {key!r}")
            children = list(current.values())
        elif kind is ValueKind.ARRAY:
            assert isinstance(current, list)
            children = list(current)
        else:
            continue
        if id(current) in active:
            raise ValueError(f"{kind.value} contains itself")
        active.add(id(current))
        stack.append((current, True))
        stack.extend((child, False) for child in children)


__all__ = [
    "Array",
    "Datetime",
    "INTEGER_MAX",
    "INTEGER_MIN",
    "Scalar",
    "Table",
    "Value",
    "ValueKind",
    "kind_of",
    "validate_value",
]
