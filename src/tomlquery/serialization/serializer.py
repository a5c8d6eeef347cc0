import dataclasses
import enum
import functools
import pathlib
from collections.abc import Mapping
from typing import Any, TypeVar, get_args, get_origin

import chz
from chz.util import MISSING as CHZ_MISSING, MISSING_TYPE
from pydantic import BaseModel as PydanticBaseModel
from pydantic import TypeAdapter, ValidationError

from ..errors import ConversionFailure
from ..value import Value, validate_value

S = TypeVar("S")

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


@functools.lru_cache(maxsize=256)
def _type_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _required_chz_field(field: Any) -> bool:
    return field._default is CHZ_MISSING and isinstance(
        field._default_factory, MISSING_TYPE
    )


class DocumentSerializer:
    """Converts structured objects to document values and back.

    Supported structured types are pydantic models, dataclasses, chz classes,
    and anything else a pydantic ``TypeAdapter`` can validate. Documents have
    no null, so ``None`` fields are left out when serializing.
    """

    @classmethod
    def to_value(cls, obj: object) -> Value:
        """Convert ``obj`` to a document value without validating the result."""

        if obj is None:
            raise TypeError("None has no document representation")

        if isinstance(obj, PydanticBaseModel):
            dumped = obj.model_dump(mode="python", by_alias=True, exclude_none=True)
            return cls.to_value(dumped)

        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return cls._table(
                (field.name, getattr(obj, field.name))
                for field in dataclasses.fields(obj)
            )

        if chz.is_chz(obj):
            return cls._table(
                (name, getattr(obj, name)) for name in chz.chz_fields(obj)
            )

        if isinstance(obj, enum.Enum):
            return cls.to_value(obj.value)

        if isinstance(obj, pathlib.PurePath):
            return str(obj)

        if isinstance(obj, Mapping):
            for key in obj:
                if not isinstance(key, str):
                    raise TypeError(f"table keys must be strings, got {key!r}")
            return cls._table(obj.items())

        if isinstance(obj, _SEQUENCE_ORIGINS):
            items = list(obj)
            if any(item is None for item in items):
                raise TypeError("arrays cannot hold None")
            return [cls.to_value(item) for item in items]

        return obj  # type: ignore[return-value]

    @classmethod
    def _table(cls, items: Any) -> Value:
        return {
            name: cls.to_value(value) for name, value in items if value is not None
        }

    @classmethod
    def from_value(cls, data: Value, target: Any) -> Any:
        """Build an instance of ``target`` from the document value ``data``."""

        if isinstance(target, type) and chz.is_chz(target):
            return cls._from_chz(data, target)

        origin = get_origin(target)
        args = get_args(target)
        if origin in _SEQUENCE_ORIGINS and len(args) == 1 and cls._has_chz(args[0]):
            if not isinstance(data, list):
                raise TypeError(f"expected an array for {target}, got {data!r}")
            return origin(cls.from_value(item, args[0]) for item in data)
        if origin is dict and len(args) == 2 and cls._has_chz(args[1]):
            if not isinstance(data, dict):
                raise TypeError(f"expected a table for {target}, got {data!r}")
            return {key: cls.from_value(item, args[1]) for key, item in data.items()}

        return _type_adapter(target).validate_python(data)

    @staticmethod
    def _has_chz(target: Any) -> bool:
        return isinstance(target, type) and chz.is_chz(target)

    @classmethod
    def _from_chz(cls, data: Value, target: type[S]) -> S:
        if not isinstance(data, dict):
            raise TypeError(f"expected a table for {target.__name__}, got {data!r}")

        fields = chz.chz_fields(target)
        unexpected = sorted(set(data) - set(fields))
        if unexpected:
            raise TypeError(
                f"{target.__name__} got unexpected field(s): {', '.join(unexpected)}"
            )

        kwargs: dict[str, Any] = {}
        for name, field in fields.items():
            if name in data:
                kwargs[name] = cls.from_value(data[name], field.final_type)
            elif _required_chz_field(field):
                raise TypeError(f"{target.__name__} is missing field {name!r}")
        return target(**kwargs)

    @classmethod
    def serialize(cls, obj: object) -> Value:
        """Convert ``obj`` to a validated document value.

        Raises :class:`ConversionFailure` when ``obj`` has no document
        representation.
        """

        try:
            value = cls.to_value(obj)
            validate_value(value)
        except (TypeError, ValueError) as exc:
            raise ConversionFailure(exc) from exc
        return value

    @classmethod
    def deserialize(cls, data: Value, target: type[S]) -> S:
        """Convert ``data`` to ``target``, raising :class:`ConversionFailure`."""

        try:
            return cls.from_value(data, target)
        except (ValidationError, TypeError, ValueError) as exc:
            raise ConversionFailure(exc) from exc
