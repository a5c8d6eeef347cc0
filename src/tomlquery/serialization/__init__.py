from .partial import (
    Partial,
    insert_serialized,
    location_of,
    read_deserialized,
    read_partial,
    set_serialized,
)
from .serializer import DocumentSerializer

__all__ = [
    "DocumentSerializer",
    "Partial",
    "insert_serialized",
    "location_of",
    "read_deserialized",
    "read_partial",
    "set_serialized",
]
