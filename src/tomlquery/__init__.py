"""
tomlquery: read and modify TOML document trees by dotted path.

This package uses a src-layout. Import the package as `tomlquery`.
"""

from importlib.metadata import version

__version__ = version("tomlquery")

from .config import QUERY_CONFIG, QueryConfig
from .document import Document
from .errors import (
    ConversionFailure,
    IndexOutOfBounds,
    MalformedPath,
    NotATable,
    NotAnArray,
    NotFound,
    ShapeMismatch,
    TomlQueryError,
    TypeMismatch,
)
from .query import Index, Key, QueryPath, Step, tokenize
from .resolver import delete, insert, read, set
from .runtime import configure_logging, get_logger
from .serialization import (
    DocumentSerializer,
    Partial,
    insert_serialized,
    read_deserialized,
    read_partial,
    set_serialized,
)
from .typed import (
    BOOLEAN,
    DATETIME,
    FLOAT,
    INTEGER,
    STRING,
    ScalarType,
    delete_typed,
    insert_typed,
    read_bool,
    read_datetime,
    read_float,
    read_int,
    read_string,
    read_typed,
    set_typed,
)
from .value import Value, ValueKind, kind_of, validate_value

__all__ = [
    "__version__",
    "BOOLEAN",
    "DATETIME",
    "FLOAT",
    "INTEGER",
    "QUERY_CONFIG",
    "STRING",
    "ConversionFailure",
    "Document",
    "DocumentSerializer",
    "Index",
    "IndexOutOfBounds",
    "Key",
    "MalformedPath",
    "NotATable",
    "NotAnArray",
    "NotFound",
    "Partial",
    "QueryConfig",
    "QueryPath",
    "ScalarType",
    "ShapeMismatch",
    "Step",
    "TomlQueryError",
    "TypeMismatch",
    "Value",
    "ValueKind",
    "configure_logging",
    "delete",
    "delete_typed",
    "get_logger",
    "insert",
    "insert_serialized",
    "insert_typed",
    "kind_of",
    "read",
    "read_bool",
    "read_datetime",
    "read_deserialized",
    "read_float",
    "read_int",
    "read_partial",
    "read_string",
    "read_typed",
    "set",
    "set_serialized",
    "set_typed",
    "tokenize",
    "validate_value",
]
