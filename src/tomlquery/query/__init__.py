"""Path tokenizing: path strings to steps."""

from .steps import Index, Key, QueryPath, Step
from .tokenizer import as_query_path, check_separator, tokenize

__all__ = [
    "Index",
    "Key",
    "QueryPath",
    "Step",
    "as_query_path",
    "check_separator",
    "tokenize",
]
