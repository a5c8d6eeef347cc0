"""Process-wide settings, read from ``TOMLQUERY_*`` environment variables."""

from __future__ import annotations

import os

_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


class QueryConfig:
    """Mutable settings shared by every operation that is not given overrides.

    Attributes:
        separator: Separator used when tokenizing path strings.
        log_level: Level applied by :func:`tomlquery.configure_logging`.
        rich_logging: Use a rich console handler instead of a plain stream one.
    """

    def __init__(self) -> None:
        self.separator: str = os.getenv("TOMLQUERY_SEPARATOR", ".")
        self.log_level: str = os.getenv("TOMLQUERY_LOG_LEVEL", "WARNING").upper()
        self.rich_logging: bool = _env_flag("TOMLQUERY_RICH_LOGGING", default=True)

    def __repr__(self) -> str:
        return (
            f"QueryConfig(separator={self.separator!r}, "
            f"log_level={self.log_level!r}, rich_logging={self.rich_logging!r})"
        )


QUERY_CONFIG = QueryConfig()


__all__ = ["QUERY_CONFIG", "QueryConfig"]
