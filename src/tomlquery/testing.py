from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import QUERY_CONFIG


@dataclass(frozen=True)
class _QueryConfigSnapshot:
    separator: str
    log_level: str
    rich_logging: bool

    @classmethod
    def capture(cls) -> "_QueryConfigSnapshot":
        return cls(
            separator=QUERY_CONFIG.separator,
            log_level=QUERY_CONFIG.log_level,
            rich_logging=QUERY_CONFIG.rich_logging,
        )

    def restore(self) -> None:
        QUERY_CONFIG.separator = self.separator
        QUERY_CONFIG.log_level = self.log_level
        QUERY_CONFIG.rich_logging = self.rich_logging


@contextmanager
def override_config(
    *,
    separator: str | None = None,
    log_level: str | None = None,
    rich_logging: bool | None = None,
) -> Generator[None, None, None]:
    """Temporarily change ``QUERY_CONFIG``; the previous values are restored on exit."""

    snapshot = _QueryConfigSnapshot.capture()
    try:
        if separator is not None:
            QUERY_CONFIG.separator = separator
        if log_level is not None:
            QUERY_CONFIG.log_level = log_level
        if rich_logging is not None:
            QUERY_CONFIG.rich_logging = rich_logging
        yield
    finally:
        snapshot.restore()


@pytest.fixture()
def tomlquery_config() -> Generator[None, None, None]:
    """Restore ``QUERY_CONFIG`` after a test that modifies it."""

    with override_config():
        yield


__all__ = ["override_config", "tomlquery_config"]
