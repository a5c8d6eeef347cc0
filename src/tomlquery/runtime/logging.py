from __future__ import annotations

import datetime
import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import QUERY_CONFIG

LOGGER_NAME = "tomlquery"

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "cyan",
    "WARNING": "yellow",
    "ERROR": "bold red",
    "CRITICAL": "bold white on red",
}


class _TomlQueryRichConsoleHandler(logging.Handler):
    """Console handler that renders records with rich.

    Records may carry a ``tomlquery_op_color`` attribute; when present the
    first word of the message (the operation name) is colored with it.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._console = Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        text = Text(message)
        color = getattr(record, "tomlquery_op_color", None)
        if color:
            operation, _, _ = message.partition(" ")
            text.stylize(color, 0, len(operation))
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            timestamp = datetime.datetime.fromtimestamp(record.created).strftime(
                "%H:%M:%S"
            )
            line = Text.assemble(
                (timestamp, "dim"),
                " ",
                (f"{record.levelname:<8}", _LEVEL_STYLES.get(record.levelname, "none")),
                " ",
                self._format_message_text(record),
                " ",
                (self._format_location(record), "dim"),
            )
            self._console.print(line, highlight=False, soft_wrap=True)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this more than once does not stack handlers. The library never
    calls it itself; applications opt in.
    """

    logger = get_logger()
    logger.setLevel(level if level is not None else QUERY_CONFIG.log_level)

    handler_type: type[logging.Handler] = logging.StreamHandler
    if QUERY_CONFIG.rich_logging:
        handler_type = _TomlQueryRichConsoleHandler
    if not any(type(handler) is handler_type for handler in logger.handlers):
        handler = handler_type()
        if handler_type is logging.StreamHandler:
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)-8s %(message)s")
            )
        logger.addHandler(handler)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
