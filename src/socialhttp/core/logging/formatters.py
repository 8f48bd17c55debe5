"""
Formatters for client records.

Keyword fields passed to HTTPClientLogger arrive as record attributes;
every formatter appends them after the message.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from .config import LogFormat

# Attributes every LogRecord has; anything else came from ``extra``
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {'message', 'asctime', 'taskName'}


def record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields attached to the record via ``extra``."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_ATTRS and not key.startswith('_')
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON document per line.

    Example:
        {"time": "2024-01-15T10:30:45.123+00:00", "level": "INFO",
         "logger": "socialhttp.client", "message": "Request completed",
         "status_code": 200, "attempt": 1}
    """

    def format(self, record: logging.LogRecord) -> str:
        document: Dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec='milliseconds'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        document.update(record_fields(record))
        if record.exc_info:
            document["exception"] = self.formatException(record.exc_info)
        return json.dumps(document, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """``2024-01-15 10:30:45 INFO socialhttp.client: message key=value ...``"""

    LAYOUT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

    def __init__(self):
        super().__init__(fmt=self.LAYOUT, datefmt='%Y-%m-%d %H:%M:%S')

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        if fields:
            line = f"{line} " + " ".join(f"{k}={v}" for k, v in fields.items())
        return line


class ColoredFormatter(TextFormatter):
    """TextFormatter for terminals: the level name is colored by severity."""

    # (minimum level, ANSI color)
    PALETTE = (
        (logging.CRITICAL, '\033[1;31m'),
        (logging.ERROR, '\033[31m'),
        (logging.WARNING, '\033[33m'),
        (logging.INFO, '\033[32m'),
        (logging.DEBUG, '\033[36m'),
    )
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        color = next((c for level, c in self.PALETTE if record.levelno >= level), None)
        if color:
            record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


FORMATTERS = {
    LogFormat.JSON: JSONFormatter,
    LogFormat.TEXT: TextFormatter,
    LogFormat.COLORED: ColoredFormatter,
}


def get_formatter(log_format: LogFormat) -> logging.Formatter:
    """Formatter instance for ``log_format`` (enum or its string value)."""
    return FORMATTERS[LogFormat(log_format)]()
