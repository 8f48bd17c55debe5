"""
HTTPClientLogger: the configured logger of one HTTPClient.

Keyword fields become record attributes after masking, so proxy
passwords and authorization headers never reach a handler.
"""

import logging
from typing import Any, Optional

from .config import LoggingConfig
from .filters import CorrelationIdFilter, StaticFieldsFilter
from .formatters import get_formatter
from .handlers import build_handlers
from ...utils.resources import close_quietly
from ...utils.sanitizer import mask_sensitive_data


class HTTPClientLogger:
    """
    Structured logger backed by a named stdlib logger.

    The named logger stops propagating to the root logger and gets the
    handlers described by the config; constructing a second
    HTTPClientLogger with the same name replaces them.

    Example:
        >>> log = HTTPClientLogger(LoggingConfig(level="DEBUG"), name="socialhttp.client")
        >>> log.info("Request completed", status_code=200, attempt=1)
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "socialhttp"):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        filters = []
        if self.config.correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(StaticFieldsFilter(self.config.extra_fields))

        self._logger = logging.getLogger(name)
        self._logger.setLevel(self.config.level_number)
        self._logger.propagate = False
        for handler in self._logger.handlers[:]:
            self._logger.removeHandler(handler)
            close_quietly(handler)
        for handler in build_handlers(self.config, get_formatter(self.config.format), filters):
            self._logger.addHandler(handler)

    def is_enabled_for(self, level: int) -> bool:
        return not self._closed and self._logger.isEnabledFor(level)

    def log(self, level: int, message: str, **fields: Any) -> None:
        if self.is_enabled_for(level):
            self._logger.log(level, message, extra=mask_sensitive_data(fields))

    def debug(self, message: str, **fields: Any) -> None:
        self.log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields: Any) -> None:
        self.log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self.log(logging.WARNING, message, **fields)

    def error(self, message: str, **fields: Any) -> None:
        self.log(logging.ERROR, message, **fields)

    def exception(self, message: str, **fields: Any) -> None:
        """ERROR record with the current traceback."""
        if self.is_enabled_for(logging.ERROR):
            self._logger.error(message, exc_info=True, extra=mask_sensitive_data(fields))

    def close(self) -> None:
        """Flush and detach handlers; later calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        for handler in self._logger.handlers[:]:
            self._logger.removeHandler(handler)
            handler.flush()
            close_quietly(handler)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
