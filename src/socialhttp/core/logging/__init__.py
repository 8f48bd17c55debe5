"""
Client logging: LoggingConfig describes the output, HTTPClientLogger writes it.

Example:
    >>> config = HttpClientConfiguration(logging=LoggingConfig(level="DEBUG", format="json"))
    >>> client = HTTPClient(config)
"""

from .config import LoggingConfig, LogFormat
from .filters import CorrelationIdFilter, StaticFieldsFilter, correlation_scope, get_correlation_id
from .formatters import ColoredFormatter, JSONFormatter, TextFormatter, get_formatter
from .logger import HTTPClientLogger

__all__ = [
    "LoggingConfig",
    "LogFormat",
    "HTTPClientLogger",
    "JSONFormatter",
    "TextFormatter",
    "ColoredFormatter",
    "get_formatter",
    "CorrelationIdFilter",
    "StaticFieldsFilter",
    "correlation_scope",
    "get_correlation_id",
]
