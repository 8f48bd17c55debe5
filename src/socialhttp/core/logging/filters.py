"""
Record filters: the id of the request being executed and static fields.

The id lives in thread-local storage: HTTPClient executes a request
entirely on the calling thread.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional

_local = threading.local()


def get_correlation_id() -> Optional[str]:
    """Id of the request running on this thread, or None."""
    return getattr(_local, 'correlation_id', None)


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """
    Bind ``correlation_id`` to this thread for the duration of the block.

    The previous id (if any) is restored on exit.
    """
    previous = get_correlation_id()
    _local.correlation_id = correlation_id
    try:
        yield correlation_id
    finally:
        _local.correlation_id = previous


class CorrelationIdFilter(logging.Filter):
    """Sets ``record.correlation_id`` while a request is running."""

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id is not None:
            record.correlation_id = correlation_id
        return True


class StaticFieldsFilter(logging.Filter):
    """
    Adds fixed fields (service name, environment) to every record.

    Fields already present on the record win.
    """

    def __init__(self, fields: Mapping[str, Any]):
        super().__init__()
        self.fields = dict(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.fields.items():
            record.__dict__.setdefault(key, value)
        return True
