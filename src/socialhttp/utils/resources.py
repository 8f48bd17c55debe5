"""Гарантированное освобождение ресурсов."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

logger = logging.getLogger(__name__)


def close_quietly(resource: Optional[Any]) -> None:
    """
    Закрыть ресурс, игнорируя ошибку закрытия.

    Ошибка логируется на уровне debug и никогда не маскирует исходную.
    """
    if resource is None:
        return
    try:
        resource.close()
    except Exception as e:
        logger.debug(f"Ignoring error while closing {type(resource).__name__}: {e}")


@contextmanager
def closing_quietly(resource: Any) -> Iterator[Any]:
    """
    Как contextlib.closing, но ошибка close() проглатывается.

    Example:
        >>> with closing_quietly(param.open()) as stream:
        ...     body.write(stream.read())
    """
    try:
        yield resource
    finally:
        close_quietly(resource)
