"""
Handlers for the client log: stdout and a rotating file.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Sequence

from .config import LoggingConfig


def build_handlers(
    config: LoggingConfig,
    formatter: logging.Formatter,
    filters: Sequence[logging.Filter] = ()
) -> List[logging.Handler]:
    """
    Handlers requested by ``config``, each with the same formatter and filters.

    The parent directory of ``file_path`` is created if missing; rotation
    keeps ``backup_count`` files (``http.log.1``, ``http.log.2``, ...).
    """
    handlers: List[logging.Handler] = []

    if config.console:
        handlers.append(logging.StreamHandler(sys.stdout))

    if config.file_enabled:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding='utf-8',
        ))

    for handler in handlers:
        handler.setLevel(config.level_number)
        handler.setFormatter(formatter)
        for f in filters:
            handler.addFilter(f)
    return handlers
