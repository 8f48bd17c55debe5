"""
Logging configuration for socialhttp.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogFormat(str, Enum):
    """Record layout of the client log."""
    JSON = "json"
    TEXT = "text"
    COLORED = "colored"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where and how HTTPClient writes its diagnostic records.

    Strings are accepted for ``level`` and ``format`` (case-insensitive),
    so values read from the environment can be passed as is.

    Attributes:
        level: Minimum level name (DEBUG ... CRITICAL)
        format: json, text or colored
        console: Write to stdout
        file_path: Write to a rotating file at this path (None - no file)
        max_bytes: File size that triggers rotation
        backup_count: Rotated files to keep
        correlation_id: Tag every record of a request with its id
        extra_fields: Static fields added to every record (not part of
            equality, so configs stay usable as registry keys)

    Example:
        >>> LoggingConfig(level="debug", format="json", file_path="logs/http.log")
    """

    level: str = "INFO"
    format: LogFormat = LogFormat.TEXT
    console: bool = True
    file_path: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5
    correlation_id: bool = True
    extra_fields: Dict[str, Any] = field(default_factory=dict, hash=False, compare=False)

    def __post_init__(self):
        level = str(self.level).upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {self.level}. Available: {', '.join(LEVELS)}")
        object.__setattr__(self, 'level', level)
        if not isinstance(self.format, LogFormat):
            object.__setattr__(self, 'format', LogFormat(str(self.format).lower()))

        if self.max_bytes < 0 or self.backup_count < 0:
            raise ValueError("max_bytes and backup_count must be non-negative")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)

    @property
    def file_enabled(self) -> bool:
        return bool(self.file_path)
