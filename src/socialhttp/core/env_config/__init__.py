"""
Environment configuration for socialhttp.

Example:
    >>> from socialhttp.core.env_config import load_from_env
    >>> config = load_from_env()
    >>> config = load_from_env(env_file=".env", retry_count=2)
"""

from .loader import load_from_env
from .validator import HttpClientSettings

__all__ = [
    "load_from_env",
    "HttpClientSettings",
]
