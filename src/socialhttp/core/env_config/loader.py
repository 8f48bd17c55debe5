"""
Configuration loader from environment variables and .env files.
"""

from typing import Any, Optional

from ..config import HttpClientConfiguration
from ..logging.config import LoggingConfig
from .validator import HttpClientSettings

_CONFIG_FIELDS = (
    'proxy_host',
    'proxy_port',
    'proxy_user',
    'proxy_password',
    'connect_timeout',
    'read_timeout',
    'retry_count',
    'retry_interval_seconds',
    'max_total_connections',
    'max_per_route_connections',
    'form_text_content_type',
    'raw_content_types',
    'pretty_debug',
    'gzip_enabled',
)


def load_from_env(env_file: Optional[str] = None, **overrides: Any) -> HttpClientConfiguration:
    """
    Load HttpClientConfiguration from the environment.

    Priority (highest to lowest):
    1. **overrides - explicit parameters
    2. Environment variables (SOCIALHTTP_*)
    3. .env file
    4. Defaults

    Example:
        >>> config = load_from_env()
        >>> config = load_from_env(env_file=".env.production", retry_count=3)
    """
    settings = HttpClientSettings(_env_file=env_file)

    values = {name: overrides.get(name, getattr(settings, name)) for name in _CONFIG_FIELDS}

    logging_config = overrides.get('logging')
    if logging_config is None and settings.log_enabled:
        logging_config = LoggingConfig(
            level=settings.log_level,
            format=settings.log_format,
            console=settings.log_console,
            file_path=settings.log_file_path,
            max_bytes=settings.log_max_bytes,
            backup_count=settings.log_backup_count,
            correlation_id=settings.log_correlation_id,
        )

    return HttpClientConfiguration(logging=logging_config, **values)
