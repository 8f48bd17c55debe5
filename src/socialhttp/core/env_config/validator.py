"""
Pydantic validators for environment configuration.
"""

from typing import Literal, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HttpClientSettings(BaseSettings):
    """
    Client configuration from environment variables.

    Reads from:
    1. Environment variables (SOCIALHTTP_*)
    2. .env file (if passed to load_from_env)
    3. Defaults

    Example .env file:
        SOCIALHTTP_PROXY_HOST=proxy.internal
        SOCIALHTTP_PROXY_PORT=3128
        SOCIALHTTP_CONNECT_TIMEOUT=5000
        SOCIALHTTP_RETRY_COUNT=2
        SOCIALHTTP_LOG_ENABLED=true
        SOCIALHTTP_LOG_LEVEL=DEBUG
        SOCIALHTTP_LOG_FILE_PATH=logs/http.log
    """

    model_config = SettingsConfigDict(
        env_prefix='SOCIALHTTP_',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # Proxy
    proxy_host: Optional[str] = None
    proxy_port: int = Field(default=-1, le=65535)
    proxy_user: Optional[str] = None
    proxy_password: Optional[str] = None

    # Timeouts (milliseconds, <= 0 - no limit)
    connect_timeout: int = 20000
    read_timeout: int = 120000

    # Retry
    retry_count: int = Field(default=0, ge=0)
    retry_interval_seconds: float = Field(default=5, ge=0)

    # Connections
    max_total_connections: int = Field(default=20, ge=1)
    max_per_route_connections: int = Field(default=2, ge=1)

    # Body / response handling
    form_text_content_type: Optional[str] = "text/plain"
    raw_content_types: Tuple[str, ...] = ("application/json",)
    pretty_debug: bool = True
    gzip_enabled: bool = True

    # Logging
    log_enabled: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text", "colored"] = "text"
    log_console: bool = True
    log_file_path: Optional[str] = None
    log_max_bytes: int = Field(default=10 * 1024 * 1024, ge=0)
    log_backup_count: int = Field(default=5, ge=0)
    log_correlation_id: bool = True

    @field_validator('proxy_host', 'proxy_user', 'form_text_content_type', 'log_file_path')
    @classmethod
    def empty_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Empty string in the environment means "not set"."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('log_format', mode='before')
    @classmethod
    def lower_format(cls, v):
        return v.lower() if isinstance(v, str) else v
