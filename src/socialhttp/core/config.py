"""
Система конфигурации socialhttp.

Все конфиги immutable (frozen dataclasses): один экземпляр читается
движком без блокировок и служит ключом в ClientRegistry.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, TYPE_CHECKING

from .media_type import HttpMediaType

if TYPE_CHECKING:
    from .logging import LoggingConfig


@dataclass(frozen=True)
class HttpClientConfiguration:
    """
    Конфигурация HTTPClient.

    Args:
        proxy_host: Хост HTTP прокси (None или "" - без прокси)
        proxy_port: Порт прокси (<= 0 - порт по умолчанию)
        proxy_user: Пользователь прокси (опционально)
        proxy_password: Пароль прокси (опционально)
        connect_timeout: Таймаут подключения, мс (<= 0 - без лимита)
        read_timeout: Таймаут чтения, мс (<= 0 - без лимита)
        retry_count: Количество ДОПОЛНИТЕЛЬНЫХ попыток после первой
        retry_interval_seconds: Пауза между попытками (сек)
        max_total_connections: Размер пула connection pools адаптера
        max_per_route_connections: Максимум соединений на хост
        form_text_content_type: Content-Type текстовых частей multipart
            (None - строка Content-Type не пишется)
        pretty_debug: Подробный debug-вывод (заголовок на запись)
        gzip_enabled: Распаковывать gzip-ответы
        raw_content_types: Content-Type единственного файла, который
            отправляется телом запроса без multipart
        logging: Конфигурация логирования (None - без логгера)

    Examples:
        >>> HttpClientConfiguration(retry_count=2, retry_interval_seconds=1)
        >>> HttpClientConfiguration(proxy_host="proxy.local", proxy_port=3128)
    """

    proxy_host: Optional[str] = None
    proxy_port: int = -1
    proxy_user: Optional[str] = None
    proxy_password: Optional[str] = field(default=None, repr=False)
    connect_timeout: int = 20000
    read_timeout: int = 120000
    retry_count: int = 0
    retry_interval_seconds: float = 5
    max_total_connections: int = 20
    max_per_route_connections: int = 2
    form_text_content_type: Optional[str] = HttpMediaType.TEXT_PLAIN
    pretty_debug: bool = True
    gzip_enabled: bool = True
    raw_content_types: Tuple[str, ...] = (HttpMediaType.APPLICATION_JSON,)
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Валидация."""
        if self.retry_count < 0:
            raise ValueError("retry_count must be non-negative")
        if self.retry_interval_seconds < 0:
            raise ValueError("retry_interval_seconds must be non-negative")
        if self.max_total_connections <= 0:
            raise ValueError("max_total_connections must be positive")
        if self.max_per_route_connections <= 0:
            raise ValueError("max_per_route_connections must be positive")

        # list -> tuple, чтобы конфиг оставался hashable
        if not isinstance(self.raw_content_types, tuple):
            object.__setattr__(self, 'raw_content_types', tuple(self.raw_content_types))

    @property
    def is_proxy_configured(self) -> bool:
        return bool(self.proxy_host)

    @property
    def max_attempts(self) -> int:
        """Общее количество попыток (включая первую)."""
        return self.retry_count + 1

    def with_retries(
        self,
        retry_count: int,
        retry_interval_seconds: Optional[float] = None
    ) -> 'HttpClientConfiguration':
        """
        Создать новый конфиг с изменённым retry.

        Example:
            >>> new_config = config.with_retries(3, retry_interval_seconds=1)
        """
        if retry_interval_seconds is None:
            retry_interval_seconds = self.retry_interval_seconds
        return replace(
            self,
            retry_count=retry_count,
            retry_interval_seconds=retry_interval_seconds,
        )

    def with_proxy(
        self,
        host: str,
        port: int = -1,
        user: Optional[str] = None,
        password: Optional[str] = None
    ) -> 'HttpClientConfiguration':
        """Создать новый конфиг с прокси."""
        return replace(
            self,
            proxy_host=host,
            proxy_port=port,
            proxy_user=user,
            proxy_password=password,
        )


DEFAULT_CONFIGURATION = HttpClientConfiguration()
