# src/socialhttp/core/connector.py
"""
Transport connector: настроенное соединение для одной попытки.

Каждая попытка получает новую requests.Session; между попытками
соединения не переиспользуются.
"""

import logging
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter

from .config import HttpClientConfiguration
from ..utils.sanitizer import mask_sensitive_data

logger = logging.getLogger(__name__)

Timeout = Tuple[Optional[float], Optional[float]]


class Connector:
    """
    Открывает соединения с учётом прокси, таймаутов и политики редиректов.

    - Прокси используется, если proxy_host непустой. Учётные данные прокси
      уходят только прокси-серверу (Proxy-Authorization), но не origin.
    - Таймауты применяются только если значение положительное.
    - Редиректы никогда не выполняются автоматически: 3xx доходит до
      классификации статуса в движке.

    Example:
        >>> connector = Connector(config)
        >>> with connector.open() as session:
        ...     response = connector.send(session, "GET", url, headers={})
    """

    def __init__(self, config: HttpClientConfiguration):
        self._config = config

    def open(self) -> requests.Session:
        """Новая сессия для одной попытки."""
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=self._config.max_total_connections,
            pool_maxsize=self._config.max_per_route_connections,
            max_retries=0  # Ретраи через RetryEngine
        )
        session.mount('http://', adapter)
        session.mount('https://', adapter)

        # Заголовки запроса задаёт только вызывающий код
        session.headers.clear()
        if self._config.gzip_enabled:
            session.headers['Accept-Encoding'] = 'gzip'

        proxies = self.proxies()
        if proxies:
            # Прокси задаются явно; переменные окружения не подмешиваются
            session.trust_env = False
            session.proxies.update(proxies)
            logger.debug(
                f"Opening proxied connection({self._config.proxy_host}:{self._config.proxy_port})"
            )

        return session

    def proxies(self) -> Dict[str, str]:
        """
        Прокси для requests.

        Returns:
            {'http': url, 'https': url} или пустой dict без прокси
        """
        if not self._config.is_proxy_configured:
            return {}

        credentials = ""
        if self._config.proxy_user:
            user = quote(self._config.proxy_user, safe='')
            password = quote(self._config.proxy_password or "", safe='')
            credentials = f"{user}:{password}@"
            logger.debug(
                "Proxy auth configured",
                extra=mask_sensitive_data({
                    "proxy_user": self._config.proxy_user,
                    "proxy_password": self._config.proxy_password,
                }),
            )

        address = self._config.proxy_host
        if self._config.proxy_port > 0:
            address = f"{address}:{self._config.proxy_port}"

        proxy_url = f"http://{credentials}{address}"
        return {'http': proxy_url, 'https': proxy_url}

    def timeout(self) -> Timeout:
        """(connect, read) в секундах; None - без явного лимита."""
        return (
            _millis_to_seconds(self._config.connect_timeout),
            _millis_to_seconds(self._config.read_timeout),
        )

    def send(
        self,
        session: requests.Session,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None
    ) -> requests.Response:
        """
        Отправить запрос без следования редиректам.

        Тело ответа не читается (stream=True) до as_string()/as_bytes().
        """
        return session.request(
            method=method,
            url=url,
            headers=dict(headers),
            data=body,
            timeout=self.timeout(),
            allow_redirects=False,
            stream=True,
        )


def _millis_to_seconds(value: int) -> Optional[float]:
    if value > 0:
        return value / 1000.0
    return None
