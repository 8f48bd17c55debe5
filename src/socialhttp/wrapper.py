# src/socialhttp/wrapper.py
"""
Обёртка над HTTPClient с заголовками по умолчанию и слушателем ответов.
"""

import logging
from typing import Dict, Mapping, Optional, Sequence

from .core.config import HttpClientConfiguration, DEFAULT_CONFIGURATION
from .core.exceptions import HTTPError
from .core.http_client import HTTPClient
from .core.parameter import HttpParameter
from .core.registry import ClientRegistry
from .core.request import HttpRequest, RequestMethod
from .core.response import HttpResponse
from .listeners import HttpResponseEvent, HttpResponseListener

logger = logging.getLogger(__name__)


class HTTPClientWrapper:
    """
    Клиент для вызывающего кода: удобные методы, общие заголовки и
    уведомление слушателя после каждого запроса.

    Args:
        config: Конфигурация (DEFAULT_CONFIGURATION если None)
        registry: Реестр клиентов; без него создаётся собственный HTTPClient

    Example:
        >>> wrapper = HTTPClientWrapper(HttpClientConfiguration(retry_count=2))
        >>> wrapper.request_headers["Authorization"] = "Bearer token"
        >>> wrapper.set_http_response_listener(LoggingListener())
        >>> response = wrapper.get("https://api.example.com/timeline")
    """

    def __init__(
        self,
        config: Optional[HttpClientConfiguration] = None,
        registry: Optional[ClientRegistry] = None
    ):
        self.config = config or DEFAULT_CONFIGURATION
        self.request_headers: Dict[str, str] = {}
        self._listener: Optional[HttpResponseListener] = None

        if registry is not None:
            self._http = registry.get(self.config)
        else:
            self._http = HTTPClient(self.config)

    @property
    def http(self) -> HTTPClient:
        return self._http

    def set_http_response_listener(self, listener: Optional[HttpResponseListener]) -> None:
        """Установить слушателя (None - отключить)."""
        self._listener = listener

    def shutdown(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False

    def request(self, req: HttpRequest) -> HttpResponse:
        """
        Выполнить запрос и уведомить слушателя.

        Raises:
            HTTPError: исходная ошибка клиента, после уведомления слушателя
        """
        try:
            response = self._http.request(req)
        except HTTPError as e:
            self._fire(HttpResponseEvent(req, None, e))
            raise

        self._fire(HttpResponseEvent(req, response, None))
        return response

    def _fire(self, event: HttpResponseEvent) -> None:
        if self._listener is None:
            return
        try:
            self._listener.http_response_received(event)
        except Exception:
            # Ошибка слушателя не меняет результат запроса
            logger.exception(
                f"Response listener {type(self._listener).__name__} failed"
            )

    def _headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers = dict(self.request_headers)
        if extra:
            headers.update(extra)
        return headers

    def _call(
        self,
        method: RequestMethod,
        url: str,
        parameters: Optional[Sequence[HttpParameter]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> HttpResponse:
        return self.request(
            HttpRequest.create(method.value, url, parameters, self._headers(headers))
        )

    def get(self, url: str, parameters: Optional[Sequence[HttpParameter]] = None) -> HttpResponse:
        return self._call(RequestMethod.GET, url, parameters)

    def post(
        self,
        url: str,
        parameters: Optional[Sequence[HttpParameter]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> HttpResponse:
        """POST; ``headers`` дополняют и перекрывают заголовки по умолчанию."""
        return self._call(RequestMethod.POST, url, parameters, headers)

    def put(self, url: str, parameters: Optional[Sequence[HttpParameter]] = None) -> HttpResponse:
        return self._call(RequestMethod.PUT, url, parameters)

    def delete(self, url: str, parameters: Optional[Sequence[HttpParameter]] = None) -> HttpResponse:
        return self._call(RequestMethod.DELETE, url, parameters)

    def head(self, url: str, parameters: Optional[Sequence[HttpParameter]] = None) -> HttpResponse:
        return self._call(RequestMethod.HEAD, url, parameters)

    def patch(self, url: str, parameters: Optional[Sequence[HttpParameter]] = None) -> HttpResponse:
        return self._call(RequestMethod.PATCH, url, parameters)

    def __repr__(self) -> str:
        return (
            f"HTTPClientWrapper(config={self.config!r}, "
            f"request_headers={self.request_headers!r}, listener={self._listener!r})"
        )
