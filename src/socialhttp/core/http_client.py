# src/socialhttp/core/http_client.py
import logging
import threading
import time
import uuid
from typing import Any, Dict, Mapping, Optional, Sequence

import requests

from .config import HttpClientConfiguration, DEFAULT_CONFIGURATION
from .connector import Connector
from .encoder import BodyEncoder
from .exceptions import HTTPError
from .logging import HTTPClientLogger
from .logging.filters import correlation_scope
from .parameter import HttpParameter
from .request import HttpRequest, RequestMethod
from .response import HttpResponse
from .retry_engine import Outcome, RetryEngine
from ..utils.resources import close_quietly
from ..utils.sanitizer import mask_headers

logger = logging.getLogger(__name__)

# I/O ошибки попытки: таймауты, сброс соединения, DNS, открытие файла
TRANSPORT_ERRORS = (requests.exceptions.RequestException, OSError)


class HTTPClient:
    """
    Синхронный HTTP клиент: один запрос за раз на вызывающем потоке.

    Features:
        - Три кодировки тела: urlencoded, multipart, raw file
        - Фиксированная пауза и бюджет retry из конфигурации
        - Прокси с авторизацией только на прокси
        - Редиректы не выполняются: 302 возвращается как успешный ответ
        - Immutable после создания

    Example:
        >>> client = HTTPClient(HttpClientConfiguration(retry_count=2))
        >>> response = client.post(
        ...     "https://api.example.com/status",
        ...     parameters=[HttpParameter("status", "hello")],
        ... )
        >>> response.as_string()
    """

    def __init__(self, config: Optional[HttpClientConfiguration] = None):
        """
        Args:
            config: Конфигурация (DEFAULT_CONFIGURATION если None)
        """
        if config is None:
            config = DEFAULT_CONFIGURATION

        logger_instance: Optional[HTTPClientLogger] = None
        if config.logging:
            logger_instance = HTTPClientLogger(config=config.logging, name="socialhttp.client")

        object.__setattr__(self, '_config', config)
        object.__setattr__(self, '_connector', Connector(config))
        object.__setattr__(self, '_encoder', BodyEncoder(config.form_text_content_type))
        object.__setattr__(
            self,
            '_retry_engine',
            RetryEngine(config.retry_count, config.retry_interval_seconds)
        )
        object.__setattr__(self, '_logger', logger_instance)
        object.__setattr__(self, '_initialized', True)

    def __setattr__(self, name, value):
        """Запретить изменение после init (immutability)."""
        if hasattr(self, '_initialized'):
            raise RuntimeError(
                f"Cannot modify '{name}' - HTTPClient is immutable. "
                f"Create new instance instead."
            )
        object.__setattr__(self, name, value)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    @property
    def config(self) -> HttpClientConfiguration:
        """Конфигурация (read-only)."""
        return self._config

    def close(self) -> None:
        """Закрыть логгер. Сессии живут одну попытку и закрываются сами."""
        if self._logger is not None:
            self._logger.close()

    def interrupt(self, thread: Optional[threading.Thread] = None) -> None:
        """
        Прервать паузу перед retry; запрос продолжится следующей попыткой.

        Действует только на паузы, идущие в момент вызова.

        Args:
            thread: Поток, выполняющий запрос (None - все потоки в паузе)
        """
        self._retry_engine.interrupt(thread)

    # ==================== Выполнение запроса ====================

    def request(self, request: HttpRequest) -> HttpResponse:
        """
        Выполнить запрос с retry.

        Returns:
            HttpResponse со статусом 2xx или 302

        Raises:
            HTTPError: статус вне success-class или I/O ошибка на последней
                попытке
            EncodingError: недопустимая комбинация параметров
        """
        with correlation_scope(str(uuid.uuid4())):
            return self._execute(request)

    def _execute(self, request: HttpRequest) -> HttpResponse:
        engine = self._retry_engine
        url = request.target_url
        start_time = time.time()
        attempt = 0

        while True:
            response_code = -1
            try:
                response = self._send(request, url)
                response_code = response.status_code
                outcome = engine.classify(response_code, attempt)

                self._log(
                    logging.DEBUG,
                    "Attempt classified",
                    status_code=response_code,
                    attempt=attempt + 1,
                    state=outcome.next_state.value,
                )

                if outcome is Outcome.SUCCESS:
                    self._log(
                        logging.INFO,
                        "Request completed",
                        method=request.method.value,
                        url=url,
                        status_code=response_code,
                        attempt=attempt + 1,
                        duration_ms=round((time.time() - start_time) * 1000, 2),
                    )
                    return response

                if outcome is Outcome.FAIL:
                    error = HTTPError.from_response(response)
                    self._log(
                        logging.ERROR,
                        "Request failed",
                        method=request.method.value,
                        url=url,
                        status_code=response_code,
                        attempt=attempt + 1,
                        max_attempts=engine.max_attempts,
                    )
                    raise error

                # RETRY: тело ответа больше не нужно
                self._log(
                    logging.WARNING,
                    "Request error (will retry)",
                    method=request.method.value,
                    url=url,
                    status_code=response_code,
                    attempt=attempt + 1,
                    max_attempts=engine.max_attempts,
                )
                response.close()

            except TRANSPORT_ERRORS as e:
                # connection timeout or read timeout
                if engine.is_last(attempt):
                    self._log(
                        logging.ERROR,
                        "Request failed",
                        method=request.method.value,
                        url=url,
                        error=str(e),
                        error_type=type(e).__name__,
                        attempt=attempt + 1,
                        max_attempts=engine.max_attempts,
                    )
                    raise HTTPError.from_transport(e, response_code) from e

                self._log(
                    logging.WARNING,
                    "Request error (will retry)",
                    method=request.method.value,
                    url=url,
                    error=str(e),
                    error_type=type(e).__name__,
                    attempt=attempt + 1,
                    max_attempts=engine.max_attempts,
                )

            engine.sleep()
            attempt += 1

    def _send(self, request: HttpRequest, url: str) -> HttpResponse:
        """Одна попытка: новая сессия, заголовки, тело, статус."""
        session = self._connector.open()
        try:
            headers = self._build_headers(request, url)
            body = None

            if request.method.has_body:
                encoded = self._encoder.encode(request, self._config.raw_content_types)
                headers["Content-Type"] = encoded.content_type
                headers.update(encoded.headers)
                body = encoded.body

            raw = self._connector.send(session, request.method.value, url, headers, body)
        except BaseException:
            close_quietly(session)
            raise

        response = HttpResponse(raw, gzip_enabled=self._config.gzip_enabled, session=session)
        self._log_response_headers(response)
        return response

    def _build_headers(self, request: HttpRequest, url: str) -> Dict[str, str]:
        """Заголовки запроса в порядке добавления вызывающим кодом."""
        self._log(logging.DEBUG, "Request", method=request.method.value, url=url)

        headers = dict(request.headers)
        if self._config.pretty_debug:
            for key, value in mask_headers(headers).items():
                self._log(logging.DEBUG, f"{key}: {value}")
        elif headers:
            self._log(logging.DEBUG, "Request headers", headers=headers)
        return headers

    def _log_response_headers(self, response: HttpResponse) -> None:
        if not self._is_debug():
            return
        if self._config.pretty_debug:
            self._log(logging.DEBUG, "Response", status_code=response.status_code)
            for key, values in mask_headers(response.headers).items():
                for value in values if isinstance(values, list) else [values]:
                    self._log(logging.DEBUG, f"{key}: {value}")
        else:
            self._log(
                logging.DEBUG,
                "Response",
                status_code=response.status_code,
                headers=response.headers,
            )

    def _is_debug(self) -> bool:
        if self._logger:
            return self._logger.is_enabled_for(logging.DEBUG)
        return logger.isEnabledFor(logging.DEBUG)

    def _log(self, level: int, message: str, **fields: Any) -> None:
        """Диагностика: в HTTPClientLogger если настроен, иначе в модульный логгер."""
        if self._logger:
            self._logger.log(level, message, **fields)
        elif logger.isEnabledFor(level):
            logger.log(level, message, extra=mask_headers(fields))

    # ==================== Удобные методы ====================

    def _call(
        self,
        method: RequestMethod,
        url: str,
        parameters: Optional[Sequence[HttpParameter]],
        headers: Optional[Mapping[str, str]]
    ) -> HttpResponse:
        return self.request(HttpRequest.create(method.value, url, parameters, headers))

    def get(self, url: str, parameters=None, headers=None) -> HttpResponse:
        """GET; параметры уходят в query string."""
        return self._call(RequestMethod.GET, url, parameters, headers)

    def post(self, url: str, parameters=None, headers=None) -> HttpResponse:
        """POST; параметры уходят телом запроса."""
        return self._call(RequestMethod.POST, url, parameters, headers)

    def put(self, url: str, parameters=None, headers=None) -> HttpResponse:
        return self._call(RequestMethod.PUT, url, parameters, headers)

    def delete(self, url: str, parameters=None, headers=None) -> HttpResponse:
        return self._call(RequestMethod.DELETE, url, parameters, headers)

    def head(self, url: str, parameters=None, headers=None) -> HttpResponse:
        return self._call(RequestMethod.HEAD, url, parameters, headers)

    def patch(self, url: str, parameters=None, headers=None) -> HttpResponse:
        return self._call(RequestMethod.PATCH, url, parameters, headers)
