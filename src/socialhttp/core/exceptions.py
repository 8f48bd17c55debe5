"""
Иерархия исключений socialhttp.

Классификация:
- HTTPError - единый тип отказа запроса (статус ответа или транспорт)
- EncodingError / ConfigurationError - ошибки программиста, НЕ ретраятся
"""

from typing import TYPE_CHECKING, Optional

import requests

if TYPE_CHECKING:
    from .response import HttpResponse

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HTTPClientException(Exception):
    """Базовое исключение socialhttp."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОТКАЗ ЗАПРОСА
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class HTTPError(HTTPClientException):
    """
    Отказ запроса.

    Создаётся либо с ответом сервера (response), либо с исходной
    I/O ошибкой (cause). По этим полям вызывающий различает
    протокольный отказ и транспортный.

    Args:
        message: Сообщение (для протокольного отказа - тело ответа)
        response: Снимок ответа (опционально)
        response_code: HTTP статус, -1 если статус не был прочитан
        cause: Исходная I/O ошибка (опционально)
    """

    def __init__(
        self,
        message: str,
        response: Optional['HttpResponse'] = None,
        response_code: int = -1,
        cause: Optional[BaseException] = None
    ):
        self.response = response
        self.response_code = response_code
        self.cause = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def is_transport_error(self) -> bool:
        """True если отказ вызван I/O ошибкой, а не статусом ответа."""
        return self.cause is not None

    @staticmethod
    def from_response(response: 'HttpResponse') -> 'HTTPError':
        """
        Построить отказ по ответу сервера.

        Тело ответа становится сообщением, подкласс выбирается по статусу.

        Examples:
            >>> error = HTTPError.from_response(response)  # status 400
            >>> isinstance(error, BadRequestError)
            True
        """
        code = response.status_code
        message = response.as_string()

        if code == 400:
            return BadRequestError(message, response)
        elif code == ENHANCE_YOUR_CALM:
            return EnhanceYourCalmError(message, response)
        elif code >= 500:
            return ServerError(message, response)
        return ClientError(message, response)

    @staticmethod
    def from_transport(cause: BaseException, response_code: int = -1) -> 'HTTPError':
        """Построить отказ по I/O ошибке с последним известным статусом."""
        return classify_requests_exception(cause, response_code)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"response_code={self.response_code})"
        )


ENHANCE_YOUR_CALM = 420


class StatusError(HTTPError):
    """Отказ по статусу ответа."""

    def __init__(self, message: str, response: 'HttpResponse'):
        super().__init__(message, response=response, response_code=response.status_code)


class BadRequestError(StatusError):
    """400 Bad Request."""


class EnhanceYourCalmError(StatusError):
    """420 Enhance Your Calm (rate limit)."""


class ClientError(StatusError):
    """Прочие статусы ниже 500, кроме 2xx и 302."""


class ServerError(StatusError):
    """5xx ошибка сервера."""

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ТРАНСПОРТНЫЕ ОШИБКИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TransportError(HTTPError):
    """I/O ошибка: таймаут, сброс соединения, DNS."""

    def __init__(self, message: str, cause: BaseException, response_code: int = -1):
        super().__init__(message, response_code=response_code, cause=cause)


class TimeoutError(TransportError):
    """Таймаут подключения или чтения."""


class ConnectionError(TransportError):
    """
    Ошибка подключения.

    Примеры:
    - Connection refused
    - Connection reset
    - Name resolution failed
    """


class ProxyError(ConnectionError):
    """Ошибка прокси."""

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ОШИБКИ ПРОГРАММИСТА
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class EncodingError(HTTPClientException, ValueError):
    """Недопустимая комбинация параметров для выбранной кодировки тела."""


class ConfigurationError(HTTPClientException, ValueError):
    """Ошибка конфигурации."""

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def classify_requests_exception(
    exc: BaseException,
    response_code: int = -1
) -> TransportError:
    """
    Конвертировать I/O исключение в TransportError.

    Args:
        exc: Исключение из requests или OSError
        response_code: Последний известный статус (-1 если не прочитан)

    Returns:
        TransportError с правильной классификацией

    Examples:
        >>> exc = requests.exceptions.ReadTimeout("read timed out")
        >>> error = classify_requests_exception(exc)
        >>> assert isinstance(error, TimeoutError)
        >>> assert error.response_code == -1
    """
    message = str(exc) or exc.__class__.__name__

    if isinstance(exc, requests.exceptions.Timeout):
        return TimeoutError(message, exc, response_code)

    elif isinstance(exc, requests.exceptions.ProxyError):
        return ProxyError(message, exc, response_code)

    elif isinstance(exc, requests.exceptions.ConnectionError):
        return ConnectionError(message, exc, response_code)

    return TransportError(message, exc, response_code)
