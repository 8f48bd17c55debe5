"""Модель HTTP ответа с ленивым, кешируемым чтением тела."""

import json
import threading
from typing import Any, Dict, List, Optional

import requests

from .media_type import HttpMediaType
from ..utils.resources import close_quietly

DEFAULT_CHARSET = "UTF-8"


def charset_from_content_type(content_type: Optional[str]) -> Optional[str]:
    """
    Достать charset из заголовка Content-Type.

    Examples:
        >>> charset_from_content_type("text/html; charset=Shift_JIS")
        'Shift_JIS'
        >>> charset_from_content_type("application/json") is None
        True
    """
    if not content_type:
        return None

    for token in content_type.split(";")[1:]:
        key, _, value = token.strip().partition("=")
        if key.strip().lower() == HttpMediaType.CHARSET_PARAMETER and value:
            return value.strip().strip('"\'')
    return None


class HttpResponse:
    """
    Ответ сервера.

    Тело читается из потока ровно один раз - при первом обращении к
    as_bytes()/as_string(); дальше возвращается закешированное значение.
    После чтения соединение и сессия попытки освобождаются.

    Args:
        response: requests.Response, полученный с stream=True
        gzip_enabled: Распаковывать gzip (иначе вернуть сжатые байты как есть)
        session: Сессия попытки, закрывается вместе с ответом

    Example:
        >>> response = client.get("https://api.example.com/users")
        >>> response.status_code
        200
        >>> response.as_string() == response.as_string()
        True
    """

    def __init__(
        self,
        response: requests.Response,
        gzip_enabled: bool = True,
        session: Optional[requests.Session] = None
    ):
        self._response = response
        self._gzip_enabled = gzip_enabled
        self._session = session
        self._body: Optional[bytes] = None
        self._text: Optional[str] = None
        self._lock = threading.Lock()
        self.status_code: int = response.status_code
        self.url: str = response.url
        self.headers: Dict[str, List[str]] = _collect_headers(response)

    def get_response_header(self, name: str) -> Optional[str]:
        """Первое значение заголовка (имя без учёта регистра)."""
        lowered = name.lower()
        for key, values in self.headers.items():
            if key.lower() == lowered and values:
                return values[0]
        return None

    @property
    def charset(self) -> str:
        """Charset из Content-Type ответа или UTF-8."""
        return charset_from_content_type(self.get_response_header("Content-Type")) or DEFAULT_CHARSET

    def as_bytes(self) -> bytes:
        """Тело ответа целиком (чтение потока - один раз)."""
        with self._lock:
            if self._body is None:
                try:
                    if self._gzip_enabled or self._response.raw is None:
                        # requests/urllib3 сами распаковывают Content-Encoding: gzip
                        self._body = self._response.content
                    else:
                        self._body = self._response.raw.read(decode_content=False)
                finally:
                    self.close()
            return self._body

    def as_string(self) -> str:
        """Тело ответа строкой в charset ответа (кешируется)."""
        if self._text is None:
            body = self.as_bytes()
            try:
                self._text = body.decode(self.charset, errors='replace')
            except LookupError:
                # Неизвестный charset в Content-Type
                self._text = body.decode(DEFAULT_CHARSET, errors='replace')
        return self._text

    def as_json(self) -> Any:
        """Тело ответа как JSON."""
        return json.loads(self.as_string())

    def close(self) -> None:
        """Освободить соединение и сессию попытки."""
        close_quietly(self._response)
        close_quietly(self._session)
        self._session = None

    def __repr__(self) -> str:
        return f"<HttpResponse [{self.status_code}]>"


def _collect_headers(response: requests.Response) -> Dict[str, List[str]]:
    """Заголовки с несколькими значениями на ключ, регистр как в ответе."""
    raw_headers = getattr(response.raw, 'headers', None)
    if raw_headers is not None and hasattr(raw_headers, 'getlist'):
        return {key: list(raw_headers.getlist(key)) for key in raw_headers.keys()}
    return {key: [value] for key, value in response.headers.items()}
