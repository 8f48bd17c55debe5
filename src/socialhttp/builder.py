# src/socialhttp/builder.py
"""
Fluent-построитель запросов.

Example:
    >>> response = (
    ...     HttpRequestBuilder()
    ...     .target("https://api.example.com")
    ...     .path("/users/{id}/posts")
    ...     .path_value("id", "42")
    ...     .query("limit", 20)
    ...     .accept(HttpMediaType.APPLICATION_JSON)
    ...     .get()
    ... )
"""

import io
import os
from typing import Any, BinaryIO, Dict, List, Optional

from .core.config import HttpClientConfiguration, DEFAULT_CONFIGURATION
from .core.exceptions import ConfigurationError
from .core.http_client import HTTPClient
from .core.parameter import HttpParameter
from .core.request import HttpRequest, RequestMethod
from .core.response import HttpResponse

JSON_PARAMETER_NAME = "json"
JSON_FILE_NAME = "param.json"


def default_user_agent() -> str:
    from . import __version__
    return f"socialhttp/{__version__}"


class HttpRequestBuilder:
    """
    Собирает URL, параметры и заголовки, затем выполняет запрос.

    Args:
        config: Конфигурация клиента (DEFAULT_CONFIGURATION если None)
        client: Готовый HTTPClient; если не задан, создаётся из config при
            первом запросе и закрывается в close()
    """

    def __init__(
        self,
        config: Optional[HttpClientConfiguration] = None,
        client: Optional[HTTPClient] = None
    ):
        self._config = config or (client.config if client else DEFAULT_CONFIGURATION)
        self._client = client
        self._owns_client = False
        self._host: Optional[str] = None
        self._path: Optional[str] = None
        self._media_type: Optional[str] = None
        self._user_agent: Optional[str] = default_user_agent()
        self._params: List[HttpParameter] = []
        self._headers: Dict[str, str] = {}

    def target(self, uri: str) -> 'HttpRequestBuilder':
        self._host = uri
        return self

    def path(self, path: str) -> 'HttpRequestBuilder':
        self._path = path
        return self

    def path_value(self, key: str, value: Any) -> 'HttpRequestBuilder':
        """Подставить ``value`` вместо ``{key}`` в пути."""
        if self._path is None:
            raise ConfigurationError("path() must be set before path_value()")
        self._path = self._path.replace("{" + key + "}", str(value))
        return self

    def query(self, key: str, value: Any) -> 'HttpRequestBuilder':
        return self.param(key, value)

    def param(self, key: str, value: Any) -> 'HttpRequestBuilder':
        """Текстовый параметр; os.PathLike значение становится файлом."""
        if isinstance(value, os.PathLike):
            self._params.append(HttpParameter.of_file(key, value))
        else:
            self._params.append(HttpParameter(key, value))
        return self

    def file(self, key: str, path) -> 'HttpRequestBuilder':
        self._params.append(HttpParameter.of_file(key, path))
        return self

    def stream(self, key: str, stream: BinaryIO, file_name: str) -> 'HttpRequestBuilder':
        self._params.append(HttpParameter.of_stream(key, file_name, stream))
        return self

    def json(self, text: str) -> 'HttpRequestBuilder':
        """JSON документ телом запроса (application/json)."""
        stream = io.BytesIO(text.encode('utf-8'))
        self._params.append(HttpParameter.of_stream(JSON_PARAMETER_NAME, JSON_FILE_NAME, stream))
        return self

    def user_agent(self, user_agent: Optional[str]) -> 'HttpRequestBuilder':
        """User-Agent (None - не отправлять)."""
        self._user_agent = user_agent
        return self

    def accept(self, media_type: str) -> 'HttpRequestBuilder':
        self._media_type = media_type
        return self

    def header(self, key: str, value: str) -> 'HttpRequestBuilder':
        self._headers[key] = value
        return self

    @property
    def url(self) -> str:
        if self._host is None:
            raise ConfigurationError("target() is required")
        return self._host + (self._path or "")

    def build(self, method: RequestMethod) -> HttpRequest:
        headers = dict(self._headers)
        if self._media_type is not None:
            headers["Accept"] = self._media_type
        if self._user_agent is not None:
            headers["User-Agent"] = self._user_agent

        return HttpRequest(
            method=method,
            url=self.url,
            parameters=tuple(self._params),
            headers=headers,
        )

    @property
    def client(self) -> HTTPClient:
        """HTTPClient для запросов; создаётся из config один раз на builder."""
        if self._client is None:
            self._client = HTTPClient(self._config)
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Закрыть клиент, если его создал builder."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None
            self._owns_client = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _proceed(self, method: RequestMethod) -> HttpResponse:
        request = self.build(method)
        return self.client.request(request)

    def get(self) -> HttpResponse:
        return self._proceed(RequestMethod.GET)

    def post(self) -> HttpResponse:
        return self._proceed(RequestMethod.POST)

    def put(self) -> HttpResponse:
        return self._proceed(RequestMethod.PUT)

    def delete(self) -> HttpResponse:
        return self._proceed(RequestMethod.DELETE)

    def head(self) -> HttpResponse:
        return self._proceed(RequestMethod.HEAD)

    def patch(self) -> HttpResponse:
        return self._proceed(RequestMethod.PATCH)
