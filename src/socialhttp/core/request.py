"""Модель HTTP запроса."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from .parameter import HttpParameter, encode_parameters


class RequestMethod(str, Enum):
    """HTTP методы."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    PATCH = "PATCH"

    @property
    def has_body(self) -> bool:
        """Параметры уходят телом запроса, а не в query string."""
        return self in (RequestMethod.POST, RequestMethod.PUT, RequestMethod.PATCH)


@dataclass(frozen=True)
class HttpRequest:
    """
    Immutable HTTP запрос.

    Один экземпляр на логический вызов; при retry переиспользуется тот же
    объект, соединение открывается заново.

    Args:
        method: HTTP метод
        url: URL запроса
        parameters: Параметры в порядке добавления
        headers: Заголовки в порядке добавления

    Examples:
        >>> HttpRequest(RequestMethod.GET, "https://api.example.com/users")
        >>> HttpRequest(
        ...     RequestMethod.POST,
        ...     "https://api.example.com/status",
        ...     parameters=[HttpParameter("status", "hello")],
        ...     headers={"Authorization": "Bearer token"},
        ... )
    """

    method: RequestMethod
    url: str
    parameters: Tuple[HttpParameter, ...] = ()
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        """Нормализовать метод и заморозить коллекции."""
        if not isinstance(self.method, RequestMethod):
            object.__setattr__(self, 'method', RequestMethod(str(self.method).upper()))
        object.__setattr__(self, 'parameters', tuple(self.parameters or ()))
        object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers or {})))

    @classmethod
    def create(
        cls,
        method: str,
        url: str,
        parameters: Optional[Sequence[HttpParameter]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> 'HttpRequest':
        """Удобный конструктор, принимающий None вместо пустых коллекций."""
        return cls(
            method=RequestMethod(method.upper()),
            url=url,
            parameters=tuple(parameters or ()),
            headers=headers or {},
        )

    @property
    def target_url(self) -> str:
        """
        URL, по которому уходит запрос.

        Для методов без тела параметры дописываются query string.
        """
        if self.method.has_body or not self.parameters:
            return self.url

        separator = "&" if "?" in self.url else "?"
        return f"{self.url}{separator}{encode_parameters(self.parameters)}"
