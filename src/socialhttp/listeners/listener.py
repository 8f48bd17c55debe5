# src/socialhttp/listeners/listener.py

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core.exceptions import HTTPError
from ..core.request import HttpRequest
from ..core.response import HttpResponse


@dataclass(frozen=True)
class HttpResponseEvent:
    """
    Итог одного запроса: ответ ИЛИ ошибка, никогда оба.

    Attributes:
        request: Исходный запрос
        response: Ответ (None при ошибке)
        exception: Ошибка (None при успехе)
    """

    request: HttpRequest
    response: Optional[HttpResponse] = None
    exception: Optional[HTTPError] = None

    @property
    def is_success(self) -> bool:
        return self.exception is None


class HttpResponseListener(ABC):
    """
    Наблюдатель за завершёнными запросами.

    Вызывается синхронно после того, как цикл попыток завершился.
    Исключения слушателя логируются и не влияют на результат запроса.
    """

    @abstractmethod
    def http_response_received(self, event: HttpResponseEvent) -> None:
        """Вызывается после каждого запроса (успех или ошибка)."""
        pass
