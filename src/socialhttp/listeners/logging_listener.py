# src/socialhttp/listeners/logging_listener.py

import logging

from .listener import HttpResponseEvent, HttpResponseListener
from ..utils.sanitizer import mask_sensitive_data

logger = logging.getLogger(__name__)


class LoggingListener(HttpResponseListener):
    """
    Слушатель, логирующий итог каждого запроса.

    Example:
        >>> wrapper = HTTPClientWrapper()
        >>> wrapper.set_http_response_listener(LoggingListener())
    """

    def __init__(self, level: int = logging.INFO):
        self.level = level

    def http_response_received(self, event: HttpResponseEvent) -> None:
        request = event.request
        url = mask_sensitive_data(request.target_url)

        if event.is_success:
            logger.log(
                self.level,
                f"Received response: {event.response.status_code} "
                f"from {request.method.value} {url}"
            )
        else:
            logger.error(
                f"Request {request.method.value} {url} failed "
                f"(code {event.exception.response_code}): {event.exception.message[:200]}"
            )
