"""Core модули socialhttp."""

from .config import HttpClientConfiguration, DEFAULT_CONFIGURATION
from .media_type import HttpMediaType, content_type_for_filename
from .parameter import HttpParameter
from .request import HttpRequest, RequestMethod
from .response import HttpResponse
from .encoder import BodyEncoder, BodyKind, EncodedBody, StreamReadError, select_body_kind
from .connector import Connector
from .retry_engine import RetryEngine, Outcome, AttemptState, classify
from .exceptions import (
    HTTPClientException,
    HTTPError,
    StatusError,
    BadRequestError,
    EnhanceYourCalmError,
    ClientError,
    ServerError,
    TransportError,
    TimeoutError,
    ConnectionError,
    ProxyError,
    EncodingError,
    ConfigurationError,
    classify_requests_exception,
)
from .http_client import HTTPClient
from .registry import ClientRegistry

__all__ = [
    # Config
    "HttpClientConfiguration",
    "DEFAULT_CONFIGURATION",
    # Models
    "HttpMediaType",
    "content_type_for_filename",
    "HttpParameter",
    "HttpRequest",
    "RequestMethod",
    "HttpResponse",
    # Encoding / transport
    "BodyEncoder",
    "BodyKind",
    "EncodedBody",
    "StreamReadError",
    "select_body_kind",
    "Connector",
    # Retry
    "RetryEngine",
    "Outcome",
    "AttemptState",
    "classify",
    # Core
    "HTTPClient",
    "ClientRegistry",
    # Exceptions
    "HTTPClientException",
    "HTTPError",
    "StatusError",
    "BadRequestError",
    "EnhanceYourCalmError",
    "ClientError",
    "ServerError",
    "TransportError",
    "TimeoutError",
    "ConnectionError",
    "ProxyError",
    "EncodingError",
    "ConfigurationError",
    "classify_requests_exception",
]
