"""socialhttp - synchronous HTTP client with retries, multipart upload and proxy support."""

import logging
from importlib.metadata import version, PackageNotFoundError

# Version info - read from package metadata (single source of truth in pyproject.toml)
try:
    __version__ = version("socialhttp")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

from .core.config import HttpClientConfiguration, DEFAULT_CONFIGURATION
from .core.media_type import HttpMediaType
from .core.parameter import HttpParameter
from .core.request import HttpRequest, RequestMethod
from .core.response import HttpResponse
from .core.http_client import HTTPClient
from .core.registry import ClientRegistry
from .core.env_config import load_from_env
from .core.logging import LoggingConfig
from .core.exceptions import (
    HTTPClientException,
    HTTPError,
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
)
from .listeners import HttpResponseEvent, HttpResponseListener, LoggingListener
from .wrapper import HTTPClientWrapper
from .builder import HttpRequestBuilder

# Set up logging - add NullHandler to prevent "No handler found" warnings
# Users can configure logging themselves using logging.getLogger('socialhttp')
logging.getLogger('socialhttp').addHandler(logging.NullHandler())

__all__ = [
    # Core
    "HTTPClient",
    "HTTPClientWrapper",
    "HttpRequestBuilder",
    "ClientRegistry",

    # Config
    "HttpClientConfiguration",
    "DEFAULT_CONFIGURATION",
    "LoggingConfig",
    "load_from_env",

    # Models
    "HttpMediaType",
    "HttpParameter",
    "HttpRequest",
    "RequestMethod",
    "HttpResponse",

    # Listeners
    "HttpResponseEvent",
    "HttpResponseListener",
    "LoggingListener",

    # Exceptions
    "HTTPClientException",
    "HTTPError",
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

    # Version
    "__version__",
]
