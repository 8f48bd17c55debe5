"""Listeners for completed requests."""

from .listener import HttpResponseEvent, HttpResponseListener
from .logging_listener import LoggingListener

__all__ = [
    "HttpResponseEvent",
    "HttpResponseListener",
    "LoggingListener",
]
