# src/socialhttp/core/registry.py
"""
Registry of HTTPClient instances keyed by configuration.

Not a global singleton: create one registry per process (or per
component) and pass it to the call sites that need it.
"""

import threading
from typing import Dict, Optional

from .config import HttpClientConfiguration, DEFAULT_CONFIGURATION
from .http_client import HTTPClient


class ClientRegistry:
    """
    Memoizes one HTTPClient per configuration value.

    Configurations are frozen dataclasses, so two equal configurations
    built independently share a client.

    Example:
        >>> registry = ClientRegistry()
        >>> a = registry.get(HttpClientConfiguration(retry_count=1))
        >>> b = registry.get(HttpClientConfiguration(retry_count=1))
        >>> a is b
        True
    """

    def __init__(self):
        self._clients: Dict[HttpClientConfiguration, HTTPClient] = {}
        self._lock = threading.Lock()

    def get(self, config: Optional[HttpClientConfiguration] = None) -> HTTPClient:
        """Client for ``config``, created on first use."""
        if config is None:
            config = DEFAULT_CONFIGURATION

        client = self._clients.get(config)
        if client is None:
            with self._lock:
                client = self._clients.get(config)
                if client is None:
                    client = HTTPClient(config)
                    self._clients[config] = client
        return client

    def clear(self) -> None:
        """Close and forget all clients."""
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            client.close()

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, config: HttpClientConfiguration) -> bool:
        return config in self._clients
