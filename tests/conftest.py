"""
Pytest configuration and fixtures for socialhttp tests.
"""

import logging
from unittest.mock import patch

import pytest
import responses as responses_lib

from socialhttp import HTTPClient, HttpClientConfiguration
from socialhttp.core.logging.config import LoggingConfig
from socialhttp.core.retry_engine import RetryEngine


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://api.example.com"


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def no_sleep():
    """Patch the retry pause; yields the mock to count sleeps."""
    with patch.object(RetryEngine, "sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture
def client():
    """HTTP client instance for testing."""
    client = HTTPClient()
    yield client
    client.close()


@pytest.fixture
def retry_client():
    """Client with two retries and no real pause."""
    client = HTTPClient(HttpClientConfiguration(retry_count=2, retry_interval_seconds=0))
    yield client
    client.close()


@pytest.fixture
def logging_config():
    """
    LoggingConfig fixture for testing.

    Example:
        def test_with_logging(logging_config):
            client = HTTPClient(HttpClientConfiguration(logging=logging_config))
    """
    return LoggingConfig(level="DEBUG", console=True)


@pytest.fixture(autouse=True)
def reset_client_logger():
    """HTTPClientLogger disables propagation; restore it between tests."""
    yield
    client_logger = logging.getLogger("socialhttp.client")
    for handler in client_logger.handlers[:]:
        client_logger.removeHandler(handler)
    client_logger.propagate = True
    client_logger.setLevel(logging.NOTSET)
