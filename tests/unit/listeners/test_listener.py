"""Тесты слушателей ответа."""

import logging

import pytest

from socialhttp.core.exceptions import HTTPError
from socialhttp.core.request import HttpRequest
from socialhttp.listeners import HttpResponseEvent, HttpResponseListener, LoggingListener


class FakeResponse:
    status_code = 200


def test_listener_is_abstract():
    with pytest.raises(TypeError):
        HttpResponseListener()


def test_event_success():
    request = HttpRequest.create("GET", "https://api.example.com")
    event = HttpResponseEvent(request, FakeResponse(), None)

    assert event.is_success
    assert event.exception is None


def test_event_failure():
    request = HttpRequest.create("GET", "https://api.example.com")
    event = HttpResponseEvent(request, None, HTTPError("boom", response_code=500))

    assert not event.is_success
    assert event.response is None


def test_logging_listener_success(caplog):
    request = HttpRequest.create("GET", "https://api.example.com/items")

    with caplog.at_level(logging.INFO, logger="socialhttp.listeners"):
        LoggingListener().http_response_received(HttpResponseEvent(request, FakeResponse()))

    assert "Received response: 200 from GET https://api.example.com/items" in caplog.text


def test_logging_listener_failure_masks_url(caplog):
    request = HttpRequest.create("GET", "https://api.example.com/items?token=abc")
    error = HTTPError("Rate limited", response_code=420)

    with caplog.at_level(logging.INFO, logger="socialhttp.listeners"):
        LoggingListener().http_response_received(HttpResponseEvent(request, None, error))

    assert "failed (code 420): Rate limited" in caplog.text
    assert "token=abc" not in caplog.text
