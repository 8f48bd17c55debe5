"""Тесты освобождения ресурсов."""

import io
import logging

import pytest

from socialhttp.utils.resources import close_quietly, closing_quietly


class BrokenClose:
    def close(self):
        raise OSError("close failed")


def test_close_quietly_closes():
    stream = io.BytesIO(b"x")
    close_quietly(stream)
    assert stream.closed


def test_close_quietly_none():
    close_quietly(None)


def test_close_error_is_logged_not_raised(caplog):
    with caplog.at_level(logging.DEBUG, logger="socialhttp.utils.resources"):
        close_quietly(BrokenClose())

    assert "close failed" in caplog.text


def test_closing_quietly_keeps_original_error():
    with pytest.raises(ValueError, match="read failed"):
        with closing_quietly(BrokenClose()):
            raise ValueError("read failed")
