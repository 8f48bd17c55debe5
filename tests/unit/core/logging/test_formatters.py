"""Tests for log formatters."""

import json
import logging
import sys

import pytest

from socialhttp.core.logging.config import LogFormat
from socialhttp.core.logging.formatters import (
    ColoredFormatter,
    JSONFormatter,
    TextFormatter,
    get_formatter,
)


def make_record(**extra):
    record = logging.LogRecord(
        name="socialhttp.client",
        level=logging.INFO,
        pathname="test.py",
        lineno=10,
        msg="Request completed",
        args=(),
        exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "socialhttp.client"
        assert data["message"] == "Request completed"
        assert data["time"].endswith("+00:00")

    def test_extra_fields(self):
        data = json.loads(JSONFormatter().format(make_record(status_code=200, attempt=1)))

        assert data["status_code"] == 200
        assert data["attempt"] == 1

    def test_non_serializable_values(self):
        data = json.loads(JSONFormatter().format(make_record(payload=object())))
        assert data["payload"].startswith("<object")

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestTextFormatter:

    def test_format(self):
        output = TextFormatter().format(make_record(status_code=200))

        assert " INFO " in output
        assert "socialhttp.client: Request completed" in output
        assert "Request completed" in output
        assert output.endswith("status_code=200")


class TestColoredFormatter:

    def test_level_is_colored_and_restored(self):
        record = make_record()
        output = ColoredFormatter().format(record)

        assert "\033[32mINFO\033[0m" in output
        assert record.levelname == "INFO"


class TestGetFormatter:

    @pytest.mark.parametrize("name,cls", [
        ("json", JSONFormatter),
        ("text", TextFormatter),
        (LogFormat.COLORED, ColoredFormatter),
    ])
    def test_known(self, name, cls):
        assert type(get_formatter(name)) is cls

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_formatter("xml")
