"""Тесты кодирования тела запроса."""

import io

import pytest

from socialhttp.core.encoder import (
    BOUNDARY_PREFIX,
    BodyEncoder,
    BodyKind,
    StreamReadError,
    make_boundary,
    select_body_kind,
)
from socialhttp.core.exceptions import EncodingError
from socialhttp.core.parameter import HttpParameter
from socialhttp.core.request import HttpRequest

BOUNDARY = "----JHttpClient-upload1700000000000"


@pytest.fixture
def encoder():
    return BodyEncoder(boundary_factory=lambda: BOUNDARY)


def post(*params):
    return HttpRequest.create("POST", "https://api.example.com/upload", parameters=params)


def test_make_boundary():
    boundary = make_boundary()
    assert boundary.startswith(BOUNDARY_PREFIX)
    assert boundary[len(BOUNDARY_PREFIX):].isdigit()


class TestSelectBodyKind:

    def test_text_only(self):
        assert select_body_kind([HttpParameter("a", "1")]) is BodyKind.URLENCODED

    def test_no_parameters(self):
        assert select_body_kind([]) is BodyKind.URLENCODED

    def test_file(self):
        assert select_body_kind([HttpParameter.of_file("f", "a.png")]) is BodyKind.MULTIPART

    def test_single_raw_file(self):
        params = [HttpParameter.of_file("f", "a.json")]
        assert select_body_kind(params, ["application/json"]) is BodyKind.RAW

    def test_raw_type_not_configured(self):
        params = [HttpParameter.of_file("f", "a.json")]
        assert select_body_kind(params, []) is BodyKind.MULTIPART


class TestMultipart:

    def test_exact_bytes(self, encoder, tmp_path):
        image = tmp_path / "cat.png"
        image.write_bytes(b"PNGDATA")

        encoded = encoder.encode(post(
            HttpParameter("status", "hi"),
            HttpParameter.of_file("media", image),
        ))

        expected = (
            f"--{BOUNDARY}\r\n"
            'Content-Disposition: form-data; name="status"\r\n'
            "Content-Type: text/plain; charset=UTF-8\r\n"
            "\r\n"
            "hi\r\n"
            f"--{BOUNDARY}\r\n"
            'Content-Disposition: form-data; name="media"; filename="cat.png"\r\n'
            "Content-Type: image/png\r\n"
            "\r\n"
            "PNGDATA\r\n"
            f"--{BOUNDARY}--\r\n"
            "\r\n"
        ).encode("utf-8")

        assert encoded.kind is BodyKind.MULTIPART
        assert encoded.content_type == f"multipart/form-data; boundary={BOUNDARY}"
        assert encoded.body == expected

    def test_text_part_without_content_type(self, tmp_path):
        encoder = BodyEncoder(form_text_content_type=None, boundary_factory=lambda: BOUNDARY)
        encoded = encoder.encode(post(
            HttpParameter("status", "hi"),
            HttpParameter.of_stream("media", "a.gif", io.BytesIO(b"GIF")),
        ))

        assert b'name="status"\r\n\r\nhi\r\n' in encoded.body
        assert b"text/plain" not in encoded.body
        assert b"Content-Type: image/gif\r\n\r\nGIF\r\n" in encoded.body

    def test_utf8_text_value(self, encoder):
        encoded = encoder.encode(post(
            HttpParameter("status", "привет"),
            HttpParameter.of_stream("media", "a.bin", io.BytesIO(b"\x00\x01")),
        ))

        assert "привет".encode("utf-8") in encoded.body
        assert b"Content-Type: application/octet-stream\r\n\r\n\x00\x01\r\n" in encoded.body

    def test_stream_is_closed_after_read(self, encoder):
        stream = io.BytesIO(b"data")
        encoder.encode(post(HttpParameter.of_stream("media", "a.png", stream)))
        assert stream.closed

    def test_closed_stream_raises_io_error(self, encoder):
        stream = io.BytesIO(b"data")
        stream.close()

        with pytest.raises(StreamReadError) as exc_info:
            encoder.encode(post(
                HttpParameter("status", "hi"),
                HttpParameter.of_stream("media", "a.png", stream),
            ))

        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestRaw:

    def test_raw_body(self, encoder):
        stream = io.BytesIO(b'{"a": 1}')
        encoded = encoder.encode(
            post(HttpParameter.of_stream("json", "param.json", stream)),
            raw_content_types=["application/json"],
        )

        assert encoded.kind is BodyKind.RAW
        assert encoded.content_type == "application/json"
        assert encoded.body == b'{"a": 1}'
        assert encoded.headers == {}


class TestUrlencoded:

    def test_body_and_content_length(self, encoder):
        encoded = encoder.encode(post(
            HttpParameter("status", "hello world"),
            HttpParameter("lang", "ja"),
        ))

        assert encoded.kind is BodyKind.URLENCODED
        assert encoded.content_type == "application/x-www-form-urlencoded"
        assert encoded.body == b"status=hello%20world&lang=ja"
        assert encoded.headers == {"Content-Length": str(len(encoded.body))}

    def test_empty(self, encoder):
        encoded = encoder.encode(post())
        assert encoded.body == b""
        assert encoded.headers == {"Content-Length": "0"}

    def test_file_parameter_rejected(self, encoder):
        with pytest.raises(EncodingError):
            encoder.encode_urlencoded([HttpParameter.of_file("media", "a.png")])
