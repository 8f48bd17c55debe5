"""
Кодирование тела запроса.

Три формата на проводе:
- multipart/form-data - есть хотя бы один файл
- raw body - единственный файл с Content-Type из raw_content_types
- application/x-www-form-urlencoded - только текстовые параметры
"""

import io
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Sequence

from .media_type import HttpMediaType
from .parameter import HttpParameter, contains_file, encode_parameters, is_multipart_request
from .request import HttpRequest
from ..utils.resources import closing_quietly

logger = logging.getLogger(__name__)

BOUNDARY_PREFIX = "----JHttpClient-upload"
CRLF = "\r\n"


def make_boundary() -> str:
    """Boundary: фиксированный префикс + время в миллисекундах."""
    return f"{BOUNDARY_PREFIX}{int(time.time() * 1000)}"


class StreamReadError(OSError):
    """Тело файлового параметра не читается (например, поток закрыт прошлой попыткой)."""


def read_file_body(param: HttpParameter) -> bytes:
    """
    Прочитать и закрыть тело файлового параметра.

    Поток, переданный вызывающим кодом, читается один раз: на повторной
    попытке он уже закрыт. Такая ошибка чтения идёт как I/O ошибка попытки.

    Raises:
        StreamReadError: поток закрыт или не читается
    """
    try:
        with closing_quietly(param.open()) as stream:
            return stream.read()
    except ValueError as e:
        raise StreamReadError(f"Cannot read body of file parameter '{param.name}': {e}") from e


class BodyKind(str, Enum):
    """Формат тела запроса."""
    MULTIPART = "multipart"
    RAW = "raw"
    URLENCODED = "urlencoded"


def select_body_kind(
    params: Sequence[HttpParameter],
    raw_content_types: Iterable[str] = ()
) -> BodyKind:
    """
    Выбрать формат тела.

    Examples:
        >>> select_body_kind([HttpParameter("a", "1")])
        <BodyKind.URLENCODED: 'urlencoded'>
        >>> select_body_kind([HttpParameter.of_file("f", "a.png")])
        <BodyKind.MULTIPART: 'multipart'>
        >>> select_body_kind([HttpParameter.of_file("f", "a.json")], ["application/json"])
        <BodyKind.RAW: 'raw'>
    """
    if is_multipart_request(params, raw_content_types):
        return BodyKind.MULTIPART
    if contains_file(params):
        return BodyKind.RAW
    return BodyKind.URLENCODED


@dataclass(frozen=True)
class EncodedBody:
    """Готовое тело запроса и заголовки, которые оно требует."""

    kind: BodyKind
    content_type: str
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)


class BodyEncoder:
    """
    Сериализатор тела запроса.

    Args:
        form_text_content_type: Content-Type текстовых частей multipart
            (None - строка Content-Type для них не пишется)
        boundary_factory: Генератор boundary (для тестов)

    Note:
        Поток файлового параметра читается один раз и закрывается.
        Повторная отправка того же запроса при retry не сможет перечитать
        поток, переданный вызывающим кодом: попытка падает с StreamReadError
        и дальше идёт как любая I/O ошибка (retry, затем TransportError).
    """

    def __init__(
        self,
        form_text_content_type: Optional[str] = HttpMediaType.TEXT_PLAIN,
        boundary_factory: Callable[[], str] = make_boundary
    ):
        self.form_text_content_type = form_text_content_type
        self._boundary_factory = boundary_factory

    def encode(
        self,
        request: HttpRequest,
        raw_content_types: Iterable[str] = ()
    ) -> EncodedBody:
        """Закодировать параметры запроса в тело."""
        params = request.parameters
        kind = select_body_kind(params, raw_content_types)

        if kind is BodyKind.MULTIPART:
            return self.encode_multipart(params)
        elif kind is BodyKind.RAW:
            return self.encode_raw(params[0])
        return self.encode_urlencoded(params)

    def encode_multipart(self, params: Sequence[HttpParameter]) -> EncodedBody:
        """
        multipart/form-data.

        Каждая часть: boundary, Content-Disposition, Content-Type,
        пустая строка, байты, CRLF. В конце закрывающий boundary с ``--``.
        """
        boundary = self._boundary_factory()
        delimiter = f"--{boundary}"
        out = io.BytesIO()

        def write(text: str) -> None:
            out.write(text.encode('utf-8'))

        for param in params:
            write(delimiter + CRLF)
            if param.is_file:
                write(
                    f'Content-Disposition: form-data; name="{param.name}"; '
                    f'filename="{param.file_name}"{CRLF}'
                )
                write(f"Content-Type: {param.content_type}{CRLF}{CRLF}")
                out.write(read_file_body(param))
                write(CRLF)
            else:
                write(f'Content-Disposition: form-data; name="{param.name}"{CRLF}')
                if self.form_text_content_type is not None:
                    write(f"Content-Type: {self.form_text_content_type}; charset=UTF-8{CRLF}")
                write(CRLF)
                logger.debug(f"Multipart field {param.name}: {param.value}")
                out.write((param.value or "").encode('utf-8'))
                write(CRLF)

        write(f"{delimiter}--{CRLF}")
        write(CRLF)

        return EncodedBody(
            kind=BodyKind.MULTIPART,
            content_type=f"{HttpMediaType.MULTIPART_FORM_DATA}; boundary={boundary}",
            body=out.getvalue(),
        )

    def encode_raw(self, param: HttpParameter) -> EncodedBody:
        """Единственный файл целиком становится телом запроса."""
        body = read_file_body(param)

        return EncodedBody(
            kind=BodyKind.RAW,
            content_type=param.content_type,
            body=body,
        )

    def encode_urlencoded(self, params: Sequence[HttpParameter]) -> EncodedBody:
        """
        application/x-www-form-urlencoded.

        Raises:
            EncodingError: если среди параметров есть файловый
        """
        encoded = encode_parameters(params)
        logger.debug(f"Post Params: {encoded}")
        body = encoded.encode('utf-8')

        return EncodedBody(
            kind=BodyKind.URLENCODED,
            content_type=HttpMediaType.APPLICATION_FORM_URLENCODED,
            body=body,
            headers={"Content-Length": str(len(body))},
        )
