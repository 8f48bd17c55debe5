"""
Модель параметра запроса.

Параметр - это либо пара имя/текст, либо пара имя/файл. Для файла
Content-Type выводится по расширению имени.
"""

import functools
import os
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Optional, Sequence, Tuple, Union
from urllib.parse import quote_plus

from .exceptions import EncodingError
from .media_type import content_type_for_filename

PathLike = Union[str, 'os.PathLike[str]']


@functools.total_ordering
@dataclass(frozen=True)
class HttpParameter:
    """
    Параметр HTTP запроса (immutable).

    Ровно одно из ``value`` / ``file`` имеет смысл. Параметр считается
    файловым, если задан ``file``; если при этом задан ``file_body``,
    байты берутся из него, а не из файла на диске.

    Равенство и hash учитывают поток по идентичности: два параметра с
    одинаковым именем файла, но разными потоками не равны.

    Examples:
        >>> HttpParameter("status", "hello")
        >>> HttpParameter("count", 20)
        >>> HttpParameter.of_file("media", "/tmp/cat.png")
        >>> HttpParameter.of_stream("media", "cat.png", io.BytesIO(data))
    """

    name: str
    value: Optional[str] = None
    file: Optional[str] = None
    file_body: Optional[BinaryIO] = field(default=None, repr=False)

    def __post_init__(self):
        """Нормализовать value к строке."""
        if self.value is not None and not isinstance(self.value, str):
            if isinstance(self.value, bool):
                normalized = "true" if self.value else "false"
            else:
                normalized = str(self.value)
            object.__setattr__(self, 'value', normalized)
        if self.file is not None:
            object.__setattr__(self, 'file', os.fspath(self.file))

    @classmethod
    def of_file(cls, name: str, path: PathLike) -> 'HttpParameter':
        """Файловый параметр, байты читаются с диска."""
        return cls(name=name, file=os.fspath(path))

    @classmethod
    def of_stream(cls, name: str, file_name: str, stream: BinaryIO) -> 'HttpParameter':
        """Файловый параметр с готовым потоком байт."""
        return cls(name=name, file=file_name, file_body=stream)

    @property
    def is_file(self) -> bool:
        return self.file is not None

    @property
    def has_file_body(self) -> bool:
        return self.file_body is not None

    @property
    def file_name(self) -> str:
        """Имя файла без каталога."""
        if not self.is_file:
            raise ValueError(f"parameter [{self.name}] is not a file")
        return os.path.basename(self.file)

    @property
    def content_type(self) -> str:
        """
        Content-Type файлового параметра.

        Raises:
            ValueError: если параметр текстовый
        """
        if not self.is_file:
            raise ValueError(f"parameter [{self.name}] is not a file")
        return content_type_for_filename(self.file)

    def open(self) -> BinaryIO:
        """Поток байт файла: file_body если задан, иначе открыть путь."""
        if self.has_file_body:
            return self.file_body
        return open(self.file, 'rb')

    def _sort_key(self) -> Tuple[str, str]:
        return (self.name, self.value or "")

    def __lt__(self, other: 'HttpParameter') -> bool:
        if not isinstance(other, HttpParameter):
            return NotImplemented
        return self._sort_key() < other._sort_key()


def contains_file(params: Optional[Iterable[HttpParameter]]) -> bool:
    """True если среди параметров есть хотя бы один файловый."""
    if not params:
        return False
    return any(param.is_file for param in params)


def is_multipart_request(
    params: Optional[Sequence[HttpParameter]],
    raw_content_types: Iterable[str] = ()
) -> bool:
    """
    Нужен ли multipart/form-data.

    Multipart выбирается при наличии файлового параметра, кроме случая,
    когда параметр единственный и его Content-Type входит в
    ``raw_content_types`` - тогда файл уходит телом запроса как есть.
    """
    if not contains_file(params):
        return False
    if len(params) == 1 and params[0].content_type in set(raw_content_types):
        return False
    return True


def merge(
    params1: Optional[Sequence[HttpParameter]],
    params2: Union[None, HttpParameter, Sequence[HttpParameter]]
) -> Tuple[HttpParameter, ...]:
    """Склеить два набора параметров (None допускается с обеих сторон)."""
    if isinstance(params2, HttpParameter):
        params2 = (params2,)
    return tuple(params1 or ()) + tuple(params2 or ())


def encode(value: str) -> str:
    """
    Percent-encoding по RFC 3986.

    После стандартного form-кодирования применяются три поправки:
    ``*`` -> ``%2A``, ``+`` -> ``%20``, ``%7E`` -> ``~``.

    Examples:
        >>> encode("a b*c~d")
        'a%20b%2Ac~d'
    """
    encoded = quote_plus(value, safe='*')
    return (
        encoded
        .replace('*', '%2A')
        .replace('+', '%20')
        .replace('%7E', '~')
    )


def encode_parameters(params: Optional[Iterable[HttpParameter]]) -> str:
    """
    Закодировать текстовые параметры в ``name=value&...``.

    Raises:
        EncodingError: если среди параметров есть файловый
    """
    if not params:
        return ""

    pairs = []
    for param in params:
        if param.is_file:
            raise EncodingError(f"parameter [{param.name}] should be text")
        pairs.append(f"{encode(param.name)}={encode(param.value or '')}")
    return "&".join(pairs)
