"""Таблица media types и определение Content-Type по имени файла."""

import os


class HttpMediaType:
    """Константы media types."""

    CHARSET_PARAMETER = "charset"
    MEDIA_TYPE_WILDCARD = "*"
    WILDCARD = "*/*"
    APPLICATION_XML = "application/xml"
    APPLICATION_ATOM_XML = "application/atom+xml"
    APPLICATION_XHTML_XML = "application/xhtml+xml"
    APPLICATION_SVG_XML = "application/svg+xml"
    APPLICATION_JSON = "application/json"
    APPLICATION_FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"
    APPLICATION_OCTET_STREAM = "application/octet-stream"
    TEXT_PLAIN = "text/plain"
    TEXT_XML = "text/xml"
    TEXT_HTML = "text/html"
    IMAGE_JPEG = "image/jpeg"
    IMAGE_GIF = "image/gif"
    IMAGE_PNG = "image/png"


_EXTENSION_TYPES = {
    "gif": HttpMediaType.IMAGE_GIF,
    "png": HttpMediaType.IMAGE_PNG,
    "jpg": HttpMediaType.IMAGE_JPEG,
    "jpeg": HttpMediaType.IMAGE_JPEG,
    "json": HttpMediaType.APPLICATION_JSON,
}


def content_type_for_filename(file_name: str) -> str:
    """
    Content-Type по расширению имени файла.

    Берётся последнее расширение, регистр не учитывается. Неизвестные
    расширения и имена без расширения дают application/octet-stream.

    Examples:
        >>> content_type_for_filename("a.PNG")
        'image/png'
        >>> content_type_for_filename("a.tar.gz")
        'application/octet-stream'
    """
    base = os.path.basename(file_name)
    if "." not in base:
        return HttpMediaType.APPLICATION_OCTET_STREAM

    extension = base.rsplit(".", 1)[1].lower()
    return _EXTENSION_TYPES.get(extension, HttpMediaType.APPLICATION_OCTET_STREAM)
