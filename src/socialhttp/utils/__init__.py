"""Утилиты socialhttp."""

from .resources import close_quietly, closing_quietly
from .sanitizer import mask_headers, mask_sensitive_data

__all__ = [
    "close_quietly",
    "closing_quietly",
    "mask_headers",
    "mask_sensitive_data",
]
