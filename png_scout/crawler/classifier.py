"""
Content classification helpers: PNG signature and link-bearing documents.
"""
from __future__ import annotations

from typing import Final

PNG_SIGNATURE: Final[bytes] = b"\x89PNG\r\n\x1a\n"

CT_HTML: Final[str] = "text/html"


def is_png(body: bytes) -> bool:
    """Return True if *body* starts with the 8-byte PNG signature."""
    return body[: len(PNG_SIGNATURE)] == PNG_SIGNATURE


def is_html(content_type: str) -> bool:
    """Return True if the Content-Type header announces an HTML document."""
    return CT_HTML in content_type.lower()
