"""Header types — the typed views a ``Headers`` container can produce.

Each registered kind pairs a ``TypedHeader`` subclass with a combination
``Policy``; unregistered names fall back to ``GenericHeader``.
"""

from wren.header.base import GenericHeader, Header, HeaderType, Policy, TypedHeader, generic_header_type
from wren.header.connection import ConnectionHeader, ContentEncodingHeader
from wren.header.content_type import ContentTypeHeader
from wren.header.cookie import Cookie, CookieHeader
from wren.header.set_cookie import SetCookie, SetCookieHeader

__all__ = [
    "ConnectionHeader",
    "ContentEncodingHeader",
    "ContentTypeHeader",
    "Cookie",
    "CookieHeader",
    "GenericHeader",
    "Header",
    "HeaderType",
    "Policy",
    "SetCookie",
    "SetCookieHeader",
    "TypedHeader",
    "generic_header_type",
]
