"""The ``Set-Cookie`` response header.

Each ``Set-Cookie`` line is an independent directive and must never be
folded into another, so the type is registered with ``Policy.MULTI``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from wren._internal.types import RawValues
from wren.header.base import TypedHeader

logger = logging.getLogger("wren.header")


@dataclass(frozen=True, slots=True)
class SetCookie:
    """A single ``Set-Cookie`` directive.

    Attributes this class does not model are kept verbatim in
    ``extensions`` so they survive a parse/serialize cycle.
    """

    name: str
    value: str = ""
    max_age: int | None = None
    expires: str | None = None
    path: str | None = None
    domain: str | None = None
    secure: bool = False
    httponly: bool = False
    samesite: str | None = None
    extensions: tuple[str, ...] = ()

    @classmethod
    def parse(cls, header: str) -> SetCookie:
        """Parse one ``Set-Cookie`` line."""
        pair, *attributes = header.split(";")
        name, _, value = pair.partition("=")
        fields: dict[str, object] = {}
        extensions: list[str] = []
        for attribute in attributes:
            attribute = attribute.strip()
            if not attribute:
                continue
            key, sep, attr_value = attribute.partition("=")
            key = key.strip().lower()
            attr_value = attr_value.strip()
            if key == "max-age" and sep:
                try:
                    fields["max_age"] = int(attr_value)
                except ValueError:
                    logger.debug("Set-Cookie Max-Age %r is not an integer", attr_value)
                    extensions.append(attribute)
            elif key in ("expires", "path", "domain", "samesite") and sep:
                fields[key] = attr_value
            elif key == "secure" and not sep:
                fields["secure"] = True
            elif key == "httponly" and not sep:
                fields["httponly"] = True
            else:
                extensions.append(attribute)
        return cls(
            name=name.strip(),
            value=value.strip(),
            extensions=tuple(extensions),
            **fields,  # type: ignore[arg-type]
        )

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        parts = [f"{self.name}={self.value}"]
        if self.max_age is not None:
            parts.append(f"Max-Age={self.max_age}")
        if self.expires is not None:
            parts.append(f"Expires={self.expires}")
        if self.path is not None:
            parts.append(f"Path={self.path}")
        if self.domain is not None:
            parts.append(f"Domain={self.domain}")
        if self.secure:
            parts.append("Secure")
        if self.httponly:
            parts.append("HttpOnly")
        if self.samesite is not None:
            parts.append(f"SameSite={self.samesite}")
        parts.extend(self.extensions)
        return "; ".join(parts)


@dataclass(frozen=True, slots=True)
class SetCookieHeader(TypedHeader):
    """All ``Set-Cookie`` directives of a response, one per line."""

    NAME: ClassVar[str] = "Set-Cookie"
    TAG: ClassVar[str] = "set-cookie"

    cookies: tuple[SetCookie, ...] = ()

    @classmethod
    def from_values(cls, values: Sequence[str]) -> SetCookieHeader | None:
        cookies = tuple(SetCookie.parse(value) for value in values if value.strip())
        if not cookies:
            return None
        return cls(cookies)

    @property
    def values(self) -> RawValues:  # type: ignore[override]
        return tuple(cookie.to_header_value() for cookie in self.cookies)

    def get(self, name: str) -> SetCookie | None:
        """Return the last directive for cookie *name*."""
        for cookie in reversed(self.cookies):
            if cookie.name == name:
                return cookie
        return None
