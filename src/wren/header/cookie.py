"""The ``Cookie`` request header.

All values presented in one mutation are parsed together and collapse
into a single canonical line of ``name=value`` pairs joined by ``"; "``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from wren._internal.types import RawValues
from wren.header.base import TypedHeader

logger = logging.getLogger("wren.header")

# Written in place of a missing value, e.g. "One" -> "One=null"
NULL_VALUE = "null"


@dataclass(frozen=True, slots=True)
class Cookie:
    """One ``name=value`` pair from a ``Cookie`` header.

    ``value`` is None when the token carried no ``=``.
    """

    name: str
    value: str | None = None

    def to_header_value(self) -> str:
        value = NULL_VALUE if self.value is None else self.value
        return f"{self.name}={value}"


def parse_cookie_pairs(header: str) -> list[Cookie]:
    """Parse one ``Cookie`` header line into pairs, in order.

    Tokens without ``=`` are kept with a None value, as are values written
    as the ``null`` marker. Empty tokens between separators are skipped.
    """
    cookies: list[Cookie] = []
    for token in header.split(";"):
        token = token.strip()
        if not token:
            continue
        if "=" in token:
            key, _, value = token.partition("=")
            value = value.strip()
            cookies.append(Cookie(key.strip(), None if value == NULL_VALUE else value))
        else:
            logger.debug("Cookie token %r has no value", token)
            cookies.append(Cookie(token))
    return cookies


@dataclass(frozen=True, slots=True)
class CookieHeader(TypedHeader):
    """Parsed ``Cookie`` header: the ordered cookie pairs sent by a client."""

    NAME: ClassVar[str] = "Cookie"
    TAG: ClassVar[str] = "cookie"

    cookies: tuple[Cookie, ...] = ()

    @classmethod
    def from_values(cls, values: Sequence[str]) -> CookieHeader | None:
        cookies = [cookie for value in values for cookie in parse_cookie_pairs(value)]
        if not cookies:
            return None
        return cls(tuple(cookies))

    @property
    def values(self) -> RawValues:  # type: ignore[override]
        return ("; ".join(cookie.to_header_value() for cookie in self.cookies),)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of the last cookie called *name*."""
        for cookie in reversed(self.cookies):
            if cookie.name == name:
                return cookie.value
        return default

    def as_dict(self) -> dict[str, str | None]:
        """Name-value mapping; for duplicate names the last one wins."""
        return {cookie.name: cookie.value for cookie in self.cookies}

    def __len__(self) -> int:
        return len(self.cookies)
