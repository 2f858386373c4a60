"""Comma-separated token list headers: ``Connection`` and ``Content-Encoding``.

Each raw value may carry several comma-separated tokens. Every token is
exposed as an independent value so the container stores them line by line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar, Self

from wren._internal.types import RawValues
from wren.header.base import TypedHeader


def split_tokens(values: Sequence[str]) -> tuple[str, ...]:
    """Split comma-separated list values into stripped tokens.

    Empty list elements (``"a, , b"``) carry no token and are skipped.
    """
    return tuple(
        token
        for value in values
        for token in (part.strip() for part in value.split(","))
        if token
    )


@dataclass(frozen=True, slots=True)
class _TokenListHeader(TypedHeader):
    tokens: tuple[str, ...] = ()

    @classmethod
    def from_values(cls, values: Sequence[str]) -> Self | None:
        tokens = split_tokens(values)
        if not tokens:
            return None
        return cls(tokens)

    @property
    def values(self) -> RawValues:  # type: ignore[override]
        return self.tokens

    def has(self, token: str) -> bool:
        """Case-insensitive membership test."""
        token = token.lower()
        return any(t.lower() == token for t in self.tokens)


@dataclass(frozen=True, slots=True)
class ConnectionHeader(_TokenListHeader):
    """Parsed ``Connection`` header: hop-by-hop options such as ``close``."""

    NAME: ClassVar[str] = "Connection"
    TAG: ClassVar[str] = "connection"

    @property
    def close(self) -> bool:
        return self.has("close")

    @property
    def keep_alive(self) -> bool:
        return self.has("keep-alive")


@dataclass(frozen=True, slots=True)
class ContentEncodingHeader(_TokenListHeader):
    """Parsed ``Content-Encoding`` header, codings in the order applied."""

    NAME: ClassVar[str] = "Content-Encoding"
    TAG: ClassVar[str] = "content-encoding"
