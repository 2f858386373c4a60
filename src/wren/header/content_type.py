"""The ``Content-Type`` header: a media type plus ordered parameters."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from wren._internal.types import RawValues
from wren.header.base import TypedHeader

logger = logging.getLogger("wren.header")


@dataclass(frozen=True, slots=True)
class ContentTypeHeader(TypedHeader):
    """Parsed ``Content-Type``.

    ``params`` keeps parameters in their original order. A parameter
    written without ``=`` is kept with a None value and written back bare.
    Quoted parameter values are not supported: a ``;`` inside quotes is
    treated as a separator.
    """

    NAME: ClassVar[str] = "Content-Type"
    TAG: ClassVar[str] = "content-type"

    media_type: str
    params: tuple[tuple[str, str | None], ...] = ()

    @classmethod
    def parse(cls, header: str) -> ContentTypeHeader:
        media_type, *raw_params = header.split(";")
        params: list[tuple[str, str | None]] = []
        for param in raw_params:
            param = param.strip()
            if not param:
                continue
            if "=" in param:
                key, _, value = param.partition("=")
                params.append((key.strip(), value.strip()))
            else:
                logger.debug("Content-Type parameter %r has no value", param)
                params.append((param, None))
        return cls(media_type.strip(), tuple(params))

    @classmethod
    def from_values(cls, values: Sequence[str]) -> ContentTypeHeader | None:
        present = [value for value in values if value.strip()]
        if not present:
            return None
        if len(present) > 1:
            logger.debug("Content-Type has %d values, using the last", len(present))
        return cls.parse(present[-1])

    @property
    def values(self) -> RawValues:  # type: ignore[override]
        parts = [self.media_type]
        for key, value in self.params:
            parts.append(key if value is None else f"{key}={value}")
        return ("; ".join(parts),)

    @property
    def charset(self) -> str | None:
        return self.param("charset")

    def param(self, name: str) -> str | None:
        """Case-insensitive parameter lookup."""
        name = name.lower()
        for key, value in self.params:
            if key.lower() == name:
                return value
        return None
