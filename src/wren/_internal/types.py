"""Shared type aliases used across wren modules."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from wren.header.base import Header

# Ordered raw text values stored for one header name
RawValues: TypeAlias = tuple[str, ...]

# Accepted by Headers.put/add: text, a typed header, or a sequence of either
HeaderInput: TypeAlias = "str | Header | Sequence[str | Header]"
