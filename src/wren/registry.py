"""Header type registry.

Types are registered during process initialization and the registry is
then frozen into read-only lookup tables, safe to share between threads.
"""

import logging
from collections.abc import Iterator
from threading import Lock
from types import MappingProxyType

from wren.errors import ConfigurationError
from wren.header.base import HeaderType, Policy, generic_header_type
from wren.header.connection import ConnectionHeader, ContentEncodingHeader
from wren.header.content_type import ContentTypeHeader
from wren.header.cookie import CookieHeader
from wren.header.set_cookie import SetCookieHeader
from wren.names import HeaderName

logger = logging.getLogger("wren.registry")


class HeaderRegistry:
    """Maps header names and type tags to ``HeaderType`` capabilities.

    Usage::

        registry = HeaderRegistry()
        registry.register("Cookie", HeaderType.of(CookieHeader, Policy.SINGLE))
        registry.freeze()
        registry.by_name("cookie").policy  # Policy.SINGLE
    """

    __slots__ = ("_by_name", "_by_tag", "_frozen")

    def __init__(self) -> None:
        self._by_name: dict[HeaderName, HeaderType] | MappingProxyType[HeaderName, HeaderType] = {}
        self._by_tag: dict[str, HeaderName] | MappingProxyType[str, HeaderName] = {}
        self._frozen = False

    def register(self, name: str, header_type: HeaderType) -> None:
        """Associate *name* with *header_type* and its tag. Must precede freeze()."""
        if self._frozen:
            msg = f"Cannot register {name!r}: registry is frozen."
            raise ConfigurationError(msg)

        key = HeaderName(name)
        if key in self._by_name:
            msg = f"Header {name!r} is already registered."
            raise ConfigurationError(msg)
        tag = header_type.tag
        if tag is not None and tag in self._by_tag:
            msg = f"Tag {tag!r} is already registered for {str(self._by_tag[tag])!r}."
            raise ConfigurationError(msg)

        self._by_name[key] = header_type  # type: ignore[index]
        if tag is not None:
            self._by_tag[tag] = key  # type: ignore[index]
        logger.debug("Registered %s (tag=%s, policy=%s)", name, tag, header_type.policy.value)

    def freeze(self) -> "HeaderRegistry":
        """Make the registry read-only. Idempotent."""
        if not self._frozen:
            self._by_name = MappingProxyType(dict(self._by_name))
            self._by_tag = MappingProxyType(dict(self._by_tag))
            self._frozen = True
            logger.debug("Registry frozen with %d header types", len(self._by_name))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def by_name(self, name: str | HeaderName) -> HeaderType:
        """Return the registered type for *name*, or the generic fallback."""
        key = name if isinstance(name, HeaderName) else HeaderName(name, validate=False)
        header_type = self._by_name.get(key)
        if header_type is None:
            return generic_header_type(str(key))
        return header_type

    def by_tag(self, tag: str) -> tuple[str, HeaderType] | None:
        """Return ``(name, type)`` for *tag*, or None if it was never registered."""
        key = self._by_tag.get(tag)
        if key is None:
            return None
        return str(key), self._by_name[key]

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self._by_tag)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, str):
            name = HeaderName(name, validate=False)
        return name in self._by_name

    def __iter__(self) -> Iterator[str]:
        return (str(key) for key in self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"HeaderRegistry({', '.join(self)}; {state})"


def build_registry() -> HeaderRegistry:
    """Return a new, unfrozen registry holding the built-in header types."""
    registry = HeaderRegistry()
    registry.register(CookieHeader.NAME, HeaderType.of(CookieHeader, Policy.SINGLE))
    registry.register(ConnectionHeader.NAME, HeaderType.of(ConnectionHeader, Policy.MULTI))
    registry.register(SetCookieHeader.NAME, HeaderType.of(SetCookieHeader, Policy.MULTI))
    registry.register(ContentTypeHeader.NAME, HeaderType.of(ContentTypeHeader, Policy.SINGLE))
    registry.register(
        ContentEncodingHeader.NAME, HeaderType.of(ContentEncodingHeader, Policy.MULTI)
    )
    return registry


_default: HeaderRegistry | None = None
_default_lock = Lock()


def default_registry() -> HeaderRegistry:
    """Return the process-wide frozen registry of built-in types."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = build_registry().freeze()
    return _default
