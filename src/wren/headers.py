"""Mutable, case-insensitive, multi-valued HTTP headers.

Implements ``Mapping[str, GenericHeader]`` and the ``MultiValueMapping``
protocol. Stores raw text values per name and normalizes them through
the registered ``HeaderType`` on every mutation: ``Policy.MULTI`` values
are kept line by line, ``Policy.SINGLE`` values are parsed together and
collapsed into one canonical line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence

from wren._internal.multimap import MultiValueMapping
from wren._internal.types import HeaderInput
from wren.config import DEFAULT_CONFIG, HeadersConfig
from wren.errors import InvalidHeaderValue, UnsupportedHeaderType
from wren.header.base import GenericHeader, Header, Policy
from wren.names import HeaderName, display
from wren.registry import HeaderRegistry, default_registry

logger = logging.getLogger("wren.headers")


def flatten(value: object) -> list[str]:
    """Normalize a ``put``/``add`` value into a flat list of raw strings.

    Raises:
        InvalidHeaderValue: *value* is not a str, a Header, a list/tuple of
            str, or a list/tuple holding exactly one Header.
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, Header):
        return list(value.values)
    if isinstance(value, (list, tuple)):
        if all(isinstance(item, str) for item in value):
            return list(value)
        if len(value) == 1 and isinstance(value[0], Header):
            return list(value[0].values)
    msg = (
        "Header value must be a str, a Header, a list of str, or a list "
        f"holding one Header, got {type(value).__name__}"
    )
    raise InvalidHeaderValue(msg)


class Headers(Mapping[str, GenericHeader]):
    """Ordered, case-insensitive header container with typed access.

    ``get`` returns an untyped ``GenericHeader`` snapshot; ``get_typed``
    parses the stored values through the type registered for a tag.
    Insertion order of distinct names is kept, and replacing a name keeps
    its position and first-seen spelling.

    Not thread-safe: a ``Headers`` belongs to one message at a time.
    """

    __slots__ = ("_config", "_data", "_registry")

    def __init__(
        self,
        initial: Mapping[str, HeaderInput] | MultiValueMapping | None = None,
        *,
        registry: HeaderRegistry | None = None,
        config: HeadersConfig | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._config = config if config is not None else DEFAULT_CONFIG
        # lowercased name -> (display name, raw values); values never empty
        self._data: dict[str, tuple[str, list[str]]] = {}
        if initial:
            self.add_all(initial)

    @classmethod
    def from_raw(
        cls,
        raw: Iterable[tuple[bytes, bytes]],
        *,
        registry: HeaderRegistry | None = None,
        config: HeadersConfig | None = None,
    ) -> Headers:
        """Build from ASGI-style ``(name, value)`` byte pairs, in order."""
        headers = cls(registry=registry, config=config)
        for name, value in raw:
            headers.add(name.decode("latin-1"), value.decode("latin-1"))
        return headers

    @property
    def registry(self) -> HeaderRegistry:
        return self._registry

    @property
    def config(self) -> HeadersConfig:
        return self._config

    # -- Names --

    def _name(self, name: str | HeaderName) -> tuple[str, str]:
        """Return ``(lookup key, display name)`` for a name being written."""
        if isinstance(name, HeaderName):
            name = str(name)
        header_name = HeaderName(name, validate=self._config.validate_names)
        return header_name.key, display(str(header_name), self._config.case_mode)

    @staticmethod
    def _lookup(name: object) -> str | None:
        if isinstance(name, HeaderName):
            return name.key
        if isinstance(name, str):
            return name.lower()
        return None

    def _snapshot(self, key: str) -> GenericHeader | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        return GenericHeader(entry[0], tuple(entry[1]))

    # -- Normalization --

    def _store(self, key: str, name: str, values: list[str]) -> None:
        """Store non-empty *values* under the combination policy for *name*."""
        header_type = self._registry.by_name(key)
        if header_type.policy is Policy.SINGLE:
            instance = header_type.parse(values)
            if instance is None:
                if self._data.pop(key, None) is not None:
                    logger.debug("Removed %s: no parseable values", name)
                return
            combined = list(header_type.serialize(instance))
            if len(values) > 1:
                logger.debug("Collapsed %d %s values into one", len(values), name)
            values = combined
        existing = self._data.get(key)
        self._data[key] = (existing[0] if existing else name, values)

    # -- Mutation --

    def put(self, name: str, value: HeaderInput) -> GenericHeader | None:
        """Replace all values for *name*; return the previous generic view.

        An empty sequence removes the entry.

        Raises:
            InvalidHeaderValue: *value* has an unsupported shape.
            InvalidHeaderName: *name* is not a valid field name.
        """
        values = flatten(value)
        key, display_name = self._name(name)
        previous = self._snapshot(key)
        if not values:
            if self._data.pop(key, None) is not None:
                logger.debug("Removed %s", display_name)
            return previous
        self._store(key, display_name, values)
        return previous

    def add(self, header: Header | str, value: HeaderInput | None = None) -> None:
        """Append values, re-normalizing the name's combined values.

        Call as ``add(header)`` with a ``Header`` or ``add(name, value)``.
        ``Policy.SINGLE`` headers re-collapse into one line that reflects the
        old and new data; ``Policy.MULTI`` headers grow.
        """
        if isinstance(header, Header) and value is None:
            name, values = header.name, list(header.values)
        elif isinstance(header, str) and value is not None:
            name, values = header, flatten(value)
        else:
            msg = "add() takes a Header, or a name and a value"
            raise InvalidHeaderValue(msg)
        key, display_name = self._name(name)
        existing = self._data.get(key)
        combined = (list(existing[1]) if existing else []) + values
        if combined:
            self._store(key, display_name, combined)

    def add_all(self, source: Mapping[str, HeaderInput] | MultiValueMapping) -> None:
        """``add`` once per name with that name's full value sequence."""
        for name, value in _entries(source):
            self.add(name, value)

    def put_all(self, source: Mapping[str, HeaderInput] | MultiValueMapping) -> None:
        """``put`` once per name, replacing whatever was stored."""
        for name, value in _entries(source):
            self.put(name, value)

    def remove(self, name: str) -> GenericHeader | None:
        """Remove *name*; return its previous generic view, or None."""
        key = self._lookup(name)
        if key is None:
            return None
        previous = self._snapshot(key)
        self._data.pop(key, None)
        return previous

    def clear(self) -> None:
        self._data.clear()

    # -- Query --

    def get(self, name: str, default: GenericHeader | None = None) -> GenericHeader | None:  # type: ignore[override]
        """Return a generic view of the values for *name*, or *default*."""
        key = self._lookup(name)
        if key is None:
            return default
        snapshot = self._snapshot(key)
        return default if snapshot is None else snapshot

    def get_typed(self, tag: str) -> Header | None:
        """Parse the values stored for the header registered under *tag*.

        Returns None when nothing is stored for that header.

        Raises:
            UnsupportedHeaderType: No header type is registered for *tag*.
        """
        entry = self._registry.by_tag(tag)
        if entry is None:
            raise UnsupportedHeaderType(tag)
        name, header_type = entry
        values = self.get_list(name)
        if not values:
            return None
        return header_type.parse(values)

    def get_list(self, key: str) -> list[str]:
        """Return all raw values for *key* (empty list if missing)."""
        lookup = self._lookup(key)
        entry = self._data.get(lookup) if lookup is not None else None
        return list(entry[1]) if entry else []

    def items_raw(self) -> list[tuple[str, str]]:
        """One ``(name, value)`` pair per stored line, in order."""
        return [(name, value) for name, values in self._data.values() for value in values]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Stored lines as latin-1 byte pairs for ASGI compatibility."""
        return tuple(
            (name.encode("latin-1"), value.encode("latin-1")) for name, value in self.items_raw()
        )

    def copy(self) -> Headers:
        """Return an independent copy sharing the registry and config."""
        clone = type(self)(registry=self._registry, config=self._config)
        clone._data = {key: (name, list(values)) for key, (name, values) in self._data.items()}
        return clone

    # -- Mapping protocol --

    def __getitem__(self, key: str) -> GenericHeader:
        snapshot = self.get(key)
        if snapshot is None:
            raise KeyError(key)
        return snapshot

    def __setitem__(self, key: str, value: HeaderInput) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if self.remove(key) is None:
            raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        lookup = self._lookup(key)
        return lookup is not None and lookup in self._data

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return {k: v for k, (_, v) in self._data.items()} == {
            k: v for k, (_, v) in other._data.items()
        }

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {values!r}" for name, values in self._data.values())
        return f"Headers({{{items}}})"


def _entries(
    source: Mapping[str, HeaderInput] | MultiValueMapping,
) -> Iterator[tuple[str, Sequence[str] | HeaderInput]]:
    if isinstance(source, MultiValueMapping):
        for name in source:
            yield name, source.get_list(name)
    elif isinstance(source, Mapping):
        yield from source.items()
    else:
        msg = f"Expected a mapping of header names to values, got {type(source).__name__}"
        raise InvalidHeaderValue(msg)
