"""Header base classes and the ``HeaderType`` capability.

A ``HeaderType`` bundles what the ``Headers`` container needs to know
about one kind of header: how to parse raw values into a typed instance,
how to turn it back into raw values, and whether values presented
together collapse into one line (``Policy.SINGLE``) or stay independent
(``Policy.MULTI``).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import ClassVar

from wren._internal.types import RawValues
from wren.errors import HeaderTypeError


class Policy(Enum):
    """How values presented in one mutation are combined."""

    MULTI = "multi"
    SINGLE = "single"


class Header:
    """Base for every header value the container hands out or accepts.

    Subclasses expose ``name`` (the header field name) and ``values``
    (the raw text lines the header serializes to).
    """

    __slots__ = ()

    name: str
    values: RawValues


@dataclass(frozen=True, slots=True)
class GenericHeader(Header):
    """Untyped, read-only view over the raw values stored for one name.

    Returned by ``Headers.get``; also usable as input to ``put``/``add``.
    """

    name: str
    values: RawValues = ()

    def __post_init__(self) -> None:
        if isinstance(self.values, str):
            object.__setattr__(self, "values", (self.values,))
        else:
            object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def from_values(cls, name: str, values: Sequence[str]) -> GenericHeader | None:
        if not values:
            return None
        return cls(name, tuple(values))

    @property
    def first(self) -> str | None:
        """The first raw value, or None."""
        return self.values[0] if self.values else None


class TypedHeader(Header):
    """Base for registered header kinds with a fixed field name and tag."""

    __slots__ = ()

    NAME: ClassVar[str]
    TAG: ClassVar[str]

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.NAME

    @classmethod
    def from_values(cls, values: Sequence[str]) -> TypedHeader | None:
        """Parse raw values. Return None when nothing parseable is present."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class HeaderType:
    """Parse/serialize/policy capability for one header kind. Stateless."""

    factory: Callable[[RawValues], Header | None]
    policy: Policy = Policy.MULTI
    tag: str | None = None

    @classmethod
    def of(cls, header_class: type[TypedHeader], policy: Policy) -> HeaderType:
        """Build the type for a ``TypedHeader`` subclass."""
        return cls(factory=header_class.from_values, policy=policy, tag=header_class.TAG)

    def parse(self, values: Sequence[str]) -> Header | None:
        """Return a header instance, or None for empty input."""
        raw = tuple(values)
        if not raw:
            return None
        return self.factory(raw)

    def serialize(self, header: Header) -> RawValues:
        """Return the raw values for *header*.

        Raises:
            HeaderTypeError: A SINGLE type produced anything but one value.
        """
        raw = tuple(header.values)
        if self.policy is Policy.SINGLE and len(raw) != 1:
            msg = (
                f"{type(header).__name__} must serialize to exactly one value, "
                f"got {len(raw)}"
            )
            raise HeaderTypeError(msg)
        return raw


def generic_header_type(name: str) -> HeaderType:
    """The pass-through type used for names without a registration."""
    return HeaderType(factory=partial(GenericHeader.from_values, name), policy=Policy.MULTI)
