"""Wren exception hierarchy.

Shared across the registry, the header types, and the ``Headers``
container so every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a registry or config is set up incorrectly.

    Typically raised by ``HeaderRegistry.register()`` during process
    initialization, never while a message is being built.
    """


class InvalidHeaderValue(WrenError, TypeError):  # noqa: N818
    """A value handed to ``put``/``add`` has an unsupported shape.

    Accepted shapes are a ``str``, a typed ``Header``, a list or tuple of
    ``str``, or a list or tuple holding exactly one ``Header``.
    """


class InvalidHeaderName(WrenError, ValueError):  # noqa: N818
    """A header name is empty or contains characters outside an HTTP token."""


class UnsupportedHeaderType(WrenError, LookupError):  # noqa: N818
    """``get_typed`` was asked for a tag no registered header type owns.

    Distinct from a registered tag with no stored data, which yields ``None``.
    """

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"No header type registered for tag {tag!r}")


class HeaderTypeError(WrenError):
    """A header type broke its parse/serialize contract."""
