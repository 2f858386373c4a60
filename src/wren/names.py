"""Case-insensitive header names.

``HeaderName`` is the lookup key of the ``Headers`` container: equality
and hashing ignore case, while the spelling it was created with is kept
for display and wire output.
"""

import re

from wren.errors import InvalidHeaderName

# RFC 9110 §5.6.2 token
_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# Common header casing overrides for non-trivial capitalization
_SPECIAL_CASES: dict[str, str] = {
    "www-authenticate": "WWW-Authenticate",
    "etag": "ETag",
    "dnt": "DNT",
    "te": "TE",
}


def is_token(name: str) -> bool:
    """Return True if *name* is a valid HTTP field-name token."""
    return _TOKEN_RE.fullmatch(name) is not None


def canonicalize(name: str) -> str:
    """Return a canonical HTTP-style header name.

    Examples:
    - "content-type" -> "Content-Type"
    - "x-request-id" -> "X-Request-Id"
    - Applies overrides for known special cases like "ETag".
    """
    key = name.lower()
    if key in _SPECIAL_CASES:
        return _SPECIAL_CASES[key]
    return "-".join(part.capitalize() for part in key.split("-"))


def display(name: str, case_mode: str) -> str:
    """Apply a ``HeadersConfig.case_mode`` to *name*."""
    if case_mode == "lower":
        return name.lower()
    if case_mode == "canonical":
        return canonicalize(name)
    return name


class HeaderName:
    """Immutable, case-insensitive header name.

    Compares equal to other ``HeaderName`` instances regardless of case.
    ``str(name)`` returns the original spelling.
    """

    __slots__ = ("_key", "_name")

    _key: str
    _name: str

    def __init__(self, name: str, *, validate: bool = True) -> None:
        if not isinstance(name, str):
            msg = f"Header name must be a str, got {type(name).__name__}"
            raise InvalidHeaderName(msg)
        if validate and not is_token(name):
            msg = f"Invalid header name: {name!r}"
            raise InvalidHeaderName(msg)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_key", name.lower())

    def __setattr__(self, key: str, value: object) -> None:
        msg = "HeaderName is immutable"
        raise AttributeError(msg)

    @property
    def key(self) -> str:
        """The lowercased lookup key."""
        return self._key

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderName):
            return self._key == other._key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)

    def __lt__(self, other: "HeaderName") -> bool:
        if not isinstance(other, HeaderName):
            return NotImplemented
        return self._key < other._key

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"HeaderName({self._name!r})"
