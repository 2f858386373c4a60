"""Wren — typed, case-insensitive, multi-valued HTTP headers.

Reconciles raw header lines with typed header values, applying each
header kind's combination rule on every mutation.

Basic usage::

    from wren import Headers

    headers = Headers()
    headers.put("Cookie", ["session=abc", "theme=dark"])
    headers.get("cookie").values  # ("session=abc; theme=dark",)
    headers.get_typed("cookie").get("theme")  # "dark"

Custom header types::

    from wren import HeaderRegistry, HeaderType, Policy

    registry = HeaderRegistry()
    registry.register("X-Trace", HeaderType.of(TraceHeader, Policy.SINGLE))
    headers = Headers(registry=registry.freeze())
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "GenericHeader",
    "Header",
    "HeaderName",
    "HeaderRegistry",
    "HeaderType",
    "HeaderTypeError",
    "Headers",
    "HeadersConfig",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "Policy",
    "UnsupportedHeaderType",
    "WrenError",
    "default_registry",
]


# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "wren.errors",
    "GenericHeader": "wren.header.base",
    "Header": "wren.header.base",
    "HeaderName": "wren.names",
    "HeaderRegistry": "wren.registry",
    "HeaderType": "wren.header.base",
    "HeaderTypeError": "wren.errors",
    "Headers": "wren.headers",
    "HeadersConfig": "wren.config",
    "InvalidHeaderName": "wren.errors",
    "InvalidHeaderValue": "wren.errors",
    "Policy": "wren.header.base",
    "UnsupportedHeaderType": "wren.errors",
    "WrenError": "wren.errors",
    "default_registry": "wren.registry",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    from importlib import import_module

    return getattr(import_module(module_name), name)
