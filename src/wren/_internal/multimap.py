"""MultiValueMapping protocol — shared interface for multi-valued sources.

A structural protocol so ``Headers.add_all``/``put_all`` can accept any
multi-valued mapping (another ``Headers``, a framework's request headers,
parsed query parameters) without coupling to the concrete type.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A string-keyed mapping where keys can have multiple values.

    ``__iter__`` yields each distinct key once.
    ``get_list`` returns all values for a key.
    """

    def __iter__(self) -> Iterator[str]: ...
    def get_list(self, key: str) -> list[str]: ...
