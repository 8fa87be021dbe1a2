"""
Error types raised by the catalog store and services.

Lookups that match nothing are not errors: services return ``None``
(or an empty list) and the gateway renders it as ``null``.  The
exceptions below cover requests that name something outside a fixed
key set, such as an attack bucket other than ``fast``/``special`` or a
field the edit mutations do not know about.
"""

from typing import Iterable


class PokedexError(Exception):
    """Base class for catalog errors surfaced to API clients."""

    code = "POKEDEX_ERROR"


class InvalidKeyError(PokedexError):
    """Raised when a bucket or field name is not in its allowed set."""

    code = "INVALID_KEY"

    def __init__(self, kind: str, key: object, allowed: Iterable[str]) -> None:
        self.kind = kind
        self.key = key
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid {kind} {key!r}; expected one of: {', '.join(self.allowed)}"
        )
