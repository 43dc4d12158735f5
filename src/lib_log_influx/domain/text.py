"""String helpers shared by the configuration parsers."""

from __future__ import annotations

import re

_QUOTES = ('"', "'")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def unquote(value: str) -> str:
    """Strip one matching pair of surrounding quote characters.

    Examples
    --------
    >>> unquote('"secret"')
    'secret'
    >>> unquote("'autogen'")
    'autogen'
    >>> unquote('"mismatched\\'')
    '"mismatched\\''
    >>> unquote('"')
    '"'
    """

    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def snake_case(name: str) -> str:
    """Normalise a property name such as ``useTLS`` to ``use_tls``.

    Examples
    --------
    >>> snake_case("trustStorePath")
    'trust_store_path'
    >>> snake_case("useTLS")
    'use_tls'
    >>> snake_case("database_name")
    'database_name'
    """

    return _CAMEL_BOUNDARY.sub("_", name.strip()).replace("-", "_").lower()


__all__ = ["snake_case", "unquote"]
