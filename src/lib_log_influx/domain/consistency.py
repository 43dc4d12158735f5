"""Write consistency levels accepted by the InfluxDB write endpoint.

Purpose
-------
Give the configuration layer a closed set of acknowledgement requirements so
an unsupported value is rejected while the handler is being configured rather
than when the first point is written.

Contents
--------
* :class:`ConsistencyLevel` enum with parsing and wire helpers.

System Role
-----------
Validated by :class:`lib_log_influx.domain.settings.ForwarderConfig` and
translated to the client's ``consistency`` argument by the InfluxDB adapter.
"""

from __future__ import annotations

from enum import Enum

from .errors import ConfigurationError
from .text import unquote


class ConsistencyLevel(Enum):
    """Acknowledgement requirement for a write across backend replicas."""

    ALL = "all"
    ANY = "any"
    ONE = "one"
    QUORUM = "quorum"

    @property
    def wire_value(self) -> str:
        """Return the lowercase token expected by the ``/write`` endpoint."""

        return self.value

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return the supported level names in declaration order."""

        return tuple(member.name for member in cls)

    @classmethod
    def from_name(cls, name: str) -> "ConsistencyLevel":
        """Parse ``name`` (optionally quoted, case-insensitive) into a level.

        Examples
        --------
        >>> ConsistencyLevel.from_name('"quorum"')
        <ConsistencyLevel.QUORUM: 'quorum'>
        >>> ConsistencyLevel.from_name("QIORUM")
        Traceback (most recent call last):
        ...
        lib_log_influx.domain.errors.ConfigurationError: Consistency level 'QIORUM' wasn't found. Available levels: ALL, ANY, ONE, QUORUM
        """

        normalized = unquote(name).strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ConfigurationError(
                f"Consistency level {name!r} wasn't found. Available levels: {', '.join(cls.names())}"
            ) from exc

    @classmethod
    def coerce(cls, value: "ConsistencyLevel | str") -> "ConsistencyLevel":
        """Return ``value`` unchanged when already a level, else parse it."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ConfigurationError(
                f"Consistency level must be a string, got {type(value).__name__}. Available levels: {', '.join(cls.names())}"
            )
        return cls.from_name(value)


__all__ = ["ConsistencyLevel"]
