"""Domain event describing one log record handed to the forwarder.

Purpose
-------
Decouple the point schema from :class:`logging.LogRecord` so the delivery
pipeline can be exercised with plain data.

Contents
--------
* :class:`LocationInfo` - optional call-site information.
* :class:`LogEvent` - immutable event consumed by the delivery use case.

System Role
-----------
Produced by :func:`lib_log_influx.adapters.stdlib.event_from_record` and
mapped onto tags and fields by :func:`lib_log_influx.domain.point.build_point`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Sequence


@dataclass(slots=True, frozen=True)
class LocationInfo:
    """Call site of a logging statement."""

    class_name: str
    file_name: str
    line_number: str
    method_name: str


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event read by the delivery pipeline.

    Attributes
    ----------
    timestamp_ms:
        Creation time in milliseconds since the epoch.
    logger_name:
        Name of the emitting logger.
    level:
        String form of the severity (``"INFO"``, ``"ERROR"`` ...).
    message:
        Rendered message.
    thread_name:
        Name of the emitting thread.
    start_time_ms:
        Start of the logging system in milliseconds since the epoch.
    location:
        Optional :class:`LocationInfo`; ``None`` when the caller is unknown.
    ndc:
        Optional nested diagnostic context string.
    throwable:
        Optional trace lines of the error attached to the event.
    """

    timestamp_ms: int
    logger_name: str
    level: str
    message: str
    thread_name: str
    start_time_ms: int
    location: LocationInfo | None = None
    ndc: str | None = None
    throwable: Sequence[str] | None = None

    def __post_init__(self) -> None:
        if self.timestamp_ms < 0:
            raise ValueError("timestamp_ms must not be negative")
        if self.throwable is not None:
            object.__setattr__(self, "throwable", tuple(self.throwable))

    @property
    def throwable_text(self) -> str:
        """Return the trace lines joined with ``", "`` or ``""`` when absent.

        Examples
        --------
        >>> LogEvent(0, "app", "ERROR", "boom", "MainThread", 0, throwable=["a", "b"]).throwable_text
        'a, b'
        >>> LogEvent(0, "app", "INFO", "ok", "MainThread", 0).throwable_text
        ''
        """

        if self.throwable is None:
            return ""
        return ", ".join(self.throwable)

    def replace(self, **changes: Any) -> "LogEvent":
        """Return a copied event with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["LocationInfo", "LogEvent"]
