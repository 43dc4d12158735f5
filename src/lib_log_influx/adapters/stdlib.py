"""Bridge from :class:`logging.LogRecord` to :class:`LogEvent`.

Purpose
-------
Read everything the point schema needs from a standard-library record:
timestamp, level name, rendered message, call site, nested diagnostic
context, thread and formatted traceback.

Contents
--------
* :func:`event_from_record` - the conversion used by the handler.

System Role
-----------
Keeps :mod:`logging` specifics out of the domain; the handler calls it once
per emitted record.
"""

from __future__ import annotations

import logging
import traceback
from typing import Sequence

from lib_log_influx.domain.events import LocationInfo, LogEvent
from lib_log_influx.domain.ndc import NDC, NestedDiagnosticContext

_UNKNOWN_FILE = "(unknown file)"


def _location(record: logging.LogRecord) -> LocationInfo | None:
    if not record.pathname or record.pathname == _UNKNOWN_FILE:
        return None
    return LocationInfo(
        class_name=record.module,
        file_name=record.filename,
        line_number=str(record.lineno),
        method_name=record.funcName or "",
    )


def _throwable(record: logging.LogRecord) -> Sequence[str] | None:
    if record.exc_info and record.exc_info[0] is not None:
        chunks = traceback.format_exception(*record.exc_info)
        return tuple(line for chunk in chunks for line in chunk.rstrip("\n").splitlines())
    if record.exc_text:
        return tuple(record.exc_text.splitlines())
    return None


def _ndc(record: logging.LogRecord, context: NestedDiagnosticContext) -> str | None:
    value = getattr(record, "ndc", None)
    if value is None:
        return context.get()
    return str(value)


def event_from_record(record: logging.LogRecord, *, ndc: NestedDiagnosticContext = NDC) -> LogEvent:
    """Convert ``record`` into a :class:`LogEvent`.

    Examples
    --------
    >>> record = logging.LogRecord("app.db", logging.WARNING, "/srv/app/repo.py", 42, "slow %s", ("query",), None, func="fetch")
    >>> event = event_from_record(record)
    >>> event.level, event.message, event.location.line_number, event.location.class_name
    ('WARNING', 'slow query', '42', 'repo')
    >>> event.ndc is None, event.throwable is None
    (True, True)
    """

    created_ms = record.created * 1000
    return LogEvent(
        timestamp_ms=int(created_ms),
        logger_name=record.name,
        level=record.levelname,
        message=record.getMessage(),
        thread_name=record.threadName or "",
        start_time_ms=round(created_ms - record.relativeCreated),
        location=_location(record),
        ndc=_ndc(record, ndc),
        throwable=_throwable(record),
    )


__all__ = ["event_from_record"]
