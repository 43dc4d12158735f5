"""Shutdown orchestration for the forwarder.

Purpose
-------
Discard the connection handle so later deliveries become no-ops and close
the client transport. There is nothing to flush: points are never buffered.
"""

from __future__ import annotations

from typing import Callable, Protocol

from lib_log_influx.application.ports import ErrorReporterPort

from ._types import ConnectionHandle


class HandleHolder(Protocol):
    """Owner of the connection handle (see :class:`ConnectionState`)."""

    def clear(self) -> ConnectionHandle | None: ...


def create_shutdown(*, holder: HandleHolder, reporter: ErrorReporterPort) -> Callable[[], None]:
    """Return a callable performing the (idempotent) shutdown sequence.

    Examples
    --------
    >>> class Holder:
    ...     def clear(self): return None
    >>> create_shutdown(holder=Holder(), reporter=None)() is None
    True
    """

    def shutdown() -> None:
        handle = holder.clear()
        if handle is None:
            return
        try:
            handle.client.close()
        except Exception as exc:
            reporter.report(f"Error closing InfluxDB connection at {handle.url}: {exc}")

    return shutdown


__all__ = ["HandleHolder", "create_shutdown"]
