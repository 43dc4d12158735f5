"""Delivery use cases turning one log event into one written point.

Purpose
-------
Probe the backend, build the point and write it synchronously on the
caller's thread, translating every failure into a reported, dropped event.

Contents
--------
* :data:`NOT_READY_VERSIONS` - probe answers treated as "backend not ready".
* :func:`create_probe` - factory returning the health-probe callable.
* :func:`create_deliver` - factory returning the delivery callable.

System Role
-----------
Point-delivery half of the pipeline, invoked by
:meth:`lib_log_influx.runtime.Forwarder.deliver` for every handled record.
There is no queue, buffer or retry: a failed event is gone.
"""

from __future__ import annotations

import logging

from lib_log_influx.application.ports import ErrorReporterPort
from lib_log_influx.domain.events import LogEvent
from lib_log_influx.domain.identity import ProcessIdentity
from lib_log_influx.domain.point import build_point
from lib_log_influx.domain.settings import ForwarderConfig

from ._types import ConnectionHandle, DeliverCallable, DeliveryResult, ProbeCallable

logger = logging.getLogger(__name__)

NOT_READY_VERSIONS = frozenset({"", "unknown"})


def create_probe(*, reporter: ErrorReporterPort) -> ProbeCallable:
    """Build the health probe run before every write.

    A probe that raises is reported (``probe_failed``); an empty or
    ``"unknown"`` version is a quiet ``backend_not_ready``.

    Examples
    --------
    >>> class Client:
    ...     def ping(self): return "unknown"
    >>> probe = create_probe(reporter=None)
    >>> probe(ConnectionHandle(client=Client(), url="http://localhost:8086"))
    {'ok': False, 'reason': 'backend_not_ready', 'version': 'unknown'}
    >>> probe(None)
    {'ok': False, 'reason': 'not_activated'}
    """

    def probe(handle: ConnectionHandle | None) -> DeliveryResult:
        if handle is None:
            return {"ok": False, "reason": "not_activated"}
        try:
            version = handle.client.ping()
        except Exception as exc:
            reporter.report(f"Error probing InfluxDB logging database at {handle.url}: {exc}")
            return {"ok": False, "reason": "probe_failed"}
        version = (version or "").strip()
        if version in NOT_READY_VERSIONS:
            return {"ok": False, "reason": "backend_not_ready", "version": version}
        return {"ok": True, "version": version}

    return probe


def create_deliver(*, identity: ProcessIdentity, reporter: ErrorReporterPort) -> DeliverCallable:
    """Build the delivery callable.

    Why
    ---
    The process identity is resolved once by the composition root; freezing
    it here keeps per-event work free of host lookups.

    Parameters
    ----------
    identity:
        Host address and name attached as tags to every point.
    reporter:
        Receives probe and write failures.

    Returns
    -------
    Callable[[ConnectionHandle | None, LogEvent, ForwarderConfig], DeliveryResult]
        ``{"ok": True, "version": ...}`` after a successful write, otherwise
        ``{"ok": False, "reason": ...}`` with one of ``not_activated``,
        ``probe_failed``, ``backend_not_ready`` or ``write_failed``.

    Examples
    --------
    >>> deliver = create_deliver(identity=ProcessIdentity(), reporter=None)
    >>> event = LogEvent(0, "app", "INFO", "hello", "MainThread", 0)
    >>> deliver(None, event, ForwarderConfig())
    {'ok': False, 'reason': 'not_activated'}
    """

    probe = create_probe(reporter=reporter)

    def deliver(handle: ConnectionHandle | None, event: LogEvent, config: ForwarderConfig) -> DeliveryResult:
        status = probe(handle)
        if not status["ok"] or handle is None:
            if status.get("reason") == "backend_not_ready":
                logger.debug("Dropped event of %s: backend reported no version", event.logger_name)
            return status
        version = status.get("version", "")

        point = build_point(
            event,
            measurement=config.measurement_name,
            application_name=config.application_name,
            identity=identity,
        )
        try:
            handle.client.write_point(
                point,
                database=config.database_name,
                retention_policy=config.retention_policy,
                consistency=config.write_consistency_level,
            )
        except Exception as exc:
            reporter.report(f"Error writing point to InfluxDB logging database at {handle.url}: {exc}")
            return {"ok": False, "reason": "write_failed", "version": version}
        return {"ok": True, "version": version}

    return deliver


__all__ = ["NOT_READY_VERSIONS", "create_deliver", "create_probe"]
