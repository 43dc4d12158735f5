"""Result and handle types shared by the use cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypedDict

from lib_log_influx.application.ports.backend import TimeSeriesClientPort
from lib_log_influx.domain.events import LogEvent
from lib_log_influx.domain.settings import ForwarderConfig


@dataclass(slots=True, frozen=True)
class ConnectionHandle:
    """Live backend client together with the URL it was built for."""

    client: TimeSeriesClientPort
    url: str


class _ActivationRequired(TypedDict):
    ok: bool
    handle: ConnectionHandle | None


class ActivationResult(_ActivationRequired, total=False):
    reason: str
    created_database: bool


class _DeliveryRequired(TypedDict):
    ok: bool


class DeliveryResult(_DeliveryRequired, total=False):
    reason: str
    version: str


ActivateCallable = Callable[[ForwarderConfig], ActivationResult]
DeliverCallable = Callable[[ConnectionHandle | None, LogEvent, ForwarderConfig], DeliveryResult]
ProbeCallable = Callable[[ConnectionHandle | None], DeliveryResult]


__all__ = [
    "ActivateCallable",
    "ActivationResult",
    "ConnectionHandle",
    "DeliverCallable",
    "DeliveryResult",
    "ProbeCallable",
]
