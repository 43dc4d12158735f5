"""Forward standard-library logging records to InfluxDB 1.x.

Each record handled by :class:`InfluxDBHandler` is written synchronously as
one point tagged with host, application, logger and level. Backend failures
are reported on stderr and never raised into the application.
"""

from __future__ import annotations

from .adapters.reporter import RichErrorReporter
from .domain import (
    NDC,
    ConfigurationError,
    ConsistencyLevel,
    ForwarderConfig,
    LogEvent,
    NestedDiagnosticContext,
    ProcessIdentity,
)
from .handler import InfluxDBHandler
from .runtime import Forwarder, ForwarderSnapshot, ForwarderState, build_forwarder, process_identity

__all__ = [
    "ConfigurationError",
    "ConsistencyLevel",
    "Forwarder",
    "ForwarderConfig",
    "ForwarderSnapshot",
    "ForwarderState",
    "InfluxDBHandler",
    "LogEvent",
    "NDC",
    "NestedDiagnosticContext",
    "ProcessIdentity",
    "RichErrorReporter",
    "build_forwarder",
    "process_identity",
]
