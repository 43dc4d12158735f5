"""Adapters implementing the application ports."""

from __future__ import annotations

from .identity import lookup_process_identity, resolve_process_identity
from .influxdb import InfluxDBClientAdapter, create_influxdb_client
from .reporter import RichErrorReporter
from .stdlib import event_from_record
from .tls import PinnedTrustAdapter, build_pinned_session, load_trust_store

__all__ = [
    "InfluxDBClientAdapter",
    "PinnedTrustAdapter",
    "RichErrorReporter",
    "build_pinned_session",
    "create_influxdb_client",
    "event_from_record",
    "load_trust_store",
    "lookup_process_identity",
    "resolve_process_identity",
]
