"""Ports describing the time-series backend client.

Purpose
-------
Treat the InfluxDB client as an opaque capability (ping, list/create
database, write a point) so use cases can be tested with in-memory fakes.

Contents
--------
* :class:`TimeSeriesClientPort` - operations used after connecting.
* :class:`ClientFactoryPort` - builds a connected client from configuration.
* :class:`TrustStoreLoaderPort` - turns a trust-store path into a TLS context.

System Role
-----------
Implemented by :mod:`lib_log_influx.adapters.influxdb` and
:mod:`lib_log_influx.adapters.tls`; consumed by the activation and delivery
use cases.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_influx.domain.consistency import ConsistencyLevel
from lib_log_influx.domain.point import DataPoint
from lib_log_influx.domain.settings import ForwarderConfig

from .trust import TrustStore


@runtime_checkable
class TimeSeriesClientPort(Protocol):
    """Connected client for a time-series backend."""

    def ping(self) -> str:
        """Return the backend version; empty when the backend is not ready."""

    def list_databases(self) -> list[str]:
        """Return the names of the existing databases."""

    def create_database(self, name: str) -> None:
        """Create database ``name``."""

    def close(self) -> None:
        """Release the transport resources of the client."""

    def write_point(
        self,
        point: DataPoint,
        *,
        database: str,
        retention_policy: str,
        consistency: ConsistencyLevel,
    ) -> None:
        """Write ``point`` synchronously, raising on failure."""


@runtime_checkable
class ClientFactoryPort(Protocol):
    """Build a :class:`TimeSeriesClientPort` for ``config``."""

    def __call__(self, config: ForwarderConfig, trust_store: TrustStore | None) -> TimeSeriesClientPort: ...


@runtime_checkable
class TrustStoreLoaderPort(Protocol):
    """Load trust anchors from a store file, raising when it is unusable."""

    def __call__(self, path: str) -> TrustStore: ...


__all__ = ["ClientFactoryPort", "TimeSeriesClientPort", "TrustStoreLoaderPort"]
