"""InfluxDB 1.x client adapter implementing :class:`TimeSeriesClientPort`.

Purpose
-------
Wrap :class:`influxdb.InfluxDBClient` so the use cases only see the small
capability they need: ping, list and create databases, write one point.

Contents
--------
* :class:`InfluxDBClientAdapter` - port implementation over a live client.
* :func:`create_influxdb_client` - :class:`ClientFactoryPort` implementation.

System Role
-----------
Default client factory installed by
:func:`lib_log_influx.runtime.build_forwarder`.
"""

from __future__ import annotations

import logging

from influxdb import InfluxDBClient

from lib_log_influx.application.ports import TimeSeriesClientPort, TrustStore
from lib_log_influx.domain.consistency import ConsistencyLevel
from lib_log_influx.domain.point import TIME_PRECISION, DataPoint
from lib_log_influx.domain.settings import ForwarderConfig

from .tls import build_pinned_session

logger = logging.getLogger(__name__)

_VERSION_HEADER_MISSING = ""


class InfluxDBClientAdapter(TimeSeriesClientPort):
    """Expose an :class:`InfluxDBClient` through :class:`TimeSeriesClientPort`."""

    def __init__(self, client: InfluxDBClient) -> None:
        self._client = client

    def ping(self) -> str:
        """Return the ``X-Influxdb-Version`` header or ``""`` when absent."""
        try:
            return self._client.ping() or _VERSION_HEADER_MISSING
        except KeyError:
            return _VERSION_HEADER_MISSING

    def list_databases(self) -> list[str]:
        return [entry["name"] for entry in self._client.get_list_database()]

    def create_database(self, name: str) -> None:
        self._client.create_database(name)

    def close(self) -> None:
        self._client.close()

    def write_point(
        self,
        point: DataPoint,
        *,
        database: str,
        retention_policy: str,
        consistency: ConsistencyLevel,
    ) -> None:
        self._client.write_points(
            [point.to_dict()],
            time_precision=TIME_PRECISION,
            database=database,
            retention_policy=retention_policy,
            consistency=consistency.wire_value,
        )


def create_influxdb_client(config: ForwarderConfig, trust_store: TrustStore | None = None) -> InfluxDBClientAdapter:
    """Build a client for ``config`` that performs a single attempt per request.

    With TLS enabled and a loaded ``trust_store`` the requests session is
    pinned to the store; without a store the default certificate
    verification of ``requests`` applies.
    """

    session = None
    verify: bool | str = False
    if config.use_tls:
        if trust_store is not None:
            session = build_pinned_session(config.connect_url, trust_store)
            verify = trust_store.path
        else:
            verify = True

    logger.debug("Connecting to InfluxDB at %s as %s", config.connect_url, config.username)
    client = InfluxDBClient(
        host=config.host,
        port=config.port,
        username=config.username,
        password=config.password,
        database=config.database_name,
        ssl=config.use_tls,
        verify_ssl=verify,
        timeout=config.timeout,
        retries=1,
        session=session,
    )
    return InfluxDBClientAdapter(client)


__all__ = ["InfluxDBClientAdapter", "create_influxdb_client"]
